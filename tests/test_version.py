"""
Tests to verify the package version.
"""

from xtime.version import __version__, get_version


class TestVersionSource:
    """Verify version is accessible from the package."""

    def test_version_is_string(self) -> None:
        """Version should be a non-empty string."""
        assert isinstance(__version__, str)
        assert len(__version__) > 0

    def test_version_format(self) -> None:
        """Version should have semantic version format with numeric core (x.y.z)."""
        parts = __version__.split(".")
        assert len(parts) >= 3, f"Version {__version__} should have at least 3 parts"
        for part in parts[:3]:
            assert part.isdigit(), f"Core version part {part} should be numeric"

    def test_get_version_function(self) -> None:
        """get_version() should return the same as __version__."""
        assert get_version() == __version__

    def test_version_accessible_from_package(self) -> None:
        """Version should be accessible from the main package."""
        import xtime

        assert xtime.__version__ == __version__
