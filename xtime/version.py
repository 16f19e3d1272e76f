"""
Version management for xtime.

The version is read from pyproject.toml, which serves as the single source
of truth. Installed copies without the file fall back to the package
metadata and finally to a constant.
"""

from importlib import metadata as importlib_metadata
from pathlib import Path

import tomli

_FALLBACK_VERSION = "0.1.0"


def _find_project_root() -> Path:
    """
    Find the directory containing pyproject.toml.

    Returns:
        Path: The project root, or the package parent when none is found
    """
    file_path = Path(__file__).resolve()
    for candidate in (file_path.parent.parent, Path.cwd()):
        if (candidate / "pyproject.toml").exists():
            return candidate
    return file_path.parent.parent


PROJECT_ROOT = _find_project_root()
PYPROJECT_PATH = PROJECT_ROOT / "pyproject.toml"


def get_version_from_pyproject() -> str:
    """
    Read the version string from pyproject.toml.

    Returns:
        str: Version string in the format "x.y.z"
    """
    try:
        with open(PYPROJECT_PATH, "rb") as f:
            pyproject_data = tomli.load(f)
        if pyproject_data["project"]["name"] == "xtime":
            return pyproject_data["project"]["version"]
    except (FileNotFoundError, KeyError, tomli.TOMLDecodeError):
        pass

    try:
        return importlib_metadata.version("xtime")
    except importlib_metadata.PackageNotFoundError:
        return _FALLBACK_VERSION


# The package version, loaded from pyproject.toml
__version__ = get_version_from_pyproject()


def get_version() -> str:
    """
    Get the current version of the xtime package.

    Returns:
        str: Current version string
    """
    return __version__
