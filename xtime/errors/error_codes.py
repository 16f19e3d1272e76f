"""
Central registry of error codes for xtime.

Error codes follow the pattern: CATEGORY-ErrorName

Categories:
- PARSE: Turning an input value into an Instant
- LOCATION: Timezone lookup and configuration
- INSTANT: Values that carry no calendar fields

Usage:
    from xtime.errors.error_codes import ErrorCodes

    raise ParseError(
        message="Cannot parse '2020/01/01'",
        error_code=ErrorCodes.PARSE_INVALID_LAYOUT,
        ...
    )
"""


class ErrorCodes:
    """Central registry of error codes for consistent error handling."""

    # Parse errors
    PARSE_INVALID_LAYOUT = "PARSE-InvalidLayout"
    PARSE_OUT_OF_RANGE = "PARSE-OutOfRange"
    PARSE_UNSUPPORTED_TYPE = "PARSE-UnsupportedType"

    # Location errors
    LOCATION_UNKNOWN = "LOCATION-Unknown"

    # Instant errors
    INSTANT_NOT_A_TIME = "INSTANT-NotATime"
