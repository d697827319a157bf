"""Status enums and error codes."""

from enum import Enum


class ConversionStatus(str, Enum):
    """Outcome of a single conversion step."""

    SUCCESS = "SUCCESS"
    SKIPPED = "SKIPPED"  # Step did not run or produced nothing usable, not an error
    FAILED = "FAILED"


class ErrorCode(str, Enum):
    """Machine-readable error codes."""

    TOOL_MISSING = "TOOL_MISSING"
    ENCODE_FAIL = "ENCODE_FAIL"
    VERIFICATION_FAIL = "VERIFICATION_FAIL"
    TIMEOUT = "TIMEOUT"
    IO_ERROR = "IO_ERROR"
    NOT_SMALLER = "NOT_SMALLER"  # Quantized PNG did not shrink the source
    QUALITY_TOO_LOW = "QUALITY_TOO_LOW"  # pngquant could not meet the quality floor
