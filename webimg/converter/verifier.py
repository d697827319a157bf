"""Encoder output verification."""

from dataclasses import dataclass
from pathlib import Path

from webimg.utils.files import get_file_size


@dataclass
class VerificationResult:
    """Result of output verification."""

    success: bool
    size_bytes: int | None = None
    error_message: str | None = None


def verify_output(output_path: Path) -> VerificationResult:
    """
    Verify an encoder wrote a usable file.

    Checks:
    - File exists
    - File is not empty
    """
    if not output_path.is_file():
        return VerificationResult(
            success=False,
            error_message=f"Output file does not exist: {output_path}",
        )

    size_bytes = get_file_size(output_path)
    if size_bytes == 0:
        return VerificationResult(
            success=False,
            error_message=f"Output file is empty: {output_path}",
        )

    return VerificationResult(success=True, size_bytes=size_bytes)
