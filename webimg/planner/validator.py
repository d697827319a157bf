"""Input validation."""

from pathlib import Path

from webimg.utils.errors import InvalidInputError

PNG_SUFFIX = ".png"


def validate_source(raw_path: str | Path | None) -> Path:
    """
    Validate the input argument and return it as a path.

    Checks, in order:
    - Argument is present and non-empty
    - Path exists and is a regular file
    - Suffix is .png (case-insensitive)

    Args:
        raw_path: Input argument as given on the command line

    Returns:
        Validated source path

    Raises:
        InvalidInputError: If any check fails
    """
    if raw_path is None or not str(raw_path).strip():
        raise InvalidInputError("No input file given.")

    path = Path(raw_path)

    if not path.is_file():
        raise InvalidInputError(f"Input file '{raw_path}' not found.")

    if path.suffix.lower() != PNG_SUFFIX:
        raise InvalidInputError("Input file must be a PNG file (.png, any case).")

    return path
