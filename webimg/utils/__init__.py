"""Utility modules."""

from webimg.utils.errors import (
    ConversionError,
    InvalidInputError,
    ToolMissingError,
    WebimgError,
)
from webimg.utils.files import get_file_size
from webimg.utils.logging import setup_logging

__all__ = [
    "ConversionError",
    "InvalidInputError",
    "ToolMissingError",
    "WebimgError",
    "get_file_size",
    "setup_logging",
]
