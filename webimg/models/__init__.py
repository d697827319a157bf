"""Data models for webimg."""

from webimg.models.config import Config
from webimg.models.plan import (
    ConversionPlan,
    ConversionReport,
    ConversionResult,
    TargetFormat,
)
from webimg.models.status import ConversionStatus, ErrorCode
from webimg.models.tools import ToolAvailability

__all__ = [
    "Config",
    "ConversionPlan",
    "ConversionReport",
    "ConversionResult",
    "TargetFormat",
    "ConversionStatus",
    "ErrorCode",
    "ToolAvailability",
]
