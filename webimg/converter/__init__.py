"""Image conversion module."""

from webimg.converter.encoder import encode_avif, encode_jpeg, encode_webp, optimize_png
from webimg.converter.pipeline import ConversionPipeline
from webimg.converter.tools import require_tools, resolve_tools

__all__ = [
    "encode_avif",
    "encode_jpeg",
    "encode_webp",
    "optimize_png",
    "ConversionPipeline",
    "require_tools",
    "resolve_tools",
]
