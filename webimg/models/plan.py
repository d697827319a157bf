"""Conversion plan and result models."""

from datetime import datetime
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from webimg.models.status import ConversionStatus


class TargetFormat(str, Enum):
    """Web-delivery variants produced from one PNG."""

    OPTIMIZED_PNG = "OPTIMIZED_PNG"
    JPEG = "JPEG"
    WEBP = "WEBP"
    AVIF = "AVIF"

    @property
    def mime_type(self) -> str:
        return _MIME_TYPES[self]

    @property
    def label(self) -> str:
        return _LABELS[self]


_MIME_TYPES = {
    TargetFormat.OPTIMIZED_PNG: "image/png",
    TargetFormat.JPEG: "image/jpeg",
    TargetFormat.WEBP: "image/webp",
    TargetFormat.AVIF: "image/avif",
}

_LABELS = {
    TargetFormat.OPTIMIZED_PNG: "PNG",
    TargetFormat.JPEG: "JPEG",
    TargetFormat.WEBP: "WEBP",
    TargetFormat.AVIF: "AVIF",
}


class ConversionPlan(BaseModel):
    """Source image and the output path of every variant."""

    source_path: Path
    optimized_png_path: Path
    jpeg_path: Path
    webp_path: Path
    avif_path: Path

    def output_path(self, target: TargetFormat) -> Path:
        """Output path for a target format."""
        return {
            TargetFormat.OPTIMIZED_PNG: self.optimized_png_path,
            TargetFormat.JPEG: self.jpeg_path,
            TargetFormat.WEBP: self.webp_path,
            TargetFormat.AVIF: self.avif_path,
        }[target]


class ConversionResult(BaseModel):
    """Result of a single conversion step."""

    target: TargetFormat
    status: ConversionStatus
    output_path: Path | None = None
    encoder: str | None = None
    error_code: str | None = None
    error_message: str | None = None
    output_size_bytes: int | None = None
    returncode: int | None = None  # Encoder exit status, if it ran

    # Timing
    started_at: datetime | None = None
    completed_at: datetime | None = None

    @property
    def success(self) -> bool:
        return self.status == ConversionStatus.SUCCESS


class ConversionReport(BaseModel):
    """Outcome of a full pipeline run."""

    source_path: Path
    source_size_bytes: int
    final_png_path: Path
    results: list[ConversionResult] = Field(default_factory=list)

    def result_for(self, target: TargetFormat) -> ConversionResult | None:
        """Result of the step for a target, if it ran."""
        for result in self.results:
            if result.target == target:
                return result
        return None

    def produced(self, target: TargetFormat) -> bool:
        """True if the target's output file was written and verified."""
        result = self.result_for(target)
        return result is not None and result.success

    @property
    def failed(self) -> list[ConversionResult]:
        """Steps that failed."""
        return [r for r in self.results if r.status == ConversionStatus.FAILED]
