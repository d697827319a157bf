"""Sequential conversion pipeline."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable

from webimg.converter.encoder import encode_avif, encode_jpeg, encode_webp, optimize_png
from webimg.models.config import Config
from webimg.models.plan import (
    ConversionPlan,
    ConversionReport,
    ConversionResult,
    TargetFormat,
)
from webimg.models.tools import ToolAvailability
from webimg.utils.files import get_file_size
from webimg.utils.logging import step_extra

logger = logging.getLogger(__name__)


@dataclass
class PipelineEvent:
    """Base event for pipeline progress."""

    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class StepStartedEvent(PipelineEvent):
    """Event when an encoder step starts."""

    target: TargetFormat | None = None
    encoder: str | None = None


@dataclass
class StepCompletedEvent(PipelineEvent):
    """Event when an encoder step finishes, whatever its status."""

    target: TargetFormat | None = None
    result: ConversionResult | None = None


class ConversionPipeline:
    """
    Runs every encoder against one source image, one after another.

    Order is fixed: PNG quantization (and the size comparison that picks
    the final PNG), then JPEG, WEBP and AVIF. Later steps always run,
    even if an earlier one failed.
    """

    def __init__(
        self,
        tools: ToolAvailability,
        config: Config | None = None,
        event_callback: Callable[[PipelineEvent], None] | None = None,
    ):
        self.tools = tools
        self.config = config or Config()
        self.event_callback = event_callback

    def emit(self, event: PipelineEvent) -> None:
        """Emit event to callback if registered."""
        if self.event_callback:
            self.event_callback(event)

    def execute(self, plan: ConversionPlan) -> ConversionReport:
        """
        Execute the plan.

        Args:
            plan: Source image and output paths

        Returns:
            ConversionReport with one result per target
        """
        source_size = get_file_size(plan.source_path)

        self.emit(StepStartedEvent(target=TargetFormat.OPTIMIZED_PNG, encoder="pngquant"))
        png_result, final_png = optimize_png(plan, self.tools, self.config)
        self.emit(StepCompletedEvent(target=TargetFormat.OPTIMIZED_PNG, result=png_result))

        report = ConversionReport(
            source_path=plan.source_path,
            source_size_bytes=source_size,
            final_png_path=final_png,
            results=[png_result],
        )

        report.results.append(self._run_step(
            TargetFormat.JPEG, self._magick_name(), encode_jpeg, plan,
        ))
        report.results.append(self._run_step(
            TargetFormat.WEBP, "cwebp", encode_webp, plan,
        ))
        report.results.append(self._run_step(
            TargetFormat.AVIF, self.tools.avif_encoder, encode_avif, plan,
        ))

        for result in report.failed:
            logger.warning(
                "%s conversion failed [%s]: %s",
                result.target.label, result.error_code, result.error_message,
                extra=step_extra(result),
            )

        return report

    def _run_step(
        self,
        target: TargetFormat,
        encoder: str | None,
        step: Callable[[ConversionPlan, ToolAvailability, Config], ConversionResult],
        plan: ConversionPlan,
    ) -> ConversionResult:
        self.emit(StepStartedEvent(target=target, encoder=encoder))
        result = step(plan, self.tools, self.config)
        self.emit(StepCompletedEvent(target=target, result=result))
        return result

    def _magick_name(self) -> str | None:
        if self.tools.magick is None:
            return None
        return Path(self.tools.magick).name
