"""Single-variant encoding."""

import logging
import os
import subprocess
from datetime import datetime
from pathlib import Path

from webimg.converter.commands import (
    build_avifenc_command,
    build_jpeg_command,
    build_magick_avif_command,
    build_pngquant_command,
    build_webp_command,
)
from webimg.converter.verifier import verify_output
from webimg.models.config import Config
from webimg.models.plan import ConversionPlan, ConversionResult, TargetFormat
from webimg.models.status import ConversionStatus, ErrorCode
from webimg.models.tools import ToolAvailability
from webimg.utils.files import get_file_size, remove_if_exists
from webimg.utils.logging import step_extra

logger = logging.getLogger(__name__)

# pngquant exit statuses that mean "nothing written" rather than failure
PNGQUANT_SKIPPED_LARGER = 98
PNGQUANT_QUALITY_TOO_LOW = 99


def temp_output_path(output_path: Path) -> Path:
    """
    Scratch path an encoder writes to before the result is moved into place.

    The real extension is kept last since ImageMagick picks the output
    format from it: photo.avif -> photo.tmp.avif
    """
    return output_path.with_name(f"{output_path.stem}.tmp{output_path.suffix}")


def run_encoder(
    cmd: list[str],
    target: TargetFormat,
    output_path: Path,
    temp_path: Path,
    timeout: int = 300,
) -> ConversionResult:
    """
    Run one encoder command and move its verified output into place.

    Steps:
    1. Execute the command, writing to temp_path
    2. Check the exit status
    3. Verify the temp file exists and is non-empty
    4. Atomic rename to output_path

    On any failure both the temp file and an existing output_path are
    removed, so a failed step never leaves a file behind.

    Args:
        cmd: Encoder command as list of strings, targeting temp_path
        target: Format being produced
        output_path: Final location of the variant
        temp_path: File the command writes
        timeout: Seconds before the encoder is killed

    Returns:
        ConversionResult with success/failure and details
    """
    started_at = datetime.now()
    encoder = Path(cmd[0]).name
    remove_if_exists(temp_path)
    logger.debug("Running %s", " ".join(cmd))

    try:
        completed = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        result = _failed(
            target, encoder, ErrorCode.TIMEOUT,
            f"{encoder} timed out after {timeout} seconds", started_at,
        )
        return _discard(result, temp_path, output_path)
    except OSError as e:
        result = _failed(target, encoder, ErrorCode.IO_ERROR, str(e), started_at)
        return _discard(result, temp_path, output_path)

    if completed.returncode != 0:
        result = _failed(
            target, encoder, ErrorCode.ENCODE_FAIL,
            f"{encoder} failed: {(completed.stderr or '').strip()[:500]}", started_at,
        )
        result.returncode = completed.returncode
        return _discard(result, temp_path, output_path)

    verify_result = verify_output(temp_path)
    if not verify_result.success:
        result = _failed(
            target, encoder, ErrorCode.VERIFICATION_FAIL,
            verify_result.error_message or "", started_at,
        )
        result.returncode = completed.returncode
        return _discard(result, temp_path, output_path)

    try:
        os.replace(temp_path, output_path)
    except OSError as e:
        result = _failed(target, encoder, ErrorCode.IO_ERROR, str(e), started_at)
        return _discard(result, temp_path, output_path)

    result = ConversionResult(
        target=target,
        status=ConversionStatus.SUCCESS,
        output_path=output_path,
        encoder=encoder,
        output_size_bytes=verify_result.size_bytes,
        returncode=completed.returncode,
        started_at=started_at,
        completed_at=datetime.now(),
    )
    logger.info("%s written: %s", target.label, output_path, extra=step_extra(result))
    return result


def optimize_png(
    plan: ConversionPlan,
    tools: ToolAvailability,
    config: Config | None = None,
) -> tuple[ConversionResult, Path]:
    """
    Quantize the source palette and choose the final PNG.

    The quantized candidate is kept only if it is strictly smaller than
    the source; otherwise it is deleted and the source is the final PNG.
    A failed quantization also falls back to the source.

    Returns:
        Tuple of (step result, final PNG path)
    """
    config = config or Config()
    source = plan.source_path
    candidate = plan.output_path(TargetFormat.OPTIMIZED_PNG)

    if tools.pngquant is None:
        return _tool_missing(TargetFormat.OPTIMIZED_PNG, "pngquant"), source

    temp_path = temp_output_path(candidate)
    cmd = build_pngquant_command(
        source, temp_path, config.png_quality, tools.pngquant,
    )
    result = run_encoder(
        cmd, TargetFormat.OPTIMIZED_PNG, candidate, temp_path, config.encoder_timeout,
    )

    if result.returncode == PNGQUANT_SKIPPED_LARGER:
        return _skipped(
            result, ErrorCode.NOT_SMALLER,
            "pngquant skipped creation: result would be larger",
        ), source

    if result.returncode == PNGQUANT_QUALITY_TOO_LOW:
        return _skipped(
            result, ErrorCode.QUALITY_TOO_LOW,
            f"pngquant could not reach quality {config.png_quality}",
        ), source

    if not result.success:
        return result, source

    original_size = get_file_size(source)
    optimized_size = result.output_size_bytes or 0

    # Ties keep the original
    if optimized_size >= original_size:
        remove_if_exists(candidate)
        return _skipped(
            result, ErrorCode.NOT_SMALLER,
            f"Optimized PNG was not smaller ({optimized_size} >= {original_size} bytes)",
        ), source

    logger.info(
        "Optimized PNG %s: %d -> %d bytes", candidate, original_size, optimized_size,
    )
    return result, candidate


def encode_jpeg(
    plan: ConversionPlan,
    tools: ToolAvailability,
    config: Config | None = None,
) -> ConversionResult:
    """Re-encode the source as JPEG with ImageMagick."""
    config = config or Config()
    output_path = plan.output_path(TargetFormat.JPEG)

    if tools.magick is None:
        remove_if_exists(output_path)
        return _tool_missing(TargetFormat.JPEG, "convert")

    temp_path = temp_output_path(output_path)
    cmd = build_jpeg_command(
        plan.source_path, temp_path, config.jpeg_quality, tools.magick,
    )
    return run_encoder(
        cmd, TargetFormat.JPEG, output_path, temp_path, config.encoder_timeout,
    )


def encode_webp(
    plan: ConversionPlan,
    tools: ToolAvailability,
    config: Config | None = None,
) -> ConversionResult:
    """Encode the source as WEBP with cwebp."""
    config = config or Config()
    output_path = plan.output_path(TargetFormat.WEBP)

    if tools.cwebp is None:
        remove_if_exists(output_path)
        return _tool_missing(TargetFormat.WEBP, "cwebp")

    temp_path = temp_output_path(output_path)
    cmd = build_webp_command(
        plan.source_path, temp_path, config.webp_quality, tools.cwebp,
    )
    return run_encoder(
        cmd, TargetFormat.WEBP, output_path, temp_path, config.encoder_timeout,
    )


def encode_avif(
    plan: ConversionPlan,
    tools: ToolAvailability,
    config: Config | None = None,
) -> ConversionResult:
    """
    Encode the source as AVIF.

    Uses avifenc when installed, otherwise ImageMagick. With neither
    present the step is skipped, not failed.
    """
    config = config or Config()
    output_path = plan.output_path(TargetFormat.AVIF)
    temp_path = temp_output_path(output_path)

    if tools.avifenc:
        cmd = build_avifenc_command(
            plan.source_path,
            temp_path,
            config.avif_quality,
            config.avif_speed,
            tools.avifenc,
        )
    elif tools.magick:
        cmd = build_magick_avif_command(
            plan.source_path, temp_path, config.magick_avif_quality, tools.magick,
        )
    else:
        # A leftover .avif must not outlive the tool that made it
        remove_if_exists(output_path)
        now = datetime.now()
        return ConversionResult(
            target=TargetFormat.AVIF,
            status=ConversionStatus.SKIPPED,
            error_code=ErrorCode.TOOL_MISSING.value,
            error_message="Neither avifenc nor ImageMagick found",
            started_at=now,
            completed_at=now,
        )

    return run_encoder(
        cmd, TargetFormat.AVIF, output_path, temp_path, config.encoder_timeout,
    )


def _discard(
    result: ConversionResult,
    temp_path: Path,
    output_path: Path,
) -> ConversionResult:
    remove_if_exists(temp_path)
    remove_if_exists(output_path)
    logger.info(
        "%s not written [%s]: %s",
        result.target.label, result.error_code, result.error_message,
        extra=step_extra(result),
    )
    return result


def _failed(
    target: TargetFormat,
    encoder: str,
    error_code: ErrorCode,
    message: str,
    started_at: datetime,
) -> ConversionResult:
    return ConversionResult(
        target=target,
        status=ConversionStatus.FAILED,
        encoder=encoder,
        error_code=error_code.value,
        error_message=message,
        started_at=started_at,
        completed_at=datetime.now(),
    )


def _tool_missing(target: TargetFormat, tool: str) -> ConversionResult:
    return _failed(
        target, tool, ErrorCode.TOOL_MISSING, f"{tool} is not installed", datetime.now(),
    )


def _skipped(
    result: ConversionResult,
    error_code: ErrorCode,
    message: str,
) -> ConversionResult:
    return result.model_copy(update={
        "status": ConversionStatus.SKIPPED,
        "output_path": None,
        "output_size_bytes": None,
        "error_code": error_code.value,
        "error_message": message,
    })
