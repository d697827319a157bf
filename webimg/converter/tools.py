"""External tool discovery."""

import logging
import shutil

from webimg.models.config import Config
from webimg.models.tools import ToolAvailability
from webimg.utils.errors import ToolMissingError

logger = logging.getLogger(__name__)


def resolve_tools(config: Config | None = None) -> ToolAvailability:
    """
    Look up every encoder on PATH once.

    Args:
        config: Optional global config with tool names

    Returns:
        Frozen ToolAvailability
    """
    config = config or Config()

    magick = None
    for candidate in config.magick_paths:
        magick = shutil.which(candidate)
        if magick:
            break

    tools = ToolAvailability(
        pngquant=shutil.which(config.pngquant_path),
        cwebp=shutil.which(config.cwebp_path),
        avifenc=shutil.which(config.avifenc_path),
        magick=magick,
    )
    logger.debug("Resolved tools: %s", tools.model_dump())
    return tools


def require_tools(tools: ToolAvailability) -> None:
    """
    Fail if a mandatory encoder is missing.

    Raises:
        ToolMissingError: For the first missing mandatory tool
    """
    missing = tools.missing_required()
    if missing:
        raise ToolMissingError(missing[0])
