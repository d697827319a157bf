"""External tool availability."""

from pathlib import Path

from pydantic import BaseModel


class ToolAvailability(BaseModel):
    """
    Resolved executables for every encoder webimg can drive.

    A field is None when the tool was not found. Instances are frozen and
    resolved once per run.
    """

    pngquant: str | None = None
    cwebp: str | None = None
    avifenc: str | None = None
    magick: str | None = None  # `convert` or `magick`

    model_config = {"frozen": True}

    @property
    def avif_available(self) -> bool:
        """True if any AVIF encoder (dedicated or ImageMagick) is present."""
        return self.avifenc is not None or self.magick is not None

    @property
    def avif_encoder(self) -> str | None:
        """Name of the tool AVIF encoding will use, preferring avifenc."""
        if self.avifenc:
            return Path(self.avifenc).name
        if self.magick:
            return Path(self.magick).name
        return None

    def missing_required(self) -> list[str]:
        """Names of mandatory tools that were not found."""
        missing = []
        if self.pngquant is None:
            missing.append("pngquant")
        if self.cwebp is None:
            missing.append("cwebp")
        return missing
