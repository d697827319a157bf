"""Configuration models."""

from pydantic import Field
from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Global configuration from environment or defaults."""

    # Tool names or absolute paths
    pngquant_path: str = "pngquant"
    cwebp_path: str = "cwebp"
    avifenc_path: str = "avifenc"
    # ImageMagick 6 ships `convert`, ImageMagick 7 ships `magick`
    magick_paths: list[str] = Field(default_factory=lambda: ["convert", "magick"])

    # Encoder parameters
    png_quality: str = "65-80"  # pngquant min-max
    jpeg_quality: int = Field(default=80, ge=0, le=100)
    webp_quality: int = Field(default=75, ge=0, le=100)
    avif_quality: int = Field(default=75, ge=0, le=100)  # avifenc -q
    avif_speed: int = Field(default=0, ge=0, le=10)  # avifenc -s, 0 is slowest
    magick_avif_quality: int = Field(default=70, ge=0, le=100)

    encoder_timeout: int = 300  # seconds per encoder invocation

    # Logging
    log_level: str = "INFO"

    model_config = {"env_prefix": "WEBIMG_"}
