"""Encoder command builders."""

from pathlib import Path


def build_pngquant_command(
    source: Path,
    output: Path,
    quality: str = "65-80",
    pngquant_path: str = "pngquant",
) -> list[str]:
    """
    Build pngquant command for lossy palette quantization.

    --skip-if-larger leaves no output when the result would not shrink the
    file; pngquant then exits with status 98.
    """
    return [
        pngquant_path,
        f"--quality={quality}",
        "--force",  # Overwrite a previous -fs8.png
        "--skip-if-larger",
        "--output", str(output),
        str(source),
    ]


def build_jpeg_command(
    source: Path,
    output: Path,
    quality: int = 80,
    magick_path: str = "convert",
) -> list[str]:
    """
    Build ImageMagick command for JPEG re-encoding.

    `convert` and `magick` take the same arguments for this form.
    """
    return [
        magick_path,
        str(source),
        "-quality", str(quality),
        str(output),
    ]


def build_webp_command(
    source: Path,
    output: Path,
    quality: int = 75,
    cwebp_path: str = "cwebp",
) -> list[str]:
    """Build cwebp command."""
    return [
        cwebp_path,
        "-q", str(quality),
        str(source),
        "-o", str(output),
    ]


def build_avifenc_command(
    source: Path,
    output: Path,
    quality: int = 75,
    speed: int = 0,
    avifenc_path: str = "avifenc",
) -> list[str]:
    """
    Build avifenc command.

    -q is color quality from 0 (worst) to 100 (lossless);
    -s is encoder speed from 0 (slowest, smallest) to 10.
    """
    return [
        avifenc_path,
        str(source),
        "-o", str(output),
        "-q", str(quality),
        "-s", str(speed),
    ]


def build_magick_avif_command(
    source: Path,
    output: Path,
    quality: int = 70,
    magick_path: str = "convert",
) -> list[str]:
    """
    Build ImageMagick command for AVIF encoding.

    Used only when avifenc is not installed. ImageMagick infers the format
    from the .avif extension.
    """
    return [
        magick_path,
        str(source),
        "-quality", str(quality),
        str(output),
    ]
