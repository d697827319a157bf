"""Output path derivation."""

from pathlib import Path

from webimg.models.plan import ConversionPlan

OPTIMIZED_PNG_SUFFIX = "-fs8.png"


def resolve_plan(source_path: Path) -> ConversionPlan:
    """
    Derive every output path from the source image.

    Outputs sit beside the source and share its stem:
    photo.png -> photo-fs8.png, photo.jpg, photo.webp, photo.avif
    """
    base = source_path.parent / source_path.stem

    return ConversionPlan(
        source_path=source_path,
        optimized_png_path=Path(f"{base}{OPTIMIZED_PNG_SUFFIX}"),
        jpeg_path=Path(f"{base}.jpg"),
        webp_path=Path(f"{base}.webp"),
        avif_path=Path(f"{base}.avif"),
    )
