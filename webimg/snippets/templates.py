"""HTML and CSS snippet rendering."""

import html
from dataclasses import dataclass
from pathlib import Path

from webimg.models.plan import ConversionReport, TargetFormat

DEFAULT_ALT = "Descriptive alt text"
DEFAULT_SELECTOR = ".my-element"


@dataclass
class SnippetSources:
    """Basenames the snippets reference."""

    jpeg: str
    webp: str
    png: str
    avif: str | None = None  # None when no AVIF was produced


def sources_from_report(report: ConversionReport) -> SnippetSources:
    """
    Collect snippet file names from a finished run.

    AVIF is included only when the file was actually written.
    """
    avif = report.result_for(TargetFormat.AVIF)
    jpeg = report.result_for(TargetFormat.JPEG)
    webp = report.result_for(TargetFormat.WEBP)
    base = report.source_path.stem

    return SnippetSources(
        jpeg=_name(jpeg.output_path if jpeg else None, f"{base}.jpg"),
        webp=_name(webp.output_path if webp else None, f"{base}.webp"),
        png=report.final_png_path.name,
        avif=avif.output_path.name if avif and avif.success and avif.output_path else None,
    )


def render_picture(sources: SnippetSources, alt: str = DEFAULT_ALT) -> str:
    """
    Render a <picture> element.

    Sources are listed most to least efficient: AVIF, WEBP, then the JPEG
    <img> fallback. The final PNG is left as a commented-out alternative.
    """
    alt = _attr(alt)
    lines = ["<picture>"]
    if sources.avif:
        lines.append(f'  <source srcset="{_attr(sources.avif)}" type="{TargetFormat.AVIF.mime_type}">')
    lines.append(f'  <source srcset="{_attr(sources.webp)}" type="{TargetFormat.WEBP.mime_type}">')
    lines.append(f'  <img src="{_attr(sources.jpeg)}" alt="{alt}" loading="lazy">')
    lines.append(f'  <!-- img src="{_attr(sources.png)}" alt="{alt}" loading="lazy" -->')
    lines.append("</picture>")
    return "\n".join(lines)


def render_image_set(sources: SnippetSources, selector: str = DEFAULT_SELECTOR) -> str:
    """
    Render a CSS rule using background-image: image-set().

    The selector is CSS supplied by the caller and is written verbatim.
    """
    lines = [
        f"{selector} {{",
        f'  background-image: url("{_css_string(sources.jpeg)}"); /* Base Fallback for all browsers */',
        f'  /* background-image: url("{_css_string(sources.png)}"); /* Base Fallback for all browsers */',
        "  background-image: image-set(",
    ]
    if sources.avif:
        lines.append(f'    "{_css_string(sources.avif)}" type("{TargetFormat.AVIF.mime_type}"),')
    lines.append(f'    "{_css_string(sources.webp)}" type("{TargetFormat.WEBP.mime_type}"),')
    lines.append(f'    "{_css_string(sources.jpeg)}" type("{TargetFormat.JPEG.mime_type}")')
    lines.append(f'    /* "{_css_string(sources.png)}" type("{TargetFormat.OPTIMIZED_PNG.mime_type}") */')
    lines.append("  );")
    lines.append("}")
    return "\n".join(lines)


def _name(path: Path | None, default: str) -> str:
    return path.name if path else default


def _attr(value: str) -> str:
    """Escape a value for a double-quoted HTML attribute."""
    return html.escape(value, quote=True)


def _css_string(value: str) -> str:
    """Escape a value for a double-quoted CSS string."""
    return value.replace("\\", "\\\\").replace('"', '\\"')
