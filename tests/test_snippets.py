"""Tests for HTML and CSS snippet rendering."""

from pathlib import Path

from webimg.models.plan import ConversionReport, ConversionResult, TargetFormat
from webimg.models.status import ConversionStatus
from webimg.snippets.templates import (
    SnippetSources,
    render_image_set,
    render_picture,
    sources_from_report,
)


def make_sources(avif: bool = True) -> SnippetSources:
    return SnippetSources(
        jpeg="photo.jpg",
        webp="photo.webp",
        png="photo-fs8.png",
        avif="photo.avif" if avif else None,
    )


def make_report(avif_status: ConversionStatus) -> ConversionReport:
    base = Path("/img/photo")
    results = [
        ConversionResult(
            target=TargetFormat.JPEG,
            status=ConversionStatus.SUCCESS,
            output_path=Path(f"{base}.jpg"),
        ),
        ConversionResult(
            target=TargetFormat.WEBP,
            status=ConversionStatus.SUCCESS,
            output_path=Path(f"{base}.webp"),
        ),
        ConversionResult(
            target=TargetFormat.AVIF,
            status=avif_status,
            output_path=Path(f"{base}.avif") if avif_status == ConversionStatus.SUCCESS else None,
        ),
    ]
    return ConversionReport(
        source_path=Path("/img/photo.png"),
        source_size_bytes=1000,
        final_png_path=Path("/img/photo.png"),
        results=results,
    )


class TestRenderPicture:
    """Tests for the <picture> snippet."""

    def test_source_order(self):
        """AVIF source precedes WEBP source, which precedes the img fallback."""
        lines = render_picture(make_sources()).splitlines()

        avif_line = '  <source srcset="photo.avif" type="image/avif">'
        webp_line = '  <source srcset="photo.webp" type="image/webp">'
        img_lines = [i for i, line in enumerate(lines) if line.startswith('  <img src="photo.jpg"')]

        assert lines.count(avif_line) == 1
        assert len(img_lines) == 1
        assert lines.index(avif_line) < lines.index(webp_line) < img_lines[0]

    def test_exact_output(self):
        assert render_picture(make_sources()) == "\n".join([
            "<picture>",
            '  <source srcset="photo.avif" type="image/avif">',
            '  <source srcset="photo.webp" type="image/webp">',
            '  <img src="photo.jpg" alt="Descriptive alt text" loading="lazy">',
            '  <!-- img src="photo-fs8.png" alt="Descriptive alt text" loading="lazy" -->',
            "</picture>",
        ])

    def test_without_avif(self):
        html = render_picture(make_sources(avif=False))

        assert "avif" not in html
        assert '<source srcset="photo.webp" type="image/webp">' in html

    def test_custom_alt(self):
        html = render_picture(make_sources(), alt="Harbour at dusk")

        assert 'alt="Harbour at dusk"' in html


class TestRenderImageSet:
    """Tests for the image-set() CSS snippet."""

    def test_exact_output(self):
        assert render_image_set(make_sources()) == "\n".join([
            ".my-element {",
            '  background-image: url("photo.jpg"); /* Base Fallback for all browsers */',
            '  /* background-image: url("photo-fs8.png"); /* Base Fallback for all browsers */',
            "  background-image: image-set(",
            '    "photo.avif" type("image/avif"),',
            '    "photo.webp" type("image/webp"),',
            '    "photo.jpg" type("image/jpeg")',
            '    /* "photo-fs8.png" type("image/png") */',
            "  );",
            "}",
        ])

    def test_without_avif(self):
        css = render_image_set(make_sources(avif=False))

        assert "image/avif" not in css
        assert '"photo.webp" type("image/webp"),' in css

    def test_custom_selector(self):
        css = render_image_set(make_sources(), selector=".hero")

        assert css.startswith(".hero {")


class TestSourcesFromReport:
    """Tests for sources_from_report."""

    def test_basenames_only(self):
        sources = sources_from_report(make_report(ConversionStatus.SUCCESS))

        assert sources == SnippetSources(
            jpeg="photo.jpg",
            webp="photo.webp",
            png="photo.png",
            avif="photo.avif",
        )

    def test_skipped_avif_is_omitted(self):
        sources = sources_from_report(make_report(ConversionStatus.SKIPPED))

        assert sources.avif is None

    def test_failed_avif_is_omitted(self):
        sources = sources_from_report(make_report(ConversionStatus.FAILED))

        assert sources.avif is None


class TestEscaping:
    """User text and file names cannot break the generated markup."""

    def test_alt_is_html_escaped(self):
        html = render_picture(make_sources(), alt='Say "hi" & <b>')

        assert 'alt="Say &quot;hi&quot; &amp; &lt;b&gt;"' in html
        assert 'Say "hi"' not in html

    def test_file_names_escaped_in_html(self):
        sources = SnippetSources(jpeg='a"b.jpg', webp="a&b.webp", png="a.png")

        html = render_picture(sources)

        assert '<img src="a&quot;b.jpg"' in html
        assert '<source srcset="a&amp;b.webp"' in html

    def test_file_names_escaped_in_css(self):
        sources = SnippetSources(jpeg='a"b.jpg', webp="a\\b.webp", png="a.png")

        css = render_image_set(sources)

        assert 'url("a\\"b.jpg")' in css
        assert '"a\\\\b.webp" type("image/webp"),' in css
