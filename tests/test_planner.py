"""Tests for input validation and output path derivation."""

from pathlib import Path

import pytest

from webimg.models.plan import TargetFormat
from webimg.planner.resolver import resolve_plan
from webimg.planner.validator import validate_source
from webimg.utils.errors import InvalidInputError


class TestValidateSource:
    """Tests for validate_source."""

    def test_valid_png(self, source_png):
        assert validate_source(str(source_png)) == source_png

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_empty_argument(self, raw):
        with pytest.raises(InvalidInputError, match="No input file"):
            validate_source(raw)

    def test_missing_file(self, tmp_path):
        with pytest.raises(InvalidInputError, match="not found"):
            validate_source(str(tmp_path / "absent.png"))

    def test_directory_is_not_a_file(self, tmp_path):
        """A directory with a .png name is not a valid input."""
        directory = tmp_path / "folder.png"
        directory.mkdir()

        with pytest.raises(InvalidInputError, match="not found"):
            validate_source(str(directory))

    def test_wrong_extension(self, tmp_path):
        jpeg = tmp_path / "photo.jpg"
        jpeg.write_bytes(b"jpeg")

        with pytest.raises(InvalidInputError, match="must be a PNG"):
            validate_source(str(jpeg))

    def test_uppercase_extension_accepted(self, tmp_path):
        upper = tmp_path / "PHOTO.PNG"
        upper.write_bytes(b"png")

        assert validate_source(upper) == upper


class TestResolvePlan:
    """Tests for resolve_plan."""

    def test_outputs_beside_source(self):
        plan = resolve_plan(Path("/site/img/photo.png"))

        assert plan.optimized_png_path == Path("/site/img/photo-fs8.png")
        assert plan.jpeg_path == Path("/site/img/photo.jpg")
        assert plan.webp_path == Path("/site/img/photo.webp")
        assert plan.avif_path == Path("/site/img/photo.avif")

    def test_dotted_stem_is_preserved(self):
        """Only the .png suffix is replaced."""
        plan = resolve_plan(Path("/img/hero.v2.png"))

        assert plan.jpeg_path == Path("/img/hero.v2.jpg")
        assert plan.optimized_png_path == Path("/img/hero.v2-fs8.png")

    def test_relative_source(self):
        plan = resolve_plan(Path("photo.png"))

        assert plan.webp_path == Path("photo.webp")

    def test_output_path_by_target(self):
        plan = resolve_plan(Path("/img/photo.png"))

        assert plan.output_path(TargetFormat.OPTIMIZED_PNG) == plan.optimized_png_path
        assert plan.output_path(TargetFormat.JPEG) == plan.jpeg_path
        assert plan.output_path(TargetFormat.WEBP) == plan.webp_path
        assert plan.output_path(TargetFormat.AVIF) == plan.avif_path
