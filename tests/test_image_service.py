from pathlib import Path

import pytest
from PIL import Image

from image_utility.errors import DecodeError, EncodeError
from image_utility.services.image_service import ImageService

from conftest import make_gradient


def test_load_image_reports_size_mode_and_format(png_800x600):
    data = ImageService().load_image(png_800x600)
    assert (data.width, data.height) == (800, 600)
    assert data.pil_image.size == (800, 600)
    assert data.mode == "RGB"
    assert data.format == "PNG"
    assert data.path == Path(png_800x600)


def test_load_image_accepts_str_path(png_800x600):
    data = ImageService().load_image(str(png_800x600))
    assert data.width == 800


def test_load_image_missing_file_mentions_path(tmp_path):
    missing = tmp_path / "nope.png"
    with pytest.raises(DecodeError) as excinfo:
        ImageService().load_image(missing)
    assert str(missing) in str(excinfo.value)


def test_load_image_rejects_non_image(tmp_path):
    bogus = tmp_path / "notes.png"
    bogus.write_text("definitely not a png")
    with pytest.raises(DecodeError):
        ImageService().load_image(bogus)


def test_load_image_rejects_directory(tmp_path):
    with pytest.raises(DecodeError):
        ImageService().load_image(tmp_path)


def test_palette_image_is_expanded_to_rgb(tmp_path):
    path = tmp_path / "palette.png"
    make_gradient(20, 10).convert("P").save(path)
    data = ImageService().load_image(path)
    assert data.mode == "RGB"


def test_palette_image_with_transparency_is_expanded_to_rgba(tmp_path):
    path = tmp_path / "palette.png"
    src = Image.new("P", (20, 10), 0)
    src.putpalette([0, 0, 0, 255, 0, 0])
    src.paste(1, (0, 0, 10, 10))
    src.save(path, transparency=0)
    with Image.open(path) as reloaded:
        assert reloaded.mode == "P"
        assert "transparency" in reloaded.info

    data = ImageService().load_image(path)
    assert data.mode == "RGBA"
    assert data.pil_image.getpixel((0, 0)) == (255, 0, 0, 255)
    assert data.pil_image.getpixel((15, 5))[3] == 0


def test_bilevel_image_is_expanded_to_grayscale(tmp_path):
    path = tmp_path / "mono.bmp"
    make_gradient(16, 16).convert("1").save(path)
    data = ImageService().load_image(path)
    assert data.mode == "L"


@pytest.mark.parametrize("suffix", [".png", ".bmp", ".gif", ".jpg"])
def test_reencode_same_format_keeps_dimensions(tmp_path, suffix):
    service = ImageService()
    src = tmp_path / f"src{suffix}"
    make_gradient(123, 45).save(src)

    loaded = service.load_image(src)
    dst = service.save_image(loaded.pil_image, tmp_path / f"dst{suffix}")

    again = service.load_image(dst)
    assert (again.width, again.height) == (123, 45)
    assert again.format == loaded.format


def test_save_image_unknown_extension(tmp_path):
    target = tmp_path / "out.notaformat"
    with pytest.raises(EncodeError):
        ImageService().save_image(make_gradient(4, 4), target)
    assert not target.exists()


def test_save_image_rgba_as_jpeg_fails(tmp_path):
    rgba = make_gradient(4, 4).convert("RGBA")
    with pytest.raises(EncodeError):
        ImageService().save_image(rgba, tmp_path / "out.jpg")


def test_save_image_overwrites_existing_file(tmp_path):
    target = tmp_path / "out.png"
    target.write_bytes(b"stale")
    ImageService().save_image(make_gradient(7, 3), target)
    with Image.open(target) as img:
        assert img.size == (7, 3)
