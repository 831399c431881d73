import pytest
from PIL import Image as PILImage

from termtoys.imcat import (
    HALF_BLOCK,
    RESET_ALL,
    Image,
    downsample,
    load_image,
    main,
    parse_background,
    render_double,
    render_single,
)


def _image(width, height, pixels):
    return Image(width, height, bytes(v for px in pixels for v in px))


def test_image_rejects_wrong_size():
    with pytest.raises(ValueError):
        Image(2, 2, bytes(3))


def test_parse_background_hex():
    assert parse_background("#ff8000") == (255, 128, 0)


def test_parse_background_invalid_is_black():
    assert parse_background("#zz") == (0, 0, 0)


def test_render_single():
    img = _image(1, 1, [(10, 20, 30, 255)])
    assert render_single(img) == "\x1b[48;2;10;20;30m " + RESET_ALL + "\n"


def test_render_double_pairs_rows():
    img = _image(1, 2, [(1, 2, 3, 255), (4, 5, 6, 255)])
    expected = "\x1b[38;2;1;2;3m\x1b[48;2;4;5;6m" + HALF_BLOCK + RESET_ALL + "\n"
    assert render_double(img) == expected


def test_render_double_drops_odd_row():
    img = _image(2, 3, [(0, 0, 0, 255)] * 6)
    out = render_double(img)
    assert out.count("\n") == 1
    assert out.count(HALF_BLOCK) == 2


def test_blend_opaque_unchanged_transparent_gives_background():
    opaque = _image(1, 2, [(9, 8, 7, 255), (0, 0, 0, 0)])
    out = render_double(opaque, (50, 60, 70))
    assert "\x1b[38;2;9;8;7m" in out
    assert "\x1b[48;2;50;60;70m" in out


def test_downsample_small_image_is_identity():
    pixels = [(10, 20, 30, 255), (40, 50, 60, 255), (70, 80, 90, 255),
              (100, 110, 120, 255)]
    img = _image(2, 2, pixels)
    assert downsample(img, 80) == img


def test_downsample_halves_wide_image():
    pixels = [(x * 10, 0, 0, 255) for x in range(4)] + [(0, 0, 0, 255)] * 4
    img = _image(4, 2, pixels)
    out = downsample(img, 2)
    assert (out.width, out.height) == (2, 1)
    assert out.pixel(0, 0) == img.pixel(0, 0)
    assert out.pixel(1, 0) == img.pixel(2, 0)


def test_downsample_premultiplies_alpha():
    img = _image(1, 1, [(200, 100, 50, 0)])
    assert downsample(img, 10).pixel(0, 0) == (0, 0, 0, 0)


def test_downsample_bad_width():
    with pytest.raises(ValueError):
        downsample(_image(1, 1, [(0, 0, 0, 0)]), 0)


def test_load_image_round_trip(tmp_path):
    path = tmp_path / "pic.png"
    src = PILImage.new("RGBA", (2, 1))
    src.putdata([(1, 2, 3, 255), (4, 5, 6, 128)])
    src.save(path)
    img = load_image(str(path))
    assert (img.width, img.height) == (2, 1)
    assert img.pixel(0, 0) == (1, 2, 3, 255)
    assert img.pixel(1, 0) == (4, 5, 6, 128)


def test_load_image_missing_raises(tmp_path):
    with pytest.raises(OSError):
        load_image(str(tmp_path / "none.png"))


def test_main_prints_image(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("COLUMNS", "80")
    monkeypatch.setenv("LINES", "24")
    monkeypatch.delenv("IMCATBG", raising=False)
    path = tmp_path / "pic.png"
    PILImage.new("RGBA", (2, 2), (255, 0, 0, 255)).save(path)
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out.count("\n") == 1
    assert out.count(HALF_BLOCK) == 2


def test_main_reports_bad_file(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("COLUMNS", "80")
    monkeypatch.setenv("LINES", "24")
    missing = str(tmp_path / "missing.png")
    assert main([missing]) == 0
    assert f"Could not load image {missing}" in capsys.readouterr().err


def test_main_usage(capsys):
    assert main([]) == 0
    assert "Usage" in capsys.readouterr().err