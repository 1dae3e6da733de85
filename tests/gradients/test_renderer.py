import numpy as np
import pytest
from PIL import Image
from tinygradient.errors import RenderError
from tinygradient.gradients.renderer import render_gradient, render_strip, save_image, to_image
from tinygradient.gradients.stops import Stop

RED = (255, 0, 0)
BLUE = (0, 0, 255)


def red_blue():
    return [Stop(RED, 0.0), Stop(BLUE, 1.0)]


def test_render_strip_is_one_row():
    pixels = render_strip(red_blue(), 512)
    assert pixels.shape == (1, 512, 4)
    assert np.array_equal(pixels[0, 0, :3], RED)
    assert np.array_equal(pixels[0, 511, :3], BLUE)


def test_opaque_strip_becomes_rgb_image():
    img = to_image(render_strip(red_blue(), 16))
    assert img.mode == "RGB"
    assert img.size == (16, 1)
    assert img.getpixel((0, 0)) == RED
    assert img.getpixel((15, 0)) == BLUE


def test_translucent_strip_keeps_alpha():
    img = to_image(render_strip([Stop(RED, 0.0, alpha=0), Stop(BLUE, 1.0)], 8))
    assert img.mode == "RGBA"
    assert img.getpixel((0, 0)) == (255, 0, 0, 0)


def test_vertical_strip_puts_first_stop_on_top():
    img = to_image(render_strip(red_blue(), 16), is_vertical=True)
    assert img.size == (1, 16)
    assert img.getpixel((0, 0)) == RED
    assert img.getpixel((0, 15)) == BLUE


def test_render_gradient_writes_file(tmp_path):
    path = tmp_path / "strip.png"
    render_gradient(red_blue(), str(path), 32)
    with Image.open(path) as img:
        assert img.size == (32, 1)
        assert img.convert("RGB").getpixel((0, 0)) == RED
        assert img.convert("RGB").getpixel((31, 0)) == BLUE


def test_render_gradient_vertical_file(tmp_path):
    path = tmp_path / "strip.png"
    render_gradient(red_blue(), str(path), 10, is_vertical=True)
    with Image.open(path) as img:
        assert img.size == (1, 10)


def test_jpeg_output(tmp_path):
    path = tmp_path / "strip.jpg"
    render_gradient(red_blue(), str(path), 64)
    with Image.open(path) as img:
        assert img.format == "JPEG"
        assert img.size == (64, 1)


def test_unknown_extension(tmp_path):
    path = tmp_path / "strip.notanimage"
    with pytest.raises(RenderError, match="Could not write") as info:
        save_image(to_image(render_strip(red_blue(), 4)), str(path))
    assert info.value.path == str(path)


def test_missing_directory(tmp_path):
    path = tmp_path / "missing" / "strip.png"
    with pytest.raises(RenderError):
        render_gradient(red_blue(), str(path), 4)
