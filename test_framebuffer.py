# -*- coding: utf-8 -*-
import numpy as np
from PIL import Image

from swrast3d.color import Color
from swrast3d.renderer.framebuffer import DEPTH_CLEAR, Framebuffer


def test_nearer_fragment_wins():
    fb = Framebuffer(4, 4)
    assert fb.point(1, 1, 5.0, Color(255, 0, 0))
    assert fb.point(1, 1, 3.0, Color(0, 255, 0))
    assert fb.get_pixel(1, 1) == 0x00FF00
    assert fb.get_depth(1, 1) == 3.0


def test_farther_fragment_rejected():
    fb = Framebuffer(4, 4)
    assert fb.point(1, 1, 3.0, Color(0, 255, 0))
    assert not fb.point(1, 1, 5.0, Color(255, 0, 0))
    assert not fb.point(1, 1, 3.0, Color(255, 0, 0))
    assert fb.get_pixel(1, 1) == 0x00FF00
    assert fb.get_depth(1, 1) == 3.0


def test_out_of_bounds_dropped():
    fb = Framebuffer(4, 3)
    for x, y in [(-1, 0), (0, -1), (4, 0), (0, 3)]:
        assert not fb.point(x, y, 0.0, 0xFFFFFF)
    assert np.all(fb.colors == 0)


def test_current_color_used_without_explicit_color():
    fb = Framebuffer(2, 2)
    fb.set_current_color(0x123456)
    fb.point(0, 0, 1.0)
    assert fb.get_pixel(0, 0) == 0x123456


def test_clear_resets_color_and_depth():
    fb = Framebuffer(3, 2, background=0x000011)
    fb.point(2, 1, 0.0, 0xFFFFFF)
    fb.set_background_color(Color(1, 2, 3))
    fb.clear()
    assert np.all(fb.colors == 0x010203)
    assert np.all(fb.depth == DEPTH_CLEAR)
    assert fb.buffer.shape == (6,)


def test_snapshot(tmp_path):
    fb = Framebuffer(3, 2)
    fb.point(2, 0, 0.0, Color(10, 20, 30))
    rgb = fb.to_rgb_array()
    assert rgb.shape == (2, 3, 3)
    assert rgb[0, 2].tolist() == [10, 20, 30]

    path = fb.save(tmp_path / "frame.png")
    with Image.open(path) as img:
        assert img.size == (3, 2)
        assert img.getpixel((2, 0)) == (10, 20, 30)
