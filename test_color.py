# -*- coding: utf-8 -*-
import math

import pytest

from swrast3d.color import Color, to_byte


def test_from_float_saturates_and_truncates():
    assert Color.from_float(300.0, -5.0, 12.9).to_tuple() == (255, 0, 12)
    assert to_byte(math.nan) == 0
    assert to_byte(254.999) == 254


def test_hex_roundtrip_and_black():
    c = Color.from_hex(0x4080FF)
    assert c.to_tuple() == (0x40, 0x80, 0xFF)
    assert c.to_hex() == 0x4080FF
    assert Color.black().to_hex() == 0


def test_scaled():
    assert Color(200, 100, 50).scaled(0.5) == Color(100, 50, 25)
    assert Color(200, 100, 50).scaled(2.0) == Color(255, 200, 100)


def test_immutable():
    c = Color(1, 2, 3)
    with pytest.raises(AttributeError):
        c.r = 10
