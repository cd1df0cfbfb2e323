import re

import numpy as np
from ncs_palette.display import ELEMENTARY, full_chromatic, swatch, to_hex, to_rgb
from ncs_palette.ncs import NCSColor, parse

HEX = re.compile(r"^#[0-9A-F]{6}$")


def luma(rgb):
    return 0.2126 * rgb[0] + 0.7152 * rgb[1] + 0.0722 * rgb[2]


def test_hex_format():
    for text in ("1050-R90B", "0000-Y", "9900-G", "0099-B", "0199-G50Y"):
        assert HEX.match(to_hex(parse(text)))


def test_white_and_near_black():
    assert to_hex(parse("0000-Y")) == "#FFFFFF"
    r, g, b = to_rgb(parse("9900-R"))
    assert r == g == b
    assert r < 0.02


def test_neutral_axis_is_grey():
    for text in ("1000-Y", "3000-R50B", "7000-G"):
        r, g, b = to_rgb(parse(text))
        assert np.isclose(r, g) and np.isclose(g, b)


def test_blackness_darkens():
    seq = [to_rgb(NCSColor(hue=100, chromaticness=20, blackness=b)) for b in range(0, 81, 10)]
    ys = [luma(rgb) for rgb in seq]
    assert all(ys[i] > ys[i + 1] for i in range(len(ys) - 1))


def test_full_chromatic_matches_elementary_at_quadrant_start():
    for k, ref in enumerate(ELEMENTARY):
        rgb = full_chromatic(k * 100)
        expected = [int(ref[i : i + 2], 16) / 255 for i in (1, 3, 5)]
        assert np.allclose(rgb, expected, atol=2 / 255)


def test_channels_in_range():
    for hue in range(0, 400, 10):
        for b, c in ((0, 99), (1, 99), (50, 50), (99, 0), (0, 0)):
            rgb = to_rgb(NCSColor(hue=hue, chromaticness=c, blackness=b))
            assert np.all((rgb >= 0.0) & (rgb <= 1.0))


def test_red_is_reddish():
    r, g, b = to_rgb(parse("0090-R"))
    assert r > g and r > b


def test_swatch_payload():
    s = swatch(parse("1050-R90B"))
    assert s["ncs"] == "1050-R90B"
    assert HEX.match(s["hex"])
    assert (s["blackness"], s["chromaticness"], s["hue"]) == (10, 50, 190)
