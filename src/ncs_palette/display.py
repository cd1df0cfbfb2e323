"""NCS → sRGB approximation for on-screen swatches.

The NCS model describes a color as a mix of white, black and the fully
chromatic color of its hue.  We approximate that literally:

  * the full color of a hue is interpolated in OkLCh (shorter arc) between
    sRGB references of the two neighbouring elementary colors;
  * the swatch is ``whiteness * white + chromaticness * full`` in
    gamma-encoded sRGB (black contributes nothing).

This is a display aid only, nothing in the adjustment path depends on it.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

import numpy as np
from coloraide import Color

from .ncs import HUE_RANGE, NCSColor, format_ncs

log = logging.getLogger(__name__)

Hex = str
RGB = tuple[float, float, float]

# Elementary hues Y, R, B, G in wheel order (NCS 0580-Y, 1085-R, 1565-B, 2060-G).
ELEMENTARY: tuple[Hex, ...] = ("#ffd300", "#c40233", "#0087bd", "#009f6b")
QUADRANT = HUE_RANGE // len(ELEMENTARY)

FIT = {"method": "raytrace"}  # gamut-fit for the interpolated full color


@lru_cache(maxsize=HUE_RANGE)
def full_chromatic(hue: int) -> RGB:
    """sRGB coords in [0, 1] of the fully chromatic color at `hue`."""
    quadrant, offset = divmod(hue % HUE_RANGE, QUADRANT)
    a = ELEMENTARY[quadrant]
    b = ELEMENTARY[(quadrant + 1) % len(ELEMENTARY)]
    lerp = Color.interpolate([a, b], space="oklch", hue="shorter")
    c = lerp(offset / QUADRANT).convert("srgb").fit(**FIT)
    log.debug("full chromatic hue=%d -> %s", hue, c.to_string(hex=True))
    r, g, bl = np.clip(np.asarray(c.coords()[:3], dtype=np.float64), 0.0, 1.0)
    return float(r), float(g), float(bl)


def to_rgb(color: NCSColor) -> np.ndarray:
    full = np.asarray(full_chromatic(color.hue), dtype=np.float64)
    rgb = color.whiteness / 100.0 + (color.chromaticness / 100.0) * full
    return np.clip(rgb, 0.0, 1.0)


def to_hex(color: NCSColor) -> Hex:
    """'#RRGGBB' (uppercase) approximation of `color`."""
    return Color("srgb", to_rgb(color).tolist()).to_string(hex=True).upper()


def swatch(color: NCSColor) -> dict[str, Any]:
    return {
        "ncs": format_ncs(color),
        "hex": to_hex(color),
        "blackness": color.blackness,
        "chromaticness": color.chromaticness,
        "hue": color.hue,
    }


__all__ = ["ELEMENTARY", "full_chromatic", "swatch", "to_hex", "to_rgb"]
