from __future__ import annotations

import re
from dataclasses import dataclass

Notation = str

HUE_RANGE = 400
UNIT = 10  # raw units per adjustment step
MAX_NUANCE = 99  # largest representable blackness / chromaticness

# Y=0, R=100, B=200, G=300; label i sits at hue 10*i.
_PRIMARIES = ("Y", "R", "B", "G")
HUES: tuple[str, ...] = tuple(
    (p if step == 0 else f"{p}{step}{_PRIMARIES[(k + 1) % 4]}")
    for k, p in enumerate(_PRIMARIES)
    for step in range(0, 100, 10)
)
_HUE_INDEX = {name: i * UNIT for i, name in enumerate(HUES)}

_NOTATION = re.compile(r"^(?P<black>[0-9]{2})(?P<chroma>[0-9]{2})-(?P<hue>[A-Z0-9]+)$")


class ParseError(ValueError):
    """Raised when a string is not a valid NCS notation."""


class InconsistentColorError(RuntimeError):
    """Raised when a color holds a hue with no canonical label."""


@dataclass(frozen=True)
class NCSColor:
    hue: int
    chromaticness: int
    blackness: int

    def __post_init__(self) -> None:
        if not 0 <= self.hue < HUE_RANGE:
            raise ValueError(f"hue must be in [0, {HUE_RANGE}), got {self.hue}")
        for name in ("chromaticness", "blackness"):
            v = getattr(self, name)
            if not 0 <= v <= MAX_NUANCE:
                raise ValueError(f"{name} must be in [0, {MAX_NUANCE}], got {v}")
        if self.blackness + self.chromaticness > 100:
            raise ValueError(
                f"blackness + chromaticness must not exceed 100 "
                f"({self.blackness} + {self.chromaticness})"
            )

    @property
    def whiteness(self) -> int:
        return 100 - self.blackness - self.chromaticness

    @property
    def hue_label(self) -> str:
        if self.hue % UNIT:
            raise InconsistentColorError(f"hue {self.hue} has no NCS label")
        return HUES[self.hue // UNIT]

    def adjust(
        self, blackness: int = 0, chromaticness: int = 0, hue: int = 0
    ) -> NCSColor:
        return adjust(self, blackness, chromaticness, hue)

    def __str__(self) -> str:
        return format_ncs(self)


def parse(text: str) -> NCSColor:
    """Parse ``BBCC-<hue>`` notation, e.g. ``"1050-R90B"``."""
    m = _NOTATION.match((text or "").strip())
    if m is None:
        raise ParseError(f"invalid NCS notation: {text!r}")
    label = m.group("hue")
    if label not in _HUE_INDEX:
        raise ParseError(f"unknown hue code {label!r} in {text!r}")
    blackness = int(m.group("black"))
    chromaticness = int(m.group("chroma"))
    if blackness + chromaticness > 100:
        raise ParseError(
            f"blackness + chromaticness exceeds 100 in {text!r}"
        )
    return NCSColor(
        hue=_HUE_INDEX[label], chromaticness=chromaticness, blackness=blackness
    )


def format_ncs(color: NCSColor) -> Notation:
    return f"{color.blackness:02d}{color.chromaticness:02d}-{color.hue_label}"


def _step_nuance(value: int, other: int, steps: int) -> int:
    # 99 stands in for 100, so un-clamp before stepping.
    if value == MAX_NUANCE:
        value = 100
    value += steps * UNIT
    value = MAX_NUANCE if value >= 100 else max(0, value)
    if value > 100 - other:
        # a saturated competitor leaves no room at all
        value = 0 if other == MAX_NUANCE else 100 - other
    return value


def adjust(
    color: NCSColor, blackness: int, chromaticness: int, hue: int
) -> NCSColor:
    """
    Step `color` by whole units (10 raw each) along each axis.

    Axes are applied in order blackness, chromaticness, hue; chromaticness
    is clamped against the blackness already produced by this call. Axes
    with a zero delta are left untouched.
    """
    b, c, h = color.blackness, color.chromaticness, color.hue
    if blackness:
        b = _step_nuance(b, c, blackness)
    if chromaticness:
        c = _step_nuance(c, b, chromaticness)
    if hue:
        h = (h + hue * UNIT) % HUE_RANGE
    return NCSColor(hue=h, chromaticness=c, blackness=b)


__all__ = [
    "HUES",
    "InconsistentColorError",
    "NCSColor",
    "ParseError",
    "adjust",
    "format_ncs",
    "parse",
]
