from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Mapping

from .ncs import NCSColor, adjust

log = logging.getLogger(__name__)

Key = str
Grid = list[list[NCSColor]]


class Action(Enum):
    """Logical input triggers; value is the (blackness, chromaticness, hue) step."""

    BLACKNESS_UP = (1, 0, 0)
    BLACKNESS_DOWN = (-1, 0, 0)
    CHROMATICNESS_UP = (0, 1, 0)
    CHROMATICNESS_DOWN = (0, -1, 0)
    HUE_UP = (0, 0, 1)
    HUE_DOWN = (0, 0, -1)


DEFAULT_KEYMAP: Mapping[Key, Action] = {
    "w": Action.BLACKNESS_UP,
    "q": Action.BLACKNESS_DOWN,
    "s": Action.CHROMATICNESS_UP,
    "a": Action.CHROMATICNESS_DOWN,
    "x": Action.HUE_UP,
    "z": Action.HUE_DOWN,
}

_ORDER = {a: i for i, a in enumerate(Action)}


def _norm(key: Key) -> Key:
    return key.strip().lower()


@dataclass
class EdgeDetector:
    """Turns per-tick held-key sets into just-pressed keys."""

    previous: frozenset[Key] = field(default_factory=frozenset)

    def update(self, pressed: Iterable[Key]) -> set[Key]:
        current = frozenset(_norm(k) for k in pressed)
        fresh = set(current - self.previous)
        self.previous = current
        return fresh

    def reset(self) -> None:
        self.previous = frozenset()


@dataclass(frozen=True)
class ExplorerState:
    color: NCSColor

    def handle_input(self, actions: Iterable[Action]) -> ExplorerState:
        # Each distinct trigger fires once, in Action declaration order.
        color = self.color
        for action in sorted(set(actions), key=_ORDER.__getitem__):
            color = adjust(color, *action.value)
            log.debug("%s -> %s", action.name, color)
        return self if color == self.color else ExplorerState(color)


def palette_grid(center: NCSColor, radius: int = 4) -> Grid:
    """Rows step blackness, columns step hue; the center cell is `center`."""
    if radius < 0:
        raise ValueError("radius must be >= 0")
    span = range(-radius, radius + 1)
    return [[adjust(center, j, 0, i) for i in span] for j in span]


class Explorer:
    """Single owner of the explorer state, the key bindings and edge detection."""

    def __init__(self, seed: NCSColor, keymap: Mapping[Key, Action] | None = None):
        self.state = ExplorerState(seed)
        self.keymap = {
            _norm(k): a for k, a in (keymap or DEFAULT_KEYMAP).items()
        }
        self._edges = EdgeDetector()

    @property
    def color(self) -> NCSColor:
        return self.state.color

    def tick(self, pressed: Iterable[Key]) -> list[Action]:
        """Run one input step for the keys held this tick; return fired actions."""
        fresh = self._edges.update(pressed)
        actions = sorted(
            {self.keymap[k] for k in fresh if k in self.keymap},
            key=_ORDER.__getitem__,
        )
        if actions:
            self.state = self.state.handle_input(actions)
            log.info("color now %s", self.state.color)
        return actions


__all__ = [
    "Action",
    "DEFAULT_KEYMAP",
    "EdgeDetector",
    "Explorer",
    "ExplorerState",
    "palette_grid",
]
