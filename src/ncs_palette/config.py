from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .explorer import DEFAULT_KEYMAP, Action, Key

DEFAULT_SEED = "1050-R90B"


@dataclass(frozen=True)
class ExplorerConfig:
    seed: str = DEFAULT_SEED
    radius: int = 4  # 9x9 grid
    box_size: int = 80  # px per swatch
    title: str = "NCS Palette"
    # stored read-only; not part of the hash
    keymap: Mapping[Key, Action] = field(
        default_factory=lambda: dict(DEFAULT_KEYMAP), hash=False
    )

    def __post_init__(self) -> None:
        if self.radius < 0:
            raise ValueError("radius must be >= 0")
        if self.box_size <= 0:
            raise ValueError("box_size must be positive")
        object.__setattr__(self, "keymap", MappingProxyType(dict(self.keymap)))

    @property
    def board_size(self) -> int:
        return self.box_size * (2 * self.radius + 1)


__all__ = ["DEFAULT_SEED", "ExplorerConfig"]
