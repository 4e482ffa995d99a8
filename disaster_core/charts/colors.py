from __future__ import annotations

from typing import Iterable

from plotly.colors import qualitative

# same ten colours as d3.schemeCategory10
PALETTE: tuple[str, ...] = tuple(qualitative.D3)


class ColorRegistry:
    """
    Categorical colour assignment: the first time a key is seen it takes the next palette slot.
    Append-only, so a key keeps its colour across renders and chart kinds.
    """

    def __init__(self, palette: Iterable[str] = PALETTE):
        self.palette = tuple(palette)
        if not self.palette:
            raise ValueError("palette must contain at least one colour")
        self._slots: dict[str, int] = {}

    def color_for(self, key) -> str:
        key = str(key)
        if key not in self._slots:
            self._slots[key] = len(self._slots)
        return self.palette[self._slots[key] % len(self.palette)]

    def colors_for(self, keys: Iterable) -> list[str]:
        return [self.color_for(k) for k in keys]

    @property
    def mapping(self) -> dict[str, str]:
        return {k: self.palette[i % len(self.palette)] for k, i in self._slots.items()}

    def __len__(self) -> int:
        return len(self._slots)
