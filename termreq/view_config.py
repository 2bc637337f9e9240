"""Relative sizes of the request and response panes."""

from __future__ import annotations

import math
from dataclasses import dataclass

MAX_GROW = 10


@dataclass
class ViewConfig:
    """Horizontal proportions of the left and right blocks."""

    dimension_horizontal_blocks: tuple[int, int] = (1, 1)

    def _restart_if_reach_max(self) -> None:
        left, right = self.dimension_horizontal_blocks
        if left % 2 == 0 and right % 2 == 0:
            self.dimension_horizontal_blocks = (left // 2, right // 2)

    def grow_right_block(self) -> None:
        left, right = self.dimension_horizontal_blocks
        if right < MAX_GROW:
            right += 1
        self.dimension_horizontal_blocks = (left, right)
        self._restart_if_reach_max()

    def grow_left_block(self) -> None:
        left, right = self.dimension_horizontal_blocks
        if left < MAX_GROW:
            left += 1
        self.dimension_horizontal_blocks = (left, right)
        self._restart_if_reach_max()

    def dimension_percentage(self) -> tuple[int, int]:
        """Whole percentages of both blocks, summing to 100."""
        left, right = self.dimension_horizontal_blocks
        total = left + right
        percent_left = left * 100.0 / total
        percent_right = right * 100.0 / total
        frac_left = percent_left - math.floor(percent_left)
        frac_right = percent_right - math.floor(percent_right)
        if frac_left < frac_right:
            return math.floor(percent_left), math.ceil(percent_right)
        return math.ceil(percent_left), math.floor(percent_right)