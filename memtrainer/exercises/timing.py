from __future__ import annotations

"""Presentation timing: how long each item stays on screen."""

from dataclasses import dataclass
from typing import List

from .kinds import KIND_META, ExerciseKind

INTER_ITEM_GAP_MS = 200
MIN_SPEED_FACTOR = 0.3


@dataclass(frozen=True)
class DisplayPlan:
    per_item_ms: int
    total_ms: int
    length: int
    gap_ms: int = INTER_ITEM_GAP_MS

    @property
    def presentation_ms(self) -> int:
        """Wall time from first item shown to last item hidden, gaps included."""
        return self.total_ms + self.gap_ms * max(0, self.length - 1)

    def item_delay_ms(self, index: int) -> int:
        """Delay after showing item index before the next step."""
        if index < self.length - 1:
            return self.per_item_ms + self.gap_ms
        return self.per_item_ms

    def offsets_ms(self) -> List[int]:
        """Start time of each item relative to the first one."""
        return [i * (self.per_item_ms + self.gap_ms) for i in range(self.length)]


def speed_factor(level: int) -> float:
    return max(MIN_SPEED_FACTOR, 1.0 - level * 0.1)


def display_plan(kind: ExerciseKind | str, level: int, length: int, *, gap_ms: int = INTER_ITEM_GAP_MS) -> DisplayPlan:
    kind = ExerciseKind.coerce(kind)
    per_item = int(round(KIND_META[kind].base_item_ms * speed_factor(level)))
    return DisplayPlan(per_item_ms=per_item, total_ms=per_item * int(length), length=int(length), gap_ms=int(gap_ms))
