from __future__ import annotations

"""Exercise kinds and their fixed sizing/timing metadata."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict

MIN_LEVEL = 1
MAX_LEVEL = 10


class ExerciseKind(str, Enum):
    WORD = "word"
    NUMBER = "number"
    COLOR = "color"
    SPATIAL = "spatial"
    ACTION = "action"

    @classmethod
    def coerce(cls, value: "ExerciseKind | str") -> "ExerciseKind":
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        # names used by older profile files, e.g. "WORD_MEMORY" or "SEQUENCE_MEMORY"
        text = _LEGACY_NAMES.get(text, text)
        return cls(text)


_LEGACY_NAMES = {
    "word_memory": "word",
    "number_memory": "number",
    "color_memory": "color",
    "spatial_memory": "spatial",
    "sequence_memory": "action",
}


@dataclass(frozen=True)
class KindMeta:
    base_length: int
    max_length: int
    base_item_ms: int


KIND_META: Dict[ExerciseKind, KindMeta] = {
    ExerciseKind.WORD: KindMeta(base_length=3, max_length=15, base_item_ms=1500),
    ExerciseKind.NUMBER: KindMeta(base_length=3, max_length=20, base_item_ms=1000),
    ExerciseKind.COLOR: KindMeta(base_length=3, max_length=12, base_item_ms=1200),
    ExerciseKind.SPATIAL: KindMeta(base_length=3, max_length=15, base_item_ms=800),
    ExerciseKind.ACTION: KindMeta(base_length=3, max_length=15, base_item_ms=1000),
}


def check_level(level: int) -> int:
    level = int(level)
    if not (MIN_LEVEL <= level <= MAX_LEVEL):
        raise ValueError(f"level must be in {MIN_LEVEL}..{MAX_LEVEL}, got {level}")
    return level


def clamp_level(level: int) -> int:
    return max(MIN_LEVEL, min(MAX_LEVEL, int(level)))


def sequence_length(kind: ExerciseKind, level: int) -> int:
    meta = KIND_META[kind]
    return min(meta.base_length + level, meta.max_length)


def grid_size(level: int) -> int:
    """Side of the square spatial grid; grows every two levels up to 6."""
    return min(3 + level // 2, 6)
