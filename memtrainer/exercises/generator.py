from __future__ import annotations

"""Stimulus sequence generation.

All draws come from the random source passed in, so a session seeded with
the same value always shows the same sequence.
"""

import random
from typing import List, Tuple

from ..util.randomness import make_rng
from .kinds import ExerciseKind, check_level, grid_size, sequence_length
from .tokens import Position, Token
from .word_bank import COLORS, WordCategory, generate_word_set


def max_number_for_level(level: int) -> int:
    if level <= 3:
        return 9
    if level <= 6:
        return 99
    return 999


def spatial_sequence(rng: random.Random, size: int, length: int) -> List[Position]:
    """Draw cells without repeats until the grid is used up, then allow repeats.

    The fallback keeps generation finite when length exceeds size * size.
    """
    cells = [Position(x, y) for x in range(size) for y in range(size)]
    used: set[Position] = set()
    out: List[Position] = []
    for _ in range(length):
        if len(used) < len(cells):
            remaining = [c for c in cells if c not in used]
            pos = rng.choice(remaining)
        else:
            pos = Position(rng.randrange(size), rng.randrange(size))
        used.add(pos)
        out.append(pos)
    return out


def generate(kind: ExerciseKind | str, level: int, rng: random.Random | int | None = None) -> Tuple[Token, ...]:
    """Produce the stimulus sequence for one session.

    Args:
        kind: Exercise kind.
        level: Difficulty in 1..10.
        rng: A random.Random, an int seed, or None for a fresh seed.

    Returns:
        An immutable tuple of tokens, all of the kind's token type.
    """
    kind = ExerciseKind.coerce(kind)
    level = check_level(level)
    rng = make_rng(rng)
    length = sequence_length(kind, level)

    if kind in (ExerciseKind.WORD, ExerciseKind.ACTION):
        seq: List[Token] = list(generate_word_set(length, WordCategory.BASE, rng))
    elif kind is ExerciseKind.NUMBER:
        top = max_number_for_level(level)
        seq = [rng.randint(0, top) for _ in range(length)]
    elif kind is ExerciseKind.COLOR:
        seq = [rng.choice(COLORS) for _ in range(length)]
    else:
        seq = list(spatial_sequence(rng, grid_size(level), length))
    return tuple(seq)
