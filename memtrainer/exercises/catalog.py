from __future__ import annotations

"""Exercise catalog: display metadata kept apart from the engine types.

Hosts use this to label menus and to show the instructional text that the
session broadcasts before presenting a sequence.
"""

from dataclasses import dataclass
from typing import List

from .kinds import ExerciseKind


@dataclass(frozen=True)
class ExerciseMeta:
    kind: ExerciseKind
    name: str
    description: str
    instructions: str


_CATALOG = {
    ExerciseKind.WORD: ExerciseMeta(
        kind=ExerciseKind.WORD,
        name="Word Memory",
        description="Remember and recall sequences of words",
        instructions="Memorize the sequence of words that will appear. Then type them back in the correct order.",
    ),
    ExerciseKind.NUMBER: ExerciseMeta(
        kind=ExerciseKind.NUMBER,
        name="Number Memory",
        description="Remember and recall sequences of numbers",
        instructions="Memorize the sequence of numbers that will appear. Then type them back in the correct order.",
    ),
    ExerciseKind.COLOR: ExerciseMeta(
        kind=ExerciseKind.COLOR,
        name="Color Memory",
        description="Remember and recall color patterns",
        instructions="Memorize the sequence of colors that will appear. Then select them in the correct order.",
    ),
    ExerciseKind.SPATIAL: ExerciseMeta(
        kind=ExerciseKind.SPATIAL,
        name="Spatial Memory",
        description="Remember and recall spatial arrangements",
        instructions="Memorize the positions that light up. Then click them in the correct order.",
    ),
    ExerciseKind.ACTION: ExerciseMeta(
        kind=ExerciseKind.ACTION,
        name="Sequence Memory",
        description="Remember and recall sequences of actions",
        instructions="Memorize the sequence of actions. Then repeat them in the correct order.",
    ),
}


def list_exercises() -> List[ExerciseMeta]:
    return [_CATALOG[k] for k in ExerciseKind]


def get_exercise(kind: ExerciseKind | str) -> ExerciseMeta:
    try:
        return _CATALOG[ExerciseKind.coerce(kind)]
    except ValueError:
        raise KeyError(f"Unknown exercise kind: {kind}") from None


def instructions_for(kind: ExerciseKind | str) -> str:
    return get_exercise(kind).instructions
