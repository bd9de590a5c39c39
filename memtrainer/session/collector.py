from __future__ import annotations

"""Answer collection for the recall phase."""

from typing import Any, List, Optional, Sequence, Tuple

from ..errors import StateError
from ..exercises.kinds import ExerciseKind
from ..exercises.tokens import Token, normalize_answer


class InputCollector:
    """Append-only answers for one generated sequence."""

    def __init__(self, kind: ExerciseKind, sequence: Sequence[Token], *, grid_size: Optional[int] = None) -> None:
        self.kind = kind
        self._expected = len(sequence)
        self._grid_size = grid_size
        self._answers: List[Token] = []

    @property
    def answers(self) -> Tuple[Token, ...]:
        return tuple(self._answers)

    @property
    def next_index(self) -> int:
        return len(self._answers)

    @property
    def remaining(self) -> int:
        return self._expected - len(self._answers)

    def is_complete(self) -> bool:
        return len(self._answers) == self._expected

    def submit(self, value: Any) -> Token:
        if self.is_complete():
            raise StateError("submit an answer", f"complete ({self._expected}/{self._expected} answered)")
        token = normalize_answer(self.kind, value, grid_size=self._grid_size)
        self._answers.append(token)
        return token
