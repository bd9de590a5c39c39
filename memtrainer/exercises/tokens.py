from __future__ import annotations

"""Token types and per-kind answer normalisation."""

from dataclasses import dataclass
from typing import Any, Union

from ..errors import ValidationError
from .kinds import ExerciseKind


@dataclass(frozen=True, order=True)
class Position:
    """A spatial grid cell; x is the column, y the row."""

    x: int
    y: int

    def to_json(self) -> list:
        return [self.x, self.y]

    @classmethod
    def from_json(cls, data: Any) -> "Position":
        x, y = data
        return cls(int(x), int(y))

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


Token = Union[str, int, Position]


def _parse_position(value: Any) -> Position:
    if isinstance(value, Position):
        return value
    if isinstance(value, str):
        parts = value.strip().strip("()").split(",")
        if len(parts) != 2:
            raise ValidationError(f"Expected 'x,y' coordinates, got {value!r}")
        value = parts
    try:
        x, y = value
        if isinstance(x, bool) or isinstance(y, bool):
            raise TypeError
        return Position(int(str(x).strip()), int(str(y).strip()))
    except (TypeError, ValueError):
        raise ValidationError(f"Malformed coordinate pair: {value!r}") from None


def normalize_answer(kind: ExerciseKind, value: Any, *, grid_size: int | None = None) -> Token:
    """Turn raw host input into a comparable token.

    Text kinds are trimmed (case is kept for display, comparison ignores it).
    Numbers must parse as an integer but keep their trimmed text, so "007"
    does not match 7. Spatial input becomes a Position inside the grid.
    """
    if value is None:
        raise ValidationError("Answer is empty")
    if kind is ExerciseKind.SPATIAL:
        pos = _parse_position(value)
        if grid_size is not None and not (0 <= pos.x < grid_size and 0 <= pos.y < grid_size):
            raise ValidationError(f"Position {pos} is outside the {grid_size}x{grid_size} grid")
        return pos
    if isinstance(value, bool):
        raise ValidationError(f"Malformed answer: {value!r}")
    text = str(value).strip()
    if not text:
        raise ValidationError("Answer is empty")
    if kind is ExerciseKind.NUMBER:
        try:
            int(text)
        except ValueError:
            raise ValidationError(f"Expected a whole number, got {text!r}") from None
    return text


def tokens_match(kind: ExerciseKind, expected: Token, answer: Token) -> bool:
    if kind is ExerciseKind.SPATIAL:
        try:
            return _parse_position(expected) == _parse_position(answer)
        except ValidationError:
            return False
    return str(expected).strip().lower() == str(answer).strip().lower()
