from __future__ import annotations

"""Schema constants and Pydantic models for the parquet score history."""

from datetime import datetime, timezone
from typing import Literal

import pandas as pd
from pandas.api.types import CategoricalDtype
from pydantic import BaseModel, Field, field_validator, model_validator

from ..exercises.kinds import ExerciseKind

KINDS = {k.value for k in ExerciseKind}

DTYPES = {
    "username": "string",
    # timezone-aware UTC timestamps
    "completed_at": pd.DatetimeTZDtype(tz="UTC"),
    "kind": CategoricalDtype(categories=sorted(KINDS), ordered=False),
    "level": "UInt8",
    "raw_score": "float32",
    "time_spent_ms": "UInt32",
    "correct": "UInt16",
    "total": "UInt16",
}


class ScoreRow(BaseModel):
    username: str
    completed_at: datetime
    kind: Literal["word", "number", "color", "spatial", "action"]
    level: int = Field(ge=1, le=10)
    raw_score: float = Field(ge=0, le=200)
    time_spent_ms: int = Field(ge=0, le=4294967295)
    correct: int = Field(ge=0, le=65535)
    total: int = Field(ge=1, le=65535)

    @model_validator(mode="after")
    def _correct_le_total(self) -> "ScoreRow":
        if self.correct > self.total:
            raise ValueError("correct must be <= total")
        return self

    @field_validator("completed_at")
    @classmethod
    def _ensure_utc(cls, v: datetime) -> datetime:
        # naive profile timestamps are local time; astimezone() treats them so
        return v.astimezone(timezone.utc)
