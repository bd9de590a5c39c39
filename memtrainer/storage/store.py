from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable

import pandas as pd

from ..exercises.kinds import ExerciseKind
from ..profile.schema import ScoreRecord
from .schema import DTYPES, ScoreRow

DATA_FILE = "score_history.parquet"


def _empty_df() -> pd.DataFrame:
    return pd.DataFrame({k: pd.Series(dtype=v) for k, v in DTYPES.items()})


def _fix_dtypes(df: pd.DataFrame) -> pd.DataFrame:
    for col, dt in DTYPES.items():
        if col not in df.columns:
            df[col] = pd.Series(pd.NA, index=df.index)
        df[col] = df[col].astype(dt)
    return df[list(DTYPES.keys())]


def init_store(data_dir: Path) -> None:
    data_dir = Path(data_dir)
    data_dir.mkdir(parents=True, exist_ok=True)
    path = data_dir / DATA_FILE
    if not path.exists():
        _empty_df().to_parquet(path, engine="pyarrow", compression="zstd", index=False)


def _row_from(obj: Any, username: str) -> ScoreRow:
    if isinstance(obj, ScoreRow):
        return obj
    if isinstance(obj, ScoreRecord):
        return ScoreRow(
            username=username,
            completed_at=obj.completed_at,
            kind=obj.kind.value,
            level=obj.level,
            raw_score=obj.raw_score,
            time_spent_ms=obj.time_spent_ms,
            correct=obj.correct_answers,
            total=obj.total_questions,
        )
    return ScoreRow.model_validate(obj)


def validate_records(records: Iterable[Any], *, username: str = "") -> pd.DataFrame:
    """Validate ScoreRecords, ScoreRows or plain dicts into a typed frame."""
    if isinstance(records, (str, bytes, dict)):
        raise TypeError("records must be an iterable of rows")
    rows = [_row_from(r, username) for r in records]
    df = pd.DataFrame([r.model_dump() for r in rows], columns=list(DTYPES.keys()))
    return _fix_dtypes(df)


def append_scores(df_new: pd.DataFrame, data_dir: Path) -> None:
    path = Path(data_dir) / DATA_FILE
    if path.exists():
        df_old = _fix_dtypes(pd.read_parquet(path, engine="pyarrow"))
    else:
        df_old = _empty_df()
    frames = [f for f in (df_old, _fix_dtypes(df_new.copy())) if not f.empty]
    combined = pd.concat(frames, ignore_index=True) if frames else _empty_df()
    combined = _fix_dtypes(combined).drop_duplicates()
    combined.to_parquet(path, engine="pyarrow", compression="zstd", index=False)


def load_all(data_dir: Path) -> pd.DataFrame:
    """Load the full history with a derived accuracy column (0..100)."""
    path = Path(data_dir) / DATA_FILE
    if not path.exists():
        df = _empty_df()
    else:
        df = _fix_dtypes(pd.read_parquet(path, engine="pyarrow"))
    total = df["total"].astype("float32").where(df["total"] > 0, other=1.0)
    df["accuracy"] = (df["correct"].astype("float32") / total * 100).astype("float32")
    return df


def query_trend(df: pd.DataFrame, *, kind: ExerciseKind | str) -> pd.DataFrame:
    kind_value = ExerciseKind.coerce(kind).value
    dff = df[df["kind"].astype("string") == kind_value]
    return dff.sort_values("completed_at").reset_index(drop=True)


def export_ndjson(df: pd.DataFrame, out_path: Path) -> None:
    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    df.to_json(out_path, orient="records", lines=True, date_format="iso")
