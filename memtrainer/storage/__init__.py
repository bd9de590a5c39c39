from .schema import DTYPES, KINDS, ScoreRow
from .store import (
    DATA_FILE,
    init_store,
    validate_records,
    append_scores,
    load_all,
    query_trend,
    export_ndjson,
)

__all__ = [
    "DTYPES",
    "KINDS",
    "ScoreRow",
    "DATA_FILE",
    "init_store",
    "validate_records",
    "append_scores",
    "load_all",
    "query_trend",
    "export_ndjson",
]
