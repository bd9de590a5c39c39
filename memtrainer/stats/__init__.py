from .stats import format_summary, history_frame, score_trend, summarize_by_kind

__all__ = ["history_frame", "summarize_by_kind", "score_trend", "format_summary"]
