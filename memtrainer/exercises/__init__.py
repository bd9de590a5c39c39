from .catalog import ExerciseMeta, get_exercise, instructions_for, list_exercises
from .generator import generate, max_number_for_level, spatial_sequence
from .kinds import KIND_META, MAX_LEVEL, MIN_LEVEL, ExerciseKind, KindMeta, grid_size, sequence_length
from .timing import INTER_ITEM_GAP_MS, DisplayPlan, display_plan
from .tokens import Position, Token, normalize_answer, tokens_match

__all__ = [
    "ExerciseKind",
    "KindMeta",
    "KIND_META",
    "MIN_LEVEL",
    "MAX_LEVEL",
    "grid_size",
    "sequence_length",
    "ExerciseMeta",
    "get_exercise",
    "instructions_for",
    "list_exercises",
    "generate",
    "max_number_for_level",
    "spatial_sequence",
    "DisplayPlan",
    "display_plan",
    "INTER_ITEM_GAP_MS",
    "Position",
    "Token",
    "normalize_answer",
    "tokens_match",
]
