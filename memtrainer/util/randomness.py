from __future__ import annotations

"""Seeding helpers for per-session random sources."""

import os
import random

from loguru import logger


def session_seed() -> int:
    """Return the seed for a new session.

    Uses the SEED env var when it holds an integer, so whole runs can be
    replayed; otherwise draws fresh entropy.
    """
    seed = os.environ.get("SEED")
    if seed is not None:
        try:
            return int(seed)
        except ValueError:
            logger.warning(f"Ignoring non-integer SEED value {seed!r}")
    return random.SystemRandom().getrandbits(32)


def make_rng(seed: int | random.Random | None = None) -> random.Random:
    """Build a private generator; never touches the module-level one."""
    if isinstance(seed, random.Random):
        return seed
    if seed is None:
        seed = session_seed()
    return random.Random(seed)
