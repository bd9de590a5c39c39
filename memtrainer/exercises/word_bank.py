from __future__ import annotations

"""Fixed stimulus pools and word-set helpers."""

import random
from enum import Enum
from typing import List, Sequence, Tuple

BASE_WORDS: Tuple[str, ...] = (
    "Apple", "House", "Ocean", "Mountain", "Forest", "River", "Garden", "Castle",
    "Bridge", "Sunset", "Rainbow", "Thunder", "Lightning", "Whisper", "Journey",
    "Adventure", "Mystery", "Treasure", "Dragon", "Phoenix", "Crystal", "Diamond",
    "Emerald", "Sapphire", "Golden", "Silver", "Ancient", "Modern", "Future",
)

COLORS: Tuple[str, ...] = (
    "Red", "Blue", "Green", "Yellow", "Orange", "Purple", "Pink", "Cyan",
    "Magenta", "Brown", "Gray", "Black", "White", "Lime", "Navy", "Maroon",
)

ADJECTIVES: Tuple[str, ...] = (
    "Beautiful", "Mysterious", "Ancient", "Golden", "Silver", "Bright", "Dark",
    "Peaceful", "Stormy", "Gentle", "Fierce", "Elegant", "Rustic", "Modern",
    "Colorful", "Transparent", "Solid", "Liquid", "Frozen", "Burning",
)

NOUNS: Tuple[str, ...] = (
    "Castle", "Forest", "Ocean", "Mountain", "Valley", "River", "Lake", "Desert",
    "City", "Village", "Garden", "Tower", "Bridge", "Palace", "Temple", "Cave",
    "Island", "Meadow", "Cliff", "Waterfall", "Prairie", "Volcano", "Glacier",
)

ANIMALS: Tuple[str, ...] = (
    "Eagle", "Wolf", "Bear", "Lion", "Tiger", "Elephant", "Dolphin", "Whale",
    "Fox", "Rabbit", "Deer", "Horse", "Butterfly", "Dragon", "Phoenix", "Unicorn",
)


class WordCategory(str, Enum):
    BASE = "base"
    ADJECTIVES = "adjectives"
    NOUNS = "nouns"
    ANIMALS = "animals"
    MIXED = "mixed"


def category_pool(category: WordCategory) -> Tuple[str, ...]:
    if category is WordCategory.BASE:
        return BASE_WORDS
    if category is WordCategory.ADJECTIVES:
        return ADJECTIVES
    if category is WordCategory.NOUNS:
        return NOUNS
    if category is WordCategory.ANIMALS:
        return ANIMALS
    return ADJECTIVES + NOUNS + ANIMALS


def draw_without_replacement(pool: Sequence[str], count: int, rng: random.Random) -> List[str]:
    """Shuffle a copy of pool and take the first count entries.

    Asking for more than the pool holds returns the whole shuffled pool.
    """
    available = list(pool)
    rng.shuffle(available)
    return available[: max(0, count)]


def generate_word_set(count: int, category: WordCategory, rng: random.Random) -> List[str]:
    """Distinct words from one category; word and action sequences use BASE."""
    return draw_without_replacement(category_pool(category), count, rng)


def compound_word(rng: random.Random) -> str:
    return f"{rng.choice(ADJECTIVES)} {rng.choice(NOUNS)}"
