
"""Word points and attack sizes"""
import math

from letterfall_letters import letter_score

LENGTH_BONUS_PER_LETTER = 10
WILDCARD_FACTOR = 0.8
COMBO_BASE = 1.5


def word_base_score(word: str) -> int:
    return sum(letter_score(ch) for ch in word)


def combo_multiplier(combo: int) -> float:
    return COMBO_BASE ** combo


def calculate_score(word: str, combo: int, has_wildcard: bool = False) -> int:
    """Letter points plus 10 per letter beyond three, scaled by wildcard and combo."""
    base = word_base_score(word) + max(0, len(word) - 3) * LENGTH_BONUS_PER_LETTER
    factor = WILDCARD_FACTOR if has_wildcard else 1.0
    return int(math.floor(base * factor * combo_multiplier(combo)))


def attack_rows(word_length: int) -> int:
    """Junk rows a cleared word sends: 0 / 1 / 2 / 5 by length band."""
    if word_length < 3:
        return 0
    if word_length <= 4:
        return 1
    if word_length <= 6:
        return 2
    return 5
