
"""Letter tables: draw frequencies, tile scores and the weighted pool"""
import math
from typing import Dict, List

WILDCARD_CHAR = "?"
BOMB_CHAR = "#"

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Relative English letter frequency (percent)
LETTER_FREQUENCY: Dict[str, float] = {
    "A": 8.12, "B": 1.49, "C": 2.78, "D": 4.25, "E": 12.02, "F": 2.23, "G": 2.02,
    "H": 6.09, "I": 6.97, "J": 0.15, "K": 0.77, "L": 4.03, "M": 2.41, "N": 6.75,
    "O": 7.51, "P": 1.93, "Q": 0.10, "R": 5.99, "S": 6.33, "T": 9.06, "U": 2.76,
    "V": 0.98, "W": 2.36, "X": 0.15, "Y": 1.97, "Z": 0.07,
}

SCRABBLE_SCORES: Dict[str, int] = {
    "A": 1, "B": 3, "C": 3, "D": 2, "E": 1, "F": 4, "G": 2,
    "H": 4, "I": 1, "J": 8, "K": 5, "L": 1, "M": 3, "N": 1,
    "O": 1, "P": 3, "Q": 10, "R": 1, "S": 1, "T": 1, "U": 1,
    "V": 4, "W": 4, "X": 8, "Y": 4, "Z": 10,
}

WILDCARD_CHANCE = 0.02
BOMB_CHANCE = 0.005


def _build_pool() -> List[str]:
    pool: List[str] = []
    for letter, freq in LETTER_FREQUENCY.items():
        pool.extend([letter] * int(math.floor(freq * 10 + 0.5)))
    return pool


# One entry per tenth of a percent, so a draw is a single index lookup
WEIGHTED_LETTERS: List[str] = _build_pool()


def random_letter(rng) -> str:
    return WEIGHTED_LETTERS[rng.next_int(len(WEIGHTED_LETTERS))]


def random_tile(rng) -> str:
    """Letter for one piece cell: wildcard, bomb or a weighted letter."""
    roll = rng.next()
    if roll < WILDCARD_CHANCE:
        return WILDCARD_CHAR
    if roll < WILDCARD_CHANCE + BOMB_CHANCE:
        return BOMB_CHAR
    return random_letter(rng)


def letter_score(letter: str) -> int:
    return SCRABBLE_SCORES.get(letter.upper(), 0)
