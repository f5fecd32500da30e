
"""Daily puzzle: one seed and one bonus word per calendar day"""
import datetime
from typing import Optional, Sequence

DAILY_WORDS = [
    "DREAM", "LIGHT", "MAGIC", "QUEST", "SPARK", "POWER", "BRAVE", "SWIFT",
    "SMART", "LUCKY", "HAPPY", "SUPER", "NINJA", "ROYAL", "FLAME", "STORM",
    "FROST", "EARTH", "OCEAN", "SPACE", "TIGER", "EAGLE", "SWORD", "CROWN",
    "JEWEL", "PEARL", "CRYSTAL", "GOLDEN", "SILVER", "BRONZE", "VICTORY",
]

BONUS_PER_LETTER = 1000


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def daily_seed(day: Optional[datetime.date] = None) -> int:
    """Non-negative 32-bit hash of the date; every player gets the same one."""
    day = day or datetime.date.today()
    # month is zero-based in the hashed string
    key = f"{day.year}-{day.month - 1}-{day.day}"
    h = 0
    for ch in key:
        h = _to_int32((h << 5) - h + ord(ch))
    return abs(h)


def daily_word(seed: int) -> str:
    return DAILY_WORDS[seed % len(DAILY_WORDS)]


def daily_bonus(words_found: Sequence[str], word: str) -> int:
    return len(word) * BONUS_PER_LETTER if word.upper() in {w.upper() for w in words_found} else 0
