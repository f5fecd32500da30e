import datetime

from letterfall_daily import DAILY_WORDS, daily_bonus, daily_seed, daily_word
from letterfall_engine import GameEngine


def test_daily_seed_is_stable_per_date():
    day = datetime.date(2026, 10, 19)
    assert daily_seed(day) == daily_seed(datetime.date(2026, 10, 19))
    assert daily_seed(day) >= 0
    assert daily_seed(day) != daily_seed(datetime.date(2026, 10, 18))


def test_daily_puzzle_is_the_same_for_everyone():
    seed = daily_seed(datetime.date(2025, 1, 1))
    assert GameEngine().new_game(seed) == GameEngine().new_game(seed)
    assert daily_word(seed) in DAILY_WORDS


def test_daily_bonus_only_when_found():
    assert daily_bonus(["CAT", "dream"], "DREAM") == 5000
    assert daily_bonus(["CAT"], "DREAM") == 0
