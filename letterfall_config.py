
"""Tunables for the simulation and the pygame front end"""
from dataclasses import dataclass
from typing import Any, Mapping

CONFIG = {
    # Board
    "BOARD_WIDTH": 10,
    "BOARD_HEIGHT": 20,

    # Gravity (ms between automatic drops)
    "DROP_SPEED_MS": 1000,          # level 1
    "DROP_STEP_PER_LEVEL_MS": 50,
    "MIN_DROP_MS": 50,

    # Locking
    "LOCK_DELAY_MS": 500,
    "LOCK_STEP_MS": 100,            # added per blocked move_down

    "QUEUE_SIZE": 5,
    "WORDS_PER_LEVEL": 10,
    "CASCADE_LIMIT": 20,
    "ATTACK_DELAY_MS": 1000,

    "SEED": None,                   # None => seeded from the clock
    "DICTIONARY_PATH": None,
    "LOG_LEVEL": "INFO",

    # Front end feel
    "CELL_SIZE": 32,
    "DAS_MS": 170,
    "ARR_MS": 30,
}


@dataclass(frozen=True)
class GameConfig:
    board_width: int = 10
    board_height: int = 20
    drop_speed: int = 1000
    drop_step: int = 50
    min_drop: int = 50
    lock_delay: int = 500
    lock_step: int = 100
    queue_size: int = 5
    words_per_level: int = 10
    cascade_limit: int = 20

    @classmethod
    def from_mapping(cls, cfg: Mapping[str, Any]) -> "GameConfig":
        return cls(
            board_width=int(cfg["BOARD_WIDTH"]),
            board_height=int(cfg["BOARD_HEIGHT"]),
            drop_speed=int(cfg["DROP_SPEED_MS"]),
            drop_step=int(cfg["DROP_STEP_PER_LEVEL_MS"]),
            min_drop=int(cfg["MIN_DROP_MS"]),
            lock_delay=int(cfg["LOCK_DELAY_MS"]),
            lock_step=int(cfg["LOCK_STEP_MS"]),
            queue_size=int(cfg["QUEUE_SIZE"]),
            words_per_level=int(cfg["WORDS_PER_LEVEL"]),
            cascade_limit=int(cfg["CASCADE_LIMIT"]),
        )

    def drop_interval(self, level: int) -> int:
        """Milliseconds between automatic drops at the given level (1-based)."""
        return max(self.min_drop, self.drop_speed - (level - 1) * self.drop_step)
