
"""DAS/ARR controller turning held keys into discrete engine moves"""
from typing import Callable, Dict, Optional

import pygame

from letterfall_config import CONFIG


class ShiftRepeat:
    """
    Horizontal auto-shift: one step on press, then after DAS_MS a step
    every ARR_MS (0 => every update). Switching or releasing resets.
    """
    def __init__(self):
        self.dir = 0
        self.held_ms = 0.0
        self.last_step_ms = 0.0
        self.did_initial = False

    def update(self, dt_ms: float, left_held: bool, right_held: bool) -> int:
        ndir = (-1 if left_held else 0) + (1 if right_held else 0)
        if ndir != self.dir:
            self.dir = ndir
            self.held_ms = 0.0
            self.last_step_ms = 0.0
            self.did_initial = False
        if self.dir == 0:
            return 0
        self.held_ms += dt_ms
        if not self.did_initial:
            self.did_initial = True
            return self.dir
        if self.held_ms < CONFIG["DAS_MS"]:
            return 0
        arr = CONFIG["ARR_MS"]
        if arr == 0:
            return self.dir
        self.last_step_ms += dt_ms
        if self.last_step_ms >= arr:
            self.last_step_ms = 0.0
            return self.dir
        return 0


def key_actions(engine) -> Dict[int, Callable]:
    """Single-press keys mapped to engine operations."""
    return {
        pygame.K_UP: engine.rotate,
        pygame.K_x: engine.rotate,
        pygame.K_DOWN: engine.move_down,
        pygame.K_SPACE: engine.hard_drop,
        pygame.K_p: engine.toggle_pause,
    }


def action_for_key(engine, key: int) -> Optional[Callable]:
    return key_actions(engine).get(key)
