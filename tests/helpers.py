from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from letterfall_board import strings_to_board
from letterfall_engine import GameEngine, GameState
from letterfall_piece import SHAPES, Piece


def piece(shape_index: int, letters: str, row: int = 0, col: int = 0) -> Piece:
    return Piece(shape_index, SHAPES[shape_index], tuple(letters), row, col, 0)


def staged(engine: GameEngine, rows: Sequence[str], active: Piece, seed: int = 7) -> GameState:
    """A freshly started game with the board and active piece swapped for known ones."""
    state = engine.new_game(seed)
    board = strings_to_board(rows, engine.config.board_width, engine.config.board_height)
    return replace(state, board=board, active=active)
