
"""Cascade resolution: match, clear, settle, repeat"""
import logging
from dataclasses import dataclass
from typing import List, Tuple

from letterfall_board import Board, apply_gravity, clear_marked, mark_cells
from letterfall_words import Dictionary, find_words

logger = logging.getLogger(__name__)

CASCADE_LIMIT = 20


@dataclass(frozen=True)
class ClearedWord:
    word: str
    combo: int          # 0-based cascade iteration that cleared it
    has_wildcard: bool


@dataclass(frozen=True)
class CascadeResult:
    board: Board
    words_cleared: Tuple[str, ...]
    cascade_count: int
    cleared: Tuple[ClearedWord, ...] = ()


def process_cascades(board: Board, dictionary: Dictionary, limit: int = CASCADE_LIMIT) -> CascadeResult:
    """Clear matched words and apply gravity until the board is quiet or limit passes run."""
    cascade_count = 0
    cleared: List[ClearedWord] = []
    while True:
        matches = find_words(board, dictionary)
        if not matches:
            break
        if cascade_count >= limit:
            logger.warning("Cascade limit of %d reached, keeping partial result", limit)
            break
        board = mark_cells(board, (cell for m in matches for cell in m.cells))
        board = apply_gravity(clear_marked(board))
        cleared.extend(ClearedWord(m.word, cascade_count, m.has_wildcard) for m in matches)
        logger.debug("Cascade step %d cleared %s", cascade_count, [m.word for m in matches])
        cascade_count += 1
    return CascadeResult(
        board=board,
        words_cleared=tuple(w.word for w in cleared),
        cascade_count=cascade_count,
        cleared=tuple(cleared),
    )
