
"""
Per-player game engine.

Every public method takes a GameState and returns a new one; nothing is
edited in place. The generator carried by a state is never drawn from
directly: the engine clones it, draws from the clone and stores the clone in
the returned state, so calling a method twice with the same state gives the
same result. Illegal moves return the state unchanged and a blocked spawn
ends the match (over=True), after which every method is a no-op.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from letterfall_board import (Board, add_junk_rows, create_board, hard_drop_row,
                              is_valid_position, place_piece, top_rows_have_space)
from letterfall_cascade import process_cascades
from letterfall_config import CONFIG, GameConfig
from letterfall_piece import Piece, PieceSource, rotate_piece
from letterfall_rng import SplitMix64
from letterfall_scoring import calculate_score
from letterfall_words import Dictionary

logger = logging.getLogger(__name__)

SPAWN_ROWS = 4


@dataclass(frozen=True)
class GameState:
    board: Board
    rng: SplitMix64
    active: Optional[Piece] = None
    queue: Tuple[int, ...] = ()      # upcoming shape indices
    bag: Tuple[int, ...] = ()        # shapes left in the current seven-bag
    score: int = 0
    combo: int = 0
    level: int = 1
    lines_cleared: int = 0           # words cleared so far
    over: bool = False
    paused: bool = False
    drop_timer: int = 0
    lock_timer: int = 0
    words_found: Tuple[str, ...] = ()


class GameEngine:
    def __init__(self, config: Optional[GameConfig] = None, dictionary: Optional[Dictionary] = None):
        self.config = config or GameConfig.from_mapping(CONFIG)
        self.dictionary = dictionary if dictionary is not None else Dictionary()

    # ---------- setup ----------
    def create_state(self, seed: Optional[int] = None) -> GameState:
        """Empty board, nothing spawned yet."""
        return GameState(
            board=create_board(self.config.board_width, self.config.board_height),
            rng=SplitMix64(seed),
        )

    def init_game(self, state: GameState) -> GameState:
        rng = state.rng.clone()
        source = self._source(rng, state.bag)
        active, queue = self._next_active(source, state.queue)
        over = active is None or not self._spawn_ok(state.board, active)
        return replace(
            state,
            active=None if over else active,
            queue=queue,
            bag=source.bag,
            rng=rng,
            over=over,
            drop_timer=0,
            lock_timer=0,
        )

    def new_game(self, seed: Optional[int] = None) -> GameState:
        state = self.init_game(self.create_state(seed))
        logger.info("New game, seed state %r", state.rng)
        return state

    # ---------- clocked ----------
    def tick(self, state: GameState, delta_ms: int) -> GameState:
        if state.over or state.paused or state.active is None:
            return state
        drop_timer = state.drop_timer + delta_ms
        if drop_timer < self.config.drop_interval(state.level):
            return replace(state, drop_timer=drop_timer)
        return replace(self.move_down(replace(state, drop_timer=drop_timer)), drop_timer=0)

    # ---------- input ----------
    def move_left(self, state: GameState) -> GameState:
        return self._shift(state, -1)

    def move_right(self, state: GameState) -> GameState:
        return self._shift(state, 1)

    def rotate(self, state: GameState) -> GameState:
        if not self._can_act(state):
            return state
        active = state.active
        if not is_valid_position(state.board, active, rotation=(active.rotation + 1) % 4):
            return state
        return replace(state, active=rotate_piece(active), lock_timer=0)

    def move_down(self, state: GameState) -> GameState:
        """Soft drop one row, or advance the lock timer while grounded."""
        if not self._can_act(state):
            return state
        active = state.active
        if is_valid_position(state.board, active, row=active.row + 1):
            return replace(state, active=active.moved(drow=1), lock_timer=0)
        lock_timer = state.lock_timer + self.config.lock_step
        if lock_timer >= self.config.lock_delay:
            return self._lock(state)
        return replace(state, lock_timer=lock_timer)

    soft_drop = move_down

    def hard_drop(self, state: GameState) -> GameState:
        if not self._can_act(state):
            return state
        row = hard_drop_row(state.board, state.active)
        return self._lock(replace(state, active=replace(state.active, row=row)))

    def toggle_pause(self, state: GameState) -> GameState:
        if state.over:
            return state
        return replace(state, paused=not state.paused)

    def ghost_row(self, state: GameState) -> Optional[int]:
        if state.active is None:
            return None
        return hard_drop_row(state.board, state.active)

    # ---------- attacks ----------
    def add_junk_rows(self, state: GameState, rows: int) -> GameState:
        """Push junk in from below; an active piece that now overlaps is lifted."""
        if state.over or rows <= 0:
            return state
        rng = state.rng.clone()
        board = add_junk_rows(state.board, rows, rng)
        active = state.active
        if active is not None and not is_valid_position(board, active):
            lifted = next((active.moved(drow=-up) for up in range(1, active.row + 1)
                           if is_valid_position(board, active, row=active.row - up)), None)
            if lifted is None:
                logger.info("Topped out by %d junk rows, final score %d", rows, state.score)
                return replace(state, board=board, rng=rng, active=None, over=True)
            active = lifted
        return replace(state, board=board, rng=rng, active=active)

    # ---------- internals ----------
    def _can_act(self, state: GameState) -> bool:
        return not state.over and not state.paused and state.active is not None

    def _shift(self, state: GameState, dcol: int) -> GameState:
        if not self._can_act(state):
            return state
        active = state.active
        if not is_valid_position(state.board, active, col=active.col + dcol):
            return state
        return replace(state, active=active.moved(dcol=dcol), lock_timer=0)

    def _source(self, rng: SplitMix64, bag: Tuple[int, ...]) -> PieceSource:
        return PieceSource(rng, bag, board_width=self.config.board_width)

    def _next_active(self, source: PieceSource, queue: Tuple[int, ...]) -> Tuple[Optional[Piece], Tuple[int, ...]]:
        """Pop the head of the queue as a lettered piece, keeping the queue topped up."""
        pending = list(queue)
        while len(pending) < self.config.queue_size:
            pending.append(source.next_shape())
        if not pending:
            return None, ()
        piece = source.spawn(pending.pop(0))
        while len(pending) < self.config.queue_size:
            pending.append(source.next_shape())
        return piece, tuple(pending)

    def _spawn_ok(self, board: Board, piece: Piece) -> bool:
        return top_rows_have_space(board, SPAWN_ROWS) and is_valid_position(board, piece)

    def _lock(self, state: GameState) -> GameState:
        board = place_piece(state.board, state.active)
        result = process_cascades(board, self.dictionary, self.config.cascade_limit)
        gained = sum(calculate_score(w.word, w.combo, w.has_wildcard) for w in result.cleared)
        lines = state.lines_cleared + len(result.words_cleared)

        rng = state.rng.clone()
        source = self._source(rng, state.bag)
        active, queue = self._next_active(source, state.queue)
        over = active is None or not self._spawn_ok(result.board, active)
        if over:
            logger.info("Game over: score %d, %d words", state.score + gained, lines)

        return replace(
            state,
            board=result.board,
            active=None if over else active,
            queue=queue,
            bag=source.bag,
            rng=rng,
            score=state.score + gained,
            combo=result.cascade_count if result.cascade_count > 1 else 0,
            level=lines // self.config.words_per_level + 1,
            lines_cleared=lines,
            over=over,
            drop_timer=0,
            lock_timer=0,
            words_found=state.words_found + result.words_cleared,
        )
