
"""Shapes, rotation, the seven-bag and the lettered piece source"""
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence, Tuple

from letterfall_letters import random_tile

Shape = Tuple[Tuple[bool, ...], ...]

SHAPE_NAMES = ["I", "O", "T", "S", "Z", "J", "L"]


def _shape(*rows: str) -> Shape:
    return tuple(tuple(ch == "X" for ch in row) for row in rows)


# Minimal bounding boxes, indexed like SHAPE_NAMES
SHAPES: List[Shape] = [
    _shape("X", "X", "X", "X"),
    _shape("XX", "XX"),
    _shape(".X.", "XXX"),
    _shape(".XX", "XX."),
    _shape("XX.", ".XX"),
    _shape("X..", "XXX"),
    _shape("..X", "XXX"),
]


def rotate_cw(shape: Shape) -> Shape:
    return tuple(tuple(row) for row in zip(*shape[::-1]))


def shape_cells(shape: Shape) -> List[Tuple[int, int]]:
    """(row, col) of every filled cell, row-major."""
    return [(r, c) for r, row in enumerate(shape) for c, v in enumerate(row) if v]


def shape_width(shape: Shape) -> int:
    return len(shape[0]) if shape else 0


def shape_height(shape: Shape) -> int:
    return len(shape)


@dataclass(frozen=True)
class Piece:
    shape_index: int
    shape: Shape
    letters: Tuple[str, ...]   # one per shape_cells() entry, same order
    row: int
    col: int
    rotation: int = 0

    @staticmethod
    def spawn(shape_index: int, letters: Sequence[str], board_width: int = 10) -> "Piece":
        shape = SHAPES[shape_index]
        return Piece(shape_index, shape, tuple(letters), 0, (board_width - shape_width(shape)) // 2, 0)

    def cells(self) -> List[Tuple[int, int, str]]:
        """Absolute (row, col, letter) triples."""
        return [(self.row + r, self.col + c, ch)
                for (r, c), ch in zip(shape_cells(self.shape), self.letters)]

    def moved(self, drow: int = 0, dcol: int = 0) -> "Piece":
        return replace(self, row=self.row + drow, col=self.col + dcol)


def rotate_piece(piece: Piece, turns: int = 1) -> Piece:
    """Rotate clockwise by quarter turns; every letter stays on its cell."""
    for _ in range(turns % 4):
        height = shape_height(piece.shape)
        moved = {(c, height - 1 - r): ch
                 for (r, c), ch in zip(shape_cells(piece.shape), piece.letters)}
        shape = rotate_cw(piece.shape)
        piece = replace(
            piece,
            shape=shape,
            letters=tuple(moved[cell] for cell in shape_cells(shape)),
            rotation=(piece.rotation + 1) % 4,
        )
    return piece


# -------------------------------------------------------------
# BAG RANDOMIZER
# -------------------------------------------------------------
class SevenBag:
    """Every shape exactly once per seven draws, order shuffled by the rng."""

    def __init__(self, rng, contents: Optional[Sequence[int]] = None):
        self.rng = rng
        self.bag: List[int] = []
        if contents is None:
            self._refill()
        else:
            self.bag = list(contents)

    def _refill(self):
        self.bag = list(range(len(SHAPES)))
        # Fisher-Yates
        for i in range(len(self.bag) - 1, 0, -1):
            j = self.rng.next_int(i + 1)
            self.bag[i], self.bag[j] = self.bag[j], self.bag[i]

    def next(self) -> int:
        if not self.bag:
            self._refill()
        return self.bag.pop()

    @property
    def contents(self) -> Tuple[int, ...]:
        return tuple(self.bag)


class PieceSource:
    """Draws shapes from the bag and letters them, consuming one generator."""

    def __init__(self, rng, bag: Optional[Sequence[int]] = None, board_width: int = 10):
        self.rng = rng
        self.board_width = board_width
        self.seven_bag = SevenBag(rng, bag)

    @property
    def bag(self) -> Tuple[int, ...]:
        return self.seven_bag.contents

    def next_shape(self) -> int:
        return self.seven_bag.next()

    def letters_for(self, shape_index: int) -> Tuple[str, ...]:
        return tuple(random_tile(self.rng) for _ in shape_cells(SHAPES[shape_index]))

    def spawn(self, shape_index: int) -> Piece:
        return Piece.spawn(shape_index, self.letters_for(shape_index), self.board_width)

    def generate_piece(self) -> Piece:
        return self.spawn(self.next_shape())

    def generate_queue(self, size: int) -> Tuple[int, ...]:
        return tuple(self.next_shape() for _ in range(size))
