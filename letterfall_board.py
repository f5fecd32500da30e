
"""Board model: cells, collision, placement, clearing, gravity, junk rows"""
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Optional, Sequence, Tuple

from letterfall_letters import ALPHABET, BOMB_CHAR, WILDCARD_CHAR
from letterfall_piece import Piece, rotate_piece


class CellKind(Enum):
    EMPTY = "empty"
    LETTER = "letter"
    JUNK = "junk"
    WILD = "wild"
    BOMB = "bomb"


@dataclass(frozen=True)
class Cell:
    kind: CellKind = CellKind.EMPTY
    ch: Optional[str] = None
    marked: bool = False

    @property
    def is_empty(self) -> bool:
        return self.kind is CellKind.EMPTY


EMPTY = Cell()

# Board is ROWS x COLS of Cell, rows top to bottom
Board = Tuple[Tuple[Cell, ...], ...]


def create_board(width: int = 10, height: int = 20) -> Board:
    return tuple(tuple(EMPTY for _ in range(width)) for _ in range(height))


def board_width(board: Board) -> int:
    return len(board[0]) if board else 0


def board_height(board: Board) -> int:
    return len(board)


def is_valid_position(board: Board, piece: Piece, row: Optional[int] = None,
                      col: Optional[int] = None, rotation: Optional[int] = None) -> bool:
    """True if the piece, optionally moved to row/col or turned to rotation, fits."""
    test = piece
    if rotation is not None:
        test = rotate_piece(piece, (rotation - piece.rotation) % 4)
    test = replace(test,
                   row=piece.row if row is None else row,
                   col=piece.col if col is None else col)
    height, width = board_height(board), board_width(board)
    for r, c, _ in test.cells():
        if r < 0 or r >= height or c < 0 or c >= width:
            return False
        if not board[r][c].is_empty:
            return False
    return True


def cell_for_letter(letter: str) -> Cell:
    if letter == WILDCARD_CHAR:
        return Cell(CellKind.WILD, WILDCARD_CHAR)
    if letter == BOMB_CHAR:
        return Cell(CellKind.BOMB)
    return Cell(CellKind.LETTER, letter)


def place_piece(board: Board, piece: Piece) -> Board:
    """Write the piece's letters into a copy of the board (no collision check)."""
    rows = [list(row) for row in board]
    height, width = board_height(board), board_width(board)
    for r, c, letter in piece.cells():
        if 0 <= r < height and 0 <= c < width:
            rows[r][c] = cell_for_letter(letter)
    return tuple(tuple(row) for row in rows)


def mark_cells(board: Board, cells: Iterable[Tuple[int, int]]) -> Board:
    """Unmark everything, then mark the given coordinates (duplicates are harmless)."""
    rows = [[replace(cell, marked=False) if cell.marked else cell for cell in row] for row in board]
    for r, c in cells:
        if 0 <= r < len(rows) and 0 <= c < len(rows[r]):
            rows[r][c] = replace(rows[r][c], marked=True)
    return tuple(tuple(row) for row in rows)


def clear_marked(board: Board) -> Board:
    return tuple(
        tuple(EMPTY if cell.marked else cell for cell in row)
        for row in board
    )


def apply_gravity(board: Board) -> Board:
    """Compact each column downward, keeping the order of its filled cells."""
    height, width = board_height(board), board_width(board)
    columns = []
    for c in range(width):
        filled = [board[r][c] for r in range(height) if not board[r][c].is_empty]
        columns.append([EMPTY] * (height - len(filled)) + filled)
    return tuple(tuple(columns[c][r] for c in range(width)) for r in range(height))


def add_junk_rows(board: Board, count: int, rng) -> Board:
    """Push the stack up by count rows of junk; 10% of junk cells are left open."""
    if count <= 0:
        return board
    height, width = board_height(board), board_width(board)
    count = min(count, height)
    rows = list(board[count:])
    for _ in range(count):
        row = []
        for _ in range(width):
            if rng.next_bool(0.1):
                row.append(EMPTY)
            else:
                row.append(Cell(CellKind.JUNK, ALPHABET[rng.next_int(len(ALPHABET))]))
        rows.append(tuple(row))
    return tuple(rows)


def hard_drop_row(board: Board, piece: Piece) -> int:
    """Row the piece would land on if dropped straight down."""
    row = piece.row
    while is_valid_position(board, piece, row=row + 1):
        row += 1
    return row


def count_filled(board: Board) -> int:
    return sum(1 for row in board for cell in row if not cell.is_empty)


def top_rows_have_space(board: Board, rows: int = 4) -> bool:
    return any(cell.is_empty for row in board[:rows] for cell in row)


# -------------------------------------------------------------
# TEXT FORM  (. empty, # bomb, ? wild, A-Z letter, a-z junk)
# -------------------------------------------------------------

def cell_to_char(cell: Cell) -> str:
    if cell.kind is CellKind.EMPTY:
        return "."
    if cell.kind is CellKind.BOMB:
        return BOMB_CHAR
    if cell.kind is CellKind.WILD:
        return WILDCARD_CHAR
    if cell.kind is CellKind.JUNK:
        return (cell.ch or "?").lower()
    return cell.ch or "?"


def char_to_cell(ch: str) -> Cell:
    if ch == ".":
        return EMPTY
    if ch.islower():
        return Cell(CellKind.JUNK, ch.upper())
    return cell_for_letter(ch)


def board_to_strings(board: Board) -> list:
    return ["".join(cell_to_char(cell) for cell in row) for row in board]


def strings_to_board(rows: Sequence[str], width: int = 10, height: int = 20) -> Board:
    """Build a board from text rows aligned to the bottom; short rows pad with empties."""
    grid = [[EMPTY] * width for _ in range(height)]
    offset = height - len(rows)
    for y, text in enumerate(rows):
        for x, ch in enumerate(text[:width]):
            grid[offset + y][x] = char_to_cell(ch)
    return tuple(tuple(row) for row in grid)
