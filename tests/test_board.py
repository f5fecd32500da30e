from letterfall_board import (EMPTY, Cell, CellKind, add_junk_rows, apply_gravity, board_to_strings,
                              clear_marked, count_filled, create_board, hard_drop_row,
                              is_valid_position, mark_cells, place_piece, strings_to_board)
from letterfall_rng import SplitMix64

from helpers import piece


def test_empty_board_is_fully_populated():
    board = create_board(10, 20)
    assert len(board) == 20
    assert all(len(row) == 10 for row in board)
    assert all(cell == EMPTY for row in board for cell in row)


def test_valid_position_bounds_and_collisions():
    board = strings_to_board(["q........."])
    bar = piece(0, "ABCD", row=0, col=0)
    assert is_valid_position(board, bar)
    assert not is_valid_position(board, bar, col=-1)
    assert not is_valid_position(board, bar, col=10)
    assert not is_valid_position(board, bar, row=16)      # reaches the junk at (19, 0)
    assert not is_valid_position(board, bar, row=17)
    assert is_valid_position(board, bar, row=15)
    assert not is_valid_position(board, bar, row=-1)
    # lying flat at col 7 would poke out to col 10
    assert not is_valid_position(board, bar, col=7, rotation=1)
    assert is_valid_position(board, bar, col=6, rotation=1)


def test_place_piece_sets_cell_kinds_and_leaves_input_alone():
    board = create_board()
    bar = piece(0, "A?#B", row=16, col=3)
    placed = place_piece(board, bar)
    assert placed[16][3] == Cell(CellKind.LETTER, "A")
    assert placed[17][3].kind is CellKind.WILD
    assert placed[18][3] == Cell(CellKind.BOMB)
    assert placed[19][3] == Cell(CellKind.LETTER, "B")
    assert count_filled(board) == 0
    assert count_filled(placed) == 4


def test_clear_marked_only_removes_marked():
    board = strings_to_board(["CAT", "DOG"])
    marked = mark_cells(board, [(18, 0), (18, 1), (18, 1)])
    cleared = clear_marked(marked)
    assert board_to_strings(cleared)[-2:] == ["..T.......", "DOG......."]
    assert not any(cell.marked for row in cleared for cell in row)


def test_gravity_compacts_columns_independently():
    board = strings_to_board(["A..", ".B.", "...", "C.D", "..."])
    settled = apply_gravity(board)
    assert board_to_strings(settled)[-3:] == ["..........", "A.........", "CBD......."]


def test_gravity_is_idempotent():
    board = apply_gravity(strings_to_board(["Q.a?", "..#.", "Z...", ".x.."]))
    assert apply_gravity(board) == board
    assert apply_gravity(create_board()) == create_board()


def test_junk_rows_push_stack_up():
    board = strings_to_board(["CAT"])
    junked = add_junk_rows(board, 2, SplitMix64(11))
    assert len(junked) == 20 and all(len(row) == 10 for row in junked)
    assert board_to_strings(junked)[17] == "CAT......."
    for row in junked[18:]:
        assert all(cell.kind in (CellKind.JUNK, CellKind.EMPTY) for cell in row)
        assert all(cell.ch for cell in row if cell.kind is CellKind.JUNK)
    assert add_junk_rows(board, 2, SplitMix64(11)) == junked
    assert add_junk_rows(board, 0, SplitMix64(11)) is board


def test_junk_rows_leave_gaps_now_and_then():
    board = add_junk_rows(create_board(), 20, SplitMix64(3))
    kinds = [cell.kind for row in board for cell in row]
    assert CellKind.EMPTY in kinds
    assert kinds.count(CellKind.JUNK) > 150


def test_hard_drop_row_lands_on_stack():
    board = strings_to_board(["q", "q"])
    assert hard_drop_row(board, piece(0, "ABCD", col=0)) == 14
    assert hard_drop_row(board, piece(0, "ABCD", col=1)) == 16


def test_text_form_round_trip():
    rows = ["ab?#", "CAT."]
    board = strings_to_board(rows)
    assert board_to_strings(board)[-2:] == ["ab?#......", "CAT......."]
    assert board[18][0] == Cell(CellKind.JUNK, "A")
