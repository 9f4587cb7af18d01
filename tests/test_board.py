import pytest

from fillerbot.board import (
    ALLY,
    EMPTY,
    ENEMY,
    Board,
    Piece,
    detect_player,
    find_substring,
    manhattan,
    parse_size,
    read_board,
    read_piece,
)

PLAYER_LINE_P1 = "$$$ exec p1 : [players/pcomic.filler]"
PLAYER_LINE_P2 = "$$$ exec p2 : [players/pcomic.filler]"


def test_find_substring_found():
    assert find_substring(PLAYER_LINE_P1, "pcomic") > 0
    assert find_substring("Plateau 15 17:", "Plateau") > 0


def test_find_substring_index_past_match():
    text = "xxabc"
    assert find_substring(text, "abc") == len(text)


def test_find_substring_missing_or_empty():
    assert find_substring("Piece 2 3:", "Plateau") == 0
    assert find_substring("", "abc") == 0
    assert find_substring("abc", "") == 0


def test_find_substring_skips_overlapping_start():
    assert find_substring("ppcomic", "pcomic") == 0


def test_manhattan_invariants():
    assert manhattan(3, 4, 3, 4) == 0
    assert manhattan(1, 2, 5, 9) == manhattan(5, 9, 1, 2)
    assert manhattan(0, 0, 2, 2) <= manhattan(0, 0, 1, 1) + manhattan(1, 1, 2, 2)


def test_parse_size():
    assert parse_size("Plateau 15 17:") == (15, 17)
    assert parse_size("Piece 2 3:") == (2, 3)


def test_parse_size_error():
    with pytest.raises(ValueError):
        parse_size("Plateau")


def test_detect_player_p1_and_p2():
    assert detect_player(["hello", PLAYER_LINE_P1], "pcomic") == "O"
    assert detect_player([PLAYER_LINE_P2], "pcomic") == "X"
    assert detect_player([PLAYER_LINE_P1], "someone") == "X"


def test_detect_player_consumes_up_to_player_line():
    lines = iter(["a", PLAYER_LINE_P1, "after"])
    detect_player(lines, "pcomic")
    assert next(lines) == "after"


def test_detect_player_missing():
    with pytest.raises(ValueError):
        detect_player(["no", "player"], "pcomic")


def test_read_board_cells():
    lines = ["    01234", "000 .....", "001 ..O..", "002 x...."]
    board = read_board("Plateau 3 5:", lines, "O")
    assert (board.height, board.width) == (3, 5)
    assert board.cells[1][2] == ALLY
    assert board.cells[2][0] == ENEMY
    others = [
        value
        for i, row in enumerate(board.cells)
        for j, value in enumerate(row)
        if (i, j) not in {(1, 2), (2, 0)}
    ]
    assert set(others) == {EMPTY}


def test_read_board_other_side():
    lines = ["    012", "000 O.X"]
    board = read_board("Plateau 1 3:", lines, "X")
    assert board.cells == [[ENEMY, EMPTY, ALLY]]


def test_read_board_needs_ruler():
    with pytest.raises(ValueError):
        read_board("Plateau 1 3:", [], "O")


def test_read_board_rejects_bad_ally():
    with pytest.raises(ValueError):
        read_board("Plateau 1 3:", ["    012", "000 ..."], "Z")


def test_read_piece():
    piece = read_piece("Piece 2 3:", ["*..", ".**"])
    assert isinstance(piece, Piece)
    assert piece.cells == [[1, 0, 0], [0, 1, 1]]


def test_read_piece_leaves_following_lines():
    lines = iter(["*", "next"])
    piece = read_piece("Piece 1 1:", lines)
    assert piece.cells == [[1]]
    assert next(lines) == "next"


def test_board_default_grid():
    board = Board(2, 3)
    assert board.cells == [[EMPTY] * 3, [EMPTY] * 3]