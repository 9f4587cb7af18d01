import io

from fillerbot.board import ALLY, ENEMY, EMPTY, Board, Piece, manhattan, read_board
from fillerbot.solver import (
    best_position,
    fill_distances,
    main,
    placement_score,
    play,
)

PLAYER_LINE_P1 = "$$$ exec p1 : [players/pcomic.filler]"
PLAYER_LINE_P2 = "$$$ exec p2 : [players/pcomic.filler]"


def _board(rows, ally="O"):
    width = len(rows[0])
    lines = ["    " + "".join(str(k % 10) for k in range(width))]
    lines += [f"{i:03d} {row}" for i, row in enumerate(rows)]
    return read_board(f"Plateau {len(rows)} {width}:", lines, ally)


def test_fill_distances_match_nearest_enemy():
    board = _board(["O....", ".....", "...X."])
    fill_distances(board)
    assert board.cells[0][0] == ALLY
    assert board.cells[2][3] == ENEMY
    for i, row in enumerate(board.cells):
        for j, value in enumerate(row):
            if (i, j) not in {(0, 0), (2, 3)}:
                assert value == manhattan(2, 3, i, j)


def test_fill_distances_without_enemy():
    board = _board(["O..", "..."])
    fill_distances(board)
    free = [v for row in board.cells for v in row if v != ALLY]
    assert free == [board.height * board.width - 2] * 5


def test_score_out_of_bounds():
    board = _board(["O..", "..X"])
    fill_distances(board)
    piece = Piece(2, 2, [[1, 1], [1, 1]])
    assert placement_score(board, piece, 1, 0) == 0
    assert placement_score(board, piece, 0, 2) == 0


def test_score_rejects_enemy_and_no_overlap():
    board = _board(["O..", "..X"])
    fill_distances(board)
    piece = Piece(1, 1, [[1]])
    assert placement_score(board, piece, 1, 2) == 0
    assert placement_score(board, piece, 0, 1) == 0


def test_score_rejects_double_overlap():
    board = _board(["OO.", "..X"])
    fill_distances(board)
    piece = Piece(1, 2, [[1, 1]])
    assert placement_score(board, piece, 0, 0) == 0


def test_score_sums_covered_cells():
    board = _board(["O...X"])
    fill_distances(board)
    piece = Piece(1, 2, [[1, 1]])
    assert placement_score(board, piece, 0, 0) == ALLY + board.cells[0][1]


def test_best_position_single_block_goes_on_ally():
    board = _board([".....", "..O..", "....X"])
    fill_distances(board)
    assert best_position(board, Piece(1, 1, [[1]])) == (1, 2)


def test_best_position_prefers_lowest_score():
    board = _board(["O...X"])
    fill_distances(board)
    piece = Piece(1, 2, [[1, 1]])
    row, column = best_position(board, piece)
    score = placement_score(board, piece, row, column)
    assert score != 0
    for j in range(board.width):
        other = placement_score(board, piece, 0, j)
        assert other == 0 or other >= score


def test_best_position_none_fits():
    board = _board(["O.", ".X"])
    fill_distances(board)
    piece = Piece(3, 3, [[1] * 3] * 3)
    assert best_position(board, piece) == (0, 0)


def _game(player_line):
    return "\n".join(
        [
            player_line,
            "Plateau 3 5:",
            "    01234",
            "000 .....",
            "001 ..O..",
            "002 ....X",
            "Piece 1 1:",
            "*",
            "",
        ]
    )


def test_play_first_player():
    out = io.StringIO()
    assert play(io.StringIO(_game(PLAYER_LINE_P1)), out, "pcomic") == 1
    assert out.getvalue() == "1 2\n"


def test_play_second_player():
    out = io.StringIO()
    assert play(io.StringIO(_game(PLAYER_LINE_P2)), out, "pcomic") == 1
    assert out.getvalue() == "2 4\n"


def test_play_without_player_line():
    out = io.StringIO()
    assert play(io.StringIO("Plateau 1 1:\n"), out, "pcomic") == 0
    assert out.getvalue() == ""


def test_play_piece_before_board():
    out = io.StringIO()
    stream = io.StringIO(PLAYER_LINE_P1 + "\nPiece 1 1:\n*\n")
    assert play(stream, out) == 1
    assert out.getvalue() == "0 0\n"


def test_main_reads_stdin(monkeypatch):
    out = io.StringIO()
    monkeypatch.setattr("sys.stdin", io.StringIO(_game(PLAYER_LINE_P1)))
    monkeypatch.setattr("sys.stdout", out)
    assert main([]) == 0
    assert out.getvalue() == "1 2\n"


def test_board_untouched_cells_stay_empty():
    board = Board(1, 2)
    assert board.cells == [[EMPTY, EMPTY]]