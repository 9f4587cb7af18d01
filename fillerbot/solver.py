"""Choosing where to place each piece, and the game loop that answers the arena."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, TextIO

from .board import (
    ALLY,
    ENEMY,
    Board,
    Piece,
    detect_player,
    find_substring,
    manhattan,
    read_board,
    read_piece,
)
from .printf import printf

DEFAULT_NAME = "pcomic"
FIELD_KEYWORD = "Plateau"
PIECE_KEYWORD = "Piece"


def fill_distances(board: Board) -> None:
    """Write into every free cell its distance to the nearest enemy cell.

    Distances are capped at ``height * width - 2``, which is also the
    value every free cell gets when there is no enemy on the board.
    """
    enemies = [
        (i, j)
        for i, row in enumerate(board.cells)
        for j, value in enumerate(row)
        if value == ENEMY
    ]
    limit = board.height * board.width - 2
    for i, row in enumerate(board.cells):
        for j, value in enumerate(row):
            if value in (ALLY, ENEMY):
                continue
            row[j] = min([limit, *(manhattan(ei, ej, i, j) for ei, ej in enemies)])


def placement_score(board: Board, piece: Piece, x: int, y: int) -> int:
    """Score the piece with its top-left corner on row ``x``, column ``y``.

    A placement is legal when exactly one block covers our own cell and
    none covers the enemy; its score is the sum of the covered cells.
    Illegal placements, and those that do not fit, score 0.
    """
    if x < 0 or y < 0:
        return 0
    if x + piece.height > board.height or y + piece.width > board.width:
        return 0
    overlaps = 0
    total = 0
    for piece_row, board_row in zip(piece.cells, board.cells[x : x + piece.height]):
        for block, cell in zip(piece_row, board_row[y : y + piece.width]):
            if block != 1:
                continue
            if cell == ALLY:
                overlaps += 1
            if cell == ENEMY or overlaps > 1:
                return 0
            total += cell
    return total if overlaps == 1 else 0


def best_position(board: Board, piece: Piece) -> tuple[int, int]:
    """Return the placement with the lowest non-zero score, first found on ties.

    ``(0, 0)`` is returned when no placement scores.
    """
    best = (0, 0)
    best_score: int | None = None
    for i in range(board.height):
        for j in range(board.width):
            score = placement_score(board, piece, i, j)
            if score and (best_score is None or score < best_score):
                best_score = score
                best = (i, j)
    return best


def play(stream: Iterable[str], out: TextIO, name: str = DEFAULT_NAME) -> int:
    """Read the arena's messages from ``stream`` and answer each piece on ``out``.

    Returns the number of moves written.
    """
    lines = (line.rstrip("\n") for line in stream)
    try:
        ally = detect_player(lines, name)
    except ValueError:
        return 0
    board = Board(0, 0)
    moves = 0
    for line in lines:
        if not line.startswith("P"):
            continue
        if find_substring(line, FIELD_KEYWORD):
            try:
                board = read_board(line, lines, ally)
            except ValueError:
                break
            fill_distances(board)
        elif find_substring(line, PIECE_KEYWORD):
            try:
                piece = read_piece(line, lines)
            except ValueError:
                break
            row, column = best_position(board, piece)
            printf("%d %d\n", row, column, file=out)
            moves += 1
    return moves


def main(argv: list[str] | None = None) -> int:
    """Play one game on standard input and output."""
    parser = argparse.ArgumentParser(prog="fillerbot", description="Filler player.")
    parser.add_argument(
        "--name", default=DEFAULT_NAME, help="player name announced by the arena"
    )
    args = parser.parse_args(argv)
    play(sys.stdin, sys.stdout, args.name)
    return 0