"""The game board and pieces as read from the arena's text protocol."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .spec import atoi

EMPTY = 0
ALLY = -1
ENEMY = -2
PLAYERS = ("O", "X")


def _grid(height: int, width: int) -> list[list[int]]:
    return [[EMPTY] * max(width, 0) for _ in range(max(height, 0))]


@dataclass
class Board:
    """The playing field.

    Cells hold ``ALLY`` or ``ENEMY`` for occupied squares; free squares
    hold ``EMPTY`` until distances to the enemy are filled in.
    """

    height: int
    width: int
    cells: list[list[int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = _grid(self.height, self.width)


@dataclass
class Piece:
    """A piece to place: cells are 1 where the piece has a block, else 0."""

    height: int
    width: int
    cells: list[list[int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = _grid(self.height, self.width)


def find_substring(haystack: str, needle: str) -> int:
    """Look for ``needle`` in ``haystack``; return a positive index if found, else 0.

    The returned index is the one just past the match. The scan resumes
    one character after a failed partial match, so overlapping starts
    are missed, and a partial match cut off by the end of ``haystack``
    counts as found.
    """
    if not haystack or not needle:
        return 0
    i = 0
    while i < len(haystack):
        if haystack[i] == needle[0]:
            matched = 0
            while matched < len(needle) and i < len(haystack):
                if needle[matched] != haystack[i]:
                    matched = 0
                    break
                i += 1
                matched += 1
            if matched:
                return i
        i += 1
    return 0


def manhattan(x: int, y: int, i: int, j: int) -> int:
    """Return the Manhattan distance between ``(x, y)`` and ``(i, j)``."""
    return abs(i - x) + abs(j - y)


def parse_size(line: str) -> tuple[int, int]:
    """Read ``height`` and ``width`` from a header such as ``Plateau 15 17:``."""
    tokens = [token for token in line.split(" ") if token]
    if len(tokens) < 3:
        raise ValueError(f"no size in header line: {line!r}")
    return atoi(tokens[1]), atoi(tokens[2])


def detect_player(lines: Iterable[str], name: str) -> str:
    """Read lines up to the first one starting with ``$`` and return our symbol.

    The player is ``O`` when that line names ``name`` and ``p1``,
    otherwise ``X``.
    """
    for line in lines:
        if line.startswith("$"):
            if find_substring(line, name) and find_substring(line, "p1"):
                return "O"
            return "X"
    raise ValueError("the input holds no player line")


def _row_offset(line: str) -> int:
    index = line.find(" ")
    return index + 1 if index >= 0 else 0


def read_board(header: str, lines: Iterable[str], ally: str) -> Board:
    """Build a board from its header and the lines that follow it.

    The first line after the header is the column ruler and is skipped;
    each row line starts with its number, a space, then the cells.
    """
    if ally not in PLAYERS:
        raise ValueError(f"ally must be one of {PLAYERS}")
    height, width = parse_size(header)
    rows = iter(lines)
    if next(rows, None) is None:
        raise ValueError("the board has no column ruler")
    board = Board(height, width)
    for cells, line in zip(board.cells, rows):
        offset = _row_offset(line)
        for j, ch in enumerate(line[offset : offset + len(cells)]):
            if ch == ".":
                cells[j] = EMPTY
            elif ch.upper() in PLAYERS:
                cells[j] = ALLY if ch.upper() == ally else ENEMY
    return board


def read_piece(header: str, lines: Iterable[str]) -> Piece:
    """Build a piece from its header and its rows of ``.`` and ``*``."""
    height, width = parse_size(header)
    piece = Piece(height, width)
    for cells, line in zip(piece.cells, iter(lines)):
        for j, ch in enumerate(line[: len(cells)]):
            if ch == ".":
                cells[j] = 0
            elif ch == "*":
                cells[j] = 1
    return piece