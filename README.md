# fillerbot

`fillerbot` is a player for the Filler board game. The game engine starts the
player, then sends it the board and a piece to place, turn after turn, on
standard input. The player answers each piece with one line holding the row
and column where the piece goes.

## How it plays

The bot reads lines until the first one that starts with `$`. If that line
contains the player name and `p1`, the bot plays `O`; otherwise it plays `X`.

For every `Plateau` header it reads the board that follows (a column ruler,
then one line per row) and writes into each free cell its Manhattan distance
to the nearest enemy cell, capped at `height * width - 2`.

For every `Piece` header it reads the piece rows (`.` empty, `*` block) and
tries each top-left position on the board. A placement is legal when exactly
one block of the piece covers one of the bot's own cells and no block covers
an enemy cell. Among the legal placements it picks the one whose covered
cells add up to the lowest score, the first one found on ties. When nothing
fits, it answers `0 0`.

## Running

Install the package, then point the game engine at the `fillerbot` command as
a player:

```
pip install .
fillerbot
fillerbot --name myplayer
```

`--name` sets the player name the bot looks for on the `$` line. The command
reads the game from standard input and writes its moves to standard output,
so it can also be fed a recorded game by hand.

## Using it from Python

```python
import io
from fillerbot.solver import play

game = io.StringIO(
    "$$$ exec p1 : [players/myplayer.filler]\n"
    "Plateau 3 4:\n"
    "    0123\n"
    "000 O...\n"
    "001 ....\n"
    "002 ...X\n"
    "Piece 1 2:\n"
    "**\n"
)
moves = io.StringIO()
play(game, moves, "myplayer")   # returns the number of moves written
print(moves.getvalue())
```

- `fillerbot.board` holds `Board` and `Piece` and the readers for the engine's
  text: `read_board`, `read_piece`, `parse_size`, `detect_player`, plus
  `manhattan` and `find_substring`.
- `fillerbot.solver` holds `fill_distances`, `placement_score`,
  `best_position`, `play` and `main`, the function behind the command.

## Formatting

The package also has a printf-style formatter in `fillerbot.printf`:

```python
from fillerbot.printf import sprintf

sprintf("%d %d\n", 3, 7)        # '3 7\n'
sprintf("%-6s|", "ab")          # 'ab    |'
sprintf("%#x", 255)             # '0xff'
sprintf("%.3f", 2.5)            # '2.500'
```

It handles the conversions `c s % b f F d i u o p x X`, the flags
`- + space # 0`, field width and precision (also given as `*`), the length
modifiers `hh h l ll z L`, positional `n$` arguments and `%b` for binary
output. Floating-point values are printed from their exact binary value.
Colour tags such as `{red}`, `{green}`, `{blue}`, `{yellow}`, `{orange}`,
`{pink}`, `{neon}` and `{eoc}` insert a terminal colour escape; the closing
brace of the tag is still copied to the output after it.

`sprintf` returns the expanded string. `printf` writes it to `file` (standard
output by default) and returns the number of characters written, not
counting colour escapes. Both raise `IndexError` when the format needs more
arguments than were given.

The pieces behind it can be used on their own: `fillerbot.spec` parses a
conversion into a `FormatSpec` and walks arguments with `Arguments`;
`fillerbot.numbers`, `fillerbot.floats` and `fillerbot.text` format the
integer, floating-point and character/string/binary conversions;
`fillerbot.floatdigits` does the exact decimal digit arithmetic.

## Tests

```
pip install .[test]
pytest
```