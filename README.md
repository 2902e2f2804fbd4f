# slovogrid

A console word game on a square letter grid. The game itself asks for
2–4 players.

A starting word is written into the middle row of the board. On each turn
a player puts one letter into an empty cell next to a filled one (up, down,
left or right), or skips the turn. After every placement the board is
searched for a dictionary word that runs through the new letter as an
unbroken, non-self-crossing chain of horizontally or vertically adjacent
cells. Each word can be claimed only once per game. Every accepted
placement earns the player one point, whether or not a word was found.

The game ends when the board is full or no unused dictionary word can be
formed any more. The player with the most points wins (on equal scores,
the one who comes first). If the players skip, in a row, three times as
many turns as there are players, the game ends in a draw.

## Installation

```
pip install .
```

## Playing

By default the game reads its word list from `dictionary.txt` in the
current directory: one word per line, UTF-8 encoded, empty lines ignored.
If the file cannot be opened, a message is printed to standard error and
the dictionary is empty. Start the game with:

```
slovogrid
```

or point it at another word list:

```
slovogrid --dictionary words.txt
```

You are asked for:

1. the number of players;
2. the board size, which must be odd (for example 5);
3. the starting word, which is centred in the middle row (cut to the
   board width if longer).

Before each turn the screen is cleared with the system's `clear` (or
`cls` on Windows) command, and the scores, the last word found and the
board are shown. On your turn enter the row, the column and the letter
separated by spaces, for example:

```
1 2 а
```

or type `skip` to pass. An invalid move (occupied or missing cell, a cell
with no filled neighbour, or a malformed line) is reported and you are
asked to press Enter and try again.

## Using it as a library

```python
from slovogrid.board import Board, InvalidMoveError
from slovogrid.player import Player

board = Board(5, 5, "балда", dictionary=["балда", "лад"])
player = Player("Игрок 1")
word = board.place_letter(1, 2, "а", player)  # found word or None
print(board.render())
```

- `slovogrid.board.Board(rows, cols, center_word, dictionary=None)` —
  without `dictionary` it loads `dictionary.txt` via
  `slovogrid.board.load_dictionary(filename)`. Its methods are
  `is_cell_empty`, `has_adjacent`, `place_letter` (raises
  `InvalidMoveError`), `has_moves_left`, `is_full`, `render` and
  `display`; `used_words` and `search_text` hold the game's progress.
- `slovogrid.player.Player(name)` keeps `score` and `pass_count`, with
  `add_score`, `increment_pass` and `reset_pass`.
- `slovogrid.search.trace_word(grid, row, col, word)` returns the first
  path spelling a word from one cell, or `None`;
  `slovogrid.search.find_word_through(grid, word, row, col)` tells
  whether a word can be traced through a given cell.
- `slovogrid.game` offers `points_suffix`, `parse_move`, `format_scores`,
  `pick_winner` and `main(argv=None)`.

## What it does not do

The game keeps no log: nothing is written to a file during or after a
game. Only one letter is placed per turn and paths run only horizontally
or vertically; there is no diagonal variant. Words are checked against the
given word list only.

## Running the tests

```
pip install .[test]
pytest
```