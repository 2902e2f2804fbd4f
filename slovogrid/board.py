"""The playing field: letters, dictionary and used words."""

from __future__ import annotations

import sys
from collections.abc import Iterable

from slovogrid.player import Player
from slovogrid.search import find_word_through

EMPTY = " "
DEFAULT_DICTIONARY = "dictionary.txt"

_NEIGHBOURS = ((1, 0), (-1, 0), (0, 1), (0, -1))


class InvalidMoveError(ValueError):
    """Raised when a letter cannot be placed on the requested cell."""


def load_dictionary(filename: str) -> list[str]:
    """Read one word per line from a UTF-8 file, skipping empty lines.

    A file that cannot be opened yields an empty dictionary and a message
    on standard error.
    """
    try:
        with open(filename, encoding="utf-8") as handle:
            return [line.rstrip("\r\n") for line in handle if line.rstrip("\r\n")]
    except OSError:
        print(f"Не удалось открыть файл: {filename}", file=sys.stderr)
        return []


class Board:
    """A rectangular grid with a starting word in its middle row."""

    def __init__(
        self,
        rows: int,
        cols: int,
        center_word: str,
        dictionary: Iterable[str] | None = None,
    ) -> None:
        self.rows = rows
        self.cols = cols
        self.grid: list[list[str]] = [[EMPTY] * cols for _ in range(rows)]
        word = center_word[:cols]
        offset = (cols - len(word)) // 2
        if rows > 0:
            self.grid[rows // 2][offset : offset + len(word)] = list(word)
        self.dictionary: list[str] = (
            load_dictionary(DEFAULT_DICTIONARY)
            if dictionary is None
            else list(dictionary)
        )
        self.used_words: set[str] = set()
        self.search_text = ""

    def _inside(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_cell_empty(self, row: int, col: int) -> bool:
        """Tell whether the cell exists and holds no letter."""
        return self._inside(row, col) and self.grid[row][col] == EMPTY

    def has_adjacent(self, row: int, col: int) -> bool:
        """Tell whether a horizontal or vertical neighbour holds a letter."""
        return any(
            self._inside(row + dr, col + dc)
            and self.grid[row + dr][col + dc] != EMPTY
            for dr, dc in _NEIGHBOURS
        )

    def _unused_words(self) -> list[str]:
        return [w for w in self.dictionary if w not in self.used_words]

    def place_letter(self, row: int, col: int, letter: str, player: Player) -> str | None:
        """Put ``letter`` on the board for ``player`` and award one point.

        Returns the first unused dictionary word that now runs through the
        cell, or ``None``. Raises InvalidMoveError for an occupied, missing
        or isolated cell.
        """
        if not self.is_cell_empty(row, col) or not self.has_adjacent(row, col):
            raise InvalidMoveError("Ход недопустим: неверная позиция.")
        self.grid[row][col] = letter
        found = next(
            (
                w
                for w in self._unused_words()
                if find_word_through(self.grid, w, row, col)
            ),
            None,
        )
        if found is not None:
            self.used_words.add(found)
            self.search_text = f"Найдено слово: {found}\n"
        player.add_score(1)
        return found

    def has_moves_left(self) -> bool:
        """Tell whether some letter on some open cell would form an unused word."""
        words = self._unused_words()
        for row in range(self.rows):
            for col in range(self.cols):
                if not self.is_cell_empty(row, col) or not self.has_adjacent(row, col):
                    continue
                for word in words:
                    for letter in word:
                        self.grid[row][col] = letter
                        try:
                            if find_word_through(self.grid, word, row, col):
                                return True
                        finally:
                            self.grid[row][col] = EMPTY
        return False

    def is_full(self) -> bool:
        """Tell whether every cell holds a letter."""
        return all(ch != EMPTY for line in self.grid for ch in line)

    def render(self) -> str:
        """Return the board with row and column numbers as text."""
        header = "   " + "".join(f"{j} " for j in range(self.cols))
        lines = [header]
        lines.extend(
            f"{i}: " + "".join(f"{ch} " for ch in line)
            for i, line in enumerate(self.grid)
        )
        return "\n".join(lines) + "\n"

    def display(self) -> None:
        """Write the rendered board to standard output and flush it."""
        out = sys.stdout
        for line in self.render().splitlines(keepends=True):
            out.write(line)
        out.flush()