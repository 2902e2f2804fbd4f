import pytest

from slovogrid.board import Board, InvalidMoveError, load_dictionary
from slovogrid.player import Player


@pytest.fixture
def board():
    return Board(3, 3, "кот", dictionary=["акот", "кот"])


def test_center_word_in_middle_row(board):
    assert board.grid[1] == ["к", "о", "т"]
    assert board.grid[0] == [" ", " ", " "]
    assert board.grid[2] == [" ", " ", " "]


def test_short_center_word_is_centred():
    b = Board(5, 5, "ab", dictionary=[])
    assert "".join(b.grid[2]) == " ab  "


def test_long_center_word_is_truncated():
    b = Board(3, 3, "абвгд", dictionary=[])
    assert "".join(b.grid[1]) == "абв"


def test_is_cell_empty(board):
    assert board.is_cell_empty(0, 0) is True
    assert board.is_cell_empty(1, 1) is False
    assert board.is_cell_empty(-1, 0) is False
    assert board.is_cell_empty(0, 3) is False


def test_has_adjacent(board):
    assert board.has_adjacent(0, 1) is True
    b = Board(5, 5, "a", dictionary=[])
    assert b.has_adjacent(0, 0) is False


def test_place_letter_finds_word(board):
    player = Player("p")
    found = board.place_letter(0, 0, "а", player)
    assert found == "акот"
    assert board.grid[0][0] == "а"
    assert "акот" in board.used_words
    assert board.search_text == "Найдено слово: акот\n"
    assert player.score == 1


def test_place_letter_scores_even_without_word(board):
    player = Player("p")
    assert board.place_letter(2, 1, "я", player) is None
    assert player.score == 1
    assert board.search_text == ""


def test_used_word_not_found_again():
    b = Board(3, 3, "кот", dictionary=["акот"])
    player = Player("p")
    assert b.place_letter(0, 0, "а", player) == "акот"
    assert b.place_letter(2, 0, "а", player) is None
    assert player.score == 2


@pytest.mark.parametrize("cell", [(1, 1), (5, 5), (-1, 0)])
def test_place_letter_rejects_bad_cells(board, cell):
    player = Player("p")
    with pytest.raises(InvalidMoveError):
        board.place_letter(*cell, "а", player)
    assert player.score == 0


def test_place_letter_rejects_isolated_cell():
    b = Board(5, 5, "a", dictionary=[])
    with pytest.raises(InvalidMoveError):
        b.place_letter(0, 0, "b", Player("p"))
    assert b.grid[0][0] == " "


def test_has_moves_left_true_and_grid_restored(board):
    before = [row[:] for row in board.grid]
    assert board.has_moves_left() is True
    assert board.grid == before


def test_has_moves_left_false_without_words():
    b = Board(3, 3, "кот", dictionary=[])
    assert b.has_moves_left() is False


def test_has_moves_left_false_once_words_used():
    b = Board(3, 3, "кот", dictionary=["акот"])
    b.place_letter(0, 0, "а", Player("p"))
    assert b.has_moves_left() is False


def test_is_full():
    b = Board(1, 3, "абв", dictionary=[])
    assert b.is_full() is True
    assert Board(3, 3, "абв", dictionary=[]).is_full() is False


def test_render():
    b = Board(1, 2, "ab", dictionary=[])
    assert b.render() == "   0 1 \n0: a b \n"


def test_display_prints_render(board, capsys):
    board.display()
    assert capsys.readouterr().out == board.render()


def test_load_dictionary_skips_blank_lines(tmp_path):
    path = tmp_path / "dict.txt"
    path.write_text("кот\n\nток\n", encoding="utf-8")
    assert load_dictionary(str(path)) == ["кот", "ток"]


def test_load_dictionary_missing_file(tmp_path, capsys):
    missing = tmp_path / "none.txt"
    assert load_dictionary(str(missing)) == []
    assert "Не удалось открыть файл" in capsys.readouterr().err


def test_board_uses_dictionary_copy():
    words = ["кот"]
    b = Board(3, 3, "кот", dictionary=words)
    words.append("ток")
    assert b.dictionary == ["кот"]