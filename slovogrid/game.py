"""The interactive console game."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from slovogrid.board import DEFAULT_DICTIONARY, Board, InvalidMoveError, load_dictionary
from slovogrid.console import clear_console
from slovogrid.player import Player

SKIP = "skip"
PASS_ROUNDS_FOR_DRAW = 3


def points_suffix(score: int) -> str:
    """Return the ending of the word for "points" that agrees with ``score``."""
    if score % 10 == 1 and score % 100 != 11:
        return "о"
    if 2 <= score % 10 <= 4 and (score % 100 < 10 or score % 100 >= 20):
        return "а"
    return ""


def parse_move(line: str) -> tuple[int, int, str]:
    """Parse "row col letter"; raise ValueError when the line is malformed."""
    parts = line.split(maxsplit=2)
    if len(parts) < 3:
        raise ValueError(f"malformed move: {line!r}")
    return int(parts[0]), int(parts[1]), parts[2][0]


def format_scores(players: Sequence[Player]) -> str:
    """Return the score table shown before every turn."""
    lines = ["СЧЁТ:"]
    lines.extend(
        f"{p.name}: {p.score} очк{points_suffix(p.score)}, "
        f"пропусков подряд: {p.pass_count}"
        for p in players
    )
    return "\n".join(lines) + "\n"


def pick_winner(players: Sequence[Player]) -> Player | None:
    """Return the first player with the highest score, or None if there are none."""
    best: Player | None = None
    for player in players:
        if best is None or player.score > best.score:
            best = player
    return best


def _ask_int(prompt: str) -> int:
    return int(input(prompt).strip())


def _play(dictionary_path: str) -> int:
    try:
        num_players = _ask_int("Количество игроков (2-4): ")
        field_size = _ask_int("Размер поля (нечетное, >=3): ")
    except ValueError:
        print("Ожидалось целое число")
        return 1
    if num_players < 1:
        print("Нужен хотя бы один игрок")
        return 1
    if field_size % 2 == 0:
        print("Размер поля должен быть нечетным ")
        return 1
    center_word = input("Стартовое слово (длина <= поле): ")

    players = [Player(f"Игрок {i}") for i in range(1, num_players + 1)]
    board = Board(field_size, field_size, center_word, load_dictionary(dictionary_path))
    current = 0
    total_passes = 0
    draw = False

    while True:
        clear_console()
        print(format_scores(players), end="")
        print(board.search_text, end="")
        print("\nТекущее поле:")
        board.display()

        player = players[current]
        line = input(f"{player.name}, ваш ход (x y буква или skip): ")
        if line == SKIP:
            player.increment_pass()
            total_passes += 1
            if total_passes >= num_players * PASS_ROUNDS_FOR_DRAW:
                draw = True
                print("Ничья по троекратным пропускам!")
                break
        else:
            try:
                row, col, letter = parse_move(line)
                board.place_letter(row, col, letter, player)
            except (ValueError, InvalidMoveError) as error:
                if isinstance(error, InvalidMoveError):
                    print(error)
                else:
                    print("Ход недопустим: неверная позиция.")
                input("Нажмите Enter...")
                continue
            player.reset_pass()
            total_passes = 0

        if board.is_full() or not board.has_moves_left():
            print("Игра окончена: нет возможных ходов или поле заполнено!")
            break
        current = (current + 1) % num_players

    winner = pick_winner(players)
    if not draw and winner is not None:
        print(f"Победитель: {winner.name} с {winner.score} очками!")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run a game on the console and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="slovogrid", description="Игра «Слова» на квадратном поле."
    )
    parser.add_argument(
        "--dictionary",
        default=DEFAULT_DICTIONARY,
        help="файл словаря, по слову в строке (UTF-8)",
    )
    args = parser.parse_args(argv)
    try:
        return _play(args.dictionary)
    except EOFError:
        print()
        return 1