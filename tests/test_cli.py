import io
import itertools

import pytest

from hexapawn.board import Board, Move, Player
from hexapawn.cli import (
    AGAIN_PROMPT,
    MOVE_PROMPT,
    main,
    play_game,
    read_human_move,
    winner_message,
)

_CANDIDATES = [
    f"{start_col}{start_row}-{end_col}{start_row - 1}"
    for start_row in (3, 2)
    for start_col in "ABC"
    for end_col in "ABC"
]


def _scripted(lines):
    iterator = iter(lines)
    prompts = []

    def prompt_input(prompt):
        prompts.append(prompt)
        try:
            return next(iterator)
        except StopIteration:
            raise EOFError from None

    return prompt_input, prompts


def _cycling_player(again_answers=()):
    """Answers move prompts by cycling through every forward-looking move."""
    candidates = itertools.cycle(_CANDIDATES)
    answers = iter(again_answers)
    prompts = []

    def prompt_input(prompt):
        prompts.append(prompt)
        if prompt == MOVE_PROMPT:
            return next(candidates)
        try:
            return next(answers)
        except StopIteration:
            raise EOFError from None

    return prompt_input, prompts


@pytest.mark.parametrize(
    "winner, message",
    [(Player.HUMAN, "YOU WIN!"), (Player.COMPUTER, "YOU LOSE!"), (None, "")],
)
def test_winner_message(winner, message):
    assert winner_message(winner) == message


def test_read_human_move_applies_valid_move():
    board = Board()
    prompt_input, prompts = _scripted(["A3-A2"])
    errors = io.StringIO()
    move = read_human_move(board, prompt_input, io.StringIO(), errors)
    assert move == Move(2, 0, 1, 0)
    assert board[1, 0] is Player.HUMAN
    assert board[2, 0] is None
    assert prompts == [MOVE_PROMPT]
    assert errors.getvalue() == ""


def test_read_human_move_retries_after_illegal_move():
    board = Board()
    prompt_input, prompts = _scripted(["A3-B2", "b3-b2"])
    errors = io.StringIO()
    move = read_human_move(board, prompt_input, io.StringIO(), errors)
    assert move == Move(2, 1, 1, 1)
    assert "Invalid move! Try again..." in errors.getvalue()
    assert len(prompts) == 2


def test_read_human_move_rejects_unreadable_and_foreign_pawn():
    board = Board()
    prompt_input, prompts = _scripted(["zz", "A1-A2", "C3-C2"])
    errors = io.StringIO()
    move = read_human_move(board, prompt_input, io.StringIO(), errors)
    assert move == Move(2, 2, 1, 2)
    assert errors.getvalue().count("Invalid move! Try again...") == 2
    assert "Not your pawn or blank space" in errors.getvalue()


def test_read_human_move_skips_blank_lines():
    board = Board()
    prompt_input, prompts = _scripted(["   ", "A3-A2 trailing"])
    move = read_human_move(board, prompt_input, io.StringIO(), io.StringIO())
    assert move == Move(2, 0, 1, 0)
    assert len(prompts) == 2


def test_read_human_move_passes_on_end_of_input():
    board = Board()
    prompt_input, _ = _scripted([])
    with pytest.raises(EOFError):
        read_human_move(board, prompt_input, io.StringIO(), io.StringIO())
    assert board == Board()


@pytest.mark.parametrize("pruning", [True, False])
def test_play_game_reaches_a_consistent_result(pruning):
    board = Board()
    prompt_input, _ = _cycling_player()
    output = io.StringIO()
    log = io.StringIO()
    winner = play_game(board, pruning, prompt_input, output, io.StringIO(), log)
    assert winner in (Player.HUMAN, Player.COMPUTER)
    assert board.winner(human_blocked_first=pruning) is winner
    text = output.getvalue()
    assert text.startswith(Board().render())
    assert text.endswith(board.render() + winner_message(winner) + "\n")


def test_play_game_logs_each_computer_move():
    board = Board()
    prompt_input, _ = _cycling_player()
    log = io.StringIO()
    play_game(board, False, prompt_input, io.StringIO(), io.StringIO(), log)
    lines = log.getvalue().splitlines()
    assert lines[0].startswith("1. move: ")
    assert lines[0].endswith(" s")
    assert lines[1].startswith("nodecount:")
    assert len(lines) % 2 == 0
    counts = [int(line.split(":")[1]) for line in lines[1::2]]
    assert counts == sorted(counts)
    assert counts[0] > 0


def test_main_stops_on_end_of_input(monkeypatch, capsys, tmp_path):
    log_path = tmp_path / "moves.txt"
    prompt_input, prompts = _scripted([])
    monkeypatch.setattr("builtins.input", prompt_input)
    assert main(["--log", str(log_path)]) == 0
    assert capsys.readouterr().out.startswith(Board().render())
    assert log_path.read_text(encoding="utf-8") == "_____________________________\n"
    assert prompts == [MOVE_PROMPT]


def test_main_plays_again_on_yes(monkeypatch, capsys):
    prompt_input, prompts = _cycling_player(["y", "n"])
    monkeypatch.setattr("builtins.input", prompt_input)
    assert main(["--no-pruning"]) == 0
    assert prompts.count(AGAIN_PROMPT) == 2
    out = capsys.readouterr().out
    results = out.count("YOU WIN!") + out.count("YOU LOSE!")
    assert results == 2


def test_main_stops_on_no(monkeypatch, capsys):
    prompt_input, prompts = _cycling_player(["N"])
    monkeypatch.setattr("builtins.input", prompt_input)
    assert main([]) == 0
    assert prompts.count(AGAIN_PROMPT) == 1
    out = capsys.readouterr().out
    assert out.count("YOU WIN!") + out.count("YOU LOSE!") == 1