"""Interactive Hexapawn game against the computer on the terminal."""

from __future__ import annotations

import argparse
import sys
from contextlib import ExitStack
from typing import Callable, Optional, TextIO

from hexapawn.board import Board, InvalidMoveError, Move, Player, parse_move
from hexapawn.search import SearchStats, computer_move

MOVE_PROMPT = "Enter your move (e.g. A3-A2): "
AGAIN_PROMPT = "\nWould you like to play again? (Y/N): "
LOG_SEPARATOR = "_____________________________\n"

PromptInput = Callable[[str], str]


def winner_message(winner: Optional[Player]) -> str:
    """The line announcing the result, or an empty string while undecided."""
    if winner is Player.HUMAN:
        return "YOU WIN!"
    if winner is Player.COMPUTER:
        return "YOU LOSE!"
    return ""


def _first_token(prompt_input: PromptInput, prompt: str) -> str:
    while True:
        tokens = prompt_input(prompt).split()
        if tokens:
            return tokens[0]


def read_human_move(
    board: Board,
    prompt_input: PromptInput = input,
    output: Optional[TextIO] = None,
    errors: Optional[TextIO] = None,
) -> Move:
    """Ask until a legal move is entered, play it on the board and return it.

    EOFError from ``prompt_input`` is passed on to the caller.
    """
    errors = errors if errors is not None else sys.stderr
    while True:
        text = _first_token(prompt_input, MOVE_PROMPT)
        try:
            move = parse_move(text)
            board.validate_human_move(move)
        except InvalidMoveError as error:
            errors.write(f"{error}\n")
            errors.write("Invalid move! Try again...\n")
            continue
        board.apply(move)
        return move


def play_game(
    board: Board,
    pruning: bool = True,
    prompt_input: PromptInput = input,
    output: Optional[TextIO] = None,
    errors: Optional[TextIO] = None,
    log: Optional[TextIO] = None,
) -> Player:
    """Play one game from the starting position and return the winner."""
    output = output if output is not None else sys.stdout
    human_blocked_first = pruning
    stats = SearchStats()
    board.reset()
    winner: Optional[Player] = None
    turn = 1
    while winner is None:
        output.write(board.render())
        read_human_move(board, prompt_input, output, errors)
        winner = board.winner(human_blocked_first)
        if winner is not None:
            break
        computer_move(board, pruning, stats)
        if log is not None:
            log.write(f"{turn}. move: {stats.cpu_time:f} s\n")
            log.write(f"nodecount:{stats.node_count}\n")
        turn += 1
        winner = board.winner(human_blocked_first)

    output.write(board.render())
    output.write(winner_message(winner) + "\n")
    return winner


def _parse_args(argv: Optional[list[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="hexapawn", description="Play Hexapawn against the computer."
    )
    parser.add_argument(
        "--no-pruning",
        dest="pruning",
        action="store_false",
        help="search the full game tree without alpha-beta pruning",
    )
    parser.add_argument(
        "--log",
        metavar="FILE",
        help="append search time and node counts for each computer move to FILE",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    """Run games until the player declines another one."""
    args = _parse_args(argv)
    board = Board()
    with ExitStack() as stack:
        log: Optional[TextIO] = None
        if args.log:
            try:
                log = stack.enter_context(open(args.log, "a", encoding="utf-8"))
            except OSError as error:
                sys.stderr.write(f"Unable to open log file: {error}\n")
            else:
                log.write(LOG_SEPARATOR)
        try:
            while True:
                play_game(board, args.pruning, input, sys.stdout, sys.stderr, log)
                response = input(AGAIN_PROMPT).strip()[:1].upper()
                if response != "Y":
                    break
        except EOFError:
            sys.stdout.write("\n")
    return 0