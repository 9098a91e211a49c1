"""Game-tree search for the computer side: plain minimax and alpha-beta."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional

from hexapawn.board import Board, Move, Player

WIN_SCORE = 10
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


@dataclass
class SearchStats:
    """Counters collected while searching."""

    node_count: int = 0
    cpu_time: float = 0.0


def evaluate(board: Board, human_blocked_first: bool = True) -> int:
    """Score a position from the computer's point of view."""
    winner = board.winner(human_blocked_first)
    if winner is Player.COMPUTER:
        return WIN_SCORE
    if winner is Player.HUMAN:
        return -WIN_SCORE
    return board.count(Player.COMPUTER) - board.count(Player.HUMAN)


def _try(board: Board, move: Move, player: Player):
    """Apply a move and return a callable that takes it back."""
    captured = board[move.end_row, move.end_column]
    board.apply(move)

    def undo() -> None:
        board[move.start_row, move.start_column] = player
        board[move.end_row, move.end_column] = captured

    return undo


def minimax(
    board: Board,
    maximizing: bool,
    stats: Optional[SearchStats] = None,
    depth: int = 0,
) -> int:
    """Exhaustive minimax; when both sides are blocked the human wins."""
    if stats is not None:
        stats.node_count += 1
    if board.winner(human_blocked_first=False) is not None:
        return evaluate(board, human_blocked_first=False)

    player = Player.COMPUTER if maximizing else Player.HUMAN
    best = INT_MIN if maximizing else INT_MAX
    for move in board.legal_moves(player):
        undo = _try(board, move, player)
        try:
            value = minimax(board, not maximizing, stats, depth + 1)
        finally:
            undo()
        best = max(best, value) if maximizing else min(best, value)
    return best


def alphabeta(
    board: Board,
    maximizing: bool,
    alpha: int = INT_MIN,
    beta: int = INT_MAX,
    stats: Optional[SearchStats] = None,
    depth: int = 0,
) -> int:
    """Minimax with alpha-beta pruning; when both sides are blocked the computer wins.

    A cut-off abandons the remaining moves of the current row only; later
    rows are still examined.
    """
    if board.winner(human_blocked_first=True) is not None:
        return evaluate(board, human_blocked_first=True)
    if stats is not None:
        stats.node_count += 1

    player = Player.COMPUTER if maximizing else Player.HUMAN
    best = INT_MIN if maximizing else INT_MAX
    cut_row: Optional[int] = None
    for move in board.legal_moves(player):
        if move.start_row == cut_row:
            continue
        undo = _try(board, move, player)
        try:
            value = alphabeta(board, not maximizing, alpha, beta, stats, depth + 1)
        finally:
            undo()
        if maximizing:
            best = max(best, value)
            alpha = max(alpha, value)
        else:
            best = min(best, value)
            beta = min(beta, value)
        if beta <= alpha:
            cut_row = move.start_row
    return best


def choose_move(
    board: Board,
    pruning: bool = True,
    stats: Optional[SearchStats] = None,
) -> Optional[Move]:
    """The computer's best move, the first found among equals, or None."""
    started = time.process_time()
    best_value = INT_MIN
    best_move: Optional[Move] = None
    for move in board.legal_moves(Player.COMPUTER):
        undo = _try(board, move, Player.COMPUTER)
        try:
            if pruning:
                value = alphabeta(board, False, INT_MIN, INT_MAX, stats, 0)
            else:
                value = minimax(board, False, stats, 0)
        finally:
            undo()
        if value > best_value:
            best_value = value
            best_move = move
    if stats is not None:
        stats.cpu_time = time.process_time() - started
    return best_move


def computer_move(
    board: Board,
    pruning: bool = True,
    stats: Optional[SearchStats] = None,
) -> Optional[Move]:
    """Choose the computer's move, play it on the board and return it."""
    move = choose_move(board, pruning, stats)
    if move is not None:
        board.apply(move)
    return move