"""The Hexapawn board: pawns, moves, move parsing and game-end rules."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

SIZE = 3
_COLUMNS = "ABC"
_MOVE_PATTERN = re.compile(r"(.)\s*([+-]?\d+)-(.)\s*([+-]?\d+)", re.DOTALL)


class Player(str, Enum):
    """The two sides; the value is the character drawn on the board."""

    HUMAN = "W"
    COMPUTER = "B"


_FORWARD = {Player.HUMAN: -1, Player.COMPUTER: 1}
_OPPONENT = {Player.HUMAN: Player.COMPUTER, Player.COMPUTER: Player.HUMAN}

Cell = Optional[Player]


class InvalidMoveError(ValueError):
    """Raised for a move that cannot be read or is not allowed."""


@dataclass(frozen=True)
class Move:
    """A pawn move from one square to another, in zero-based indices."""

    start_row: int
    start_column: int
    end_row: int
    end_column: int

    def __str__(self) -> str:
        return (
            f"{chr(ord('A') + self.start_column)}{self.start_row + 1}-"
            f"{chr(ord('A') + self.end_column)}{self.end_row + 1}"
        )


def column_to_index(column: str) -> int:
    """Turn a column letter (A, B or C, any case) into an index 0-2."""
    index = _COLUMNS.find(column.upper()) if len(column) == 1 else -1
    if index < 0:
        raise InvalidMoveError(f"Invalid column: {column!r}")
    return index


def row_to_index(row: int) -> int:
    """Turn a row number 1-3 into an index 0-2."""
    if 1 <= row <= SIZE:
        return row - 1
    raise InvalidMoveError(f"Invalid row: {row}")


def in_bounds(row: int, column: int) -> bool:
    """Whether a square lies on the board."""
    return 0 <= row < SIZE and 0 <= column < SIZE


def parse_move(text: str) -> Move:
    """Read a move written like ``A3-A2``."""
    match = _MOVE_PATTERN.match(text)
    if match is None:
        raise InvalidMoveError(f"Cannot read move: {text!r}")
    start_col, start_row, end_col, end_row = match.groups()
    return Move(
        start_row=row_to_index(int(start_row)),
        start_column=column_to_index(start_col),
        end_row=row_to_index(int(end_row)),
        end_column=column_to_index(end_col),
    )


class Board:
    """A 3x3 Hexapawn board; the computer starts on row 1, the human on row 3."""

    def __init__(self) -> None:
        self._grid: list[list[Cell]] = []
        self.reset()

    def reset(self) -> None:
        """Put every pawn back on its starting square."""
        self._grid = [
            [Player.COMPUTER] * SIZE,
            [None] * SIZE,
            [Player.HUMAN] * SIZE,
        ]

    def copy(self) -> Board:
        """An independent board with the same position."""
        other = Board()
        other._grid = [list(row) for row in self._grid]
        return other

    def __getitem__(self, square: tuple[int, int]) -> Cell:
        row, column = square
        if not in_bounds(row, column):
            raise IndexError(f"Square out of bounds: {square}")
        return self._grid[row][column]

    def __setitem__(self, square: tuple[int, int], value: Cell) -> None:
        row, column = square
        if not in_bounds(row, column):
            raise IndexError(f"Square out of bounds: {square}")
        self._grid[row][column] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    __hash__ = None  # type: ignore[assignment]

    def _squares(self) -> Iterator[tuple[int, int, Cell]]:
        for row, cells in enumerate(self._grid):
            for column, cell in enumerate(cells):
                yield row, column, cell

    def render(self) -> str:
        """The board as text, with column letters and row numbers."""
        lines = ["  A   B   C "]
        for number, cells in enumerate(self._grid, start=1):
            if number > 1:
                lines.append(" ---|---|---")
            marks = " | ".join(cell.value if cell else " " for cell in cells)
            lines.append(f"{number} {marks} ")
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()

    def pawn_ownership(self, player: Player, row: int, column: int) -> bool:
        """Whether the square holds one of the player's pawns."""
        return self[row, column] is player

    def validate_human_move(self, move: Move) -> None:
        """Raise InvalidMoveError unless the move is legal for the human."""
        if not in_bounds(move.start_row, move.start_column):
            raise InvalidMoveError("Start out of bounds")
        if not self.pawn_ownership(Player.HUMAN, move.start_row, move.start_column):
            raise InvalidMoveError("Not your pawn or blank space")
        if not in_bounds(move.end_row, move.end_column):
            raise InvalidMoveError("Destination out of bounds")
        if move.end_row != move.start_row - 1:
            raise InvalidMoveError("Invalid move")
        target = self[move.end_row, move.end_column]
        if move.end_column == move.start_column and target is None:
            return
        if abs(move.end_column - move.start_column) == 1 and target is Player.COMPUTER:
            return
        raise InvalidMoveError("Invalid move")

    def apply(self, move: Move) -> None:
        """Move the pawn, replacing whatever stood on the destination."""
        pawn = self[move.start_row, move.start_column]
        self[move.end_row, move.end_column] = pawn
        self[move.start_row, move.start_column] = None

    def legal_moves(self, player: Player) -> list[Move]:
        """All moves for the player, row by row: forward, then captures right and left."""
        step = _FORWARD[player]
        opponent = _OPPONENT[player]
        moves: list[Move] = []
        for row, column, cell in self._squares():
            if cell is not player:
                continue
            target_row = row + step
            if not 0 <= target_row < SIZE:
                continue
            if self._grid[target_row][column] is None:
                moves.append(Move(row, column, target_row, column))
            for delta in (1, -1):
                target_column = column + delta
                if (
                    0 <= target_column < SIZE
                    and self._grid[target_row][target_column] is opponent
                ):
                    moves.append(Move(row, column, target_row, target_column))
        return moves

    def has_valid_moves(self, player: Player) -> bool:
        """Whether the player can move at all."""
        return bool(self.legal_moves(player))

    def has_pawns(self, player: Player) -> bool:
        """Whether the player has any pawn left."""
        return any(cell is player for _, _, cell in self._squares())

    def count(self, player: Player) -> int:
        """Number of the player's pawns on the board."""
        return sum(cell is player for _, _, cell in self._squares())

    def winner(self, human_blocked_first: bool = True) -> Optional[Player]:
        """The winner, or None while the game goes on.

        When both sides are blocked, ``human_blocked_first`` decides who wins:
        True gives the game to the computer, False to the human.
        """
        for column in range(SIZE):
            if self._grid[0][column] is Player.HUMAN:
                return Player.HUMAN
            if self._grid[SIZE - 1][column] is Player.COMPUTER:
                return Player.COMPUTER

        if not self.has_pawns(Player.HUMAN):
            return Player.COMPUTER
        if not self.has_pawns(Player.COMPUTER):
            return Player.HUMAN

        human_can_move = self.has_valid_moves(Player.HUMAN)
        computer_can_move = self.has_valid_moves(Player.COMPUTER)
        if human_blocked_first:
            if not human_can_move:
                return Player.COMPUTER
            if not computer_can_move:
                return Player.HUMAN
        else:
            if not computer_can_move:
                return Player.HUMAN
            if not human_can_move:
                return Player.COMPUTER
        return None