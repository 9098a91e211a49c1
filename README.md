# hexapawn

Hexapawn on a 3×3 board, played in the terminal against a computer that
searches the whole game tree with minimax. The search runs with
alpha-beta pruning by default, or without it.

You play White (`W`) from row 3 and move first; the computer plays Black
(`B`) from row 1.

## Installing

```
pip install .
```

## Playing

```
hexapawn
```

The board is shown as:

```
  A   B   C 
1 B | B | B 
 ---|---|---
2   |   |   
 ---|---|---
3 W | W | W 
```

Enter moves as `<column><row>-<column><row>`, for example `A3-A2`
(column letters in either case). A pawn moves one square straight ahead
onto an empty square, or one square diagonally forward to capture an
opposing pawn. A move that cannot be read or is not allowed is reported
on standard error and you are asked again.

A side wins by reaching the far row, by capturing every opposing pawn,
or by leaving the other side without a legal move. If both sides are
blocked at once, the computer wins in the pruned mode and you win with
`--no-pruning`.

After each game you are asked whether to play again; an answer starting
with `Y` (either case) starts a new game, anything else ends the program.
End of input also ends it.

### Options

- `--no-pruning` — search the full game tree with plain minimax instead
  of alpha-beta pruning.
- `--log FILE` — append a separator line to `FILE`, then, after each
  computer move, the CPU time that move's search took and the running
  count of nodes searched in the current game. If the file cannot be
  opened, a message is printed and the game is played without a log.

## Using the library

```python
from hexapawn.board import Board, Player, parse_move
from hexapawn.search import SearchStats, computer_move

board = Board()
board.apply(parse_move("B3-B2"))
stats = SearchStats()
computer_move(board, pruning=True, stats=stats)
print(board.render())
print(board.winner(True))
print(stats.node_count, stats.cpu_time)
```

- `hexapawn.board`: `Board` (`reset`, `copy`, `render`, `legal_moves`,
  `validate_human_move`, `apply`, `has_valid_moves`, `has_pawns`,
  `count`, `winner`, and `board[row, column]` indexing), `Move`,
  `Player`, `parse_move`, `column_to_index`, `row_to_index`,
  `in_bounds`, and `InvalidMoveError` (a `ValueError`) for moves that
  cannot be read or are not allowed.
- `hexapawn.search`: `evaluate`, `minimax`, `alphabeta`, `choose_move`
  (returns the computer's move without making it, or `None`),
  `computer_move` (plays it on the board) and `SearchStats`.
- `hexapawn.cli`: `main`, `play_game`, `read_human_move` and
  `winner_message`; `play_game` takes the input function and the output,
  error and log streams as arguments, so a game can be driven from code.

## What it does not do

There is one human player against the computer, always as White and
always moving first. Games are not saved, and there is no two-player
mode or choice of board size.

## Running the tests

```
pip install .[test]
pytest
```