from typing import List, Optional, Sequence, Tuple

from .state import BOARD_SIZE, Active, Board, GameStatus, Sign, Tied, Won

Coordinates = Tuple[int, int]

# Evaluation order: rows top-to-bottom, columns left-to-right, then diagonals
WINNING_LINES: Tuple[Tuple[Coordinates, ...], ...] = (
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)


def _line_sign(board: Board, line: Sequence[Coordinates]) -> Optional[Sign]:
    first = board[line[0][0]][line[0][1]]
    if first is None:
        return None
    for row, col in line[1:]:
        if board[row][col] != first:
            return None
    return first


def winning_line(board: Board) -> Optional[Tuple[Coordinates, ...]]:
    """Return the first completed line, or None."""
    for line in WINNING_LINES:
        if _line_sign(board, line) is not None:
            return line
    return None


def empty_tiles(board: Board) -> List[Coordinates]:
    return [
        (row, col)
        for row in range(BOARD_SIZE)
        for col in range(BOARD_SIZE)
        if board[row][col] is None
    ]


def evaluate(board: Board, players: Tuple[str, str]) -> GameStatus:
    """
    Compute the status a board implies.

    The first completed line decides the winner; its sign maps back to the
    player who owns it. A full board without a line is a tie.
    """
    for line in WINNING_LINES:
        sign = _line_sign(board, line)
        if sign is not None:
            return Won(winner=players[sign.player_index])
    if not empty_tiles(board):
        return Tied()
    return Active()
