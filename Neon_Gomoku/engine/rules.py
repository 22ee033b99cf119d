"""Free-style five-in-a-row rules: win check and scoped trial placement."""

from contextlib import contextmanager

try:
    from Board import Board
    from engine.errors import InvalidMoveError, SearchInvariantError
except ImportError:
    from Neon_Gomoku.Board import Board
    from Neon_Gomoku.engine.errors import InvalidMoveError, SearchInvariantError


@contextmanager
def simulate(board: Board, row: int, col: int, side: int):
    """Place a stone for the duration of the block; it is always taken back on exit."""
    if not board.apply(row, col, side):
        raise InvalidMoveError(f"cannot simulate move at ({row}, {col})")
    try:
        yield
    finally:
        record = board.undo()
        if record is None or (record.row, record.col) != (row, col):
            raise SearchInvariantError(f"undo of ({row}, {col}) removed {record!r}")


def is_win_after_move(board: Board, row: int, col: int, side: int) -> bool:
    """Assumes the stone is already placed. Overlines count as wins."""
    return board.check_line(row, col, side)


def last_move_wins(board: Board):
    """Return the side whose last stone completed five, or None."""
    last = board.last_move
    if last is None:
        return None
    if is_win_after_move(board, last.row, last.col, last.side):
        return last.side
    return None
