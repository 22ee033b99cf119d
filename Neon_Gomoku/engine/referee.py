"""Move validation for the game loop (shape, bounds, occupancy)."""

try:
    from engine.errors import InvalidMoveError
except ImportError:
    from Neon_Gomoku.engine.errors import InvalidMoveError


def check_move(move, board):
    """
    Validate a move against the board before it is applied for real.
    Raises InvalidMoveError on anything that Board.apply would reject.
    """
    try:
        row, col = move
    except (TypeError, ValueError) as exc:
        raise InvalidMoveError(f"Malformed move: {move!r}") from exc
    if not isinstance(row, int) or not isinstance(col, int):
        raise InvalidMoveError(f"Move coordinates must be integers: {move!r}")
    if not board.in_bounds(row, col):
        raise InvalidMoveError("Move out of bounds")
    if not board.is_open(row, col):
        raise InvalidMoveError("Cell already occupied")
    return True
