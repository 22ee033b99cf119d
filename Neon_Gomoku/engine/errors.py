"""Exception types shared by the board, referee, search, and config loaders."""


class GomokuError(Exception):
    """Base class for Neon Gomoku errors."""


class InvalidMoveError(GomokuError, ValueError):
    """A move was out of bounds or targeted an occupied cell."""


class SearchInvariantError(GomokuError, RuntimeError):
    """Search left the board inconsistent (apply/undo pairing broke)."""


class ConfigError(GomokuError, ValueError):
    """Bad board size, depth, difficulty, or settings file."""
