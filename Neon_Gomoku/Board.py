"""Board state container: move stack, apply/undo, and five-in-a-row detection."""

import logging
from typing import NamedTuple

try:
    from engine.errors import ConfigError
except ImportError:
    from Neon_Gomoku.engine.errors import ConfigError


LOGGER = logging.getLogger(__name__)

EMPTY = 0
BLACK = -1
WHITE = 1

WIN_LENGTH = 5
MIN_BOARD_SIZE = WIN_LENGTH

# (dr, dc): horizontal, vertical, diagonal down-right, diagonal down-left
DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))

_SYMBOLS = {EMPTY: ".", BLACK: "X", WHITE: "O"}


class Move(NamedTuple):
    row: int
    col: int


class MoveRecord(NamedTuple):
    row: int
    col: int
    side: int

    @property
    def move(self):
        return Move(self.row, self.col)


def opponent(side):
    return -side


def side_name(side):
    return "Black" if side == BLACK else "White"


class Board:
    def __init__(self, size=15):
        if not isinstance(size, int) or isinstance(size, bool) or size < MIN_BOARD_SIZE:
            raise ConfigError(f"board size must be an integer >= {MIN_BOARD_SIZE}, got {size!r}")
        # Cells hold -1 (black), 0 (empty), 1 (white), indexed grid[row][col]
        self.size = size
        self.grid = [[EMPTY] * size for _ in range(size)]
        self.move_stack = []
        self.last_move = None

    @property
    def move_count(self):
        return len(self.move_stack)

    @property
    def center(self):
        return Move(self.size // 2, self.size // 2)

    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def is_open(self, row, col):
        """True if (row, col) is on the board and holds no stone."""
        return self.in_bounds(row, col) and self.grid[row][col] == EMPTY

    def is_empty(self):
        return not self.move_stack

    def is_full(self):
        return len(self.move_stack) == self.size * self.size

    def apply(self, row, col, side):
        """Place a stone for side. Returns False (board untouched) on an illegal cell."""
        if side not in (BLACK, WHITE):
            raise ValueError("side must be -1 (black) or 1 (white)")
        if not self.is_open(row, col):
            LOGGER.debug("Rejected move %s at (%d, %d)", side_name(side), row, col)
            return False
        record = MoveRecord(row, col, side)
        self.grid[row][col] = side
        self.move_stack.append(record)
        self.last_move = record
        return True

    def undo(self):
        """Remove the most recent stone and return its record, or None if no moves exist."""
        if not self.move_stack:
            LOGGER.debug("Nothing to undo")
            return None
        record = self.move_stack.pop()
        self.grid[record.row][record.col] = EMPTY
        self.last_move = self.move_stack[-1] if self.move_stack else None
        return record

    def reset(self):
        self.grid = [[EMPTY] * self.size for _ in range(self.size)]
        self.move_stack = []
        self.last_move = None

    def clone(self):
        new_board = Board(self.size)
        new_board.grid = [row[:] for row in self.grid]
        new_board.move_stack = self.move_stack[:]
        new_board.last_move = self.last_move
        return new_board

    def empty_cells(self):
        for row in range(self.size):
            for col in range(self.size):
                if self.grid[row][col] == EMPTY:
                    yield Move(row, col)

    def check_line(self, row, col, side):
        """
        True if a stone of side at (row, col) sits in a run of five or more.
        The cell itself is assumed to belong to side; only its neighbours are read.
        """
        return self.winning_direction(row, col, side) is not None

    def winning_direction(self, row, col, side):
        for dr, dc in DIRECTIONS:
            forward = self._count_dir(row, col, dr, dc, side)
            backward = self._count_dir(row, col, -dr, -dc, side)
            if 1 + forward + backward >= WIN_LENGTH:
                return dr, dc
        return None

    def winning_line(self, row, col, side, direction=None):
        """
        Cells of the run through (row, col) along direction, ordered from the
        backward end to the forward end and truncated to five.
        """
        if direction is None:
            direction = self.winning_direction(row, col, side)
            if direction is None:
                return []
        dr, dc = direction
        line = [Move(row, col)]
        r, c = row + dr, col + dc
        while self.in_bounds(r, c) and self.grid[r][c] == side:
            line.append(Move(r, c))
            r += dr
            c += dc
        r, c = row - dr, col - dc
        while self.in_bounds(r, c) and self.grid[r][c] == side:
            line.insert(0, Move(r, c))
            r -= dr
            c -= dc
        return line[:WIN_LENGTH]

    def get_stats(self):
        black = sum(row.count(BLACK) for row in self.grid)
        white = sum(row.count(WHITE) for row in self.grid)
        return {
            "black_count": black,
            "white_count": white,
            "empty_count": self.size * self.size - black - white,
            "total_moves": self.move_count,
        }

    def _count_dir(self, row, col, dr, dc, side):
        """Count contiguous stones of side from (row, col) (exclusive) along (dr, dc)."""
        count = 0
        r, c = row + dr, col + dc
        while self.in_bounds(r, c) and self.grid[r][c] == side:
            count += 1
            r += dr
            c += dc
        return count

    def __str__(self):
        header = "   " + " ".join(f"{c % 10}" for c in range(self.size))
        rows = [header]
        for r, row in enumerate(self.grid):
            rows.append(f"{r:2d} " + " ".join(_SYMBOLS[v] for v in row))
        return "\n".join(rows)
