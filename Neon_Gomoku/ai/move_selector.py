"""Candidate move generation (neighbourhood of existing stones, center-first, top-N)."""

try:
    from Board import EMPTY, Move
except ImportError:
    from Neon_Gomoku.Board import EMPTY, Move


DEFAULT_RADIUS = 2
DEFAULT_LIMIT = 20


def generate_candidates(board, limit=DEFAULT_LIMIT, radius=DEFAULT_RADIUS):
    """
    Empty cells within Chebyshev distance `radius` of any stone.
    - If board empty: return center only.
    - Anchors are visited in move order and offsets row-major, so ties in the
      center-distance sort keep that discovery order.
    - Truncated to `limit` after sorting; never falls back to a global scan.
    """
    if board.is_empty():
        return [board.center]

    size = board.size
    grid = board.grid
    # dict as an insertion-ordered set
    seen = {}
    for record in board.move_stack:
        for dr in range(-radius, radius + 1):
            for dc in range(-radius, radius + 1):
                r, c = record.row + dr, record.col + dc
                if r < 0 or r >= size or c < 0 or c >= size:
                    continue
                if grid[r][c] != EMPTY:
                    continue
                seen.setdefault((r, c), None)

    center = size // 2
    ranked = sorted(seen, key=lambda rc: abs(rc[0] - center) + abs(rc[1] - center))
    return [Move(r, c) for r, c in ranked[:limit]]
