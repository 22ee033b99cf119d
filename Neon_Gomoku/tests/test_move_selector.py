"""Candidate generation: neighbourhood, center-distance ordering, truncation."""

from Neon_Gomoku.Board import Board, BLACK, WHITE
from Neon_Gomoku.ai import move_selector


def _center_distance(board, move):
    center = board.size // 2
    return abs(move[0] - center) + abs(move[1] - center)


def test_empty_board_returns_center_only():
    assert move_selector.generate_candidates(Board(size=15)) == [(7, 7)]
    assert move_selector.generate_candidates(Board(size=9)) == [(4, 4)]


def test_single_stone_neighbourhood_is_truncated_and_sorted():
    b = Board(size=15)
    b.apply(7, 7, BLACK)
    cands = move_selector.generate_candidates(b)
    assert len(cands) == 20  # 24 neighbours, capped
    assert len(set(cands)) == len(cands)
    assert all(max(abs(r - 7), abs(c - 7)) <= 2 for r, c in cands)
    dists = [_center_distance(b, mv) for mv in cands]
    assert dists == sorted(dists)
    # Ties keep discovery order (row-major offsets around the anchor).
    assert cands[:4] == [(6, 7), (7, 6), (7, 8), (8, 7)]


def test_corner_stone_order_is_stable():
    b = Board(size=15)
    b.apply(0, 0, WHITE)
    cands = move_selector.generate_candidates(b)
    assert cands == [(2, 2), (1, 2), (2, 1), (0, 2), (1, 1), (2, 0), (0, 1), (1, 0)]


def test_overlapping_neighbourhoods_collapse():
    b = Board(size=15)
    b.apply(7, 7, BLACK)
    b.apply(7, 8, WHITE)
    cands = move_selector.generate_candidates(b, limit=100)
    # 5x6 block around both stones minus the two stones
    assert len(cands) == 28
    assert (7, 7) not in cands and (7, 8) not in cands


def test_custom_limit_and_radius():
    b = Board(size=15)
    b.apply(7, 7, BLACK)
    assert len(move_selector.generate_candidates(b, limit=5)) == 5
    assert len(move_selector.generate_candidates(b, limit=100, radius=1)) == 8


def test_full_board_has_no_candidates():
    b = Board(size=5)
    for i, (row, col) in enumerate(list(b.empty_cells())):
        b.apply(row, col, BLACK if i % 2 else WHITE)
    assert move_selector.generate_candidates(b) == []
