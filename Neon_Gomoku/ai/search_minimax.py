"""Fixed-depth minimax with alpha-beta pruning and an immediate win/block probe."""

import logging
import time
from dataclasses import dataclass, field

from . import heuristic
from . import move_selector

try:
    from Board import opponent, side_name
    from engine import rules
    from engine.errors import ConfigError, SearchInvariantError
except ImportError:
    from Neon_Gomoku.Board import opponent, side_name
    from Neon_Gomoku.engine import rules
    from Neon_Gomoku.engine.errors import ConfigError, SearchInvariantError


LOGGER = logging.getLogger(__name__)

INF = float("inf")
WIN_SCORE = 100000

DIFFICULTY_DEPTH = {
    "easy": 1,
    "medium": 2,
    "hard": 3,
}


def depth_for_difficulty(difficulty):
    try:
        return DIFFICULTY_DEPTH[difficulty]
    except KeyError:
        choices = ", ".join(DIFFICULTY_DEPTH)
        raise ConfigError(f"unknown difficulty '{difficulty}' (expected one of: {choices})") from None


@dataclass(frozen=True)
class SearchStats:
    nodes_visited: int = 0
    pruned_branches: int = 0
    elapsed_ms: float = 0.0

    def as_dict(self):
        return {
            "nodes_visited": self.nodes_visited,
            "pruned_branches": self.pruned_branches,
            "elapsed_ms": self.elapsed_ms,
        }


@dataclass
class SearchContext:
    """Per-call counters threaded through the recursion."""

    nodes_visited: int = 0
    pruned_branches: int = 0
    started: float = field(default_factory=time.perf_counter)

    def finish(self):
        elapsed_ms = (time.perf_counter() - self.started) * 1000.0
        return SearchStats(self.nodes_visited, self.pruned_branches, elapsed_ms)


class MinimaxSearcher:
    """Encapsulates the configuration and logic for a minimax search."""

    def __init__(self, color, depth, candidate_limit=move_selector.DEFAULT_LIMIT, radius=move_selector.DEFAULT_RADIUS,
                 scores=None, defense_weight=heuristic.DEFENSE_WEIGHT, stats=None):
        if isinstance(color, bool) or color not in (-1, 1):
            raise ConfigError("color must be -1 (black) or 1 (white)")
        if not isinstance(depth, int) or isinstance(depth, bool) or depth < 1:
            raise ConfigError(f"search depth must be a positive integer, got {depth!r}")
        if not isinstance(candidate_limit, int) or isinstance(candidate_limit, bool) or candidate_limit < 1:
            raise ConfigError(f"candidate limit must be a positive integer, got {candidate_limit!r}")
        if not isinstance(radius, int) or isinstance(radius, bool) or radius < 1:
            raise ConfigError(f"candidate radius must be a positive integer, got {radius!r}")
        self.color = color
        self.opponent = opponent(color)
        self.depth = depth
        self.candidate_limit = candidate_limit
        self.radius = radius
        self.scores = scores or heuristic.DEFAULT_SCORES
        self.defense_weight = defense_weight
        self.stats_list = stats
        self.last_stats = None

    @property
    def stats(self):
        """Statistics of the most recent choose_move call (None before the first)."""
        return self.last_stats

    def choose_move(self, board):
        """
        Return the best move for self.color, or None when the board is full.
        The board is mutated during the search and restored before returning.
        """
        ctx = SearchContext()
        moves_before = board.move_count
        LOGGER.debug("Search start: %s depth=%d moves=%d", side_name(self.color), self.depth, moves_before)
        try:
            move = self._choose(board, ctx)
        finally:
            self.last_stats = ctx.finish()
        if board.move_count != moves_before:
            raise SearchInvariantError("search did not restore the board")

        if self.stats_list is not None:
            self.stats_list.append(self.last_stats.as_dict())
        LOGGER.info(
            "Search done: %s -> %s (nodes=%d, prunes=%d, %.1fms)",
            side_name(self.color),
            move,
            self.last_stats.nodes_visited,
            self.last_stats.pruned_branches,
            self.last_stats.elapsed_ms,
        )
        return move

    def _choose(self, board, ctx):
        if board.is_empty():
            return board.center

        # Tactical guardrails: immediate win, then immediate block.
        win_move = self._find_winning_move(board, self.color)
        if win_move is not None:
            LOGGER.debug("Immediate win at %s", win_move)
            return win_move
        block_move = self._find_winning_move(board, self.opponent)
        if block_move is not None:
            LOGGER.debug("Blocking opponent win at %s", block_move)
            return block_move

        candidates = self._candidates(board)
        if not candidates:
            return None

        best_move = None
        best_score = -INF
        alpha = -INF
        beta = INF
        # Root siblings are never cut; only child subtrees are pruned.
        for move in candidates:
            with rules.simulate(board, move.row, move.col, self.color):
                score = self._minimax(board, self.depth - 1, alpha, beta, False, ctx)
            if score > best_score:
                best_score = score
                best_move = move
            alpha = max(alpha, score)

        LOGGER.debug("Root best %s score=%s", best_move, best_score)
        return best_move

    def _minimax(self, board, depth, alpha, beta, maximizing, ctx):
        ctx.nodes_visited += 1

        winner = rules.last_move_wins(board)
        if winner is not None:
            return WIN_SCORE if winner == self.color else -WIN_SCORE
        if depth == 0:
            return heuristic.evaluate(board, self.color, self.opponent, self.scores, self.defense_weight)

        candidates = self._candidates(board)
        if not candidates:
            return 0  # draw

        if maximizing:
            best = -INF
            for move in candidates:
                with rules.simulate(board, move.row, move.col, self.color):
                    value = self._minimax(board, depth - 1, alpha, beta, False, ctx)
                best = max(best, value)
                alpha = max(alpha, value)
                if beta <= alpha:
                    ctx.pruned_branches += 1
                    break
            return best

        best = INF
        for move in candidates:
            with rules.simulate(board, move.row, move.col, self.opponent):
                value = self._minimax(board, depth - 1, alpha, beta, True, ctx)
            best = min(best, value)
            beta = min(beta, value)
            if beta <= alpha:
                ctx.pruned_branches += 1
                break
        return best

    def _find_winning_move(self, board, color):
        for move in self._candidates(board):
            with rules.simulate(board, move.row, move.col, color):
                if rules.is_win_after_move(board, move.row, move.col, color):
                    return move
        return None

    def _candidates(self, board):
        return move_selector.generate_candidates(board, limit=self.candidate_limit, radius=self.radius)


def choose_move(board, color, depth, candidate_limit=move_selector.DEFAULT_LIMIT, radius=move_selector.DEFAULT_RADIUS,
                scores=None, stats=None):
    """
    Public function to start a search. Instantiates and uses MinimaxSearcher.
    """
    searcher = MinimaxSearcher(
        color=color,
        depth=depth,
        candidate_limit=candidate_limit,
        radius=radius,
        scores=scores,
        stats=stats,
    )
    return searcher.choose_move(board)
