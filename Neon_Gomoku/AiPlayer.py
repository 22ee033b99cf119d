"""Computer player backed by the minimax searcher."""

import logging

try:
    from Player import Player
    from ai import search_minimax, move_selector
except ImportError:
    from Neon_Gomoku.Player import Player
    from Neon_Gomoku.ai import search_minimax, move_selector


LOGGER = logging.getLogger(__name__)


class AiPlayer(Player):
    def __init__(self, color=1, difficulty="medium", depth=None, candidate_limit=move_selector.DEFAULT_LIMIT,
                 radius=move_selector.DEFAULT_RADIUS, scores=None, stats=None):
        super().__init__(color)
        self.candidate_limit = candidate_limit
        self.radius = radius
        self.scores = scores
        self.stats = stats
        self.difficulty = difficulty
        self.searcher = self._build_searcher(depth if depth is not None else search_minimax.depth_for_difficulty(difficulty))

    @property
    def depth(self):
        return self.searcher.depth

    @property
    def last_stats(self):
        return self.searcher.stats

    def set_difficulty(self, difficulty):
        depth = search_minimax.depth_for_difficulty(difficulty)
        self.difficulty = difficulty
        self.searcher = self._build_searcher(depth)
        LOGGER.info("AI difficulty set to %s (depth %d)", difficulty, depth)

    def next_move(self, board):
        return self.searcher.choose_move(board)

    def get_stats(self):
        stats = {"difficulty": self.difficulty, "depth": self.depth}
        if self.last_stats is not None:
            stats.update(self.last_stats.as_dict())
        return stats

    def _build_searcher(self, depth):
        return search_minimax.MinimaxSearcher(
            color=self.color,
            depth=depth,
            candidate_limit=self.candidate_limit,
            radius=self.radius,
            scores=self.scores,
            stats=self.stats,
        )
