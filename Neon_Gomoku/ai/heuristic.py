"""Run/open-end pattern scoring for Gomoku positions (live fours, sleeping threes, etc.)."""

from pathlib import Path
from typing import NamedTuple

import yaml

try:
    from Board import DIRECTIONS, EMPTY, WIN_LENGTH
    from engine.errors import ConfigError
except ImportError:
    from Neon_Gomoku.Board import DIRECTIONS, EMPTY, WIN_LENGTH
    from Neon_Gomoku.engine.errors import ConfigError


# Default scores; can be overridden by loading config/patterns.yaml.
DEFAULT_SCORES = {
    "five": 100000,
    "live_four": 10000,    # 4 stones, both ends open
    "rush_four": 1000,     # 4 stones, one or no end open
    "live_three": 1000,
    "sleep_three": 100,
    "live_two": 100,
    "sleep_two": 10,
    "one": 1,
}

# Weight of the opponent's material in evaluate()
DEFENSE_WEIGHT = 0.9


class Pattern(NamedTuple):
    run_length: int
    open_ends: int


def load_pattern_scores(path="config/patterns.yaml"):
    """Load the score table from YAML; fallback to defaults when the file is missing."""
    path = Path(path)
    if not path.is_absolute() and not path.exists():
        # Allow running from outside the package directory.
        candidate = Path(__file__).resolve().parents[1] / path
        if candidate.exists():
            path = candidate

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return dict(DEFAULT_SCORES)
    except yaml.YAMLError as exc:
        raise ConfigError(f"malformed pattern file {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"pattern file {path} must contain a mapping")
    table = data.get("scores") or {}
    if not isinstance(table, dict):
        raise ConfigError(f"'scores' in {path} must be a mapping")

    scores = dict(DEFAULT_SCORES)
    for name, value in table.items():
        if name not in DEFAULT_SCORES:
            raise ConfigError(f"unknown pattern '{name}' in {path}")
        if not isinstance(value, int) or isinstance(value, bool):
            raise ConfigError(f"score for '{name}' must be an integer, got {value!r}")
        scores[name] = value
    return scores


def pattern_score(run_length, open_ends, scores=None):
    scores = scores or DEFAULT_SCORES
    if run_length >= WIN_LENGTH:
        return scores["five"]
    if run_length == 4:
        return scores["live_four"] if open_ends == 2 else scores["rush_four"]
    if run_length == 3:
        if open_ends == 2:
            return scores["live_three"]
        if open_ends == 1:
            return scores["sleep_three"]
        return 0
    if run_length == 2:
        if open_ends == 2:
            return scores["live_two"]
        if open_ends == 1:
            return scores["sleep_two"]
        return 0
    if run_length == 1:
        return scores["one"]
    return 0


def get_pattern(board, row, col, dr, dc, side):
    """Run through (row, col) along (dr, dc) and how many of its two ends are empty."""
    size = board.size
    grid = board.grid
    run_length = 1
    open_ends = 0

    for sign in (1, -1):
        r, c = row + sign * dr, col + sign * dc
        while 0 <= r < size and 0 <= c < size and grid[r][c] == side:
            run_length += 1
            r += sign * dr
            c += sign * dc
        if 0 <= r < size and 0 <= c < size and grid[r][c] == EMPTY:
            open_ends += 1

    return Pattern(run_length, open_ends)


def score_for(board, side, scores=None):
    """
    Sum of pattern scores over every stone of side and all four directions.
    A run is counted once per member stone, so a four contributes four times.
    """
    scores = scores or DEFAULT_SCORES
    total = 0
    for row in range(board.size):
        cells = board.grid[row]
        for col in range(board.size):
            if cells[col] != side:
                continue
            for dr, dc in DIRECTIONS:
                run_length, open_ends = get_pattern(board, row, col, dr, dc, side)
                total += pattern_score(run_length, open_ends, scores)
    return total


def evaluate(board, maximizing_side, minimizing_side, scores=None, defense_weight=DEFENSE_WEIGHT):
    """Positive favors maximizing_side; the opponent's material is discounted by defense_weight."""
    return score_for(board, maximizing_side, scores) - defense_weight * score_for(board, minimizing_side, scores)
