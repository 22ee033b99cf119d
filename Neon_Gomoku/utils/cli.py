"""CLI options for selecting players, board size, difficulty, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Neon Gomoku (free-style five in a row)")
    parser.add_argument("--board-size", type=int, help="Board size (default 15)")
    parser.add_argument(
        "--difficulty",
        choices=["easy", "medium", "hard"],
        help="AI strength: easy=1, medium=2, hard=3 plies",
    )
    parser.add_argument("--depth", type=int, help="Explicit search depth (overrides difficulty)")
    parser.add_argument("--candidate-limit", type=int, help="Number of candidate moves to expand per node")
    parser.add_argument("--candidate-radius", type=int, help="Neighbourhood radius for candidate moves")
    parser.add_argument(
        "--mode",
        choices=["ai-vs-ai", "human-vs-ai", "ai-vs-human", "human-vs-human"],
        default=None,
        help="Play mode (who plays black/white)",
    )
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--patterns", default="config/patterns.yaml", help="Path to pattern score YAML")
    parser.add_argument("--gui", action="store_true", help="Enable pygame GUI (mouse input for human)")
    parser.add_argument("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING)")
    return parser.parse_args(argv)
