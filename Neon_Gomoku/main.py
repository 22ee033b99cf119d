"""Entry point for Neon Gomoku matches. Load config, wire players, start Omokgame."""

from pathlib import Path

import yaml

try:
    from utils.cli import parse_args
    from utils.logger import log_event, setup_logging
    from Omokgame import Omokgame
    from AiPlayer import AiPlayer
    from Player import HumanPlayer, GuiHumanPlayer
    from gui.pygame_view import PygameView
    from Board import BLACK, WHITE, MIN_BOARD_SIZE
    from ai import heuristic, search_minimax
    from engine.errors import ConfigError
except ImportError:
    from Neon_Gomoku.utils.cli import parse_args
    from Neon_Gomoku.utils.logger import log_event, setup_logging
    from Neon_Gomoku.Omokgame import Omokgame
    from Neon_Gomoku.AiPlayer import AiPlayer
    from Neon_Gomoku.Player import HumanPlayer, GuiHumanPlayer
    from Neon_Gomoku.gui.pygame_view import PygameView
    from Neon_Gomoku.Board import BLACK, WHITE, MIN_BOARD_SIZE
    from Neon_Gomoku.ai import heuristic, search_minimax
    from Neon_Gomoku.engine.errors import ConfigError


PROJECT_DIR = Path(__file__).resolve().parent

DEFAULT_SETTINGS = {
    "board_size": 15,
    "difficulty": "medium",
    "depth": None,
    "candidate_limit": 20,
    "candidate_radius": 2,
    "mode": "human-vs-ai",
    "log_level": "INFO",
    "gui": False,
}


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from outside `Neon_Gomoku/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    """Read settings YAML; a missing file yields an empty mapping."""
    path = resolve_project_path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"malformed settings file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"settings file {path} must contain a mapping")
    return data


def merge_settings(args, settings):
    """CLI flags override file settings, which override defaults. Validates eagerly."""
    merged = dict(DEFAULT_SETTINGS)
    merged.update({k: v for k, v in settings.items() if k in DEFAULT_SETTINGS})
    overrides = {
        "board_size": args.board_size,
        "difficulty": args.difficulty,
        "depth": args.depth,
        "candidate_limit": args.candidate_limit,
        "candidate_radius": args.candidate_radius,
        "mode": args.mode,
        "log_level": args.log_level,
    }
    merged.update({k: v for k, v in overrides.items() if v is not None})
    if args.gui:
        merged["gui"] = True

    board_size = merged["board_size"]
    if not isinstance(board_size, int) or isinstance(board_size, bool) or board_size < MIN_BOARD_SIZE:
        raise ConfigError(f"board_size must be an integer >= {MIN_BOARD_SIZE}")
    difficulty_depth = search_minimax.depth_for_difficulty(merged["difficulty"])
    if merged["depth"] is None:
        merged["depth"] = difficulty_depth
    elif not isinstance(merged["depth"], int) or isinstance(merged["depth"], bool) or merged["depth"] < 1:
        raise ConfigError("depth must be a positive integer")
    for key in ("candidate_limit", "candidate_radius"):
        if not isinstance(merged[key], int) or isinstance(merged[key], bool) or merged[key] < 1:
            raise ConfigError(f"{key} must be a positive integer")
    if merged["mode"] not in ("ai-vs-ai", "human-vs-ai", "ai-vs-human", "human-vs-human"):
        raise ConfigError(f"unsupported mode: {merged['mode']}")
    return merged


def build_players(config, scores, view=None, stats=None):
    def ai(color):
        return AiPlayer(
            color=color,
            difficulty=config["difficulty"],
            depth=config["depth"],
            candidate_limit=config["candidate_limit"],
            radius=config["candidate_radius"],
            scores=scores,
            stats=stats,
        )

    def human(color):
        return GuiHumanPlayer(color=color, view=view) if view else HumanPlayer(color=color)

    black_kind, white_kind = config["mode"].split("-vs-")
    black = ai(BLACK) if black_kind == "ai" else human(BLACK)
    white = ai(WHITE) if white_kind == "ai" else human(WHITE)
    return black, white


def text_renderer(board, last_move, current_color, game_result, win_line=None, status=None):
    print(board)
    if status:
        print(status)


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings)
    config = merge_settings(args, settings)
    setup_logging(config["log_level"])

    scores = heuristic.load_pattern_scores(resolve_project_path(args.patterns))

    view = None
    renderer = None
    closer = None
    if config["gui"]:
        view = PygameView(board_size=config["board_size"])
        renderer = view.render
        closer = view.close
    elif "human" in config["mode"]:
        renderer = text_renderer

    black, white = build_players(config, scores, view=view)
    log_event(f"Mode {config['mode']}, difficulty {config['difficulty']} (depth {config['depth']})")

    game = Omokgame(
        board_size=config["board_size"],
        black_player=black,
        white_player=white,
        logger=log_event,
        renderer=renderer,
        closer=closer,
        result_pause=3.0 if view else 0,
    )
    result = game.play()
    outcome = {BLACK: "Black wins", WHITE: "White wins", 0: "Draw"}
    print(outcome.get(result, "Unknown result"))
    return result


if __name__ == "__main__":
    main()
