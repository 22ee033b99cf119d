"""Tests for Omokgame turn handling, take-backs, and end-of-game state."""

import pytest

from Neon_Gomoku.AiPlayer import AiPlayer
from Neon_Gomoku.Board import BLACK, WHITE
from Neon_Gomoku.Omokgame import Omokgame, STATE_BLACK_WIN, STATE_DRAW, STATE_PLAYING, STATE_WHITE_WIN
from Neon_Gomoku.Player import Player, UNDO_REQUEST
from Neon_Gomoku.ai.search_minimax import SearchStats
from Neon_Gomoku.engine.errors import InvalidMoveError


class SeqPlayer(Player):
    """Deterministic player that plays a fixed move sequence."""

    def __init__(self, color, moves, is_human=False):
        super().__init__(color)
        self._moves = list(moves)
        self._idx = 0
        self.is_human = is_human

    def next_move(self, board):
        if self._idx >= len(self._moves):
            raise ValueError("No more scripted moves")
        mv = self._moves[self._idx]
        self._idx += 1
        return mv


def _quiet(_message):
    pass


def test_final_render_shows_winner_and_line():
    black = SeqPlayer(BLACK, [(0, 0), (0, 1), (0, 2), (0, 3), (0, 4)])
    white = SeqPlayer(WHITE, [(1, 0), (1, 1), (1, 2), (1, 3)])
    frames = []

    def renderer(board, last_move, current_color, game_result, **kwargs):
        frames.append((last_move, current_color, game_result, kwargs.get("win_line")))

    game = Omokgame(board_size=5, black_player=black, white_player=white, logger=_quiet, renderer=renderer, result_pause=0)
    result = game.play()

    assert result == BLACK
    assert game.state == STATE_BLACK_WIN
    last_move, color, final_result, win_line = frames[-1]
    assert final_result == BLACK
    assert color == BLACK
    assert last_move == (0, 4)
    assert win_line == [(0, c) for c in range(5)]


def test_ai_illegal_move_disqualifies():
    black = SeqPlayer(BLACK, [(2, 2)])
    white = SeqPlayer(WHITE, [(2, 2)])
    game = Omokgame(board_size=5, black_player=black, white_player=white, logger=_quiet)
    assert game.play() == BLACK
    assert game.state == STATE_BLACK_WIN


def test_human_illegal_move_is_asked_again():
    black = SeqPlayer(BLACK, [(9, 9), (2, 2), (3, 0), (3, 1), (3, 2), (3, 3), (3, 4)], is_human=True)
    white = SeqPlayer(WHITE, [(0, 0), (0, 1), (0, 2), (0, 4), (4, 4)])
    messages = []
    game = Omokgame(board_size=5, black_player=black, white_player=white, logger=messages.append)
    assert game.play() == BLACK
    assert any("Rejected move" in m for m in messages)


def test_play_move_enforces_turn_and_game_over():
    game = Omokgame(board_size=5, black_player=None, white_player=None, logger=_quiet)
    with pytest.raises(InvalidMoveError):
        game.play_move((0, 0), WHITE)
    for col in range(4):
        game.play_move((0, col), BLACK)
        game.play_move((1, col), WHITE)
    assert game.play_move((0, 4), BLACK) == BLACK
    with pytest.raises(InvalidMoveError):
        game.play_move((2, 2), WHITE)


def test_full_board_is_a_draw():
    game = Omokgame(board_size=5, black_player=None, white_player=None, logger=_quiet)
    # Column-pair stripes never line up five of a kind: B B W W B / W W B B W ...
    by_side = {BLACK: [], WHITE: []}
    for r in range(5):
        for c in range(5):
            side = BLACK if ((c // 2) + r) % 2 == 0 else WHITE
            by_side[side].append((r, c))
    assert len(by_side[BLACK]) == 13 and len(by_side[WHITE]) == 12

    result = None
    color = BLACK
    while by_side[color]:
        result = game.play_move(by_side[color].pop(0), color)
        color = -color
    assert result == 0
    assert game.state == STATE_DRAW


def test_undo_round_takes_back_two_moves():
    game = Omokgame(board_size=9, black_player=None, white_player=None, logger=_quiet)
    assert game.undo_round(BLACK) is False
    game.play_move((4, 4), BLACK)
    game.play_move((4, 5), WHITE)
    game.play_move((3, 3), BLACK)
    game.play_move((5, 5), WHITE)
    assert game.undo_round(BLACK) is True
    assert game.board.move_count == 2
    assert game.current_color == BLACK
    assert game.board.is_open(3, 3) and game.board.is_open(5, 5)
    assert game.state == STATE_PLAYING


def test_undo_request_from_player():
    black = SeqPlayer(BLACK, [(2, 2), UNDO_REQUEST, (0, 0), (0, 1), (0, 2), (0, 3), (0, 4)], is_human=True)
    white = SeqPlayer(WHITE, [(4, 4), (4, 0), (4, 1), (4, 2), (4, 3)])
    game = Omokgame(board_size=5, black_player=black, white_player=white, logger=_quiet)
    assert game.play() == BLACK
    assert game.board.is_open(2, 2)
    assert game.board.is_open(4, 4)


def test_ai_vs_ai_game_finishes_consistently():
    black = AiPlayer(color=BLACK, difficulty="easy")
    white = AiPlayer(color=WHITE, difficulty="easy")
    game = Omokgame(board_size=9, black_player=black, white_player=white, logger=_quiet)
    result = game.play()
    assert result in (BLACK, WHITE, 0)
    assert game.state in (STATE_BLACK_WIN, STATE_WHITE_WIN, STATE_DRAW)
    if result != 0:
        assert len(game.win_line) == 5
        assert all(game.board.grid[r][c] == result for r, c in game.win_line)
    stats = game.get_stats()
    assert stats["total_moves"] == game.board.move_count
    assert stats["black_ai"]["depth"] == 1
    assert "nodes_visited" in stats["white_ai"] or game.board.move_count == 1


def test_restart_clears_board():
    game = Omokgame(board_size=9, black_player=None, white_player=None, logger=_quiet)
    game.play_move((4, 4), BLACK)
    game.restart()
    assert game.board.is_empty()
    assert game.current_color == BLACK
    assert game.state == STATE_PLAYING


def test_render_status_names_the_ai_once():
    black = SeqPlayer(BLACK, [(0, 0), (0, 1), (0, 2), (0, 3), (0, 4)])
    black.last_stats = SearchStats(nodes_visited=10, pruned_branches=2, elapsed_ms=3.0)
    white = SeqPlayer(WHITE, [(1, 0), (1, 1), (1, 2), (1, 3)], is_human=True)
    statuses = []

    def renderer(board, last_move, current_color, game_result, **kwargs):
        statuses.append((current_color, kwargs.get("status")))

    game = Omokgame(board_size=5, black_player=black, white_player=white, logger=_quiet, renderer=renderer, result_pause=0)
    game.play()

    assert statuses[0] == (BLACK, "AI thinking...")
    assert (WHITE, "AI searched 10 nodes, 2 prunes, 3 ms") in statuses
    assert not any(s and s.startswith("AI AI") for _, s in statuses)
