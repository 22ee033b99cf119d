"""Game loop, turn management, take-backs, and result tracking."""

import time

try:
    from Board import Board, BLACK, WHITE, side_name
    from Player import UNDO_REQUEST
    from engine import referee
    from engine.errors import InvalidMoveError
    from utils.logger import log_event
except ImportError:
    from Neon_Gomoku.Board import Board, BLACK, WHITE, side_name
    from Neon_Gomoku.Player import UNDO_REQUEST
    from Neon_Gomoku.engine import referee
    from Neon_Gomoku.engine.errors import InvalidMoveError
    from Neon_Gomoku.utils.logger import log_event


STATE_PLAYING = "playing"
STATE_BLACK_WIN = "black_win"
STATE_WHITE_WIN = "white_win"
STATE_DRAW = "draw"

RESULT_STATES = {BLACK: STATE_BLACK_WIN, WHITE: STATE_WHITE_WIN, 0: STATE_DRAW}


class Omokgame:
    def __init__(self, board_size, black_player, white_player, logger=log_event, renderer=None, closer=None,
                 result_pause=3.0):
        self.board = Board(size=board_size)
        self.players = {BLACK: black_player, WHITE: white_player}
        self.logger = logger
        self.renderer = renderer
        self.closer = closer
        self.result_pause = result_pause
        self._reset_state()

    def _reset_state(self):
        self.state = STATE_PLAYING
        self.current_color = BLACK  # black starts
        self.winner = None
        self.win_line = None
        self.move_index = 0
        self.last_search = None

    def restart(self):
        self.board.reset()
        self._reset_state()
        self.logger("Game restarted")

    def play(self):
        """Run a single game. Returns -1 (black win), 1 (white win), or 0 (draw)."""
        game_result = None
        try:
            while game_result is None:
                color = self.current_color
                player = self.players[color]
                status = self._search_status() if player.is_human else "AI thinking..."
                self._render(game_result, status=status)

                try:
                    move = player.next_move(self.board.clone())
                except ValueError as exc:
                    if not player.is_human:
                        raise
                    self.logger(f"Rejected input from {side_name(color)}: {exc}")
                    continue

                if move == UNDO_REQUEST:
                    if not self.undo_round(color):
                        self.logger("Undo not available")
                    continue

                if move is None:
                    self.logger("Result: Draw (no moves left)")
                    game_result = self._finish(0)
                    break

                try:
                    game_result = self.play_move(move, color)
                    self.last_search = getattr(player, "last_stats", None)
                except InvalidMoveError as exc:
                    if player.is_human:
                        self.logger(f"Rejected move from {side_name(color)}: {exc}")
                        continue
                    self.logger(f"Disqualification: {side_name(color)} - {exc}")
                    game_result = self._finish(-color)  # opponent wins
                    break

            self._render(game_result)
            if self.renderer and self.result_pause:
                # Pause to show the result
                time.sleep(self.result_pause)
            return game_result
        finally:
            if self.closer:
                self.closer()

    def play_move(self, move, color):
        """Apply a validated move for color; returns the game result or None while playing."""
        if self.state != STATE_PLAYING:
            raise InvalidMoveError("Game is already over")
        if color != self.current_color:
            raise InvalidMoveError(f"Not {side_name(color)}'s turn")
        referee.check_move(move, self.board)
        row, col = move
        self.board.apply(row, col, color)
        self.move_index += 1
        self.logger(f"Move {self.move_index}: {'B' if color == BLACK else 'W'} ({row}, {col})")

        direction = self.board.winning_direction(row, col, color)
        if direction is not None:
            self.win_line = self.board.winning_line(row, col, color, direction)
            self.logger(f"Winner: {side_name(color)} {self.win_line}")
            return self._finish(color)
        if self.board.is_full():
            self.logger("Result: Draw (board full)")
            return self._finish(0)

        self.current_color = -color  # swap turns
        return None

    def undo_round(self, requesting_color):
        """
        Take back the opponent's reply and the requester's own last move.
        Leaves the board untouched and returns False when that is not possible.
        """
        if self.state != STATE_PLAYING or self.board.move_count < 2:
            return False
        reply = self.board.undo()
        own = self.board.undo()
        if own is None:
            self.board.apply(reply.row, reply.col, reply.side)
            return False
        self.move_index -= 2
        self.current_color = requesting_color
        self.logger(f"Undo: {side_name(own.side)} {own.move}, {side_name(reply.side)} {reply.move}")
        return True

    def get_stats(self):
        stats = dict(self.board.get_stats())
        stats.update({
            "game_state": self.state,
            "current_player": side_name(self.current_color),
            "winner": side_name(self.winner) if self.winner else None,
        })
        for color, player in self.players.items():
            if hasattr(player, "get_stats"):
                stats[f"{side_name(color).lower()}_ai"] = player.get_stats()
        return stats

    def _finish(self, result):
        self.state = RESULT_STATES[result]
        self.winner = result or None
        return result

    def _search_status(self):
        if self.last_search is None:
            return None
        s = self.last_search
        return f"AI searched {s.nodes_visited} nodes, {s.pruned_branches} prunes, {s.elapsed_ms:.0f} ms"

    def _render(self, game_result, status=None):
        if not self.renderer:
            return
        last = self.board.last_move
        self.renderer(
            self.board,
            last.move if last else None,
            self.current_color,
            game_result,
            win_line=self.win_line,
            status=status,
        )

