"""Abstract player interface for human or AI controllers."""

UNDO_REQUEST = "undo"


class Player:
    is_human = False

    def __init__(self, color):
        self.color = color

    def next_move(self, board):
        """Return (row, col) for the next move, or UNDO_REQUEST."""
        raise NotImplementedError


class HumanPlayer(Player):
    is_human = True

    def __init__(self, color, input_fn=input):
        super().__init__(color)
        self._input = input_fn

    def next_move(self, board):
        """Text-input player: 'row col' (0-indexed) or 'u' to take back a round."""
        raw = self._input("Enter move as 'row col' (0-indexed), or 'u' to undo: ").strip()
        if raw.lower() in ("u", "undo"):
            return UNDO_REQUEST
        try:
            row_str, col_str = raw.split()
            return int(row_str), int(col_str)
        except ValueError as exc:
            raise ValueError("Invalid input format; expected two integers") from exc


class GuiHumanPlayer(Player):
    is_human = True

    def __init__(self, color, view):
        super().__init__(color)
        self.view = view

    def next_move(self, board):
        return self.view.wait_for_move(board, self.color)
