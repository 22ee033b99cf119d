"""Pygame-based board renderer and input helper (neon theme)."""

try:
    from Player import UNDO_REQUEST
except ImportError:
    from Neon_Gomoku.Player import UNDO_REQUEST


class PygameView:
    # --- Constants ---
    COLOR_BACKGROUND = (10, 14, 39)
    COLOR_PANEL = (5, 7, 20)
    COLOR_GRID = (0, 243, 255)
    COLOR_TEXT = (230, 230, 230)
    COLOR_BLACK_STONE = (128, 0, 255)
    COLOR_WHITE_STONE = (0, 243, 255)
    COLOR_MARKER = (255, 0, 110)
    COLOR_WIN = (57, 255, 20)

    PANEL_HEIGHT = 80
    HOVER_ALPHA = 77

    def __init__(self, board_size, window_size=800):
        import pygame

        self.board_size = board_size
        self.window_size = window_size
        self._pygame = pygame

        pygame.init()
        self.screen = pygame.display.set_mode((window_size, window_size))
        pygame.display.set_caption("Neon Gomoku")

        # Fonts
        self.font_large = pygame.font.Font(None, 48)
        self.font_medium = pygame.font.Font(None, 36)
        self.font_small = pygame.font.Font(None, 24)

        board_display_size = window_size - self.PANEL_HEIGHT
        self.margin_px = board_display_size * 0.05
        self.tile_size = (board_display_size - 2 * self.margin_px) / (board_size - 1)
        self.stone_radius = self.tile_size * 0.4
        self.board_origin = ((window_size - board_display_size) // 2, self.PANEL_HEIGHT)
        self.board_surface = self._build_board_surface(board_display_size)

    def _grid_origin(self):
        ox, oy = self.board_origin
        return ox + self.margin_px, oy + self.margin_px

    def cell_center(self, row, col):
        gx, gy = self._grid_origin()
        return gx + col * self.tile_size, gy + row * self.tile_size

    def _build_board_surface(self, size_px):
        pygame = self._pygame
        surf = pygame.Surface((size_px, size_px)).convert()
        surf.fill(self.COLOR_BACKGROUND)
        grid_start = self.margin_px
        grid_end = size_px - self.margin_px
        for i in range(self.board_size):
            offset = grid_start + i * self.tile_size
            pygame.draw.line(surf, self.COLOR_GRID, (grid_start, offset), (grid_end, offset), 1)
            pygame.draw.line(surf, self.COLOR_GRID, (offset, grid_start), (offset, grid_end), 1)
        for row, col in self._star_points():
            center = (grid_start + col * self.tile_size, grid_start + row * self.tile_size)
            pygame.draw.circle(surf, self.COLOR_GRID, center, 3)
        return surf

    def _star_points(self):
        """Center plus the four points three lines in from each corner."""
        mid = self.board_size // 2
        far = self.board_size - 4
        if self.board_size < 9:
            return [(mid, mid)]
        return [(mid, mid), (3, 3), (3, far), (far, 3), (far, far)]

    def _draw_text(self, text, font, color, center_pos):
        text_surface = font.render(text, True, color)
        text_rect = text_surface.get_rect(center=center_pos)
        self.screen.blit(text_surface, text_rect)

    def _stone_color(self, side):
        return self.COLOR_BLACK_STONE if side == -1 else self.COLOR_WHITE_STONE

    def _draw_stones(self, board):
        for row, cells in enumerate(board.grid):
            for col, side in enumerate(cells):
                if side == 0:
                    continue
                self._pygame.draw.circle(self.screen, self._stone_color(side), self.cell_center(row, col), self.stone_radius)

    def _draw_last_move_marker(self, last_move):
        if not last_move:
            return
        center = self.cell_center(*last_move)
        self._pygame.draw.circle(self.screen, self.COLOR_MARKER, center, self.tile_size * 0.15, 2)

    def _draw_win_line(self, win_line):
        if not win_line:
            return
        start = self.cell_center(*win_line[0])
        end = self.cell_center(*win_line[-1])
        self._pygame.draw.line(self.screen, self.COLOR_WIN, start, end, 4)
        for row, col in win_line:
            self._pygame.draw.circle(self.screen, self.COLOR_WIN, self.cell_center(row, col), self.stone_radius, 3)

    def _draw_info_panel(self, current_player_color, game_result, status):
        panel_rect = self._pygame.Rect(0, 0, self.window_size, self.PANEL_HEIGHT)
        self._pygame.draw.rect(self.screen, self.COLOR_PANEL, panel_rect)

        if game_result is not None:
            if game_result == -1: msg = "Black Wins!"
            elif game_result == 1: msg = "White Wins!"
            else: msg = "Draw"
            self._draw_text(msg, self.font_large, self.COLOR_TEXT, (self.window_size / 2, self.PANEL_HEIGHT / 2))
            return

        player = "Black" if current_player_color == -1 else "White"
        self._draw_text(f"{player} to move", self.font_medium, self.COLOR_TEXT, (self.window_size / 2, self.PANEL_HEIGHT / 3))
        if status:
            self._draw_text(status, self.font_small, self.COLOR_GRID, (self.window_size / 2, self.PANEL_HEIGHT * 3 / 4))

    def render(self, board, last_move=None, current_player_color=None, game_result=None, win_line=None, status=None):
        self.screen.fill(self.COLOR_BACKGROUND)
        self.screen.blit(self.board_surface, self.board_origin)

        self._draw_stones(board)
        self._draw_last_move_marker(last_move)
        self._draw_win_line(win_line)
        self._draw_info_panel(current_player_color, game_result, status)

        self._pygame.display.flip()
        # Drain the queue so the window stays responsive while the AI searches.
        self._pygame.event.pump()

    def cell_from_position(self, pos):
        """Map a pixel position to (row, col); None unless within half a cell of an intersection."""
        mx, my = pos
        gx, gy = self._grid_origin()
        col = int(round((mx - gx) / self.tile_size))
        row = int(round((my - gy) / self.tile_size))
        if not (0 <= row < self.board_size and 0 <= col < self.board_size):
            return None
        cx, cy = self.cell_center(row, col)
        if ((mx - cx) ** 2 + (my - cy) ** 2) ** 0.5 > self.tile_size * 0.5:
            return None
        return row, col

    def _draw_hover_marker(self, board, player_color):
        coords = self.cell_from_position(self._pygame.mouse.get_pos())
        if not coords or not board.is_open(*coords):
            return
        radius = int(self.stone_radius)
        hover = self._pygame.Surface((2 * radius, 2 * radius), self._pygame.SRCALPHA)
        self._pygame.draw.circle(hover, self._stone_color(player_color) + (self.HOVER_ALPHA,), (radius, radius), radius)
        cx, cy = self.cell_center(*coords)
        self.screen.blit(hover, (cx - radius, cy - radius))

    def wait_for_move(self, board, player_color):
        """Block until a click on the board or the U key (undo). Closing the window exits."""
        pygame = self._pygame
        last = board.last_move
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    raise SystemExit("Window closed")
                if event.type == pygame.KEYDOWN and event.key == pygame.K_u:
                    return UNDO_REQUEST
                if event.type == pygame.MOUSEBUTTONDOWN:
                    coords = self.cell_from_position(event.pos)
                    if coords:
                        return coords

            # Re-render the board with the hover marker
            self.render(board, last_move=last.move if last else None, current_player_color=player_color)
            self._draw_hover_marker(board, player_color)
            pygame.display.flip()

            pygame.time.delay(10)

    def close(self):
        self._pygame.quit()
