"""Pygame-based board renderer, click input and restart button."""

from ..Board import BOARD_SIZE, Piece
from ..Presenter import StatusPresenter
from . import geometry


class PygameView:
    # --- Constants ---
    COLOR_WOOD = (222, 184, 135)
    COLOR_GRID = (51, 51, 51)
    COLOR_BLACK = (0, 0, 0)
    COLOR_WHITE = (255, 255, 255)
    COLOR_PANEL = (60, 40, 20)
    COLOR_TEXT = (230, 230, 230)
    COLOR_BUTTON = (120, 80, 40)

    PANEL_HEIGHT = 80
    STAR_RADIUS = 4

    def __init__(self, cell_size=geometry.CELL_SIZE, margin=geometry.MARGIN,
                 stone_radius=geometry.STONE_RADIUS, language="en", fps=30, font_path=None):
        import pygame

        self._pygame = pygame
        self.cell_size = cell_size
        self.margin = margin
        self.stone_radius = stone_radius
        self.fps = fps
        self.presenter = StatusPresenter(language)
        self.board_px = geometry.canvas_size(cell_size, margin)

        pygame.init()
        self.screen = pygame.display.set_mode((self.board_px, self.board_px + self.PANEL_HEIGHT))
        pygame.display.set_caption("Gobang")
        self.clock = pygame.time.Clock()

        # Default font has no CJK glyphs; pass font_path for language "zh"
        self.font = pygame.font.Font(font_path, 28)
        self.restart_rect = pygame.Rect(self.board_px - 130, self.board_px + 20, 110, 40)

    def _draw_text(self, text, color, center_pos):
        text_surface = self.font.render(text, True, color)
        text_rect = text_surface.get_rect(center=center_pos)
        self.screen.blit(text_surface, text_rect)

    def _draw_grid(self):
        pygame = self._pygame
        start = self.margin
        end = self.margin + (BOARD_SIZE - 1) * self.cell_size
        for i in range(BOARD_SIZE):
            pos = self.margin + i * self.cell_size
            pygame.draw.line(self.screen, self.COLOR_GRID, (pos, start), (pos, end), 1)
            pygame.draw.line(self.screen, self.COLOR_GRID, (start, pos), (end, pos), 1)

        for row in geometry.STAR_POINTS:
            for col in geometry.STAR_POINTS:
                center = geometry.cell_to_pixel(row, col, self.cell_size, self.margin)
                pygame.draw.circle(self.screen, self.COLOR_GRID, center, self.STAR_RADIUS)

    def _draw_stones(self, snapshot):
        pygame = self._pygame
        for row, cells in enumerate(snapshot.board):
            for col, piece in enumerate(cells):
                if piece is Piece.EMPTY:
                    continue
                center = geometry.cell_to_pixel(row, col, self.cell_size, self.margin)
                fill = self.COLOR_BLACK if piece is Piece.BLACK else self.COLOR_WHITE
                pygame.draw.circle(self.screen, fill, center, self.stone_radius)
                pygame.draw.circle(self.screen, self.COLOR_GRID, center, self.stone_radius, 1)

    def _draw_info_panel(self, snapshot):
        pygame = self._pygame
        panel_rect = pygame.Rect(0, self.board_px, self.board_px, self.PANEL_HEIGHT)
        pygame.draw.rect(self.screen, self.COLOR_PANEL, panel_rect)

        msg = self.presenter.headline(snapshot)
        self._draw_text(msg, self.COLOR_TEXT, ((self.board_px - 150) / 2, self.board_px + self.PANEL_HEIGHT / 2))

        pygame.draw.rect(self.screen, self.COLOR_BUTTON, self.restart_rect, border_radius=4)
        self._draw_text(self.presenter.restart_label(), self.COLOR_TEXT, self.restart_rect.center)

    def render(self, snapshot):
        self.screen.fill(self.COLOR_WOOD)
        self._draw_grid()
        self._draw_stones(snapshot)
        self._draw_info_panel(snapshot)
        self._pygame.display.flip()

    def handle_click(self, engine, pos):
        """Route a mouse click: restart button or a move at the nearest intersection."""
        if self.restart_rect.collidepoint(pos):
            engine.new_game()
            return
        # Off-board clicks are rejected by the engine itself
        row, col = geometry.pixel_to_cell(pos[0], pos[1], self.cell_size, self.margin)
        engine.apply_move(row, col)

    def run(self, engine):
        """Event loop until the window is closed."""
        pygame = self._pygame
        self.render(engine.get_snapshot())
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self.handle_click(engine, event.pos)
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_r:
                    engine.new_game()
            self.render(engine.get_snapshot())
            self.clock.tick(self.fps)

    def close(self):
        self._pygame.quit()
