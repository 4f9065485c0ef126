"""
Pygame renderer for the worm
paint(state, fraction) clears the surface, fills each interpolated worm cell,
fills the food cell, then draws the score
"""

import pygame

from .interpolation import interpolate_body

CELL_SIZE = 20


class WormRenderer:
    def __init__(self, surface, cell_size=CELL_SIZE, show_score=True):
        """
        Args:
            surface: pygame Surface to paint on (the display or an off-screen surface)
            cell_size: Size of each cell in pixels
            show_score: If True, draw the score in the top-left corner
        """
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size}")
        self.surface = surface
        self.cell_size = cell_size
        self.show_score = show_score

        # Colors
        self.black = pygame.Color(0, 0, 0)
        self.red = pygame.Color(255, 0, 0)
        self.green = pygame.Color(0, 255, 0)

        self.score_font = pygame.font.SysFont('consolas', 20) if show_score else None

    def cell_rect(self, x, y):
        """Pixel rect of a (possibly fractional) grid position"""
        c = self.cell_size
        return pygame.Rect(int(round(float(x) * c)), int(round(float(y) * c)), c, c)

    def paint(self, state, fraction):
        """Paint one frame with the worm blended `fraction` of the way through its last move"""
        self.surface.fill(self.black)

        for x, y in interpolate_body(state.previous, state.body, fraction):
            pygame.draw.rect(self.surface, self.green, self.cell_rect(x, y))

        # Food sits on its exact cell, never interpolated
        if state.food is not None:
            pygame.draw.rect(self.surface, self.red, self.cell_rect(*state.food))

        if self.score_font is not None:
            score_text = self.score_font.render(f'Score: {state.score}', True, self.red)
            self.surface.blit(score_text, (10, 10))
