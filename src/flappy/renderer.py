"""
renderer.py: Draws a FrameSnapshot onto a pygame surface.
"""

import math

import pygame

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, GROUND_Y, GRASS_HEIGHT,
    PIPE_WIDTH, PIPE_CAP_HEIGHT, PIPE_CAP_OVERHANG,
    COLOR_SKY_TOP, COLOR_SKY_BOTTOM, COLOR_CLOUD, COLOR_PIPE, COLOR_PIPE_CAP,
    COLOR_GROUND, COLOR_GRASS, COLOR_BIRD, COLOR_WING, COLOR_EYE, COLOR_BEAK,
    COLOR_OVERLAY, COLOR_TEXT, COLOR_BUTTON, COLOR_BUTTON_BORDER
)
from .data_models import Bird, FrameSnapshot, Phase

BEAK_LENGTH = 8
BUTTON_SIZE = (160, 44)


def _lerp_color(a, b, t):
    return tuple(int(a[i] + (b[i] - a[i]) * t) for i in range(3))


class Renderer:
    """Paints one frame per call. Never touches game state."""

    def __init__(self, screen: pygame.Surface):
        if not pygame.font.get_init():
            pygame.font.init()
        self.screen = screen
        self.large_font = pygame.font.Font(None, 48)
        self.font = pygame.font.Font(None, 28)
        self.small_font = pygame.font.Font(None, 24)

        self.sky = self._build_sky()
        self.button_rect = pygame.Rect(0, 0, *BUTTON_SIZE)
        self.button_rect.center = (SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2 + 70)

    def _build_sky(self) -> pygame.Surface:
        sky = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
        for row in range(SCREEN_HEIGHT):
            color = _lerp_color(COLOR_SKY_TOP, COLOR_SKY_BOTTOM, row / (SCREEN_HEIGHT - 1))
            pygame.draw.line(sky, color, (0, row), (SCREEN_WIDTH, row))
        return sky

    def draw(self, snapshot: FrameSnapshot):
        screen = self.screen
        screen.blit(self.sky, (0, 0))

        self._draw_clouds(snapshot)
        self._draw_pipes(snapshot)

        # Ground and grass
        pygame.draw.rect(screen, COLOR_GROUND, (0, GROUND_Y, SCREEN_WIDTH, SCREEN_HEIGHT - GROUND_Y))
        pygame.draw.rect(screen, COLOR_GRASS, (0, GROUND_Y, SCREEN_WIDTH, GRASS_HEIGHT))

        self._draw_bird(snapshot.bird)
        self._draw_hud(snapshot)

        if snapshot.phase is Phase.MENU:
            self._draw_menu()
        elif snapshot.phase is Phase.GAME_OVER:
            self._draw_game_over(snapshot)

    def _draw_clouds(self, snapshot: FrameSnapshot):
        layer = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.SRCALPHA)
        for cloud in snapshot.clouds:
            pygame.draw.circle(layer, COLOR_CLOUD, (int(cloud.x), int(cloud.y)), int(cloud.size))
        self.screen.blit(layer, (0, 0))

    def _draw_pipes(self, snapshot: FrameSnapshot):
        screen = self.screen
        for pipe in snapshot.pipes:
            x = int(pipe.x)
            top = int(pipe.top_height)
            bottom = int(pipe.bottom_y)

            pygame.draw.rect(screen, COLOR_PIPE, (x, 0, PIPE_WIDTH, top))
            pygame.draw.rect(screen, COLOR_PIPE, (x, bottom, PIPE_WIDTH, SCREEN_HEIGHT - bottom))

            cap_width = PIPE_WIDTH + 2 * PIPE_CAP_OVERHANG
            pygame.draw.rect(screen, COLOR_PIPE_CAP,
                             (x - PIPE_CAP_OVERHANG, top - PIPE_CAP_HEIGHT, cap_width, PIPE_CAP_HEIGHT))
            pygame.draw.rect(screen, COLOR_PIPE_CAP,
                             (x - PIPE_CAP_OVERHANG, bottom, cap_width, PIPE_CAP_HEIGHT))

    def _draw_bird(self, bird: Bird):
        # Drawn around the body centre; the beak sticks out past the box on the right.
        w, h = bird.width, bird.height
        sprite = pygame.Surface((w + 2 * BEAK_LENGTH, h), pygame.SRCALPHA)
        ox = BEAK_LENGTH

        pygame.draw.rect(sprite, COLOR_BIRD, (ox, 0, w, h))
        pygame.draw.rect(sprite, COLOR_WING, (ox + 5, 5, 15, 10))
        pygame.draw.circle(sprite, COLOR_EYE, (ox + w - 8, 8), 3)
        pygame.draw.rect(sprite, COLOR_BEAK, (ox + w, h // 2 - 2, BEAK_LENGTH, 4))

        # Positive rotation tilts nose-down; pygame rotates counter-clockwise.
        rotated = pygame.transform.rotate(sprite, -math.degrees(bird.rotation))
        center = (int(bird.x + w / 2), int(bird.y + h / 2))
        self.screen.blit(rotated, rotated.get_rect(center=center))

    def _draw_hud(self, snapshot: FrameSnapshot):
        score_text = self.large_font.render(str(snapshot.score), True, COLOR_TEXT)
        self.screen.blit(score_text, (SCREEN_WIDTH // 2 - score_text.get_width() // 2, 20))

        best_text = self.small_font.render(f"Best: {snapshot.best_score}", True, COLOR_TEXT)
        self.screen.blit(best_text, (SCREEN_WIDTH - best_text.get_width() - 10, 10))

    def _draw_overlay(self):
        overlay = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.SRCALPHA)
        overlay.fill(COLOR_OVERLAY)
        self.screen.blit(overlay, (0, 0))

    def _draw_centered(self, font: pygame.font.Font, message: str, y: int):
        surf = font.render(message, True, COLOR_TEXT)
        self.screen.blit(surf, (SCREEN_WIDTH // 2 - surf.get_width() // 2, y - surf.get_height() // 2))

    def _draw_button(self, label: str):
        pygame.draw.rect(self.screen, COLOR_BUTTON, self.button_rect, border_radius=8)
        pygame.draw.rect(self.screen, COLOR_BUTTON_BORDER, self.button_rect, width=2, border_radius=8)
        surf = self.font.render(label, True, COLOR_TEXT)
        self.screen.blit(surf, surf.get_rect(center=self.button_rect.center))

    def _draw_menu(self):
        self._draw_overlay()
        self._draw_centered(self.font, "Press SPACE or click to start!", SCREEN_HEIGHT // 2)
        self._draw_button("Start")

    def _draw_game_over(self, snapshot: FrameSnapshot):
        self._draw_overlay()
        self._draw_centered(self.large_font, "Game Over", SCREEN_HEIGHT // 2 - 60)
        self._draw_centered(self.font, f"Score: {snapshot.score}", SCREEN_HEIGHT // 2 - 10)
        self._draw_centered(self.small_font, f"Best: {snapshot.best_score}", SCREEN_HEIGHT // 2 + 20)
        self._draw_button("Play Again")
