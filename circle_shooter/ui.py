"""HUD, start screen and Game Over screen"""

from __future__ import annotations

import pygame

from .constants import BG_COLOR, HUD_PADDING, TEXT_COLOR, ACCENT_COLOR, FONT_NAME, FONT_SIZE_SMALL


def draw_overlay(surf: pygame.Surface, alpha: int) -> None:
    overlay = pygame.Surface(surf.get_size(), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, alpha))
    surf.blit(overlay, (0, 0))


class HUD:
    """Heads-Up Display: score on the left, optional indicators on the right."""

    def __init__(self, font: pygame.font.Font) -> None:
        self.font = font
        self.small_font = pygame.font.Font(FONT_NAME, FONT_SIZE_SMALL)
        self.score = 0
        self.drawn_rects: list[pygame.Rect] = []

    def set_score(self, score: int) -> None:
        """Score listener wired to the animator."""
        self.score = score

    def blit_text(self, surf: pygame.Surface, text: pygame.Surface, pos: tuple[int, int]) -> pygame.Rect:
        surf.fill(BG_COLOR, pygame.Rect(pos, text.get_size()))
        rect = surf.blit(text, pos)
        self.drawn_rects.append(rect)
        return rect

    def draw(self, surf: pygame.Surface, show_fps: bool = False, fps: float = 0.0,
             muted: bool = False) -> None:
        """
        Draw the HUD over the current frame.

        Text drawn last frame is wiped to the background first, otherwise the
        translucent trail fade leaves ghosts of old values behind.
        """
        for rect in self.drawn_rects:
            surf.fill(BG_COLOR, rect)
        self.drawn_rects = []

        score_text = self.font.render(f"Score: {self.score}", True, TEXT_COLOR)
        self.blit_text(surf, score_text, (HUD_PADDING, HUD_PADDING))

        right_y = HUD_PADDING
        if show_fps:
            fps_color = (0, 255, 0) if fps >= 55 else (255, 255, 0) if fps >= 30 else (255, 0, 0)
            fps_text = self.small_font.render(f"FPS: {fps:.1f}", True, fps_color)
            self.blit_text(surf, fps_text, (surf.get_width() - fps_text.get_width() - HUD_PADDING, right_y))
            right_y += fps_text.get_height() + 4

        if muted:
            muted_text = self.small_font.render("MUTED", True, (255, 150, 150))
            self.blit_text(surf, muted_text, (surf.get_width() - muted_text.get_width() - HUD_PADDING, right_y))


class StartScreen:
    """Title, start button and controls."""

    BUTTON_SIZE = (200, 50)

    def __init__(self, font_big: pygame.font.Font, font_small: pygame.font.Font):
        self.font_big = font_big
        self.font_small = font_small

    def button_rect(self, surf: pygame.Surface) -> pygame.Rect:
        rect = pygame.Rect((0, 0), self.BUTTON_SIZE)
        rect.center = (surf.get_width() // 2, surf.get_height() // 2 + 40)
        return rect

    def button_clicked(self, surf: pygame.Surface, mouse_pos: tuple[int, int]) -> bool:
        return self.button_rect(surf).collidepoint(mouse_pos)

    def draw(self, surf: pygame.Surface, mouse_pos: tuple[int, int]) -> None:
        """Draw the title card."""
        draw_overlay(surf, 180)
        center_x = surf.get_width() // 2
        title_y = max(80, int(surf.get_height() * 0.3))

        title_text = self.font_big.render("CIRCLE SHOOTER", True, ACCENT_COLOR)
        surf.blit(title_text, title_text.get_rect(center=(center_x, title_y)))

        button_rect = self.button_rect(surf)
        hovered = button_rect.collidepoint(mouse_pos)
        pygame.draw.rect(surf, (70, 110, 200) if hovered else (50, 80, 160), button_rect, border_radius=25)
        start_text = self.font_small.render("START GAME", True, TEXT_COLOR)
        surf.blit(start_text, start_text.get_rect(center=button_rect.center))

        instructions = [
            "CONTROLS:",
            "Left Click - Shoot",
            "M - Toggle mute",
            "F - Toggle FPS",
            "ESC - Quit",
        ]
        y = button_rect.bottom + 40
        for i, instruction in enumerate(instructions):
            color = ACCENT_COLOR if i == 0 else (180, 180, 180)
            text = self.font_small.render(instruction, True, color)
            surf.blit(text, text.get_rect(center=(center_x, y + i * 22)))


class GameOverScreen:
    """Game over screen with final stats and restart option."""

    def __init__(self, font_big: pygame.font.Font, font_small: pygame.font.Font):
        self.font_big = font_big
        self.font_small = font_small

    def draw(self, surf: pygame.Surface, score: int, shots: int, kills: int, accuracy: float) -> None:
        current_width = surf.get_width()
        current_height = surf.get_height()

        draw_overlay(surf, 180)

        game_over_text = self.font_big.render("GAME OVER", True, (255, 100, 100))
        title_y = max(80, int(current_height * 0.25))  # 25% from top, minimum 80px
        surf.blit(game_over_text, game_over_text.get_rect(center=(current_width // 2, title_y)))

        stats_lines = [
            f"Final Score: {score}",
            f"Shots: {shots}",
            f"Enemies Destroyed: {kills}",
            f"Accuracy: {accuracy:.1f}%",
        ]

        y_offset = max(title_y + 80, int(current_height * 0.4))
        for line in stats_lines:
            text_surf = self.font_small.render(line, True, TEXT_COLOR)
            surf.blit(text_surf, text_surf.get_rect(center=(current_width // 2, y_offset)))
            y_offset += 30

        inst_text = self.font_small.render("Press R or Enter to restart, ESC to quit", True, (150, 150, 150))
        surf.blit(inst_text, inst_text.get_rect(center=(current_width // 2, y_offset + 30)))
