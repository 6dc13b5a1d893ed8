"""Game entry point"""

from __future__ import annotations

import pygame

from .animator import Animator
from .constants import (
    WIDTH, HEIGHT, FPS, BG_COLOR, FONT_NAME, FONT_SIZE_MEDIUM, FONT_SIZE_LARGE,
    SPAWN_INTERVAL_MS, LOG_FILE
)
from .logger import GameLogger
from .models import GamePhase
from .sound import SoundEffect
from .surface import PygameSurface
from .timers import FrameClock, RepeatingTimer
from .ui import HUD, StartScreen, GameOverScreen

SPAWN_ENEMY_EVENT = pygame.USEREVENT + 1


class Game:
    """
    Main game controller: creates the window and collaborators, pumps events,
    issues start/restart commands to the animator and draws the UI layers.
    """

    def __init__(self) -> None:
        """Initialize subsystems, load assets, and wire the animator."""
        pygame.init()
        pygame.display.set_caption("Circle Shooter")

        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        self.font_small = pygame.font.Font(FONT_NAME, FONT_SIZE_MEDIUM)
        self.font_big = pygame.font.Font(FONT_NAME, FONT_SIZE_LARGE)
        self.show_fps = False
        self.final_frame: pygame.Surface | None = None

        self.sound = SoundEffect()
        self.logger = GameLogger(LOG_FILE)
        self.frame_clock = FrameClock(FPS)
        self.spawn_timer = RepeatingTimer(SPAWN_ENEMY_EVENT, SPAWN_INTERVAL_MS)

        self.hud = HUD(self.font_small)
        self.start_screen = StartScreen(self.font_big, self.font_small)
        self.game_over_screen = GameOverScreen(self.font_big, self.font_small)

        self.animator = Animator(
            PygameSurface(self.screen),
            self.sound,
            self.frame_clock,
            self.spawn_timer,
            logger=self.logger,
            on_score=self.hud.set_score,
            on_game_over=self.handle_game_over,
        )

    # --------------------------------- Commands -------------------------------------

    def start(self) -> None:
        """Start a session from the title card or after a game over."""
        if self.animator.phase is GamePhase.GAME_OVER:
            self.animator.restart()
        self.final_frame = None
        self.screen.fill(BG_COLOR)
        self.animator.start()

    def handle_game_over(self, final_score: int) -> None:
        # Keep the last simulated frame as the backdrop of the game over screen
        self.final_frame = self.screen.copy()
        print(f"Game over, final score: {final_score}")

    def toggle_mute(self) -> None:
        self.sound.toggle_mute()

    # --------------------------------- Loop -----------------------------------------

    def run(self) -> None:
        """Main game loop: process events, advance the animator, draw UI; exits on quit request."""
        running = True
        while running:
            for event in pygame.event.get():
                if not self.handle_event(event):
                    running = False
                    break

            if self.frame_clock.active:
                self.animator.animate(pygame.time.get_ticks())

            self.draw()
            self.frame_clock.tick()

        self.animator.stop()
        pygame.quit()

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Dispatch one pygame event.

        Returns
        -------
        bool
            False if the game should quit.
        """
        phase = self.animator.phase
        if event.type == pygame.QUIT:
            return False

        if event.type == SPAWN_ENEMY_EVENT:
            self.animator.spawn_enemy()
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            elif event.key == pygame.K_m:
                self.toggle_mute()
            elif event.key == pygame.K_f:
                self.show_fps = not self.show_fps
            elif event.key in (pygame.K_SPACE, pygame.K_RETURN) and phase is not GamePhase.RUNNING:
                self.start()
            elif event.key == pygame.K_r and phase is GamePhase.GAME_OVER:
                self.start()
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            # Clicks on the game over screen are ignored; restarting is keyboard only
            if phase is GamePhase.RUNNING:
                self.animator.fire(event.pos)
            elif phase is GamePhase.IDLE and self.start_screen.button_clicked(self.screen, event.pos):
                self.start()
        return True

    # --------------------------------- Rendering ------------------------------------

    def draw(self) -> None:
        """Compose the UI on top of whatever the animator drew this frame."""
        phase = self.animator.phase
        if phase is GamePhase.IDLE:
            self.screen.fill(BG_COLOR)
            self.start_screen.draw(self.screen, pygame.mouse.get_pos())
        elif phase is GamePhase.GAME_OVER:
            if self.final_frame is not None:
                self.screen.blit(self.final_frame, (0, 0))
            state = self.animator.state
            self.game_over_screen.draw(self.screen, state.score, state.shots, state.kills, state.accuracy)
        else:
            self.hud.draw(self.screen, self.show_fps, self.frame_clock.get_fps(), self.sound.muted)

        pygame.display.flip()


def main() -> None:
    Game().run()
