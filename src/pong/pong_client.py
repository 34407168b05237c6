#!/usr/bin/env python3
"""
pong_client.py

pygame front-end: builds the sprites, turns key presses into intents,
steps the engine and draws each snapshot. No game rules live here.
"""

import argparse
import logging
from typing import List, Optional, Tuple

import pygame

from .constants import (
    BALL_SPRITE_SIZE, PADDLE_SPRITE_SIZE, RENDER_FPS, SCREEN_HEIGHT, SCREEN_WIDTH, TICK_TIME
)
from .data_models import FieldBounds, Phase, Snapshot
from .game_engine import GameEngine
from .input_translator import Intent

logger = logging.getLogger(__name__)

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
DIM = (140, 140, 140)

KEY_INTENTS = {
    pygame.K_UP: Intent.MOVE_UP,
    pygame.K_DOWN: Intent.MOVE_DOWN,
    pygame.K_PAUSE: Intent.TOGGLE_PAUSE,
    pygame.K_p: Intent.TOGGLE_PAUSE,
    pygame.K_ESCAPE: Intent.QUIT,
}


def intent_for_event(event) -> Optional[Intent]:
    """Maps a pygame event to an intent, or None if the game ignores it."""
    if event.type == pygame.QUIT:
        return Intent.QUIT
    if event.type == pygame.KEYDOWN:
        return KEY_INTENTS.get(event.key)
    return None


def make_sprite(size: Tuple[int, int]) -> pygame.Surface:
    """A solid white block; its size is what the simulation is built from."""
    image = pygame.Surface(size, pygame.SRCALPHA)
    image.fill(WHITE)
    return image


class PongClient:
    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT,
                 catch_up: bool = False):
        pygame.init()
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Pong")

        self.paddle_image = make_sprite(PADDLE_SPRITE_SIZE)
        self.ball_image = make_sprite(BALL_SPRITE_SIZE)

        # --- Game Logic ---
        self.engine = GameEngine()
        self.world = self.engine.create_world(
            FieldBounds(width, height),
            paddle_size=self.paddle_image.get_size(),
            ball_size=self.ball_image.get_size())
        self.snapshot = self.world.snapshot()

        # Input collected since the last simulated step
        self.pending_intents: List[Intent] = []

        # Time Management
        self.catch_up = catch_up
        self.clock = pygame.time.Clock()
        self.step_timer = 0.0

        self.score_font = pygame.font.Font(None, 96)
        self.banner_font = pygame.font.Font(None, 120)
        self.small_font = pygame.font.Font(None, 28)

    def run(self):
        """The main client execution loop."""
        logger.info("Starting %dx%d, catch-up %s", self.world.bounds.width,
                    self.world.bounds.height, "on" if self.catch_up else "off")

        while not self.world.quit_requested:
            frame_time = self.clock.tick(RENDER_FPS) / 1000.0

            for event in pygame.event.get():
                intent = intent_for_event(event)
                if intent is not None:
                    self.pending_intents.append(intent)

            if self.catch_up:
                # Fixed step, as many times as real time demands
                self.step_timer += frame_time
                while self.step_timer >= TICK_TIME and not self.world.quit_requested:
                    self.step_timer -= TICK_TIME
                    self._step()
            else:
                # One simulated step per rendered frame, whatever the frame took
                self._step()

            self._draw()

        logger.info("Final score %d - %d", self.world.score.player, self.world.score.opponent)
        pygame.quit()

    def _step(self):
        intents, self.pending_intents = self.pending_intents, []
        self.snapshot = self.engine.step(self.world, intents)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("tick %d %s", self.engine.tick_count, self.snapshot.to_client_state())

    def _draw(self):
        snap: Snapshot = self.snapshot
        screen = self.screen
        width, height = screen.get_size()
        screen.fill(BLACK)

        screen.blit(self.paddle_image, (int(snap.player.x), int(snap.player.y)))
        screen.blit(self.paddle_image, (int(snap.opponent.x), int(snap.opponent.y)))

        # Scores a quarter of the way in from each side, an eighth of the way down
        for score, centre_x in ((snap.player_score, width // 4),
                                (snap.opponent_score, (width // 4) * 3)):
            text = self.score_font.render(str(score), True, WHITE)
            screen.blit(text, (centre_x - text.get_width() // 2, height // 8))

        if snap.phase is Phase.GAME_OVER:
            banner = self.banner_font.render("GAME OVER", True, WHITE)
            screen.blit(banner, (width // 2 - banner.get_width() // 2,
                                 height // 2 - banner.get_height() // 2))
        else:
            screen.blit(self.ball_image, (int(snap.ball.x), int(snap.ball.y)))

        if snap.phase is Phase.PAUSED:
            paused = self.small_font.render("Paused - press P to resume", True, DIM)
            screen.blit(paused, (width // 2 - paused.get_width() // 2, height - 40))

        pygame.display.flip()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play Pong against the computer.")
    parser.add_argument("--width", type=int, default=SCREEN_WIDTH)
    parser.add_argument("--height", type=int, default=SCREEN_HEIGHT)
    parser.add_argument("--catch-up", action="store_true",
                        help="run extra fixed steps when frames are slow so the game keeps real time")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    client = PongClient(args.width, args.height, catch_up=args.catch_up)
    client.run()


if __name__ == "__main__":
    main()
