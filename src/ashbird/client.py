#!/usr/bin/env python3
"""
client.py

Reference pygame driver: samples frame time, forwards input to the engine and
draws flat shapes from the render snapshot. No game state lives here.
"""

import logging
from typing import List, Optional, Tuple

import pygame

from .constants import SCREEN_WIDTH, SCREEN_HEIGHT, RENDER_FPS, SCORE_DB_FILE
from .data_models import GamePhase, RenderState
from .engine import SimulationEngine
from .score_store import SqliteScoreStore

logger = logging.getLogger(__name__)

PRIMARY = "primary"
QUIT = "quit"

PRIMARY_KEYS = (pygame.K_SPACE, pygame.K_UP)

SKY = (112, 197, 206)
GROUND = (222, 216, 149)
PIPE = (115, 191, 46)
BIRD = (247, 220, 111)
BIRD_DEAD = (150, 150, 150)

CAPTIONS = {
    GamePhase.SPLASH: "Ashbird - tap anywhere to continue",
    GamePhase.READY: "Ashbird - tap or press space to start",
    GamePhase.ACTIVE: "Ashbird",
    GamePhase.ENDED: "Ashbird - game over, tap to restart",
}


def translate_event(event) -> Optional[str]:
    """Maps a pygame event to an abstract signal, or None if it is irrelevant."""
    if event.type == pygame.QUIT:
        return QUIT
    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            return QUIT
        if event.key in PRIMARY_KEYS:
            return PRIMARY
        return None
    if event.type in (pygame.MOUSEBUTTONDOWN, pygame.FINGERDOWN):
        return PRIMARY
    return None


def pipe_rects(state: RenderState) -> List[Tuple[float, float, float, float]]:
    """Top and bottom (x, y, w, h) rectangles for every pipe, from the engine's geometry."""
    rects = []
    for pipe in state.pipes:
        bottom_y = pipe.top_height + state.pipe_gap
        rects.append((pipe.x, 0, state.pipe_width, pipe.top_height))
        rects.append((pipe.x, bottom_y, state.pipe_width, state.ground_y - bottom_y))
    return rects


def caption_for(state: RenderState) -> str:
    text = f"{CAPTIONS[state.phase]} | Score: {state.score} | Best: {state.high_score}"
    if state.is_new_high_score:
        text += " | NEW HIGH SCORE!"
    return text


class GameClient:
    def __init__(self, engine: SimulationEngine):
        pygame.init()
        self.engine = engine
        self.screen = pygame.display.set_mode(
            (int(engine.width), int(engine.height)), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self._caption = ""

    def run(self):
        """The main client loop: input, tick, draw."""
        running = True
        while running:
            elapsed_ms = self.clock.tick(RENDER_FPS)

            for event in pygame.event.get():
                if event.type == pygame.VIDEORESIZE:
                    self.engine.resize(event.w, event.h)
                    continue
                signal = translate_event(event)
                if signal == QUIT:
                    running = False
                elif signal == PRIMARY:
                    self.engine.on_primary_input()

            self.engine.update(elapsed_ms)
            self._draw(self.engine.get_render_state())

        pygame.quit()

    def _draw(self, state: RenderState):
        screen = self.screen
        screen.fill(SKY)

        for rect in pipe_rects(state):
            pygame.draw.rect(screen, PIPE, rect)

        pygame.draw.rect(screen, GROUND, (0, state.ground_y, state.width, state.height - state.ground_y))

        color = BIRD_DEAD if state.phase is GamePhase.ENDED else BIRD
        pygame.draw.circle(screen, color, (int(state.bird.x), int(state.bird.y)), int(state.bird_size // 2))

        caption = caption_for(state)
        if caption != self._caption:
            pygame.display.set_caption(caption)
            self._caption = caption

        pygame.display.flip()


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    store = SqliteScoreStore(SCORE_DB_FILE)
    engine = SimulationEngine(store=store, width=SCREEN_WIDTH, height=SCREEN_HEIGHT)
    logger.info("Starting with high score %d (store: %s)", engine.round.high_score, SCORE_DB_FILE)
    try:
        GameClient(engine).run()
    finally:
        store.close()
        logger.info("Stopped. Best: %d", engine.round.high_score)


if __name__ == "__main__":
    main()
