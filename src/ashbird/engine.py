"""
engine.py: The simulation engine. Owns the bird, the pipes, scoring and the
game phase state machine.

Drivers call update() once per frame with the elapsed milliseconds, then read
get_render_state(). Input arrives through on_primary_input() at any time between
ticks.
"""

import logging
import random
import threading
from typing import List, Optional

from .constants import SCREEN_WIDTH, SCREEN_HEIGHT, GROUND_OFFSET, BIRD_X_RATIO
from .data_models import Bird, GamePhase, Pipe, RenderState, RoundState
from .physics_core import PhysicsCore
from .pipes import PipeGenerator
from .score_store import MemoryScoreStore, ScoreStore

logger = logging.getLogger(__name__)


def coerce_score(value) -> Optional[int]:
    """Returns the stored value as a non-negative int, or None if it is unusable."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    if isinstance(value, str):
        try:
            parsed = int(value.strip())
        except ValueError:
            return None
        return parsed if parsed >= 0 else None
    return None


class SimulationEngine:
    """
    One self-contained game instance. Every piece of mutable state lives here,
    so several engines can run side by side.
    """

    def __init__(self, store: Optional[ScoreStore] = None,
                 width: float = SCREEN_WIDTH, height: float = SCREEN_HEIGHT,
                 rng: Optional[random.Random] = None,
                 core: Optional[PhysicsCore] = None):
        self.store = store if store is not None else MemoryScoreStore()
        self.core = core if core is not None else PhysicsCore()
        self.width = float(width)
        self.height = float(height)
        self.ground_y = self.height - GROUND_OFFSET

        self.phase = GamePhase.SPLASH
        self.round = RoundState(high_score=self._load_high_score())
        self.bird = self._new_bird()
        self.pipe_generator = PipeGenerator(
            width=self.width,
            ground_y=self.ground_y,
            rng=rng if rng is not None else random.Random(),
            pipe_width=self.core.pipe_width,
            gap=self.core.pipe_gap,
        )

        # Input may be posted from another thread; never mid-tick
        self._lock = threading.Lock()

    @property
    def pipes(self) -> List[Pipe]:
        return self.pipe_generator.pipes

    # ---------- Persistence ----------

    def _load_high_score(self) -> int:
        try:
            raw = self.store.get()
        except Exception as e:
            logger.warning("High score load failed, starting from 0: %s", e)
            return 0
        if raw is None:
            return 0
        high_score = coerce_score(raw)
        if high_score is None:
            logger.warning("Ignoring malformed stored high score %r", raw)
            return 0
        return high_score

    def _persist_high_score(self, value: int):
        """Best effort. The in-memory high score stays authoritative either way."""
        try:
            saved = self.store.set(value)
        except Exception:
            logger.exception("Score store raised while saving high score %d", value)
            return
        if saved is False:
            logger.warning("High score %d not persisted; will retry on the next one", value)

    # ---------- Round lifecycle ----------

    def _new_bird(self) -> Bird:
        return Bird(x=self.width * BIRD_X_RATIO, y=self.height / 2)

    def reset_round(self):
        """Clears bird, pipes, score and new-high-score flag. Keeps the high score."""
        self.bird = self._new_bird()
        self.pipe_generator.clear()
        self.round.reset()

    def _set_phase(self, phase: GamePhase):
        logger.debug("Phase %s -> %s", self.phase.value, phase.value)
        self.phase = phase

    def _flap(self):
        self.bird.velocity = self.core.flap()

    def on_primary_input(self):
        """Tap / click / key. Meaning depends on the current phase."""
        with self._lock:
            if self.phase is GamePhase.SPLASH:
                self._set_phase(GamePhase.READY)
            elif self.phase is GamePhase.READY:
                self._set_phase(GamePhase.ACTIVE)
                self._flap()
            elif self.phase is GamePhase.ACTIVE:
                self._flap()
            elif self.phase is GamePhase.ENDED:
                self.reset_round()
                self._set_phase(GamePhase.READY)

    def resize(self, width: float, height: float):
        """Re-lays out screen bounds and the ground line. The bird anchor moves on the next reset."""
        with self._lock:
            self.width = float(width)
            self.height = float(height)
            self.ground_y = self.height - GROUND_OFFSET
            self.pipe_generator.width = self.width
            self.pipe_generator.ground_y = self.ground_y

    # ---------- Tick ----------

    def update(self, elapsed_ms):
        """Advances the simulation. Does nothing outside the ACTIVE phase."""
        with self._lock:
            if self.phase is not GamePhase.ACTIVE:
                return

            if not self.pipes:
                self.pipe_generator.spawn_first_pipe()

            scale = self.core.time_scale(elapsed_ms)

            # 1. Bird kinematics
            bird = self.bird
            bird.y, bird.velocity = self.core.apply_gravity_and_movement(
                bird.y, bird.velocity, scale)
            bird.rotation = self.core.rotation_for(bird.velocity)

            # 2. Spawn, move and retire pipes
            self.pipe_generator.spawn_if_due()
            self.pipe_generator.scroll(scale)
            for _ in self.pipe_generator.collect_passed(bird.x):
                self._score_point()
            self.pipe_generator.remove_offscreen()

            # 3. Collisions
            if self.core.check_collision(bird, self.pipes, self.ground_y):
                self._set_phase(GamePhase.ENDED)
                logger.info("Round over. Score: %d (best %d)",
                            self.round.score, self.round.high_score)

    def _score_point(self):
        state = self.round
        state.score += 1
        if state.score > state.high_score:
            state.high_score = state.score
            if not state.is_new_high_score:
                state.is_new_high_score = True
                logger.info("New high score this round")
            self._persist_high_score(state.high_score)

    def get_render_state(self) -> RenderState:
        with self._lock:
            return RenderState.capture(
                self.bird, self.pipes, self.phase, self.round,
                self.width, self.height, self.ground_y, self.core)
