"""
pipes.py: Pipe spawning, scrolling and recycling.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List

from .constants import (
    PIPE_SPEED, PIPE_SPACING, PIPE_MIN_HEIGHT, PIPE_WIDTH, PIPE_GAP,
    FIRST_PIPE_X_RATIO,
)
from .data_models import Pipe

logger = logging.getLogger(__name__)


@dataclass
class PipeGenerator:
    """
    Owns the ordered pipe sequence. Pipes are appended on the right and
    removed from the left, so the list always runs oldest (lowest x) first.
    """
    width: float
    ground_y: float
    rng: random.Random = field(default_factory=random.Random)
    pipes: List[Pipe] = field(default_factory=list)
    speed: float = PIPE_SPEED
    spacing: float = PIPE_SPACING
    min_height: float = PIPE_MIN_HEIGHT
    pipe_width: float = PIPE_WIDTH
    gap: float = PIPE_GAP

    def gap_bounds(self):
        """Inclusive range for a new pipe's gap-top height."""
        low = self.min_height
        high = self.ground_y - self.gap - self.min_height
        return low, high

    def _random_top_height(self) -> float:
        low, high = self.gap_bounds()
        if high < low:
            logger.warning("Screen too short for pipe gap (range %.1f..%.1f); using %.1f",
                           low, high, low)
            return float(low)
        return self.rng.uniform(low, high)

    def _spawn_pipe(self, x: float) -> Pipe:
        pipe = Pipe(x=float(x), top_height=self._random_top_height())
        self.pipes.append(pipe)
        return pipe

    def spawn_first_pipe(self) -> Pipe:
        """Spawns closer than steady-state spacing so the round starts quickly."""
        return self._spawn_pipe(self.width * FIRST_PIPE_X_RATIO)

    def needs_spawn(self) -> bool:
        return not self.pipes or self.pipes[-1].x < self.width - self.spacing

    def spawn_if_due(self):
        if self.needs_spawn():
            self._spawn_pipe(self.width)

    def scroll(self, scale: float):
        delta_x = self.speed * scale
        for pipe in self.pipes:
            pipe.x -= delta_x

    def collect_passed(self, bird_x: float) -> List[Pipe]:
        """Flags pipes whose right edge is now behind the bird. Each pipe is returned once."""
        newly_passed = []
        for pipe in self.pipes:
            if not pipe.passed and pipe.x + self.pipe_width < bird_x:
                pipe.passed = True
                newly_passed.append(pipe)
        return newly_passed

    def remove_offscreen(self):
        self.pipes[:] = [p for p in self.pipes if p.x + self.pipe_width >= 0]

    def clear(self):
        self.pipes.clear()
