"""
data_models.py: Data structures for the simulation state.
"""

import enum
from dataclasses import dataclass, replace
from typing import Tuple


class GamePhase(enum.Enum):
    SPLASH = "splash"
    READY = "ready"
    ACTIVE = "active"
    ENDED = "ended"


@dataclass
class Bird:
    """The single bird. x is a fixed horizontal anchor for the round."""
    x: float
    y: float
    velocity: float = 0.0
    rotation: float = 0.0       # Derived from velocity, never fed back into physics


@dataclass
class Pipe:
    """A gapped obstacle. top_height is fixed at spawn."""
    x: float
    top_height: float
    passed: bool = False


@dataclass
class RoundState:
    score: int = 0
    high_score: int = 0
    is_new_high_score: bool = False

    def reset(self):
        """Clears per-round fields. The high score survives."""
        self.score = 0
        self.is_new_high_score = False


@dataclass(frozen=True)
class RenderState:
    """Read-only snapshot handed to the renderer after each tick."""
    bird: Bird
    pipes: Tuple[Pipe, ...]
    phase: GamePhase
    score: int
    high_score: int
    is_new_high_score: bool
    width: float
    height: float
    ground_y: float
    pipe_width: float
    pipe_gap: float
    bird_size: float

    @classmethod
    def capture(cls, bird, pipes, phase, round_state, width, height, ground_y, core):
        """Copies mutable pieces so later ticks cannot change the snapshot."""
        return cls(
            bird=replace(bird),
            pipes=tuple(replace(p) for p in pipes),
            phase=phase,
            score=round_state.score,
            high_score=round_state.high_score,
            is_new_high_score=round_state.is_new_high_score,
            width=width,
            height=height,
            ground_y=ground_y,
            pipe_width=core.pipe_width,
            pipe_gap=core.pipe_gap,
            bird_size=core.bird_size,
        )
