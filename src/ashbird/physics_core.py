"""
physics_core.py: Delta-time scaling, bird kinematics and collision logic.
"""

import math
from typing import Iterable, Tuple

from .constants import (
    GRAVITY, FLAP_STRENGTH, MAX_FALL_SPEED, FRAME_MS, MAX_FRAME_MS,
    BIRD_SIZE, HITBOX_INSET, PIPE_WIDTH, PIPE_GAP,
    ROTATION_GAIN, MIN_ROTATION, MAX_ROTATION,
)
from .data_models import Bird, Pipe


class PhysicsCore:
    """
    Frame-rate independent physics shared by the engine and the pipe generator.
    All tunables are expressed per nominal 60 Hz frame and scaled by elapsed time.
    """

    def __init__(self, gravity=GRAVITY, flap_strength=FLAP_STRENGTH,
                 max_fall_speed=MAX_FALL_SPEED, bird_size=BIRD_SIZE,
                 hitbox_inset=HITBOX_INSET, pipe_width=PIPE_WIDTH, pipe_gap=PIPE_GAP):
        self.gravity = gravity
        self.flap_strength = flap_strength
        self.max_fall_speed = max_fall_speed
        self.bird_size = bird_size
        self.hitbox_inset = hitbox_inset
        self.pipe_width = pipe_width
        self.pipe_gap = pipe_gap

    @staticmethod
    def sanitize_elapsed(elapsed_ms) -> float:
        """Clamps driver input to [0, MAX_FRAME_MS]. NaN and negatives become 0."""
        try:
            elapsed_ms = float(elapsed_ms)
        except (TypeError, ValueError):
            return 0.0
        except OverflowError:
            # Integer too big for a float: a very long pause, or garbage below zero
            return MAX_FRAME_MS if elapsed_ms > 0 else 0.0
        if math.isnan(elapsed_ms) or elapsed_ms < 0:
            return 0.0
        return min(elapsed_ms, MAX_FRAME_MS)

    def time_scale(self, elapsed_ms) -> float:
        """Dimensionless factor: 1.0 equals one nominal frame."""
        return self.sanitize_elapsed(elapsed_ms) / FRAME_MS

    def apply_gravity_and_movement(self, y: float, velocity: float, scale: float) -> Tuple[float, float]:
        """
        Advances (y, velocity) by `scale` nominal frames.

        Position is integrated in closed form up to the moment the fall speed cap
        is reached and linearly afterwards, so the result is the same however
        the elapsed time is split across ticks.
        """
        velocity = min(velocity, self.max_fall_speed)
        if scale <= 0:
            return y, velocity

        if self.gravity > 0:
            until_cap = (self.max_fall_speed - velocity) / self.gravity
        else:
            until_cap = math.inf

        if scale <= until_cap:
            y += velocity * scale + 0.5 * self.gravity * scale * scale
            velocity = min(velocity + self.gravity * scale, self.max_fall_speed)
        else:
            y += velocity * until_cap + 0.5 * self.gravity * until_cap * until_cap
            y += self.max_fall_speed * (scale - until_cap)
            velocity = self.max_fall_speed

        return y, velocity

    def flap(self) -> float:
        """Returns the velocity after a flap. It replaces, never adds."""
        return self.flap_strength

    @staticmethod
    def rotation_for(velocity: float) -> float:
        return min(max(velocity * ROTATION_GAIN, MIN_ROTATION), MAX_ROTATION)

    def hitbox(self, bird: Bird) -> Tuple[float, float, float, float]:
        """(left, right, top, bottom) of the shrunk collision box."""
        half = self.bird_size / 2 - self.hitbox_inset
        return bird.x - half, bird.x + half, bird.y - half, bird.y + half

    def hits_bounds(self, bird: Bird, ground_y: float) -> bool:
        _, _, top, bottom = self.hitbox(bird)
        return bottom > ground_y or top < 0

    def hits_pipe(self, bird: Bird, pipe: Pipe) -> bool:
        left, right, top, bottom = self.hitbox(bird)
        if right > pipe.x and left < pipe.x + self.pipe_width:
            if top < pipe.top_height:
                return True
            if bottom > pipe.top_height + self.pipe_gap:
                return True
        return False

    def check_collision(self, bird: Bird, pipes: Iterable[Pipe], ground_y: float) -> bool:
        """Checks for collisions with the ground, the ceiling or any pipe."""
        if self.hits_bounds(bird, ground_y):
            return True
        return any(self.hits_pipe(bird, pipe) for pipe in pipes)
