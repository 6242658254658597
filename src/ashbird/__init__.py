"""
ashbird: a single-screen flappy-style arcade simulation.
"""

from .data_models import Bird, GamePhase, Pipe, RenderState, RoundState
from .engine import SimulationEngine
from .physics_core import PhysicsCore
from .pipes import PipeGenerator
from .score_store import MemoryScoreStore, ScoreStore, SqliteScoreStore

__all__ = [
    "Bird", "GamePhase", "Pipe", "RenderState", "RoundState",
    "SimulationEngine", "PhysicsCore", "PipeGenerator",
    "MemoryScoreStore", "ScoreStore", "SqliteScoreStore",
]
