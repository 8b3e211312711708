"""Simulation Core"""

from sim.core.game_event import (
    CallbackResolver,
    CallbackTrigger,
    EventScheduler,
    PoissonSampler,
    ProximityTrigger,
    Resolver,
    Trigger,
)
from sim.core.graph import AdjacencyGraph
from sim.core.rng import Rng, RngPoissonSampler
from sim.core.time import GameSpeed, to_timedelta

__all__ = [
    "AdjacencyGraph",
    "Trigger",
    "Resolver",
    "PoissonSampler",
    "CallbackTrigger",
    "CallbackResolver",
    "ProximityTrigger",
    "EventScheduler",
    "Rng",
    "RngPoissonSampler",
    "GameSpeed",
    "to_timedelta",
]
