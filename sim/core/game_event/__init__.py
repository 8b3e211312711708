"""게임 이벤트 시스템 Core 패키지"""

from sim.core.game_event.base import (
    CallbackResolver,
    CallbackTrigger,
    PoissonSampler,
    Resolver,
    Trigger,
)
from sim.core.game_event.proximity import ProximityTrigger
from sim.core.game_event.scheduler import EventScheduler

__all__ = [
    # capabilities
    "Trigger",
    "Resolver",
    "PoissonSampler",
    "CallbackTrigger",
    "CallbackResolver",
    # triggers
    "ProximityTrigger",
    # scheduler
    "EventScheduler",
]
