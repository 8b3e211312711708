"""EventScheduler: 트리거 AND 판정 + 리졸버 일괄 실행

게이트 우선순위 (tick):
1. 포아송 게이트 (rate 설정 시). rate <= 0이면 항상 불발.
   샘플러가 없으면 2로 넘어간다.
2. 빈도 게이트 (임계 구간 설정 시). 누적 시간이 임계에 도달하면
   run_once() 호출 전에 누적값을 0으로 리셋한다.
   트리거가 실패해도 누적분은 돌려받지 않는다.
3. 게이트 없음 → 매 tick마다 run_once()
"""

from datetime import timedelta
from typing import List, Optional

from sim.core.game_event.base import PoissonSampler, Resolver, Trigger
from sim.core.logging import get_logger
from sim.core.time import Duration, to_timedelta

logger = get_logger(__name__)

_ZERO = timedelta(0)


class EventScheduler:
    """Tick 구동 이벤트 스케줄러

    사용 패턴:
        sched = (
            EventScheduler()
            .with_trigger(ProximityTrigger(graph).with_pair(1, 2))
            .with_resolver(CallbackResolver(on_meet))
            .with_freq(timedelta(seconds=60))
        )
        sched.tick(timedelta(seconds=30))

    with_trigger/with_resolver는 추가, 나머지 with_*는 마지막 호출이 우선.
    """

    def __init__(self) -> None:
        self._triggers: List[Trigger] = []
        self._resolvers: List[Resolver] = []
        self._freq: Optional[timedelta] = None
        self._elapsed: timedelta = _ZERO
        self._poisson_rate: Optional[float] = None
        self._poisson_sampler: Optional[PoissonSampler] = None

    # === 설정 (fluent) ===

    def with_trigger(self, trigger: Trigger) -> "EventScheduler":
        self._triggers.append(trigger)
        return self

    def with_freq(self, freq: Duration) -> "EventScheduler":
        self._freq = to_timedelta(freq)
        return self

    def with_resolver(self, resolver: Resolver) -> "EventScheduler":
        self._resolvers.append(resolver)
        return self

    def with_poisson_rate(self, rate: float) -> "EventScheduler":
        self._poisson_rate = float(rate)
        return self

    def with_poisson_sampler(self, sampler: PoissonSampler) -> "EventScheduler":
        self._poisson_sampler = sampler
        return self

    # === 실행 ===

    def run_once(self) -> bool:
        """게이트 없이 1회 판정. 모든 트리거가 True면 리졸버 전부 실행."""
        if not self._triggers or not self._resolvers:
            return False

        if not all(trigger.should_fire() for trigger in self._triggers):
            logger.debug("EventScheduler: 트리거 불충족, 리졸버 미실행")
            return False

        for resolver in self._resolvers:
            resolver.resolve()
        logger.debug(f"EventScheduler 발화: resolvers={len(self._resolvers)}")
        return True

    def tick(self, dt: Duration) -> bool:
        """시뮬레이션 1스텝. 게이트 통과 시 run_once() 결과를 반환."""
        dt = to_timedelta(dt)

        if self._poisson_rate is not None:
            rate = self._poisson_rate
            if rate <= 0.0:
                return False
            if self._poisson_sampler is not None:
                count = self._poisson_sampler.sample(dt, rate)
                if count == 0:
                    return False
                # 발생 횟수와 무관하게 tick당 최대 1회 발화
                logger.debug(f"EventScheduler 포아송 게이트 통과: count={count}")
                return self.run_once()

        if self._freq is not None:
            self._elapsed += dt
            if self._elapsed < self._freq:
                return False
            logger.debug(
                f"EventScheduler 빈도 게이트 통과: "
                f"elapsed={self._elapsed.total_seconds()}s, "
                f"freq={self._freq.total_seconds()}s"
            )
            self._elapsed = _ZERO

        return self.run_once()

    # === 조회 ===

    @property
    def elapsed(self) -> timedelta:
        """빈도 게이트 누적 시간"""
        return self._elapsed

    @property
    def trigger_count(self) -> int:
        return len(self._triggers)

    @property
    def resolver_count(self) -> int:
        return len(self._resolvers)

    def __repr__(self) -> str:
        return (
            f"EventScheduler(triggers={len(self._triggers)}, "
            f"resolvers={len(self._resolvers)}, freq={self._freq}, "
            f"poisson_rate={self._poisson_rate})"
        )
