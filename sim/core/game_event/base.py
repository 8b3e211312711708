"""게임 이벤트 능력(capability) 인터페이스

Trigger: 발화 조건 (bool 술어)
Resolver: 발화 시 실행할 부수효과
PoissonSampler: 구간 dt 동안의 확률적 발생 횟수

Trigger/Resolver는 기본 구현이 있어 필요한 메서드만 재정의하면 된다.
"""

from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Callable


class Trigger:
    """발화 조건. 내부 상태(쿨다운 등)를 가질 수 있다."""

    def should_fire(self) -> bool:
        return False


class Resolver:
    """발화 시 실행되는 동작. 반환값 없음."""

    def resolve(self) -> None:
        pass


class PoissonSampler(ABC):
    """포아송 게이트용 발생 횟수 샘플러"""

    @abstractmethod
    def sample(self, dt: timedelta, rate: float) -> int:
        """구간 dt, 강도 rate에서의 발생 횟수 (0 이상).

        스케줄러는 0/비0 구분만 사용한다.
        """
        ...


class CallbackTrigger(Trigger):
    """인자 없는 callable을 Trigger로 감싼다."""

    def __init__(self, predicate: Callable[[], bool]) -> None:
        self._predicate = predicate

    def should_fire(self) -> bool:
        return bool(self._predicate())


class CallbackResolver(Resolver):
    """인자 없는 callable을 Resolver로 감싼다."""

    def __init__(self, action: Callable[[], None]) -> None:
        self._action = action

    def resolve(self) -> None:
        self._action()
