"""테스트용 Trigger/Resolver/PoissonSampler 구현"""

from typing import List

from sim.core.game_event import PoissonSampler, Resolver, Trigger


class AlwaysTrue(Trigger):
    def should_fire(self) -> bool:
        return True


class AlwaysFalse(Trigger):
    def should_fire(self) -> bool:
        return False


class Counter:
    """여러 리졸버가 공유하는 카운터"""

    def __init__(self) -> None:
        self.value = 0


class Increment(Resolver):
    def __init__(self, counter: Counter) -> None:
        self.counter = counter

    def resolve(self) -> None:
        self.counter.value += 1


class Record(Resolver):
    """실행 순서 기록용"""

    def __init__(self, log: List[str], name: str) -> None:
        self.log = log
        self.name = name

    def resolve(self) -> None:
        self.log.append(self.name)


class FixedSampler(PoissonSampler):
    """고정 횟수를 반환하고 호출 인자를 기록"""

    def __init__(self, count: int) -> None:
        self.count = count
        self.calls: list = []

    def sample(self, dt, rate) -> int:
        self.calls.append((dt, rate))
        return self.count
