"""결정적 난수 리소스 (xorshift64*) + 포아송 샘플러

Rng 알고리즘은 기존 트레이스와의 호환을 위해 비트 단위로 고정이다.
상수나 시프트 순서를 바꾸지 말 것.
"""

import math
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from sim.core.game_event.base import PoissonSampler
from sim.core.logging import get_logger

logger = get_logger(__name__)

MASK64 = 0xFFFFFFFFFFFFFFFF
GOLDEN_GAMMA = 0x9E3779B97F4A7C15
XORSHIFT_MULTIPLIER = 0x2545F4914F6CDD1D

# Knuth 방식은 exp(-mean)이 언더플로하면 끝나지 않으므로 평균 상한을 둔다
POISSON_MAX_MEAN = 700.0


@dataclass
class Rng:
    """64비트 상태 하나로 구성된 결정적 난수 생성기. 기본 상태 0."""

    state: int = 0

    def next_u64(self) -> int:
        x = (self.state + GOLDEN_GAMMA) & MASK64
        x ^= x >> 12
        x ^= (x << 25) & MASK64
        x ^= x >> 27
        self.state = x
        return (x * XORSHIFT_MULTIPLIER) & MASK64

    def next_float(self) -> float:
        """[0, 1) 구간 실수. next_u64()의 상위 53비트 사용."""
        return (self.next_u64() >> 11) * (1.0 / (1 << 53))


class RngPoissonSampler(PoissonSampler):
    """Rng 기반 포아송 샘플러 (Knuth 곱셈법)

    평균 = rate * dt(초). 평균이 0 이하면 항상 0.
    """

    def __init__(self, rng: Optional[Rng] = None) -> None:
        self.rng = rng if rng is not None else Rng()

    def sample(self, dt: timedelta, rate: float) -> int:
        mean = rate * dt.total_seconds()
        if mean <= 0.0:
            return 0
        if mean > POISSON_MAX_MEAN:
            logger.warning(
                f"포아송 평균 {mean:.1f} 이 상한 {POISSON_MAX_MEAN} 을 초과, 상한으로 대체"
            )
            mean = POISSON_MAX_MEAN

        limit = math.exp(-mean)
        count = 0
        product = self.rng.next_float()
        while product > limit:
            count += 1
            product *= self.rng.next_float()
        return count
