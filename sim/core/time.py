"""시뮬레이션 시간 리소스 + 구간(duration) 정규화"""

from dataclasses import dataclass
from datetime import timedelta
from numbers import Real
from typing import Union

# timedelta 또는 초 단위 숫자
Duration = Union[timedelta, int, float]


def to_timedelta(value: Duration) -> timedelta:
    """timedelta는 그대로, 숫자는 초 단위로 해석해 timedelta로 변환.

    해상도는 timedelta와 같은 마이크로초. 0.5µs 미만의 숫자 구간은 0으로
    반올림되어 빈도 게이트 누적에 반영되지 않는다. 음수 구간은 ValueError.
    """
    if isinstance(value, timedelta):
        td = value
    elif isinstance(value, Real) and not isinstance(value, bool):
        td = timedelta(seconds=float(value))
    else:
        raise TypeError(f"duration must be timedelta or seconds, got {type(value).__name__}")
    if td < timedelta(0):
        raise ValueError(f"duration must not be negative, got {value!r}")
    return td


@dataclass
class GameSpeed:
    """게임 시간 배속. 기본 1.0 (실시간)."""

    value: float = 1.0

    def scale(self, dt: Duration) -> timedelta:
        """실제 경과 시간 dt를 게임 시간으로 환산"""
        return to_timedelta(dt) * self.value
