"""근접 트리거: 두 고정 노드 사이에 간선이 있으면 발화"""

import copy
from typing import Any, Optional, Tuple

from sim.core.game_event.base import Trigger
from sim.core.graph import AdjacencyGraph


class ProximityTrigger(Trigger):
    """그래프 스냅샷 위에서 노드 쌍 (a, b)의 간선 존재 여부를 판정

    생성 시 그래프를 깊은 복사해 소유한다. 호출자가 이후 원본 그래프를
    수정해도 이 트리거에는 영향이 없다.

    사용 패턴:
        trigger = ProximityTrigger(graph).with_pair(1, 2)
    """

    def __init__(self, graph: AdjacencyGraph[Any]) -> None:
        self._graph: AdjacencyGraph[Any] = copy.deepcopy(graph)
        self._pair: Optional[Tuple[int, int]] = None

    def with_pair(self, a: int, b: int) -> "ProximityTrigger":
        self._pair = (a, b)
        return self

    @property
    def pair(self) -> Optional[Tuple[int, int]]:
        return self._pair

    def should_fire(self) -> bool:
        # 쌍 미설정 시 발화하지 않음
        if self._pair is None:
            return False
        a, b = self._pair
        return self._graph.has_edge(a, b)
