"""가중치 무방향 인접 맵

노드 식별자는 작은 비음수 정수.
add_edge()는 멱등이 아니다: 같은 쌍을 다시 추가하면 차수는 누적되고
가중치는 덮어쓴다.
"""

from typing import Dict, Generic, Optional, Tuple, TypeVar

T = TypeVar("T")


class AdjacencyGraph(Generic[T]):
    """노드 쌍 → 가중치 저장소 (삭제/순회/경로 탐색 없음)

    사용 패턴:
        graph = AdjacencyGraph()
        graph.add_edge(1, 2, 7)
        graph.weight(2, 1)  # 7
        graph.degree(1)  # 1
    """

    def __init__(self) -> None:
        self._degrees: Dict[int, int] = {}
        self._weights: Dict[Tuple[int, int], T] = {}

    def add_edge(self, a: int, b: int, weight: T) -> None:
        """간선 추가. (a, b)와 (b, a) 양쪽에 저장하고 두 노드 차수를 1씩 증가."""
        self._degrees[a] = self._degrees.get(a, 0) + 1
        self._degrees[b] = self._degrees.get(b, 0) + 1
        # 양방향 모두 같은 객체
        self._weights[(a, b)] = weight
        self._weights[(b, a)] = weight

    def degree(self, v: int) -> int:
        return self._degrees.get(v, 0)

    def weight(self, a: int, b: int) -> Optional[T]:
        """저장된 가중치. 간선이 추가된 적 없으면 None.

        가중치 자체가 None일 수 있으므로 간선 존재 여부는 has_edge()로 판정.
        """
        return self._weights.get((a, b))

    def has_edge(self, a: int, b: int) -> bool:
        return (a, b) in self._weights

    def __repr__(self) -> str:
        return (
            f"AdjacencyGraph(nodes={len(self._degrees)}, "
            f"pairs={len(self._weights)})"
        )
