"""AdjacencyGraph 테스트"""

import threading

from sim.core.graph import AdjacencyGraph


class TestWeight:
    def test_weight_is_undirected(self):
        g = AdjacencyGraph()
        g.add_edge(1, 2, 7)
        assert g.weight(1, 2) == 7
        assert g.weight(2, 1) == 7

    def test_missing_pair_is_none(self):
        g = AdjacencyGraph()
        g.add_edge(1, 2, 7)
        assert g.weight(1, 3) is None
        assert g.weight(5, 6) is None

    def test_repeated_edge_overwrites_weight(self):
        g = AdjacencyGraph()
        g.add_edge(1, 2, 7)
        g.add_edge(2, 1, 9)
        assert g.weight(1, 2) == 9
        assert g.weight(2, 1) == 9

    def test_generic_payload(self):
        """스칼라 외 벡터 payload도 저장"""
        gv: AdjacencyGraph[list] = AdjacencyGraph()
        gv.add_edge(3, 4, [1.0, 2.0])
        assert gv.weight(3, 4) == [1.0, 2.0]
        assert gv.weight(4, 3) == [1.0, 2.0]

    def test_both_directions_hold_same_object(self):
        """__eq__ 없는 객체도 양방향 동일"""

        class Marker:
            pass

        w = Marker()
        g = AdjacencyGraph()
        g.add_edge(1, 2, w)
        assert g.weight(1, 2) is w
        assert g.weight(2, 1) is w

    def test_uncopyable_payload_accepted(self):
        lock = threading.Lock()
        g = AdjacencyGraph()
        g.add_edge(1, 2, lock)
        assert g.weight(2, 1) is lock


class TestHasEdge:
    def test_has_edge_both_directions(self):
        g = AdjacencyGraph()
        g.add_edge(1, 2, 7)
        assert g.has_edge(1, 2) is True
        assert g.has_edge(2, 1) is True
        assert g.has_edge(1, 3) is False

    def test_none_weight_is_still_an_edge(self):
        """가중치 None인 간선: weight()는 None이지만 간선은 존재"""
        g: AdjacencyGraph[None] = AdjacencyGraph()
        g.add_edge(1, 2, None)
        assert g.weight(1, 2) is None
        assert g.has_edge(1, 2) is True
        assert g.degree(1) == 1


class TestDegree:
    def test_single_edge(self):
        g = AdjacencyGraph()
        g.add_edge(1, 2, 1)
        assert g.degree(1) == 1
        assert g.degree(2) == 1

    def test_untouched_node_is_zero(self):
        g = AdjacencyGraph()
        assert g.degree(42) == 0

    def test_repeated_edge_accumulates(self):
        """같은 쌍 재추가: 차수 누적 (멱등 아님)"""
        g = AdjacencyGraph()
        g.add_edge(1, 2, 1)
        g.add_edge(1, 2, 1)
        assert g.degree(1) == 2
        assert g.degree(2) == 2

    def test_self_loop_counts_twice(self):
        g = AdjacencyGraph()
        g.add_edge(3, 3, "x")
        assert g.degree(3) == 2
        assert g.weight(3, 3) == "x"
