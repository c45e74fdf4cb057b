import math

import pytest

from adjgraph import ConfigurationError, INFINITY, WeightedEdge, WeightedGraph
from adjgraph.graph import dijkstra_linear, dijkstra_with_queue


def build_network() -> WeightedGraph[str]:
    #     A
    #   4/ \2
    #   B   C
    #   3\ /1 \5
    #     D---E
    #       1
    graph: WeightedGraph[str] = WeightedGraph(directed=True)
    graph.add_edge("A", "B", 4)
    graph.add_edge("A", "C", 2)
    graph.add_edge("B", "D", 3)
    graph.add_edge("C", "D", 1)
    graph.add_edge("C", "E", 5)
    graph.add_edge("D", "E", 1)
    return graph


@pytest.mark.parametrize("strategy", ["linear", "heap"])
def test_dijkstra_network_distances(strategy):
    graph = build_network()

    distances = graph.dijkstra("A", strategy=strategy)

    assert distances == {"A": 0, "B": 4, "C": 2, "D": 3, "E": 4}


@pytest.mark.parametrize("strategy", ["linear", "heap"])
def test_dijkstra_unreachable_vertices_are_infinite(strategy):
    graph = build_network()
    graph.add_vertex("Z")

    distances = graph.dijkstra("D", strategy=strategy)

    assert distances["D"] == 0
    assert distances["E"] == 1
    assert math.isinf(distances["A"])
    assert math.isinf(distances["Z"])


@pytest.mark.parametrize("strategy", ["linear", "heap"])
def test_dijkstra_unknown_start(strategy):
    graph = build_network()

    distances = graph.dijkstra("Q", strategy=strategy)

    assert "Q" not in distances
    assert set(distances) == {"A", "B", "C", "D", "E"}
    assert all(d == INFINITY for d in distances.values())


def test_dijkstra_empty_graph():
    graph: WeightedGraph[str] = WeightedGraph()

    assert graph.dijkstra("A") == {}


def test_dijkstra_chooses_cheaper_parallel_edge():
    graph: WeightedGraph[str] = WeightedGraph(directed=True)
    graph.add_edge("A", "B", 5)
    graph.add_edge("A", "B", 2)

    assert graph.get_neighbors("A") == [WeightedEdge("B", 5), WeightedEdge("B", 2)]
    assert graph.dijkstra("A")["B"] == 2


def test_dijkstra_chooses_shortest_path():
    # A can reach C directly, but A->B->C is shorter
    graph: WeightedGraph[str] = WeightedGraph(directed=True)
    graph.add_edge("A", "B", 3.0)
    graph.add_edge("A", "C", 10.0)
    graph.add_edge("B", "C", 4.0)

    assert graph.dijkstra("A")["C"] == 7.0


def test_zero_weight_edges():
    graph: WeightedGraph[str] = WeightedGraph(directed=True)
    graph.add_edge("A", "B", 0)
    graph.add_edge("B", "C", 0)

    assert graph.dijkstra("A") == {"A": 0, "B": 0, "C": 0}


def test_undirected_edge_is_stored_in_both_lists():
    graph: WeightedGraph[str] = WeightedGraph(directed=False)

    graph.add_edge("A", "B", 3)

    assert graph.get_neighbors("A") == [WeightedEdge("B", 3)]
    assert graph.get_neighbors("B") == [WeightedEdge("A", 3)]
    assert graph.dijkstra("B") == {"A": 3, "B": 0}


def test_undirected_parallel_edge_duplicates_into_both_lists():
    graph: WeightedGraph[str] = WeightedGraph(directed=False)

    graph.add_edge("A", "B", 3)
    graph.add_edge("A", "B", 1)

    assert len(graph.get_neighbors("A")) == 2
    assert len(graph.get_neighbors("B")) == 2


def test_add_vertex_is_idempotent():
    graph = build_network()

    graph.add_vertex("A")

    assert graph.vertex_count() == 5
    assert len(graph.get_neighbors("A")) == 2


def test_get_neighbors_unknown_vertex_is_empty():
    assert build_network().get_neighbors("Z") == []


def test_unknown_strategy_raises_configuration_error():
    graph = build_network()

    with pytest.raises(ConfigurationError) as excinfo:
        graph.dijkstra("A", strategy="bellman-ford")

    assert excinfo.value.setting_name == "dijkstra_strategy"
    assert "bellman-ford" in str(excinfo.value)


class RecordingQueue:
    """Minimal PriorityQueuePort backed by a sorted list."""

    def __init__(self):
        self.items = []
        self.inserted = []

    def insert(self, item, priority):
        self.inserted.append(item)
        self.items.append((priority, len(self.inserted), item))
        self.items.sort(key=lambda entry: entry[:2])

    def extract_min(self):
        return self.items.pop(0)[2]

    def is_empty(self):
        return not self.items


def test_dijkstra_with_injected_queue():
    graph = build_network()
    queue = RecordingQueue()

    distances = dijkstra_with_queue(graph._adjacency, "A", queue)

    assert distances == dijkstra_linear(graph._adjacency, "A")
    assert queue.inserted[0] == "A"
    assert queue.is_empty()
