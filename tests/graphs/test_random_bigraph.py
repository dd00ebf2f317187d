import pytest
from array_joiner.testing.graphs import random_bigraph


def test_ids():
    graph = random_bigraph(2, 3, seed=1)
    assert graph.all_vertex_ids() == {"L0", "L1", "R0", "R1", "R2"}


def test_same_seed_same_graph():
    a = random_bigraph(5, 6, seed=42)
    b = random_bigraph(5, 6, seed=42)
    assert a.name == b.name
    assert sorted(a.vertices(), key=lambda v: v.id) == sorted(
        b.vertices(), key=lambda v: v.id
    )
    assert {(e.id, e.weight) for e in a.all_edges()} == {
        (e.id, e.weight) for e in b.all_edges()
    }


def test_edges_cross_sides():
    graph = random_bigraph(6, 4, density=0.7, seed=3)
    for edge in graph.all_edges():
        assert edge.start.startswith("L")
        assert edge.end.startswith("R")
    assert "bipartite graph" in graph.description()


def test_weights_in_range():
    graph = random_bigraph(4, 4, density=1.0, max_weight=3, seed=7)
    assert all(1 <= v.weight <= 3 for v in graph.vertices())
    assert all(1 <= e.weight <= 3 for e in graph.all_edges())


@pytest.mark.parametrize(
    "density, expected", [(0.0, 0), (1.0, 12)], ids=["empty", "complete"]
)
def test_density_extremes(density: float, expected: int):
    assert random_bigraph(3, 4, density=density, seed=0).edge_count() == expected


@pytest.mark.parametrize("density", [-0.1, 1.5])
def test_invalid_density(density: float):
    with pytest.raises(ValueError, match="density"):
        random_bigraph(2, 2, density=density)
