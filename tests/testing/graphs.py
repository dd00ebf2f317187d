import pytest
from array_joiner.graphs import Graph
from array_joiner.testing import graphs


@pytest.fixture(scope="session")
def cycle() -> Graph:
    return graphs.cycle_graph("ABCD")


@pytest.fixture(scope="session")
def path() -> Graph:
    return graphs.path_graph("ABC")


@pytest.fixture(scope="session")
def star() -> Graph:
    return graphs.star_graph()


@pytest.fixture(scope="session")
def two_components() -> Graph:
    return graphs.two_components_graph()


@pytest.fixture(scope="session")
def isolated() -> Graph:
    return graphs.isolated_vertex_graph(weight=7)
