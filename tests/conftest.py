import pytest

from npuzzle.search.bfs import distances_from_goal


@pytest.fixture(scope="session")
def dist3():
    """Exact distance of every reachable 3x3 state."""
    return distances_from_goal(3)


@pytest.fixture(scope="session")
def dist2():
    return distances_from_goal(2)
