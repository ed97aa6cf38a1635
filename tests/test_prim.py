import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.prim import Edge, minimum_spanning_tree


def test_triangle():
    matrix = [
        [0, 1, 3],
        [1, 0, 2],
        [3, 2, 0],
    ]
    assert minimum_spanning_tree(matrix) == [Edge(0, 1, 1), Edge(1, 2, 2)]


def test_edge_str_format():
    assert str(Edge(0, 2, 7)) == "0 - 2 : 7"


def test_empty_and_single_vertex():
    assert minimum_spanning_tree([]) == []
    assert minimum_spanning_tree([[0]]) == []


def test_tie_taken_in_scan_order():
    matrix = [
        [0, 4, 4],
        [4, 0, 4],
        [4, 4, 0],
    ]
    assert minimum_spanning_tree(matrix) == [Edge(0, 1, 4), Edge(0, 2, 4)]


def test_not_square():
    with pytest.raises(ValueError):
        minimum_spanning_tree([[0, 1], [1]])


def test_disconnected():
    with pytest.raises(ValueError):
        minimum_spanning_tree([[0, 0], [0, 0]])


@st.composite
def complete_graphs(draw):
    size = draw(st.integers(1, 7))
    matrix = [[0] * size for _ in range(size)]
    for i in range(size):
        for j in range(i + 1, size):
            weight = draw(st.integers(1, 20))
            matrix[i][j] = matrix[j][i] = weight
    return matrix


@given(complete_graphs())
def test_tree_spans_every_vertex(matrix):
    edges = minimum_spanning_tree(matrix)
    assert len(edges) == len(matrix) - 1
    reached = {0}
    for edge in edges:
        assert edge.source in reached
        assert edge.target not in reached
        assert edge.weight == matrix[edge.source][edge.target]
        reached.add(edge.target)
    assert reached == set(range(len(matrix)))