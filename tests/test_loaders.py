"""
Unit tests for the grid map and edge-list loaders.
"""

from pathlib import Path

import pytest

from dijkstra_engine import shortest_distances
from errors import EmptyGraphError, InputFormatError, InvalidInputError
from loaders import load_edge_list, load_grid, parse_edge_list, parse_grid

SAMPLE_GRAPH = """5 6
0 1 4
0 2 2
1 2 3
1 3 2
2 3 4
3 4 1
0
"""


def test_parse_grid():
    grid = parse_grid("2 3\n0 1 0\n0 0 0\n")
    assert grid.shape == (2, 3)
    assert not grid.is_walkable((0, 1))
    assert grid.walkable_count() == 5


def test_parse_grid_ignores_line_layout():
    assert parse_grid("2 2 0 1 1 0").blocked.tolist() == [[False, True], [True, False]]


@pytest.mark.parametrize(
    "text",
    [
        "",
        "2 x\n0 0\n",
        "2 2\n0 0\n0\n",
        "2 2\n0 0\n0 0 0\n",
        "1 2\n0 2\n",
    ],
)
def test_parse_grid_malformed(text):
    with pytest.raises(InputFormatError):
        parse_grid(text)


def test_parse_grid_zero_dimensions():
    with pytest.raises(EmptyGraphError):
        parse_grid("0 3\n")


def test_parse_edge_list_undirected_by_default():
    data = parse_edge_list(SAMPLE_GRAPH)
    assert data.n == 5
    assert data.source == 0
    assert data.graph.edge_count() == 12
    assert shortest_distances(data.graph, data.n, data.source) == [0, 4, 2, 6, 7]


def test_parse_edge_list_directed():
    data = parse_edge_list(SAMPLE_GRAPH, undirected=False)
    assert data.graph.edge_count() == 6
    assert data.graph.outgoing(1) == [(2, 3), (3, 2)]


def test_parse_edge_list_float_weights():
    data = parse_edge_list("2 1\n0 1 0.5\n1\n")
    assert data.graph.outgoing(0) == [(1, 0.5)]
    assert data.source == 1


def test_parse_edge_list_errors():
    with pytest.raises(InputFormatError):
        parse_edge_list("3 2\n0 1 1\n")
    with pytest.raises(InputFormatError):
        parse_edge_list("2 1\n0 1 one\n0\n")
    with pytest.raises(InputFormatError):
        parse_edge_list("2 0\n0\n1\n")
    with pytest.raises(InvalidInputError):
        parse_edge_list("2 1\n0 1 -3\n0\n")
    with pytest.raises(InvalidInputError):
        parse_edge_list("2 1\n0 5 1\n0\n")
    with pytest.raises(EmptyGraphError):
        parse_edge_list("0 0\n0\n")


def test_load_from_files(tmp_path: Path):
    map_file = tmp_path / "map.txt"
    map_file.write_text("3 3\n0 0 0\n0 1 0\n0 0 0\n")
    graph_file = tmp_path / "graph.txt"
    graph_file.write_text(SAMPLE_GRAPH)

    assert load_grid(map_file).shape == (3, 3)
    assert load_edge_list(str(graph_file)).n == 5
