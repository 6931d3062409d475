"""Tests for the graph loader."""

import os

import pytest

from salesman.core.errors import GraphIOError, GraphParseError
from salesman.core.loader import load_graph, parse_graph, parse_graph_text

SAMPLE_PATH = os.path.join(os.path.dirname(__file__), "..", "samples", "cities.txt")


def test_two_sections():
    graph = parse_graph_text("A\nB\nC\n\nA B 4\nB C 2\n")
    assert graph.cities == ["A", "B", "C"]
    assert graph.cost("A", "B") == 4
    assert graph.cost("C", "B") == 2
    assert graph.frozen


def test_edges_are_symmetric():
    graph = load_graph(SAMPLE_PATH)
    for a, b, cost in graph.edges():
        assert graph.cost(a, b) == cost
        assert graph.cost(b, a) == cost
    assert len(graph) == 5
    assert graph.edge_count == 10


def test_whitespace_is_trimmed():
    graph = parse_graph(["  A \n", "\tB\n", "   \n", "  A B 9  \n"])
    assert graph.cities == ["A", "B"]
    assert graph.cost("B", "A") == 9


def test_undeclared_city_edge_dropped():
    graph = parse_graph_text("A\nB\n\nA B 1\nA Z 5\nZ Y 3\n")
    assert "Z" not in graph
    assert dict(graph.neighbors("A")) == {"B": 1}
    assert graph.edge_count == 1


def test_extra_blank_lines_ignored():
    graph = parse_graph_text("A\nB\n\n\nA B 1\n\n")
    assert graph.cost("A", "B") == 1


def test_duplicate_edge_last_wins():
    graph = parse_graph_text("A\nB\n\nA B 1\nB A 6\n")
    assert graph.cost("A", "B") == 6


def test_two_fields_is_parse_error():
    with pytest.raises(GraphParseError) as excinfo:
        parse_graph_text("A\nB\n\nA B\n")
    assert excinfo.value.line_number == 4


def test_bad_cost_is_parse_error():
    with pytest.raises(GraphParseError):
        parse_graph_text("A\nB\n\nA B ten\n")


def test_negative_cost_accepted():
    graph = parse_graph_text("A\nB\n\nA B -3\n")
    assert graph.cost("A", "B") == -3


def test_missing_file_is_io_error(tmp_path):
    with pytest.raises(GraphIOError):
        load_graph(tmp_path / "missing.txt")


def test_io_error_is_os_error(tmp_path):
    with pytest.raises(OSError):
        load_graph(tmp_path / "missing.txt")


def test_non_utf8_file_is_io_error(tmp_path):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"A\n\xff\xfe\n\nA B 1\n")
    with pytest.raises(GraphIOError):
        load_graph(path)


@pytest.mark.parametrize("cost", ["1_000", "١٢", "1.5", "0x10", "--3"])
def test_cost_must_be_ascii_base10(cost):
    with pytest.raises(GraphParseError):
        parse_graph_text(f"A\nB\n\nA B {cost}\n")


def test_signed_costs_accepted():
    graph = parse_graph_text("A\nB\nC\n\nA B +5\nB C -2\n")
    assert graph.cost("A", "B") == 5
    assert graph.cost("B", "C") == -2


def test_cost_beyond_64_bits_accepted():
    graph = parse_graph_text("A\nB\n\nA B 99999999999999999999\n")
    assert graph.cost("A", "B") == 99999999999999999999
