"""Tests for TourEngine — end-to-end from text and files."""

import os

import pytest

from salesman.core.errors import GraphIncompleteError, GraphIOError
from salesman.core.loader import load_graph, parse_graph_text
from salesman.engine.tour_engine import TourEngine
from salesman.solver.exact_solver import ExactSolver

SAMPLE_PATH = os.path.join(os.path.dirname(__file__), "..", "samples", "cities.txt")


def test_solve_file_default_solver():
    result = TourEngine().solve_file(SAMPLE_PATH)
    assert result["algorithm"] == "nearest-neighbor"
    assert result["cost"] == 2200
    assert result["formatted_path"] == "Berlin--->Dresden--->Essen--->Amsterdam--->Copenhagen"
    assert result["node_count"] == 5
    assert result["edge_count"] == 10
    assert result["elapsed_ms"] >= 0


def test_solve_text_exact():
    engine = TourEngine(ExactSolver())
    result = engine.solve_text("A\nB\nC\n\nA B 1\nB C 2\nA C 3\n")
    assert result["algorithm"] == "exact"
    assert result["path"] == ["A", "B", "C"]
    assert result["cost"] == 6
    assert result["closed"] is True


def test_solve_propagates_incomplete():
    with pytest.raises(GraphIncompleteError):
        TourEngine().solve_text("A\nB\nC\n\nA B 1\n")


def test_solve_file_missing(tmp_path):
    with pytest.raises(GraphIOError):
        TourEngine().solve_file(tmp_path / "nope.txt")


def test_compare_all_algorithms():
    comparison = TourEngine().compare(load_graph(SAMPLE_PATH))
    results = comparison["results"]
    assert set(results) == {"nearest-neighbor", "exact"}
    assert results["exact"]["cost"] <= results["nearest-neighbor"]["cost"]
    assert comparison["best"] == "exact"


def test_compare_reports_errors():
    graph = parse_graph_text("A\nB\nC\n\nA B 1\nB C 1\n")
    comparison = TourEngine().compare(graph, ["1", "2"])
    assert "error" in comparison["results"]["nearest-neighbor"]
    assert comparison["results"]["exact"]["cost"] == 2
    assert comparison["best"] == "exact"


def test_describe():
    summary = TourEngine().describe(parse_graph_text("A\nB\nC\n\nA B 2\nA C 4\n"))
    assert summary["node_count"] == 3
    assert summary["edge_count"] == 2
    assert summary["connected"] is True
    assert summary["isolated"] == []
    assert summary["min_cost"] == 2
    assert summary["max_cost"] == 4
    assert abs(summary["mean_cost"] - 3.0) < 1e-9


def test_describe_disconnected_without_edges():
    summary = TourEngine().describe(parse_graph_text("A\nB\n"))
    assert summary["connected"] is False
    assert summary["components"] == [["A"], ["B"]]
    assert summary["isolated"] == ["A", "B"]
    assert summary["min_cost"] is None


def test_describe_huge_costs():
    summary = TourEngine().describe(
        parse_graph_text("A\nB\nC\n\nA B 99999999999999999999\nB C 1\n")
    )
    assert summary["max_cost"] == 99999999999999999999
    assert summary["min_cost"] == 1
    assert summary["mean_cost"] == pytest.approx(5e19)


def test_compare_prefers_closed_tour():
    graph = parse_graph_text("A\nB\nC\nD\n\nA B 1\nB C 1\nC D 1\nD A 100\nA C 1\n")
    comparison = TourEngine().compare(graph, ["exact"])
    assert comparison["results"]["exact"]["closed"] is True
    assert comparison["best"] == "exact"
