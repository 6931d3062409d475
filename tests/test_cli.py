"""Tests for the command-line entry point."""

import os

from salesman.cli import main

SAMPLE_PATH = os.path.join(os.path.dirname(__file__), "..", "samples", "cities.txt")


def _write(tmp_path, text):
    path = tmp_path / "graph.txt"
    path.write_text(text)
    return str(path)


def test_default_algorithm(capsys):
    assert main(["--graph-file", SAMPLE_PATH]) == 0
    out = capsys.readouterr().out
    assert "Path: Berlin--->Dresden--->Essen--->Amsterdam--->Copenhagen" in out
    assert "Cost of this path is: 2200" in out


def test_exact_by_numeric_id(capsys):
    assert main(["--graph-file", SAMPLE_PATH, "--algorithm", "2"]) == 0
    out = capsys.readouterr().out
    assert "Path: Amsterdam--->Copenhagen--->Berlin--->Dresden--->Essen" in out


def test_incomplete_graph_exits_nonzero(tmp_path, capsys):
    path = _write(tmp_path, "A\nB\nC\n\nA B 1\n")
    assert main(["-g", path]) == 1
    assert "Graph is not complete." in capsys.readouterr().out


def test_missing_file(tmp_path, capsys):
    assert main(["-g", str(tmp_path / "missing.txt")]) == 1
    assert "GraphIOError" in capsys.readouterr().out


def test_unknown_algorithm(capsys):
    assert main(["-g", SAMPLE_PATH, "-a", "7"]) == 2
    assert "Unknown algorithm" in capsys.readouterr().err


def test_compare(capsys):
    assert main(["-g", SAMPLE_PATH, "--compare"]) == 0
    out = capsys.readouterr().out
    assert "[nearest-neighbor]" in out
    assert "[exact]" in out
    assert out.count("Cost of this path is: 2200") == 2


def test_non_utf8_file_exits_nonzero(tmp_path, capsys):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"A\n\xff\xfe\n\nA B 1\n")
    assert main(["-g", str(path)]) == 1
    assert "GraphIOError" in capsys.readouterr().out
