"""
Graph loader — parses the two-section text format into a CityGraph.

Format
------
::

    <city_1>
    ...
    <city_n>
    <blank line>
    <cityA> <cityB> <cost>
    ...

Edges naming a city that was not declared in the first section are
dropped without error.
"""

from __future__ import annotations

import logging
import os
import re
from typing import Iterable

from salesman.core.errors import GraphIOError, GraphParseError
from salesman.core.graph import CityGraph

logger = logging.getLogger(__name__)

EDGE_FIELD_SEPARATOR = " "

# Optional sign, ASCII digits only.
COST_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_graph(lines: Iterable[str]) -> CityGraph:
    """
    Build a frozen CityGraph from an iterable of text lines.

    Raises GraphParseError on an edge line with fewer than three fields
    or with a non-integer cost.
    """
    graph = CityGraph()
    in_edges = False
    dropped = 0

    for line_number, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            in_edges = True
            continue

        if not in_edges:
            graph.add_city(line)
            continue

        a, b, cost = _parse_edge(line, line_number)
        if not graph.add_edge(a, b, cost):
            dropped += 1
            logger.debug(
                "Line %d: dropping edge %s-%s (undeclared city)",
                line_number,
                a,
                b,
            )

    graph.freeze()
    logger.info(
        "Parsed graph: %d cities, %d edges (%d dropped)",
        len(graph),
        graph.edge_count,
        dropped,
    )
    return graph


def parse_graph_text(text: str) -> CityGraph:
    """Parse a whole input document held in memory."""
    return parse_graph(text.splitlines())


def load_graph(path: str | os.PathLike[str]) -> CityGraph:
    """
    Read and parse the graph file at *path*.

    Raises GraphIOError if the file cannot be opened or read, or is not
    valid UTF-8.
    """
    try:
        with open(path, encoding="utf-8") as f:
            lines = f.readlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise GraphIOError(f"Cannot read graph file {os.fspath(path)!r}: {exc}") from exc
    return parse_graph(lines)


def _parse_edge(line: str, line_number: int) -> tuple[str, str, int]:
    fields = [field.strip() for field in line.split(EDGE_FIELD_SEPARATOR)]
    if len(fields) < 3:
        raise GraphParseError(
            f"expected '<cityA> <cityB> <cost>', got {line!r}", line_number
        )
    a, b, raw_cost = fields[:3]
    if not COST_PATTERN.fullmatch(raw_cost):
        raise GraphParseError(
            f"cost {raw_cost!r} is not a base-10 integer", line_number
        )
    return a, b, int(raw_cost)
