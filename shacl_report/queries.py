"""SPARQL execution over a loaded report graph."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from rdflib import Graph

from .structures import Binding

logger = logging.getLogger(__name__)


class QueryError(RuntimeError):
    """Raised when a SPARQL query cannot be parsed or evaluated."""


@dataclass
class QueryResult:
    """Rows of one query, with the projected variables in query order."""

    variables: List[str]
    rows: List[Dict[str, str]] = field(default_factory=list)


def run_query(graph: Graph, query: str) -> QueryResult:
    """Run ``query`` and return every row as a ``{variable: value}`` dict.

    Unbound variables are left out of a row but stay in ``variables``. ASK
    queries produce a single ``{"ask": "true"|"false"}`` row and
    graph-producing queries produce ``s``/``p``/``o`` rows.
    """

    try:
        result = graph.query(query)
        if result.type == "ASK":
            return QueryResult(["ask"], [{"ask": "true" if result.askAnswer else "false"}])
        if result.type in ("CONSTRUCT", "DESCRIBE"):
            return QueryResult(
                ["s", "p", "o"],
                [{"s": str(s), "p": str(p), "o": str(o)} for s, p, o in result.graph],
            )
        variables = [str(var) for var in result.vars]
        rows: List[Dict[str, str]] = []
        for row in result:
            values = {}
            for name, term in zip(variables, row):
                if term is not None:
                    values[name] = str(term)
            rows.append(values)
    except Exception as exc:  # rdflib surfaces pyparsing and evaluation errors alike
        raise QueryError(f"SPARQL query failed: {exc}") from exc
    logger.info("Query returned %d rows", len(rows))
    return QueryResult(variables, rows)


def bindings_from_rows(
    rows: Iterable[Dict[str, str]],
    subject_var: str = "s",
    predicate_var: str = "p",
    object_var: str = "o",
) -> List[Binding]:
    bindings: List[Binding] = []
    for row in rows:
        if subject_var not in row or predicate_var not in row or object_var not in row:
            logger.debug("Skipping incomplete row %r", row)
            continue
        bindings.append(Binding.from_row(row, subject_var, predicate_var, object_var))
    return bindings
