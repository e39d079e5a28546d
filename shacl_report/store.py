"""Turtle loading and the per-user report session."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from rdflib import Graph

logger = logging.getLogger(__name__)


class TurtleParseError(ValueError):
    """Raised when Turtle content cannot be decoded or parsed into a graph."""


class StoreNotLoadedError(RuntimeError):
    """Raised when a query is issued before any Turtle file was loaded."""


def decode_turtle(data: bytes, source_name: Optional[str] = None) -> str:
    """Decode Turtle bytes as UTF-8, the only encoding Turtle allows."""

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise TurtleParseError(
            f"{source_name or 'Turtle content'} is not valid UTF-8: {exc}"
        ) from exc


def parse_turtle(text: str, base: Optional[str] = None) -> Graph:
    graph = Graph()
    try:
        graph.parse(data=text, format="turtle", publicID=base)
    except Exception as exc:  # rdflib raises several unrelated parser errors
        raise TurtleParseError(f"Failed to parse Turtle content: {exc}") from exc
    logger.info("Parsed %d triples", len(graph))
    return graph


def load_turtle_file(path: Path) -> Graph:
    if not path.exists():
        raise FileNotFoundError(f"Turtle file not found: {path}")
    logger.info("Loading %s", path)
    text = decode_turtle(path.read_bytes(), source_name=str(path))
    return parse_turtle(text, base=path.resolve().as_uri())


class ReportSession:
    """Holds the graph a user is currently working with.

    Each web application instance or CLI run owns its own session; nothing is
    shared between them.
    """

    def __init__(self, graph: Optional[Graph] = None) -> None:
        self._graph = graph
        self.source_name: Optional[str] = None

    @property
    def is_loaded(self) -> bool:
        return self._graph is not None

    @property
    def graph(self) -> Graph:
        if self._graph is None:
            raise StoreNotLoadedError(
                "The RDF store is not initialized. Please upload a .ttl file first."
            )
        return self._graph

    def load_text(self, text: str, source_name: Optional[str] = None) -> Graph:
        # Parse before replacing so a bad upload keeps the previous graph.
        graph = parse_turtle(text)
        self._graph = graph
        self.source_name = source_name
        return graph

    def load_bytes(self, data: bytes, source_name: Optional[str] = None) -> Graph:
        return self.load_text(decode_turtle(data, source_name), source_name=source_name)

    def load_file(self, path: Path) -> Graph:
        graph = load_turtle_file(path)
        self._graph = graph
        self.source_name = path.name
        return graph

    def clear(self) -> None:
        self._graph = None
        self.source_name = None
