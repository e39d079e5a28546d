"""Tests for Turtle loading and the report session."""

from pathlib import Path

import pytest

from shacl_report.store import (
    ReportSession,
    StoreNotLoadedError,
    TurtleParseError,
    load_turtle_file,
    parse_turtle,
)

DATA = Path(__file__).resolve().parent / "data" / "report.ttl"


def test_parse_turtle_returns_graph():
    graph = parse_turtle("<http://example.org/a> <http://example.org/p> \"x\" .")
    assert len(graph) == 1


def test_parse_turtle_wraps_syntax_errors():
    with pytest.raises(TurtleParseError):
        parse_turtle("this is not turtle")


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_turtle_file(tmp_path / "missing.ttl")


def test_session_requires_a_graph_before_querying():
    session = ReportSession()
    assert not session.is_loaded
    with pytest.raises(StoreNotLoadedError):
        session.graph


def test_session_loads_file():
    session = ReportSession()
    session.load_file(DATA)
    assert session.is_loaded
    assert session.source_name == "report.ttl"
    assert len(session.graph) > 0


def test_failed_load_keeps_previous_graph():
    session = ReportSession()
    graph = session.load_text(DATA.read_text(encoding="utf-8"), source_name="report.ttl")
    with pytest.raises(TurtleParseError):
        session.load_text("@prefix broken")
    assert session.graph is graph
    assert session.source_name == "report.ttl"


def test_sessions_are_independent():
    first = ReportSession()
    second = ReportSession()
    first.load_file(DATA)
    assert not second.is_loaded
    first.clear()
    assert not first.is_loaded


def test_non_utf8_file_is_a_parse_error(tmp_path):
    path = tmp_path / "latin1.ttl"
    path.write_bytes('<http://example.org/a> <http://example.org/p> "café" .'.encode("latin-1"))
    with pytest.raises(TurtleParseError):
        load_turtle_file(path)


def test_load_bytes_decodes_strictly():
    session = ReportSession()
    session.load_bytes('<http://example.org/a> <http://example.org/p> "café" .'.encode("utf-8"))
    assert len(session.graph) == 1
    with pytest.raises(TurtleParseError):
        session.load_bytes(b'<http://example.org/a> <http://example.org/p> "caf\xe9" .')
