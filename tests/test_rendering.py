from shacl_report.aggregation import aggregate_by_subject, group_by_focus_node
from shacl_report.config import ReportConfig
from shacl_report.queries import QueryResult
from shacl_report.rendering import group_columns, render_page
from shacl_report.reporting import build_report
from shacl_report.structures import Binding

BINDINGS = [
    Binding("r1", "focus", "N1"),
    Binding("r1", "path", "name"),
    Binding("r2", "focus", "N1"),
    Binding("r2", "message", "<b>bad</b>"),
]
CONFIG = ReportConfig(focus_node_key="focus", checked_property_key="path")


def test_triples_table_uses_query_variables_and_limit():
    rows = [{"s": f"s{i}", "p": "p", "o": "o"} for i in range(25)]
    html = render_page(result=QueryResult(["s", "p", "o"], rows))
    assert "<th>S</th>" in html and "<th>P</th>" in html and "<th>O</th>" in html
    assert "<td>s19</td>" in html
    assert "<td>s20</td>" not in html
    assert "Showing 20 of 25 rows." in html


def test_triples_table_keeps_columns_unbound_in_first_row():
    result = QueryResult(["r", "f"], [{"r": "r4"}, {"r": "r1", "f": "alice"}])
    html = render_page(result=result)
    assert "<th>F</th>" in html
    assert "<td>alice</td>" in html


def test_triples_table_honours_configured_limit():
    rows = [{"s": f"s{i}"} for i in range(5)]
    html = render_page(result=QueryResult(["s"], rows), config=ReportConfig(display_limit=2))
    assert "<td>s1</td>" in html
    assert "<td>s2</td>" not in html
    assert "Showing 2 of 5 rows." in html


def test_triples_table_empty():
    assert "No results" in render_page(result=QueryResult(["s", "p", "o"]))


def test_group_columns_skip_focus_key():
    groups = group_by_focus_node(aggregate_by_subject(BINDINGS), "focus")
    assert group_columns(groups[0], "focus") == ["path", "message"]


def test_report_page_shows_heading_and_escapes_values():
    report = build_report(BINDINGS, CONFIG)
    html = render_page(report=report, config=CONFIG)
    assert "Validation Report: 1 results" in html
    assert "&lt;b&gt;bad&lt;/b&gt;" in html
    assert "<b>bad</b>" not in html
    assert "<td>name</td><td>1</td>" in html


def test_nested_table_shows_each_result_subject():
    bindings = [
        Binding("r1", "focus", "N1"),
        Binding("r1", "path", "name"),
        Binding("r2", "focus", "N1"),
        Binding("r2", "path", "name"),
    ]
    html = render_page(report=build_report(bindings, CONFIG), config=CONFIG)
    assert "<th>Result</th>" in html
    assert "<td>r1</td>" in html
    assert "<td>r2</td>" in html


def test_page_without_data_has_forms_only():
    html = render_page()
    assert 'name="ttl_file"' in html
    assert 'name="query"' in html
    assert "Validation Report" not in html
