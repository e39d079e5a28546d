"""HTML page template for query results and validation reports.

The web app renders :data:`PAGE_HTML` with Flask's ``render_template_string``;
the command line uses :func:`render_page`, which needs no application context.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from jinja2 import Environment

from .config import ReportConfig
from .queries import QueryResult
from .reporting import ValidationReport
from .structures import FocusGroup

PAGE_HTML = """{% macro triples_table(result, limit) -%}
{% if not result.rows %}<p>No results</p>{% else %}
<table id="rdfTriplesTable">
  <tr>{% for key in result.variables %}<th>{{ key|upper }}</th>{% endfor %}</tr>
  {% for row in result.rows[:limit] %}
    <tr>{% for key in result.variables %}<td>{{ row.get(key, "") }}</td>{% endfor %}</tr>
  {% endfor %}
</table>
{% if result.rows|length > limit %}<p>Showing {{ limit }} of {{ result.rows|length }} rows.</p>{% endif %}
{% endif %}
{%- endmacro %}
{% macro counts_table(counts, label) -%}
{% if not counts %}<p>None</p>{% else %}
<table>
  <tr><th>{{ label }}</th><th>Count</th></tr>
  {% for value, count in counts.items() %}
    <tr><td>{{ value }}</td><td>{{ count }}</td></tr>
  {% endfor %}
</table>
{% endif %}
{%- endmacro %}
<!doctype html>
<html>
<head>
  <title>SHACL Report Viewer</title>
  <style>
    body { font-family: Arial, sans-serif; margin: 20px; }
    form textarea { width: 100%; }
    .section { border: 1px solid #ddd; padding: 10px 15px; margin-top: 20px; border-radius: 4px; }
    .error { color: #b00020; }
    table { border-collapse: collapse; margin: 6px 0; }
    th, td { border: 1px solid #999; padding: 3px 6px; text-align: left; vertical-align: top; }
    td table { width: 100%; }
  </style>
</head>
<body>
  <h1>SHACL Report Viewer</h1>
  <form method="post" action="{{ upload_url }}" enctype="multipart/form-data">
    <label>Turtle file:</label> <input type="file" name="ttl_file" accept=".ttl">
    <input type="submit" value="Load">
  </form>
  <form method="post" action="{{ query_url }}">
    <label>SPARQL query:</label><br>
    <textarea name="query" rows="6">{{ query or "" }}</textarea><br>
    <input type="submit" value="Run Query">
  </form>

  {% if error %}
    <p class="error">{{ error }}</p>
  {% endif %}
  {% if source_name %}
    <p>Loaded: {{ source_name }}</p>
  {% endif %}

  {% if result is not none %}
    <div class="section">
      <h2>Triples</h2>
      {{ triples_table(result, limit) }}
    </div>
  {% endif %}

  {% if report is not none %}
    <div class="section" id="validationReportContent">
      <h3>Validation Report: {{ report.total_focus_nodes }} results</h3>
      <p>{{ report.total_results }} validation results on {{ report.total_focus_nodes }} focus nodes.</p>

      <h4>Checked properties</h4>
      {{ counts_table(report.path_counts, "Property") }}

      {% if report.severity_counts %}
        <h4>Severities</h4>
        {{ counts_table(report.severity_counts, "Severity") }}
      {% endif %}

      <h4>Results by focus node</h4>
      <table id="reportTable">
        <tr><th>Focus node</th><th>Results</th></tr>
        {% for group in report.focus_groups %}
          <tr>
            <td>{{ group.focus_node }}<br>({{ group.records|length }})</td>
            <td>
              {% set columns = group_columns(group, focus_node_key) %}
              <table>
                <tr><th>Result</th>{% for column in columns %}<th>{{ column }}</th>{% endfor %}</tr>
                {% for record in group.records %}
                  <tr><td>{{ record.subject }}</td>{% for column in columns %}<td>{{ record.fields.get(column, "") }}</td>{% endfor %}</tr>
                {% endfor %}
              </table>
            </td>
          </tr>
        {% endfor %}
      </table>
    </div>
  {% endif %}
</body>
</html>"""

_env = Environment(autoescape=True)


def group_columns(group: FocusGroup, focus_node_key: Optional[str] = None) -> List[str]:
    """Field names used by a group's records, in first-seen order.

    The focus node column is dropped since the enclosing row already shows it.
    """

    columns: Dict[str, None] = {}
    for record in group.records:
        for key in record.fields:
            if key != focus_node_key:
                columns.setdefault(key, None)
    return list(columns)


def page_context(
    report: Optional[ValidationReport] = None,
    result: Optional[QueryResult] = None,
    config: Optional[ReportConfig] = None,
    *,
    query: Optional[str] = None,
    error: Optional[str] = None,
    source_name: Optional[str] = None,
    upload_url: str = "upload",
    query_url: str = "query",
) -> Dict[str, Any]:
    config = config or ReportConfig()
    return {
        "report": report,
        "result": result,
        "limit": config.display_limit,
        "focus_node_key": config.focus_node_key,
        "query": query,
        "error": error,
        "source_name": source_name,
        "upload_url": upload_url,
        "query_url": query_url,
        "group_columns": group_columns,
    }


def render_page(
    report: Optional[ValidationReport] = None,
    result: Optional[QueryResult] = None,
    config: Optional[ReportConfig] = None,
    **kwargs: Any,
) -> str:
    return _env.from_string(PAGE_HTML).render(**page_context(report, result, config, **kwargs))
