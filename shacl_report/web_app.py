"""Flask front end: upload a SHACL report graph and browse it."""
from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, current_app, render_template_string, request, url_for

from .config import ReportConfig
from .queries import QueryError, run_query
from .rendering import PAGE_HTML, page_context
from .reporting import generate_report
from .store import ReportSession, StoreNotLoadedError, TurtleParseError

logger = logging.getLogger(__name__)

SESSION_KEY = "shacl_report.session"
CONFIG_KEY = "shacl_report.config"


def _session() -> ReportSession:
    return current_app.extensions[SESSION_KEY]


def _config() -> ReportConfig:
    return current_app.extensions[CONFIG_KEY]


def _page(status: int = 200, **context):
    html = render_template_string(
        PAGE_HTML,
        **page_context(
            config=_config(),
            source_name=_session().source_name,
            upload_url=url_for("upload"),
            query_url=url_for("query"),
            **context,
        ),
    )
    return html, status


def create_app(config: Optional[ReportConfig] = None) -> Flask:
    app = Flask(__name__)
    app.extensions[CONFIG_KEY] = (config or ReportConfig()).validate()
    app.extensions[SESSION_KEY] = ReportSession()

    @app.route("/", methods=["GET"])
    def index():
        return _page()

    @app.route("/upload", methods=["POST"])
    def upload():
        uploaded = request.files.get("ttl_file")
        if not uploaded or not uploaded.filename:
            return _page(400, error="No file selected.")
        try:
            _session().load_bytes(uploaded.read(), source_name=uploaded.filename)
        except TurtleParseError:
            logger.exception("Error parsing TTL file %s", uploaded.filename)
            return _page(400, error="Failed to parse the .ttl file.")

        try:
            report, result = generate_report(_session(), _config())
        except QueryError:
            logger.exception("Error fetching validation results")
            return _page(400, error="Failed to fetch triples.")
        return _page(report=report, result=result)

    @app.route("/query", methods=["POST"])
    def query():
        text = request.form.get("query", "").strip()
        if not text:
            return _page(400, error="Please enter a SPARQL query.")
        try:
            result = run_query(_session().graph, text)
        except StoreNotLoadedError as exc:
            return _page(400, error=str(exc), query=text)
        except QueryError:
            logger.exception("Error running SPARQL query")
            return _page(400, error="Failed to fetch triples.", query=text)
        return _page(result=result, query=text)

    return app


app = create_app()


if __name__ == "__main__":
    app.run(debug=True)
