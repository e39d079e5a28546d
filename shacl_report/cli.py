"""Command-line entry point for SHACL report generation."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from .config import ConfigurationError, ReportConfig
from .queries import QueryError
from .rendering import render_page
from .reporting import generate_report, report_to_dict, save_report
from .store import ReportSession, TurtleParseError

logger = logging.getLogger(__name__)


def _parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Summarize a SHACL validation report")
    parser.add_argument("input", type=Path, help="Turtle file holding sh:ValidationReport results")
    parser.add_argument("--format", choices=["json", "html"], default="json", help="Output format")
    parser.add_argument("--output", type=Path, default=None, help="Write the report here instead of stdout")
    parser.add_argument("--query", type=Path, default=None, help="File with a SELECT ?s ?p ?o query to use instead of the default")
    parser.add_argument("--focus-node-key", default=ReportConfig.focus_node_key, help="Predicate IRI used to group results")
    parser.add_argument("--checked-property-key", default=ReportConfig.checked_property_key, help="Predicate IRI counted in the summary")
    parser.add_argument("--severity-key", default=ReportConfig.severity_key, help="Predicate IRI counted in the severity summary")
    parser.add_argument("--limit", type=int, default=ReportConfig.display_limit, help="Rows shown in the HTML triple table")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> str:
    config = ReportConfig(
        focus_node_key=args.focus_node_key,
        checked_property_key=args.checked_property_key,
        severity_key=args.severity_key,
        display_limit=args.limit,
        query=args.query.read_text(encoding="utf-8") if args.query else ReportConfig.query,
    ).validate()

    session = ReportSession()
    session.load_file(args.input)
    report, result = generate_report(session, config)

    if args.format == "html":
        output = render_page(report=report, result=result, config=config, source_name=session.source_name)
    else:
        output = json.dumps(report_to_dict(report), indent=2)

    if args.output:
        if args.format == "json":
            save_report(report, args.output)
        else:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            args.output.write_text(output, encoding="utf-8")
        logger.info("Wrote report to %s", args.output)
    return output


def main(argv: List[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        output = run(args)
    except (ConfigurationError, FileNotFoundError, TurtleParseError, QueryError) as exc:
        logger.error("%s", exc)
        return 1
    if not args.output:
        print(output)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
