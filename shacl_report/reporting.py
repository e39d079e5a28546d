"""Build validation reports from SHACL result bindings."""
from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .aggregation import aggregate_by_subject, count_by_predicate_value, group_by_focus_node
from .config import ReportConfig
from .queries import QueryResult, bindings_from_rows, run_query
from .store import ReportSession
from .structures import Binding, FocusGroup, SubjectRecord

logger = logging.getLogger(__name__)


@dataclass
class ValidationReport:
    records: List[SubjectRecord]
    focus_groups: List[FocusGroup]
    path_counts: Dict[str, int]
    severity_counts: Dict[str, int] = field(default_factory=dict)

    @property
    def total_results(self) -> int:
        return len(self.records)

    @property
    def total_focus_nodes(self) -> int:
        return len(self.focus_groups)


def build_report(bindings: Sequence[Binding], config: Optional[ReportConfig] = None) -> ValidationReport:
    config = (config or ReportConfig()).validate()
    records = aggregate_by_subject(bindings)
    report = ValidationReport(
        records=records,
        focus_groups=group_by_focus_node(records, config.focus_node_key),
        path_counts=count_by_predicate_value(records, config.checked_property_key),
        severity_counts=count_by_predicate_value(records, config.severity_key),
    )
    logger.info(
        "Report covers %d results across %d focus nodes",
        report.total_results,
        report.total_focus_nodes,
    )
    return report


def generate_report(
    session: ReportSession, config: Optional[ReportConfig] = None
) -> Tuple[ValidationReport, QueryResult]:
    """Run the configured query on the session graph and summarize it.

    The raw query result is returned alongside the report so callers can show
    the underlying triples.
    """

    config = (config or ReportConfig()).validate()
    result = run_query(session.graph, config.query)
    return build_report(bindings_from_rows(result.rows), config), result


def report_to_dict(report: ValidationReport) -> Dict[str, Any]:
    return {
        "total_results": report.total_results,
        "total_focus_nodes": report.total_focus_nodes,
        "path_counts": dict(report.path_counts),
        "severity_counts": dict(report.severity_counts),
        "focus_groups": [
            {
                "focus_node": group.focus_node,
                "results": [asdict(record) for record in group.records],
            }
            for group in report.focus_groups
        ],
    }


def save_report(report: ValidationReport, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(report_to_dict(report), indent=2), encoding="utf-8")
