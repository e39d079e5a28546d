"""Group SHACL validation results by focus node and checked property."""

from .aggregation import aggregate_by_subject, count_by_predicate_value, group_by_focus_node
from .config import ConfigurationError, ReportConfig
from .reporting import ValidationReport, build_report, generate_report
from .store import ReportSession
from .structures import Binding, FocusGroup, SubjectRecord

__all__ = [
    "Binding",
    "SubjectRecord",
    "FocusGroup",
    "aggregate_by_subject",
    "group_by_focus_node",
    "count_by_predicate_value",
    "ConfigurationError",
    "ReportConfig",
    "ReportSession",
    "ValidationReport",
    "build_report",
    "generate_report",
]
