"""Configuration helpers for SHACL report generation."""
from __future__ import annotations

from dataclasses import dataclass

SH_NAMESPACE = "http://www.w3.org/ns/shacl#"
SH_FOCUS_NODE = f"{SH_NAMESPACE}focusNode"
SH_RESULT_PATH = f"{SH_NAMESPACE}resultPath"
SH_RESULT_SEVERITY = f"{SH_NAMESPACE}resultSeverity"

VALIDATION_RESULTS_QUERY = """
SELECT ?s ?p ?o
WHERE {
  ?report <http://www.w3.org/ns/shacl#result> ?s .
  ?s ?p ?o .
}
"""


class ConfigurationError(ValueError):
    """Raised when report configuration is missing or malformed."""


def require_key(value: object, name: str) -> str:
    """Return ``value`` if it is a usable predicate key, else raise."""

    if not isinstance(value, str) or not value.strip():
        raise ConfigurationError(f"{name} must be a non-empty string, got {value!r}")
    return value


@dataclass
class ReportConfig:
    """Runtime configuration for :func:`shacl_report.reporting.generate_report`."""

    focus_node_key: str = SH_FOCUS_NODE
    checked_property_key: str = SH_RESULT_PATH
    severity_key: str = SH_RESULT_SEVERITY
    display_limit: int = 20
    query: str = VALIDATION_RESULTS_QUERY

    def validate(self) -> "ReportConfig":
        require_key(self.focus_node_key, "focus_node_key")
        require_key(self.checked_property_key, "checked_property_key")
        require_key(self.severity_key, "severity_key")
        if not isinstance(self.display_limit, int) or self.display_limit <= 0:
            raise ConfigurationError(
                f"display_limit must be a positive integer, got {self.display_limit!r}"
            )
        if not self.query or not self.query.strip():
            raise ConfigurationError("query must not be empty")
        return self
