"""Typed domain objects shared by the report pipeline."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(frozen=True)
class Binding:
    """One flattened query row: a single ``subject predicate object`` statement."""

    subject: str
    predicate: str
    object: str

    @classmethod
    def from_row(cls, row: dict, subject_var: str = "s", predicate_var: str = "p", object_var: str = "o") -> "Binding":
        return cls(
            subject=row[subject_var],
            predicate=row[predicate_var],
            object=row[object_var],
        )


@dataclass
class SubjectRecord:
    """All predicate/object pairs seen for one subject.

    The subject identity is kept apart from ``fields`` so a predicate that
    happens to be called ``subject`` is stored like any other predicate.
    """

    subject: str
    fields: Dict[str, str] = field(default_factory=dict)


@dataclass
class FocusGroup:
    focus_node: str
    records: List[SubjectRecord] = field(default_factory=list)
