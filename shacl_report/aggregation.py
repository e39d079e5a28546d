"""Reshape flat query bindings into per-subject and per-focus-node views.

The three helpers here are pure functions over fully materialized input.
``aggregate_by_subject`` builds one :class:`SubjectRecord` per subject;
``group_by_focus_node`` and ``count_by_predicate_value`` read those records
without modifying them.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Sequence

from .config import require_key
from .structures import Binding, FocusGroup, SubjectRecord

logger = logging.getLogger(__name__)


def aggregate_by_subject(bindings: Iterable[Binding]) -> List[SubjectRecord]:
    """Collapse bindings into one record per subject, in first-seen order.

    A repeated ``(subject, predicate)`` pair keeps the object of the later
    binding.
    """

    by_subject: Dict[str, SubjectRecord] = {}
    overwritten = 0
    for binding in bindings:
        record = by_subject.get(binding.subject)
        if record is None:
            record = SubjectRecord(subject=binding.subject)
            by_subject[binding.subject] = record
        elif binding.predicate in record.fields:
            overwritten += 1
        record.fields[binding.predicate] = binding.object
    if overwritten:
        logger.debug("Overwrote %d repeated subject/predicate values", overwritten)
    return list(by_subject.values())


def group_by_focus_node(records: Sequence[SubjectRecord], focus_node_key: str) -> List[FocusGroup]:
    """Group records by the value stored under ``focus_node_key``.

    Records without the key are left out. Groups keep the order in which their
    focus node was first encountered.
    """

    require_key(focus_node_key, "focus_node_key")
    groups: Dict[str, FocusGroup] = {}
    skipped = 0
    for record in records:
        if focus_node_key not in record.fields:
            skipped += 1
            continue
        focus_node = record.fields[focus_node_key]
        group = groups.get(focus_node)
        if group is None:
            group = FocusGroup(focus_node=focus_node)
            groups[focus_node] = group
        group.records.append(record)
    if skipped:
        logger.debug("%d records have no %s value", skipped, focus_node_key)
    return list(groups.values())


def count_by_predicate_value(records: Sequence[SubjectRecord], predicate_key: str) -> Dict[str, int]:
    """Count how many records carry each value of ``predicate_key``."""

    require_key(predicate_key, "predicate_key")
    counts: Dict[str, int] = {}
    for record in records:
        if predicate_key not in record.fields:
            continue
        value = record.fields[predicate_key]
        counts[value] = counts.get(value, 0) + 1
    return counts
