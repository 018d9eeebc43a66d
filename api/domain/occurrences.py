# SPDX-License-Identifier: Apache-2.0

"""
Occurrence (maintenance ticket) domain logic.

Pure functions over already-loaded Occurrence records: open/overdue
derivation, dashboard counters, listing filters and the status-change
workflow with its audit entry and condominium counter deltas.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional

from models.entities import Occurrence, OccurrenceAuditLog, UserContext
from models.enums import OccurrencePriority, OccurrenceStatus, SortOrder
from models.requests import (
    OccurrenceAssignmentRequest,
    OccurrenceFilters,
    OccurrenceStatusRequest,
)
from models.responses import OccurrenceStats

CLOSED_STATUSES = (OccurrenceStatus.RESOLVIDA, OccurrenceStatus.ARQUIVADA)
RECENT_RESOLUTION_WINDOW = timedelta(days=7)

# Wire name -> attribute
SORTABLE_FIELDS = {
    "createdAt": "created_at",
    "priority": "priority",
    "status": "status",
    "slaDeadline": "sla_deadline",
}
DEFAULT_SORT_FIELD = "createdAt"

# Enum fields sort by severity / workflow position, not alphabetically
PRIORITY_RANK = {OccurrencePriority.NORMAL.value: 0, OccurrencePriority.URGENTE.value: 1}
STATUS_RANK = {
    OccurrenceStatus.ABERTA.value: 0,
    OccurrenceStatus.EM_ANALISE.value: 1,
    OccurrenceStatus.EM_EXECUCAO.value: 2,
    OccurrenceStatus.RESOLVIDA.value: 3,
    OccurrenceStatus.ARQUIVADA.value: 4,
}
_RANKS = {"priority": PRIORITY_RANK, "status": STATUS_RANK}


@dataclass
class OccurrenceChange:
    """Outcome of a workflow operation on an occurrence."""
    occurrence: Occurrence
    audit_log: OccurrenceAuditLog
    open_delta: int = 0
    urgent_delta: int = 0


def _as_utc(value: datetime) -> datetime:
    """Naive datetimes are taken to be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _now(now: Optional[datetime]) -> datetime:
    return _as_utc(now) if now is not None else datetime.now(timezone.utc)


def is_open(occurrence: Occurrence) -> bool:
    """An occurrence is open until it is resolved or archived."""
    return occurrence.status not in CLOSED_STATUSES


def is_urgent(occurrence: Occurrence) -> bool:
    return occurrence.priority == OccurrencePriority.URGENTE


def is_overdue(occurrence: Occurrence, now: Optional[datetime] = None) -> bool:
    """Open and past its SLA deadline."""
    if not is_open(occurrence) or occurrence.sla_deadline is None:
        return False
    return _as_utc(occurrence.sla_deadline) < _now(now)


def compute_occurrence_stats(
    occurrences: Iterable[Occurrence],
    now: Optional[datetime] = None,
    condominium_id: Optional[str] = None
) -> OccurrenceStats:
    """
    Count occurrences for the dashboard.

    Args:
        occurrences: Occurrences to count
        now: Reference time (defaults to current UTC time)
        condominium_id: Only count occurrences of this condominium

    Returns:
        OccurrenceStats counters
    """
    now = _now(now)
    recent_cutoff = now - RECENT_RESOLUTION_WINDOW
    stats = OccurrenceStats()

    for occurrence in occurrences:
        if condominium_id and occurrence.condominium_id != condominium_id:
            continue

        if occurrence.status == OccurrenceStatus.ABERTA:
            stats.open += 1
        if occurrence.status == OccurrenceStatus.EM_EXECUCAO:
            stats.execution += 1
        if is_urgent(occurrence) and is_open(occurrence):
            stats.urgent += 1
        if (
            occurrence.status == OccurrenceStatus.RESOLVIDA
            and occurrence.resolved_at is not None
            and _as_utc(occurrence.resolved_at) >= recent_cutoff
        ):
            stats.resolved_recent += 1
        if is_overdue(occurrence, now):
            stats.overdue += 1

    return stats


def _matches(occurrence: Occurrence, filters: OccurrenceFilters, now: datetime) -> bool:
    if filters.condominium_id and occurrence.condominium_id != filters.condominium_id:
        return False
    if filters.fraction_id and occurrence.fraction_id != filters.fraction_id:
        return False
    if filters.supplier_id and occurrence.assigned_supplier_id != filters.supplier_id:
        return False
    if filters.status and occurrence.status != filters.status:
        return False
    if filters.priority and occurrence.priority != filters.priority:
        return False
    if filters.category and occurrence.category != filters.category:
        return False

    created_at = _as_utc(occurrence.created_at)
    if filters.date_from and created_at < _as_utc(filters.date_from):
        return False
    if filters.date_to and created_at > _as_utc(filters.date_to):
        return False

    if filters.overdue and not is_overdue(occurrence, now):
        return False

    if filters.search:
        term = filters.search.lower()
        if term not in occurrence.title.lower() and term not in occurrence.description.lower():
            return False

    return True


def filter_occurrences(
    occurrences: Iterable[Occurrence],
    filters: OccurrenceFilters,
    now: Optional[datetime] = None
) -> List[Occurrence]:
    """
    Apply listing filters and sorting.

    Unknown sort fields fall back to createdAt; the default order is
    descending. Records without a value for the sort field go last.
    """
    now = _now(now)
    matched = [o for o in occurrences if _matches(o, filters, now)]

    sort_field = filters.sort_by if filters.sort_by in SORTABLE_FIELDS else DEFAULT_SORT_FIELD
    attribute = SORTABLE_FIELDS[sort_field]
    descending = filters.sort_order != SortOrder.ASC

    ranks = _RANKS.get(attribute)

    def sort_value(occurrence):
        value = getattr(occurrence, attribute)
        if ranks is not None:
            return ranks[value]
        return _as_utc(value) if isinstance(value, datetime) else value

    present = [o for o in matched if getattr(o, attribute) is not None]
    missing = [o for o in matched if getattr(o, attribute) is None]
    present.sort(key=sort_value, reverse=descending)
    return present + missing


def counter_deltas_for_new(occurrence: Occurrence) -> tuple:
    """(open, urgent) condominium counter increments when an occurrence is created."""
    if not is_open(occurrence):
        return 0, 0
    return 1, 1 if is_urgent(occurrence) else 0


def counter_deltas_for_deleted(occurrence: Occurrence) -> tuple:
    """(open, urgent) condominium counter decrements when an occurrence is deleted."""
    opened, urgent = counter_deltas_for_new(occurrence)
    return -opened, -urgent


def apply_status_change(
    occurrence: Occurrence,
    request: OccurrenceStatusRequest,
    user: UserContext,
    now: Optional[datetime] = None
) -> OccurrenceChange:
    """
    Move an occurrence to a new status.

    Sets resolved_at when the new status is RESOLVIDA and records the
    transition in an audit entry. The open/urgent deltas tell the caller how
    to adjust the condominium's counters: closing an open occurrence gives
    -1, reopening a closed one gives +1.

    Args:
        occurrence: Current occurrence (not modified)
        request: Validated status change
        user: User performing the change
        now: Reference time

    Returns:
        OccurrenceChange with the updated copy
    """
    now = _now(now)
    was_open = is_open(occurrence)

    updates = {"status": request.status, "updated_at": now}
    if request.status == OccurrenceStatus.RESOLVIDA:
        updates["resolved_at"] = now
    updated = occurrence.model_copy(update=updates)

    open_delta = 0
    if was_open and not is_open(updated):
        open_delta = -1
    elif not was_open and is_open(updated):
        open_delta = 1
    urgent_delta = open_delta if is_urgent(occurrence) else 0

    audit_log = OccurrenceAuditLog(
        occurrence_id=occurrence.id,
        action="STATUS_CHANGE",
        author_id=user.user_id,
        author_name=user.display_name,
        metadata={"from": occurrence.status, "to": request.status, "notes": request.notes},
        created_at=now,
        updated_at=now
    )

    return OccurrenceChange(
        occurrence=updated,
        audit_log=audit_log,
        open_delta=open_delta,
        urgent_delta=urgent_delta
    )


def apply_assignment(
    occurrence: Occurrence,
    request: OccurrenceAssignmentRequest,
    user: UserContext,
    now: Optional[datetime] = None
) -> OccurrenceChange:
    """Assign a supplier to an occurrence, or clear the assignment with None."""
    now = _now(now)
    updated = occurrence.model_copy(
        update={"assigned_supplier_id": request.supplier_id, "updated_at": now}
    )
    audit_log = OccurrenceAuditLog(
        occurrence_id=occurrence.id,
        action="ASSIGNMENT",
        author_id=user.user_id,
        author_name=user.display_name,
        metadata={"supplierId": request.supplier_id},
        created_at=now,
        updated_at=now
    )
    return OccurrenceChange(occurrence=updated, audit_log=audit_log)
