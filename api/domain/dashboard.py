# SPDX-License-Identifier: Apache-2.0

"""
Dashboard aggregation.

Portfolio totals, the manager's priority list (SLAs about to expire,
large debts, upcoming assemblies) and the list of condominiums at risk,
all computed from already-loaded records.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, List, Optional

from models.entities import Assembly, Condominium, Fraction, Occurrence, Transaction
from models.enums import (
    AssemblyStatus,
    PaymentStatus,
    PriorityType,
    RiskLevel,
    TransactionStatus,
    TransactionType,
    Urgency,
)
from models.responses import AtRiskCondominium, DashboardStats, PriorityItem
from domain.occurrences import is_open, is_urgent

PENDING_ASSEMBLY_STATUSES = (AssemblyStatus.NAO_MARCADA, AssemblyStatus.AGENDADA)
AT_RISK_LEVELS = (RiskLevel.HIGH, RiskLevel.CRITICAL)

SLA_WARNING_WINDOW = timedelta(days=3)
ASSEMBLY_WINDOW = timedelta(days=30)
DEBT_PRIORITY_THRESHOLD = 500
DEBT_HIGH_URGENCY_THRESHOLD = 1000
AT_RISK_DEBT_THRESHOLD = 2000

ITEMS_PER_SOURCE = 5
MAX_PRIORITIES = 10
MAX_AT_RISK = 10

URGENCY_RANK = {Urgency.HIGH.value: 0, Urgency.MEDIUM.value: 1, Urgency.LOW.value: 2}


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _names(condominiums: Iterable[Condominium]) -> Dict[str, str]:
    return {condominium.id: condominium.name for condominium in condominiums}


def compute_dashboard_stats(
    condominiums: Iterable[Condominium],
    fractions: Iterable[Fraction],
    occurrences: Iterable[Occurrence],
    assemblies: Iterable[Assembly]
) -> DashboardStats:
    """
    Compute the dashboard header totals.

    Open occurrences are those not resolved or archived; pending
    assemblies are those not yet scheduled or scheduled but not held.
    """
    condominiums = list(condominiums)
    open_occurrences = [o for o in occurrences if is_open(o)]

    return DashboardStats(
        global_balance=round(sum(c.balance for c in condominiums), 2),
        total_debt=round(sum(f.debt_amount for f in fractions), 2),
        open_occurrences=len(open_occurrences),
        urgent_occurrences=sum(1 for o in open_occurrences if is_urgent(o)),
        pending_assemblies=sum(1 for a in assemblies if a.status in PENDING_ASSEMBLY_STATUSES),
        condominiums_at_risk=sum(1 for c in condominiums if c.risk_level in AT_RISK_LEVELS),
    )


def _sla_items(occurrences, names, now) -> List[PriorityItem]:
    horizon = now + SLA_WARNING_WINDOW
    expiring = sorted(
        (
            o for o in occurrences
            if is_urgent(o) and is_open(o)
            and o.sla_deadline is not None and _as_utc(o.sla_deadline) <= horizon
        ),
        key=lambda o: _as_utc(o.sla_deadline)
    )

    return [
        PriorityItem(
            id=o.id,
            type=PriorityType.SLA,
            title=f"SLA a expirar: {o.title}",
            description=o.description,
            due_date=o.sla_deadline,
            urgency=Urgency.HIGH,
            condominium_id=o.condominium_id,
            condominium_name=names.get(o.condominium_id),
        )
        for o in expiring[:ITEMS_PER_SOURCE]
    ]


def _debt_items(fractions, names) -> List[PriorityItem]:
    indebted = sorted(
        (
            f for f in fractions
            if f.payment_status == PaymentStatus.ATRASO and f.debt_amount > DEBT_PRIORITY_THRESHOLD
        ),
        key=lambda f: f.debt_amount,
        reverse=True
    )

    return [
        PriorityItem(
            id=f.id,
            type=PriorityType.PAYMENT,
            title=f"Fração {f.number} em dívida",
            description=f"Dívida de €{f.debt_amount:.2f} - {f.owner_name}",
            due_date=None,
            urgency=Urgency.HIGH if f.debt_amount > DEBT_HIGH_URGENCY_THRESHOLD else Urgency.MEDIUM,
            condominium_id=f.condominium_id,
            condominium_name=names.get(f.condominium_id, f.condominium_name),
        )
        for f in indebted[:ITEMS_PER_SOURCE]
    ]


def _assembly_items(assemblies, names, now) -> List[PriorityItem]:
    horizon = now + ASSEMBLY_WINDOW
    upcoming = sorted(
        (
            a for a in assemblies
            if a.status == AssemblyStatus.AGENDADA
            and a.date is not None and now <= _as_utc(a.date) <= horizon
        ),
        key=lambda a: _as_utc(a.date)
    )

    return [
        PriorityItem(
            id=a.id,
            type=PriorityType.ASSEMBLY,
            title="Assembleia agendada",
            description=a.location or "Assembleia Geral",
            due_date=a.date,
            urgency=Urgency.MEDIUM,
            condominium_id=a.condominium_id,
            condominium_name=names.get(a.condominium_id),
        )
        for a in upcoming[:ITEMS_PER_SOURCE]
    ]


def compute_priorities(
    condominiums: Iterable[Condominium],
    fractions: Iterable[Fraction],
    occurrences: Iterable[Occurrence],
    assemblies: Iterable[Assembly],
    now: Optional[datetime] = None
) -> List[PriorityItem]:
    """
    Build the manager's priority list.

    Each source contributes at most five items:
    - urgent open occurrences whose SLA expires within three days
      (already expired ones included), earliest first;
    - fractions in arrears owing more than 500 EUR, largest debt first;
    - scheduled assemblies in the next thirty days, soonest first.

    The combined list is ordered by urgency, then by due date with
    undated items last, and cut to ten entries.
    """
    now = _as_utc(now) if now is not None else datetime.now(timezone.utc)
    names = _names(condominiums)

    items = (
        _sla_items(occurrences, names, now)
        + _debt_items(fractions, names)
        + _assembly_items(assemblies, names, now)
    )
    items.sort(key=lambda item: (
        URGENCY_RANK[item.urgency],
        item.due_date is None,
        _as_utc(item.due_date) if item.due_date is not None else now,
    ))

    return items[:MAX_PRIORITIES]


def _is_at_risk(condominium: Condominium) -> bool:
    return (
        condominium.risk_level in AT_RISK_LEVELS
        or condominium.debt_total > AT_RISK_DEBT_THRESHOLD
        or condominium.urgent_occurrences > 0
    )


def compute_at_risk(
    condominiums: Iterable[Condominium],
    transactions: Iterable[Transaction]
) -> List[AtRiskCondominium]:
    """
    List condominiums needing attention, most urgent occurrences first,
    then highest debt, with the date of their latest income.

    Cancelled income does not count as a payment.
    """
    last_payment: Dict[str, datetime] = {}
    for transaction in transactions:
        if transaction.type != TransactionType.RECEITA or transaction.status == TransactionStatus.ANULADO:
            continue
        current = last_payment.get(transaction.condominium_id)
        if current is None or _as_utc(transaction.date) > _as_utc(current):
            last_payment[transaction.condominium_id] = transaction.date

    flagged = sorted(
        (c for c in condominiums if _is_at_risk(c)),
        key=lambda c: (-c.urgent_occurrences, -c.debt_total)
    )

    return [
        AtRiskCondominium(
            id=c.id,
            name=c.name,
            risk_level=c.risk_level,
            debt_total=c.debt_total,
            urgent_occurrences=c.urgent_occurrences,
            open_occurrences=c.open_occurrences,
            last_payment_date=last_payment.get(c.id),
        )
        for c in flagged[:MAX_AT_RISK]
    ]
