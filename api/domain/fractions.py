# SPDX-License-Identifier: Apache-2.0

"""
Fraction domain logic: listing filters, CSV export and quota payment
registration.
"""

from datetime import datetime, timezone
from typing import Iterable, List, Optional
import csv
import io
import logging

from middleware.error_handler import BusinessRuleException
from models.entities import Fraction, Transaction
from models.enums import PaymentStatus, SortOrder, TransactionCategory, TransactionType
from models.requests import FractionFilters, RegisterPaymentRequest
from models.responses import PaymentRegistration

logger = logging.getLogger(__name__)

CSV_HEADER = [
    "Condominio", "Fracao", "Piso", "Tipologia", "Permilagem",
    "Proprietario", "Email", "Telefone", "Divida", "Estado",
]

# Wire name -> attribute
SORTABLE_FIELDS = {
    "number": "number",
    "floor": "floor",
    "ownerName": "owner_name",
    "debtAmount": "debt_amount",
    "permillage": "permillage",
    "monthlyQuota": "monthly_quota",
}


def _search_matches(fraction: Fraction, term: str) -> bool:
    haystack = [
        fraction.number,
        fraction.owner_name,
        fraction.owner_email,
        fraction.tenant_name,
        fraction.condominium_name,
    ]
    return any(term in value.lower() for value in haystack if value)


def filter_fractions(fractions: Iterable[Fraction], filters: FractionFilters) -> List[Fraction]:
    """Apply fraction listing filters; sorted by number unless sort_by names a known field."""
    term = filters.search.lower() if filters.search else None
    matched = []

    for fraction in fractions:
        if filters.condominium_id and fraction.condominium_id != filters.condominium_id:
            continue
        if filters.payment_status and fraction.payment_status != filters.payment_status:
            continue
        if filters.typology and fraction.typology != filters.typology:
            continue
        if filters.occupation and fraction.occupation != filters.occupation:
            continue
        if filters.is_active is not None and fraction.is_active != filters.is_active:
            continue
        if filters.is_follow_up is not None and fraction.is_follow_up != filters.is_follow_up:
            continue
        if filters.min_debt is not None and fraction.debt_amount < filters.min_debt:
            continue
        if term and not _search_matches(fraction, term):
            continue
        matched.append(fraction)

    attribute = SORTABLE_FIELDS.get(filters.sort_by or "", "number")
    descending = filters.sort_order == SortOrder.DESC
    matched.sort(key=lambda f: getattr(f, attribute), reverse=descending)
    return matched


def register_payment(
    fraction: Fraction,
    request: RegisterPaymentRequest,
    now: Optional[datetime] = None
) -> PaymentRegistration:
    """
    Register a quota payment against a fraction's debt.

    Creates the matching income transaction (RECEITA / QUOTA) and returns the
    fraction with its debt reduced. The fraction is EM_DIA once the remaining
    debt is zero or less, otherwise ATRASO.

    Args:
        fraction: Fraction receiving the payment (not modified)
        request: Validated payment details
        now: Default payment date

    Returns:
        PaymentRegistration with the new transaction and updated fraction

    Raises:
        BusinessRuleException: If the amount is not positive
    """
    if request.amount is None or request.amount <= 0:
        raise BusinessRuleException(
            "Payment amount must be positive",
            {"fraction_id": fraction.id, "amount": request.amount}
        )

    now = now or datetime.now(timezone.utc)
    remaining_debt = round(fraction.debt_amount - request.amount, 2)
    payment_status = PaymentStatus.EM_DIA if remaining_debt <= 0 else PaymentStatus.ATRASO

    transaction = Transaction(
        condominium_id=fraction.condominium_id,
        condominium_name=fraction.condominium_name,
        fraction_id=fraction.id,
        fraction_number=fraction.number,
        type=TransactionType.RECEITA,
        category=TransactionCategory.QUOTA,
        amount=request.amount,
        date=request.date or now,
        payment_method=request.method,
        description=request.description or f"Pagamento de quota - Fração {fraction.number}",
        reference=request.reference
    )

    updated = fraction.model_copy(update={
        "debt_amount": remaining_debt,
        "payment_status": payment_status.value,
        "updated_at": now
    })

    logger.info(
        "Payment registered",
        extra={
            "fraction_id": fraction.id,
            "amount": request.amount,
            "remaining_debt": remaining_debt,
            "payment_status": payment_status.value
        }
    )

    return PaymentRegistration(transaction=transaction, fraction=updated)


def _plain_number(value: float) -> str:
    """125.0 -> "125", 125.5 -> "125.5"."""
    return str(int(value)) if float(value).is_integer() else str(value)


def export_fractions_csv(fractions: Iterable[Fraction]) -> str:
    """Render fractions as CSV, ordered by condominium name then number."""
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow(CSV_HEADER)

    ordered = sorted(fractions, key=lambda f: ((f.condominium_name or "").lower(), f.number))
    for fraction in ordered:
        writer.writerow([
            fraction.condominium_name or "",
            fraction.number,
            fraction.floor,
            fraction.typology,
            _plain_number(fraction.permillage),
            fraction.owner_name,
            fraction.owner_email or "",
            fraction.owner_phone or "",
            _plain_number(fraction.debt_amount),
            fraction.payment_status,
        ])

    return output.getvalue()
