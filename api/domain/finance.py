# SPDX-License-Identifier: Apache-2.0

"""
Finance domain logic over loaded Transaction records.
"""

import csv
import io
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from middleware.error_handler import BusinessRuleException
from models.entities import Fraction, Transaction
from models.enums import PaymentStatus, TransactionCategory, TransactionStatus, TransactionType
from models.requests import TransactionFilters
from models.responses import TransactionSummary

CSV_HEADER = ["Data", "Tipo", "Condomínio", "Descrição", "Categoria", "Entidade", "Valor", "Estado"]

logger = logging.getLogger(__name__)


@dataclass
class TransactionCancellation:
    """Outcome of voiding a transaction."""
    transaction: Transaction
    balance_delta: float = 0
    fraction: Optional[Fraction] = None


def _as_utc(value: datetime) -> datetime:
    """Naive datetimes are taken to be UTC; aware ones are converted."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _in_range(value: datetime, date_from: Optional[datetime], date_to: Optional[datetime]) -> bool:
    value = _as_utc(value)
    if date_from and value < _as_utc(date_from):
        return False
    if date_to and value > _as_utc(date_to):
        return False
    return True


def summarize_transactions(
    transactions: Iterable[Transaction],
    condominium_id: Optional[str] = None,
    date_from: Optional[datetime] = None,
    date_to: Optional[datetime] = None
) -> TransactionSummary:
    """
    Total revenue and expenses; voided (ANULADO) transactions are ignored.

    Args:
        transactions: Transactions to summarize
        condominium_id: Restrict to one condominium
        date_from: Inclusive lower bound on transaction date
        date_to: Inclusive upper bound on transaction date

    Returns:
        TransactionSummary with balance = revenue - expenses
    """
    total_revenue = 0.0
    total_expenses = 0.0
    count = 0

    for transaction in transactions:
        if transaction.status == TransactionStatus.ANULADO:
            continue
        if condominium_id and transaction.condominium_id != condominium_id:
            continue
        if not _in_range(transaction.date, date_from, date_to):
            continue

        count += 1
        if transaction.type == TransactionType.RECEITA:
            total_revenue += transaction.amount
        else:
            total_expenses += transaction.amount

    return TransactionSummary(
        total_revenue=round(total_revenue, 2),
        total_expenses=round(total_expenses, 2),
        count=count,
        balance=round(total_revenue - total_expenses, 2)
    )


def _search_matches(transaction: Transaction, term: str) -> bool:
    haystack = [
        transaction.description,
        transaction.reference,
        transaction.condominium_name,
        transaction.fraction_number,
        transaction.supplier_name,
    ]
    return any(term in value.lower() for value in haystack if value)


def filter_transactions(
    transactions: Iterable[Transaction],
    filters: TransactionFilters
) -> List[Transaction]:
    """Apply listing filters; newest first."""
    term = filters.search.lower() if filters.search else None
    matched = []

    for transaction in transactions:
        if filters.condominium_id and transaction.condominium_id != filters.condominium_id:
            continue
        if filters.fraction_id and transaction.fraction_id != filters.fraction_id:
            continue
        if filters.supplier_id and transaction.supplier_id != filters.supplier_id:
            continue
        if filters.type and transaction.type != filters.type:
            continue
        if filters.category and transaction.category != filters.category:
            continue
        if filters.status and transaction.status != filters.status:
            continue
        if filters.payment_method and transaction.payment_method != filters.payment_method:
            continue
        if not _in_range(transaction.date, filters.date_from, filters.date_to):
            continue
        if term and not _search_matches(transaction, term):
            continue
        matched.append(transaction)

    matched.sort(key=lambda t: _as_utc(t.date), reverse=True)
    return matched


def _entity_label(transaction: Transaction) -> str:
    if transaction.fraction_number:
        return f"Fração {transaction.fraction_number}"
    return transaction.supplier_name or "-"


def export_transactions_csv(transactions: Iterable[Transaction]) -> str:
    """Render transactions as CSV for spreadsheet export."""
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow(CSV_HEADER)

    for transaction in transactions:
        writer.writerow([
            _as_utc(transaction.date).date().isoformat(),
            transaction.type,
            transaction.condominium_name or "",
            transaction.description,
            transaction.category,
            _entity_label(transaction),
            f"{transaction.amount:.2f}",
            transaction.status,
        ])

    return output.getvalue()


def cancel_transaction(
    transaction: Transaction,
    fraction: Optional[Fraction] = None,
    now: Optional[datetime] = None
) -> TransactionCancellation:
    """
    Void (ANULADO) a transaction and work out what it reverses.

    A settled transaction is taken back out of the condominium balance:
    income gives a negative delta, an expense a positive one. PENDENTE
    transactions never reached the balance, so their delta is 0. Voiding a
    quota payment (RECEITA / QUOTA) puts the amount back on the fraction's
    debt and marks it ATRASO.

    Args:
        transaction: Transaction to void (not modified)
        fraction: The paying fraction, needed to reverse a quota payment
        now: Update timestamp

    Returns:
        TransactionCancellation with the voided copy, the balance delta and
        the updated fraction (None when no debt is restored)

    Raises:
        BusinessRuleException: If the transaction is already voided, or the
            fraction given is not the one the transaction belongs to
    """
    if transaction.status == TransactionStatus.ANULADO:
        raise BusinessRuleException(
            "Transaction is already cancelled",
            {"transaction_id": transaction.id}
        )

    now = now or datetime.now(timezone.utc)
    cancelled = transaction.model_copy(
        update={"status": TransactionStatus.ANULADO.value, "updated_at": now}
    )

    balance_delta = 0.0
    if transaction.status != TransactionStatus.PENDENTE:
        if transaction.type == TransactionType.RECEITA:
            balance_delta = -transaction.amount
        else:
            balance_delta = transaction.amount

    restored = None
    is_quota_payment = (
        transaction.type == TransactionType.RECEITA
        and transaction.category == TransactionCategory.QUOTA
        and transaction.fraction_id is not None
    )
    if is_quota_payment and fraction is not None:
        if fraction.id != transaction.fraction_id:
            raise BusinessRuleException(
                "Fraction does not match the transaction",
                {"transaction_id": transaction.id, "fraction_id": fraction.id}
            )
        restored = fraction.model_copy(update={
            "debt_amount": round(fraction.debt_amount + transaction.amount, 2),
            "payment_status": PaymentStatus.ATRASO.value,
            "updated_at": now
        })

    logger.info(
        "Transaction cancelled",
        extra={
            "transaction_id": transaction.id,
            "balance_delta": balance_delta,
            "fraction_id": restored.id if restored else None
        }
    )

    return TransactionCancellation(
        transaction=cancelled,
        balance_delta=balance_delta,
        fraction=restored
    )
