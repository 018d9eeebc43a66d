# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Tests for finance domain logic.
"""

import uuid
import pytest
from datetime import datetime, timedelta, timezone

from domain.finance import (
    CSV_HEADER,
    cancel_transaction,
    export_transactions_csv,
    filter_transactions,
    summarize_transactions,
)
from middleware.error_handler import BusinessRuleException
from models.requests import TransactionFilters


class TestSummarizeTransactions:
    """Test revenue/expense totals."""

    def test_totals_and_balance(self, make_transaction):
        """Balance is revenue minus expenses."""
        transactions = [
            make_transaction(amount=100.10),
            make_transaction(amount=50.20),
            make_transaction(type="DESPESA", category="LIMPEZA", amount=30.05),
        ]

        summary = summarize_transactions(transactions)

        assert summary.total_revenue == 150.3
        assert summary.total_expenses == 30.05
        assert summary.balance == 120.25
        assert summary.count == 3

    def test_voided_ignored(self, make_transaction):
        """ANULADO transactions don't count."""
        transactions = [
            make_transaction(amount=100),
            make_transaction(amount=999, status="ANULADO"),
        ]

        summary = summarize_transactions(transactions)

        assert summary.total_revenue == 100
        assert summary.count == 1

    def test_condominium_and_dates(self, make_transaction, now):
        other = str(uuid.uuid4())
        transactions = [
            make_transaction(amount=10, date=now - timedelta(days=1)),
            make_transaction(amount=20, date=now - timedelta(days=60)),
            make_transaction(amount=40, condominium_id=other),
        ]
        own = transactions[0].condominium_id

        summary = summarize_transactions(transactions, own, date_from=now - timedelta(days=30), date_to=now)

        assert summary.total_revenue == 10
        assert summary.count == 1

    def test_empty(self):
        summary = summarize_transactions([])
        assert summary.balance == 0
        assert summary.count == 0


class TestFilterTransactions:
    """Test listing filters."""

    def test_newest_first(self, make_transaction, now):
        old = make_transaction(date=now - timedelta(days=10))
        new = make_transaction(date=now)

        assert filter_transactions([old, new], TransactionFilters()) == [new, old]

    def test_type_and_category(self, make_transaction):
        quota = make_transaction()
        cleaning = make_transaction(type="DESPESA", category="LIMPEZA")

        assert filter_transactions([quota, cleaning], TransactionFilters(type="DESPESA")) == [cleaning]
        assert filter_transactions([quota, cleaning], TransactionFilters(category="QUOTA")) == [quota]

    def test_search_joined_names(self, make_transaction):
        """Search covers the fraction number and supplier name."""
        quota = make_transaction(fraction_number="B")
        repair = make_transaction(
            type="DESPESA", category="MANUTENCAO", description="Reparação", supplier_name="Elevadores Norte"
        )

        assert filter_transactions([quota, repair], TransactionFilters(search="norte")) == [repair]

    def test_date_range(self, make_transaction, now):
        inside = make_transaction(date=now - timedelta(days=2))
        outside = make_transaction(date=now - timedelta(days=40))

        filters = TransactionFilters(**{"from": now - timedelta(days=7)})

        assert filter_transactions([inside, outside], filters) == [inside]


class TestExportTransactionsCsv:
    """Test CSV export."""

    def test_header_and_rows(self, make_transaction):
        transactions = [
            make_transaction(fraction_number="A", amount=45),
            make_transaction(
                type="DESPESA", category="ELEVADOR", amount=120.5,
                description="Manutenção elevador", supplier_name="Elevadores Norte"
            ),
            make_transaction(type="DESPESA", category="OUTRO", amount=3, description="Correio"),
        ]

        lines = export_transactions_csv(transactions).splitlines()

        assert lines[0] == ",".join(CSV_HEADER)
        assert lines[1] == "2024-06-15,RECEITA,Edifício Atlântico,Quota mensal,QUOTA,Fração A,45.00,NORMAL"
        assert lines[2].endswith("Elevadores Norte,120.50,NORMAL")
        assert lines[3].endswith(",-,3.00,NORMAL")

    def test_quotes_commas(self, make_transaction):
        """Descriptions with commas are quoted."""
        csv_text = export_transactions_csv([make_transaction(description="Quota, junho")])
        assert '"Quota, junho"' in csv_text

    def test_empty(self):
        assert export_transactions_csv([]) == ",".join(CSV_HEADER) + "\n"

    def test_date_column_in_utc(self, make_transaction):
        """The Data column is the UTC calendar date, whatever the stored offset."""
        lisbon_summer = timezone(timedelta(hours=1))
        transaction = make_transaction(date=datetime(2024, 6, 15, 0, 30, tzinfo=lisbon_summer))

        lines = export_transactions_csv([transaction]).splitlines()

        assert lines[1].startswith("2024-06-14,")

    def test_naive_date_kept(self, make_transaction):
        """Naive dates are already UTC."""
        transaction = make_transaction(date=datetime(2024, 6, 15, 23, 59))

        assert export_transactions_csv([transaction]).splitlines()[1].startswith("2024-06-15,")


class TestCancelTransaction:
    """Test voiding transactions."""

    def test_income_reverses_balance(self, make_transaction, now):
        """Voiding income takes the amount back out of the balance."""
        transaction = make_transaction(amount=80)

        result = cancel_transaction(transaction, now=now)

        assert result.transaction.status == "ANULADO"
        assert result.transaction.updated_at == now
        assert result.balance_delta == -80
        assert result.fraction is None
        assert transaction.status == "NORMAL"

    def test_expense_reverses_balance(self, make_transaction, now):
        transaction = make_transaction(type="DESPESA", category="LIMPEZA", amount=30.5)

        assert cancel_transaction(transaction, now=now).balance_delta == 30.5

    def test_pending_has_no_balance_effect(self, make_transaction, now):
        """PENDENTE transactions never reached the balance."""
        transaction = make_transaction(status="PENDENTE", amount=200)

        result = cancel_transaction(transaction, now=now)

        assert result.balance_delta == 0
        assert result.transaction.status == "ANULADO"

    def test_already_cancelled(self, make_transaction, now):
        """A voided transaction cannot be voided again."""
        with pytest.raises(BusinessRuleException) as exc_info:
            cancel_transaction(make_transaction(status="ANULADO"), now=now)

        assert exc_info.value.status_code == 422

    def test_quota_payment_restores_debt(self, make_transaction, make_fraction, now):
        """Voiding a quota payment puts the debt back and marks the fraction in arrears."""
        fraction = make_fraction(debt_amount=10.25, payment_status="EM_DIA")
        transaction = make_transaction(fraction_id=fraction.id, amount=45.5)

        result = cancel_transaction(transaction, fraction, now)

        assert result.fraction.id == fraction.id
        assert result.fraction.debt_amount == 55.75
        assert result.fraction.payment_status == "ATRASO"
        assert result.fraction.updated_at == now
        assert fraction.debt_amount == 10.25
        assert result.balance_delta == -45.5

    def test_quota_payment_without_fraction(self, make_transaction, now):
        """Without the fraction record no debt is restored."""
        transaction = make_transaction(fraction_id=str(uuid.uuid4()))

        assert cancel_transaction(transaction, now=now).fraction is None

    def test_non_quota_leaves_fraction(self, make_transaction, make_fraction, now):
        """Only quota income is put back on the fraction's debt."""
        fraction = make_fraction(debt_amount=0)
        transaction = make_transaction(category="OUTRO", fraction_id=fraction.id)

        assert cancel_transaction(transaction, fraction, now).fraction is None

    def test_mismatched_fraction(self, make_transaction, make_fraction, now):
        """The fraction must be the one that paid."""
        transaction = make_transaction(fraction_id=str(uuid.uuid4()))

        with pytest.raises(BusinessRuleException):
            cancel_transaction(transaction, make_fraction(), now)
