from datetime import date
from decimal import Decimal

from finance_tracker.core.budget_calculator import sum_expenses
from finance_tracker.core.entities import TransactionType
from finance_tracker.services import transaction_service
from finance_tracker.services.transaction_ledger import SqlTransactionLedger


def _add(db, owner, category, amount, day, type=TransactionType.EXPENSE):
    transaction_service.create_transaction(db, {
        "category": category, "amount": amount, "date": day, "type": type,
    }, owner)


def test_sql_ledger_applies_expense_predicate(db):
    _add(db, "alice", "Food", 50, date(2024, 1, 1))
    _add(db, "alice", "Food", 25.25, date(2024, 1, 31))
    _add(db, "alice", "Food", 10, date(2024, 2, 1))
    _add(db, "alice", "food", 10, date(2024, 1, 15))
    _add(db, "alice", "Food", 500, date(2024, 1, 15), type=TransactionType.INCOME)
    _add(db, "bob", "Food", 999, date(2024, 1, 15))

    entries = SqlTransactionLedger(db, "alice").find_expenses("Food", date(2024, 1, 1), date(2024, 1, 31))

    assert sorted(e.amount for e in entries) == [Decimal("25.25"), Decimal("50")]
    assert all(e.type == TransactionType.EXPENSE for e in entries)


def test_sql_ledger_sum(db):
    _add(db, "alice", "Food", 50, date(2024, 1, 10))
    _add(db, "alice", "Food", 30, date(2024, 1, 12))

    ledger = SqlTransactionLedger(db, "alice")

    assert sum_expenses(ledger, "Food", date(2024, 1, 1), date(2024, 2, 1)) == Decimal("80")


def test_sql_ledger_without_owner_is_empty(db):
    _add(db, "alice", "Food", 50, date(2024, 1, 10))

    assert SqlTransactionLedger(db, None).find_expenses("Food", date(2024, 1, 1), date(2024, 12, 31)) == []
