from datetime import date
from decimal import Decimal

import pytest

from finance_tracker.core.budget_calculator import percentage_used, project, resolve_end, sum_expenses
from finance_tracker.core.entities import BudgetRecord, LedgerEntry, TimePeriod, TransactionType
from finance_tracker.core.ledger import InMemoryLedger, is_matching_expense


def _entry(category, amount, day, type=TransactionType.EXPENSE):
    return LedgerEntry(category=category, amount=Decimal(str(amount)), date=day, type=type)


def _budget(amount=200, category="Food", period=TimePeriod.MONTHLY, start=date(2024, 1, 1), end=None):
    return BudgetRecord(
        id="b1",
        owner_id="alice",
        category=category,
        amount=Decimal(str(amount)),
        time_period=period,
        start_date=start,
        end_date=end,
    )


@pytest.mark.parametrize("start, period, expected", [
    (date(2024, 1, 15), TimePeriod.DAILY, date(2024, 1, 16)),
    (date(2024, 12, 31), TimePeriod.DAILY, date(2025, 1, 1)),
    (date(2024, 1, 1), TimePeriod.WEEKLY, date(2024, 1, 8)),
    (date(2024, 1, 15), TimePeriod.MONTHLY, date(2024, 2, 15)),
    (date(2024, 12, 15), TimePeriod.MONTHLY, date(2025, 1, 15)),
    (date(2024, 1, 15), TimePeriod.YEARLY, date(2025, 1, 15)),
])
def test_resolve_end_adds_one_period(start, period, expected):
    assert resolve_end(start, period) == expected


def test_resolve_end_month_overflow_clamps_to_month_end():
    assert resolve_end(date(2024, 1, 31), TimePeriod.MONTHLY) == date(2024, 2, 29)
    assert resolve_end(date(2023, 1, 31), TimePeriod.MONTHLY) == date(2023, 2, 28)
    assert resolve_end(date(2024, 3, 31), TimePeriod.MONTHLY) == date(2024, 4, 30)


def test_resolve_end_leap_day_yearly():
    assert resolve_end(date(2024, 2, 29), TimePeriod.YEARLY) == date(2025, 2, 28)


def test_resolve_end_accepts_plain_period_strings():
    assert resolve_end(date(2024, 1, 15), "weekly") == date(2024, 1, 22)


@pytest.mark.parametrize("explicit_end", [date(2024, 1, 20), date(2030, 6, 1), date(2023, 12, 1)])
def test_explicit_end_always_wins(explicit_end):
    assert resolve_end(date(2024, 1, 15), TimePeriod.MONTHLY, explicit_end) == explicit_end


def test_is_matching_expense_predicate():
    start, end = date(2024, 1, 1), date(2024, 1, 31)

    assert is_matching_expense(_entry("Food", 5, date(2024, 1, 1)), "Food", start, end)
    assert is_matching_expense(_entry("Food", 5, date(2024, 1, 31)), "Food", start, end)
    assert not is_matching_expense(_entry("Food", 5, date(2024, 2, 1)), "Food", start, end)
    assert not is_matching_expense(_entry("food", 5, date(2024, 1, 5)), "Food", start, end)
    assert not is_matching_expense(
        _entry("Food", 5, date(2024, 1, 5), type=TransactionType.INCOME), "Food", start, end
    )


def test_sum_expenses_uses_absolute_amounts():
    ledger = InMemoryLedger([
        _entry("Food", 20, date(2024, 1, 2)),
        _entry("Food", -15.5, date(2024, 1, 3)),
        _entry("Rent", 900, date(2024, 1, 3)),
    ])

    assert sum_expenses(ledger, "Food", date(2024, 1, 1), date(2024, 1, 31)) == Decimal("35.5")


def test_sum_expenses_empty_ledger_is_zero():
    assert sum_expenses(InMemoryLedger(), "Food", date(2024, 1, 1), date(2024, 1, 31)) == Decimal("0")


def test_project_food_scenario(food_ledger):
    projection = project(_budget(), food_ledger)

    assert projection.current_spending == Decimal("50")
    assert projection.remaining == Decimal("150")
    assert projection.percentage_used == Decimal("25.00")
    # budget fields carried over
    assert projection.id == "b1"
    assert projection.category == "Food"
    assert projection.amount == Decimal("200")


def test_project_counts_transactions_on_both_window_edges():
    ledger = InMemoryLedger([
        _entry("Food", 10, date(2024, 1, 1)),   # start date
        _entry("Food", 20, date(2024, 2, 1)),   # resolved end date
        _entry("Food", 40, date(2024, 2, 2)),   # one day late
        _entry("Food", 80, date(2023, 12, 31)), # one day early
    ])

    assert project(_budget(), ledger).current_spending == Decimal("30")


def test_project_category_match_is_case_sensitive():
    ledger = InMemoryLedger([_entry("food", 75, date(2024, 1, 10))])

    projection = project(_budget(category="Food"), ledger)

    assert projection.current_spending == Decimal("0")
    assert projection.remaining == Decimal("200")


def test_project_ignores_income():
    ledger = InMemoryLedger([_entry("Food", 500, date(2024, 1, 10), type=TransactionType.INCOME)])

    assert project(_budget(), ledger).current_spending == Decimal("0")


def test_project_zero_amount_never_divides():
    ledger = InMemoryLedger([_entry("Food", 50, date(2024, 1, 10))])

    projection = project(_budget(amount=0), ledger)

    assert projection.percentage_used == Decimal("0")
    assert projection.remaining == Decimal("-50")


def test_project_over_budget_goes_negative():
    ledger = InMemoryLedger([_entry("Food", 50, date(2024, 1, 10))])

    projection = project(_budget(amount=40), ledger)

    assert projection.remaining == Decimal("-10")
    assert projection.percentage_used == Decimal("125.00")


def test_project_uses_explicit_end_date():
    ledger = InMemoryLedger([
        _entry("Food", 10, date(2024, 1, 5)),
        _entry("Food", 20, date(2024, 1, 20)),
    ])

    projection = project(_budget(end=date(2024, 1, 10)), ledger)

    assert projection.current_spending == Decimal("10")


def test_project_is_idempotent(food_ledger):
    budget = _budget()
    assert project(budget, food_ledger) == project(budget, food_ledger)


def test_remaining_is_exact_with_cents():
    ledger = InMemoryLedger([
        _entry("Food", "0.10", date(2024, 1, 2)),
        _entry("Food", "0.20", date(2024, 1, 3)),
    ])

    projection = project(_budget(amount="1.00"), ledger)

    assert projection.current_spending == Decimal("0.30")
    assert projection.remaining == Decimal("0.70")


@pytest.mark.parametrize("spending, amount, expected", [
    ("1", "3", "33.33"),
    ("2", "3", "66.67"),
    ("1", "800", "0.13"),  # 0.125 rounds half up
    ("0", "100", "0.00"),
    ("5", "0", "0"),
])
def test_percentage_used_rounding(spending, amount, expected):
    assert percentage_used(Decimal(spending), Decimal(amount)) == Decimal(expected)


def test_percentage_used_handles_very_large_ratios():
    assert percentage_used(Decimal("1E+26"), Decimal("0.01")) == Decimal("1E+30")
    assert percentage_used(Decimal("1E+26"), Decimal("0.01")).as_tuple().exponent == -2


def test_project_with_huge_spending_against_tiny_cap():
    ledger = InMemoryLedger([_entry("Food", "1E+26", date(2024, 1, 10))])

    projection = project(_budget(amount="0.01"), ledger)

    assert projection.current_spending == Decimal("1E+26")
    assert projection.percentage_used == Decimal("1E+30")
