"""
Budget spending calculation.

Given a budget (category, cap, period kind, start and optional end date) and a
transaction ledger, works out how much has been spent in the active period
window, what is left and how much of the cap is used.
"""
from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Optional
from dateutil.relativedelta import relativedelta
from finance_tracker.core.entities import BudgetProjection, BudgetRecord, TimePeriod
from finance_tracker.core.ledger import TransactionLedger

# One unit of each period kind
PERIOD_STEPS = {
    TimePeriod.DAILY: timedelta(days=1),
    TimePeriod.WEEKLY: timedelta(days=7),
    TimePeriod.MONTHLY: relativedelta(months=1),
    TimePeriod.YEARLY: relativedelta(years=1),
}

CENT = Decimal("0.01")
HUNDRED = Decimal("100")


def resolve_end(start: date, period: TimePeriod, explicit_end: Optional[date] = None) -> date:
    """
    End date of the period starting at ``start``.

    An explicit end always wins. Otherwise one unit of ``period`` is added;
    month and year steps clamp to the last day of the target month
    (2024-01-31 + 1 month -> 2024-02-29).
    """
    if explicit_end is not None:
        return explicit_end
    return start + PERIOD_STEPS[TimePeriod(period)]


def sum_expenses(ledger: TransactionLedger, category: str, start: date, end: date) -> Decimal:
    """Sum of absolute expense amounts for ``category`` within ``[start, end]``."""
    total = Decimal("0")
    for entry in ledger.find_expenses(category, start, end):
        total += abs(Decimal(entry.amount))
    return total


def round_percentage(value: Decimal) -> Decimal:
    # quantize needs room for every integer digit plus the two decimals
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 4)
        return value.quantize(CENT, rounding=ROUND_HALF_UP)


def percentage_used(spending: Decimal, amount: Decimal) -> Decimal:
    if amount <= 0:
        return Decimal("0")
    return round_percentage(spending / amount * HUNDRED)


def project(budget: BudgetRecord, ledger: TransactionLedger) -> BudgetProjection:
    end = resolve_end(budget.start_date, budget.time_period, budget.end_date)
    spending = sum_expenses(ledger, budget.category, budget.start_date, end)
    amount = Decimal(budget.amount)

    return BudgetProjection.of(
        budget,
        current_spending=spending,
        remaining=amount - spending,
        percentage_used=percentage_used(spending, amount),
    )
