from dataclasses import dataclass, asdict
from datetime import date, datetime
from decimal import Decimal
from typing import Optional
import enum

class TimePeriod(str, enum.Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"

class TransactionType(str, enum.Enum):
    INCOME = "income"
    EXPENSE = "expense"


@dataclass(frozen=True)
class LedgerEntry:
    """One transaction as seen by the spending calculator."""
    category: str
    amount: Decimal
    date: date
    type: TransactionType


@dataclass
class BudgetRecord:
    """Detached snapshot of a stored budget."""
    id: str
    owner_id: str
    category: str
    amount: Decimal
    time_period: TimePeriod
    start_date: date
    end_date: Optional[date] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_model(cls, budget) -> "BudgetRecord":
        return cls(
            id=budget.id,
            owner_id=budget.owner_id,
            category=budget.category,
            amount=Decimal(str(budget.amount)),
            time_period=TimePeriod(budget.time_period),
            start_date=budget.start_date,
            end_date=budget.end_date,
            created_at=budget.created_at,
            updated_at=budget.updated_at,
        )


@dataclass
class BudgetProjection(BudgetRecord):
    current_spending: Decimal = Decimal("0")
    remaining: Decimal = Decimal("0")
    percentage_used: Decimal = Decimal("0")

    @classmethod
    def of(cls, budget: BudgetRecord, current_spending: Decimal, remaining: Decimal,
           percentage_used: Decimal) -> "BudgetProjection":
        return cls(
            **asdict(budget),
            current_spending=current_spending,
            remaining=remaining,
            percentage_used=percentage_used,
        )
