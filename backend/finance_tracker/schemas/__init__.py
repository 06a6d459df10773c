from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
import datetime
from decimal import Decimal
from typing import List, Optional
from finance_tracker.core.entities import TimePeriod, TransactionType


class ApiModel(BaseModel):
    # camelCase on the wire, snake_case in Python
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


# --- BUDGET SCHEMAS ---
class BudgetCreate(ApiModel):
    category: str = Field(min_length=1)
    amount: Decimal = Field(ge=0, max_digits=12, decimal_places=2)
    time_period: TimePeriod
    start_date: Optional[datetime.date] = None
    end_date: Optional[datetime.date] = None

class BudgetUpdate(ApiModel):
    category: Optional[str] = Field(default=None, min_length=1)
    amount: Optional[Decimal] = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    time_period: Optional[TimePeriod] = None
    start_date: Optional[datetime.date] = None
    end_date: Optional[datetime.date] = None

class Budget(ApiModel):
    id: str
    owner_id: str
    category: str
    amount: float
    time_period: TimePeriod
    start_date: datetime.date
    end_date: Optional[datetime.date] = None
    created_at: datetime.datetime
    updated_at: datetime.datetime

class BudgetWithSpending(Budget):
    current_spending: float
    remaining: float
    percentage_used: float


# --- TRANSACTION SCHEMAS ---
class TransactionCreate(ApiModel):
    amount: Decimal = Field(ge=Decimal("0.01"), max_digits=10, decimal_places=2)
    category: str = Field(min_length=1)
    date: datetime.date
    type: TransactionType
    description: Optional[str] = None

class TransactionUpdate(ApiModel):
    amount: Optional[Decimal] = Field(default=None, ge=Decimal("0.01"), max_digits=10, decimal_places=2)
    category: Optional[str] = Field(default=None, min_length=1)
    date: Optional[datetime.date] = None
    type: Optional[TransactionType] = None
    description: Optional[str] = None

class Transaction(ApiModel):
    id: str
    owner_id: str
    amount: float
    category: str
    date: datetime.date
    type: TransactionType
    description: Optional[str] = None
    created_at: datetime.datetime
    updated_at: datetime.datetime


# --- SUMMARY SCHEMAS ---
class CategoryTotal(ApiModel):
    category: str
    total: float
    count: int

class MonthTotal(ApiModel):
    month: str
    income: float
    expenses: float

class TransactionSummary(ApiModel):
    total_income: float
    total_expenses: float
    balance: float
    transaction_count: int
    by_category: List[CategoryTotal]
    by_month: List[MonthTotal]


# --- CATEGORY SCHEMAS ---
class CategoryCreate(ApiModel):
    name: str = Field(min_length=1)

class Category(ApiModel):
    id: str
    name: str
    created_at: datetime.datetime
    updated_at: datetime.datetime
