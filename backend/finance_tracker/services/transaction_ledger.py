from datetime import date
from decimal import Decimal
from typing import List, Optional
from sqlalchemy.orm import Session
from finance_tracker.core.entities import LedgerEntry, TransactionType
from finance_tracker.models.finance import Transaction


class SqlTransactionLedger:
    """TransactionLedger backed by the transactions table of one owner."""

    def __init__(self, db: Session, owner_id: Optional[str]):
        self.db = db
        self.owner_id = owner_id

    def find_expenses(self, category: str, start: date, end: date) -> List[LedgerEntry]:
        if not self.owner_id:
            return []

        rows = self.db.query(Transaction).filter(
            Transaction.owner_id == self.owner_id,
            Transaction.category == category,
            Transaction.type == TransactionType.EXPENSE,
            Transaction.date >= start,
            Transaction.date <= end,
        ).all()

        return [
            LedgerEntry(
                category=row.category,
                amount=Decimal(str(row.amount)),
                date=row.date,
                type=TransactionType(row.type),
            )
            for row in rows
        ]
