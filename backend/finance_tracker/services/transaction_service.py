"""
Transaction ledger persistence: CRUD, filtered listing and summary figures.
"""
import logging
import uuid
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional
from sqlalchemy import or_
from sqlalchemy.orm import Session
from finance_tracker.core.entities import TransactionType
from finance_tracker.core.exceptions import NotFoundError
from finance_tracker.models.finance import Transaction

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("amount", "category", "date", "type", "description")


def create_transaction(db: Session, data: Dict[str, Any], owner_id: str) -> Transaction:
    transaction = Transaction(
        id=str(uuid.uuid4()),
        owner_id=owner_id,
        amount=Decimal(str(data["amount"])),
        category=data["category"],
        type=data["type"],
        date=data["date"],
        description=data.get("description") or None,
    )
    db.add(transaction)
    db.commit()
    db.refresh(transaction)
    logger.info("Created %s transaction %s for owner %s", transaction.type.value, transaction.id, owner_id)
    return transaction


def _filtered_query(db: Session, owner_id: str, type: Optional[TransactionType] = None,
                    category: Optional[str] = None, start_date: Optional[date] = None,
                    end_date: Optional[date] = None, search: Optional[str] = None):
    query = db.query(Transaction).filter(Transaction.owner_id == owner_id)

    if type:
        query = query.filter(Transaction.type == type)
    if category:
        query = query.filter(Transaction.category == category)
    if start_date:
        query = query.filter(Transaction.date >= start_date)
    if end_date:
        query = query.filter(Transaction.date <= end_date)
    if search:
        pattern = f"%{search}%"
        query = query.filter(or_(
            Transaction.category.ilike(pattern),
            Transaction.description.ilike(pattern),
        ))
    return query


def list_transactions(db: Session, owner_id: Optional[str], type: Optional[TransactionType] = None,
                      category: Optional[str] = None, start_date: Optional[date] = None,
                      end_date: Optional[date] = None, search: Optional[str] = None) -> List[Transaction]:
    if not owner_id:
        return []
    query = _filtered_query(db, owner_id, type=type, category=category,
                            start_date=start_date, end_date=end_date, search=search)
    return query.order_by(Transaction.date.desc(), Transaction.created_at.desc()).all()


def get_transaction(db: Session, transaction_id: str, owner_id: Optional[str]) -> Transaction:
    transaction = None
    if owner_id:
        transaction = db.query(Transaction).filter(
            Transaction.id == transaction_id,
            Transaction.owner_id == owner_id
        ).first()
    if not transaction:
        logger.warning("Transaction %s not found for owner %s", transaction_id, owner_id)
        raise NotFoundError("Transaction", transaction_id)
    return transaction


def update_transaction(db: Session, transaction_id: str, owner_id: Optional[str],
                       changes: Dict[str, Any]) -> Transaction:
    transaction = get_transaction(db, transaction_id, owner_id)

    for key, value in changes.items():
        if key not in UPDATABLE_FIELDS:
            continue
        if key == "description":
            transaction.description = value or None
            continue
        if value is None:
            continue
        if key == "amount":
            value = Decimal(str(value))
        setattr(transaction, key, value)

    transaction.updated_at = datetime.utcnow()
    db.commit()
    db.refresh(transaction)
    logger.info("Updated transaction %s fields=%s", transaction_id, sorted(changes))
    return transaction


def delete_transaction(db: Session, transaction_id: str, owner_id: Optional[str]) -> None:
    transaction = get_transaction(db, transaction_id, owner_id)
    db.delete(transaction)
    db.commit()
    logger.info("Deleted transaction %s", transaction_id)


def get_summary(db: Session, owner_id: Optional[str], start_date: Optional[date] = None,
                end_date: Optional[date] = None, type: Optional[TransactionType] = None) -> Dict[str, Any]:
    """
    Totals for the owner's transactions in the optional date window:
    - income, expenses and the resulting balance
    - per-category totals, largest first
    - per-month income/expenses keyed "YYYY-MM", oldest first
    """
    transactions: List[Transaction] = []
    if owner_id:
        transactions = _filtered_query(db, owner_id, type=type, start_date=start_date, end_date=end_date).all()

    total_income = Decimal("0")
    total_expenses = Decimal("0")
    by_category: Dict[str, Dict[str, Any]] = {}
    by_month: Dict[str, Dict[str, Decimal]] = {}

    for t in transactions:
        amount = Decimal(str(t.amount))
        is_income = TransactionType(t.type) == TransactionType.INCOME

        if is_income:
            total_income += amount
        else:
            total_expenses += amount

        cat = by_category.setdefault(t.category, {"total": Decimal("0"), "count": 0})
        cat["total"] += amount
        cat["count"] += 1

        month_key = t.date.strftime("%Y-%m")
        month = by_month.setdefault(month_key, {"income": Decimal("0"), "expenses": Decimal("0")})
        if is_income:
            month["income"] += amount
        else:
            month["expenses"] += amount

    return {
        "total_income": total_income,
        "total_expenses": total_expenses,
        "balance": total_income - total_expenses,
        "transaction_count": len(transactions),
        "by_category": sorted(
            ({"category": name, **data} for name, data in by_category.items()),
            key=lambda c: c["total"],
            reverse=True
        ),
        "by_month": [{"month": key, **by_month[key]} for key in sorted(by_month)],
    }
