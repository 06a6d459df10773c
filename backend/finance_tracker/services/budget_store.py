"""
Budget persistence, scoped per owner.

The store is built once per application (see ``create_app``) and closed on
shutdown. Every read-modify-write runs under the store lock and inside a
single database transaction, so two concurrent updates of the same budget
cannot lose each other's changes.
"""
import logging
import threading
import uuid
from contextlib import contextmanager
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session, sessionmaker
from finance_tracker.core.budget_calculator import project
from finance_tracker.core.entities import BudgetProjection, BudgetRecord
from finance_tracker.core.exceptions import NotFoundError, StoreClosedError
from finance_tracker.core.ledger import TransactionLedger
from finance_tracker.models.budget import Budget

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")

UPDATABLE_FIELDS = ("category", "amount", "time_period", "start_date", "end_date")


def to_cents(value) -> Decimal:
    """Amount as stored by the Numeric(12, 2) column."""
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)


class BudgetStore:
    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory
        self._lock = threading.Lock()
        self._closed = False

    def close(self) -> None:
        with self._lock:
            self._closed = True
        logger.info("Budget store closed")

    @property
    def closed(self) -> bool:
        return self._closed

    @contextmanager
    def _session(self):
        if self._closed:
            raise StoreClosedError("Budget store is closed")
        db: Session = self._session_factory()
        try:
            yield db
        finally:
            db.close()

    @contextmanager
    def _transaction(self):
        with self._lock, self._session() as db:
            try:
                yield db
                db.commit()
            except Exception:
                db.rollback()
                raise

    @staticmethod
    def _find(db: Session, budget_id: str, owner_id: Optional[str]) -> Budget:
        budget = None
        if owner_id:
            budget = db.query(Budget).filter(Budget.id == budget_id, Budget.owner_id == owner_id).first()
        if budget is None:
            logger.warning("Budget %s not found for owner %s", budget_id, owner_id)
            raise NotFoundError("Budget", budget_id)
        return budget

    # --- CRUD ---

    def create(self, data: Dict[str, Any], owner_id: str) -> BudgetRecord:
        now = datetime.utcnow()
        with self._transaction() as db:
            budget = Budget(
                id=str(uuid.uuid4()),
                owner_id=owner_id,
                category=data["category"],
                amount=to_cents(data["amount"]),
                time_period=data["time_period"],
                start_date=data.get("start_date") or now.date(),
                end_date=data.get("end_date"),
                created_at=now,
                updated_at=now,
            )
            db.add(budget)
            db.flush()
            record = BudgetRecord.from_model(budget)
        logger.info("Created budget %s (%s) for owner %s", record.id, record.category, owner_id)
        return record

    def list(self, owner_id: Optional[str]) -> List[BudgetRecord]:
        # No owner means no rows, never an unscoped listing
        if not owner_id:
            return []
        with self._session() as db:
            budgets = db.query(Budget).filter(Budget.owner_id == owner_id).order_by(Budget.created_at).all()
            return [BudgetRecord.from_model(b) for b in budgets]

    def get(self, budget_id: str, owner_id: Optional[str]) -> BudgetRecord:
        with self._session() as db:
            return BudgetRecord.from_model(self._find(db, budget_id, owner_id))

    def update(self, budget_id: str, owner_id: Optional[str], changes: Dict[str, Any]) -> BudgetRecord:
        with self._transaction() as db:
            budget = self._find(db, budget_id, owner_id)
            for key, value in changes.items():
                if key not in UPDATABLE_FIELDS:
                    continue
                # Only end_date may be cleared; the rest are required columns
                if value is None and key != "end_date":
                    continue
                if key == "amount" and value is not None:
                    value = to_cents(value)
                setattr(budget, key, value)
            budget.updated_at = datetime.utcnow()
            db.flush()
            record = BudgetRecord.from_model(budget)
        logger.info("Updated budget %s fields=%s", budget_id, sorted(changes))
        return record

    def delete(self, budget_id: str, owner_id: Optional[str]) -> None:
        with self._transaction() as db:
            budget = self._find(db, budget_id, owner_id)
            db.delete(budget)
        logger.info("Deleted budget %s", budget_id)

    # --- Projections (recomputed on every call) ---

    def list_with_spending(self, owner_id: Optional[str], ledger: TransactionLedger) -> List[BudgetProjection]:
        return [project(budget, ledger) for budget in self.list(owner_id)]

    def get_with_spending(self, budget_id: str, owner_id: Optional[str],
                          ledger: TransactionLedger) -> BudgetProjection:
        return project(self.get(budget_id, owner_id), ledger)
