from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from typing import List, Optional
from datetime import date
import logging
from finance_tracker.database import get_db
from finance_tracker.deps import get_owner_id, require_owner_id
from finance_tracker.core.entities import TransactionType
from finance_tracker.core.exceptions import NotFoundError
from finance_tracker.schemas import Transaction, TransactionCreate, TransactionSummary, TransactionUpdate
from finance_tracker.services import transaction_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["transactions"])

# --- Endpoints ---

@router.post("/", response_model=Transaction, status_code=201)
def create_transaction(
    payload: TransactionCreate,
    db: Session = Depends(get_db),
    owner_id: str = Depends(require_owner_id)
):
    """
    Record an income or expense for the authenticated user.
    """
    try:
        return transaction_service.create_transaction(db, payload.model_dump(), owner_id)
    except SQLAlchemyError as e:
        logger.exception("Error creating transaction")
        db.rollback()
        raise HTTPException(status_code=500, detail=str(e))

@router.get("/", response_model=List[Transaction])
def get_transactions(
    type: Optional[TransactionType] = None,
    category: Optional[str] = None,
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    search: Optional[str] = None,
    db: Session = Depends(get_db),
    owner_id: Optional[str] = Depends(get_owner_id)
):
    """
    List the user's transactions, newest first. All filters are optional and combine.
    """
    return transaction_service.list_transactions(
        db, owner_id,
        type=type,
        category=category,
        start_date=start_date,
        end_date=end_date,
        search=search
    )

@router.get("/summary", response_model=TransactionSummary)
def get_transactions_summary(
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    type: Optional[TransactionType] = None,
    db: Session = Depends(get_db),
    owner_id: Optional[str] = Depends(get_owner_id)
):
    """
    Income vs expenses totals, grouped by category and by month.
    """
    return transaction_service.get_summary(db, owner_id, start_date=start_date, end_date=end_date, type=type)

@router.get("/{transaction_id}", response_model=Transaction)
def get_transaction(
    transaction_id: str,
    db: Session = Depends(get_db),
    owner_id: Optional[str] = Depends(get_owner_id)
):
    try:
        return transaction_service.get_transaction(db, transaction_id, owner_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.put("/{transaction_id}", response_model=Transaction)
def update_transaction(
    transaction_id: str,
    payload: TransactionUpdate,
    db: Session = Depends(get_db),
    owner_id: Optional[str] = Depends(get_owner_id)
):
    try:
        return transaction_service.update_transaction(
            db, transaction_id, owner_id, payload.model_dump(exclude_unset=True)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except SQLAlchemyError as e:
        logger.exception("Error updating transaction %s", transaction_id)
        db.rollback()
        raise HTTPException(status_code=500, detail=str(e))

@router.delete("/{transaction_id}")
def delete_transaction(
    transaction_id: str,
    db: Session = Depends(get_db),
    owner_id: Optional[str] = Depends(get_owner_id)
):
    try:
        transaction_service.delete_transaction(db, transaction_id, owner_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except SQLAlchemyError as e:
        logger.exception("Error deleting transaction %s", transaction_id)
        db.rollback()
        raise HTTPException(status_code=500, detail=str(e))
    return {"message": "Transaction deleted successfully"}
