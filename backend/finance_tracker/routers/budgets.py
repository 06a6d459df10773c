from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import Optional
from finance_tracker.database import get_db
from finance_tracker.deps import get_budget_store, get_owner_id, require_owner_id
from finance_tracker.core.exceptions import NotFoundError, StoreClosedError
from finance_tracker.schemas import Budget, BudgetCreate, BudgetUpdate, BudgetWithSpending
from finance_tracker.services.budget_store import BudgetStore
from finance_tracker.services.transaction_ledger import SqlTransactionLedger

router = APIRouter(tags=["budgets"])

# --- Endpoints ---

@router.post("/", response_model=Budget, status_code=201)
def create_budget(
    payload: BudgetCreate,
    store: BudgetStore = Depends(get_budget_store),
    owner_id: str = Depends(require_owner_id)
):
    """
    Create a budget for the authenticated user.
    Start date defaults to today when omitted.
    """
    try:
        return store.create(payload.model_dump(), owner_id)
    except StoreClosedError as e:
        raise HTTPException(status_code=503, detail=str(e))

@router.get("/")
def get_budgets(
    with_spending: bool = Query(False, alias="withSpending"),
    db: Session = Depends(get_db),
    store: BudgetStore = Depends(get_budget_store),
    owner_id: Optional[str] = Depends(get_owner_id)
):
    """
    List the user's budgets, optionally with current spending figures.
    Anonymous requests get an empty list.
    """
    try:
        if with_spending:
            projections = store.list_with_spending(owner_id, SqlTransactionLedger(db, owner_id))
            return [BudgetWithSpending.model_validate(p) for p in projections]
        return [Budget.model_validate(b) for b in store.list(owner_id)]
    except StoreClosedError as e:
        raise HTTPException(status_code=503, detail=str(e))

@router.get("/{budget_id}")
def get_budget(
    budget_id: str,
    with_spending: bool = Query(False, alias="withSpending"),
    db: Session = Depends(get_db),
    store: BudgetStore = Depends(get_budget_store),
    owner_id: Optional[str] = Depends(get_owner_id)
):
    try:
        if with_spending:
            projection = store.get_with_spending(budget_id, owner_id, SqlTransactionLedger(db, owner_id))
            return BudgetWithSpending.model_validate(projection)
        return Budget.model_validate(store.get(budget_id, owner_id))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StoreClosedError as e:
        raise HTTPException(status_code=503, detail=str(e))

@router.patch("/{budget_id}", response_model=Budget)
def update_budget(
    budget_id: str,
    payload: BudgetUpdate,
    store: BudgetStore = Depends(get_budget_store),
    owner_id: Optional[str] = Depends(get_owner_id)
):
    """
    Partial update: only the fields present in the body change.
    """
    try:
        return store.update(budget_id, owner_id, payload.model_dump(exclude_unset=True))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StoreClosedError as e:
        raise HTTPException(status_code=503, detail=str(e))

@router.delete("/{budget_id}")
def delete_budget(
    budget_id: str,
    store: BudgetStore = Depends(get_budget_store),
    owner_id: Optional[str] = Depends(get_owner_id)
):
    try:
        store.delete(budget_id, owner_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StoreClosedError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return {"message": "Budget deleted successfully"}
