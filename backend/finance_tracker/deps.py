from typing import Optional
from fastapi import Depends, Header, HTTPException, Request
from finance_tracker.services.budget_store import BudgetStore


def get_owner_id(x_user_id: Optional[str] = Header(None, alias="X-User-Id")) -> Optional[str]:
    """
    Id of the user the request acts for, set by the auth layer in front of the API.
    Missing or blank means anonymous.
    """
    if x_user_id is None or not x_user_id.strip():
        return None
    return x_user_id.strip()


def require_owner_id(owner_id: Optional[str] = Depends(get_owner_id)) -> str:
    if not owner_id:
        raise HTTPException(status_code=401, detail="Authentication required (X-User-Id)")
    return owner_id


def get_budget_store(request: Request) -> BudgetStore:
    return request.app.state.budget_store
