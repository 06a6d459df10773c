from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List
from finance_tracker.database import get_db
from finance_tracker.core.exceptions import ConflictError, NotFoundError
from finance_tracker.schemas import Category, CategoryCreate
from finance_tracker.services import category_service

router = APIRouter(tags=["categories"])

@router.post("/", response_model=Category, status_code=201)
def create_category(payload: CategoryCreate, db: Session = Depends(get_db)):
    try:
        return category_service.create_category(db, payload.name)
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))

@router.get("/", response_model=List[Category])
def get_categories(db: Session = Depends(get_db)):
    return category_service.list_categories(db)

@router.get("/{category_id}", response_model=Category)
def get_category(category_id: str, db: Session = Depends(get_db)):
    try:
        return category_service.get_category(db, category_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
