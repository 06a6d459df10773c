import logging
import uuid
from typing import List
from sqlalchemy.orm import Session
from finance_tracker.core.exceptions import ConflictError, NotFoundError
from finance_tracker.models.finance import Category

logger = logging.getLogger(__name__)


def create_category(db: Session, name: str) -> Category:
    """Creates a category; names are unique."""
    existing = db.query(Category).filter(Category.name == name).first()
    if existing:
        logger.warning("Category %r already exists", name)
        raise ConflictError(f'Category with name "{name}" already exists')

    category = Category(id=str(uuid.uuid4()), name=name)
    db.add(category)
    db.commit()
    db.refresh(category)
    logger.info("Created category %s (%s)", category.id, name)
    return category


def list_categories(db: Session) -> List[Category]:
    return db.query(Category).order_by(Category.name.asc()).all()


def get_category(db: Session, category_id: str) -> Category:
    category = db.query(Category).filter(Category.id == category_id).first()
    if not category:
        raise NotFoundError("Category", category_id)
    return category
