from sqlalchemy import Column, String, Numeric, Date, DateTime, Text, Enum as SqEnum
from datetime import datetime, date
import uuid
from finance_tracker.database import Base
from finance_tracker.core.entities import TransactionType

def _uuid():
    return str(uuid.uuid4())

class Transaction(Base):
    __tablename__ = "transactions"
    id = Column(String(36), primary_key=True, default=_uuid)
    owner_id = Column(String, nullable=False, index=True)
    amount = Column(Numeric(10, 2), nullable=False)
    category = Column(String, nullable=False, index=True)
    date = Column(Date, default=date.today, nullable=False)
    type = Column(SqEnum(TransactionType, values_callable=lambda e: [m.value for m in e]), nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

class Category(Base):
    __tablename__ = "categories"
    id = Column(String(36), primary_key=True, default=_uuid)
    name = Column(String, unique=True, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
