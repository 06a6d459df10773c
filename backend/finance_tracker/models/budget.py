from sqlalchemy import Column, String, Numeric, Date, DateTime, Enum as SqEnum
from datetime import datetime
import uuid
from finance_tracker.database import Base
from finance_tracker.core.entities import TimePeriod

class Budget(Base):
    """Spending cap for one category over a recurring or fixed period"""
    __tablename__ = "budgets"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    owner_id = Column(String, nullable=False, index=True)
    category = Column(String, nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)  # Cap for one period
    time_period = Column(SqEnum(TimePeriod, values_callable=lambda e: [m.value for m in e]), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=True)  # Overrides the period-derived end
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow)
