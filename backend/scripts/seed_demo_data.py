"""
Seeds categories, transactions and budgets for a demo user and prints
each budget's current spending.
"""
import sys
import os
from datetime import date

# Add parent directory to path to allow importing finance_tracker
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from finance_tracker.database import Base, SessionLocal, engine
from finance_tracker.core.entities import TimePeriod, TransactionType
from finance_tracker.core.exceptions import ConflictError
from finance_tracker.models import budget, finance  # noqa: F401
from finance_tracker.services import category_service, transaction_service
from finance_tracker.services.budget_store import BudgetStore
from finance_tracker.services.transaction_ledger import SqlTransactionLedger

DEMO_OWNER = os.getenv("DEMO_OWNER_ID", "demo-user")

CATEGORIES = ["Food", "Transport", "Rent", "Salary", "Entertainment"]

TRANSACTIONS = [
    # (category, amount, type, date, description)
    ("Salary", 3000, TransactionType.INCOME, date(2024, 1, 1), "January salary"),
    ("Rent", 1200, TransactionType.EXPENSE, date(2024, 1, 2), "Flat"),
    ("Food", 50, TransactionType.EXPENSE, date(2024, 1, 10), "Groceries"),
    ("Food", 35.5, TransactionType.EXPENSE, date(2024, 1, 21), "Dinner out"),
    ("Transport", 60, TransactionType.EXPENSE, date(2024, 1, 5), "Monthly pass"),
    ("Food", 30, TransactionType.EXPENSE, date(2024, 2, 5), "Groceries"),
    ("Entertainment", 15, TransactionType.EXPENSE, date(2024, 1, 12), "Cinema"),
]

BUDGETS = [
    {"category": "Food", "amount": 200, "time_period": TimePeriod.MONTHLY, "start_date": date(2024, 1, 1)},
    {"category": "Transport", "amount": 50, "time_period": TimePeriod.MONTHLY, "start_date": date(2024, 1, 1)},
    {"category": "Entertainment", "amount": 100, "time_period": TimePeriod.WEEKLY, "start_date": date(2024, 1, 8)},
]


def seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    store = BudgetStore(SessionLocal)
    try:
        print(f"Seeding demo data for owner '{DEMO_OWNER}'...")

        for name in CATEGORIES:
            try:
                category_service.create_category(db, name)
                print(f"  + category {name}")
            except ConflictError:
                print(f"  = category {name} already exists")

        for category, amount, tx_type, tx_date, description in TRANSACTIONS:
            transaction_service.create_transaction(db, {
                "category": category,
                "amount": amount,
                "type": tx_type,
                "date": tx_date,
                "description": description,
            }, DEMO_OWNER)
        print(f"  + {len(TRANSACTIONS)} transactions")

        for data in BUDGETS:
            store.create(data, DEMO_OWNER)
        print(f"  + {len(BUDGETS)} budgets")

        print("\nBudget status:")
        ledger = SqlTransactionLedger(db, DEMO_OWNER)
        for p in store.list_with_spending(DEMO_OWNER, ledger):
            print(f"  {p.category:<15} {p.current_spending:>8} / {p.amount:>8}  "
                  f"remaining {p.remaining:>8}  ({p.percentage_used}%)")

    except Exception as e:
        print(f"Error while seeding: {e}")
        db.rollback()
        raise
    finally:
        store.close()
        db.close()


if __name__ == "__main__":
    seed()
