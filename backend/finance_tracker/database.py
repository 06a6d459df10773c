from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from fastapi import Request
from finance_tracker.core.config import settings
import os


def normalize_database_url(db_url: str) -> str:
    # Some hosts still hand out postgres://, SQLAlchemy only accepts postgresql://
    if db_url.startswith("postgres://"):
        db_url = db_url.replace("postgres://", "postgresql://", 1)

    # Relative SQLite paths are resolved against backend/
    if db_url.startswith("sqlite:///./"):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        backend_dir = os.path.dirname(base_dir)
        db_file = db_url.replace("sqlite:///./", "")
        db_url = f"sqlite:///{os.path.join(backend_dir, db_file)}"

    return db_url


def build_engine(db_url: str, **kwargs):
    db_url = normalize_database_url(db_url)
    if db_url.startswith("sqlite"):
        connect_args = kwargs.pop("connect_args", {})
        connect_args.setdefault("check_same_thread", False)
        return create_engine(db_url, connect_args=connect_args, **kwargs)
    return create_engine(db_url, pool_pre_ping=True, **kwargs)


engine = build_engine(settings.FINANCE_DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

def get_db(request: Request):
    """Yields a session from the factory the running app was built with."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
