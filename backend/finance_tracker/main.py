from fastapi import FastAPI
from contextlib import asynccontextmanager
import logging
from dotenv import load_dotenv

# Load env vars before anything else
load_dotenv()

from finance_tracker.core.config import settings
from finance_tracker.database import Base, SessionLocal
from fastapi.middleware.cors import CORSMiddleware
from finance_tracker.models import budget, finance  # noqa: F401  (registers tables)
from finance_tracker.routers import budgets, categories, transactions
from finance_tracker.services.budget_store import BudgetStore

logger = logging.getLogger(__name__)


def create_app(session_factory=None) -> FastAPI:
    logging.basicConfig(level=settings.LOG_LEVEL)
    session_factory = session_factory or SessionLocal

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Create tables on startup
        Base.metadata.create_all(bind=session_factory.kw["bind"])
        app.state.budget_store = BudgetStore(session_factory)
        logger.info("--- %s READY ---", settings.PROJECT_NAME)
        try:
            yield
        finally:
            app.state.budget_store.close()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        openapi_url=f"{settings.API_V1_STR}/openapi.json",
        lifespan=lifespan
    )
    app.state.session_factory = session_factory

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(budgets.router, prefix=f"{settings.API_V1_STR}/budgets", tags=["budgets"])
    app.include_router(transactions.router, prefix=f"{settings.API_V1_STR}/transactions", tags=["transactions"])
    app.include_router(categories.router, prefix=f"{settings.API_V1_STR}/categories", tags=["categories"])

    @app.get("/health")
    def health():
        return {
            "status": "ok",
            "service": settings.PROJECT_NAME,
            "database": session_factory.kw["bind"].dialect.name
        }

    return app


app = create_app()
