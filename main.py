"""Application entry point for the NutriPlan dashboard.

Defines the FastAPI app, middleware and exception handlers, and includes
the API and page routers. The `lifespan` handler creates the tables on
startup.
"""

from fastapi import FastAPI, Depends, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from contextlib import asynccontextmanager

from database import init_db
from database.deps import get_db_read
from core.exceptions import DatabaseError
from core.logger import get_logger
from core.error_handlers import register_exception_handlers
from api.webhooks import router as webhooks_router
from api.checkout import router as checkout_router
from api.meal_plans import router as meal_plans_router
from api.pages import router as pages_router

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Fastapi lifespan context: initialize resources before serving requests."""
    init_db()
    yield


app = FastAPI(title="NutriPlan Dashboard API", version="1.0.0", lifespan=lifespan)


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log incoming requests and their responses."""
    logger.info("%s %s", request.method, request.url.path)
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("Request error: %s %s", request.method, request.url.path)
        raise
    logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
    return response


@app.get("/health")
def health(db: Session = Depends(get_db_read)):
    """Return basic health status and database connectivity.

    Raises:
        DatabaseError: If database connection fails.
    """
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.exception("Health check failed")
        raise DatabaseError("Database health check failed", details=str(e))
    return {"status": "healthy", "database": "connected"}


app.include_router(webhooks_router)
app.include_router(checkout_router)
app.include_router(meal_plans_router)
app.include_router(pages_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
