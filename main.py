"""Application entry point for the Nutrition Log API.

Defines the FastAPI app, middleware and exception handlers, and includes
the API routers from the `api` package. The `lifespan` handler creates the
schema and loads any extra food catalog entries on startup.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.orm import Session

from core.config import settings
from core.error_handlers import register_exception_handlers
from core.exceptions import DatabaseError
from core.logger import get_logger
from database import init_db
from database.deps import get_db_read
from services.nutrition_estimator import nutrition_estimator
from api.auth import router as auth_router
from api.profiles import router as profiles_router
from api.meals import router as meals_router
from api.nutrition import router as nutrition_router

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize resources before serving requests."""
    init_db()
    if settings.food_catalog_csv:
        nutrition_estimator.load_csv(settings.food_catalog_csv)
    yield


app = FastAPI(title="Nutrition Log API", version="1.0.0", lifespan=lifespan)


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
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
        DatabaseError: If the database cannot be reached.
    """
    try:
        db.execute(text("SELECT 1"))
    except Exception as e:
        logger.exception("Health check failed")
        raise DatabaseError(f"Database health check failed: {e}", operation="health_check")
    return {"status": "healthy", "database": "connected"}


app.include_router(auth_router)
app.include_router(profiles_router)
app.include_router(meals_router)
app.include_router(nutrition_router)


if __name__ == "__main__":
    # Allow starting the app via `python ./main.py`
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
