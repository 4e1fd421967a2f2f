"""FastAPI application entry point."""
import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

from app.config import settings
from app.database import Base, engine
from app.errors import EventPlannerError
from app.logging_config import setup_logging

# Import routers
from app.routers import users, events, rsvps, comments

# Import all models so Base.metadata knows about them
from app import models  # noqa: F401

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Collaborative Event Planner",
    description="Create events, invite users, collect RSVPs and discuss in comment threads",
    version="0.1.0",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(users.router, prefix="/api/users", tags=["Users"])
app.include_router(events.router, prefix="/api/events", tags=["Events"])
app.include_router(rsvps.router, prefix="/api/events", tags=["RSVPs"])
app.include_router(comments.router, prefix="/api/events", tags=["Comments"])


@app.exception_handler(EventPlannerError)
async def event_planner_error_handler(request: Request, exc: EventPlannerError):
    return JSONResponse({"detail": exc.message}, status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies are client errors like any other validation failure."""
    return JSONResponse({"detail": jsonable_errors(exc)}, status_code=status.HTTP_400_BAD_REQUEST)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return JSONResponse({"detail": "Server error"}, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    """Validation errors without the raw input values or exception objects."""
    return [
        {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
        for error in exc.errors()
    ]


@app.on_event("startup")
def on_startup():
    """Create database tables on startup (for SQLite dev mode)."""
    if settings.DATABASE_URL.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)


@app.get("/", response_class=PlainTextResponse)
def root():
    return "Collaborative Event Planner API is running"


@app.get("/api/health")
def health_check():
    return {"status": "ok"}
