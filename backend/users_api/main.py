import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from users_api.config import get_settings
from users_api.database import engine, init_db
from users_api.logging_config import setup_logging
from users_api.responses import bad_request
from users_api.routes import users
from users_api.routes.users import INVALID_REQUEST_MESSAGE

settings = get_settings()
setup_logging(settings.log_level)

logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(users.router, tags=["users"])


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    # Bodies FastAPI cannot parse (malformed JSON) never reach the handlers
    logger.debug("Rejected request to %s: %s", request.url.path, exc.errors())
    return bad_request(INVALID_REQUEST_MESSAGE)


@app.on_event("startup")
def on_startup():
    try:
        with engine.connect():
            pass
        if settings.auto_create_tables:
            init_db()
        logger.info("Database connection established")
    except SQLAlchemyError as e:
        logger.error("Database connection failed: %s", e)


@app.get("/health")
def health_check():
    """Liveness probe"""
    return {"status": "healthy", "app_name": settings.app_name, "environment": settings.app_env}
