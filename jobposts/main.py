# main.py
from pathlib import Path

from dotenv import load_dotenv

# Ensure repo-root .env is loaded for the running server process.
load_dotenv(dotenv_path=Path(__file__).resolve().parents[1] / ".env", override=False)

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from jobposts.config import settings
from jobposts.config import build_sqlalchemy_db_url
from jobposts.database import Base, engine
from jobposts.errors import BAD_REQUEST, ActionError
from jobposts.models import JobPost, JobSkill  # noqa: F401  # register tables on Base.metadata
from jobposts.routers.actions import router as actions_router
from jobposts.routers.health import router as health_router


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed bodies (e.g. invalid JSON) share the action validation error shape.
    issues = [
        {"path": ".".join(str(part) for part in err.get("loc", ())), "message": err.get("msg", "")}
        for err in exc.errors()
    ]
    error = ActionError(BAD_REQUEST, "Invalid input.", issues=jsonable_encoder(issues))
    return JSONResponse(status_code=error.status_code, content={"detail": error.detail})


def create_app() -> FastAPI:
    application = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_exception_handler(RequestValidationError, _request_validation_handler)

    # Health endpoints (do not depend on API_PREFIX)
    application.include_router(health_router)
    application.include_router(actions_router, prefix=settings.api_prefix)

    # Avoid accidental schema changes in shared databases.
    # For local/test sqlite usage, auto-create ORM tables is still convenient.
    db_url = build_sqlalchemy_db_url(settings)
    if db_url.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)
    return application


app = create_app()
