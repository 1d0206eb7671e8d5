# actions.py
from typing import Any

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from jobposts.database import get_db
from jobposts.routers.dependencies import get_request_context
from jobposts.services.access_control import RequestContext
from jobposts.services.actions import dispatch


router = APIRouter(prefix="/_actions", tags=["actions"])


@router.post("/{name}", summary="Run a named job post / skill action")
def run_action(
    name: str,
    payload: Any = Body(default=None),
    db: Session = Depends(get_db),
    context: RequestContext = Depends(get_request_context),
) -> dict[str, Any]:
    return dispatch(name, payload, context, db)
