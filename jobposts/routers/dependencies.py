# dependencies.py
import logging

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jobposts.errors import ActionError
from jobposts.services.access_control import RequestContext
from jobposts.utils.jwt_handler import subject_from_token


logger = logging.getLogger(__name__)

# auto_error=False: a missing token is reported by the gate, after input validation.
bearer_scheme = HTTPBearer(auto_error=False)


def get_request_context(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> RequestContext:
    if credentials is None or not credentials.credentials:
        return RequestContext()
    try:
        user_id = subject_from_token(credentials.credentials)
    except ActionError as exc:
        logger.info("auth.token_rejected reason=%s", exc.message)
        return RequestContext(auth_error=exc.message)
    return RequestContext(user_id=user_id)
