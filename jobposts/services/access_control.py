from __future__ import annotations

import logging
from dataclasses import dataclass

from jobposts.errors import unauthorized


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestContext:
    """Per-request caller identity, resolved once by the transport layer."""

    user_id: str | None = None
    # Why token resolution failed, if it did. Reported by the gate, not earlier.
    auth_error: str | None = None


def require_user(context: RequestContext | None) -> str:
    user_id = context.user_id if context is not None else None
    if not user_id:
        reason = context.auth_error if context is not None else None
        logger.info("access.denied reason=%s", reason or "no_session")
        if reason:
            raise unauthorized(reason)
        raise unauthorized()
    return user_id
