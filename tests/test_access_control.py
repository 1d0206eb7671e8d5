from __future__ import annotations

from datetime import timedelta

import pytest

from jobposts.errors import ActionError
from jobposts.services.access_control import RequestContext, require_user
from jobposts.utils.jwt_handler import create_access_token, subject_from_token


ALL_ACTIONS = [
    ("createJobPost", {"title": "Eng", "rawText": "desc"}),
    ("updateJobPost", {"id": "p1"}),
    ("listJobPosts", {}),
    ("deleteJobPost", {"id": "p1"}),
    ("saveSkill", {"jobPostId": "p1", "name": "Go"}),
    ("deleteSkill", {"id": "s1", "jobPostId": "p1"}),
]


def test_require_user_returns_identity() -> None:
    assert require_user(RequestContext(user_id="user-1")) == "user-1"


@pytest.mark.parametrize("context", [None, RequestContext(), RequestContext(user_id="")])
def test_require_user_fails_closed(context) -> None:
    with pytest.raises(ActionError) as excinfo:
        require_user(context)
    assert excinfo.value.code == "UNAUTHORIZED"
    assert excinfo.value.status_code == 401
    assert excinfo.value.message == "You must be signed in to perform this action."


def test_require_user_reports_token_error() -> None:
    with pytest.raises(ActionError) as excinfo:
        require_user(RequestContext(auth_error="Token expired"))
    assert excinfo.value.message == "Token expired"


def test_subject_from_token_round_trip() -> None:
    token = create_access_token({"sub": "user-42"}, timedelta(minutes=1))
    assert subject_from_token(token) == "user-42"


def test_subject_from_token_requires_subject() -> None:
    token = create_access_token({"scope": "none"}, timedelta(minutes=1))
    with pytest.raises(ActionError) as excinfo:
        subject_from_token(token)
    assert excinfo.value.message == "Invalid token payload"


@pytest.mark.parametrize("name, payload", ALL_ACTIONS)
def test_every_action_requires_authentication(call_action, name, payload) -> None:
    r = call_action(name, payload, user=None)
    assert r.status_code == 401
    assert r.json()["detail"]["code"] == "UNAUTHORIZED"


def test_expired_token_is_unauthorized(client) -> None:
    token = create_access_token({"sub": "user-1"}, timedelta(minutes=-1))
    r = client.post("/api/_actions/listJobPosts", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401
    assert r.json()["detail"] == {"code": "UNAUTHORIZED", "message": "Token expired"}


def test_tampered_token_is_unauthorized(client) -> None:
    token = create_access_token({"sub": "user-1"}, timedelta(minutes=1))
    r = client.post("/api/_actions/listJobPosts", headers={"Authorization": f"Bearer {token}x"})
    assert r.status_code == 401
    assert r.json()["detail"]["message"] == "Invalid token"


def test_validation_runs_before_authentication(call_action) -> None:
    r = call_action("createJobPost", {"title": ""}, user=None)
    assert r.status_code == 400
    assert r.json()["detail"]["code"] == "BAD_REQUEST"


def test_oversized_token_subject_is_rejected() -> None:
    token = create_access_token({"sub": "u" * 256}, timedelta(minutes=1))
    with pytest.raises(ActionError) as excinfo:
        subject_from_token(token)
    assert excinfo.value.message == "Invalid token payload"
