"""Named actions: validate input, resolve the caller, run the owner-scoped operation.

The order is fixed. Malformed input is rejected before identity is checked, and
identity is checked before any storage access.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from pydantic import BaseModel, ValidationError
from sqlalchemy.orm import Session

from jobposts.errors import BAD_REQUEST, ActionError, not_found
from jobposts.schemas.job_post import (
    JobPostCreate,
    JobPostDelete,
    JobPostListRequest,
    JobPostListResult,
    JobPostRead,
    JobPostResult,
    JobPostUpdate,
)
from jobposts.schemas.job_skill import JobSkillDelete, JobSkillRead, JobSkillResult, JobSkillSave
from jobposts.services import job_post_service, job_skill_service
from jobposts.services.access_control import RequestContext, require_user


@dataclass(frozen=True)
class Action:
    name: str
    input_model: type[BaseModel]
    handler: Callable[[Session, Any, str], BaseModel]


def _create_job_post(db: Session, data: JobPostCreate, user_id: str) -> JobPostResult:
    post = job_post_service.create_job_post(db, data, user_id)
    return JobPostResult(post=JobPostRead.model_validate(post))


def _update_job_post(db: Session, data: JobPostUpdate, user_id: str) -> JobPostResult:
    post = job_post_service.update_job_post(db, data, user_id)
    return JobPostResult(post=JobPostRead.model_validate(post))


def _list_job_posts(db: Session, data: JobPostListRequest, user_id: str) -> JobPostListResult:
    posts = job_post_service.list_job_posts(db, user_id)
    return JobPostListResult(posts=[JobPostRead.model_validate(p) for p in posts])


def _delete_job_post(db: Session, data: JobPostDelete, user_id: str) -> JobPostResult:
    return JobPostResult(post=job_post_service.delete_job_post(db, data.id, user_id))


def _save_skill(db: Session, data: JobSkillSave, user_id: str) -> JobSkillResult:
    skill = job_skill_service.save_job_skill(db, data, user_id)
    return JobSkillResult(skill=JobSkillRead.model_validate(skill))


def _delete_skill(db: Session, data: JobSkillDelete, user_id: str) -> JobSkillResult:
    return JobSkillResult(skill=job_skill_service.delete_job_skill(db, data.id, data.job_post_id, user_id))


ACTIONS: dict[str, Action] = {
    action.name: action
    for action in (
        Action("createJobPost", JobPostCreate, _create_job_post),
        Action("updateJobPost", JobPostUpdate, _update_job_post),
        Action("listJobPosts", JobPostListRequest, _list_job_posts),
        Action("deleteJobPost", JobPostDelete, _delete_job_post),
        Action("saveSkill", JobSkillSave, _save_skill),
        Action("deleteSkill", JobSkillDelete, _delete_skill),
    )
}


def _format_issues(exc: ValidationError) -> list[dict[str, Any]]:
    return [
        {"path": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
        for err in exc.errors()
    ]


def validate_input(action: Action, payload: Any) -> BaseModel:
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise ActionError(BAD_REQUEST, "Input must be a JSON object.")
    try:
        return action.input_model.model_validate(payload)
    except ValidationError as exc:
        raise ActionError(BAD_REQUEST, "Invalid input.", issues=_format_issues(exc)) from exc


def dispatch(name: str, payload: Any, context: RequestContext, db: Session) -> dict[str, Any]:
    action = ACTIONS.get(name)
    if action is None:
        raise not_found("Unknown action")

    data = validate_input(action, payload)
    user_id = require_user(context)
    result = action.handler(db, data, user_id)
    return result.model_dump(mode="json", by_alias=True)
