# job_skill_service.py
from __future__ import annotations

import logging
import uuid

from sqlalchemy.orm import Session

from jobposts.errors import not_found
from jobposts.models.job_skill import JobSkill
from jobposts.schemas.job_skill import JobSkillRead, JobSkillSave
from jobposts.services.job_post_service import POST_NOT_FOUND, get_owned_job_post, utc_now


logger = logging.getLogger(__name__)

SKILL_NOT_FOUND = "Job skill not found."


def _require_owned_post(db: Session, job_post_id: str, owner_id: str) -> None:
    # Re-checked on every call: skill requests carry no proof of earlier checks.
    if get_owned_job_post(db, job_post_id, owner_id) is None:
        logger.info("job_skill.parent not_found user_id=%s job_post_id=%s", owner_id, job_post_id)
        raise not_found(POST_NOT_FOUND)


def save_job_skill(db: Session, payload: JobSkillSave, owner_id: str) -> JobSkill:
    _require_owned_post(db, payload.job_post_id, owner_id)

    if payload.id is not None:
        skill = db.query(JobSkill).filter(JobSkill.id == payload.id).one_or_none()
        if skill is None or skill.job_post_id != payload.job_post_id:
            logger.info("job_skill.update not_found user_id=%s id=%s", owner_id, payload.id)
            raise not_found(SKILL_NOT_FOUND)

        # Full replace of the mutable fields, unlike the post patch.
        skill.name = payload.name
        skill.category = payload.category
        skill.importance = payload.importance
        skill.created_at = utc_now()
        db.commit()
        db.refresh(skill)
        logger.info("job_skill.update user_id=%s id=%s", owner_id, skill.id)
        return skill

    skill = JobSkill(
        id=str(uuid.uuid4()),
        job_post_id=payload.job_post_id,
        name=payload.name,
        category=payload.category,
        importance=payload.importance,
        created_at=utc_now(),
    )
    db.add(skill)
    db.commit()
    db.refresh(skill)
    logger.info("job_skill.create user_id=%s id=%s job_post_id=%s", owner_id, skill.id, skill.job_post_id)
    return skill


def delete_job_skill(db: Session, skill_id: str, job_post_id: str, owner_id: str) -> JobSkillRead:
    _require_owned_post(db, job_post_id, owner_id)

    skill = (
        db.query(JobSkill)
        .filter(JobSkill.id == skill_id)
        .filter(JobSkill.job_post_id == job_post_id)
        .one_or_none()
    )
    if skill is None:
        logger.info("job_skill.delete not_found user_id=%s id=%s", owner_id, skill_id)
        raise not_found(SKILL_NOT_FOUND)

    deleted = JobSkillRead.model_validate(skill)
    db.delete(skill)
    db.commit()
    logger.info("job_skill.delete user_id=%s id=%s", owner_id, skill_id)
    return deleted
