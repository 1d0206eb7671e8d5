# job_post_service.py
from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobposts.errors import BAD_REQUEST, ActionError, not_found
from jobposts.models.job_post import JobPost
from jobposts.schemas.job_post import JobPostCreate, JobPostRead, JobPostUpdate


logger = logging.getLogger(__name__)

POST_NOT_FOUND = "Job post not found."
POST_ID_TAKEN = "Job post id is not available."


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def get_owned_job_post(db: Session, post_id: str, owner_id: str) -> JobPost | None:
    """Load a post only if it belongs to ``owner_id``.

    A post owned by someone else is reported exactly like a missing one.
    """
    return (
        db.query(JobPost)
        .filter(JobPost.id == post_id)
        .filter(JobPost.user_id == owner_id)
        .one_or_none()
    )


def create_job_post(db: Session, payload: JobPostCreate, owner_id: str) -> JobPost:
    post = JobPost(
        id=payload.id if payload.id is not None else str(uuid.uuid4()),
        user_id=owner_id,
        title=payload.title,
        company_name=payload.company_name,
        location=payload.location,
        source_type=payload.source_type,
        source_url=payload.source_url,
        raw_text=payload.raw_text,
        created_at=utc_now(),
    )
    db.add(post)
    try:
        db.commit()
    except IntegrityError as exc:
        # Only the primary key can collide. Same answer whoever owns the existing row.
        db.rollback()
        logger.info("job_post.create id_taken user_id=%s id=%s", owner_id, payload.id)
        raise ActionError(
            BAD_REQUEST, POST_ID_TAKEN, issues=[{"path": "id", "message": "already in use"}]
        ) from exc
    db.refresh(post)
    logger.info("job_post.create user_id=%s id=%s", owner_id, post.id)
    return post


def update_job_post(db: Session, payload: JobPostUpdate, owner_id: str) -> JobPost:
    post = get_owned_job_post(db, payload.id, owner_id)
    if post is None:
        logger.info("job_post.update not_found user_id=%s id=%s", owner_id, payload.id)
        raise not_found(POST_NOT_FOUND)

    changes = payload.changes()
    if not changes:
        return post

    for field, value in changes.items():
        setattr(post, field, value)
    db.commit()
    db.refresh(post)
    logger.info("job_post.update user_id=%s id=%s fields=%s", owner_id, post.id, sorted(changes))
    return post


def list_job_posts(db: Session, owner_id: str) -> list[JobPost]:
    return db.query(JobPost).filter(JobPost.user_id == owner_id).all()


def delete_job_post(db: Session, post_id: str, owner_id: str) -> JobPostRead:
    post = get_owned_job_post(db, post_id, owner_id)
    if post is None:
        logger.info("job_post.delete not_found user_id=%s id=%s", owner_id, post_id)
        raise not_found(POST_NOT_FOUND)

    # Snapshot before the row (and its skills, via cascade) goes away.
    deleted = JobPostRead.model_validate(post)
    db.delete(post)
    db.commit()
    logger.info("job_post.delete user_id=%s id=%s", owner_id, post_id)
    return deleted
