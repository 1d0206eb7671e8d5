from __future__ import annotations

import uuid

from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from jobposts.database import Base


def _new_id() -> str:
    return str(uuid.uuid4())


class JobPost(Base):
    __tablename__ = "job_posts"

    # Caller-supplied or UUID string
    id = Column(String(255), primary_key=True, default=_new_id)
    user_id = Column(String(255), nullable=False, index=True)

    title = Column(Text, nullable=False)
    company_name = Column(Text, nullable=True)
    location = Column(Text, nullable=True)
    source_type = Column(Text, nullable=True)
    source_url = Column(Text, nullable=True)
    raw_text = Column(Text, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Skills go away with their post; orphans are never kept.
    skills = relationship(
        "JobSkill",
        back_populates="job_post",
        cascade="all, delete-orphan",
    )
