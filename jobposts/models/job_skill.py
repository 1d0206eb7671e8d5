from __future__ import annotations

import uuid

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from jobposts.database import Base


def _new_id() -> str:
    return str(uuid.uuid4())


class JobSkill(Base):
    __tablename__ = "job_skills"

    id = Column(String(255), primary_key=True, default=_new_id)

    # Ownership is derived through the parent post, never stored here.
    job_post_id = Column(
        String(255),
        ForeignKey("job_posts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    name = Column(Text, nullable=False)
    category = Column(Text, nullable=True)
    importance = Column(Integer, nullable=True)

    # Refreshed on every save, not only at insert.
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    job_post = relationship("JobPost", back_populates="skills")
