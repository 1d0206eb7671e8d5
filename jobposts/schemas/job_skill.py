from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import ConfigDict, Field, field_validator

from jobposts.schemas.common import CamelModel, Int32, KeyStr, reject_null


class JobSkillSave(CamelModel):
    # With an id this replaces the skill's mutable fields; without one it inserts.
    id: KeyStr | None = None
    job_post_id: KeyStr
    name: str = Field(min_length=1)
    category: str | None = None
    importance: Int32 | None = None

    @field_validator("id", "category", "importance", mode="before")
    @classmethod
    def _reject_null(cls, v: Any) -> Any:
        return reject_null(v)


class JobSkillDelete(CamelModel):
    id: KeyStr
    job_post_id: KeyStr


class JobSkillRead(CamelModel):
    id: str
    job_post_id: str
    name: str
    category: str | None = None
    importance: int | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class JobSkillResult(CamelModel):
    skill: JobSkillRead
