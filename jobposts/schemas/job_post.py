from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import ConfigDict, Field, field_validator

from jobposts.schemas.common import CamelModel, KeyStr, reject_null


class JobPostCreate(CamelModel):
    id: KeyStr | None = None
    title: str = Field(min_length=1)
    company_name: str | None = None
    location: str | None = None
    source_type: str | None = None
    source_url: str | None = None
    raw_text: str = Field(min_length=1)

    @field_validator("id", "company_name", "location", "source_type", "source_url", mode="before")
    @classmethod
    def _reject_null(cls, v: Any) -> Any:
        return reject_null(v)


class JobPostUpdate(CamelModel):
    id: KeyStr
    # Absent means "leave as is". Present values (even "") overwrite.
    title: str | None = Field(default=None, min_length=1)
    company_name: str | None = None
    location: str | None = None
    source_type: str | None = None
    source_url: str | None = None
    raw_text: str | None = Field(default=None, min_length=1)

    @field_validator("title", "company_name", "location", "source_type", "source_url", "raw_text", mode="before")
    @classmethod
    def _reject_null(cls, v: Any) -> Any:
        return reject_null(v)

    def changes(self) -> dict[str, Any]:
        """Fields explicitly present in the patch, keyed by column attribute."""
        return self.model_dump(exclude_unset=True, exclude={"id"})


class JobPostListRequest(CamelModel):
    pass


class JobPostDelete(CamelModel):
    id: KeyStr


class JobPostRead(CamelModel):
    id: str
    user_id: str
    title: str
    company_name: str | None = None
    location: str | None = None
    source_type: str | None = None
    source_url: str | None = None
    raw_text: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class JobPostResult(CamelModel):
    post: JobPostRead


class JobPostListResult(CamelModel):
    posts: list[JobPostRead]
