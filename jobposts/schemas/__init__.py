# __init__.py
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

__all__ = [
	"JobPostCreate",
	"JobPostDelete",
	"JobPostListRequest",
	"JobPostListResult",
	"JobPostRead",
	"JobPostResult",
	"JobPostUpdate",
	"JobSkillDelete",
	"JobSkillRead",
	"JobSkillResult",
	"JobSkillSave",
]
