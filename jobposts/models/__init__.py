# __init__.py
from jobposts.models.job_post import JobPost
from jobposts.models.job_skill import JobSkill

__all__ = [
	"JobPost",
	"JobSkill",
]
