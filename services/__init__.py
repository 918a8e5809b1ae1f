from .jobs_api import CompanyExistsError, JobsApiError, create_job, fetch_jobs

__all__ = [
    "CompanyExistsError",
    "JobsApiError",
    "create_job",
    "fetch_jobs",
]
