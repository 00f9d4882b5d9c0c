"""
CRUD operations for Job model.

Implements the Repository pattern to encapsulate all database operations
for jobs, providing a clean interface for the API layer.
"""

from typing import List, Optional, Union
from uuid import UUID
from sqlalchemy.orm import Session, load_only
from jobby.crud.base import parse_id
from jobby.models.job import Job
from jobby.schemas.job import JobCreateRequest

# Columns exposed by the job list (summary projection)
SUMMARY_COLUMNS = (
    Job.id,
    Job.title,
    Job.company_logo_url,
    Job.rating,
    Job.job_description,
    Job.location,
    Job.employment_type,
    Job.package_per_annum,
)


def _build(job_data: JobCreateRequest) -> Job:
    return Job(
        title=job_data.title,
        company_logo_url=job_data.company_logo_url,
        rating=job_data.rating,
        job_description=job_data.job_description,
        location=job_data.location,
        employment_type=job_data.employment_type,
        package_per_annum=job_data.package_per_annum,
        company_website_url=job_data.company_website_url,
        life_at_company=job_data.life_at_company.model_dump(),
        skills=[skill.model_dump() for skill in job_data.skills],
    )


def create(db: Session, job_data: JobCreateRequest) -> Job:
    """
    Create a new job in the database.

    Returns:
        Created Job instance with id
    """
    db_job = _build(job_data)

    db.add(db_job)
    db.commit()
    db.refresh(db_job)

    return db_job


def create_many(db: Session, jobs_data: List[JobCreateRequest]) -> List[Job]:
    """
    Create several jobs in one transaction.

    Either every job is stored or, if the commit fails, none of them is.
    """
    db_jobs = [_build(job_data) for job_data in jobs_data]

    db.add_all(db_jobs)
    db.commit()
    for db_job in db_jobs:
        db.refresh(db_job)

    return db_jobs


def get_by_id(db: Session, job_id: Union[str, UUID]) -> Optional[Job]:
    """
    Retrieve a job by its ID.

    Returns:
        Job instance if found, None otherwise (including malformed IDs)
    """
    jid = parse_id(job_id)
    if jid is None:
        return None
    return db.query(Job).filter(Job.id == jid).first()


def get_summaries(db: Session) -> List[Job]:
    """Retrieve all jobs, loading only the summary columns."""
    return (
        db.query(Job)
        .options(load_only(*SUMMARY_COLUMNS))
        .order_by(Job.created_at, Job.id)
        .all()
    )


def delete(db: Session, job_id: Union[str, UUID]) -> Optional[Job]:
    """
    Delete a job by ID.

    Returns:
        The deleted Job, or None if not found
    """
    job = get_by_id(db, job_id)
    if not job:
        return None

    db.delete(job)
    db.commit()

    return job


def delete_all(db: Session) -> int:
    """
    Delete every job.

    Returns:
        Number of jobs deleted
    """
    count = db.query(Job).delete(synchronize_session=False)
    db.commit()
    return count
