import logging
from typing import List, Union
from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from jobby.core.database import get_db
from jobby.core.exceptions import BadRequestError, InternalError, NotFoundError
from jobby.crud import job as job_crud
from jobby.schemas.common import BulkDeleteResponse
from jobby.schemas.job import (
    JobBulkCreateResponse,
    JobCreateRequest,
    JobCreateResponse,
    JobDeleteResponse,
    JobResponse,
    JobSummaryResponse,
)

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)


@router.post("", status_code=201, response_model=Union[JobBulkCreateResponse, JobCreateResponse])
def create_jobs(
    payload: Union[List[JobCreateRequest], JobCreateRequest] = Body(...),
    db: Session = Depends(get_db)
):
    """
    Create one job posting, or several from a JSON array.

    A bulk insert is committed as a single transaction.
    """
    if isinstance(payload, list) and not payload:
        raise BadRequestError("At least one job is required")

    try:
        if isinstance(payload, list):
            created = job_crud.create_many(db, payload)
            logger.info(f"Created {len(created)} jobs")
            return JobBulkCreateResponse(
                message="Jobs created successfully",
                jobs=[JobResponse.model_validate(job) for job in created]
            )

        new_job = job_crud.create(db, payload)
        logger.info(f"Created job {new_job.id}: {new_job.title}")
        return JobCreateResponse(
            message="Job created successfully",
            job=JobResponse.model_validate(new_job)
        )

    except Exception as e:
        db.rollback()
        logger.error(f"Error creating jobs: {e}")
        raise InternalError(details=str(e))


@router.get("", response_model=List[JobSummaryResponse])
def list_jobs(db: Session = Depends(get_db)):
    """List all jobs as summary projections."""
    try:
        return job_crud.get_summaries(db)
    except Exception as e:
        logger.error(f"Error listing jobs: {e}")
        raise InternalError(details=str(e))


@router.get("/{job_id}", response_model=JobResponse)
def get_job(job_id: str, db: Session = Depends(get_db)):
    """Retrieve the full job record by ID."""
    try:
        job = job_crud.get_by_id(db, job_id)
    except Exception as e:
        logger.error(f"Error fetching job {job_id}: {e}")
        raise InternalError(details=str(e))

    if not job:
        raise NotFoundError("Job not found")

    return job


@router.delete("/{job_id}", response_model=JobDeleteResponse)
def delete_job(job_id: str, db: Session = Depends(get_db)):
    """Delete a job by ID."""
    try:
        deleted = job_crud.delete(db, job_id)
    except Exception as e:
        db.rollback()
        logger.error(f"Error deleting job {job_id}: {e}")
        raise InternalError(details=str(e))

    if not deleted:
        raise NotFoundError("Job not found")

    logger.info(f"Deleted job {job_id}")
    return JobDeleteResponse(
        message="Job deleted successfully",
        job=JobResponse.model_validate(deleted)
    )


@router.delete("", response_model=BulkDeleteResponse)
def delete_all_jobs(db: Session = Depends(get_db)):
    """Delete every job in the catalog."""
    try:
        count = job_crud.delete_all(db)
    except Exception as e:
        db.rollback()
        logger.error(f"Error deleting all jobs: {e}")
        raise InternalError(details=str(e))

    logger.info(f"Deleted all jobs ({count})")
    return BulkDeleteResponse(message="All jobs deleted successfully", deletedCount=count)
