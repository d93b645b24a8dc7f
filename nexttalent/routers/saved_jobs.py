import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from nexttalent.core.session import SessionContext
from nexttalent.database import get_db
from nexttalent.dependencies import get_current_job_seeker
from nexttalent.models.enums import ModerationStatus, OperationalStatus
from nexttalent.models.saved_job import SavedJob
from nexttalent.repos.job_repo import get_by_id as get_job
from nexttalent.repos.saved_job_repo import create, delete, get_existing, list_for_user
from nexttalent.routers.jobs import job_to_response
from nexttalent.schemas.job import SavedJobResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/saved-jobs", tags=["saved-jobs"])


def _saved_to_response(s: SavedJob) -> SavedJobResponse:
    return SavedJobResponse(
        id=s.id,
        job_id=s.job_id,
        saved_at=s.created_at.isoformat() if s.created_at else None,
        job=job_to_response(s.job),
    )


@router.get("", response_model=list[SavedJobResponse])
def list_saved_jobs(
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_current_job_seeker),
):
    """Caller's bookmarked postings, most recently saved first."""
    return [_saved_to_response(s) for s in list_for_user(db, ctx.actor_id)]


@router.post("/{job_id}", response_model=SavedJobResponse)
def save_job(
    job_id: str,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_current_job_seeker),
):
    """Bookmark an Approved, Open posting. Saving the same posting twice is a conflict."""
    job = get_job(db, job_id)
    if (
        not job
        or job.status != ModerationStatus.APPROVED.value
        or job.job_status != OperationalStatus.OPEN.value
    ):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job not found")
    if get_existing(db, ctx.actor_id, job_id):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Job already saved")
    saved = create(db, ctx.actor_id, job_id)
    logger.info("User %s saved job %s", ctx.actor_id, job_id)
    return _saved_to_response(saved)


@router.delete("/{job_id}")
def unsave_job(
    job_id: str,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_current_job_seeker),
):
    if not delete(db, ctx.actor_id, job_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Saved job not found")
    return {"message": "Job removed from saved"}
