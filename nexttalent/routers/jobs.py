import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from nexttalent.core.session import SessionContext
from nexttalent.database import get_db
from nexttalent.dependencies import get_current_employer, get_current_job_seeker, get_current_session
from nexttalent.models.feedback import JobRejectionFeedback
from nexttalent.models.job_posting import JobPosting
from nexttalent.repos.feedback_repo import list_job_feedback_for_employer
from nexttalent.repos.job_repo import list_for_employer, search_visible
from nexttalent.routers.applications import application_to_response
from nexttalent.schemas.application import ApplicationCreate, ApplicationResponse
from nexttalent.schemas.job import (
    JobCreate,
    JobResponse,
    JobStatusUpdate,
    JobUpdate,
    RejectionFeedbackResponse,
)
from nexttalent.services.application_workflow import apply_to_job
from nexttalent.services.job_workflow import delete_job, post_job, set_operational_status, update_job

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/jobs", tags=["jobs"])


def job_to_response(j: JobPosting, applicant_count: int | None = None) -> JobResponse:
    employer = j.employer
    return JobResponse(
        id=j.id,
        employer_id=j.employer_id,
        title=j.title,
        location=j.location,
        salary=j.salary,
        description=j.description,
        image_url=j.image_url,
        required_skills=list(j.required_skills or []),
        application_deadline=j.application_deadline.isoformat() if j.application_deadline else None,
        status=j.status,
        job_status=j.job_status,
        company_name=(employer.company_name if employer and employer.company_name else "N/A"),
        applicant_count=applicant_count,
        created_at=j.created_at.isoformat() if j.created_at else None,
    )


def _feedback_to_response(f: JobRejectionFeedback) -> RejectionFeedbackResponse:
    return RejectionFeedbackResponse(
        id=f.id,
        job_id=f.job_id,
        job_title=f.job.title if f.job else "Job Title Not Found",
        selected_reasons=list(f.selected_reasons or []),
        comment=f.comment,
        created_at=f.created_at.isoformat() if f.created_at else None,
    )


@router.get("", response_model=list[JobResponse])
def search_jobs(
    search: str | None = None,
    limit: int = 100,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_current_session),
):
    """Approved and open postings, optionally filtered by title or location."""
    limit = min(max(1, limit), 500)
    return [job_to_response(j) for j in search_visible(db, search=search, limit=limit)]


@router.post("", response_model=JobResponse)
def create_job(
    body: JobCreate,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_current_employer),
):
    """Post a job. It stays Pending until an admin approves it."""
    job = post_job(db, ctx, **body.model_dump())
    return job_to_response(job, applicant_count=0)


@router.get("/mine", response_model=list[JobResponse])
def list_my_jobs(
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_current_employer),
):
    return [job_to_response(j, applicant_count=n) for j, n in list_for_employer(db, ctx.actor_id)]


@router.get("/rejection-feedback", response_model=list[RejectionFeedbackResponse])
def list_rejection_feedback(
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_current_employer),
):
    """Admin feedback on the employer's rejected postings, newest first."""
    return [_feedback_to_response(f) for f in list_job_feedback_for_employer(db, ctx.actor_id)]


@router.patch("/{job_id}", response_model=JobResponse)
def edit_job(
    job_id: str,
    body: JobUpdate,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_current_employer),
):
    job = update_job(db, ctx, job_id, **body.model_dump(exclude_unset=True))
    return job_to_response(job)


@router.patch("/{job_id}/job-status", response_model=JobResponse)
def change_job_status(
    job_id: str,
    body: JobStatusUpdate,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_current_employer),
):
    """Open or close an owned posting."""
    return job_to_response(set_operational_status(db, ctx, job_id, body.job_status))


@router.delete("/{job_id}")
def remove_job(
    job_id: str,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_current_employer),
):
    delete_job(db, ctx, job_id)
    return {"message": "Job deleted"}


@router.post("/{job_id}/apply", response_model=ApplicationResponse)
def apply(
    job_id: str,
    body: ApplicationCreate,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_current_job_seeker),
):
    application = apply_to_job(db, ctx, job_id, body.resume_link)
    return application_to_response(application)
