import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from nexttalent.core.session import SessionContext
from nexttalent.database import get_db
from nexttalent.dependencies import get_current_employer, get_current_job_seeker
from nexttalent.models.application import Application
from nexttalent.repos.feedback_repo import list_suggestions_for_user
from nexttalent.schemas.application import (
    ApplicationResponse,
    ApplicationStatusResponse,
    ApplicationStatusUpdate,
    SuggestionResponse,
)
from nexttalent.services.application_workflow import (
    Suggestion,
    list_applicants,
    list_my_applications,
    transition_application,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/applications", tags=["applications"])


def application_to_response(a: Application) -> ApplicationResponse:
    job = a.job
    employer = job.employer if job else None
    return ApplicationResponse(
        id=a.id,
        job_id=a.job_id,
        job_title=job.title if job else "N/A",
        company_name=(employer.company_name if employer and employer.company_name else "N/A"),
        applicant_id=a.applicant_id,
        applicant_name=a.applicant_name,
        applicant_email=a.applicant_email,
        applicant_phone=a.applicant_phone,
        resume_link=a.resume_link,
        status=a.status,
        has_interview=a.interview is not None,
        created_at=a.created_at.isoformat() if a.created_at else None,
    )


@router.get("", response_model=list[ApplicationResponse])
def list_employer_applicants(
    search: str | None = None,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_current_employer),
):
    """Applicants across all of the employer's postings, optionally filtered by name."""
    return [application_to_response(a) for a in list_applicants(db, ctx, search=search)]


@router.get("/mine", response_model=list[ApplicationResponse])
def list_own_applications(
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_current_job_seeker),
):
    return [application_to_response(a) for a in list_my_applications(db, ctx)]


@router.get("/suggestions", response_model=list[SuggestionResponse])
def list_own_suggestions(
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_current_job_seeker),
):
    """Improvement suggestions left by employers on rejected applications."""
    return [
        SuggestionResponse(
            id=s.id,
            job_title=s.job_title,
            company_name=s.company_name,
            questions_answers=dict(s.questions_answers or {}),
            comment=s.comment,
            video_link=s.video_link,
            created_at=s.created_at.isoformat() if s.created_at else None,
        )
        for s in list_suggestions_for_user(db, ctx.actor_id)
    ]


@router.patch("/{application_id}/status", response_model=ApplicationStatusResponse)
def update_application_status(
    application_id: str,
    body: ApplicationStatusUpdate,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_current_employer),
):
    """Approve or reject an applicant. A rejection may carry structured suggestions."""
    suggestion = None
    if body.suggestion is not None:
        suggestion = Suggestion(
            ratings=dict(body.suggestion.ratings),
            comment=body.suggestion.comment,
            video_link=body.suggestion.video_link,
        )
    result = transition_application(db, ctx, application_id, body.status, suggestion)
    if result.suggestion_saved is False:
        logger.warning("Application %s rejected but suggestion was not stored", application_id)
    return ApplicationStatusResponse(
        application=application_to_response(result.application),
        suggestion_saved=result.suggestion_saved,
    )
