import logging
from datetime import date

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from nexttalent.core.session import SessionContext
from nexttalent.database import get_db
from nexttalent.dependencies import get_current_employer, get_current_session
from nexttalent.models.interview_schedule import InterviewSchedule
from nexttalent.schemas.interview import InterviewCreate, InterviewResponse, InterviewUpdate
from nexttalent.services.interview_scheduling import (
    cancel_interview,
    list_upcoming,
    reschedule_interview,
    schedule_interview,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/interviews", tags=["interviews"])


def _interview_to_response(s: InterviewSchedule) -> InterviewResponse:
    application = s.application
    job = application.job if application else None
    employer = job.employer if job else None
    return InterviewResponse(
        id=s.id,
        application_id=s.application_id,
        interview_date=s.interview_date.isoformat(),
        interview_time=s.interview_time,
        meeting_link=s.meeting_link,
        job_title=job.title if job else "Unknown Job",
        candidate_name=(application.applicant_name if application and application.applicant_name else "N/A"),
        company_name=(employer.company_name if employer and employer.company_name else "Unknown Company"),
    )


@router.get("/upcoming", response_model=list[InterviewResponse])
def get_upcoming_interviews(
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_current_session),
):
    """Interviews dated today or later for the calling employer or job seeker."""
    return [_interview_to_response(s) for s in list_upcoming(db, ctx, today=date.today())]


@router.post("/applications/{application_id}", response_model=InterviewResponse)
def create_interview(
    application_id: str,
    body: InterviewCreate,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_current_employer),
):
    schedule = schedule_interview(
        db, ctx, application_id, body.interview_date, body.interview_time, body.meeting_link
    )
    return _interview_to_response(schedule)


@router.patch("/{schedule_id}", response_model=InterviewResponse)
def update_interview(
    schedule_id: str,
    body: InterviewUpdate,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_current_employer),
):
    schedule = reschedule_interview(
        db, ctx, schedule_id, body.interview_date, body.interview_time, body.meeting_link
    )
    return _interview_to_response(schedule)


@router.delete("/{schedule_id}")
def delete_interview(
    schedule_id: str,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_current_employer),
):
    cancel_interview(db, ctx, schedule_id)
    return {"message": "Interview cancelled"}
