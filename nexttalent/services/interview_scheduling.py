"""
Interview scheduling bound to a single approved application.

Only interviews dated today or later are ever listed; past ones simply drop
out of view.
"""
import logging
from datetime import date

from sqlalchemy.orm import Session

from nexttalent.core.errors import ConflictError, NotFoundError, PermissionDeniedError
from nexttalent.core.session import SessionContext
from nexttalent.models.enums import ApplicationStatus, Role
from nexttalent.models.interview_schedule import InterviewSchedule
from nexttalent.repos import application_repo, interview_repo
from nexttalent.services import notification_service

logger = logging.getLogger(__name__)


def _require_employer(ctx: SessionContext) -> None:
    if ctx.role != Role.EMPLOYER:
        raise PermissionDeniedError("Only employers manage interviews")


def _owned_schedule(db: Session, ctx: SessionContext, schedule_id: str) -> InterviewSchedule:
    schedule = interview_repo.get_by_id(db, schedule_id)
    if not schedule or not schedule.application or not schedule.application.job:
        raise NotFoundError("Interview not found")
    if schedule.application.job.employer_id != ctx.actor_id:
        raise PermissionDeniedError("Interview belongs to another employer's job")
    return schedule


def schedule_interview(
    db: Session,
    ctx: SessionContext,
    application_id: str,
    interview_date: date,
    interview_time: str,
    meeting_link: str | None = None,
) -> InterviewSchedule:
    """Create the one interview for an approved application and notify the applicant."""
    _require_employer(ctx)
    application = application_repo.get_by_id(db, application_id)
    if not application or not application.job:
        raise NotFoundError("Application not found")
    if application.job.employer_id != ctx.actor_id:
        raise PermissionDeniedError("Application belongs to another employer's job")
    if application.status != ApplicationStatus.APPROVED.value:
        raise ConflictError("Interviews can only be scheduled for approved applications")
    if interview_repo.get_for_application(db, application_id):
        raise ConflictError("An interview is already scheduled for this application")

    applicant_id, job_title = application.applicant_id, application.job.title
    schedule = interview_repo.create(db, application_id, interview_date, interview_time, meeting_link)
    logger.info("Interview scheduled: schedule=%s application=%s date=%s", schedule.id, application_id, interview_date)

    notification_service.notify_user(
        db,
        applicant_id,
        Role.USER,
        "Interview Scheduled",
        f'Your interview for "{job_title}" is scheduled on {interview_date.isoformat()} at {interview_time}.',
    )
    return schedule


def reschedule_interview(
    db: Session,
    ctx: SessionContext,
    schedule_id: str,
    interview_date: date,
    interview_time: str,
    meeting_link: str | None = None,
) -> InterviewSchedule:
    _require_employer(ctx)
    schedule = _owned_schedule(db, ctx, schedule_id)
    applicant_id, job_title = schedule.application.applicant_id, schedule.application.job.title

    schedule = interview_repo.update(db, schedule_id, interview_date, interview_time, meeting_link)
    if not schedule:
        raise NotFoundError("Interview not found")
    logger.info("Interview rescheduled: schedule=%s date=%s time=%s", schedule_id, interview_date, interview_time)

    notification_service.notify_user(
        db,
        applicant_id,
        Role.USER,
        "Interview Schedule Updated",
        f'Your interview for "{job_title}" has been updated to {interview_date.isoformat()} at {interview_time}.',
    )
    return schedule


def cancel_interview(db: Session, ctx: SessionContext, schedule_id: str) -> None:
    _require_employer(ctx)
    schedule = _owned_schedule(db, ctx, schedule_id)
    applicant_id, job_title = schedule.application.applicant_id, schedule.application.job.title

    if not interview_repo.delete(db, schedule_id):
        raise NotFoundError("Interview not found")
    logger.info("Interview cancelled: schedule=%s", schedule_id)

    notification_service.notify_user(
        db,
        applicant_id,
        Role.USER,
        "Interview Cancelled",
        f'Your interview for "{job_title}" has been cancelled.',
    )


def list_upcoming(db: Session, ctx: SessionContext, today: date | None = None) -> list[InterviewSchedule]:
    """Interviews dated today or later, from the caller's side of the table."""
    today = today or date.today()
    if ctx.role == Role.EMPLOYER:
        return interview_repo.list_upcoming_for_employer(db, ctx.actor_id, today)
    if ctx.role == Role.USER:
        return interview_repo.list_upcoming_for_applicant(db, ctx.actor_id, today)
    raise PermissionDeniedError("Only employers and job seekers have interviews")
