"""
Job applications and their Pending/Approved/Rejected workflow.

ALL application status changes go through ``transition_application``.
"""
import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from nexttalent.core.errors import (
    ConflictError,
    InvalidRequestError,
    InvalidTransitionError,
    NotFoundError,
    PermissionDeniedError,
)
from nexttalent.core.session import SessionContext
from nexttalent.models.application import Application
from nexttalent.models.enums import (
    SUGGESTION_CATEGORIES,
    ApplicationStatus,
    ModerationStatus,
    OperationalStatus,
    Role,
    SkillRating,
)
from nexttalent.repos import application_repo, feedback_repo, job_repo, profile_repo
from nexttalent.services import notification_service

logger = logging.getLogger(__name__)


APPLICATION_TRANSITIONS: dict[ApplicationStatus, list[ApplicationStatus]] = {
    ApplicationStatus.PENDING: [ApplicationStatus.APPROVED, ApplicationStatus.REJECTED],
    ApplicationStatus.APPROVED: [ApplicationStatus.REJECTED],
    ApplicationStatus.REJECTED: [],  # Terminal
}


def can_transition(from_status: ApplicationStatus, to_status: ApplicationStatus) -> bool:
    return to_status in APPLICATION_TRANSITIONS.get(from_status, [])


@dataclass
class Suggestion:
    """Structured advice attached to a rejection."""

    ratings: dict[str, SkillRating]
    comment: str | None = None
    video_link: str | None = None


@dataclass
class TransitionResult:
    application: Application
    # None when no suggestion was attached
    suggestion_saved: bool | None = None


def apply_to_job(db: Session, ctx: SessionContext, job_id: str, resume_link: str) -> Application:
    """Submit an application to a visible posting and notify its employer and the admin inbox."""
    if ctx.role != Role.USER:
        raise PermissionDeniedError("Only job seekers can apply")
    resume_link = (resume_link or "").strip()
    if not resume_link:
        raise InvalidRequestError("Please enter your resume link")

    job = job_repo.get_by_id(db, job_id)
    if not job or job.status != ModerationStatus.APPROVED.value:
        raise NotFoundError("Job not found")
    if job.job_status != OperationalStatus.OPEN.value:
        raise ConflictError("Job is closed for applications")
    if application_repo.get_existing(db, ctx.actor_id, job_id):
        raise ConflictError("You have already applied to this job")

    profile = profile_repo.get_by_id(db, ctx.actor_id)
    if not profile:
        raise NotFoundError("Profile not found")

    application = application_repo.create(
        db,
        ctx.actor_id,
        job_id,
        resume_link,
        applicant_name=profile.name or "",
        applicant_email=profile.email or "",
        applicant_phone=profile.phone or "",
    )
    logger.info("Application created: application=%s job=%s applicant=%s", application.id, job_id, ctx.actor_id)

    who = profile.name or "A user"
    notification_service.notify_user(
        db, job.employer_id, Role.EMPLOYER, "New Job Application", f"{who} applied to your job: {job.title}."
    )
    notification_service.notify_admin(db, "New Job Application", f"{who} applied to the job: {job.title}.")
    return application


def _save_suggestion(
    db: Session, application: Application, job_title: str, employer_id: str, suggestion: Suggestion
) -> bool:
    try:
        employer = profile_repo.get_by_id(db, employer_id)
        feedback_repo.create_suggestion(
            db,
            user_id=application.applicant_id,
            job_title=job_title,
            company_name=(employer.company_name if employer and employer.company_name else "N/A"),
            questions_answers={k: SkillRating(v).value for k, v in suggestion.ratings.items()},
            application_id=application.id,
            comment=suggestion.comment,
            video_link=suggestion.video_link,
        )
    except Exception as e:
        db.rollback()
        logger.exception("Saving rejection suggestion failed for application=%s: %s", application.id, e)
        return False
    return True


def transition_application(
    db: Session,
    ctx: SessionContext,
    application_id: str,
    to_status: ApplicationStatus,
    suggestion: Suggestion | None = None,
) -> TransitionResult:
    """
    Move an application to a new status and notify the applicant.

    Raises:
        NotFoundError: application does not exist
        PermissionDeniedError: caller does not own the job
        InvalidTransitionError: transition not in APPLICATION_TRANSITIONS
        InvalidRequestError: suggestion given for a non-rejection, or incomplete
    """
    if ctx.role != Role.EMPLOYER:
        raise PermissionDeniedError("Only employers can review applications")
    to_status = ApplicationStatus(to_status)

    application = application_repo.get_by_id(db, application_id)
    if not application or not application.job:
        raise NotFoundError("Application not found")
    if application.job.employer_id != ctx.actor_id:
        raise PermissionDeniedError("Application belongs to another employer's job")

    current = ApplicationStatus(application.status)
    if not can_transition(current, to_status):
        raise InvalidTransitionError(f"Invalid transition from {current.value} to {to_status.value}")
    if suggestion is not None:
        if to_status != ApplicationStatus.REJECTED:
            raise InvalidRequestError("Suggestions can only accompany a rejection")
        missing = [c for c in SUGGESTION_CATEGORIES if c not in suggestion.ratings]
        if missing:
            raise InvalidRequestError(f"Rating not selected for {missing[0]}")

    job_title = application.job.title
    employer_id = application.job.employer_id
    application = application_repo.set_status(db, application_id, to_status.value)
    logger.info(
        "Application transition: application=%s %s -> %s by employer %s",
        application_id, current.value, to_status.value, ctx.actor_id,
    )

    notification_service.notify_user(
        db,
        application.applicant_id,
        Role.USER,
        "Application Status Updated",
        f'Your application for "{job_title}" was {to_status.value}.',
    )

    result = TransitionResult(application=application)
    if suggestion is not None:
        result.suggestion_saved = _save_suggestion(db, application, job_title, employer_id, suggestion)
    return result


def list_applicants(db: Session, ctx: SessionContext, search: str | None = None) -> list[Application]:
    if ctx.role != Role.EMPLOYER:
        raise PermissionDeniedError("Only employers can list applicants")
    return application_repo.list_for_employer(db, ctx.actor_id, search=search)


def list_my_applications(db: Session, ctx: SessionContext) -> list[Application]:
    if ctx.role != Role.USER:
        raise PermissionDeniedError("Only job seekers have applications")
    return application_repo.list_for_applicant(db, ctx.actor_id)
