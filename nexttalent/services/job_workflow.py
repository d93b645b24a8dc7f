"""
Job posting lifecycle: employer posting/editing, admin moderation, deletion.

Moderation status is admin-controlled and independent of the employer's
Open/Closed switch. Every moderation change and every deletion notifies the
owning employer after the primary write has committed.
"""
import logging
from datetime import date

from sqlalchemy.orm import Session

from nexttalent.core.errors import (
    InvalidRequestError,
    InvalidTransitionError,
    NotFoundError,
    PermissionDeniedError,
)
from nexttalent.core.session import SessionContext
from nexttalent.models.enums import (
    JOB_REJECTION_REASONS,
    NO_SKILLS_SENTINEL,
    ModerationStatus,
    OperationalStatus,
    Role,
)
from nexttalent.models.job_posting import JobPosting
from nexttalent.repos import feedback_repo, job_repo
from nexttalent.services import notification_service

logger = logging.getLogger(__name__)


# Admin may move a posting between any two different moderation states
MODERATION_TRANSITIONS: dict[ModerationStatus, list[ModerationStatus]] = {
    ModerationStatus.PENDING: [ModerationStatus.APPROVED, ModerationStatus.REJECTED],
    ModerationStatus.APPROVED: [ModerationStatus.PENDING, ModerationStatus.REJECTED],
    ModerationStatus.REJECTED: [ModerationStatus.PENDING, ModerationStatus.APPROVED],
}


def can_moderate(from_status: ModerationStatus, to_status: ModerationStatus) -> bool:
    return to_status in MODERATION_TRANSITIONS.get(from_status, [])


def _require_role(ctx: SessionContext, *roles: Role) -> None:
    if ctx.role not in roles:
        raise PermissionDeniedError(f"{ctx.role.value} may not perform this action")


def _owned_job(db: Session, ctx: SessionContext, job_id: str) -> JobPosting:
    job = job_repo.get_by_id(db, job_id)
    if not job:
        raise NotFoundError("Job not found")
    if job.employer_id != ctx.actor_id:
        raise PermissionDeniedError("Job belongs to another employer")
    return job


def normalize_skills(skills: list[str] | None) -> list[str]:
    cleaned = [s.strip() for s in (skills or []) if s and s.strip()]
    return cleaned or [NO_SKILLS_SENTINEL]


def post_job(
    db: Session,
    ctx: SessionContext,
    *,
    title: str,
    location: str | None = None,
    salary: str | None = None,
    description: str | None = None,
    image_url: str | None = None,
    required_skills: list[str] | None = None,
    application_deadline: date | None = None,
) -> JobPosting:
    """Create a posting in Pending moderation and tell the admin inbox."""
    _require_role(ctx, Role.EMPLOYER)
    job = job_repo.create(
        db,
        ctx.actor_id,
        title=title,
        location=location,
        salary=salary,
        description=description,
        image_url=image_url,
        required_skills=normalize_skills(required_skills),
        application_deadline=application_deadline,
    )
    logger.info("Job posted: job=%s employer=%s", job.id, ctx.actor_id)
    notification_service.notify_admin(
        db,
        "New Job Posted",
        f'An employer has posted a new job: "{job.title}". Please review and approve.',
    )
    return job


def update_job(db: Session, ctx: SessionContext, job_id: str, **fields) -> JobPosting:
    """Edit descriptive fields of an owned posting. Statuses are not editable here."""
    _require_role(ctx, Role.EMPLOYER)
    _owned_job(db, ctx, job_id)
    if fields.get("title") is None:
        fields.pop("title", None)
    if "required_skills" in fields:
        fields["required_skills"] = normalize_skills(fields["required_skills"])
    job = job_repo.update_fields(db, job_id, **fields)
    if not job:
        raise NotFoundError("Job not found")
    return job


def set_operational_status(
    db: Session, ctx: SessionContext, job_id: str, job_status: OperationalStatus
) -> JobPosting:
    _require_role(ctx, Role.EMPLOYER)
    _owned_job(db, ctx, job_id)
    job = job_repo.set_job_status(db, job_id, OperationalStatus(job_status).value)
    if not job:
        raise NotFoundError("Job not found")
    logger.info("Job %s marked %s by employer %s", job_id, job.job_status, ctx.actor_id)
    return job


def moderate_job(
    db: Session,
    ctx: SessionContext,
    job_id: str,
    to_status: ModerationStatus,
    reasons: list[str] | None = None,
    comment: str | None = None,
) -> JobPosting:
    """
    Move a posting to another moderation state and notify its employer.

    Rejection needs at least one checklist reason; the feedback row is written
    before the status so a failed feedback insert leaves the posting untouched.
    """
    _require_role(ctx, Role.ADMIN)
    to_status = ModerationStatus(to_status)
    job = job_repo.get_by_id(db, job_id)
    if not job:
        raise NotFoundError("Job not found")
    current = ModerationStatus(job.status)
    if not can_moderate(current, to_status):
        raise InvalidTransitionError(f"Invalid transition from {current.value} to {to_status.value}")

    if to_status == ModerationStatus.REJECTED:
        reasons = [r for r in (reasons or []) if r]
        if not reasons:
            raise InvalidRequestError("Select at least one rejection reason")
        unknown = [r for r in reasons if r not in JOB_REJECTION_REASONS]
        if unknown:
            raise InvalidRequestError(f"Unknown rejection reason: {unknown[0]}")
        feedback_repo.create_job_feedback(db, job.id, job.employer_id, reasons, comment)

    job = job_repo.set_status(db, job_id, to_status.value)
    logger.info("Job moderation: job=%s %s -> %s by admin %s", job_id, current.value, to_status.value, ctx.actor_id)

    if to_status == ModerationStatus.REJECTED:
        message = f'Admin has rejected your job titled "{job.title}" and provided feedback.'
    elif to_status == ModerationStatus.PENDING:
        message = f'Admin has moved your job titled "{job.title}" back to pending review.'
    else:
        message = f'Admin has {to_status.value.lower()} your job titled "{job.title}".'
    notification_service.notify_user(
        db, job.employer_id, Role.EMPLOYER, f'Job "{job.title}" {to_status.value}', message
    )
    return job


def delete_job(db: Session, ctx: SessionContext, job_id: str) -> None:
    """Delete a posting as admin or as its employer; the employer is always told."""
    _require_role(ctx, Role.ADMIN, Role.EMPLOYER)
    if ctx.role == Role.ADMIN:
        job = job_repo.get_by_id(db, job_id)
        if not job:
            raise NotFoundError("Job not found")
    else:
        job = _owned_job(db, ctx, job_id)
    title, employer_id = job.title, job.employer_id

    if not job_repo.delete(db, job_id):
        raise NotFoundError("Job not found")
    logger.info("Job deleted: job=%s by %s %s", job_id, ctx.role.value, ctx.actor_id)

    if ctx.role == Role.ADMIN:
        message = f'Admin has deleted your job titled "{title}".'
    else:
        message = f'Your job titled "{title}" has been deleted.'
    notification_service.notify_user(db, employer_id, Role.EMPLOYER, f'Job "{title}" Deleted', message)
