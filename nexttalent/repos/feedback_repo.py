from sqlalchemy.orm import Session, joinedload

from nexttalent.core.security import generate_id
from nexttalent.models.feedback import JobRejectionFeedback, RejectedSuggestion


def create_job_feedback(
    db: Session,
    job_id: str,
    employer_id: str,
    selected_reasons: list[str],
    comment: str | None = None,
) -> JobRejectionFeedback:
    feedback = JobRejectionFeedback(
        id=generate_id(),
        job_id=job_id,
        employer_id=employer_id,
        selected_reasons=selected_reasons,
        comment=comment or None,
    )
    db.add(feedback)
    db.commit()
    db.refresh(feedback)
    return feedback


def list_job_feedback_for_employer(db: Session, employer_id: str) -> list[JobRejectionFeedback]:
    return (
        db.query(JobRejectionFeedback)
        .options(joinedload(JobRejectionFeedback.job))
        .filter(JobRejectionFeedback.employer_id == employer_id)
        .order_by(JobRejectionFeedback.created_at.desc())
        .all()
    )


def create_suggestion(
    db: Session,
    user_id: str,
    job_title: str,
    company_name: str,
    questions_answers: dict[str, str],
    *,
    application_id: str | None = None,
    comment: str | None = None,
    video_link: str | None = None,
) -> RejectedSuggestion:
    suggestion = RejectedSuggestion(
        id=generate_id(),
        user_id=user_id,
        application_id=application_id,
        job_title=job_title,
        company_name=company_name,
        questions_answers=questions_answers,
        comment=comment or None,
        video_link=video_link or None,
    )
    db.add(suggestion)
    db.commit()
    db.refresh(suggestion)
    return suggestion


def list_suggestions_for_user(db: Session, user_id: str) -> list[RejectedSuggestion]:
    return (
        db.query(RejectedSuggestion)
        .filter(RejectedSuggestion.user_id == user_id)
        .order_by(RejectedSuggestion.created_at.desc())
        .all()
    )
