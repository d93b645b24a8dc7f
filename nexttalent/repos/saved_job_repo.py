from sqlalchemy.orm import Session, joinedload

from nexttalent.core.security import generate_id
from nexttalent.models.job_posting import JobPosting
from nexttalent.models.saved_job import SavedJob


def create(db: Session, user_id: str, job_id: str) -> SavedJob:
    saved = SavedJob(id=generate_id(), user_id=user_id, job_id=job_id)
    db.add(saved)
    db.commit()
    db.refresh(saved)
    return saved


def get_existing(db: Session, user_id: str, job_id: str) -> SavedJob | None:
    return (
        db.query(SavedJob)
        .filter(SavedJob.user_id == user_id, SavedJob.job_id == job_id)
        .first()
    )


def list_for_user(db: Session, user_id: str) -> list[SavedJob]:
    """Saved postings with job and employer loaded, most recently saved first."""
    return (
        db.query(SavedJob)
        .options(joinedload(SavedJob.job).joinedload(JobPosting.employer))
        .filter(SavedJob.user_id == user_id)
        .order_by(SavedJob.created_at.desc())
        .all()
    )


def delete(db: Session, user_id: str, job_id: str) -> bool:
    saved = get_existing(db, user_id, job_id)
    if not saved:
        return False
    db.delete(saved)
    db.commit()
    return True
