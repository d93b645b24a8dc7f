from datetime import date

from sqlalchemy import func, or_
from sqlalchemy.orm import Session, joinedload

from nexttalent.core.security import generate_id
from nexttalent.models.application import Application
from nexttalent.models.enums import ModerationStatus, OperationalStatus
from nexttalent.models.job_posting import JobPosting

EDITABLE_FIELDS = (
    "title",
    "location",
    "salary",
    "description",
    "image_url",
    "required_skills",
    "application_deadline",
)


def create(
    db: Session,
    employer_id: str,
    *,
    title: str,
    required_skills: list[str],
    location: str | None = None,
    salary: str | None = None,
    description: str | None = None,
    image_url: str | None = None,
    application_deadline: date | None = None,
) -> JobPosting:
    job = JobPosting(
        id=generate_id(),
        employer_id=employer_id,
        title=title,
        location=location,
        salary=salary,
        description=description,
        image_url=image_url,
        required_skills=required_skills,
        application_deadline=application_deadline,
        status=ModerationStatus.PENDING.value,
        job_status=OperationalStatus.OPEN.value,
    )
    db.add(job)
    db.commit()
    db.refresh(job)
    return job


def get_by_id(db: Session, job_id: str) -> JobPosting | None:
    return db.query(JobPosting).filter(JobPosting.id == job_id).first()


def list_for_employer(db: Session, employer_id: str) -> list[tuple[JobPosting, int]]:
    """Employer's postings with their applicant counts, newest first."""
    counts = (
        db.query(Application.job_id, func.count(Application.id).label("n"))
        .group_by(Application.job_id)
        .subquery()
    )
    rows = (
        db.query(JobPosting, func.coalesce(counts.c.n, 0))
        .outerjoin(counts, counts.c.job_id == JobPosting.id)
        .filter(JobPosting.employer_id == employer_id)
        .order_by(JobPosting.created_at.desc())
        .all()
    )
    return [(job, int(n)) for job, n in rows]


def get_all_paginated(
    db: Session,
    status: str | None = None,
    limit: int = 20,
    offset: int = 0,
) -> tuple[list[JobPosting], int]:
    """All postings for admin moderation. Returns (items, total)."""
    q = db.query(JobPosting).options(joinedload(JobPosting.employer)).order_by(JobPosting.created_at.desc())
    if status:
        q = q.filter(JobPosting.status == status)
    total = q.count()
    items = q.offset(offset).limit(limit).all()
    return items, total


def search_visible(db: Session, search: str | None = None, limit: int = 100) -> list[JobPosting]:
    """Postings a job seeker may see: Approved and Open only."""
    q = (
        db.query(JobPosting)
        .options(joinedload(JobPosting.employer))
        .filter(
            JobPosting.status == ModerationStatus.APPROVED.value,
            JobPosting.job_status == OperationalStatus.OPEN.value,
        )
    )
    if search and search.strip():
        term = f"%{search.strip()}%"
        q = q.filter(or_(JobPosting.title.ilike(term), JobPosting.location.ilike(term)))
    return q.order_by(JobPosting.created_at.desc()).limit(limit).all()


def update_fields(db: Session, job_id: str, **fields) -> JobPosting | None:
    """Set every given editable column, None included. Unknown keys are ignored."""
    job = get_by_id(db, job_id)
    if not job:
        return None
    for name, value in fields.items():
        if name in EDITABLE_FIELDS:
            setattr(job, name, value)
    db.commit()
    db.refresh(job)
    return job


def set_status(db: Session, job_id: str, status: str) -> JobPosting | None:
    job = get_by_id(db, job_id)
    if not job:
        return None
    job.status = status
    db.commit()
    db.refresh(job)
    return job


def set_job_status(db: Session, job_id: str, job_status: str) -> JobPosting | None:
    job = get_by_id(db, job_id)
    if not job:
        return None
    job.job_status = job_status
    db.commit()
    db.refresh(job)
    return job


def delete(db: Session, job_id: str) -> bool:
    job = get_by_id(db, job_id)
    if not job:
        return False
    db.delete(job)
    db.commit()
    return True
