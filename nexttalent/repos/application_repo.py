from sqlalchemy.orm import Session, joinedload

from nexttalent.core.security import generate_id
from nexttalent.models.application import Application
from nexttalent.models.enums import ApplicationStatus
from nexttalent.models.job_posting import JobPosting


def create(
    db: Session,
    applicant_id: str,
    job_id: str,
    resume_link: str,
    *,
    applicant_name: str = "",
    applicant_email: str = "",
    applicant_phone: str = "",
) -> Application:
    application = Application(
        id=generate_id(),
        applicant_id=applicant_id,
        job_id=job_id,
        resume_link=resume_link,
        applicant_name=applicant_name,
        applicant_email=applicant_email,
        applicant_phone=applicant_phone,
        status=ApplicationStatus.PENDING.value,
    )
    db.add(application)
    db.commit()
    db.refresh(application)
    return application


def get_by_id(db: Session, application_id: str) -> Application | None:
    return (
        db.query(Application)
        .options(joinedload(Application.job))
        .filter(Application.id == application_id)
        .first()
    )


def get_existing(db: Session, applicant_id: str, job_id: str) -> Application | None:
    return (
        db.query(Application)
        .filter(Application.applicant_id == applicant_id, Application.job_id == job_id)
        .first()
    )


def list_for_applicant(db: Session, applicant_id: str) -> list[Application]:
    return (
        db.query(Application)
        .options(joinedload(Application.job).joinedload(JobPosting.employer))
        .filter(Application.applicant_id == applicant_id)
        .order_by(Application.created_at.desc())
        .all()
    )


def list_for_employer(db: Session, employer_id: str, search: str | None = None) -> list[Application]:
    """Applications to any of the employer's postings, optionally filtered by applicant name."""
    q = (
        db.query(Application)
        .join(JobPosting, JobPosting.id == Application.job_id)
        .options(joinedload(Application.job), joinedload(Application.interview))
        .filter(JobPosting.employer_id == employer_id)
    )
    if search and search.strip():
        q = q.filter(Application.applicant_name.ilike(f"%{search.strip()}%"))
    return q.order_by(Application.created_at.desc()).all()


def set_status(db: Session, application_id: str, status: str) -> Application | None:
    application = db.query(Application).filter(Application.id == application_id).first()
    if not application:
        return None
    application.status = status
    db.commit()
    db.refresh(application)
    return application
