from datetime import date

from sqlalchemy.orm import Session, joinedload

from nexttalent.core.security import generate_id
from nexttalent.models.application import Application
from nexttalent.models.interview_schedule import InterviewSchedule
from nexttalent.models.job_posting import JobPosting


def create(
    db: Session,
    application_id: str,
    interview_date: date,
    interview_time: str,
    meeting_link: str | None = None,
) -> InterviewSchedule:
    schedule = InterviewSchedule(
        id=generate_id(),
        application_id=application_id,
        interview_date=interview_date,
        interview_time=interview_time,
        meeting_link=meeting_link,
    )
    db.add(schedule)
    db.commit()
    db.refresh(schedule)
    return schedule


def get_by_id(db: Session, schedule_id: str) -> InterviewSchedule | None:
    return (
        db.query(InterviewSchedule)
        .options(joinedload(InterviewSchedule.application).joinedload(Application.job))
        .filter(InterviewSchedule.id == schedule_id)
        .first()
    )


def get_for_application(db: Session, application_id: str) -> InterviewSchedule | None:
    return (
        db.query(InterviewSchedule)
        .filter(InterviewSchedule.application_id == application_id)
        .first()
    )


def _upcoming(db: Session, today: date):
    return (
        db.query(InterviewSchedule)
        .join(Application, Application.id == InterviewSchedule.application_id)
        .join(JobPosting, JobPosting.id == Application.job_id)
        .options(
            joinedload(InterviewSchedule.application)
            .joinedload(Application.job)
            .joinedload(JobPosting.employer)
        )
        .filter(InterviewSchedule.interview_date >= today)
    )


def list_upcoming_for_employer(db: Session, employer_id: str, today: date) -> list[InterviewSchedule]:
    return (
        _upcoming(db, today)
        .filter(JobPosting.employer_id == employer_id)
        .order_by(InterviewSchedule.interview_date.asc(), InterviewSchedule.interview_time.asc())
        .all()
    )


def list_upcoming_for_applicant(db: Session, applicant_id: str, today: date) -> list[InterviewSchedule]:
    return (
        _upcoming(db, today)
        .filter(Application.applicant_id == applicant_id)
        .order_by(InterviewSchedule.interview_date.asc(), InterviewSchedule.interview_time.asc())
        .all()
    )


def update(
    db: Session,
    schedule_id: str,
    interview_date: date,
    interview_time: str,
    meeting_link: str | None,
) -> InterviewSchedule | None:
    schedule = db.query(InterviewSchedule).filter(InterviewSchedule.id == schedule_id).first()
    if not schedule:
        return None
    schedule.interview_date = interview_date
    schedule.interview_time = interview_time
    schedule.meeting_link = meeting_link
    db.commit()
    db.refresh(schedule)
    return schedule


def delete(db: Session, schedule_id: str) -> bool:
    schedule = db.query(InterviewSchedule).filter(InterviewSchedule.id == schedule_id).first()
    if not schedule:
        return False
    db.delete(schedule)
    db.commit()
    return True
