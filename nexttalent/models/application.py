from sqlalchemy import Column, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from nexttalent.database import Base


class Application(Base):
    """A job seeker's application to a posting."""

    __tablename__ = "applications"
    __table_args__ = (UniqueConstraint("applicant_id", "job_id", name="uq_application_applicant_job"),)

    id = Column(String, primary_key=True, index=True)
    applicant_id = Column(String, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    job_id = Column(String, ForeignKey("job_postings.id", ondelete="CASCADE"), nullable=False, index=True)
    # Copied from the applicant profile at apply time
    applicant_name = Column(String)
    applicant_email = Column(String)
    applicant_phone = Column(String)
    resume_link = Column(String, nullable=False)
    status = Column(String, nullable=False, default="Pending")  # Pending | Approved | Rejected
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    job = relationship("JobPosting", back_populates="applications")
    interview = relationship(
        "InterviewSchedule",
        back_populates="application",
        uselist=False,
        cascade="all, delete-orphan",
    )
