from sqlalchemy import Column, String, Text, Date, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from nexttalent.database import Base


class JobPosting(Base):
    __tablename__ = "job_postings"

    id = Column(String, primary_key=True, index=True)
    employer_id = Column(String, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String, nullable=False)
    location = Column(String)
    salary = Column(String)
    description = Column(Text)
    image_url = Column(String)
    required_skills = Column(JSON, nullable=False)
    application_deadline = Column(Date)
    status = Column(String, nullable=False, default="Pending")  # Pending | Approved | Rejected
    job_status = Column(String, nullable=False, default="Open")  # Open | Closed
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    employer = relationship("Profile", back_populates="jobs")
    applications = relationship(
        "Application",
        back_populates="job",
        cascade="all, delete-orphan",
    )
    saved_by = relationship("SavedJob", back_populates="job", cascade="all, delete-orphan")
