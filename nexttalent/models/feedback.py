from sqlalchemy import Column, String, Text, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from nexttalent.database import Base


class JobRejectionFeedback(Base):
    """Admin's reasons for rejecting a job posting."""

    __tablename__ = "job_rejection_feedback"

    id = Column(String, primary_key=True, index=True)
    job_id = Column(String, ForeignKey("job_postings.id", ondelete="CASCADE"), nullable=False, index=True)
    employer_id = Column(String, nullable=False, index=True)
    selected_reasons = Column(JSON, nullable=False)
    comment = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    job = relationship("JobPosting")


class RejectedSuggestion(Base):
    """Employer's improvement suggestions for a rejected applicant.

    Keyed by applicant, job title and company name rather than by foreign
    keys so it survives deletion of the posting.
    """

    __tablename__ = "rejected_suggestions"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    application_id = Column(String)
    job_title = Column(String, nullable=False)
    company_name = Column(String, nullable=False)
    questions_answers = Column(JSON, nullable=False)  # category -> rating
    comment = Column(Text)
    video_link = Column(String)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
