from sqlalchemy import Column, String, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from nexttalent.database import Base


class InterviewSchedule(Base):
    __tablename__ = "interview_schedules"

    id = Column(String, primary_key=True, index=True)
    application_id = Column(String, ForeignKey("applications.id", ondelete="CASCADE"), nullable=False, index=True)
    interview_date = Column(Date, nullable=False, index=True)
    interview_time = Column(String, nullable=False)  # HH:MM as entered by the employer
    meeting_link = Column(String)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    application = relationship("Application", back_populates="interview")
