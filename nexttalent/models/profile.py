from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from nexttalent.database import Base


class Profile(Base):
    """Identity-provider subject plus the role it acts under."""

    __tablename__ = "profiles"

    id = Column(String, primary_key=True, index=True)
    role = Column(String, nullable=False, index=True)  # admin | employer | user
    name = Column(String)
    email = Column(String)
    phone = Column(String)
    company_name = Column(String)  # employers only
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    jobs = relationship("JobPosting", back_populates="employer", cascade="all, delete-orphan")
    applications = relationship("Application", cascade="all, delete-orphan")
    saved_jobs = relationship("SavedJob", cascade="all, delete-orphan")
