from sqlalchemy import Column, String, Text, Integer, DateTime
from sqlalchemy.sql import func

from nexttalent.database import Base


class Review(Base):
    """Feedback about the platform left by a job seeker or an employer."""

    __tablename__ = "user_reviews"

    id = Column(String, primary_key=True, index=True)
    author_id = Column(String, nullable=False, index=True)
    role = Column(String, nullable=False)  # employer | user
    review_text = Column(Text, nullable=False)
    rating = Column(Integer, nullable=False)  # 1-5
    created_at = Column(DateTime(timezone=True), server_default=func.now())
