from sqlalchemy import Column, String, Text, Boolean, DateTime
from sqlalchemy.sql import func

from nexttalent.database import Base


class Notification(Base):
    __tablename__ = "notifications"

    id = Column(String, primary_key=True, index=True)
    recipient_id = Column(String, nullable=False, index=True)
    role = Column(String, nullable=False, index=True)  # admin | employer | user
    title = Column(String, nullable=False)
    message = Column(Text, nullable=False)
    is_read = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
