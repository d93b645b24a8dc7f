from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.sql import func

from nexttalent.database import Base


class NewsItem(Base):
    __tablename__ = "news_feed"

    id = Column(String, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    image_url = Column(String)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
