from sqlalchemy.orm import Session

from nexttalent.core.security import generate_id
from nexttalent.models.news_item import NewsItem


def create(db: Session, title: str, description: str, image_url: str | None = None) -> NewsItem:
    item = NewsItem(id=generate_id(), title=title, description=description, image_url=image_url)
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


def get_all(db: Session, limit: int = 50) -> list[NewsItem]:
    return db.query(NewsItem).order_by(NewsItem.created_at.desc()).limit(limit).all()


def delete(db: Session, news_id: str) -> bool:
    item = db.query(NewsItem).filter(NewsItem.id == news_id).first()
    if not item:
        return False
    db.delete(item)
    db.commit()
    return True
