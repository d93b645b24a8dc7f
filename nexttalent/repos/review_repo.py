from sqlalchemy.orm import Session

from nexttalent.core.security import generate_id
from nexttalent.models.review import Review


def create(db: Session, author_id: str, role: str, review_text: str, rating: int) -> Review:
    review = Review(id=generate_id(), author_id=author_id, role=role, review_text=review_text, rating=rating)
    db.add(review)
    db.commit()
    db.refresh(review)
    return review


def get_all_paginated(db: Session, limit: int = 20, offset: int = 0) -> tuple[list[Review], int]:
    """All reviews for admin, newest first. Returns (items, total)."""
    q = db.query(Review).order_by(Review.created_at.desc())
    total = q.count()
    items = q.offset(offset).limit(limit).all()
    return items, total


def delete(db: Session, review_id: str) -> bool:
    review = db.query(Review).filter(Review.id == review_id).first()
    if not review:
        return False
    db.delete(review)
    db.commit()
    return True
