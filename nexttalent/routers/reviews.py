import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from nexttalent.core.session import SessionContext
from nexttalent.database import get_db
from nexttalent.dependencies import get_current_session
from nexttalent.models.enums import Role
from nexttalent.models.review import Review
from nexttalent.repos.review_repo import create
from nexttalent.schemas.review import ReviewCreate, ReviewResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/reviews", tags=["reviews"])


def review_to_response(r: Review) -> ReviewResponse:
    return ReviewResponse(
        id=r.id,
        author_id=r.author_id,
        role=r.role,
        review_text=r.review_text,
        rating=r.rating,
        created_at=r.created_at.isoformat() if r.created_at else None,
    )


@router.post("", response_model=ReviewResponse)
def submit_review(
    body: ReviewCreate,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_current_session),
):
    """Rate the platform. Job seekers and employers only."""
    if ctx.role == Role.ADMIN:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admins cannot submit reviews")
    review = create(db, ctx.actor_id, ctx.role.value, body.review_text, body.rating)
    logger.info("Review %s submitted by %s (%s), rating=%d", review.id, ctx.actor_id, ctx.role.value, review.rating)
    return review_to_response(review)
