import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from nexttalent.core.session import SessionContext
from nexttalent.database import get_db
from nexttalent.dependencies import get_current_admin
from nexttalent.models.enums import ModerationStatus, Role
from nexttalent.repos.job_repo import get_all_paginated as get_jobs_paginated
from nexttalent.repos.news_repo import create as create_news, delete as delete_news
from nexttalent.repos.profile_repo import (
    delete as delete_profile,
    get_all_by_role_paginated,
    get_by_id as get_profile,
)
from nexttalent.repos.review_repo import delete as delete_review, get_all_paginated as get_reviews_paginated
from nexttalent.routers.jobs import job_to_response
from nexttalent.routers.news import news_to_response
from nexttalent.routers.reviews import review_to_response
from nexttalent.schemas.job import JobModerationUpdate, JobResponse
from nexttalent.schemas.notification import BroadcastRequest, NewsCreate, NewsResponse
from nexttalent.schemas.profile import ProfileResponse
from nexttalent.services.job_workflow import delete_job, moderate_job
from nexttalent.services.notification_service import notify_all_users, notify_role, notify_user

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/admin", tags=["admin"])


# ---- Job moderation ----
@router.get("/jobs")
def list_jobs(
    status_filter: ModerationStatus | None = None,
    page: int = 1,
    page_size: int = 20,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_current_admin),
):
    """All postings with employer company name, optional moderation filter, pagination. Admin only."""
    page = max(1, page)
    page_size = min(max(1, page_size), 100)
    offset = (page - 1) * page_size
    status_value = status_filter.value if status_filter else None
    jobs, total = get_jobs_paginated(db, status=status_value, limit=page_size, offset=offset)
    return {"items": [job_to_response(j) for j in jobs], "total": total}


@router.patch("/jobs/{job_id}/status", response_model=JobResponse)
def moderate(
    job_id: str,
    body: JobModerationUpdate,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_current_admin),
):
    """Approve, reject (with reasons) or return a posting to Pending. Admin only."""
    job = moderate_job(db, ctx, job_id, body.status, reasons=body.reasons, comment=body.comment)
    return job_to_response(job)


@router.delete("/jobs/{job_id}")
def delete_job_admin(
    job_id: str,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_current_admin),
):
    """Delete a posting. The employer is notified. Admin only."""
    delete_job(db, ctx, job_id)
    return {"message": "Job deleted"}


# ---- Notifications and announcements ----
@router.post("/notifications")
def send_notification(
    body: BroadcastRequest,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_current_admin),
):
    """Send a notification to one recipient, every member of a role, or everybody. Admin only."""
    if body.target == "recipient":
        sent = 1 if notify_user(db, body.recipient_id, body.role, body.title, body.message) else 0
    elif body.target == "role":
        sent = notify_role(db, body.role, body.title, body.message)
    else:
        sent = notify_all_users(db, body.title, body.message)
    logger.info("Admin %s sent %r to %s: %d notification(s)", ctx.actor_id, body.title, body.target, sent)
    return {"sent": sent}


@router.post("/news", response_model=NewsResponse)
def publish_news(
    body: NewsCreate,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_current_admin),
):
    """Publish a news item and announce it to employers and job seekers. Admin only."""
    try:
        item = create_news(db, body.title, body.description, body.image_url)
    except Exception as e:
        logger.exception("Publishing news failed for admin=%s: %s", ctx.actor_id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to add news") from e
    notify_role(
        db,
        Role.EMPLOYER,
        "New News Published",
        f"Admin has posted: {item.title}. Check the latest news section!",
    )
    notify_role(
        db,
        Role.USER,
        "Latest News Update",
        f"New announcement: {item.title}. Stay informed!",
    )
    return news_to_response(item)


@router.delete("/news/{news_id}")
def remove_news(
    news_id: str,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_current_admin),
):
    if not delete_news(db, news_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="News item not found")
    return {"message": "News item deleted"}


# ---- Users and employers ----
def _list_profiles(db: Session, role: Role, search: str | None, page: int, page_size: int) -> dict:
    page = max(1, page)
    page_size = min(max(1, page_size), 100)
    offset = (page - 1) * page_size
    profiles, total = get_all_by_role_paginated(db, role.value, search=search, limit=page_size, offset=offset)
    return {"items": [ProfileResponse.model_validate(p) for p in profiles], "total": total}


def _delete_profile(db: Session, ctx: SessionContext, profile_id: str, role: Role, detail: str) -> None:
    profile = get_profile(db, profile_id)
    if not profile or profile.role != role.value:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
    if not delete_profile(db, profile_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
    logger.info("Admin %s deleted %s profile %s", ctx.actor_id, role.value, profile_id)


@router.get("/users")
def list_users(
    search: str | None = None,
    page: int = 1,
    page_size: int = 20,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_current_admin),
):
    """Job seeker profiles with optional name/email search and pagination. Admin only."""
    return _list_profiles(db, Role.USER, search, page, page_size)


@router.delete("/users/{user_id}")
def delete_user(
    user_id: str,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_current_admin),
):
    """Delete a job seeker with their applications and saved jobs. Admin only."""
    _delete_profile(db, ctx, user_id, Role.USER, "User not found")
    return {"message": "User deleted"}


@router.get("/employers")
def list_employers(
    search: str | None = None,
    page: int = 1,
    page_size: int = 20,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_current_admin),
):
    """Employer profiles with optional name/email/company search and pagination. Admin only."""
    return _list_profiles(db, Role.EMPLOYER, search, page, page_size)


@router.delete("/employers/{employer_id}")
def delete_employer(
    employer_id: str,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_current_admin),
):
    """Delete an employer with all of their postings. Admin only."""
    _delete_profile(db, ctx, employer_id, Role.EMPLOYER, "Employer not found")
    return {"message": "Employer deleted"}


# ---- Reviews ----
@router.get("/reviews")
def list_reviews(
    page: int = 1,
    page_size: int = 20,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_current_admin),
):
    page = max(1, page)
    page_size = min(max(1, page_size), 100)
    offset = (page - 1) * page_size
    reviews, total = get_reviews_paginated(db, limit=page_size, offset=offset)
    return {"items": [review_to_response(r) for r in reviews], "total": total}


@router.delete("/reviews/{review_id}")
def remove_review(
    review_id: str,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_current_admin),
):
    if not delete_review(db, review_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Review not found")
    return {"message": "Review deleted"}
