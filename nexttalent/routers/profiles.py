import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from nexttalent.database import get_db
from nexttalent.dependencies import get_token_claims
from nexttalent.models.enums import Role
from nexttalent.repos.profile_repo import create as create_profile, get_by_id
from nexttalent.schemas.profile import ProfileCreate, ProfileResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.post("/me", response_model=ProfileResponse)
def register_profile(
    body: ProfileCreate,
    db: Session = Depends(get_db),
    claims: dict = Depends(get_token_claims),
):
    """Register the signed-in identity as a job seeker or an employer."""
    actor_id = claims["sub"]
    if get_by_id(db, actor_id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Profile already registered")
    profile = create_profile(
        db,
        actor_id,
        body.role.value,
        name=body.name,
        email=body.email,
        phone=body.phone,
        company_name=body.company_name if body.role == Role.EMPLOYER else None,
    )
    logger.info("Profile registered: %s as %s", actor_id, profile.role)
    return profile


@router.get("/me", response_model=ProfileResponse)
def get_my_profile(
    db: Session = Depends(get_db),
    claims: dict = Depends(get_token_claims),
):
    profile = get_by_id(db, claims["sub"])
    if not profile:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")
    return profile
