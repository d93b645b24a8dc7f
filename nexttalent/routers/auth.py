import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from nexttalent.core.security import create_access_token
from nexttalent.database import get_db
from nexttalent.dependencies import get_token_claims, resolve_role
from nexttalent.schemas.profile import SessionToken

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/session", response_model=SessionToken)
def start_session(
    db: Session = Depends(get_db),
    claims: dict = Depends(get_token_claims),
):
    """
    Exchange an identity-provider token for a session token.
    The role is looked up once here and carried in the token from then on.
    """
    actor_id = claims["sub"]
    role = resolve_role(db, actor_id)
    if role is None:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Profile not registered")
    logger.info("Session started: subject=%s role=%s", actor_id, role.value)
    return SessionToken(access_token=create_access_token(actor_id, role.value), role=role.value)
