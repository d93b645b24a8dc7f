import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from nexttalent.core.security import decode_access_token
from nexttalent.core.session import SessionContext
from nexttalent.database import get_db
from nexttalent.models.enums import Role
from nexttalent.repos.profile_repo import get_by_id

logger = logging.getLogger(__name__)
security = HTTPBearer(auto_error=False)


def get_token_claims(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> dict:
    """Claims of the bearer token issued by the identity provider or by /auth/session."""
    if not credentials:
        logger.info("Auth failed: missing bearer credentials")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    claims = decode_access_token(credentials.credentials)
    if not claims:
        logger.info("Auth failed: invalid or expired token")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )
    return claims


def resolve_role(db: Session, actor_id: str) -> Role | None:
    profile = get_by_id(db, actor_id)
    if not profile:
        return None
    return Role(profile.role)


def get_current_session(
    db: Session = Depends(get_db),
    claims: dict = Depends(get_token_claims),
) -> SessionContext:
    """
    Build the caller's SessionContext. Session tokens carry the role; a bare
    identity token falls back to a single profile lookup.
    """
    actor_id = claims["sub"]
    role = claims.get("role")
    if role:
        try:
            return SessionContext(actor_id=actor_id, role=Role(role))
        except ValueError:
            logger.info("Auth failed: unknown role claim %r", role)
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid or expired token",
            )
    resolved = resolve_role(db, actor_id)
    if resolved is None:
        logger.info("Auth failed: no profile for subject %s", actor_id)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Profile not registered",
        )
    return SessionContext(actor_id=actor_id, role=resolved)


def _require(ctx: SessionContext, role: Role, detail: str) -> SessionContext:
    if ctx.role != role:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=detail)
    return ctx


def get_current_admin(ctx: SessionContext = Depends(get_current_session)) -> SessionContext:
    return _require(ctx, Role.ADMIN, "Admin access required")


def get_current_employer(ctx: SessionContext = Depends(get_current_session)) -> SessionContext:
    return _require(ctx, Role.EMPLOYER, "Employer access required")


def get_current_job_seeker(ctx: SessionContext = Depends(get_current_session)) -> SessionContext:
    return _require(ctx, Role.USER, "Job seeker access required")
