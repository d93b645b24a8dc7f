from sqlalchemy import or_
from sqlalchemy.orm import Session

from nexttalent.models.profile import Profile


def get_by_id(db: Session, profile_id: str) -> Profile | None:
    return db.query(Profile).filter(Profile.id == profile_id).first()


def create(
    db: Session,
    profile_id: str,
    role: str,
    *,
    name: str | None = None,
    email: str | None = None,
    phone: str | None = None,
    company_name: str | None = None,
) -> Profile:
    profile = Profile(
        id=profile_id,
        role=role,
        name=name,
        email=email,
        phone=phone,
        company_name=company_name,
    )
    db.add(profile)
    db.commit()
    db.refresh(profile)
    return profile


def update(
    db: Session,
    profile_id: str,
    *,
    role: str | None = None,
    name: str | None = None,
    email: str | None = None,
    phone: str | None = None,
    company_name: str | None = None,
) -> Profile | None:
    profile = get_by_id(db, profile_id)
    if not profile:
        return None
    if role is not None:
        profile.role = role
    if name is not None:
        profile.name = name
    if email is not None:
        profile.email = email
    if phone is not None:
        profile.phone = phone
    if company_name is not None:
        profile.company_name = company_name
    db.commit()
    db.refresh(profile)
    return profile


def get_ids_by_role(db: Session, role: str) -> list[str]:
    """Current members of a role, for notification fan-out."""
    rows = db.query(Profile.id).filter(Profile.role == role).all()
    return [r[0] for r in rows]


def get_all_ids_and_roles(db: Session) -> list[tuple[str, str]]:
    rows = db.query(Profile.id, Profile.role).all()
    return [(r[0], r[1]) for r in rows]


def get_all_by_role_paginated(
    db: Session,
    role: str,
    search: str | None = None,
    limit: int = 20,
    offset: int = 0,
) -> tuple[list[Profile], int]:
    """Profiles of one role for admin, with optional name/email/company search. Returns (items, total)."""
    q = db.query(Profile).filter(Profile.role == role).order_by(Profile.created_at.desc())
    if search and search.strip():
        term = f"%{search.strip()}%"
        q = q.filter(or_(Profile.name.ilike(term), Profile.email.ilike(term), Profile.company_name.ilike(term)))
    total = q.count()
    items = q.offset(offset).limit(limit).all()
    return items, total


def delete(db: Session, profile_id: str) -> bool:
    """Delete a profile with its postings, applications and saved jobs. Returns True if deleted."""
    profile = get_by_id(db, profile_id)
    if not profile:
        return False
    db.delete(profile)
    db.commit()
    return True
