from dataclasses import dataclass

from nexttalent.models.enums import Role


@dataclass(frozen=True)
class SessionContext:
    """Who is acting, resolved once when the session token is issued."""

    actor_id: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
