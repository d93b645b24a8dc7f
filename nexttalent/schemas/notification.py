from typing import Literal

from pydantic import BaseModel, Field, model_validator

from nexttalent.models.enums import Role


class NotificationResponse(BaseModel):
    id: str
    recipient_id: str
    role: str
    title: str
    message: str
    is_read: bool
    created_at: str | None = None


class UnreadCount(BaseModel):
    unread: int


class BroadcastRequest(BaseModel):
    """Ad-hoc admin notification to one recipient, one role, or everybody."""

    target: Literal["recipient", "role", "all"]
    title: str = Field(min_length=1, max_length=200)
    message: str = Field(min_length=1, max_length=5000)
    recipient_id: str | None = None
    role: Role | None = None

    @model_validator(mode="after")
    def target_fields_present(self):
        if self.target in ("recipient", "role") and self.role is None:
            raise ValueError("role is required for this target")
        if self.target == "recipient" and not self.recipient_id:
            raise ValueError("recipient_id is required for target=recipient")
        return self


class NewsCreate(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1)
    image_url: str | None = None


class NewsResponse(BaseModel):
    id: str
    title: str
    description: str
    image_url: str | None = None
    created_at: str | None = None
