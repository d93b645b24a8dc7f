from pydantic import BaseModel, Field, field_validator


class ReviewCreate(BaseModel):
    review_text: str = Field(max_length=5000)
    rating: int = Field(ge=1, le=5)

    @field_validator("review_text")
    @classmethod
    def text_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Review text is required")
        return v


class ReviewResponse(BaseModel):
    id: str
    author_id: str
    role: str
    review_text: str
    rating: int
    created_at: str | None = None
