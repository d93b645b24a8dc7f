from pydantic import BaseModel, Field, model_validator

from nexttalent.models.enums import SUGGESTION_CATEGORIES, ApplicationStatus, SkillRating


class ApplicationCreate(BaseModel):
    resume_link: str = Field(min_length=1, max_length=2000)


class SuggestionIn(BaseModel):
    ratings: dict[str, SkillRating]
    comment: str | None = Field(default=None, max_length=5000)
    video_link: str | None = Field(default=None, max_length=2000)

    @model_validator(mode="after")
    def every_category_rated(self):
        unknown = [k for k in self.ratings if k not in SUGGESTION_CATEGORIES]
        if unknown:
            raise ValueError(f"Unknown category: {unknown[0]}")
        missing = [c for c in SUGGESTION_CATEGORIES if c not in self.ratings]
        if missing:
            raise ValueError(f"Rating not selected for {missing[0]}")
        return self


class ApplicationStatusUpdate(BaseModel):
    status: ApplicationStatus
    suggestion: SuggestionIn | None = None

    @model_validator(mode="after")
    def suggestion_only_on_reject(self):
        if self.suggestion is not None and self.status != ApplicationStatus.REJECTED:
            raise ValueError("Suggestions can only accompany a rejection")
        return self


class ApplicationResponse(BaseModel):
    id: str
    job_id: str
    job_title: str
    company_name: str | None = None
    applicant_id: str
    applicant_name: str | None
    applicant_email: str | None
    applicant_phone: str | None
    resume_link: str
    status: str
    has_interview: bool = False
    created_at: str | None = None


class ApplicationStatusResponse(BaseModel):
    application: ApplicationResponse
    suggestion_saved: bool | None = None


class SuggestionResponse(BaseModel):
    id: str
    job_title: str
    company_name: str
    questions_answers: dict[str, str]
    comment: str | None
    video_link: str | None
    created_at: str | None = None
