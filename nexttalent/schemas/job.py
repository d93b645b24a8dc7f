from datetime import date

from pydantic import BaseModel, Field, field_validator, model_validator

from nexttalent.models.enums import JOB_REJECTION_REASONS, ModerationStatus, OperationalStatus


class JobCreate(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    location: str | None = None
    salary: str | None = None
    description: str | None = None
    image_url: str | None = None
    required_skills: list[str] = []
    application_deadline: date | None = None


class JobUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=200)
    location: str | None = None
    salary: str | None = None
    description: str | None = None
    image_url: str | None = None
    required_skills: list[str] | None = None
    application_deadline: date | None = None


class JobStatusUpdate(BaseModel):
    job_status: OperationalStatus


class JobModerationUpdate(BaseModel):
    status: ModerationStatus
    reasons: list[str] = []
    comment: str | None = Field(default=None, max_length=2000)

    @field_validator("reasons")
    @classmethod
    def known_reasons(cls, v: list[str]) -> list[str]:
        for reason in v:
            if reason not in JOB_REJECTION_REASONS:
                raise ValueError(f"Unknown rejection reason: {reason}")
        return v

    @model_validator(mode="after")
    def rejection_needs_reason(self):
        if self.status == ModerationStatus.REJECTED and not self.reasons:
            raise ValueError("Please select at least one reason")
        return self


class JobResponse(BaseModel):
    id: str
    employer_id: str
    title: str
    location: str | None
    salary: str | None
    description: str | None
    image_url: str | None = None
    required_skills: list[str]
    application_deadline: str | None = None
    status: str
    job_status: str
    company_name: str | None = None
    applicant_count: int | None = None
    created_at: str | None = None


class RejectionFeedbackResponse(BaseModel):
    id: str
    job_id: str
    job_title: str
    selected_reasons: list[str]
    comment: str | None
    created_at: str | None = None


class SavedJobResponse(BaseModel):
    id: str
    job_id: str
    saved_at: str | None = None
    job: JobResponse
