from datetime import date

from pydantic import BaseModel, Field


class InterviewCreate(BaseModel):
    interview_date: date
    interview_time: str = Field(pattern=r"^([01]\d|2[0-3]):[0-5]\d$")
    meeting_link: str | None = Field(default=None, max_length=2000)


class InterviewUpdate(InterviewCreate):
    pass


class InterviewResponse(BaseModel):
    id: str
    application_id: str
    interview_date: str
    interview_time: str
    meeting_link: str | None
    job_title: str
    candidate_name: str
    company_name: str
