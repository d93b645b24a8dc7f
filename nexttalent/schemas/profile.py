from pydantic import BaseModel, EmailStr, field_validator, model_validator

from nexttalent.models.enums import Role


class ProfileCreate(BaseModel):
    role: Role
    name: str
    email: EmailStr | None = None
    phone: str | None = None
    company_name: str | None = None

    @field_validator("role")
    @classmethod
    def no_self_admin(cls, v: Role) -> Role:
        if v == Role.ADMIN:
            raise ValueError("Admin role cannot be self-assigned")
        return v

    @model_validator(mode="after")
    def employer_needs_company(self):
        if self.role == Role.EMPLOYER and not (self.company_name or "").strip():
            raise ValueError("Employers must provide a company name")
        return self


class ProfileResponse(BaseModel):
    id: str
    role: str
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    company_name: str | None = None

    class Config:
        from_attributes = True


class SessionToken(BaseModel):
    access_token: str
    token_type: str = "bearer"
    role: str
