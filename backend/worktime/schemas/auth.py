from datetime import date

from pydantic import BaseModel, EmailStr


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


class EmployeeMe(BaseModel):
    email: str
    full_name: str | None
    birth_date: date | None
    is_active: bool

    model_config = {"from_attributes": True}
