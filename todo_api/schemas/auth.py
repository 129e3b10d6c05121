from typing import List, Optional

from pydantic import BaseModel

from todo_api.schemas.validation import FieldError, require_non_empty

AUTH_NAME_REQUIRED = "Auth name is required!"


class AuthBase(BaseModel):
    name: str
    email: str
    password1: str
    password2: str


class AuthIn(AuthBase):
    # clients may echo back a fetched account; the path id wins
    id: Optional[int] = None

    def validate_fields(self) -> List[FieldError]:
        return require_non_empty(self.name, "name", AUTH_NAME_REQUIRED)


class AuthOut(AuthBase):
    id: int


class AuthSummary(BaseModel):
    name: str
    email: str


class Login(BaseModel):
    email: str
    password: str
