from pydantic import BaseModel, EmailStr, Field, field_validator
from datetime import datetime
from typing import Literal

RoleId = Literal[1, 2]  # 1 instructor, 2 client

def _name_trim(v: str | None):
    if v is None:
        return None
    v = v.strip()
    if len(v) > 64:
        raise ValueError("name too long")
    return v or None

class UserUpdate(BaseModel):
    """Allow-listed profile patch. Keys outside these fields are dropped."""

    username: str | None = None
    password: str | None = None
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    email: EmailStr | None = None
    role_id: RoleId | None = Field(default=None, alias="roleId")

    class Config:
        populate_by_name = True
        extra = "ignore"

    @field_validator("username")
    @classmethod
    def username_trim(cls, v: str | None):
        if v is None:
            return None
        v = v.strip()
        if not v:
            raise ValueError("username is required")
        if len(v) > 64:
            raise ValueError("username too long")
        return v

    @field_validator("password")
    @classmethod
    def password_min(cls, v: str | None):
        if v is None:
            return None
        v = str(v)
        if len(v) < 6:
            raise ValueError("password must be at least 6 characters")
        return v

    @field_validator("first_name", "last_name")
    @classmethod
    def names_trim(cls, v: str | None):
        return _name_trim(v)

    @field_validator("email", mode="before")
    @classmethod
    def email_trim(cls, v):
        if not isinstance(v, str):
            return v
        v = v.strip().lower()
        return v or None

    def changes(self) -> dict:
        """Fields the client actually sent, keyed by column attribute.

        ``null`` for a required column means "leave it alone".
        """
        data = self.model_dump(exclude_unset=True)
        for key in ("username", "password", "role_id"):
            if key in data and data[key] is None:
                del data[key]
        return data

class UserOut(BaseModel):
    id: int
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    email: str | None = None
    username: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
    role_id: int = Field(alias="roleId")

    class Config:
        from_attributes = True
        populate_by_name = True
