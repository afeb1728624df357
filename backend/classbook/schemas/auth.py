from pydantic import BaseModel, Field

class LoginIn(BaseModel):
    username: str
    password: str

class TokenOut(BaseModel):
    access_token: str
    token_type: str = "bearer"
    role_id: int = Field(alias="roleId")

    class Config:
        populate_by_name = True
