from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from classbook.api.deps import db
from classbook.core.errors import Unauthorized
from classbook.schemas.auth import LoginIn, TokenOut
from classbook.core.security import verify_password, create_access_token
from classbook.services import users

router = APIRouter(prefix="/api/auth", tags=["auth"])

@router.post("/login", response_model=TokenOut)
def login(body: LoginIn, s: Session = Depends(db)):
    u = users.find_by_username(s, body.username.strip())
    if not u or not verify_password(body.password, u.password_hash):
        raise Unauthorized()
    token = create_access_token(user_id=u.id, username=u.username, role_id=u.role_id)
    return {"access_token": token, "roleId": u.role_id}
