import logging
from dataclasses import dataclass

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from classbook.db.session import SessionLocal
from classbook.core.errors import Unauthorized
from classbook.core.security import decode_token

logger = logging.getLogger(__name__)

# ids are 32-bit INTEGER columns
MAX_ID = 2**31 - 1

bearer = HTTPBearer(auto_error=False)

@dataclass(frozen=True)
class Principal:
    """Identity of the caller, resolved from the bearer token."""
    id: int
    username: str
    role_id: int

def db():
    s = SessionLocal()
    try:
        yield s
    finally:
        s.close()

def principal_from_token(token: str | None) -> Principal:
    if not token:
        raise Unauthorized()
    try:
        payload = decode_token(token)
        user_id = int(payload["sub"])
        if not 1 <= user_id <= MAX_ID:
            raise ValueError(f"subject out of range: {user_id}")
        return Principal(
            id=user_id,
            username=str(payload.get("username") or ""),
            role_id=int(payload.get("roleId") or 0),
        )
    except Exception as e:
        logger.debug("rejected bearer token: %s", e)
        raise Unauthorized() from e

def principal_from_header(authorization: str | None) -> Principal:
    """Same check as ``current_user`` for a raw ``Authorization`` header value."""
    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() != "bearer":
        raise Unauthorized()
    return principal_from_token(token.strip())

def current_user(creds: HTTPAuthorizationCredentials | None = Depends(bearer)) -> Principal:
    if creds is None:
        raise Unauthorized()
    return principal_from_token(creds.credentials)
