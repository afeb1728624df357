import logging

from sqlalchemy import select, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from classbook.core.errors import Conflict, NotFound, StorageFailure
from classbook.models.user import User

logger = logging.getLogger(__name__)


def find_by_username(s: Session, username: str) -> User | None:
    try:
        return s.execute(select(User).where(User.username == username)).scalar_one_or_none()
    except SQLAlchemyError as e:
        raise StorageFailure() from e


def update(s: Session, user_id: int, patch: dict) -> User:
    """Apply ``patch`` (column attribute -> value) to one user and return the fresh row."""
    try:
        user = s.get(User, user_id)
        if user is None:
            raise NotFound("user_not_found", "User not found")

        username = patch.get("username")
        if username is not None and username != user.username:
            taken = s.execute(
                select(User.id).where(User.username == username, User.id != user_id)
            ).scalar_one_or_none()
            if taken is not None:
                raise Conflict("username_taken", "Username is already taken")

        for key, value in patch.items():
            setattr(user, key, value)
        s.add(user)
        s.commit()
        s.refresh(user)
    except SQLAlchemyError as e:
        s.rollback()
        raise StorageFailure() from e

    logger.info("user %s updated fields=%s", user_id, sorted(patch))
    return user


def remove(s: Session, user_id: int) -> int:
    try:
        res = s.execute(delete(User).where(User.id == user_id))
        s.commit()
    except SQLAlchemyError as e:
        s.rollback()
        raise StorageFailure() from e

    count = res.rowcount or 0
    logger.info("user %s deleted count=%s", user_id, count)
    return count
