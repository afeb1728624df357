import logging

from sqlalchemy import select, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from classbook.core.errors import NotFound, StorageFailure
from classbook.models.class_client import ClassClient
from classbook.models.fitness_class import FitnessClass
from classbook.models.user import User

logger = logging.getLogger(__name__)


def find_by(s: Session, class_id: int | None = None, client_id: int | None = None) -> list[ClassClient]:
    q = select(ClassClient).order_by(ClassClient.class_id.asc())
    if class_id is not None:
        q = q.where(ClassClient.class_id == class_id)
    if client_id is not None:
        q = q.where(ClassClient.client_id == client_id)
    try:
        return list(s.execute(q).scalars().all())
    except SQLAlchemyError as e:
        raise StorageFailure() from e


def add(s: Session, class_id: int, client_id: int) -> ClassClient:
    """Enroll ``client_id`` in ``class_id``.

    Enrolling twice returns the existing row instead of failing.
    """
    try:
        if s.get(FitnessClass, class_id) is None:
            raise NotFound("class_not_found", "Class not found")
        if s.get(User, client_id) is None:
            raise NotFound("user_not_found", "User not found")

        existing = s.get(ClassClient, (class_id, client_id))
        if existing is not None:
            return existing

        row = ClassClient(class_id=class_id, client_id=client_id)
        s.add(row)
        s.commit()
        s.refresh(row)
    except SQLAlchemyError as e:
        s.rollback()
        raise StorageFailure() from e

    logger.info("client %s enrolled in class %s", client_id, class_id)
    return row


def remove(s: Session, class_id: int, client_id: int) -> int:
    try:
        res = s.execute(
            delete(ClassClient).where(
                ClassClient.class_id == class_id,
                ClassClient.client_id == client_id,
            )
        )
        s.commit()
    except SQLAlchemyError as e:
        s.rollback()
        raise StorageFailure() from e

    count = res.rowcount or 0
    logger.info("client %s removed from class %s count=%s", client_id, class_id, count)
    return count
