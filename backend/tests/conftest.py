import os

os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ.setdefault("JWT_SECRET", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from classbook.api.deps import db
from classbook.core.security import create_access_token, hash_password
from classbook.db.base import Base
from classbook.db.session import enable_sqlite_foreign_keys
from classbook.main import app
from classbook.models.class_client import ClassClient
from classbook.models.fitness_class import FitnessClass
from classbook.models.user import User, ROLE_CLIENT

PASSWORD = "hunter22"


@pytest.fixture(scope="session")
def password_hash():
    return hash_password(PASSWORD)


@pytest.fixture()
def engine():
    eng = create_engine(
        "sqlite+pysqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    enable_sqlite_foreign_keys(eng)
    Base.metadata.create_all(eng)
    try:
        yield eng
    finally:
        eng.dispose()


@pytest.fixture()
def Session(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


@pytest.fixture()
def client(Session):
    def _db():
        s = Session()
        try:
            yield s
        finally:
            s.close()

    app.dependency_overrides[db] = _db
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.pop(db, None)


@pytest.fixture()
def make_user(Session, password_hash):
    def _make(username: str, role_id: int = ROLE_CLIENT, **fields) -> int:
        with Session() as s:
            u = User(username=username, password_hash=password_hash, role_id=role_id, **fields)
            s.add(u)
            s.commit()
            return u.id

    return _make


@pytest.fixture()
def make_class(Session):
    def _make(name: str, instructor_id: int | None = None) -> int:
        with Session() as s:
            c = FitnessClass(name=name, instructor_id=instructor_id)
            s.add(c)
            s.commit()
            return c.id

    return _make


@pytest.fixture()
def enroll(Session):
    def _enroll(class_id: int, client_id: int) -> None:
        with Session() as s:
            s.add(ClassClient(class_id=class_id, client_id=client_id))
            s.commit()

    return _enroll


@pytest.fixture()
def auth():
    def _auth(user_id: int, username: str = "someone", role_id: int = ROLE_CLIENT) -> dict:
        token = create_access_token(user_id=user_id, username=username, role_id=role_id)
        return {"Authorization": f"Bearer {token}"}

    return _auth
