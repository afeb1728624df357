from sqlalchemy import String, Integer, SmallInteger, DateTime, func
from sqlalchemy.orm import Mapped, mapped_column
from classbook.db.base import Base

ROLE_INSTRUCTOR = 1
ROLE_CLIENT = 2

class User(Base):
    __tablename__ = "users"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    username: Mapped[str] = mapped_column(String(64), unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255))
    first_name: Mapped[str | None] = mapped_column(String(64), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(64), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    role_id: Mapped[int] = mapped_column(SmallInteger, default=ROLE_CLIENT, server_default=str(ROLE_CLIENT))
    created_at: Mapped[DateTime] = mapped_column(DateTime, server_default=func.now())
    updated_at: Mapped[DateTime] = mapped_column(DateTime, server_default=func.now(), onupdate=func.now())
