"""User database schema."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import Boolean, CheckConstraint, DateTime, Integer, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from syndicate_backend.database.base import BaseSchema


class UserSchema(BaseSchema):
    """SQLAlchemy model for application users and their account-level turns."""

    __tablename__ = "users"
    __table_args__ = (CheckConstraint("turns >= 0", name="ck_users_turns"),)

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    nickname: Mapped[str] = mapped_column(
        String(64), unique=True, nullable=False, index=True
    )
    turns: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_admin: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
