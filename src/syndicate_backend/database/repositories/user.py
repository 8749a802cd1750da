"""Repository helpers for working with users."""

from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from syndicate_backend.database.schemas import UserSchema


class UserRepository:
    """Encapsulates persistence operations for :class:`UserSchema`."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, user_id: UUID) -> UserSchema | None:
        """Return user entity by user's ID."""
        return self._session.get(UserSchema, user_id)

    def get_by_nickname(self, nickname: str) -> UserSchema | None:
        """Return user entity by user's nickname."""
        stmt = select(UserSchema).where(UserSchema.nickname == nickname)
        return self._session.scalar(stmt)

    def lock(self, user_id: UUID) -> UserSchema | None:
        """Return the user row locked ``FOR UPDATE`` for the current transaction."""
        stmt = (
            select(UserSchema)
            .where(UserSchema.id == user_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        return self._session.scalar(stmt)

    def debit_turns(self, user_id: UUID, amount: int) -> UserSchema | None:
        """Subtract *amount* account turns if the balance covers it."""
        stmt = (
            update(UserSchema)
            .where(UserSchema.id == user_id, UserSchema.turns >= amount)
            .values(turns=UserSchema.turns - amount)
            .returning(UserSchema)
            .execution_options(populate_existing=True)
        )
        return self._session.scalars(stmt).one_or_none()

    def add(self, user: UserSchema) -> UserSchema:
        """Add new user to database."""
        self._session.add(user)
        self._session.flush()
        self._session.refresh(user)
        return user
