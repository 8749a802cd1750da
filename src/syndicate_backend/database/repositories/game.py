"""Repository helpers for game rounds."""

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from syndicate_backend.database.schemas import GameSchema


class GameRepository:
    """Encapsulates persistence operations for :class:`GameSchema`."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, game_id: int) -> GameSchema | None:
        """Return the game with *game_id*."""
        return self._session.get(GameSchema, game_id)

    def list_all(self) -> list[GameSchema]:
        """Return all games, newest start first."""
        stmt = select(GameSchema).order_by(GameSchema.start_date.desc(), GameSchema.id)
        return list(self._session.scalars(stmt))

    def add(self, game: GameSchema) -> GameSchema:
        """Insert *game* and populate server defaults."""
        self._session.add(game)
        self._session.flush()
        self._session.refresh(game)
        return game

    def delete(self, game_id: int) -> bool:
        """Delete the game row; return whether one existed."""
        result = self._session.execute(
            delete(GameSchema)
            .where(GameSchema.id == game_id)
            .execution_options(synchronize_session="fetch")
        )
        return result.rowcount > 0
