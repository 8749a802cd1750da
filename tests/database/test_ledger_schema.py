"""Database schema specific tests."""

from typing import TYPE_CHECKING, cast

import pytest
from sqlalchemy import UniqueConstraint
from sqlalchemy.exc import IntegrityError

if TYPE_CHECKING:
    from sqlalchemy import Table

    from syndicate_backend.database import DatabaseService

from syndicate_backend.database import (
    GameSchema,
    PlayerResourceSchema,
    PlayerSchema,
    UserSchema,
)
from syndicate_backend.shared import GameStatus


def test_game_status_column_uses_enum_values() -> None:
    table = cast("Table", GameSchema.__table__)
    assert table.c.status.type.enums == [status.value for status in GameStatus]


def test_ledger_rows_reference_the_partition_registry() -> None:
    for schema in (PlayerSchema, PlayerResourceSchema):
        table = cast("Table", schema.__table__)
        (foreign_key,) = table.c.game_id.foreign_keys
        assert foreign_key.target_fullname == "ledger_partitions.game_id"
        assert foreign_key.ondelete == "CASCADE"


def test_player_uniqueness_is_scoped_per_game() -> None:
    table = cast("Table", PlayerSchema.__table__)
    unique = {
        tuple(column.name for column in constraint.columns)
        for constraint in table.constraints
        if isinstance(constraint, UniqueConstraint)
    }
    assert {("game_id", "user_id"), ("game_id", "name")} <= unique


def test_balances_cannot_go_negative(
    database: "DatabaseService", game_id: int, make_player
) -> None:
    player = make_player(game_id)

    with pytest.raises(IntegrityError), database.session() as session:
        row = session.get(PlayerSchema, player.player_id)
        row.money_cash = -1
        session.flush()


def test_user_turns_cannot_go_negative(database: "DatabaseService") -> None:
    with pytest.raises(IntegrityError), database.session() as session:
        session.add(UserSchema(nickname="debtor", turns=-5))
        session.flush()
