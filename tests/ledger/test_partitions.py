from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from syndicate_backend.database import (
    GameSchema,
    PartitionRepository,
    PlayerResourceSchema,
    PlayerSchema,
    partition_name,
)
from syndicate_backend.ledger import (
    BankService,
    GameDraft,
    GameService,
    MarketService,
    TenantPartitionManager,
)
from syndicate_backend.shared.errors import (
    PartitionError,
    PartitionNotFoundError,
    PlayerNotFoundError,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from conftest import Catalog, PlayerHandle

    from syndicate_backend.database import DatabaseService
    from syndicate_backend.ledger import PlayerState


def _exists(database: DatabaseService, game_id: int) -> bool:
    with database.session() as session:
        return TenantPartitionManager().partition_exists(session=session, game_id=game_id)


def _count(database: DatabaseService, schema: type, game_id: int) -> int:
    with database.session() as session:
        return session.scalar(
            select(func.count()).select_from(schema).where(schema.game_id == game_id)
        )


def test_partition_name_is_derived_from_game_id() -> None:
    assert partition_name(17) == "game_17"


def test_creating_a_game_provisions_its_partition(
    database: DatabaseService, game_id: int
) -> None:
    assert _exists(database, game_id)

    with database.session() as session:
        name = TenantPartitionManager().ensure_partition(session=session, game_id=game_id)

    assert name == f"game_{game_id}"
    assert _exists(database, game_id)


def test_partitions_are_isolated(
    database: DatabaseService,
    create_game: Callable[..., int],
    catalog: Catalog,
    make_user: Callable[..., object],
    make_player: Callable[..., PlayerHandle],
    load_player: Callable[[PlayerHandle], PlayerState],
) -> None:
    game_a, game_b = create_game(), create_game()
    user_id = make_user()
    player_a = make_player(game_a, user_id=user_id, money_cash=1000)
    player_b = make_player(game_b, user_id=user_id, money_cash=1000)

    with database.session() as session:
        MarketService().buy(
            session=session,
            game_id=game_a,
            player_id=player_a.player_id,
            resource_id=catalog.pistol,
            quantity=3,
        )
    with database.session() as session:
        assert MarketService().inventory(
            session=session, game_id=game_b, player_id=player_b.player_id
        ) == []

    assert load_player(player_b).money_cash == 1000

    with database.session() as session:
        GameService().delete_game(session=session, game_id=game_a)

    assert not _exists(database, game_a)
    assert _count(database, PlayerSchema, game_a) == 0
    assert _count(database, PlayerResourceSchema, game_a) == 0
    assert _exists(database, game_b)
    assert load_player(player_b).money_cash == 1000
    assert _count(database, PlayerSchema, game_b) == 1


def test_a_player_cannot_be_addressed_through_another_game(
    database: DatabaseService,
    create_game: Callable[..., int],
    make_player: Callable[..., PlayerHandle],
) -> None:
    game_a, game_b = create_game(), create_game()
    player_a = make_player(game_a, money_cash=1000, money_bank=10)

    with pytest.raises(PlayerNotFoundError), database.session() as session:
        BankService().withdraw(
            session=session, game_id=game_b, player_id=player_a.player_id
        )


def test_economy_calls_on_a_dropped_partition_are_terminal(
    database: DatabaseService,
    game_id: int,
    make_player: Callable[..., PlayerHandle],
) -> None:
    player = make_player(game_id, money_bank=50)
    with database.session() as session:
        TenantPartitionManager().drop_partition(session=session, game_id=game_id)

    with pytest.raises(PartitionNotFoundError) as excinfo, database.session() as session:
        BankService().withdraw(session=session, game_id=game_id, player_id=player.player_id)

    assert excinfo.value.detail == {"game_id": game_id}
    assert isinstance(excinfo.value, PartitionError)


def test_dropping_a_missing_partition_is_a_no_op(
    database: DatabaseService, game_id: int
) -> None:
    manager = TenantPartitionManager()
    with database.session() as session:
        manager.drop_partition(session=session, game_id=game_id)
    with database.session() as session:
        manager.drop_partition(session=session, game_id=game_id)

    assert not _exists(database, game_id)


def test_listing_players_skips_games_without_partition(
    database: DatabaseService,
    create_game: Callable[..., int],
    make_user: Callable[..., object],
    make_player: Callable[..., PlayerHandle],
    caplog: pytest.LogCaptureFixture,
) -> None:
    user_id = make_user()
    kept = make_player(create_game(), user_id=user_id)
    dropped = make_player(create_game(), user_id=user_id)
    with database.session() as session:
        TenantPartitionManager().drop_partition(session=session, game_id=dropped.game_id)

    with (
        caplog.at_level(logging.WARNING, logger="syndicate_backend.ledger.games"),
        database.session() as session,
    ):
        players = GameService().list_user_players(session=session, user_id=user_id)

    assert [player.id for player in players] == [kept.player_id]
    assert f"game {dropped.game_id}" in caplog.text


def test_failed_provisioning_rolls_back_game_creation(
    database: DatabaseService,
    catalog: Catalog,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def _fail(self: PartitionRepository, game_id: int) -> None:
        msg = "disk full"
        raise SQLAlchemyError(msg)

    monkeypatch.setattr(PartitionRepository, "add", _fail)
    draft = GameDraft(
        start_date=datetime(2026, 1, 1, tzinfo=UTC),
        length_days=30,
        resource_set_id=catalog.resource_set_id,
    )

    with pytest.raises(PartitionError), database.session() as session:
        GameService().create_game(session=session, draft=draft)

    with database.session() as session:
        assert session.scalar(select(func.count()).select_from(GameSchema)) == 0
