"""Test configuration and fixtures for the backend test suite."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import update

from syndicate_backend.database import (
    DatabaseService,
    PlayerSchema,
    ResourceAttributeValueSchema,
    ResourceSchema,
    ResourceSetItemSchema,
    ResourceSetSchema,
    ResourceTypeAttributeSchema,
    ResourceTypeSchema,
    UserRepository,
    UserSchema,
)
from syndicate_backend.ledger import GameDraft, GameService, PlayerState
from syndicate_backend.settings import get_settings
from syndicate_backend.shared import ResourceCategory

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path
    from uuid import UUID

    from sqlalchemy.orm import Session

START_DATE = datetime(2026, 1, 1, tzinfo=UTC)


@pytest.fixture(autouse=True)
def _mock_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure settings are loaded with predictable values during tests."""
    monkeypatch.setenv("AUTH_SECRET_KEY", "test-secret-key")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@dataclass(slots=True)
class Catalog:
    """Ids of the seeded catalog.

    Everything except ``outsider`` belongs to ``resource_set_id``.
    """

    resource_set_id: int
    crate: int
    sedan: int
    pistol: int
    outsider: int
    thug: int
    bruiser: int


@dataclass(slots=True)
class PlayerHandle:
    game_id: int
    player_id: UUID
    user_id: UUID


def _add_resource(
    session: Session,
    resource_type: ResourceTypeSchema,
    name: str,
    **attributes: str,
) -> int:
    resource = ResourceSchema(resource_type_id=resource_type.id, name=name)
    session.add(resource)
    session.flush()
    by_name = {attribute.name: attribute.id for attribute in resource_type.attributes}
    for attribute_name, value in attributes.items():
        session.add(
            ResourceAttributeValueSchema(
                resource_id=resource.id,
                attribute_id=by_name[attribute_name],
                value=value,
            )
        )
    session.flush()
    return resource.id


def seed_catalog(session: Session) -> Catalog:
    """Create one resource type per category and a handful of resources."""
    types: dict[ResourceCategory, ResourceTypeSchema] = {}
    for category in ResourceCategory:
        resource_type = ResourceTypeSchema(
            name=category.value,
            attributes=[
                ResourceTypeAttributeSchema(name="value", default_value="0"),
                ResourceTypeAttributeSchema(name="recruitmin", default_value="1"),
                ResourceTypeAttributeSchema(name="recruitmax", default_value="1"),
            ],
        )
        session.add(resource_type)
        types[category] = resource_type
    session.flush()

    crate = _add_resource(session, types[ResourceCategory.ITEMS], "Crate", value="7")
    sedan = _add_resource(
        session, types[ResourceCategory.VEHICLES], "Sedan", value="250"
    )
    pistol = _add_resource(
        session, types[ResourceCategory.WEAPONS], "Pistol", value="100"
    )
    outsider = _add_resource(
        session, types[ResourceCategory.WEAPONS], "Rocket Launcher", value="900"
    )
    thug = _add_resource(
        session,
        types[ResourceCategory.ASSOCIATES],
        "Thug",
        value="100",
        recruitmin="1",
        recruitmax="3",
    )
    bruiser = _add_resource(
        session,
        types[ResourceCategory.ENFORCERS],
        "Bruiser",
        value="50",
        recruitmin="2",
        recruitmax="2",
    )

    resource_set = ResourceSetSchema(name="Standard")
    session.add(resource_set)
    session.flush()
    for resource_id in (crate, sedan, pistol, thug, bruiser):
        session.add(
            ResourceSetItemSchema(
                resource_set_id=resource_set.id, resource_id=resource_id
            )
        )
    session.flush()
    return Catalog(
        resource_set_id=resource_set.id,
        crate=crate,
        sedan=sedan,
        pistol=pistol,
        outsider=outsider,
        thug=thug,
        bruiser=bruiser,
    )


@pytest.fixture
def database(tmp_path: Path) -> Iterator[DatabaseService]:
    """File-backed SQLite database with every table created."""
    service = DatabaseService(f"sqlite:///{tmp_path / 'ledger.db'}", echo=False)
    service.create_all()
    yield service
    service.engine.dispose()


@pytest.fixture
def catalog(database: DatabaseService) -> Catalog:
    with database.session() as session:
        return seed_catalog(session)


@pytest.fixture
def create_game(database: DatabaseService, catalog: Catalog) -> Callable[..., int]:
    """Return a factory creating games over the seeded resource set."""

    def _create(**overrides: object) -> int:
        values: dict[str, object] = {
            "start_date": START_DATE,
            "length_days": 30,
            "resource_set_id": catalog.resource_set_id,
            "starting_reserve": 20,
            "starting_bank": 0,
        }
        values.update(overrides)
        with database.session() as session:
            game = GameService().create_game(session=session, draft=GameDraft(**values))
            return game.id

    return _create


@pytest.fixture
def game_id(create_game: Callable[..., int]) -> int:
    return create_game()


@pytest.fixture
def make_user(database: DatabaseService) -> Callable[..., UUID]:
    counter = itertools.count(1)

    def _make(*, turns: int = 0, is_admin: bool = False) -> UUID:
        with database.session() as session:
            user = UserRepository(session).add(
                UserSchema(
                    nickname=f"user{next(counter)}", turns=turns, is_admin=is_admin
                )
            )
            return user.id

    return _make


@pytest.fixture
def make_player(
    database: DatabaseService, make_user: Callable[..., UUID]
) -> Callable[..., PlayerHandle]:
    """Return a factory joining a fresh (or given) user and setting balances."""
    counter = itertools.count(1)

    def _make(
        game_id: int,
        *,
        user_id: UUID | None = None,
        user_turns: int = 0,
        **balances: int,
    ) -> PlayerHandle:
        if user_id is None:
            user_id = make_user(turns=user_turns)
        with database.session() as session:
            player = GameService().join_game(
                session=session,
                game_id=game_id,
                user_id=user_id,
                name=f"player{next(counter)}",
            )
            if balances:
                session.execute(
                    update(PlayerSchema)
                    .where(PlayerSchema.id == player.id)
                    .values(**balances)
                )
        return PlayerHandle(game_id=game_id, player_id=player.id, user_id=user_id)

    return _make


@pytest.fixture
def load_player(database: DatabaseService) -> Callable[[PlayerHandle], PlayerState]:
    def _load(handle: PlayerHandle) -> PlayerState:
        with database.session() as session:
            return GameService().get_player(
                session=session, game_id=handle.game_id, player_id=handle.player_id
            )

    return _load
