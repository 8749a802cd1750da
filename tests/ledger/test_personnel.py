from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from syndicate_backend.database import PlayerResourceRepository
from syndicate_backend.ledger import PersonnelService, recruited_quantity
from syndicate_backend.shared import RandomService
from syndicate_backend.shared.errors import (
    InsufficientFundsError,
    InsufficientQuantityError,
    InsufficientTurnsError,
    InvalidAmountError,
    ResourceNotAvailableError,
    ValidationError,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from conftest import Catalog, PlayerHandle

    from syndicate_backend.database import DatabaseService
    from syndicate_backend.ledger import (
        DivestResult,
        PersonnelResource,
        PlayerState,
        RecruitmentResult,
    )


class FixedRandom(RandomService):
    """Always draws the low (``fraction=0``) or high (``fraction=1``) bound."""

    def __init__(self, fraction: float) -> None:
        super().__init__(seed=0)
        self._fraction = fraction

    def uniform(self, low: float, high: float) -> float:
        return low + (high - low) * self._fraction


@pytest.fixture
def recruit(database: DatabaseService) -> Callable[..., RecruitmentResult]:
    def _recruit(
        handle: PlayerHandle,
        resource_ids: Sequence[int],
        turns: object,
        *,
        rng: RandomService | None = None,
    ) -> RecruitmentResult:
        with database.session() as session:
            return PersonnelService(rng=rng).recruit(
                session=session,
                game_id=handle.game_id,
                player_id=handle.player_id,
                resource_ids=resource_ids,
                turns=turns,
            )

    return _recruit


@pytest.fixture
def divest(database: DatabaseService) -> Callable[..., DivestResult]:
    def _divest(handle: PlayerHandle, resource_id: int, quantity: object) -> DivestResult:
        with database.session() as session:
            return PersonnelService().divest(
                session=session,
                game_id=handle.game_id,
                player_id=handle.player_id,
                resource_id=resource_id,
                quantity=quantity,
            )

    return _divest


@pytest.fixture
def give(database: DatabaseService) -> Callable[[PlayerHandle, int, int], None]:
    def _give(handle: PlayerHandle, resource_id: int, quantity: int) -> None:
        with database.session() as session:
            PlayerResourceRepository(session, handle.game_id).increment(
                handle.player_id, resource_id, quantity
            )

    return _give


@pytest.fixture
def owned(database: DatabaseService) -> Callable[[PlayerHandle, int], int]:
    def _owned(handle: PlayerHandle, resource_id: int) -> int:
        with database.session() as session:
            return PlayerResourceRepository(session, handle.game_id).quantity(
                handle.player_id, resource_id
            )

    return _owned


@pytest.mark.parametrize(
    ("turns", "multiplier", "count", "expected"),
    [(10, 1.0, 1, 10), (10, 3.0, 1, 30), (10, 1.0, 3, 4), (7, 1.5, 2, 6), (1, 0.1, 1, 1)],
)
def test_recruited_quantity_rounds_up(
    turns: int, multiplier: float, count: int, expected: int
) -> None:
    assert recruited_quantity(turns, multiplier, count) == expected


@pytest.mark.parametrize(("fraction", "expected"), [(0.0, 10), (1.0, 30)])
def test_recruitment_yield_hits_bounds(
    fraction: float,
    expected: int,
    game_id: int,
    catalog: Catalog,
    make_player: Callable[..., PlayerHandle],
    load_player: Callable[[PlayerHandle], PlayerState],
    recruit: Callable[..., RecruitmentResult],
) -> None:
    player = make_player(game_id, turns_active=25, turns_reserve=4)

    result = recruit(player, [catalog.thug], 10, rng=FixedRandom(fraction))

    assert result.turns_used == 10
    assert [(unit.resource_id, unit.resource_name, unit.quantity) for unit in result.recruited] == [
        (catalog.thug, "Thug", expected)
    ]
    assert (result.player.turns_active, result.player.turns_reserve) == (15, 4)
    assert load_player(player).turns_active == 15


@pytest.mark.parametrize("seed", range(5))
def test_recruitment_yield_stays_within_bounds(
    seed: int,
    game_id: int,
    catalog: Catalog,
    make_player: Callable[..., PlayerHandle],
    owned: Callable[[PlayerHandle, int], int],
    recruit: Callable[..., RecruitmentResult],
) -> None:
    player = make_player(game_id, turns_active=10)

    result = recruit(player, [catalog.thug], 10, rng=RandomService(seed))

    assert 10 <= result.recruited[0].quantity <= 30
    assert owned(player, catalog.thug) == result.recruited[0].quantity
    assert result.player.turns_active == 0


def test_turn_cost_is_charged_once_for_several_resources(
    game_id: int,
    catalog: Catalog,
    make_player: Callable[..., PlayerHandle],
    owned: Callable[[PlayerHandle, int], int],
    recruit: Callable[..., RecruitmentResult],
) -> None:
    player = make_player(game_id, turns_active=10)

    result = recruit(player, [catalog.thug, catalog.bruiser], 10, rng=FixedRandom(0.0))

    assert {unit.resource_id: unit.quantity for unit in result.recruited} == {
        catalog.thug: 5,
        catalog.bruiser: 10,
    }
    assert result.player.turns_active == 0
    assert owned(player, catalog.thug) == 5
    assert owned(player, catalog.bruiser) == 10


def test_recruitment_response_uses_camel_case_aliases(
    game_id: int,
    catalog: Catalog,
    make_player: Callable[..., PlayerHandle],
    recruit: Callable[..., RecruitmentResult],
) -> None:
    player = make_player(game_id, turns_active=3)

    payload = recruit(player, [catalog.bruiser], 3, rng=FixedRandom(0.5)).model_dump(
        mode="json", by_alias=True
    )

    assert payload == {
        "turnsUsed": 3,
        "recruited": [{"resourceId": catalog.bruiser, "resourceName": "Bruiser", "quantity": 6}],
        "player": {"turns_active": 0, "turns_reserve": 20},
    }


def test_recruiting_without_enough_active_turns_fails(
    game_id: int,
    catalog: Catalog,
    make_player: Callable[..., PlayerHandle],
    owned: Callable[[PlayerHandle, int], int],
    recruit: Callable[..., RecruitmentResult],
) -> None:
    player = make_player(game_id, turns_active=9, turns_reserve=100)

    with pytest.raises(InsufficientTurnsError) as excinfo:
        recruit(player, [catalog.thug], 10)

    assert excinfo.value.detail == {"requested": 10, "available": 9, "pool": "active"}
    assert owned(player, catalog.thug) == 0


def test_recruiting_a_non_personnel_resource_changes_nothing(
    game_id: int,
    catalog: Catalog,
    make_player: Callable[..., PlayerHandle],
    load_player: Callable[[PlayerHandle], PlayerState],
    owned: Callable[[PlayerHandle, int], int],
    recruit: Callable[..., RecruitmentResult],
) -> None:
    player = make_player(game_id, turns_active=10)

    with pytest.raises(ResourceNotAvailableError) as excinfo:
        recruit(player, [catalog.thug, catalog.pistol], 10)

    assert excinfo.value.detail["invalid_ids"] == [catalog.pistol]
    assert load_player(player).turns_active == 10
    assert owned(player, catalog.thug) == 0


@pytest.mark.parametrize("resource_ids", [[], "duplicate"])
def test_recruit_requires_distinct_selection(
    resource_ids: list[int] | str,
    game_id: int,
    catalog: Catalog,
    make_player: Callable[..., PlayerHandle],
    recruit: Callable[..., RecruitmentResult],
) -> None:
    player = make_player(game_id, turns_active=10)
    if resource_ids == "duplicate":
        resource_ids = [catalog.thug, catalog.thug]

    with pytest.raises(ValidationError):
        recruit(player, resource_ids, 5)


def test_recruit_rejects_non_positive_turns(
    game_id: int,
    catalog: Catalog,
    make_player: Callable[..., PlayerHandle],
    recruit: Callable[..., RecruitmentResult],
) -> None:
    player = make_player(game_id, turns_active=10)

    with pytest.raises(InvalidAmountError):
        recruit(player, [catalog.thug], 0)


def test_divest_charges_half_value_per_unit(
    game_id: int,
    catalog: Catalog,
    make_player: Callable[..., PlayerHandle],
    owned: Callable[[PlayerHandle, int], int],
    give: Callable[[PlayerHandle, int, int], None],
    divest: Callable[..., DivestResult],
) -> None:
    player = make_player(game_id, money_cash=500)
    give(player, catalog.thug, 4)

    result = divest(player, catalog.thug, 4)

    assert result.quantity_divested == 4
    assert result.cash_received == -200
    assert result.player.money_cash == 300
    assert result.model_dump(by_alias=True)["cashReceived"] == -200
    assert owned(player, catalog.thug) == 0


def test_divest_without_enough_cash_fails(
    game_id: int,
    catalog: Catalog,
    make_player: Callable[..., PlayerHandle],
    owned: Callable[[PlayerHandle, int], int],
    give: Callable[[PlayerHandle, int, int], None],
    divest: Callable[..., DivestResult],
) -> None:
    player = make_player(game_id, money_cash=199)
    give(player, catalog.thug, 4)

    with pytest.raises(InsufficientFundsError) as excinfo:
        divest(player, catalog.thug, 4)

    assert excinfo.value.detail["shortfall"] == 1
    assert owned(player, catalog.thug) == 4


def test_divest_more_than_owned_fails(
    game_id: int,
    catalog: Catalog,
    make_player: Callable[..., PlayerHandle],
    give: Callable[[PlayerHandle, int, int], None],
    divest: Callable[..., DivestResult],
) -> None:
    player = make_player(game_id, money_cash=10_000)
    give(player, catalog.bruiser, 2)

    with pytest.raises(InsufficientQuantityError):
        divest(player, catalog.bruiser, 3)


def test_divest_rejects_market_resources(
    game_id: int,
    catalog: Catalog,
    make_player: Callable[..., PlayerHandle],
    give: Callable[[PlayerHandle, int, int], None],
    divest: Callable[..., DivestResult],
) -> None:
    player = make_player(game_id, money_cash=10_000)
    give(player, catalog.pistol, 2)

    with pytest.raises(ResourceNotAvailableError):
        divest(player, catalog.pistol, 1)


def test_personnel_listing_orders_by_type_then_value(
    database: DatabaseService,
    game_id: int,
    catalog: Catalog,
    make_player: Callable[..., PlayerHandle],
    give: Callable[[PlayerHandle, int, int], None],
) -> None:
    player = make_player(game_id)
    give(player, catalog.bruiser, 3)

    with database.session() as session:
        resources: list[PersonnelResource] = PersonnelService().list_personnel(
            session=session, game_id=game_id, player_id=player.player_id
        )

    assert [
        (item.name, item.value, item.recruitmin, item.recruitmax, item.player_quantity)
        for item in resources
    ] == [("Thug", 100, 1, 3, 0), ("Bruiser", 50, 2, 2, 3)]
