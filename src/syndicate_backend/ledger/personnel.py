"""Personnel: recruit Associates and Enforcers with turns, divest them for a fee.

Recruitment yield is random. For each selected resource a multiplier is drawn
uniformly from ``[recruitmin, recruitmax]`` and the resource receives
``ceil(turns * multiplier / len(resource_ids))`` units. The active-turn cost is
charged once, however many resources are selected.

Divesting is not a sale: the player pays ``floor(value / 2)`` per unit released.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from syndicate_backend.database import (
    CatalogRepository,
    GameRepository,
    PlayerResourceRepository,
    PlayerSchema,
)
from syndicate_backend.ledger.base import (
    LedgerService,
    require_headroom,
    require_positive,
)
from syndicate_backend.ledger.models import (
    DivestedPlayerCash,
    DivestResult,
    PersonnelResource,
    RecruitedPlayerTurns,
    RecruitedUnits,
    RecruitmentResult,
)
from syndicate_backend.ledger.pricing import (
    PricingResolver,
    divest_cost_per_unit,
    recruit_bounds,
)
from syndicate_backend.shared import PERSONNEL_CATEGORIES, RandomService
from syndicate_backend.shared.errors import (
    GameNotFoundError,
    InsufficientFundsError,
    InsufficientQuantityError,
    InsufficientTurnsError,
    ResourceNotAvailableError,
    ValidationError,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from uuid import UUID

    from sqlalchemy.orm import Session

    from syndicate_backend.ledger.partitions import TenantPartitionManager

logger = logging.getLogger(__name__)

_PERSONNEL_TYPE_NAMES = tuple(category.value for category in PERSONNEL_CATEGORIES)


def recruited_quantity(turns: int, multiplier: float, resource_count: int) -> int:
    """Return the units gained for one resource of a recruitment."""
    return math.ceil(turns * multiplier / resource_count)


class PersonnelService(LedgerService):
    """Recruitment and divestment of personnel resources."""

    def __init__(
        self,
        *,
        rng: RandomService | None = None,
        partitions: TenantPartitionManager | None = None,
    ) -> None:
        super().__init__(partitions=partitions)
        self._rng = rng or RandomService()

    def list_personnel(
        self, *, session: Session, game_id: int, player_id: UUID
    ) -> list[PersonnelResource]:
        """Return recruitable personnel in the game's set, ordered by type then value."""
        self._partitions.require_partition(session=session, game_id=game_id)
        game = GameRepository(session).get_by_id(game_id)
        if game is None:
            raise GameNotFoundError(game_id)
        if game.resource_set_id is None:
            return []
        rows = CatalogRepository(session).list_in_set(
            game.resource_set_id, player_id=player_id, type_names=_PERSONNEL_TYPE_NAMES
        )
        attributes = PricingResolver(session).attributes_for(row.id for row in rows)
        resources = [
            PersonnelResource(
                id=row.id,
                resource_type_id=row.resource_type_id,
                resource_type_name=row.resource_type_name,
                name=row.name,
                description=row.description,
                value=attributes[row.id].value,
                recruitmin=attributes[row.id].recruitmin,
                recruitmax=attributes[row.id].recruitmax,
                player_quantity=row.player_quantity,
            )
            for row in rows
        ]
        return sorted(resources, key=lambda item: (item.resource_type_name, item.value))

    def recruit(
        self,
        *,
        session: Session,
        game_id: int,
        player_id: UUID,
        resource_ids: Sequence[int],
        turns: object,
    ) -> RecruitmentResult:
        """Spend *turns* active turns recruiting into every resource in *resource_ids*."""
        turns = require_positive("turns", turns)
        resource_ids = list(resource_ids)
        if not resource_ids:
            msg = "Must select at least one resource"
            raise ValidationError(msg, resource_ids=resource_ids)
        if len(set(resource_ids)) != len(resource_ids):
            msg = "Each resource may be selected only once"
            raise ValidationError(msg, resource_ids=resource_ids)

        players, player = self._lock_player(session, game_id, player_id)
        if player.turns_active < turns:
            raise InsufficientTurnsError(
                "active", requested=turns, available=player.turns_active
            )

        rows = CatalogRepository(session).find(
            resource_ids, player_id=player_id, type_names=_PERSONNEL_TYPE_NAMES
        )
        if len(rows) != len(resource_ids):
            found = {row.id for row in rows}
            raise ResourceNotAvailableError(
                "One or more selected resources are not valid personnel types",
                invalid_ids=[rid for rid in resource_ids if rid not in found],
            )

        by_id = {row.id: row for row in rows}
        attributes = PricingResolver(session).attributes_for(resource_ids)
        holdings = PlayerResourceRepository(session, game_id)
        recruited: list[RecruitedUnits] = []
        for resource_id in resource_ids:
            low, high = recruit_bounds(attributes[resource_id])
            multiplier = self._rng.uniform(low, high)
            quantity = recruited_quantity(turns, multiplier, len(resource_ids))
            if quantity <= 0:
                continue
            require_headroom(
                "quantity", holdings.quantity(player_id, resource_id, lock=True), quantity
            )
            holdings.increment(player_id, resource_id, quantity)
            recruited.append(
                RecruitedUnits(
                    resource_id=resource_id,
                    resource_name=by_id[resource_id].name,
                    quantity=quantity,
                )
            )

        updated = players.apply(
            player_id,
            PlayerSchema.turns_active >= turns,
            turns_active=PlayerSchema.turns_active - turns,
        )
        if updated is None:
            raise InsufficientTurnsError(
                "active", requested=turns, available=player.turns_active
            )
        logger.info(
            "Player %s spent %d turns recruiting %s in game %s",
            player_id,
            turns,
            {unit.resource_name: unit.quantity for unit in recruited},
            game_id,
        )
        return RecruitmentResult(
            turns_used=turns,
            recruited=tuple(recruited),
            player=RecruitedPlayerTurns(
                turns_active=updated.turns_active,
                turns_reserve=updated.turns_reserve,
            ),
        )

    def divest(
        self,
        *,
        session: Session,
        game_id: int,
        player_id: UUID,
        resource_id: int,
        quantity: object,
    ) -> DivestResult:
        """Release *quantity* units, paying half their value per unit."""
        quantity = require_positive("quantity", quantity)
        players, player = self._lock_player(session, game_id, player_id)
        rows = CatalogRepository(session).find(
            [resource_id], player_id=player_id, type_names=_PERSONNEL_TYPE_NAMES
        )
        if not rows:
            raise ResourceNotAvailableError(
                "Resource not found or is not a personnel type",
                resource_id=resource_id,
            )
        resource = rows[0]
        cost_per_unit = divest_cost_per_unit(
            PricingResolver(session).attributes(resource_id)
        )
        total_cost = cost_per_unit * quantity

        holdings = PlayerResourceRepository(session, game_id)
        owned = holdings.quantity(player_id, resource_id, lock=True)
        if owned < quantity:
            raise InsufficientQuantityError(requested=quantity, available=owned)
        if player.money_cash < total_cost:
            raise InsufficientFundsError(
                requested=total_cost, available=player.money_cash
            )

        updated = players.apply(
            player_id,
            PlayerSchema.money_cash >= total_cost,
            money_cash=PlayerSchema.money_cash - total_cost,
        )
        if updated is None:
            raise InsufficientFundsError(
                requested=total_cost, available=player.money_cash
            )
        if holdings.decrement(player_id, resource_id, quantity) is None:
            raise InsufficientQuantityError(requested=quantity, available=owned)
        logger.info(
            "Player %s divested %d x %s for %d in game %s",
            player_id,
            quantity,
            resource.name,
            total_cost,
            game_id,
        )
        return DivestResult(
            resource_id=resource_id,
            resource_name=resource.name,
            quantity_divested=quantity,
            cash_received=-total_cost,
            player=DivestedPlayerCash(money_cash=updated.money_cash),
        )


__all__ = ["PersonnelService", "recruited_quantity"]
