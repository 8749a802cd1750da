"""Marketplace: buy and sell catalog resources for cash.

Only resources in the game's resource set whose type is one of
:data:`MARKET_CATEGORIES` are tradable. Buying costs the marked-up price and
selling pays the catalog value, so a round trip always loses money.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from syndicate_backend.database import (
    CatalogRepository,
    CatalogRow,
    GameRepository,
    PlayerResourceRepository,
    PlayerSchema,
)
from syndicate_backend.ledger.base import (
    LedgerService,
    require_headroom,
    require_positive,
)
from syndicate_backend.ledger.models import InventoryEntry, MarketResource, TradeResult
from syndicate_backend.ledger.pricing import PricingResolver, buy_price, sell_price
from syndicate_backend.shared import MARKET_CATEGORIES
from syndicate_backend.shared.errors import (
    GameNotFoundError,
    InsufficientFundsError,
    InsufficientQuantityError,
    ResourceNotAvailableError,
)

if TYPE_CHECKING:
    from collections.abc import Iterable
    from uuid import UUID

    from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

ALL_TYPES_FILTER = "everything"


class MarketService(LedgerService):
    """Listing, buying and selling of market resources."""

    def list_resources(
        self,
        *,
        session: Session,
        game_id: int,
        player_id: UUID,
        type_filter: str | None = None,
    ) -> list[MarketResource]:
        """Return the game's tradable resources with prices and the player's holdings."""
        self._partitions.require_partition(session=session, game_id=game_id)
        resource_set_id = _resource_set_id(session, game_id)
        if resource_set_id is None:
            return []
        type_names = [category.value for category in MARKET_CATEGORIES]
        if type_filter and type_filter != ALL_TYPES_FILTER:
            type_names = [name for name in type_names if name == type_filter]
            if not type_names:
                return []
        rows = CatalogRepository(session).list_in_set(
            resource_set_id, player_id=player_id, type_names=type_names
        )
        return self._price(session, rows)

    def inventory(
        self, *, session: Session, game_id: int, player_id: UUID
    ) -> list[InventoryEntry]:
        """Return the player's positive holdings ordered by resource id."""
        self._partitions.require_partition(session=session, game_id=game_id)
        holdings = PlayerResourceRepository(session, game_id).list_owned(player_id)
        return [InventoryEntry.model_validate(holding) for holding in holdings]

    def buy(
        self,
        *,
        session: Session,
        game_id: int,
        player_id: UUID,
        resource_id: int,
        quantity: object,
    ) -> TradeResult:
        """Debit ``buy_price * quantity`` and add *quantity* to the holding."""
        quantity = require_positive("quantity", quantity)
        players, player = self._lock_player(session, game_id, player_id)
        resource = self._resolve(session, game_id, player_id, resource_id)

        total_cost = resource.buy_price * quantity
        if player.money_cash < total_cost:
            raise InsufficientFundsError(
                requested=total_cost, available=player.money_cash
            )
        holdings = PlayerResourceRepository(session, game_id)
        require_headroom(
            "quantity", holdings.quantity(player_id, resource_id, lock=True), quantity
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
        holding = holdings.increment(player_id, resource_id, quantity)
        logger.info(
            "Player %s bought %d x %s for %d in game %s",
            player_id,
            quantity,
            resource.name,
            total_cost,
            game_id,
        )
        return TradeResult(player_quantity=holding, money_cash=updated.money_cash)

    def sell(
        self,
        *,
        session: Session,
        game_id: int,
        player_id: UUID,
        resource_id: int,
        quantity: object,
    ) -> TradeResult:
        """Remove *quantity* from the holding and credit ``sell_price * quantity``."""
        quantity = require_positive("quantity", quantity)
        players, player = self._lock_player(session, game_id, player_id)
        resource = self._resolve(session, game_id, player_id, resource_id)
        holdings = PlayerResourceRepository(session, game_id)

        owned = holdings.quantity(player_id, resource_id, lock=True)
        if owned < quantity:
            raise InsufficientQuantityError(requested=quantity, available=owned)
        revenue = resource.sell_price * quantity
        require_headroom("money_cash", player.money_cash, revenue)

        remaining = holdings.decrement(player_id, resource_id, quantity)
        if remaining is None:
            raise InsufficientQuantityError(requested=quantity, available=owned)
        updated = players.apply(
            player_id, money_cash=PlayerSchema.money_cash + revenue
        )
        logger.info(
            "Player %s sold %d x %s for %d in game %s",
            player_id,
            quantity,
            resource.name,
            revenue,
            game_id,
        )
        return TradeResult(player_quantity=remaining, money_cash=updated.money_cash)

    def _resolve(
        self, session: Session, game_id: int, player_id: UUID, resource_id: int
    ) -> MarketResource:
        resource_set_id = _resource_set_id(session, game_id)
        rows = []
        if resource_set_id is not None:
            rows = CatalogRepository(session).find(
                [resource_id],
                player_id=player_id,
                type_names=[category.value for category in MARKET_CATEGORIES],
                resource_set_id=resource_set_id,
            )
        if not rows:
            raise ResourceNotAvailableError(
                "Resource not found or not available in marketplace",
                resource_id=resource_id,
            )
        return self._price(session, rows)[0]

    @staticmethod
    def _price(session: Session, rows: Iterable[CatalogRow]) -> list[MarketResource]:
        rows = list(rows)
        attributes = PricingResolver(session).attributes_for(row.id for row in rows)
        return [
            MarketResource(
                id=row.id,
                resource_type_id=row.resource_type_id,
                resource_type_name=row.resource_type_name,
                name=row.name,
                description=row.description,
                buy_price=buy_price(attributes[row.id]),
                sell_price=sell_price(attributes[row.id]),
                player_quantity=row.player_quantity,
            )
            for row in rows
        ]


def _resource_set_id(session: Session, game_id: int) -> int | None:
    game = GameRepository(session).get_by_id(game_id)
    if game is None:
        raise GameNotFoundError(game_id)
    return game.resource_set_id


__all__ = ["ALL_TYPES_FILTER", "MarketService"]
