"""Read access to the global resource catalog."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Collection, Iterable, Sequence
from dataclasses import dataclass
from uuid import UUID

from sqlalchemy import and_, func, select
from sqlalchemy.orm import Session

from syndicate_backend.database.schemas import (
    PlayerResourceSchema,
    ResourceAttributeValueSchema,
    ResourceSchema,
    ResourceSetItemSchema,
    ResourceTypeAttributeSchema,
    ResourceTypeSchema,
)


@dataclass(slots=True)
class CatalogRow:
    """A catalog resource joined with its type and the player's holding."""

    id: int
    resource_type_id: int
    resource_type_name: str
    name: str
    description: str | None
    player_quantity: int = 0


class CatalogRepository:
    """Query helpers over resources, types, sets and attribute values."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_in_set(
        self,
        resource_set_id: int,
        *,
        player_id: UUID,
        type_names: Collection[str],
    ) -> list[CatalogRow]:
        """Return set members of the given types with the player's quantity."""
        stmt = (
            self._base_query(player_id)
            .join(
                ResourceSetItemSchema,
                ResourceSetItemSchema.resource_id == ResourceSchema.id,
            )
            .where(
                ResourceSetItemSchema.resource_set_id == resource_set_id,
                ResourceTypeSchema.name.in_(list(type_names)),
            )
            .order_by(ResourceTypeSchema.name, ResourceSchema.name)
        )
        return [self._to_row(row) for row in self._session.execute(stmt)]

    def find(
        self,
        resource_ids: Sequence[int],
        *,
        player_id: UUID,
        type_names: Collection[str],
        resource_set_id: int | None = None,
    ) -> list[CatalogRow]:
        """Return the resources among *resource_ids* matching the type filter."""
        if not resource_ids:
            return []
        stmt = self._base_query(player_id).where(
            ResourceSchema.id.in_(list(resource_ids)),
            ResourceTypeSchema.name.in_(list(type_names)),
        )
        if resource_set_id is not None:
            stmt = stmt.join(
                ResourceSetItemSchema,
                and_(
                    ResourceSetItemSchema.resource_id == ResourceSchema.id,
                    ResourceSetItemSchema.resource_set_id == resource_set_id,
                ),
            )
        return [self._to_row(row) for row in self._session.execute(stmt)]

    def attribute_values(
        self, resource_ids: Iterable[int], names: Collection[str]
    ) -> dict[int, dict[str, str]]:
        """Return ``{resource_id: {attribute_name: raw_value}}`` for *names*."""
        ids = list(resource_ids)
        values: dict[int, dict[str, str]] = defaultdict(dict)
        if not ids:
            return values
        stmt = (
            select(
                ResourceAttributeValueSchema.resource_id,
                ResourceTypeAttributeSchema.name,
                ResourceAttributeValueSchema.value,
            )
            .join(
                ResourceTypeAttributeSchema,
                ResourceTypeAttributeSchema.id
                == ResourceAttributeValueSchema.attribute_id,
            )
            .where(
                ResourceAttributeValueSchema.resource_id.in_(ids),
                ResourceTypeAttributeSchema.name.in_(list(names)),
            )
        )
        for resource_id, name, value in self._session.execute(stmt):
            values[resource_id][name] = value
        return values

    @staticmethod
    def _base_query(player_id: UUID):
        return (
            select(
                ResourceSchema.id,
                ResourceSchema.resource_type_id,
                ResourceTypeSchema.name.label("resource_type_name"),
                ResourceSchema.name,
                ResourceSchema.description,
                func.coalesce(PlayerResourceSchema.quantity, 0).label(
                    "player_quantity"
                ),
            )
            .join(
                ResourceTypeSchema,
                ResourceTypeSchema.id == ResourceSchema.resource_type_id,
            )
            .outerjoin(
                PlayerResourceSchema,
                and_(
                    PlayerResourceSchema.resource_id == ResourceSchema.id,
                    PlayerResourceSchema.player_id == player_id,
                ),
            )
        )

    @staticmethod
    def _to_row(row) -> CatalogRow:
        return CatalogRow(
            id=row.id,
            resource_type_id=row.resource_type_id,
            resource_type_name=row.resource_type_name,
            name=row.name,
            description=row.description,
            player_quantity=row.player_quantity,
        )
