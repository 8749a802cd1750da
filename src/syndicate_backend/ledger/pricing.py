"""Price and recruitment-yield derivation from catalog attributes."""

from __future__ import annotations

import logging
from decimal import ROUND_CEILING, ROUND_HALF_UP, Decimal, InvalidOperation
from typing import TYPE_CHECKING

from pydantic import BaseModel
from pydantic.config import ConfigDict

from syndicate_backend.database import CatalogRepository

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

BUY_MARKUP = Decimal("1.4")

VALUE_ATTRIBUTE = "value"
RECRUIT_MIN_ATTRIBUTE = "recruitmin"
RECRUIT_MAX_ATTRIBUTE = "recruitmax"

_DEFAULTS = {
    VALUE_ATTRIBUTE: 0,
    RECRUIT_MIN_ATTRIBUTE: 1,
    RECRUIT_MAX_ATTRIBUTE: 1,
}


class ResourceAttributes(BaseModel):
    """Typed view over the catalog attributes the economy reads."""

    model_config = ConfigDict(frozen=True)

    value: int = _DEFAULTS[VALUE_ATTRIBUTE]
    recruitmin: int = _DEFAULTS[RECRUIT_MIN_ATTRIBUTE]
    recruitmax: int = _DEFAULTS[RECRUIT_MAX_ATTRIBUTE]

    @classmethod
    def from_raw(cls, raw: Mapping[str, str], *, resource_id: int) -> ResourceAttributes:
        """Parse stored attribute strings, falling back to defaults."""
        parsed = {
            name: _parse_whole_units(raw.get(name), default, name, resource_id)
            for name, default in _DEFAULTS.items()
        }
        return cls(**parsed)


def _parse_whole_units(
    raw: str | None, default: int, name: str, resource_id: int
) -> int:
    if raw is None or not raw.strip():
        return default
    try:
        return int(Decimal(raw.strip()).quantize(Decimal(1), rounding=ROUND_HALF_UP))
    except (InvalidOperation, ValueError):
        logger.warning(
            "Ignoring non-numeric %s=%r on resource %s; using %s",
            name,
            raw,
            resource_id,
            default,
        )
        return default


def sell_price(attributes: ResourceAttributes) -> int:
    """Return what the market pays per unit: the catalog value."""
    return attributes.value


def buy_price(attributes: ResourceAttributes) -> int:
    """Return what the market charges per unit: value plus 40%, rounded up."""
    marked_up = Decimal(sell_price(attributes)) * BUY_MARKUP
    return int(marked_up.to_integral_value(rounding=ROUND_CEILING))


def recruit_bounds(attributes: ResourceAttributes) -> tuple[int, int]:
    """Return the ``(recruitmin, recruitmax)`` multiplier bounds."""
    return attributes.recruitmin, attributes.recruitmax


def divest_cost_per_unit(attributes: ResourceAttributes) -> int:
    """Return the severance paid per personnel unit: half the value, rounded down."""
    return attributes.value // 2


class PricingResolver:
    """Resolve typed attributes for catalog resources."""

    def __init__(self, session: Session) -> None:
        self._catalog = CatalogRepository(session)

    def attributes_for(
        self, resource_ids: Iterable[int]
    ) -> dict[int, ResourceAttributes]:
        """Return attributes for every id in *resource_ids* (defaults when unset)."""
        ids = list(resource_ids)
        raw = self._catalog.attribute_values(ids, tuple(_DEFAULTS))
        return {
            resource_id: ResourceAttributes.from_raw(
                raw.get(resource_id, {}), resource_id=resource_id
            )
            for resource_id in ids
        }

    def attributes(self, resource_id: int) -> ResourceAttributes:
        """Return attributes for a single resource."""
        return self.attributes_for([resource_id])[resource_id]


__all__ = [
    "BUY_MARKUP",
    "PricingResolver",
    "ResourceAttributes",
    "buy_price",
    "divest_cost_per_unit",
    "recruit_bounds",
    "sell_price",
]
