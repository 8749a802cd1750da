"""Per-game economic ledger: partitions, banking, trading, personnel and turns."""

from syndicate_backend.ledger.banking import BankService, deposit_cap
from syndicate_backend.ledger.base import (
    MAX_BALANCE,
    LedgerService,
    require_headroom,
    require_positive,
)
from syndicate_backend.ledger.games import GameDraft, GameService
from syndicate_backend.ledger.marketplace import ALL_TYPES_FILTER, MarketService
from syndicate_backend.ledger.models import (
    AccountTransferResult,
    BankBalances,
    DivestResult,
    InventoryEntry,
    MarketResource,
    PersonnelResource,
    PlayerState,
    RecruitmentResult,
    TradeResult,
    UserState,
)
from syndicate_backend.ledger.partitions import TenantPartitionManager
from syndicate_backend.ledger.personnel import PersonnelService, recruited_quantity
from syndicate_backend.ledger.pricing import (
    BUY_MARKUP,
    PricingResolver,
    ResourceAttributes,
    buy_price,
    divest_cost_per_unit,
    recruit_bounds,
    sell_price,
)
from syndicate_backend.ledger.turns import TurnService

__all__ = [
    "ALL_TYPES_FILTER",
    "BUY_MARKUP",
    "MAX_BALANCE",
    "AccountTransferResult",
    "BankBalances",
    "BankService",
    "DivestResult",
    "GameDraft",
    "GameService",
    "InventoryEntry",
    "LedgerService",
    "MarketResource",
    "MarketService",
    "PersonnelResource",
    "PersonnelService",
    "PlayerState",
    "PricingResolver",
    "RecruitmentResult",
    "ResourceAttributes",
    "TenantPartitionManager",
    "TradeResult",
    "TurnService",
    "UserState",
    "buy_price",
    "deposit_cap",
    "divest_cost_per_unit",
    "recruit_bounds",
    "recruited_quantity",
    "require_headroom",
    "require_positive",
    "sell_price",
]
