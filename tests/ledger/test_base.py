from __future__ import annotations

from decimal import Decimal

import pytest

from syndicate_backend.ledger import MAX_BALANCE, require_headroom, require_positive
from syndicate_backend.shared.errors import BalanceLimitError, InvalidAmountError


@pytest.mark.parametrize(
    ("value", "expected"),
    [(1, 1), (150, 150), (3.0, 3), (Decimal(7), 7), (MAX_BALANCE, MAX_BALANCE)],
)
def test_require_positive_accepts_whole_positive_numbers(
    value: object, expected: int
) -> None:
    assert require_positive("amount", value) == expected


@pytest.mark.parametrize(
    "value",
    [
        0,
        -1,
        1.5,
        float("nan"),
        float("inf"),
        Decimal("2.5"),
        True,
        "10",
        None,
        MAX_BALANCE + 1,
    ],
)
def test_require_positive_rejects_everything_else(value: object) -> None:
    with pytest.raises(InvalidAmountError) as excinfo:
        require_positive("amount", value)

    assert excinfo.value.detail["field"] == "amount"


def test_require_headroom_allows_filling_a_column_to_its_limit() -> None:
    require_headroom("money_cash", MAX_BALANCE - 5, 5)

    with pytest.raises(BalanceLimitError) as excinfo:
        require_headroom("money_cash", MAX_BALANCE - 5, 6)

    assert excinfo.value.detail == {
        "field": "money_cash",
        "current": MAX_BALANCE - 5,
        "amount": 6,
    }
