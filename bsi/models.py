"""Value records built from BSI API responses."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

__all__ = ["Money", "Statement", "DEFAULT_CURRENCY"]

DEFAULT_CURRENCY = "IDR"


@dataclass(frozen=True, slots=True)
class Money:
    """Amount exactly as the API formats it.

    ``value`` is never parsed: the API returns strings such as ``"1,000.00"``
    whose separators differ between API versions.
    """

    value: Union[int, float, str]
    currency: str = DEFAULT_CURRENCY


@dataclass(frozen=True, slots=True)
class Statement:
    """DTO representing one account statement line item."""

    balance: Money
    amount: Money
    transaction_id: str
    type: str  # "CR" or "DB"
    remark: str
    transaction_date: Optional[str] = None  # raw string, e.g. "31 Jan 2026 05:18"

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Statement":
        currency = str(record.get("ccy") or DEFAULT_CURRENCY)
        date = record.get("date")
        return cls(
            balance=Money(_amount(record.get("balance")), currency),
            amount=Money(_amount(record.get("amount")), currency),
            transaction_id=_text(record.get("ft_number")),
            type=_text(record.get("dbcr")),
            remark=_text(record.get("description")),
            transaction_date=None if date is None else str(date),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "transaction_id": self.transaction_id,
            "type": self.type,
            "remark": self.remark,
            "transaction_date": self.transaction_date,
            "amount": {"value": self.amount.value, "currency": self.amount.currency},
            "balance": {"value": self.balance.value, "currency": self.balance.currency},
        }


def _amount(value: Any) -> Union[int, float, str]:
    if isinstance(value, (int, float, str)) and not isinstance(value, bool):
        return value
    return "" if value is None else str(value)


def _text(value: Any) -> str:
    return "" if value is None else str(value)
