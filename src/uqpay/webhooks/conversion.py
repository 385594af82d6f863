"""
Conversion webhook payloads (``conversion.*``).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from uqpay.webhooks.base import WebhookPayload, get_str
from uqpay.webhooks.event_types import CONVERSION_EVENTS


class ConversionStatus(str, Enum):
    TRADE_SETTLED = "TRADE_SETTLED"
    AWAITING_FUNDS = "AWAITING_FUNDS"
    FUNDS_ARRIVED = "FUNDS_ARRIVED"
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    CANCELED = "CANCELED"
    FAILED = "FAILED"


class ConversionWay(str, Enum):
    API = "API"
    WEB = "WEB"


@dataclass
class ConversionData(WebhookPayload):
    """
    Currency conversion payload.

    Amounts and the client rate are decimal strings as sent by the API
    (e.g. sell_amount="100", buy_amount="38.51").
    """

    EVENT_TYPES = CONVERSION_EVENTS
    CATEGORY = "conversion"

    account_id: str = ""
    account_name: str = ""
    buy_amount: str = ""
    buy_currency: str = ""
    client_rate: str = ""
    conversion_id: str = ""
    conversion_status: str = ""
    conversion_way: str = ""
    create_time: str = ""
    creator: str = ""
    direct_id: str = ""
    sell_amount: str = ""
    sell_currency: str = ""
    settle_time: str = ""
    short_reference_id: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ConversionData:
        return cls(
            account_id=get_str(data, "account_id"),
            account_name=get_str(data, "account_name"),
            buy_amount=get_str(data, "buy_amount"),
            buy_currency=get_str(data, "buy_currency"),
            client_rate=get_str(data, "client_rate"),
            conversion_id=get_str(data, "conversion_id"),
            conversion_status=get_str(data, "conversion_status"),
            conversion_way=get_str(data, "conversion_way"),
            create_time=get_str(data, "create_time"),
            creator=get_str(data, "creator"),
            direct_id=get_str(data, "direct_id"),
            sell_amount=get_str(data, "sell_amount"),
            sell_currency=get_str(data, "sell_currency"),
            settle_time=get_str(data, "settle_time"),
            short_reference_id=get_str(data, "short_reference_id"),
        )

    def is_settled(self) -> bool:
        return self.conversion_status == ConversionStatus.TRADE_SETTLED.value
