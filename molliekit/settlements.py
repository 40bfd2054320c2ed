"""Settlements: payouts that bundle payments, refunds, captures and chargebacks."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Mapping

_TIMESTAMP = re.compile(
    r"^(?P<base>\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<zone>[Zz]|[+-]\d{2}:\d{2})$"
)


def _parse_timestamp(value: str | None) -> datetime | None:
    if value is None:
        return None
    match = _TIMESTAMP.match(value)
    if match is None:
        raise ValueError(f"invalid timestamp: {value!r}")
    fraction = (match["fraction"] or "")[:6].ljust(6, "0")
    zone = "+00:00" if match["zone"] in ("Z", "z") else match["zone"]
    base = match["base"].replace("t", "T")
    return datetime.fromisoformat(f"{base}.{fraction}{zone}")


def _decode_object(content: bytes | str) -> dict[str, Any] | None:
    data = json.loads(content)
    if data is not None and not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


def _text(value: Any) -> str:
    return value.value if isinstance(value, Enum) else str(value)


def _optional_dict(value: Any) -> dict[str, Any] | None:
    return dict(value) if value is not None else None


class SettlementStatus(str, Enum):
    """Status of a settlement."""

    OPEN = "open"
    PENDING = "pending"
    PAID_OUT = "paidout"
    FAILED = "failed"

    def __str__(self) -> str:
        return self.value


def _status(value: str | None) -> SettlementStatus | str:
    if not value:
        return ""
    try:
        return SettlementStatus(value)
    except ValueError:
        return value


@dataclass
class SettlementRevenue:
    """Total revenue of one payment method during a period."""

    count: int = 0
    description: str = ""
    amount_net: dict[str, Any] | None = None
    amount_vat: dict[str, Any] | None = None
    amount_gross: dict[str, Any] | None = None
    method: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SettlementRevenue:
        return cls(
            count=data.get("count") or 0,
            description=data.get("description") or "",
            amount_net=_optional_dict(data.get("amountNet")),
            amount_vat=_optional_dict(data.get("amountVat")),
            amount_gross=_optional_dict(data.get("amountGross")),
            method=data.get("method") or "",
        )


@dataclass
class SettlementCosts:
    """Costs related to a settlement."""

    count: int = 0
    description: str = ""
    invoice_id: str = ""
    amount_net: dict[str, Any] | None = None
    amount_vat: dict[str, Any] | None = None
    amount_gross: dict[str, Any] | None = None
    rate: dict[str, Any] | None = None
    method: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SettlementCosts:
        return cls(
            count=data.get("count") or 0,
            description=data.get("description") or "",
            invoice_id=data.get("invoiceId") or "",
            amount_net=_optional_dict(data.get("amountNet")),
            amount_vat=_optional_dict(data.get("amountVat")),
            amount_gross=_optional_dict(data.get("amountGross")),
            rate=_optional_dict(data.get("rate")),
            method=data.get("method") or "",
        )


@dataclass
class SettlementPeriod:
    """A settlement month in full detail."""

    invoice_id: str = ""
    invoice_reference: str = ""
    revenue: list[SettlementRevenue] = field(default_factory=list)
    costs: list[SettlementCosts] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SettlementPeriod:
        return cls(
            invoice_id=data.get("invoiceId") or "",
            invoice_reference=data.get("invoiceReference") or "",
            revenue=[SettlementRevenue.from_dict(item) for item in data.get("revenue") or []],
            costs=[SettlementCosts.from_dict(item) for item in data.get("costs") or []],
        )


@dataclass
class SettlementLinks:
    """Links relevant to a settlement."""

    self_url: Mapping[str, Any] | None = None
    payments: Mapping[str, Any] | None = None
    refunds: Mapping[str, Any] | None = None
    chargebacks: Mapping[str, Any] | None = None
    captures: Mapping[str, Any] | None = None
    invoice: Mapping[str, Any] | None = None
    documentation: Mapping[str, Any] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SettlementLinks:
        return cls(
            self_url=data.get("self"),
            payments=data.get("payments"),
            refunds=data.get("refunds"),
            chargebacks=data.get("chargebacks"),
            captures=data.get("captures"),
            invoice=data.get("invoice"),
            documentation=data.get("documentation"),
        )


def _periods(data: Any) -> dict[str, dict[str, SettlementPeriod]] | None:
    if data is None:
        return None
    return {
        year: {month: SettlementPeriod.from_dict(period) for month, period in months.items()}
        for year, months in data.items()
    }


@dataclass
class Settlement:
    """Successful payments bundled with refunds, captures and chargebacks.

    ``periods`` maps a year to its months and each month to its period.
    """

    id: str = ""
    resource: str = ""
    reference: str = ""
    invoice_id: str = ""
    created_at: datetime | None = None
    settled_at: datetime | None = None
    amount: dict[str, Any] | None = None
    periods: dict[str, dict[str, SettlementPeriod]] | None = None
    status: SettlementStatus | str = ""
    links: SettlementLinks = field(default_factory=SettlementLinks)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Settlement:
        return cls(
            id=data.get("id") or "",
            resource=data.get("resource") or "",
            reference=data.get("reference") or "",
            invoice_id=data.get("invoiceId") or "",
            created_at=_parse_timestamp(data.get("createdAt")),
            settled_at=_parse_timestamp(data.get("settledAt")),
            amount=_optional_dict(data.get("amount")),
            periods=_periods(data.get("periods")),
            status=_status(data.get("status")),
            links=SettlementLinks.from_dict(data.get("_links") or {}),
        )


@dataclass
class ListSettlementsOptions:
    """Query parameters for settlement listings."""

    from_: str = ""
    limit: int = 0
    embed: list[Any] = field(default_factory=list)

    def to_query(self) -> dict[str, Any]:
        query: dict[str, Any] = {}
        if self.from_:
            query["from"] = self.from_
        if self.limit:
            query["limit"] = str(self.limit)
        if self.embed:
            query["embed"] = [_text(value) for value in self.embed]
        return query


@dataclass
class SettlementsList:
    """A page of settlements."""

    count: int = 0
    settlements: list[Settlement] = field(default_factory=list)
    links: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SettlementsList:
        embedded = data.get("_embedded") or {}
        items = next(
            (value for key, value in embedded.items() if key.lower() == "settlements"),
            None,
        )
        return cls(
            count=data.get("count") or 0,
            settlements=[Settlement.from_dict(item) for item in items or []],
            links=dict(data.get("_links") or {}),
        )


def _query(options: Any) -> dict[str, Any] | None:
    if options is None:
        return None
    if isinstance(options, Mapping):
        return dict(options)
    return options.to_query()


class SettlementsService:
    """Operations on the settlements resource.

    *client* sends the requests: its ``get(path, query)`` returns a response
    whose ``content`` holds the JSON body; errors it raises pass through.
    Options may be any object with ``to_query()``, a mapping, or None.
    """

    def __init__(self, client: Any) -> None:
        self.client = client

    def _get(self, element: str) -> tuple[Any, Settlement | None]:
        response = self.client.get(f"v2/settlements/{element}", None)
        data = _decode_object(response.content)
        return response, Settlement.from_dict(data) if data is not None else None

    def _list(self, settlement: str, category: str, options: Any) -> Any:
        path = "v2/settlements"
        if settlement:
            path = f"{path}/{settlement}"
            if category:
                path = f"{path}/{category}"
        return self.client.get(path, _query(options))

    def get(self, settlement: str) -> tuple[Any, Settlement | None]:
        """Retrieve a settlement by id or bank reference."""
        return self._get(settlement)

    def next(self) -> tuple[Any, Settlement | None]:
        """Retrieve the settlement that has not been paid out yet."""
        return self._get("next")

    def open(self) -> tuple[Any, Settlement | None]:
        """Retrieve the open balance of the organization as a settlement."""
        return self._get("open")

    def list(
        self, options: ListSettlementsOptions | None = None
    ) -> tuple[Any, SettlementsList | None]:
        """List settlements, newest first; returns (response, list)."""
        response = self._list("", "", options)
        data = _decode_object(response.content)
        return response, SettlementsList.from_dict(data) if data is not None else None

    def list_payments(
        self, settlement: str, options: Any = None
    ) -> tuple[Any, dict[str, Any] | None]:
        """List the payments of a settlement; returns (response, payment list)."""
        response = self._list(settlement, "payments", options)
        return response, _decode_object(response.content)

    def get_refunds(
        self, settlement: str, options: ListSettlementsOptions | None = None
    ) -> tuple[Any, dict[str, Any] | None]:
        """List the refunds of a settlement; returns (response, refund list)."""
        response = self._list(settlement, "refunds", options)
        return response, _decode_object(response.content)

    def get_chargebacks(
        self, settlement: str, options: Any = None
    ) -> tuple[Any, dict[str, Any] | None]:
        """List the chargebacks of a settlement; returns (response, chargeback list)."""
        response = self._list(settlement, "chargebacks", options)
        return response, _decode_object(response.content)

    def get_captures(
        self, settlement: str, options: ListSettlementsOptions | None = None
    ) -> tuple[Any, dict[str, Any] | None]:
        """List the captures of a settlement; returns (response, capture list)."""
        response = self._list(settlement, "captures", options)
        return response, _decode_object(response.content)