"""Shipments: deliveries of order lines, in the figurative sense too."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Mapping

from molliekit.terminals import _decoded, _non_empty, _parse_timestamp, _pick


@dataclass
class ShipmentTracking:
    """Tracking details of a shipment."""

    carrier: str = ""
    code: str = ""
    url: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _non_empty({"carrier": self.carrier, "code": self.code, "url": self.url})

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ShipmentTracking:
        return cls(**_pick(cls, data, carrier="carrier", code="code", url="url"))


def _shipment_body(
    lines: list[Mapping[str, Any]], tracking: ShipmentTracking | None, testmode: bool
) -> dict[str, Any]:
    body = _non_empty({"lines": [dict(line) for line in lines], "testmode": testmode})
    if tracking is not None:
        body["tracking"] = tracking.to_dict()
    return body


@dataclass
class CreateShipment:
    """Information needed to create a shipment; empty fields are not sent."""

    lines: list[Mapping[str, Any]] = field(default_factory=list)
    tracking: ShipmentTracking | None = None
    testmode: bool = False

    def to_dict(self) -> dict[str, Any]:
        return _shipment_body(self.lines, self.tracking, self.testmode)


@dataclass
class UpdateShipment:
    """Information needed to update a shipment's tracking."""

    tracking: ShipmentTracking | None = None
    testmode: bool = False

    def to_dict(self) -> dict[str, Any]:
        return _shipment_body([], self.tracking, self.testmode)


@dataclass
class ShipmentLinks:
    """Links relevant to a shipment."""

    self_url: Mapping[str, Any] | None = None
    order: Mapping[str, Any] | None = None
    documentation: Mapping[str, Any] | None = None


@dataclass
class Shipment:
    """A delivery of order lines."""

    resource: str = ""
    id: str = ""
    order_id: str = ""
    created_at: datetime | None = None
    tracking: ShipmentTracking | None = None
    lines: list[dict[str, Any]] = field(default_factory=list)
    links: ShipmentLinks = field(default_factory=ShipmentLinks)
    testmode: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Shipment:
        tracking = data.get("tracking")
        links = data.get("_links") or {}
        return cls(
            **_pick(cls, data, resource="resource", id="id", order_id="orderId"),
            created_at=_parse_timestamp(data.get("createdAt")),
            tracking=ShipmentTracking.from_dict(tracking) if tracking is not None else None,
            lines=[dict(line) for line in data.get("lines") or []],
            links=ShipmentLinks(
                **_pick(
                    ShipmentLinks,
                    links,
                    self_url="self",
                    order="order",
                    documentation="documentation",
                )
            ),
            testmode=bool(data.get("testmode", False)),
        )


@dataclass
class ShipmentsList:
    """The shipments of an order."""

    count: int = 0
    shipments: list[Shipment] = field(default_factory=list)
    links: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ShipmentsList:
        embedded = data.get("_embedded") or {}
        items = next(
            (value for key, value in embedded.items() if key.lower() == "shipments"),
            None,
        )
        return cls(
            count=data.get("count", 0),
            shipments=[Shipment.from_dict(item) for item in items or []],
            links=dict(data.get("_links") or {}),
        )


class ShipmentsService:
    """Operations on the shipments endpoints.

    *client* sends the requests: ``get(path, query)``, ``post(path, body,
    query)`` and ``patch(path, body)`` return a response whose ``content``
    holds the JSON body; ``has_access_token()`` and ``testing`` decide
    whether test mode is sent along.
    """

    def __init__(self, client: Any) -> None:
        self.client = client

    def get(self, order: str, shipment: str) -> tuple[Any, Shipment | None]:
        """Retrieve one shipment of an order; returns (response, shipment)."""
        return _decoded(self.client.get(f"v2/orders/{order}/shipments/{shipment}", None), Shipment)

    def create(self, order: str, shipment: CreateShipment) -> tuple[Any, Shipment | None]:
        """Ship order lines; returns (response, shipment)."""
        if self.client.has_access_token() and self.client.testing:
            shipment = replace(shipment, testmode=True)
        response = self.client.post(f"v2/orders/{order}/shipments", shipment.to_dict(), None)
        return _decoded(response, Shipment)

    def list(self, order: str) -> tuple[Any, ShipmentsList | None]:
        """List the shipments of an order; returns (response, list)."""
        return _decoded(self.client.get(f"v2/orders/{order}/shipments", None), ShipmentsList)

    def update(
        self, order: str, shipment: str, update: UpdateShipment
    ) -> tuple[Any, Shipment | None]:
        """Update a shipment's tracking; returns (response, shipment)."""
        response = self.client.patch(
            f"v2/orders/{order}/shipments/{shipment}", update.to_dict()
        )
        return _decoded(response, Shipment)