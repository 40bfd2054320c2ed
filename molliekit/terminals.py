"""Terminals: the physical devices that receive payments."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field, fields, replace
from datetime import datetime
from enum import Enum
from typing import Any, Mapping, TypeVar

_TIMESTAMP = re.compile(
    r"^(?P<base>\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<zone>[Zz]|[+-]\d{2}:\d{2})$"
)

_E = TypeVar("_E", bound=Enum)


class _TextEnum(str, Enum):
    """An enumeration whose members print as their values."""

    def __str__(self) -> str:
        return self.value


def _parse_timestamp(value: str | None) -> datetime | None:
    """Parse an RFC 3339 timestamp; None stays None."""
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


def _decoded(response: Any, model: Any) -> tuple[Any, Any]:
    """Decode a response body into *model*; returns (response, instance or None)."""
    data = _decode_object(response.content)
    return response, model.from_dict(data) if data is not None else None


def _non_empty(pairs: Mapping[str, Any]) -> dict[str, Any]:
    """Keep only the entries whose values are set."""
    return {key: value for key, value in pairs.items() if value}


def _pick(target: Any, source: Mapping[str, Any], /, **keys: str) -> dict[str, Any]:
    """Map JSON keys of *source* onto dataclass fields, using field defaults."""
    defaults = {f.name: f.default for f in fields(target)}
    return {name: source.get(key, defaults[name]) for name, key in keys.items()}


def _enum_or_text(enum: type[_E], value: str | None) -> _E | str:
    if not value:
        return ""
    try:
        return enum(value)
    except ValueError:
        return value


class TerminalStatus(_TextEnum):
    """Status of a terminal, determined by the platform."""

    PENDING = "pending"
    ACTIVE = "active"
    INACTIVE = "inactive"


@dataclass
class Terminal:
    """A physical device that receives payments."""

    id: str = ""
    resource: str = ""
    profile_id: str = ""
    brand: str = ""
    model: str = ""
    serial_number: str = ""
    currency: str = ""
    description: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
    status: TerminalStatus | str = ""
    links: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Terminal:
        return cls(
            **_pick(
                cls,
                data,
                id="id",
                resource="resource",
                brand="brand",
                model="model",
                serial_number="serialNumber",
                currency="currency",
                description="description",
            ),
            profile_id=data.get("profileID", data.get("profileId", "")),
            created_at=_parse_timestamp(data.get("createdAt")),
            updated_at=_parse_timestamp(data.get("updatedAt")),
            status=_enum_or_text(TerminalStatus, data.get("status")),
            links=dict(data.get("_links") or {}),
        )


@dataclass
class ListTerminalsOptions:
    """Query parameters for listing terminals.

    ``profile_id`` and ``testmode`` apply only with access tokens.
    """

    testmode: bool = False
    limit: int = 0
    from_: str = ""
    profile_id: str = ""

    def to_query(self) -> dict[str, str]:
        return _non_empty(
            {
                "testMode": "true" if self.testmode else "",
                "limit": str(self.limit) if self.limit else "",
                "from": self.from_,
                "profileID": self.profile_id,
            }
        )


@dataclass
class TerminalList:
    """A page of terminals."""

    count: int = 0
    terminals: list[Terminal] = field(default_factory=list)
    links: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TerminalList:
        embedded = data.get("_embedded") or {}
        return cls(
            count=data.get("count", 0),
            terminals=[Terminal.from_dict(item) for item in embedded.get("terminals") or []],
            links=dict(data.get("_links") or {}),
        )


class TerminalsService:
    """Operations on the terminals resource.

    *client* sends the requests: ``get(path, query)`` returns a response
    whose ``content`` holds the JSON body, ``has_access_token()`` tells
    whether an access token is in use and ``testing`` whether test mode is on.
    """

    def __init__(self, client: Any) -> None:
        self.client = client

    def get(self, terminal_id: str) -> tuple[Any, Terminal | None]:
        """Retrieve one terminal by its id; returns (response, terminal)."""
        return _decoded(self.client.get(f"v2/terminals/{terminal_id}", None), Terminal)

    def list(
        self, options: ListTerminalsOptions | None = None
    ) -> tuple[Any, TerminalList | None]:
        """List the terminals; returns (response, terminal list)."""
        if self.client.has_access_token() and self.client.testing:
            options = replace(options or ListTerminalsOptions(), testmode=True)
        query = options.to_query() if options is not None else None
        return _decoded(self.client.get("v2/terminals", query), TerminalList)