"""Profiles: the brands or websites under an account that receive payments."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Mapping

from molliekit.vouchers import VoucherIssuer, VoucherIssuerEnabled

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


def _segment(value: Any) -> str:
    return value.value if isinstance(value, Enum) else str(value)


class ProfileStatus(str, Enum):
    """Whether a profile is able to receive live payments."""

    UNVERIFIED = "unverified"
    VERIFIED = "verified"
    BLOCKED = "blocked"

    def __str__(self) -> str:
        return self.value


class ProfileReviewStatus(str, Enum):
    """Status of the review of a profile."""

    PENDING = "pending"
    REJECTED = "rejected"

    def __str__(self) -> str:
        return self.value


def _enum_or_raw(enum_cls: type[Enum], value: str | None) -> Any:
    if not value:
        return ""
    try:
        return enum_cls(value)
    except ValueError:
        return value


@dataclass
class CreateOrUpdateProfile:
    """Parameters to create or update a profile; empty fields are not sent."""

    name: str = ""
    website: str = ""
    email: str = ""
    description: str = ""
    phone: str = ""
    business_category: str = ""
    category_code: int = 0
    mode: str = ""

    def to_dict(self) -> dict[str, Any]:
        pairs = {
            "name": self.name,
            "website": self.website,
            "email": self.email,
            "description": self.description,
            "phone": self.phone,
            "businessCategory": self.business_category,
            "categoryCode": self.category_code,
            "mode": _segment(self.mode) if self.mode else "",
        }
        return {key: value for key, value in pairs.items() if value}


@dataclass
class ProfileReview:
    """Status of a profile review."""

    status: ProfileReviewStatus | str = ""


@dataclass
class ProfileLinks:
    """Links to information related to a profile."""

    self_url: Mapping[str, Any] | None = None
    dashboard: Mapping[str, Any] | None = None
    chargebacks: Mapping[str, Any] | None = None
    methods: Mapping[str, Any] | None = None
    payments: Mapping[str, Any] | None = None
    refunds: Mapping[str, Any] | None = None
    checkout_preview_url: Mapping[str, Any] | None = None
    documentation: Mapping[str, Any] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ProfileLinks:
        return cls(
            self_url=data.get("self"),
            dashboard=data.get("dashboard"),
            chargebacks=data.get("chargebacks"),
            methods=data.get("methods"),
            payments=data.get("payments"),
            refunds=data.get("refunds"),
            checkout_preview_url=data.get("checkoutPreviewUrl"),
            documentation=data.get("documentation"),
        )


@dataclass
class Profile:
    """A profile, usually named after the brand of a website or application."""

    resource: str = ""
    id: str = ""
    name: str = ""
    website: str = ""
    description: str = ""
    countries_of_activity: list[str] = field(default_factory=list)
    email: str = ""
    phone: str = ""
    mode: str = ""
    business_category: str = ""
    category_code: Any = 0
    status: ProfileStatus | str = ""
    review: ProfileReview = field(default_factory=ProfileReview)
    created_at: datetime | None = None
    links: ProfileLinks = field(default_factory=ProfileLinks)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Profile:
        review = data.get("review") or {}
        return cls(
            resource=data.get("resource", ""),
            id=data.get("id", ""),
            name=data.get("name", ""),
            website=data.get("website", ""),
            description=data.get("description", ""),
            countries_of_activity=list(data.get("countriesOfActivity") or []),
            email=data.get("email", ""),
            phone=data.get("phone", ""),
            mode=data.get("mode", ""),
            business_category=data.get("businessCategory", ""),
            category_code=data.get("categoryCode", 0),
            status=_enum_or_raw(ProfileStatus, data.get("status")),
            review=ProfileReview(
                status=_enum_or_raw(ProfileReviewStatus, review.get("status"))
            ),
            created_at=_parse_timestamp(data.get("createdAt")),
            links=ProfileLinks.from_dict(data.get("_links") or {}),
        )


@dataclass
class ListProfilesOptions:
    """Query parameters for listing profiles."""

    limit: int = 0
    from_: str = ""

    def to_query(self) -> dict[str, str]:
        query: dict[str, str] = {}
        if self.limit:
            query["limit"] = str(self.limit)
        if self.from_:
            query["from"] = self.from_
        return query


@dataclass
class ProfilesList:
    """A page of profiles."""

    count: int = 0
    profiles: list[Profile] = field(default_factory=list)
    links: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ProfilesList:
        embedded = data.get("_embedded") or {}
        return cls(
            count=data.get("count", 0),
            profiles=[Profile.from_dict(item) for item in embedded.get("profiles") or []],
            links=dict(data.get("_links") or {}),
        )


@dataclass
class EnableVoucherIssuer:
    """Parameters to enable a voucher issuer."""

    contract_id: str = ""


class ProfilesService:
    """Operations on the profiles resource.

    *client* sends the requests: ``get(path, query)``, ``post(path, body,
    query)``, ``patch(path, body)`` and ``delete(path)`` return a response
    whose ``content`` holds the JSON body; errors they raise pass through.
    """

    def __init__(self, client: Any) -> None:
        self.client = client

    def list(
        self, options: ListProfilesOptions | None = None
    ) -> tuple[Any, ProfilesList | None]:
        """List the profiles of the account; returns (response, list)."""
        query = options.to_query() if options is not None else None
        response = self.client.get("v2/profiles", query)
        data = _decode_object(response.content)
        return response, ProfilesList.from_dict(data) if data is not None else None

    def get(self, profile_id: str) -> tuple[Any, Profile | None]:
        """Retrieve a profile by id; returns (response, profile)."""
        response = self.client.get(f"v2/profiles/{profile_id}", None)
        data = _decode_object(response.content)
        return response, Profile.from_dict(data) if data is not None else None

    def current(self) -> tuple[Any, Profile | None]:
        """Retrieve the profile belonging to the API key in use."""
        return self.get("me")

    def create(self, profile: CreateOrUpdateProfile) -> tuple[Any, Profile | None]:
        """Create a profile; returns (response, profile)."""
        response = self.client.post("v2/profiles", profile.to_dict(), None)
        data = _decode_object(response.content)
        return response, Profile.from_dict(data) if data is not None else None

    def update(
        self, profile_id: str, profile: CreateOrUpdateProfile
    ) -> tuple[Any, Profile | None]:
        """Change fields of a profile; returns (response, profile)."""
        response = self.client.patch(f"v2/profiles/{profile_id}", profile.to_dict())
        data = _decode_object(response.content)
        return response, Profile.from_dict(data) if data is not None else None

    def delete(self, profile_id: str) -> Any:
        """Delete a profile; returns the response."""
        return self.client.delete(f"v2/profiles/{profile_id}")

    def enable_payment_method(
        self, profile_id: str, method: Any
    ) -> tuple[Any, dict[str, Any] | None]:
        """Enable a payment method; returns (response, method details)."""
        path = f"v2/profiles/{profile_id}/methods/{_segment(method)}"
        response = self.client.post(path, None, None)
        return response, _decode_object(response.content)

    def disable_payment_method(self, profile_id: str, method: Any) -> Any:
        """Disable a payment method; returns the response."""
        return self.client.delete(f"v2/profiles/{profile_id}/methods/{_segment(method)}")

    def enable_gift_card_issuer(
        self, profile_id: str, issuer: Any
    ) -> tuple[Any, dict[str, Any] | None]:
        """Enable a gift card issuer on a profile; returns (response, details)."""
        response = self._toggle("giftcard", profile_id, issuer, enable=True)
        return response, _decode_object(response.content)

    def disable_gift_card_issuer(self, profile_id: str, issuer: Any) -> Any:
        """Disable a gift card issuer on a profile; returns the response."""
        return self._toggle("giftcard", profile_id, issuer, enable=False)

    def enable_gift_card_issuer_for_current(
        self, issuer: Any
    ) -> tuple[Any, dict[str, Any] | None]:
        """Enable a gift card issuer on the current profile."""
        return self.enable_gift_card_issuer("me", issuer)

    def disable_gift_card_issuer_for_current(self, issuer: Any) -> Any:
        """Disable a gift card issuer on the current profile."""
        return self.disable_gift_card_issuer("me", issuer)

    def enable_voucher_issuer(
        self,
        profile_id: str,
        issuer: VoucherIssuer | str,
        voucher_issuer: EnableVoucherIssuer | None = None,
    ) -> tuple[Any, VoucherIssuerEnabled | None]:
        """Enable a voucher issuer on a profile; returns (response, details).

        *voucher_issuer* is accepted but the request carries no body.
        """
        response = self._toggle("voucher", profile_id, issuer, enable=True)
        data = _decode_object(response.content)
        return response, VoucherIssuerEnabled.from_dict(data) if data is not None else None

    def disable_voucher_issuer(self, profile_id: str, issuer: VoucherIssuer | str) -> Any:
        """Disable a voucher issuer on a profile; returns the response."""
        return self._toggle("voucher", profile_id, issuer, enable=False)

    def enable_voucher_issuer_for_current(
        self, issuer: VoucherIssuer | str
    ) -> tuple[Any, VoucherIssuerEnabled | None]:
        """Enable a voucher issuer on the current profile."""
        return self.enable_voucher_issuer("me", issuer)

    def disable_voucher_issuer_for_current(self, issuer: VoucherIssuer | str) -> Any:
        """Disable a voucher issuer on the current profile."""
        return self.disable_voucher_issuer("me", issuer)

    def _toggle(self, method: str, profile: str, issuer: Any, *, enable: bool) -> Any:
        path = f"v2/profiles/{profile}/methods/{method}/issuers/{_segment(issuer)}"
        if enable:
            return self.client.post(path, None, None)
        return self.client.delete(path)