"""Wallet endpoints, currently the Apple Pay payment session."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from molliekit.terminals import _decoded, _non_empty, _pick, _TextEnum


class Wallet(_TextEnum):
    """Wallet types supported by the platform."""

    APPLE_PAY = "applepay"


@dataclass
class ApplePaymentSessionRequest:
    """Body parameters for requesting an Apple Pay payment session."""

    domain: str = ""
    validation_url: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _non_empty({"domain": self.domain, "validationUrl": self.validation_url})


@dataclass
class ApplePaymentSession:
    """An Apple Pay payment session, valid for one transaction."""

    epoch_timestamp: int = 0
    expires_at: int = 0
    merchant_session_id: str = ""
    nonce: str = ""
    merchant_id: str = ""
    domain_name: str = ""
    display_name: str = ""
    signature: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ApplePaymentSession:
        return cls(
            **_pick(
                cls,
                data,
                epoch_timestamp="epochTimestamp",
                expires_at="expiresAt",
                merchant_session_id="merchantSessionIdentifier",
                nonce="nonce",
                merchant_id="merchantIdentified",
                domain_name="domainName",
                display_name="displayName",
                signature="signature",
            )
        )


class WalletsService:
    """Operations on the wallets endpoints.

    *client* sends the requests: its ``post(path, body, query)`` returns a
    response whose ``content`` holds the JSON body; errors it raises pass
    through unchanged.
    """

    def __init__(self, client: Any) -> None:
        self.client = client

    def apple_payment_session(
        self, request: ApplePaymentSessionRequest | None = None
    ) -> tuple[Any, ApplePaymentSession | None]:
        """Request a payment session from Apple; returns (response, session)."""
        body = request.to_dict() if request is not None else None
        response = self.client.post("v2/wallets/applepay/sessions", body, None)
        return _decoded(response, ApplePaymentSession)