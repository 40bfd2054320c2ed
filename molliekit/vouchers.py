"""Voucher issuers and the result of enabling one on a profile."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from molliekit.terminals import _pick, _TextEnum


class VoucherIssuer(_TextEnum):
    """Known voucher issuers."""

    EDENRED_BELGIUM_CADEAU = "edenred-belgium-cadeau"
    EDENRED_BELGIUM_ECO = "edenred-belgium-eco"
    EDENRED_BELGIUM_MEAL = "edenred-belgium-meal"
    EDENRED_BELGIUM_SPORTS = "edenred-belgium-sports"
    EDENRED_BELGIUM_ADDITIONAL = "edenred-belgium-additional"
    EDENRED_BELGIUM_CONSUME = "edenred-belgium-consume"
    MONIZZE_CADEAU = "monizze-cadeau"
    MONIZZE_ECO = "monizze-eco"
    MONIZZE_MEAL = "monizze-meal"
    PLUXEE_CADEAU = "sodexo-cadeau"
    PLUXEE_ECO = "sodexo-ecopass"
    PLUXEE_LUNCH = "sodexo-lunchpass"


@dataclass
class VoucherLinks:
    """Links returned when a voucher issuer is enabled."""

    self_url: Mapping[str, Any] | None = None
    documentation: Mapping[str, Any] | None = None


@dataclass
class VoucherContractor:
    """The contractor behind a voucher issuer."""

    id: str = ""
    name: str = ""
    contractor_id: str = ""


@dataclass
class VoucherIssuerEnabled:
    """Response of a voucher issuer enable operation."""

    id: str = ""
    description: str = ""
    status: str = ""
    contractor: VoucherContractor = field(default_factory=VoucherContractor)
    links: VoucherLinks = field(default_factory=VoucherLinks)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> VoucherIssuerEnabled:
        contractor = data.get("contractor") or {}
        links = data.get("_links") or {}
        return cls(
            **_pick(cls, data, id="id", description="description", status="status"),
            contractor=VoucherContractor(
                **_pick(
                    VoucherContractor,
                    contractor,
                    id="id",
                    name="name",
                    contractor_id="contractorId",
                )
            ),
            links=VoucherLinks(
                **_pick(VoucherLinks, links, self_url="self", documentation="documentation")
            ),
        )