import json
from dataclasses import dataclass, field
from typing import Any

import pytest

from molliekit.profiles import (
    CreateOrUpdateProfile,
    ListProfilesOptions,
    Profile,
    ProfileReviewStatus,
    ProfilesList,
    ProfilesService,
    ProfileStatus,
)
from molliekit.vouchers import VoucherIssuer, VoucherIssuerEnabled

SERVER_ERROR = "500 Internal Server Error: An internal server error occurred while processing your request."

PROFILE = {
    "resource": "profile",
    "id": "pfl_v9hTwCvYqw",
    "mode": "live",
    "name": "My website name",
    "website": "https://www.example.com",
    "email": "info@example.com",
    "categoryCode": 5399,
    "status": "verified",
    "review": {"status": "pending"},
    "createdAt": "2018-03-20T09:28:37+00:00",
    "_links": {
        "self": {"href": "https://api.example.com/v2/profiles/pfl_v9hTwCvYqw", "type": "application/hal+json"},
        "checkoutPreviewUrl": {"href": "https://www.example.com/preview", "type": "text/html"},
    },
}

PROFILES_LIST = {
    "count": 2,
    "_embedded": {"profiles": [PROFILE, dict(PROFILE, id="pfl_other")]},
    "_links": {"next": None},
}

VOUCHER_ENABLED = {
    "resource": "issuer",
    "id": "sodexo-ecopass",
    "description": "Pluxee Eco",
    "status": "pending-issuer",
    "contractor": {"id": "Pluxee", "name": "Pluxee", "contractorId": "12345"},
    "_links": {"self": {"href": "https://api.example.com/self", "type": "application/hal+json"}},
}


class ApiError(Exception):
    pass


@dataclass
class FakeResponse:
    content: bytes
    status_code: int = 200


@dataclass
class FakeClient:
    content: Any = b"{}"
    status_code: int = 200
    error: Exception | None = None
    access_token: bool = False
    testing: bool = False
    calls: list = field(default_factory=list)

    def _send(self, method, path, **kwargs):
        self.calls.append((method, path, kwargs))
        if self.error is not None:
            raise self.error
        content = self.content
        if isinstance(content, dict):
            content = json.dumps(content).encode()
        return FakeResponse(content, self.status_code)

    def get(self, path, query):
        return self._send("GET", path, query=query)

    def post(self, path, body, query):
        return self._send("POST", path, body=body, query=query)

    def patch(self, path, body):
        return self._send("PATCH", path, body=body)

    def delete(self, path):
        return self._send("DELETE", path)

    def has_access_token(self):
        return self.access_token


def test_get_profile_parses_fields():
    client = FakeClient(PROFILE)
    response, profile = ProfilesService(client).get("pfl_v9hTwCvYqw")
    assert client.calls == [("GET", "v2/profiles/pfl_v9hTwCvYqw", {"query": None})]
    assert response.status_code == 200
    assert isinstance(profile, Profile)
    assert profile.id == "pfl_v9hTwCvYqw"
    assert profile.status is ProfileStatus.VERIFIED
    assert profile.review.status is ProfileReviewStatus.PENDING
    assert profile.category_code == 5399
    assert profile.created_at.year == 2018
    assert profile.links.checkout_preview_url["href"] == "https://www.example.com/preview"


def test_current_uses_me():
    client = FakeClient(PROFILE)
    _, profile = ProfilesService(client).current()
    assert client.calls[0][:2] == ("GET", "v2/profiles/me")
    assert profile.name == "My website name"


def test_list_without_and_with_options():
    client = FakeClient(PROFILES_LIST)
    service = ProfilesService(client)
    _, plist = service.list(ListProfilesOptions())
    assert isinstance(plist, ProfilesList)
    assert plist.count == 2
    assert [p.id for p in plist.profiles] == ["pfl_v9hTwCvYqw", "pfl_other"]
    service.list(ListProfilesOptions(limit=100))
    assert client.calls[0] == ("GET", "v2/profiles", {"query": {}})
    assert client.calls[1] == ("GET", "v2/profiles", {"query": {"limit": "100"}})


def test_list_options_query():
    assert ListProfilesOptions(limit=5, from_="pfl_x").to_query() == {"limit": "5", "from": "pfl_x"}


def test_create_sends_non_empty_fields():
    client = FakeClient(PROFILE)
    _, profile = ProfilesService(client).create(CreateOrUpdateProfile(name="testing name"))
    assert client.calls == [("POST", "v2/profiles", {"body": {"name": "testing name"}, "query": None})]
    assert profile.id == "pfl_v9hTwCvYqw"


def test_empty_profile_body_is_empty():
    assert CreateOrUpdateProfile().to_dict() == {}


def test_update_patches_profile():
    client = FakeClient(PROFILE)
    _, profile = ProfilesService(client).update("pfl_v9hTwCvYqw", CreateOrUpdateProfile(name="testing name"))
    assert client.calls == [("PATCH", "v2/profiles/pfl_v9hTwCvYqw", {"body": {"name": "testing name"}})]
    assert profile.mode == "live"


def test_delete_profile():
    client = FakeClient(b"", status_code=204)
    response = ProfilesService(client).delete("pfl_v9hTwCvYqw")
    assert response.status_code == 204
    assert client.calls == [("DELETE", "v2/profiles/pfl_v9hTwCvYqw", {})]


def test_enable_and_disable_payment_method():
    client = FakeClient({"resource": "method", "id": "paypal"})
    service = ProfilesService(client)
    _, details = service.enable_payment_method("pfl_v9hTwCvYqw", "paypal")
    assert details["id"] == "paypal"
    service.disable_payment_method("pfl_v9hTwCvYqw", "paypal")
    assert [c[:2] for c in client.calls] == [
        ("POST", "v2/profiles/pfl_v9hTwCvYqw/methods/paypal"),
        ("DELETE", "v2/profiles/pfl_v9hTwCvYqw/methods/paypal"),
    ]


def test_gift_card_issuers():
    client = FakeClient({"resource": "issuer", "id": "good4fun", "status": "activated"})
    service = ProfilesService(client)
    _, enabled = service.enable_gift_card_issuer("pfl_v9hTwCvYqw", "good4fun")
    assert enabled["status"] == "activated"
    service.disable_gift_card_issuer("pfl_v9hTwCvYqw", "good4fun")
    _, current = service.enable_gift_card_issuer_for_current("good4fun")
    assert current["id"] == "good4fun"
    service.disable_gift_card_issuer_for_current("good4fun")
    assert [c[:2] for c in client.calls] == [
        ("POST", "v2/profiles/pfl_v9hTwCvYqw/methods/giftcard/issuers/good4fun"),
        ("DELETE", "v2/profiles/pfl_v9hTwCvYqw/methods/giftcard/issuers/good4fun"),
        ("POST", "v2/profiles/me/methods/giftcard/issuers/good4fun"),
        ("DELETE", "v2/profiles/me/methods/giftcard/issuers/good4fun"),
    ]


def test_enable_voucher_issuer():
    client = FakeClient(VOUCHER_ENABLED, status_code=201)
    response, enabled = ProfilesService(client).enable_voucher_issuer(
        "pfl_v9hTwCvYqw", VoucherIssuer.PLUXEE_ECO, None
    )
    assert client.calls == [
        ("POST", "v2/profiles/pfl_v9hTwCvYqw/methods/voucher/issuers/sodexo-ecopass", {"body": None, "query": None})
    ]
    assert isinstance(enabled, VoucherIssuerEnabled)
    assert enabled.contractor.contractor_id == "12345"
    assert response.status_code == 201


def test_voucher_issuer_for_current_and_disable():
    client = FakeClient(VOUCHER_ENABLED, status_code=201)
    service = ProfilesService(client)
    response, enabled = service.enable_voucher_issuer_for_current(VoucherIssuer.PLUXEE_ECO)
    assert response.status_code == 201
    assert enabled.id == "sodexo-ecopass"
    client.status_code = 204
    assert service.disable_voucher_issuer("pfl_v9hTwCvYqw", VoucherIssuer.PLUXEE_ECO).status_code == 204
    assert service.disable_voucher_issuer_for_current(VoucherIssuer.PLUXEE_ECO).status_code == 204
    assert [c[:2] for c in client.calls][1:] == [
        ("DELETE", "v2/profiles/pfl_v9hTwCvYqw/methods/voucher/issuers/sodexo-ecopass"),
        ("DELETE", "v2/profiles/me/methods/voucher/issuers/sodexo-ecopass"),
    ]


CALLS = [
    lambda s: s.get("pfl_v9hTwCvYqw"),
    lambda s: s.current(),
    lambda s: s.list(ListProfilesOptions()),
    lambda s: s.create(CreateOrUpdateProfile()),
    lambda s: s.update("pfl_v9hTwCvYqw", CreateOrUpdateProfile()),
    lambda s: s.enable_payment_method("pfl_v9hTwCvYqw", "paypal"),
    lambda s: s.enable_gift_card_issuer("pfl_v9hTwCvYqw", "good4fun"),
    lambda s: s.enable_gift_card_issuer_for_current("good4fun"),
    lambda s: s.enable_voucher_issuer("pfl_v9hTwCvYqw", VoucherIssuer.PLUXEE_ECO, None),
    lambda s: s.enable_voucher_issuer_for_current(VoucherIssuer.PLUXEE_ECO),
]

NO_BODY_CALLS = [
    lambda s: s.delete("pfl_v9hTwCvYqw"),
    lambda s: s.disable_payment_method("pfl_v9hTwCvYqw", "paypal"),
    lambda s: s.disable_gift_card_issuer("pfl_v9hTwCvYqw", "good4fun"),
    lambda s: s.disable_gift_card_issuer_for_current("good4fun"),
    lambda s: s.disable_voucher_issuer("pfl_v9hTwCvYqw", VoucherIssuer.PLUXEE_ECO),
    lambda s: s.disable_voucher_issuer_for_current(VoucherIssuer.PLUXEE_ECO),
]


@pytest.mark.parametrize("call", CALLS + NO_BODY_CALLS)
def test_server_error_passes_through(call):
    client = FakeClient(error=ApiError(SERVER_ERROR))
    service = ProfilesService(client)
    with pytest.raises(ApiError) as excinfo:
        call(service)
    assert str(excinfo.value) == SERVER_ERROR
    assert len(client.calls) == 1


@pytest.mark.parametrize("call", CALLS)
def test_invalid_json_raises(call):
    client = FakeClient(b"{hello: world}")
    service = ProfilesService(client)
    with pytest.raises(ValueError) as excinfo:
        call(service)
    assert isinstance(excinfo.value, json.JSONDecodeError)
    assert excinfo.value.pos == 1
    assert len(client.calls) == 1


def test_null_body_gives_none():
    _, profile = ProfilesService(FakeClient(b"null")).get("pfl_v9hTwCvYqw")
    assert profile is None