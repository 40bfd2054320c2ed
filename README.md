# molliekit

Request and response models and service classes for the Mollie payments
API. The package also includes helpers for idempotency keys, pagination
cursors and the OAuth 2.0 endpoint. It needs Python 3.10 or later and has no
third-party dependencies.

## Modules

| Module | Contents |
| --- | --- |
| `molliekit.profiles` | `ProfilesService`, `Profile`, `ProfilesList`, `CreateOrUpdateProfile`, `ListProfilesOptions`, `ProfileStatus`, `ProfileReviewStatus`, `EnableVoucherIssuer` |
| `molliekit.settlements` | `SettlementsService`, `Settlement`, `SettlementsList`, `SettlementPeriod`, `SettlementRevenue`, `SettlementCosts`, `ListSettlementsOptions`, `SettlementStatus` |
| `molliekit.shipments` | `ShipmentsService`, `Shipment`, `ShipmentsList`, `CreateShipment`, `UpdateShipment`, `ShipmentTracking` |
| `molliekit.terminals` | `TerminalsService`, `Terminal`, `TerminalList`, `ListTerminalsOptions`, `TerminalStatus` |
| `molliekit.vouchers` | `VoucherIssuer`, `VoucherIssuerEnabled`, `VoucherContractor`, `VoucherLinks` |
| `molliekit.wallets` | `WalletsService`, `ApplePaymentSession`, `ApplePaymentSessionRequest`, `Wallet` |
| `molliekit.idempotency` | `KeyGenerator`, `NopGenerator`, `StdGenerator` |
| `molliekit.pagination` | `extract_from_query_param` |
| `molliekit.connect` | `OAuthEndpoint`, `oauth_endpoint` |

## Services and the client they use

Each service takes a client object when it is constructed. It builds the
request path and body, passes them to the client, and decodes the JSON it
gets back. The client must provide whichever of these members the service
calls:

- `get(path, query)`, `post(path, body, query)`, `patch(path, body)`,
  `delete(path)`: each returns a response object whose `content` attribute
  holds the JSON body (bytes or str);
- `has_access_token()` and `testing`: used by `TerminalsService.list` and
  `ShipmentsService.create`. When both are true, those methods send test
  mode with the request.

Paths are relative, for example `v2/profiles/me`. Queries are dicts, or
`None` when there are no options. Errors that the client raises pass
through unchanged.

Methods that read data return a `(response, model)` tuple. The model is
`None` when the body is JSON `null`. If the body is not valid JSON, or is
not a JSON object, a `ValueError` is raised. Delete and disable methods
return only the response.

```python
from dataclasses import dataclass

from molliekit.terminals import ListTerminalsOptions, TerminalsService


@dataclass
class Reply:
    content: bytes


class Client:
    testing = False

    def has_access_token(self):
        return False

    def get(self, path, query):
        return Reply(b'{"count": 1, "_embedded": {"terminals": [{"id": "term_1", "status": "active"}]}}')


response, terminals = TerminalsService(Client()).list(ListTerminalsOptions(limit=10))
terminals.terminals[0].status  # TerminalStatus.ACTIVE
```

Some results are returned as plain decoded dicts rather than models:

- from `ProfilesService`: `enable_payment_method` and
  `enable_gift_card_issuer` (and `enable_gift_card_issuer_for_current`);
- from `SettlementsService`: `list_payments`, `get_refunds`,
  `get_chargebacks` and `get_captures`.

The `*_for_current` methods of `ProfilesService` act on the profile `me`,
as does `current()`.

## Query options and payloads

Each options dataclass has a `to_query()` method that builds the query
parameters and leaves out empty fields. The field `from_` maps to the
`from` parameter:

```python
ListTerminalsOptions(limit=10).to_query()  # {"limit": "10"}
```

Request models (`CreateOrUpdateProfile`, `CreateShipment`,
`UpdateShipment`, `ApplePaymentSessionRequest`) serialise with `to_dict()`,
which also drops empty fields. Response models are built from decoded JSON
with `from_dict()`. Timestamps become timezone-aware `datetime` objects, and
known status strings become enum members. A status string the package does
not know is kept as plain text.

## Idempotency keys

`KeyGenerator` is an abstract base class with a single method,
`generate()`.

```python
from molliekit.idempotency import NopGenerator, StdGenerator

StdGenerator().generate()         # a fresh UUID4 string, 36 characters
NopGenerator().generate()         # "test_ikg_key"
NopGenerator("fixed").generate()  # "fixed"
```

## Pagination

```python
from molliekit.pagination import extract_from_query_param

extract_from_query_param("https://example.com/v2/payments?from=tr_abc123&limit=5")
# "tr_abc123"
```

If the URI has no `from` parameter, the function returns `""`. If the URI
has a malformed percent escape or a control character, it raises
`ValueError`.

## OAuth

`molliekit.connect.oauth_endpoint()` returns a frozen `OAuthEndpoint`. It
holds `auth_url`, `token_url` and `auth_style`; `auth_style` is 0, which
means auto-detect. Hand it to the OAuth 2.0 client of your choice.

## What the package does not do

- It does not send HTTP requests. It has no HTTP client, no authentication
  handling and no retry logic. You supply the client object described above.
- It has no command-line tool.
- It has no service classes for refunds or subscriptions. Settlement refund
  listings come back as plain dicts.

## Running the tests

```
pip install "molliekit[test]"
pytest
```