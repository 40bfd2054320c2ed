"""Models, services and helpers for the Mollie payments API."""

__version__ = "0.1.0"

__all__ = [
    "connect",
    "idempotency",
    "pagination",
    "profiles",
    "settlements",
    "shipments",
    "terminals",
    "vouchers",
    "wallets",
]