"""OAuth 2.0 endpoint description for the payments platform."""

from __future__ import annotations

from dataclasses import dataclass

AUTH_URL = "https://www.mollie.com/oauth2/authorize"
TOKENS_URL = "https://api.mollie.com/oauth2/tokens"

# Client credentials placement is detected automatically.
AUTH_STYLE_AUTO_DETECT = 0


@dataclass(frozen=True)
class OAuthEndpoint:
    """Authorization and token URLs of an OAuth 2.0 provider."""

    auth_url: str
    token_url: str
    auth_style: int = AUTH_STYLE_AUTO_DETECT


def oauth_endpoint() -> OAuthEndpoint:
    """Return the platform's OAuth 2.0 endpoint."""
    return OAuthEndpoint(
        auth_url=AUTH_URL,
        token_url=TOKENS_URL,
        auth_style=AUTH_STYLE_AUTO_DETECT,
    )