"""
Spotify client-credentials token exchange.
"""

import base64
import json
import logging

from pydantic import ValidationError

from radar_sync.api.base_client import HttpFetch, AuthenticationError, ResponseParseError
from radar_sync.models.credentials import Credentials, AccessToken
from radar_sync.models.schemas import TokenResponse

logger = logging.getLogger(__name__)

SPOTIFY_TOKEN_URL = "https://accounts.spotify.com/api/token"

def basic_auth_header(credentials: Credentials) -> str:
    """Build the Basic authorization header value for the token request."""
    raw = f"{credentials.client_id}:{credentials.client_secret}"
    encoded = base64.b64encode(raw.encode("utf-8")).decode("ascii")
    return f"Basic {encoded}"

class TokenProvider:
    """Exchanges application credentials for a bearer token."""

    def __init__(self, fetch: HttpFetch, auth_url: str = SPOTIFY_TOKEN_URL):
        """
        Initialize token provider.

        Args:
            fetch: Callable issuing the HTTP request
            auth_url: OAuth token endpoint
        """
        self.fetch = fetch
        self.auth_url = auth_url

    async def acquire_token(self, credentials: Credentials) -> AccessToken:
        """
        Request a new access token using the client-credentials grant.

        Empty credentials are sent as-is and rejected by the endpoint. The
        token is never cached; every call performs a fresh exchange.

        Raises:
            AuthenticationError: The endpoint answered with a non-success status
            ResponseParseError: The body is not JSON or lacks ``access_token``
        """
        headers = {
            "Authorization": basic_auth_header(credentials),
            "Content-Type": "application/x-www-form-urlencoded"
        }
        data = {"grant_type": "client_credentials"}

        response = await self.fetch("POST", self.auth_url, headers, data)

        if not response.ok:
            raise AuthenticationError(
                f"Failed to get Spotify token (HTTP {response.status})",
                detail=response.body,
                status=response.status
            )

        try:
            token_data = TokenResponse.model_validate(json.loads(response.body))
        except json.JSONDecodeError as e:
            raise ResponseParseError("token", f"Token response is not valid JSON: {e}", detail=response.body) from e
        except ValidationError as e:
            fields = sorted({".".join(str(part) for part in err["loc"]) for err in e.errors() if err["loc"]})
            message = f"Token response has invalid fields: {', '.join(fields)}" if fields else "Token response is not a JSON object"
            raise ResponseParseError("token", message, detail=str(e)) from e

        logger.debug(f"Token issued, expires in {token_data.expires_in}s")

        return AccessToken(
            value=token_data.access_token,
            token_type=token_data.token_type,
            expires_in_seconds=token_data.expires_in
        )
