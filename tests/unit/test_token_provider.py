#!/usr/bin/env python3
"""
Unit tests for the client-credentials token exchange.
"""

import base64
import pytest

from radar_sync.api.base_client import AuthenticationError, ResponseParseError, TransportError
from radar_sync.api.token_provider import TokenProvider, basic_auth_header
from radar_sync.models.credentials import Credentials

TOKEN_URL = "https://accounts.spotify.com/api/token"

class TestTokenProvider:
    """Unit tests for TokenProvider."""

    def test_basic_auth_header(self, credentials):
        """Test header is base64 of id:secret."""
        header = basic_auth_header(credentials)

        assert header.startswith("Basic ")
        decoded = base64.b64decode(header[len("Basic "):]).decode()
        assert decoded == "test_client_id:test_client_secret"

    @pytest.mark.asyncio
    async def test_acquire_token_success(self, credentials, fake_fetch):
        """Test a 200 response yields a usable token."""
        fake_fetch.add("POST", TOKEN_URL, 200, {"access_token": "abc", "token_type": "Bearer", "expires_in": 3600})
        provider = TokenProvider(fake_fetch)

        token = await provider.acquire_token(credentials)

        assert token.value == "abc"
        assert token.token_type == "Bearer"
        assert token.expires_in_seconds == 3600
        assert token.is_usable

    @pytest.mark.asyncio
    async def test_acquire_token_request_shape(self, credentials, fake_fetch):
        """Test the request is a form POST with Basic auth."""
        fake_fetch.add("POST", TOKEN_URL, 200, {"access_token": "abc"})
        provider = TokenProvider(fake_fetch)

        await provider.acquire_token(credentials)

        assert len(fake_fetch.calls) == 1
        call = fake_fetch.calls[0]
        assert call["method"] == "POST"
        assert call["url"] == TOKEN_URL
        assert call["data"] == {"grant_type": "client_credentials"}
        assert call["headers"]["Authorization"] == basic_auth_header(credentials)
        assert call["headers"]["Content-Type"] == "application/x-www-form-urlencoded"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [
        {"access_token": "abc"},
        {"access_token": "abc", "token_type": None, "expires_in": 3600},
        {"access_token": "abc", "token_type": "Bearer", "expires_in": None},
    ])
    async def test_acquire_token_defaults_optional_fields(self, credentials, fake_fetch, body):
        """Test missing or null token_type and expires_in fall back to defaults."""
        fake_fetch.add("POST", TOKEN_URL, 200, body)

        token = await TokenProvider(fake_fetch).acquire_token(credentials)

        assert token.value == "abc"
        assert token.token_type == "Bearer"
        assert token.expires_in_seconds == 3600

    @pytest.mark.asyncio
    async def test_acquire_token_error_names_invalid_field(self, credentials, fake_fetch):
        fake_fetch.add("POST", TOKEN_URL, 200, {"access_token": "abc", "expires_in": "soon"})

        with pytest.raises(ResponseParseError) as exc_info:
            await TokenProvider(fake_fetch).acquire_token(credentials)

        assert "expires_in" in str(exc_info.value)
        assert "access_token" not in str(exc_info.value)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [400, 401, 403, 500, 503])
    async def test_acquire_token_non_success(self, credentials, fake_fetch, status):
        """Test every non-2xx status raises AuthenticationError carrying the body."""
        fake_fetch.add("POST", TOKEN_URL, status, {"error": "invalid_client"})

        with pytest.raises(AuthenticationError) as exc_info:
            await TokenProvider(fake_fetch).acquire_token(credentials)

        assert exc_info.value.status == status
        assert "invalid_client" in exc_info.value.detail
        assert len(fake_fetch.calls) == 1

    @pytest.mark.asyncio
    async def test_acquire_token_malformed_json(self, credentials, fake_fetch):
        """Test a non-JSON body raises ResponseParseError."""
        fake_fetch.add("POST", TOKEN_URL, 200, "<html>oops</html>")

        with pytest.raises(ResponseParseError) as exc_info:
            await TokenProvider(fake_fetch).acquire_token(credentials)

        assert exc_info.value.source == "token"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [{"token_type": "Bearer"}, {"access_token": ""}, [], None])
    async def test_acquire_token_missing_access_token(self, credentials, fake_fetch, body):
        """Test bodies without a usable access_token raise ResponseParseError."""
        fake_fetch.add("POST", TOKEN_URL, 200, body)

        with pytest.raises(ResponseParseError):
            await TokenProvider(fake_fetch).acquire_token(credentials)

    @pytest.mark.asyncio
    async def test_empty_credentials_are_sent_unchecked(self, fake_fetch):
        """Test empty credentials reach the endpoint and fail there."""
        fake_fetch.add("POST", TOKEN_URL, 400, {"error": "invalid_client"})

        with pytest.raises(AuthenticationError):
            await TokenProvider(fake_fetch).acquire_token(Credentials("", ""))

        assert len(fake_fetch.calls) == 1

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self, credentials, fake_fetch):
        """Test transport failures are not converted or retried."""
        fake_fetch.routes[("POST", TOKEN_URL)] = TransportError("connection refused")

        with pytest.raises(TransportError):
            await TokenProvider(fake_fetch).acquire_token(credentials)

        assert len(fake_fetch.calls) == 1

    @pytest.mark.asyncio
    async def test_token_not_cached(self, credentials, fake_fetch):
        """Test each call performs a fresh exchange."""
        fake_fetch.add("POST", TOKEN_URL, 200, {"access_token": "abc"})
        provider = TokenProvider(fake_fetch)

        await provider.acquire_token(credentials)
        await provider.acquire_token(credentials)

        assert len(fake_fetch.calls) == 2

    def test_credentials_repr_hides_secret(self, credentials):
        """Test the secret never appears in repr."""
        assert "test_client_secret" not in repr(credentials)
