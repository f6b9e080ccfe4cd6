"""
Tests for the Supabase JWT auth dependencies.
"""

import asyncio
from unittest.mock import MagicMock, patch

import pytest
from fastapi import HTTPException

from ecolar.db.client import get_authenticated_client
from ecolar.web.auth import get_current_user, get_optional_user


def _run(coro):
    """Run an async coroutine synchronously (no pytest-asyncio needed)."""
    return asyncio.run(coro)


def _service_client(user_id="user-1", email="ana@example.com"):
    client = MagicMock()
    client.auth.get_user.return_value = MagicMock(user=MagicMock(id=user_id, email=email))
    return client


class TestGetCurrentUser:
    def test_valid_token(self):
        client = _service_client()
        with patch("ecolar.web.auth.get_service_client", return_value=client):
            user = _run(get_current_user("Bearer token-abc"))

        client.auth.get_user.assert_called_once_with("token-abc")
        assert user.id == "user-1"
        assert user.email == "ana@example.com"
        assert user.access_token == "token-abc"

    def test_missing_header(self):
        with pytest.raises(HTTPException) as exc:
            _run(get_current_user(None))
        assert exc.value.status_code == 401

    def test_wrong_scheme(self):
        with pytest.raises(HTTPException) as exc:
            _run(get_current_user("Basic abc"))
        assert exc.value.status_code == 401

    def test_rejected_token(self):
        client = MagicMock()
        client.auth.get_user.return_value = MagicMock(user=None)
        with patch("ecolar.web.auth.get_service_client", return_value=client):
            with pytest.raises(HTTPException) as exc:
                _run(get_current_user("Bearer expired"))
        assert exc.value.status_code == 401

    def test_supabase_error(self):
        client = MagicMock()
        client.auth.get_user.side_effect = RuntimeError("jwt expired")
        with patch("ecolar.web.auth.get_service_client", return_value=client):
            with pytest.raises(HTTPException) as exc:
                _run(get_current_user("Bearer expired"))
        assert exc.value.status_code == 401


class TestGetOptionalUser:
    def test_no_header_is_none(self):
        assert _run(get_optional_user(None)) is None

    def test_bad_token_is_none(self):
        client = MagicMock()
        client.auth.get_user.side_effect = RuntimeError("invalid JWT")
        with patch("ecolar.web.auth.get_service_client", return_value=client):
            assert _run(get_optional_user("Bearer nope")) is None

    def test_valid_token(self):
        with patch("ecolar.web.auth.get_service_client", return_value=_service_client()):
            user = _run(get_optional_user("Bearer token-abc"))
        assert user.id == "user-1"
        assert user.access_token == "token-abc"


class TestAuthenticatedClient:
    def test_token_scopes_postgrest(self):
        client = MagicMock()
        with patch("ecolar.db.client.create_client", return_value=client):
            assert get_authenticated_client("token-abc") is client
        client.postgrest.auth.assert_called_once_with("token-abc")

    def test_no_token_uses_anon_client(self):
        anon = MagicMock()
        with patch("ecolar.db.client.get_client", return_value=anon):
            assert get_authenticated_client(None) is anon
