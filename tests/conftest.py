"""
Pytest configuration and fixtures for EcoLar tests.
"""

import os

import pytest

# Set test environment before importing ecolar modules
os.environ["ECOLAR_ENV"] = "development"
os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-service-key")

from ecolar.web.auth import AuthenticatedUser
from onboarding.errors import ProfileLookupError, SubmissionError
from onboarding.forms import FormData


class FakeProfileStore:
    """
    In-memory ProfileStore.

    ``row`` is what the status lookup returns; ``lookup_error`` and
    ``upsert_error`` make the respective call fail. ``gate`` and
    ``upsert_gate`` hold the lookup and the upsert until set, to simulate a
    slow network.
    """

    def __init__(self, row=None, lookup_error=None, upsert_error=None, gate=None, upsert_gate=None):
        self.row = row
        self.lookup_error = lookup_error
        self.upsert_error = upsert_error
        self.gate = gate
        self.upsert_gate = upsert_gate
        self.lookups: list[str] = []
        self.upserts: list[tuple[str, dict]] = []

    async def fetch_onboarding_status(self, user_id):
        self.lookups.append(user_id)
        if self.gate is not None:
            await self.gate.wait()
        if self.lookup_error is not None:
            raise self.lookup_error
        return self.row

    async def upsert_profile(self, user_id, payload):
        self.upserts.append((user_id, payload))
        if self.upsert_gate is not None:
            await self.upsert_gate.wait()
        if self.upsert_error is not None:
            raise self.upsert_error


class Navigator:
    """Collects navigate() calls."""

    def __init__(self):
        self.calls: list[str] = []

    def __call__(self, path):
        self.calls.append(path)


@pytest.fixture
def user():
    return AuthenticatedUser(id="user-1", email="ana@example.com", access_token="token-abc")


@pytest.fixture
def make_store():
    """Factory for FakeProfileStore with custom behavior."""
    return FakeProfileStore


@pytest.fixture
def store():
    return FakeProfileStore()


@pytest.fixture
def navigator():
    return Navigator()


@pytest.fixture
def failing_lookup_store():
    return FakeProfileStore(lookup_error=ProfileLookupError("connection reset"))


@pytest.fixture
def failing_upsert_store():
    return FakeProfileStore(upsert_error=SubmissionError("permission denied for table tb_user_infos"))


@pytest.fixture
def complete_form():
    """Every required field set, as in a typical finished wizard."""
    return FormData(
        name="  Ana ",
        household_size="3",
        residence_size="medium",
        transportation_type="bicycle",
        heating_type="solar",
        recycling_habit="always",
    )
