"""
EcoLar - Profile store.

Supabase-backed implementation of the onboarding ProfileStore:
a single-row onboarding status lookup and the profile upsert.
"""

import logging
from typing import Any

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from ecolar.config import settings
from ecolar.db.client import get_authenticated_client
from onboarding.errors import ProfileLookupError, SubmissionError

logger = logging.getLogger(__name__)

# PostgREST: .single() matched zero rows
NO_ROWS_CODE = "PGRST116"


def is_no_rows_error(error: APIError) -> bool:
    """True when a .single() query failed only because no row matched."""
    return getattr(error, "code", None) == NO_ROWS_CODE


class SupabaseProfileStore:
    """
    Reads and writes the user's profile row.

    Without an explicit client, queries run as the user owning access_token,
    so RLS applies to both calls.
    """

    def __init__(
        self,
        client: Client | None = None,
        table: str | None = None,
        access_token: str | None = None,
    ):
        self._client = client
        self._table = table
        self._access_token = access_token

    @property
    def table(self) -> str:
        return self._table or settings.user_infos_table

    def _get_client(self) -> Client:
        return self._client or get_authenticated_client(self._access_token)

    async def fetch_onboarding_status(self, user_id: str) -> dict[str, Any] | None:
        """
        Look up the onboarding flag for a user.

        Returns the row (``{"onboarding_completed": ...}``) or None when the
        user has no profile row yet. Any other failure raises ProfileLookupError.
        """
        client = self._get_client()
        try:
            response = (
                client.table(self.table)
                .select("onboarding_completed")
                .eq("user_id", user_id)
                .single()
                .execute()
            )
        except APIError as e:
            if is_no_rows_error(e):
                logger.debug(f"No profile row yet for user {user_id}")
                return None
            raise ProfileLookupError(e.message or repr(e)) from e
        except httpx.HTTPError as e:
            raise ProfileLookupError(f"Profile lookup failed: {e}") from e

        return response.data

    async def upsert_profile(self, user_id: str, payload: dict[str, Any]) -> None:
        """Insert or update the profile row keyed by user_id."""
        client = self._get_client()
        data = {"user_id": user_id, **payload}
        try:
            client.table(self.table).upsert(data, on_conflict="user_id").execute()
        except APIError as e:
            raise SubmissionError(e.message or repr(e)) from e
        except httpx.HTTPError as e:
            raise SubmissionError(f"Profile upsert failed: {e}") from e
