"""
EcoLar - Supabase Client.

Low-level database access. All queries go through here.
"""

from supabase import Client, create_client

from ecolar.config import settings

# Singleton client instances
_client: Client | None = None
_service_client: Client | None = None


def get_client() -> Client:
    """
    Get the anon Supabase client.

    Uses singleton pattern to reuse connection.
    """
    global _client

    if _client is None:
        _client = create_client(
            settings.supabase_url,
            settings.supabase_anon_key,
        )

    return _client


def get_service_client() -> Client:
    """
    Get the service-role Supabase client.

    Bypasses RLS - only used for token validation and admin tooling.
    """
    global _service_client

    if _service_client is None:
        _service_client = create_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
        )

    return _service_client


def get_authenticated_client(access_token: str | None = None) -> Client:
    """
    Get a client whose PostgREST calls run as the signed-in user.

    Without a token this is the shared anon client. A fresh client is built
    per token so one user's token never reaches another request.
    """
    if not access_token:
        return get_client()

    client = create_client(settings.supabase_url, settings.supabase_anon_key)
    client.postgrest.auth(access_token)
    return client
