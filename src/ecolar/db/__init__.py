"""
EcoLar - Database Client.

Provides Supabase access for the profile table.
"""

from ecolar.db.client import get_client, get_service_client, get_authenticated_client
from ecolar.db.profiles import SupabaseProfileStore

__all__ = [
    "get_client",
    "get_service_client",
    "get_authenticated_client",
    "SupabaseProfileStore",
]
