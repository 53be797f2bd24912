"""
Integrations module for the Daily Pulse service.
Handles the hosted Supabase backend (tables and auth).
"""

from .supabase_integration import (
    AuthenticatedUser,
    SupabaseError,
    SupabaseStore,
)

__all__ = [
    "AuthenticatedUser",
    "SupabaseError",
    "SupabaseStore",
]
