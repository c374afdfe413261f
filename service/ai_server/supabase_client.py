"""
Supabase client used by the accessors in ai_server.db.
"""

from supabase import create_client, Client
from ai_server.config import get_settings


def get_supabase_admin() -> Client:
    """Client authorized with the service role key (RLS does not apply)."""
    settings = get_settings()
    if not settings.supabase_url or not settings.supabase_service_role_key:
        raise RuntimeError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")
    return create_client(
        settings.supabase_url,
        settings.supabase_service_role_key
    )
