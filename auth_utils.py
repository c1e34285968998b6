from typing import Optional

from supabase import create_client, Client
from config import Config

_supabase: Optional[Client] = None


def get_supabase() -> Optional[Client]:
    """Shared Supabase client, or None when SUPABASE_URL/KEY are not set."""
    global _supabase
    if _supabase is None and Config.SUPABASE_URL and Config.SUPABASE_KEY:
        _supabase = create_client(Config.SUPABASE_URL, Config.SUPABASE_KEY)
    return _supabase


def get_user_from_token(token):
    supabase = get_supabase()
    if supabase is None or not token:
        return None
    response = supabase.auth.get_user(token)
    return response.user if response else None


def resolve_user_id(profile) -> Optional[str]:
    """Profile id first, then the profile's user_id column."""
    if not profile:
        return None
    if isinstance(profile, dict):
        return profile.get("id") or profile.get("user_id")
    return getattr(profile, "id", None) or getattr(profile, "user_id", None)
