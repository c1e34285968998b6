import logging
from typing import Optional

from postgrest.exceptions import APIError

from .errors import StoreError

logger = logging.getLogger(__name__)


class ResultRecorder:
    """Append-only writer for the Supabase sweat results table."""

    def __init__(self, supabase, table: str = "sweat_results"):
        self.supabase = supabase
        self.table = table

    def persist(self, record) -> Optional[StoreError]:
        """Insert one result row. Returns None on success, a StoreError otherwise."""
        if self.supabase is None:
            return StoreError("Result storage is not configured.")
        try:
            self.supabase.table(self.table).insert([record.to_row()]).execute()
        except APIError as e:
            logger.error("Insert error: %s", e)
            return StoreError(e.message or str(e), code=e.code, details=e.details)
        except Exception as e:
            # connectivity and client errors
            logger.error("Insert error: %s", e)
            return StoreError(str(e))
        return None

    def history(self, user_id):
        res = (
            self.supabase.table(self.table)
            .select("*")
            .eq("user_id", user_id)
            .order("created_at", desc=False)
            .execute()
        )
        return res.data
