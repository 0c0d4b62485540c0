# core/assignment_store.py

"""
Building assignments for DynamicAssignment roles.

Reads the `user_building_access` table. Any failure yields an empty
list, which the engine treats as "no access".
"""

from typing import List, Optional

from core.config import settings
from core.logging_config import logger
from core.supabase_client import get_supabase_client


def get_assigned_building_ids(user_id: Optional[str]) -> List[str]:
    if not user_id:
        return []

    client = get_supabase_client()
    if client is None:
        return []

    try:
        result = (
            client.table(settings.ASSIGNMENT_TABLE)
            .select("building_id")
            .eq("user_id", user_id)
            .execute()
        )
    except Exception as e:
        logger.warning(f"Failed to fetch building assignments for {user_id}: {e}")
        return []

    return [row["building_id"] for row in (result.data or [])]
