import logging

from supabase import create_client, Client

import settings

logger = logging.getLogger("leetcode_watchlist.database")

_client: Client | None = None


# Created on first use so importing this module needs no credentials
def get_client() -> Client:
    global _client
    if _client is None:
        if not settings.SUPABASE_URL or not settings.SUPABASE_KEY:
            raise ValueError("SUPABASE_URL and SUPABASE_KEY must be set to read linked users.")
        _client = create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
    return _client


# Get LeetCode usernames of all linked users, in insertion order
def get_linked_usernames() -> list[str]:
    data = get_client().table("users").select("leetcode_username").execute()
    usernames = [row["leetcode_username"] for row in data.data if row.get("leetcode_username")]
    logger.debug("Loaded %d linked usernames from supabase", len(usernames))
    return usernames
