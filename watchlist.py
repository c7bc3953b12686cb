import json
import logging

import settings

logger = logging.getLogger("leetcode_watchlist.watchlist")


def load_watchlist(path: str | None = None) -> list[str] | None:
    """
    Reads the watchlist JSON file: a plain array of LeetCode usernames.
    Returns None (after logging why) when the file is missing or is not a
    JSON array, so callers can hand the result straight to the batch runner.
    """
    path = path or settings.WATCHLIST_FILE
    try:
        with open(path, "r") as f:
            usernames = json.load(f)
    except FileNotFoundError:
        logger.error("Watchlist file not found: %s", path)
        return None
    except json.JSONDecodeError as e:
        logger.error("Watchlist file %s is not valid JSON: %s", path, e)
        return None

    if not isinstance(usernames, list):
        logger.error("Watchlist file %s must contain a JSON array of usernames", path)
        return None

    valid = [u for u in usernames if isinstance(u, str)]
    if len(valid) != len(usernames):
        logger.warning("Dropped %d non-string entries from %s", len(usernames) - len(valid), path)
    return valid


def load_usernames(source: str | None = None) -> list[str] | None:
    source = source or settings.WATCHLIST_SOURCE
    if source == "file":
        return load_watchlist()
    if source == "supabase":
        # imported here so the file source works without supabase credentials
        from database import get_linked_usernames

        try:
            return get_linked_usernames()
        except Exception as e:
            logger.error(f"Failed to load linked usernames from supabase: {e!r}")
            return None
    logger.error("Unknown watchlist source: %s", source)
    return None
