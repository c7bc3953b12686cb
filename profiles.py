import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping, TypeVar

import aiohttp

import settings
from graphql_queries import GRAPHQL_HEADERS, USER_PROBLEMS_SOLVED_QUERY

logger = logging.getLogger("leetcode_watchlist.profiles")

T = TypeVar("T")


class Difficulty(str, Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


_DIFFICULTIES = {difficulty.value: difficulty for difficulty in Difficulty}


class FetchError(str, Enum):
    EMPTY_USERNAME = "profiles.empty_username"
    UNKNOWN_USER = "profiles.unknown_user"
    TRANSPORT_FAILURE = "profiles.transport_failure"


@dataclass(frozen=True)
class ProfileRecord:
    username: str
    submit_counts: Mapping[Difficulty, int] = field(default_factory=dict)
    beats_percentage: Mapping[Difficulty, float] = field(default_factory=dict)

    def __post_init__(self):
        # read-only copies keyed by Difficulty, so the record cannot change after construction
        for name in ("submit_counts", "beats_percentage"):
            frozen = MappingProxyType(
                {Difficulty(d): value for d, value in getattr(self, name).items()}
            )
            object.__setattr__(self, name, frozen)

    def __hash__(self):
        return hash(
            (
                self.username,
                tuple(sorted(self.submit_counts.items())),
                tuple(sorted(self.beats_percentage.items())),
            )
        )

    def to_dict(self) -> dict[str, Any]:
        """
        Render the record in the camelCase shape consumers of the watchlist expect.
        Difficulties LeetCode sent as null are absent here rather than null.
        """
        return {
            "username": self.username,
            "submitCounts": {d.value: n for d, n in self.submit_counts.items()},
            "beatsPercentage": {d.value: p for d, p in self.beats_percentage.items()},
        }


def flatten_stats(
    entries: Iterable[dict[str, Any]] | None,
    value_key: str,
    cast: Callable[[Any], T],
) -> dict[Difficulty, T]:
    """
    Turns LeetCode's list of {difficulty, <value_key>} pairs into a mapping
    keyed by Difficulty. Buckets outside Easy/Medium/Hard (e.g. "All") and
    entries with a null value are left out.
    """
    flattened: dict[Difficulty, T] = {}
    for entry in entries or []:
        difficulty = _DIFFICULTIES.get(entry["difficulty"])
        if difficulty is None:
            continue
        value = entry.get(value_key)
        if value is None:
            continue
        flattened[difficulty] = cast(value)
    return flattened


def build_profile(username: str, matched_user: dict[str, Any]) -> ProfileRecord:
    return ProfileRecord(
        username=username,
        submit_counts=flatten_stats(
            matched_user["submitStatsGlobal"]["acSubmissionNum"], "count", int
        ),
        beats_percentage=flatten_stats(
            matched_user["problemsSolvedBeatsStats"], "percentage", float
        ),
    )


def username_sort_key(profile: ProfileRecord) -> tuple[str, str]:
    # case-insensitive first, lowercase ahead of uppercase on ties
    return profile.username.casefold(), profile.username.swapcase()


def sort_profiles(profiles: Iterable[ProfileRecord]) -> list[ProfileRecord]:
    return sorted(profiles, key=username_sort_key)


class ProfileFetcher:
    """Fetches one LeetCode profile per call over a shared aiohttp session."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        url: str | None = None,
        query: str = USER_PROBLEMS_SOLVED_QUERY,
        headers: dict[str, str] | None = None,
    ):
        self.session = session
        self.url = url or settings.LEETCODE_GRAPHQL_URL
        self.query = query
        self.headers = dict(headers or GRAPHQL_HEADERS)

    def build_payload(self, username: str) -> dict[str, Any]:
        return {"query": self.query, "variables": {"username": username}}

    async def fetch(self, username: str | None) -> ProfileRecord | None:
        """
        Returns the flattened profile for `username`, or None when the name is
        empty, LeetCode has no such user, or the request fails. Every failure is
        logged here; nothing is raised to the caller.
        """
        if not username:
            logger.error("No username specified. [%s]", FetchError.EMPTY_USERNAME.value)
            return None

        logger.debug("Fetching LeetCode profile for %s", username)
        try:
            async with self.session.post(
                self.url, json=self.build_payload(username), headers=self.headers
            ) as resp:
                if resp.status != 200:
                    logger.error(
                        "LeetCode returned HTTP %s for %s [%s]",
                        resp.status,
                        username,
                        FetchError.TRANSPORT_FAILURE.value,
                    )
                    return None
                if resp.content_type != "application/json":
                    text = await resp.text()
                    logger.error(
                        f"Non-JSON response for {username}: {text[:300]} "
                        f"[{FetchError.TRANSPORT_FAILURE.value}]"
                    )
                    return None
                result = await resp.json()
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.error(
                f"Failed to fetch profile for {username}: {e!r} "
                f"[{FetchError.TRANSPORT_FAILURE.value}]"
            )
            return None

        data = result.get("data") if isinstance(result, dict) else None
        matched_user = data.get("matchedUser") if isinstance(data, dict) else None
        if not matched_user:
            logger.error(
                "No profile found for username: %s [%s]",
                username,
                FetchError.UNKNOWN_USER.value,
            )
            return None

        try:
            profile = build_profile(username, matched_user)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.error(
                f"Unexpected profile payload for {username}: {e!r} "
                f"[{FetchError.TRANSPORT_FAILURE.value}]"
            )
            return None

        logger.info("Fetched LeetCode profile for %s", username)
        return profile


class BatchRunner:
    """Runs a ProfileFetcher over a list of usernames, one request at a time."""

    def __init__(self, fetcher: ProfileFetcher):
        self.fetcher = fetcher

    async def fetch_all(self, usernames: Iterable[str | None] | None) -> list[ProfileRecord]:
        if usernames is None:
            logger.error("No usernames found.")
            return []

        profiles: list[ProfileRecord] = []
        requested = 0
        for username in usernames:
            requested += 1
            profile = await self.fetcher.fetch(username)
            if profile is not None:
                profiles.append(profile)

        logger.info("Fetched %d of %d profiles", len(profiles), requested)
        return sort_profiles(profiles)


async def fetch_profile(
    username: str | None, session: aiohttp.ClientSession | None = None
) -> ProfileRecord | None:
    if session is None:
        async with aiohttp.ClientSession() as session:
            return await ProfileFetcher(session).fetch(username)
    return await ProfileFetcher(session).fetch(username)


async def fetch_all_profiles(
    usernames: Iterable[str | None] | None,
    session: aiohttp.ClientSession | None = None,
) -> list[ProfileRecord]:
    """Fetch every profile in `usernames` and return them sorted by username."""
    if session is None:
        async with aiohttp.ClientSession() as session:
            return await BatchRunner(ProfileFetcher(session)).fetch_all(usernames)
    return await BatchRunner(ProfileFetcher(session)).fetch_all(usernames)
