import argparse
import asyncio
import json

from log import setup_logging
from profiles import fetch_all_profiles
from watchlist import load_usernames


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Fetch LeetCode stats for a watchlist of users.")
    parser.add_argument("usernames", nargs="*", help="LeetCode usernames (defaults to the watchlist)")
    parser.add_argument("--source", choices=["file", "supabase"], default=None,
                        help="where to read the watchlist from when no usernames are given")
    return parser.parse_args(argv)


async def run(usernames: list[str] | None) -> list[dict]:
    profiles = await fetch_all_profiles(usernames)
    return [profile.to_dict() for profile in profiles]


def main(argv=None) -> int:
    args = parse_args(argv)
    logger = setup_logging(stream=True)
    usernames = args.usernames or load_usernames(args.source)
    logger.info("Fetching %d profiles", len(usernames or []))
    print(json.dumps(asyncio.run(run(usernames)), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
