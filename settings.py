import os

# LeetCode
LEETCODE_GRAPHQL_URL = os.getenv("LEETCODE_GRAPHQL_URL", "https://leetcode.com/graphql")

# Watchlist: "file" reads WATCHLIST_FILE, "supabase" reads the linked users table
WATCHLIST_SOURCE = os.getenv("WATCHLIST_SOURCE", "file")
WATCHLIST_FILE = os.getenv("WATCHLIST_FILE", "data/watchlist.json")

LOG_FILE = os.getenv("LOG_FILE", "leetcode_watchlist.log")

DISCORD_TOKEN = os.getenv("DISCORD_BOT_TOKEN")

SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_KEY = os.getenv("SUPABASE_KEY")
