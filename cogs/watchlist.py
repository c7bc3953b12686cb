# cogs/watchlist.py

import discord
from discord.ext import commands
import aiohttp
import logging
from datetime import datetime, timezone
from profiles import Difficulty, ProfileRecord, fetch_all_profiles, fetch_profile
from watchlist import load_usernames

logger = logging.getLogger("leetcode_watchlist.cogs.watchlist")

DIFFICULTY_EMOJI = {
    Difficulty.EASY: "🟢",
    Difficulty.MEDIUM: "🟡",
    Difficulty.HARD: "🔴",
}

# Discord caps an embed at 25 fields
MAX_FIELDS = 25


def format_profile(profile: ProfileRecord) -> str:
    """One line per difficulty: solved count and the beats percentile if LeetCode has one."""
    lines = []
    for difficulty in Difficulty:
        count = profile.submit_counts.get(difficulty, 0)
        line = f"{DIFFICULTY_EMOJI[difficulty]} {difficulty.value}: `{count}`"
        beats = profile.beats_percentage.get(difficulty)
        if beats is not None:
            line += f" (beats `{beats:.2f}%`)"
        lines.append(line)
    return "\n".join(lines)


def build_embed(title: str, profiles: list[ProfileRecord]) -> discord.Embed:
    embed = discord.Embed(
        title=title,
        color=discord.Color.orange(),
        timestamp=datetime.now(timezone.utc)
    )
    embed.set_thumbnail(url="https://leetcode.com/static/images/LeetCode_logo_rvs.png")
    for profile in profiles[:MAX_FIELDS]:
        embed.add_field(
            name=profile.username,
            value=format_profile(profile),
            inline=False
        )
    if len(profiles) > MAX_FIELDS:
        embed.set_footer(text=f"Showing {MAX_FIELDS} of {len(profiles)} profiles")
    return embed


class Watchlist(commands.Cog):
    def __init__(self, bot):
        self.bot = bot

    @commands.command(name="watchlist")
    async def watchlist(self, ctx, *usernames: str):
        """
        Usage: !watchlist [username ...]
        Without arguments the configured watchlist is used.
        """
        names = list(usernames) or load_usernames()
        if not names:
            await ctx.send("⚠️ The watchlist is empty.")
            return

        async with ctx.typing():
            async with aiohttp.ClientSession() as session:
                profiles = await fetch_all_profiles(names, session)

        if not profiles:
            await ctx.send("⚠️ Couldn’t fetch any LeetCode profiles from the watchlist.")
            return

        logger.info("Posting %d watchlist profiles to %s", len(profiles), ctx.channel)
        await ctx.send(embed=build_embed("📈 LeetCode Watchlist", profiles))

    @commands.command(name="profile")
    async def profile(self, ctx, username: str):
        """Usage: !profile <leetcode username>"""
        async with aiohttp.ClientSession() as session:
            profile = await fetch_profile(username, session)

        if profile is None:
            await ctx.send(f"⚠️ Couldn’t fetch LeetCode stats for `{username}`. Are you sure the username is correct?")
            return

        await ctx.send(embed=build_embed(f"📈 LeetCode Stats for {username}", [profile]))


async def setup(bot):
    await bot.add_cog(Watchlist(bot))
