import discord
from discord.ext import commands
import os

import settings
from log import setup_logging

logger = setup_logging()

intents = discord.Intents.default()
intents.message_content = True

bot = commands.Bot(command_prefix="!", intents=intents)

COGS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "cogs")


def cog_names():
    for filename in sorted(os.listdir(COGS_DIR)):
        if filename.endswith(".py") and filename != "__init__.py":
            yield filename[:-3]


@bot.event
async def on_ready():
    await bot.change_presence(activity=discord.Game("LeetCode Watchlist"))
    logger.info("Logged in as %s", bot.user)

@bot.command()
async def reload(ctx):
    """Reload all cogs."""
    for name in cog_names():
        try:
            await bot.reload_extension(f"cogs.{name}")
        except commands.ExtensionError as e:
            await ctx.send(f"❌ Failed to reload {name}: {e}")
            logger.error("Failed to reload %s: %s", name, e)
            return
    await ctx.send("✅ All cogs reloaded successfully.")

async def load_cogs():
    for name in cog_names():
        logger.info("Loading cog: %s", name)
        await bot.load_extension(f"cogs.{name}")

@bot.event
async def setup_hook():
    await load_cogs()


if __name__ == "__main__":
    if not settings.DISCORD_TOKEN:
        raise ValueError("DISCORD_BOT_TOKEN is not set in environment variables.")
    bot.run(settings.DISCORD_TOKEN)
