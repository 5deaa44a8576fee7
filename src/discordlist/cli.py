"""Command line interface for the discordlist.gg client."""

import asyncio
import json
import logging
import sys
from typing import Any, Awaitable, Callable, Optional, Tuple, Type

import click
from pydantic import ValidationError

from .client import DiscordlistClient
from .config import DiscordlistSettings, get_settings
from .exceptions import DiscordlistError
from .undocumented import (
    SearchFilter,
    SearchFilterMode,
    SearchOptions,
    SearchOrder,
    SearchSort,
    UndocumentedClient,
)

logger = logging.getLogger(__name__)


def setup_logging(log_level: str) -> None:
    """Send colored log lines to stderr."""
    import colorlog

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(
        colorlog.ColoredFormatter(
            "%(log_color)s%(levelname)-8s%(reset)s %(name)s: %(message)s"
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers[:] = [console_handler]
    root_logger.setLevel(log_level.upper())

    logging.getLogger("httpx").setLevel(logging.WARNING)


def _load_settings() -> DiscordlistSettings:
    try:
        return get_settings()
    except ValidationError as e:
        click.echo(f"❌ Configuration error: {e}", err=True)
        sys.exit(1)


def _build_client(
    settings: DiscordlistSettings, client_cls: Type[DiscordlistClient]
) -> DiscordlistClient:
    return client_cls.from_settings(settings)


def _run(
    call: Callable[[Any], Awaitable[Any]],
    client_cls: Type[DiscordlistClient] = UndocumentedClient,
) -> Any:
    """Run one client call against a fresh client, exiting non-zero on failure."""
    settings = _load_settings()
    ctx = click.get_current_context()
    if not ctx.find_root().obj.get("log_level"):
        logging.getLogger().setLevel(settings.log_level)

    async def _main() -> Any:
        async with _build_client(settings, client_cls) as client:
            return await call(client)

    try:
        return asyncio.run(_main())
    except DiscordlistError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)


def _echo_json(payload: Any) -> None:
    click.echo(json.dumps(payload, indent=2))


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    default=None,
    help="Overrides DLIST_LOG_LEVEL.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: Optional[str]) -> None:
    """discordlist.gg API client."""
    ctx.ensure_object(dict)
    ctx.obj["log_level"] = log_level
    setup_logging(log_level or "INFO")


@cli.command("update-guilds")
@click.argument("guild_count", type=click.IntRange(min=0))
def update_guilds(guild_count: int) -> None:
    """Set the guild count shown on the bot's listing."""
    _run(
        lambda client: client.set_guild_count(guild_count),
        client_cls=DiscordlistClient,
    )
    click.echo(f"✅ Guild count set to {guild_count}")


@cli.command("get-bot")
@click.argument("bot_id", type=click.IntRange(min=0))
def get_bot(bot_id: int) -> None:
    """Print a bot listing as JSON."""
    bot = _run(lambda client: client.get_bot(bot_id))
    _echo_json(bot.to_payload())


@cli.command("get-user")
@click.argument("user_id", type=click.IntRange(min=0))
def get_user(user_id: int) -> None:
    """Print a user profile as JSON."""
    user = _run(lambda client: client.get_user(user_id))
    _echo_json(user.to_payload())


@cli.command()
@click.argument("query", required=False)
@click.option("--limit", type=int, default=21, show_default=True)
@click.option("--offset", type=int, default=0, show_default=True)
@click.option(
    "--sort",
    type=click.Choice([s.value for s in SearchSort]),
    default=SearchSort.TRENDING.value,
    show_default=True,
)
@click.option(
    "--order",
    type=click.Choice([o.value for o in SearchOrder]),
    default=SearchOrder.DESCENDING.value,
    show_default=True,
)
@click.option("--tag", "tags", multiple=True, help="Filter by tag (repeatable).")
@click.option("--premium", is_flag=True, help="Only premium listings.")
@click.option("--union", is_flag=True, help="Match any tag instead of all tags.")
def search(
    query: Optional[str],
    limit: int,
    offset: int,
    sort: str,
    order: str,
    tags: Tuple[str, ...],
    premium: bool,
    union: bool,
) -> None:
    """Search listed bots and print the results as JSON."""
    search_filter = (
        SearchFilter()
        .with_tags(tags)
        .with_premium(premium)
        .with_filter_mode(
            SearchFilterMode.UNION if union else SearchFilterMode.INTERSECTION
        )
    )
    options = (
        SearchOptions()
        .with_limit(limit)
        .with_offset(offset)
        .with_sort(SearchSort(sort))
        .with_order(SearchOrder(order))
        .with_filter(search_filter)
    )
    if query:
        options = options.with_query(query)

    results = _run(lambda client: client.search(options))
    _echo_json(results.to_payload())


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
