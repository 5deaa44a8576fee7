"""Client with the undocumented endpoints enabled."""

import logging
from typing import Optional

from ..client import DiscordlistClient
from .models import Bot, Command, SearchResults, User
from .search import SearchOptions

logger = logging.getLogger(__name__)

SEARCH_HOST = "search.discordlist.gg"


class UndocumentedClient(DiscordlistClient):
    """DiscordlistClient plus bot/user lookup, command registration and search."""

    async def add_bot_command(self, command: Command) -> Command:
        """Add or update a command on the bot's listing page."""
        response = await self._request(
            "POST",
            self.endpoint(f"/bots/{self.bot_id}/commands/{command.id}"),
            json=command.to_payload(),
        )
        created = self._decode(response, Command)
        if "id" not in created.model_fields_set:
            created = created.model_copy(update={"id": command.id})
        return created

    async def get_bot(self, id: int) -> Bot:
        """Fetch a bot listing by its numeric ID."""
        response = await self._request("POST", self.endpoint(f"/bots/{int(id)}"))
        return self._decode(response, Bot)

    async def get_user(self, id: int) -> User:
        """Fetch a discordlist.gg user by numeric ID."""
        response = await self._request("POST", self.endpoint(f"/users/{int(id)}"))
        return self._decode(response, User)

    async def search(self, options: Optional[SearchOptions] = None) -> SearchResults:
        """
        Search listed bots.

        Sent to the search host instead of the API host; the path is the
        same. An unset query is sent as the wildcard ``"*"``.
        """
        if options is None:
            options = SearchOptions()
        if options.query is None:
            options = options.with_query("*")

        url = self.endpoint("/bots/search").copy_with(host=SEARCH_HOST)
        logger.debug(f"🔍 Searching bots with query {options.query!r}")

        response = await self._request("POST", url, json=options.to_payload())
        return self._decode(response, SearchResults)
