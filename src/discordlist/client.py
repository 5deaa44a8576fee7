"""
HTTP client for the documented discordlist.gg API.

Every operation goes through the same request path: endpoint URL, bearer
auth, optional query string or JSON body, status check, optional decode
into a pydantic model.
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel, SecretStr, ValidationError

from . import __repository__, __version__
from .exceptions import (
    ApiError,
    DecodeError,
    RequestTimeoutError,
    TransportError,
    TransportInitError,
)

if TYPE_CHECKING:
    from .config import DiscordlistSettings

logger = logging.getLogger(__name__)

API_BASE_URL = "https://api.discordlist.gg/v0"
USER_AGENT = f"discordlist-py/{__version__} ({__repository__})"

M = TypeVar("M", bound=BaseModel)


class DiscordlistClient:
    """
    Client bound to one bot listing.

    Args:
        token: Token from the Manage > Webhooks page on discordlist.gg.
            Do not prepend "Bearer" or "Bot".
        bot_id: Numeric ID of the bot, as seen in its discordlist.gg URLs.
        timeout: Seconds before a single request is abandoned.
        transport: Optional httpx transport, mainly for tests.

    Raises:
        TransportInitError: If the HTTP/TLS stack cannot be initialized.
    """

    def __init__(
        self,
        token: Union[str, SecretStr],
        bot_id: int,
        timeout: float = 5.0,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._token = token if isinstance(token, SecretStr) else SecretStr(token)
        self._bot_id = int(bot_id)
        self._timeout = timeout

        try:
            self._http = httpx.AsyncClient(
                headers={"User-Agent": USER_AGENT},
                timeout=httpx.Timeout(timeout),
                transport=transport,
            )
        except (OSError, ValueError) as e:
            raise TransportInitError(f"Could not initialize HTTP transport: {e}") from e

    @classmethod
    def from_settings(cls, settings: "DiscordlistSettings", **kwargs: Any):
        """Build a client from loaded settings."""
        return cls(settings.token, settings.bot_id, settings.timeout, **kwargs)

    @property
    def token(self) -> str:
        return self._token.get_secret_value()

    @property
    def bot_id(self) -> int:
        return self._bot_id

    @property
    def timeout(self) -> float:
        return self._timeout

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(bot_id={self._bot_id}, timeout={self._timeout})>"

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    @staticmethod
    def endpoint(path: str) -> httpx.URL:
        """Absolute URL of an API path, e.g. ``/bots/1/guilds``."""
        return httpx.URL(f"{API_BASE_URL}{path}")

    async def _request(
        self,
        method: str,
        url: httpx.URL,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
    ) -> httpx.Response:
        """Send an authenticated request and raise on any non-success outcome."""
        headers = {"Authorization": f"Bearer {self.token}"}
        logger.debug(f"🔄 {method} {url}")

        try:
            response = await self._http.request(
                method, url, params=params, json=json, headers=headers
            )
        except httpx.TimeoutException as e:
            logger.warning(f"⏱️ {method} {url} timed out after {self._timeout}s")
            raise RequestTimeoutError(method, str(url), str(e) or "timed out") from e
        except httpx.RequestError as e:
            logger.warning(f"❌ {method} {url} failed: {e}")
            raise TransportError(method, str(url), str(e)) from e

        if response.is_success:
            logger.debug(f"✅ {method} {url} -> {response.status_code}")
            return response

        logger.warning(f"❌ {method} {url} returned HTTP {response.status_code}")
        raise ApiError(response.status_code, method, str(url), response.text)

    @staticmethod
    def _decode(response: httpx.Response, model: Type[M]) -> M:
        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            raise DecodeError(model.__name__, response.text, str(e)) from e

    async def set_guild_count(self, guild_count: int) -> None:
        """Set the guild count displayed on the bot's listing page."""
        await self._request(
            "PUT",
            self.endpoint(f"/bots/{self._bot_id}/guilds"),
            params={"count": guild_count},
        )
