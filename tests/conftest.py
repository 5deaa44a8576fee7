"""
Test configuration and fixtures for the discordlist test suite.
"""

import json
from typing import Callable, List, Type

import httpx
import pytest

from discordlist import DiscordlistClient

TEST_TOKEN = "test_token"
TEST_BOT_ID = 123456789012345678


class RecordingHandler:
    """Mock transport handler that records requests and replays one response."""

    def __init__(self, status_code: int = 200, payload=None, text: str = ""):
        self.status_code = status_code
        self.payload = payload
        self.text = text
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.payload is not None:
            return httpx.Response(self.status_code, json=self.payload)
        return httpx.Response(self.status_code, text=self.text)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def make_client() -> Callable[..., DiscordlistClient]:
    """Build a client whose requests go to a mock handler."""

    def _make(handler, client_cls: Type[DiscordlistClient] = DiscordlistClient):
        return client_cls(
            TEST_TOKEN,
            TEST_BOT_ID,
            timeout=5.0,
            transport=httpx.MockTransport(handler),
        )

    return _make


# Test data helpers
def create_test_bot_data(**overrides):
    """Create a bot listing payload as the service sends it."""
    base_data = {
        "flags": 0,
        "botId": None,
        "features": 5,
        "id": "123456789012345678",
        "username": "TestBot",
        "avatar": "a1b2c3",
        "discriminator": 0,
        "prefix": "!",
        "isPackable": True,
        "isHidden": False,
        "isForcedIntoHiding": False,
        "inviteUrl": "https://discord.com/oauth2/authorize?client_id=123456789012345678",
        "webhookUrl": None,
        "webhookAuth": None,
        "websiteUrl": "https://example.com",
        "repoUrl": "https://github.com/example/testbot",
        "twitterUrl": "",
        "instagramUrl": "",
        "supportServerUrl": "https://discord.gg/example",
        "slug": "testbot",
        "tags": ["music", "fun"],
        "createdOn": "2024-01-01T00:00:00Z",
        "ownerId": "987654321",
        "coOwnerIds": ["555666777"],
        "briefDescription": "A bot for tests",
        "longDescription": "A much longer description of the test bot.",
        "guildCount": 1200,
        "votes": 34,
        "allTimeVotes": 560,
    }
    base_data.update(overrides)
    return base_data


def create_test_user_data(**overrides):
    """Create a user profile payload as the service sends it."""
    base_data = {
        "avatar": None,
        "banner": None,
        "bio": None,
        "bots": ["123456789012345678"],
        "claps": 3,
        "coOwnedBots": [],
        "coOwnedGuilds": [],
        "createdOn": "2023-06-01T12:00:00Z",
        "discriminator": 0,
        "displayName": None,
        "flags": 0,
        "guilds": [],
        "id": "987654321",
        "packs": [],
        "slug": None,
        "username": "testuser",
    }
    base_data.update(overrides)
    return base_data


def create_test_search_data(**overrides):
    """Create a search response payload as the search host sends it."""
    base_data = {
        "hits": [
            {
                "avatar": "a1b2c3",
                "briefDescription": "A bot for tests",
                "coOwnerIds": [],
                "createdOn": "1704067200",
                "discriminator": 0,
                "features": "5",
                "flags": "0",
                "guildCount": "1200",
                "id": "123456789012345678",
                "inviteUrl": "https://discord.com/oauth2/authorize?client_id=123456789012345678",
                "ownerId": "987654321",
                "prefix": "!",
                "tags": "music,fun",
                "username": "TestBot",
                "votes": "34",
            }
        ],
        "limit": 21,
        "nbHits": 1,
        "offset": 0,
        "query": "*",
        "tagDistribution": {"music": 1, "fun": 1},
    }
    base_data.update(overrides)
    return base_data
