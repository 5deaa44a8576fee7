"""
Entity models for the undocumented discordlist.gg endpoints.

Field names are snake_case in Python and camelCase on the wire. Response
keys this library does not know about are ignored.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class DiscordlistModel(BaseModel):
    """Base model carrying the service's camelCase naming convention."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to the JSON-ready dict sent on the wire."""
        return self.model_dump(mode="json", by_alias=True)


class Command(DiscordlistModel):
    """A command shown on a bot's listing page."""

    id: int = Field(
        default=0,
        exclude=True,
        description="Server-assigned command ID, used in the request path only",
    )
    command_name: str
    description: str
    syntax: str
    categories: List[str]


class Bot(DiscordlistModel):
    """A bot's listing page."""

    flags: int
    bot_id: Optional[str] = None
    features: int
    id: str
    username: str
    avatar: str
    discriminator: int
    prefix: str
    is_packable: bool
    is_hidden: bool
    is_forced_into_hiding: bool
    invite_url: str
    webhook_url: Optional[str] = None
    webhook_auth: Optional[str] = None
    website_url: str
    repo_url: str
    twitter_url: str
    instagram_url: str
    support_server_url: str
    slug: str
    tags: List[str]
    created_on: str
    owner_id: str
    co_owner_ids: List[str]
    brief_description: str
    long_description: str
    guild_count: int
    votes: int
    all_time_votes: int


class User(DiscordlistModel):
    """A user profile."""

    avatar: Optional[str] = None
    banner: Optional[str] = None
    bio: Optional[str] = None
    bots: List[str]
    claps: int
    co_owned_bots: List[str]
    co_owned_guilds: List[str]
    created_on: str
    discriminator: int = Field(
        default=0,
        deprecated="User discriminators are being phased out by Discord; expect 0",
    )
    display_name: Optional[str] = None
    flags: int
    guilds: List[str]
    id: str
    packs: List[str]
    slug: Optional[str] = None
    username: str


class SearchHit(DiscordlistModel):
    """
    One bot in a search result.

    The search index stringifies several numeric fields (features, flags,
    guildCount, tags, votes). They are kept as strings exactly as transmitted.
    """

    avatar: str
    brief_description: str
    co_owner_ids: List[str]
    created_on: str
    discriminator: int
    features: str
    flags: str
    guild_count: str
    id: str
    invite_url: str
    owner_id: str
    prefix: str
    tags: str
    username: str
    votes: str


class SearchResults(DiscordlistModel):
    """A page of search hits plus facet counts."""

    hits: List[SearchHit]
    limit: int
    nb_hits: int
    offset: int
    query: str
    tag_distribution: Dict[str, int] = Field(default_factory=dict)
