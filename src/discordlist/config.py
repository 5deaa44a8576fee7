"""
Configuration for programs driving a discordlist client.

Values come from the environment or a local ``.env`` file.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DiscordlistSettings(BaseSettings):
    """Credentials and client options."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    token: SecretStr = Field(
        validation_alias="DLIST_TOKEN",
        description="Token from the discordlist.gg Manage > Webhooks page",
    )
    bot_id: int = Field(
        validation_alias="BOT_ID",
        ge=0,
        description="Numeric ID of the bot, as seen in its discordlist.gg URLs",
    )
    timeout: float = Field(
        default=5.0,
        gt=0,
        validation_alias="DLIST_TIMEOUT",
        description="Per-request timeout in seconds",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", validation_alias="DLIST_LOG_LEVEL"
    )

    @field_validator("token")
    def validate_token(cls, v):
        """Ensure the token is set to a real value."""
        token_value = v.get_secret_value() if isinstance(v, SecretStr) else str(v)

        if not token_value.strip():
            raise ValueError(
                "discordlist.gg token must be set. Please configure the DLIST_TOKEN environment variable."
            )
        if token_value.lower().startswith(("bearer ", "bot ")):
            raise ValueError('DLIST_TOKEN must not include a "Bearer" or "Bot" prefix.')

        return v


@lru_cache()
def get_settings() -> DiscordlistSettings:
    """Get cached settings instance."""
    return DiscordlistSettings()
