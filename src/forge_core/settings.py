"""Forge settings loaded from environment variables."""

import logging
from typing import Any, Dict, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .config import DEFAULT_AUTHENTICATION_ADDRESS, ForgeConfiguration
from .models import ForgeAgentConfiguration

logger = logging.getLogger(__name__)


class ForgeSettings(BaseSettings):
    """Forge settings read from FORGE_* environment variables and an optional .env file."""

    # Credentials
    client_id: Optional[str] = None
    client_secret: Optional[str] = None

    authentication_address: str = DEFAULT_AUTHENTICATION_ADDRESS

    # Per-agent settings, e.g. FORGE_AGENTS__REPORTS__CLIENT_ID
    agents: Dict[str, ForgeAgentConfiguration] = Field(default_factory=dict)

    model_config = SettingsConfigDict(
        env_prefix="FORGE_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def to_configuration(self) -> ForgeConfiguration:
        """Build an immutable ForgeConfiguration from these settings."""
        builder = ForgeConfiguration.builder().with_credentials(self.client_id, self.client_secret)
        if self.authentication_address != DEFAULT_AUTHENTICATION_ADDRESS:
            builder.with_authentication_address(self.authentication_address)
        if self.agents:
            builder.with_agents(self.agents)
        return builder.build()


def load_configuration(**overrides: Any) -> ForgeConfiguration:
    """Read FORGE_* settings and build a ForgeConfiguration from them."""
    settings = ForgeSettings(**overrides)
    logger.debug(f"Loaded Forge settings for agents: {sorted(settings.agents)}")
    return settings.to_configuration()
