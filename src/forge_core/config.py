"""
Configuration classes for the Forge Core SDK.
"""

import logging
from typing import Any, ClassVar, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from . import options
from .exceptions import AgentNotFoundError, MissingCredentialsError
from .models import AgentMap, ForgeAgentConfiguration
from .options import HttpRequestOptionsKey

logger = logging.getLogger(__name__)

DEFAULT_AUTHENTICATION_ADDRESS = "https://developer.api.autodesk.com/authentication/v2/token"


class ForgeConfiguration(BaseModel):
    """
    Configuration settings for the Forge SDK.
    
    Built once during application setup and then shared read-only by every
    request. Instances and their agent map are frozen; use
    ``ForgeConfiguration.builder()`` or ``model_copy(update=...)`` to derive a
    changed configuration.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)
    
    AGENT_KEY: ClassVar[HttpRequestOptionsKey[str]] = options.AGENT_KEY
    SCOPE_KEY: ClassVar[HttpRequestOptionsKey[str]] = options.SCOPE_KEY
    TIMEOUT_KEY: ClassVar[HttpRequestOptionsKey[int]] = options.TIMEOUT_KEY
    
    client_id: Optional[str] = Field(None, description="Client ID")
    client_secret: Optional[str] = Field(None, description="Client secret")
    agents: Optional[Dict[str, ForgeAgentConfiguration]] = Field(
        None, description="Agent configurations keyed by agent name"
    )
    # Kept verbatim so an override reads back unchanged; not parsed as a URL.
    authentication_address: str = Field(
        DEFAULT_AUTHENTICATION_ADDRESS, description="Token endpoint used for authentication"
    )
    
    @field_validator("agents", mode="after")
    @classmethod
    def _freeze_agents(cls, agents: Optional[Dict[str, ForgeAgentConfiguration]]) -> Optional[AgentMap]:
        return AgentMap(agents) if agents is not None else None
    
    @field_serializer("agents")
    def _serialize_agents(self, agents: Optional[Mapping[str, ForgeAgentConfiguration]]) -> Optional[Dict[str, Any]]:
        if agents is None:
            return None
        return {name: agent.model_dump() for name, agent in agents.items()}
    
    def model_copy(self, *, update: Optional[Mapping[str, Any]] = None, deep: bool = False) -> "ForgeConfiguration":
        """Copy the configuration; the copy gets its own frozen agent map."""
        copied = super().model_copy(update=update, deep=deep)
        if copied.agents is not None:
            copied.__dict__["agents"] = AgentMap(copied.agents)
        return copied
    
    @classmethod
    def builder(cls) -> "ForgeConfigurationBuilder":
        """Start a new builder with default settings."""
        return ForgeConfigurationBuilder()
    
    def get_agent(self, name: str) -> ForgeAgentConfiguration:
        """
        Get the configuration registered for an agent.
        
        Args:
            name: Agent name, as passed through the agent request option
        
        Raises:
            AgentNotFoundError: If no agent with that name is configured
        """
        if not self.agents or name not in self.agents:
            raise AgentNotFoundError(name)
        return self.agents[name]
    
    def ensure_credentials(self) -> None:
        """Raise MissingCredentialsError unless both client ID and secret are set."""
        missing = [
            field_name
            for field_name in ("client_id", "client_secret")
            if not getattr(self, field_name)
        ]
        if missing:
            raise MissingCredentialsError(missing)


class ForgeConfigurationBuilder:
    """
    Mutable setup phase for a ForgeConfiguration.
    
    Example:
        config = (
            ForgeConfiguration.builder()
            .with_credentials("id", "secret")
            .with_agent("reports", ForgeAgentConfiguration(client_id="reports-id"))
            .build()
        )
    """
    
    def __init__(self):
        self._client_id: Optional[str] = None
        self._client_secret: Optional[str] = None
        self._agents: Optional[Dict[str, ForgeAgentConfiguration]] = None
        self._authentication_address = DEFAULT_AUTHENTICATION_ADDRESS
    
    def with_client_id(self, client_id: Optional[str]) -> "ForgeConfigurationBuilder":
        self._client_id = client_id
        return self
    
    def with_client_secret(self, client_secret: Optional[str]) -> "ForgeConfigurationBuilder":
        self._client_secret = client_secret
        return self
    
    def with_credentials(
        self,
        client_id: Optional[str],
        client_secret: Optional[str],
    ) -> "ForgeConfigurationBuilder":
        """Set client ID and secret together."""
        return self.with_client_id(client_id).with_client_secret(client_secret)
    
    def with_authentication_address(self, address: str) -> "ForgeConfigurationBuilder":
        logger.debug(f"Overriding authentication address: {address}")
        self._authentication_address = address
        return self
    
    def with_agent(
        self,
        name: str,
        agent: ForgeAgentConfiguration,
    ) -> "ForgeConfigurationBuilder":
        """Register or replace the configuration for a named agent."""
        if self._agents is None:
            self._agents = {}
        if name in self._agents:
            logger.debug(f"Replacing configuration for agent {name!r}")
        else:
            logger.debug(f"Registering agent {name!r}")
        self._agents[name] = agent
        return self
    
    def with_agents(
        self,
        agents: Optional[Mapping[str, ForgeAgentConfiguration]],
    ) -> "ForgeConfigurationBuilder":
        """Replace all agent configurations. None clears them."""
        self._agents = dict(agents) if agents is not None else None
        return self
    
    def build(self) -> ForgeConfiguration:
        """Create an immutable configuration from the current builder state."""
        config = ForgeConfiguration(
            client_id=self._client_id,
            client_secret=self._client_secret,
            agents=dict(self._agents) if self._agents is not None else None,
            authentication_address=self._authentication_address,
        )
        logger.debug(
            f"Built Forge configuration with {len(config.agents or {})} agent(s), "
            f"authentication address {config.authentication_address}"
        )
        return config
