"""
Data models for the Forge Core SDK.
"""

from typing import Iterator, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


class ForgeAgentConfiguration(BaseModel):
    """Settings for a named Forge agent, selected per request through the agent option."""
    model_config = ConfigDict(extra="forbid", frozen=True)
    
    client_id: Optional[str] = Field(None, description="Client ID used when acting as this agent")
    client_secret: Optional[str] = Field(None, description="Client secret used when acting as this agent")


class AgentMap(Mapping[str, ForgeAgentConfiguration]):
    """Read-only mapping of agent name to agent configuration."""
    
    def __init__(self, agents: Optional[Mapping[str, ForgeAgentConfiguration]] = None):
        self._agents = {
            name: ForgeAgentConfiguration.model_validate(agent)
            for name, agent in (agents or {}).items()
        }
    
    def __getitem__(self, name: str) -> ForgeAgentConfiguration:
        return self._agents[name]
    
    def __iter__(self) -> Iterator[str]:
        return iter(self._agents)
    
    def __len__(self) -> int:
        return len(self._agents)
    
    def __repr__(self) -> str:
        return f"AgentMap({self._agents!r})"
