"""
Exception classes for the Forge Core SDK.
"""

from typing import Iterable, Optional


class ForgeError(Exception):
    """Base exception for the Forge Core SDK."""
    
    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class ConfigurationError(ForgeError):
    """Configuration cannot be used for the requested operation."""
    pass


class MissingCredentialsError(ConfigurationError):
    """Client credentials are absent when an authenticated call is attempted."""
    
    def __init__(self, missing: Iterable[str]):
        self.missing = tuple(missing)
        super().__init__(
            f"Missing Forge credentials: {', '.join(self.missing)}",
            error_code="missing_credentials",
        )


class AgentNotFoundError(ConfigurationError, KeyError):
    """Referenced agent name is not registered in the configuration."""
    
    def __init__(self, agent: str):
        self.agent = agent
        super().__init__(f"Unknown Forge agent: {agent!r}", error_code="agent_not_found")
    
    def __str__(self) -> str:
        return self.message
