"""
Forge Core Python SDK

Configuration settings shared by the Forge SDK clients: client credentials,
the authentication endpoint, named agent settings, and the typed keys used to
pass agent, scope and timeout through per-request options.
"""

import logging

from .config import DEFAULT_AUTHENTICATION_ADDRESS, ForgeConfiguration, ForgeConfigurationBuilder
from .exceptions import (
    ForgeError,
    ConfigurationError,
    MissingCredentialsError,
    AgentNotFoundError,
)
from .models import AgentMap, ForgeAgentConfiguration
from .options import (
    AGENT_KEY,
    SCOPE_KEY,
    TIMEOUT_KEY,
    HttpRequestOptions,
    HttpRequestOptionsKey,
)
from .settings import ForgeSettings, load_configuration

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    "ForgeConfiguration",
    "ForgeConfigurationBuilder",
    "ForgeAgentConfiguration",
    "AgentMap",
    "DEFAULT_AUTHENTICATION_ADDRESS",
    "HttpRequestOptions",
    "HttpRequestOptionsKey",
    "AGENT_KEY",
    "SCOPE_KEY",
    "TIMEOUT_KEY",
    "ForgeSettings",
    "load_configuration",
    "ForgeError",
    "ConfigurationError",
    "MissingCredentialsError",
    "AgentNotFoundError",
]
