#!/usr/bin/env python3
"""
Basic usage example for the Forge Core Python SDK
"""

import logging

from forge_core import (
    ConfigurationError,
    ForgeAgentConfiguration,
    ForgeConfiguration,
    HttpRequestOptions,
)


def main():
    logging.basicConfig(level=logging.DEBUG)
    
    # Build the configuration once during startup
    config = (
        ForgeConfiguration.builder()
        .with_credentials("your-client-id", "your-client-secret")
        .with_agent(
            "reports",
            ForgeAgentConfiguration(client_id="reports-client-id", client_secret="reports-client-secret"),
        )
        .build()
    )
    print(f"Authenticating against: {config.authentication_address}")
    
    # Per request, pick the agent, scope and timeout
    options = HttpRequestOptions()
    options.set(ForgeConfiguration.AGENT_KEY, "reports")
    options.set(ForgeConfiguration.SCOPE_KEY, "data:read")
    options.set(ForgeConfiguration.TIMEOUT_KEY, 30)
    
    agent_name = options.try_get_value(ForgeConfiguration.AGENT_KEY)
    try:
        config.ensure_credentials()
        agent = config.get_agent(agent_name)
        print(f"Using agent {agent_name!r} with client ID {agent.client_id}")
    except ConfigurationError as e:
        print(f"Configuration error: {e.message}")


if __name__ == "__main__":
    main()
