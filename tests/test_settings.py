"""
Tests for loading Forge settings from the environment
"""

import os

import pytest

from forge_core import (
    DEFAULT_AUTHENTICATION_ADDRESS,
    ForgeConfiguration,
    ForgeSettings,
    load_configuration,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in list(os.environ):
        if name.upper().startswith("FORGE_"):
            monkeypatch.delenv(name, raising=False)


class TestForgeSettings:
    
    def test_defaults(self):
        config = load_configuration(_env_file=None)
        assert config.model_dump() == ForgeConfiguration().model_dump()
        assert config.authentication_address == DEFAULT_AUTHENTICATION_ADDRESS
        assert config.agents is None
    
    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("FORGE_CLIENT_ID", "env-id")
        monkeypatch.setenv("FORGE_CLIENT_SECRET", "env-secret")
        monkeypatch.setenv("FORGE_AUTHENTICATION_ADDRESS", "https://auth.example.com/token")
        
        config = load_configuration(_env_file=None)
        assert config.client_id == "env-id"
        assert config.client_secret == "env-secret"
        assert config.authentication_address == "https://auth.example.com/token"
    
    def test_nested_agents(self, monkeypatch):
        monkeypatch.setenv("FORGE_AGENTS__REPORTS__CLIENT_ID", "reports-id")
        monkeypatch.setenv("FORGE_AGENTS__REPORTS__CLIENT_SECRET", "reports-secret")
        
        config = ForgeSettings(_env_file=None).to_configuration()
        agent = config.get_agent("reports")
        assert agent.client_id == "reports-id"
        assert agent.client_secret == "reports-secret"
    
    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text(
            "FORGE_CLIENT_ID=file-id\n"
            "FORGE_CLIENT_SECRET=file-secret\n"
            "UNRELATED_SETTING=ignored\n"
        )
        
        config = load_configuration(_env_file=str(env_file))
        assert config.client_id == "file-id"
        assert config.client_secret == "file-secret"
    
    def test_explicit_overrides(self, monkeypatch):
        monkeypatch.setenv("FORGE_CLIENT_ID", "env-id")
        config = load_configuration(_env_file=None, client_id="explicit-id")
        assert config.client_id == "explicit-id"
    
    def test_stray_agent_variables_cleared(self):
        assert not any(name.upper().startswith("FORGE_") for name in os.environ)
        assert load_configuration(_env_file=None).agents is None
    
    def test_default_address_not_logged_as_override(self, caplog):
        with caplog.at_level("DEBUG", logger="forge_core"):
            load_configuration(_env_file=None)
        assert "Overriding authentication address" not in caplog.text
    
    def test_changed_address_logged(self, monkeypatch, caplog):
        monkeypatch.setenv("FORGE_AUTHENTICATION_ADDRESS", "https://auth.example.com/token")
        with caplog.at_level("DEBUG", logger="forge_core"):
            load_configuration(_env_file=None)
        assert "Overriding authentication address: https://auth.example.com/token" in caplog.text
