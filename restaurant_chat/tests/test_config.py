import pytest

from restaurant_chat.config import ConfigError, ServerConfig


def test_server_defaults(monkeypatch):
    for name in ("HOST", "PORT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    config = ServerConfig.from_env()

    assert config.port == 8080
    assert config.host == "0.0.0.0"
    assert config.log_level == "INFO"


def test_server_env_overrides(monkeypatch):
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = ServerConfig.from_env()

    assert config.port == 9000
    assert config.host == "127.0.0.1"
    assert config.log_level == "DEBUG"


def test_server_rejects_non_numeric_port(monkeypatch):
    monkeypatch.setenv("PORT", "eighty")

    with pytest.raises(ConfigError, match="PORT"):
        ServerConfig.from_env()


def test_server_rejects_unknown_log_level(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ConfigError, match="LOG_LEVEL"):
        ServerConfig.from_env()
