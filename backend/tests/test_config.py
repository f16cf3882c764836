"""
配置加载测试
"""
from listings_api.boot.config import AuthConfig, ServerConfig, load_section


def test_defaults(monkeypatch):
    monkeypatch.delenv("SERVER_HOST", raising=False)
    monkeypatch.delenv("SERVER_PORT", raising=False)
    config = load_section(ServerConfig, "server")
    assert config.host == "0.0.0.0"
    assert config.port == 6060


def test_env_override(monkeypatch):
    monkeypatch.setenv("SERVER_PORT", "7070")
    monkeypatch.setenv("AUTH_LEGACY_IDENTITY_RECHECK", "true")
    assert load_section(ServerConfig, "server").port == 7070
    assert load_section(AuthConfig, "auth").legacy_identity_recheck is True


def test_invalid_section_falls_back_to_defaults(monkeypatch):
    monkeypatch.setenv("SERVER_PORT", "not-a-port")
    config = load_section(ServerConfig, "server")
    assert config.port == 6060
