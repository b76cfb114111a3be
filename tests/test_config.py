"""Unit tests for config loading — env parsing, defaults and startup errors."""

import pytest

from config import BotConfig, ConfigError, load_config, parse_admin_ids


@pytest.fixture
def _base_env(monkeypatch):
    for name in ("BOT_DEBUG", "BOT_TIMEOUT", "ADMIN_IDS", "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("BOT_TOKEN", "test:token")


@pytest.mark.usefixtures("_base_env")
class TestLoadConfig:
    def test_defaults(self):
        cfg = load_config()
        assert cfg == BotConfig(token="test:token")
        assert cfg.admin_ids == frozenset()
        assert cfg.poll_timeout == 60
        assert cfg.debug is False

    def test_all_values(self, monkeypatch):
        monkeypatch.setenv("BOT_DEBUG", "true")
        monkeypatch.setenv("BOT_TIMEOUT", "30")
        monkeypatch.setenv("ADMIN_IDS", "123456789, 987654321")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_FILE", "bot.log")
        cfg = load_config()
        assert cfg.debug is True
        assert cfg.poll_timeout == 30
        assert cfg.admin_ids == {123456789, 987654321}
        assert cfg.log_level == "DEBUG"
        assert cfg.log_file == "bot.log"

    def test_config_is_immutable(self):
        cfg = load_config()
        with pytest.raises(AttributeError):
            cfg.token = "other"

    def test_missing_token(self, monkeypatch):
        monkeypatch.delenv("BOT_TOKEN", raising=False)
        with pytest.raises(ConfigError, match="BOT_TOKEN"):
            load_config()

    def test_malformed_admin_id_aborts(self, monkeypatch):
        monkeypatch.setenv("ADMIN_IDS", "123,abc")
        with pytest.raises(ConfigError, match="non-numeric"):
            load_config()

    def test_bad_timeout(self, monkeypatch):
        monkeypatch.setenv("BOT_TIMEOUT", "soon")
        with pytest.raises(ConfigError, match="BOT_TIMEOUT"):
            load_config()

    def test_bad_debug_flag(self, monkeypatch):
        monkeypatch.setenv("BOT_DEBUG", "maybe")
        with pytest.raises(ConfigError, match="BOT_DEBUG"):
            load_config()

    def test_unknown_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        with pytest.raises(ConfigError, match="LOG_LEVEL"):
            load_config()


class TestParseAdminIds:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            pytest.param("", frozenset(), id="empty"),
            pytest.param("42", {42}, id="single"),
            pytest.param(" 1 , 2,,3 ", {1, 2, 3}, id="blanks-and-spaces"),
            pytest.param("-100123", {-100123}, id="negative"),
        ],
    )
    def test_valid(self, raw, expected):
        assert parse_admin_ids(raw) == expected

    def test_float_rejected(self):
        with pytest.raises(ConfigError):
            parse_admin_ids("1.5")
