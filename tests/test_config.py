"""Tests for config loading and saving."""

import stat

import pytest

from pocket_client.config import (
    DEFAULT_REDIRECT_URI,
    AppConfig,
    config_exists,
    load_config,
    save_config,
)


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "sub" / "config.toml"


class TestConfig:
    def test_round_trip(self, config_path):
        save_config(
            AppConfig(consumer_key="key", redirect_uri="http://localhost", timeout=2.5),
            config_path,
        )

        config = load_config(config_path)

        assert config == AppConfig(
            consumer_key="key", redirect_uri="http://localhost", timeout=2.5
        )

    def test_file_permissions(self, config_path):
        save_config(AppConfig(consumer_key="key"), config_path)
        assert stat.S_IMODE(config_path.stat().st_mode) == 0o600

    def test_missing_file(self, config_path):
        assert not config_exists(config_path)
        with pytest.raises(FileNotFoundError):
            load_config(config_path)

    def test_missing_consumer_key(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text('[app]\nredirect_uri = "http://localhost"\n')

        with pytest.raises(ValueError, match="consumer_key"):
            load_config(path)

    def test_defaults(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text('[app]\nconsumer_key = "key"\n')

        config = load_config(path)

        assert config.redirect_uri == DEFAULT_REDIRECT_URI
        assert config.timeout == 5.0

    def test_env_overrides_consumer_key(self, tmp_path, monkeypatch):
        path = tmp_path / "config.toml"
        path.write_text('[app]\nconsumer_key = "from-file"\n')
        monkeypatch.setenv("POCKET_CONSUMER_KEY", "from-env")

        assert load_config(path).consumer_key == "from-env"
