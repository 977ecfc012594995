"""Tests for the environment config provider."""

import pytest

from gradsync.adapters.config import EnvironmentConfigProvider


ENV_KEYS = [
    "GRADSYNC_API_URL",
    "GRADSYNC_TIMEOUT",
    "GRADSYNC_MAX_RETRIES",
    "GRADSYNC_BACKOFF",
    "GRADSYNC_FETCH_AHEAD",
    "GRADSYNC_OPTIMISTIC_COUNT",
    "GRADSYNC_SECRET",
    "GRADSYNC_NOTIFY_SECONDS",
    "GRADSYNC_HOST",
    "GRADSYNC_VERBOSE",
    "PORT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    # Keep a developer's own .env out of the way
    monkeypatch.chdir(tmp_path)


class TestEnvironmentConfigProvider:
    """Tests for EnvironmentConfigProvider."""

    def test_defaults(self):
        config = EnvironmentConfigProvider().load()

        assert config.store.api_url == "http://localhost:5000/api"
        assert config.store.timeout == 8.0
        assert config.sync.max_retries == 3
        assert config.sync.backoff_base == 1.0
        assert config.sync.fetch_ahead
        assert config.sync.optimistic_count
        assert config.sync.secret == "74511"
        assert config.server.port == 5000
        assert not config.verbose

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("GRADSYNC_API_URL", "http://store.test/api")
        monkeypatch.setenv("GRADSYNC_TIMEOUT", "2.5")
        monkeypatch.setenv("GRADSYNC_MAX_RETRIES", "5")
        monkeypatch.setenv("GRADSYNC_FETCH_AHEAD", "false")
        monkeypatch.setenv("PORT", "8080")

        config = EnvironmentConfigProvider().load()

        assert config.store.api_url == "http://store.test/api"
        assert config.store.timeout == 2.5
        assert config.sync.max_retries == 5
        assert not config.sync.fetch_ahead
        assert config.server.port == 8080

    def test_env_file(self, tmp_path):
        env_file = tmp_path / "custom.env"
        env_file.write_text(
            "# store settings\n"
            "GRADSYNC_API_URL='http://file.test/api'\n"
            "GRADSYNC_SECRET=\"opensesame\"\n"
            "UNRELATED=1\n"
            "not a setting\n"
        )

        provider = EnvironmentConfigProvider(env_file=env_file)
        config = provider.load()

        assert config.store.api_url == "http://file.test/api"
        assert config.sync.secret == "opensesame"
        assert provider.get("unrelated") is None

    def test_env_file_in_cwd(self, tmp_path):
        (tmp_path / ".env").write_text("GRADSYNC_HOST=0.0.0.0\n")

        assert EnvironmentConfigProvider().load().server.host == "0.0.0.0"

    def test_environment_beats_env_file(self, tmp_path, monkeypatch):
        env_file = tmp_path / "custom.env"
        env_file.write_text("GRADSYNC_TIMEOUT=3\n")
        monkeypatch.setenv("GRADSYNC_TIMEOUT", "4")

        assert EnvironmentConfigProvider(env_file=env_file).load().store.timeout == 4.0

    def test_cli_overrides(self, monkeypatch):
        monkeypatch.setenv("GRADSYNC_API_URL", "http://env.test/api")

        provider = EnvironmentConfigProvider(cli_overrides={
            "api_url": "http://cli.test/api",
            "retries": 1,
            "no_fetch_ahead": True,
            "port": 9000,
            "verbose": True,
        })
        config = provider.load()

        assert config.store.api_url == "http://cli.test/api"
        assert config.sync.max_retries == 1
        assert not config.sync.fetch_ahead
        assert config.server.port == 9000
        assert config.verbose

    def test_unset_cli_flags_do_not_override(self, monkeypatch):
        monkeypatch.setenv("GRADSYNC_VERBOSE", "true")
        monkeypatch.setenv("GRADSYNC_FETCH_AHEAD", "false")

        config = EnvironmentConfigProvider(cli_overrides={
            "api_url": None,
            "no_fetch_ahead": False,
            "verbose": False,
        }).load()

        assert config.verbose
        assert not config.sync.fetch_ahead

    def test_validate_ok(self):
        assert EnvironmentConfigProvider().validate() == []

    def test_validate_bad_numbers(self, monkeypatch):
        monkeypatch.setenv("GRADSYNC_TIMEOUT", "0")
        monkeypatch.setenv("GRADSYNC_MAX_RETRIES", "-1")
        monkeypatch.setenv("PORT", "http")

        errors = EnvironmentConfigProvider().validate()

        assert "GRADSYNC_TIMEOUT must be a positive number" in errors
        assert "GRADSYNC_MAX_RETRIES must be a non-negative integer" in errors
        assert "PORT must be an integer" in errors

    def test_validate_notification_timeout(self, monkeypatch):
        monkeypatch.setenv("GRADSYNC_NOTIFY_SECONDS", "soon")

        errors = EnvironmentConfigProvider().validate()

        assert errors == ["GRADSYNC_NOTIFY_SECONDS must be a non-negative number"]

    def test_validate_negative_notification_timeout(self, monkeypatch):
        monkeypatch.setenv("GRADSYNC_NOTIFY_SECONDS", "-2")

        errors = EnvironmentConfigProvider().validate()

        assert errors == ["GRADSYNC_NOTIFY_SECONDS must be a non-negative number"]
