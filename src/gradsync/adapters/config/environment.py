"""
Environment Config Provider - Load configuration from environment variables.

Supports:
- Environment variables (GRADSYNC_API_URL, GRADSYNC_TIMEOUT, PORT, ...)
- .env files
- Command line argument overrides
"""

import os
from pathlib import Path
from typing import Any, Optional

from ...core.ports.config_provider import (
    ConfigProviderPort,
    AppConfig,
    StoreConfig,
    SyncConfig,
    ServerConfig,
    DEFAULT_API_URL,
    DEFAULT_SECRET,
)


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1", "yes", "on")


class EnvironmentConfigProvider(ConfigProviderPort):
    """
    Configuration provider that loads from environment variables and .env files.

    Precedence: CLI overrides, then environment, then .env file.
    """

    ENV_MAPPING = {
        "GRADSYNC_API_URL": "api_url",
        "GRADSYNC_TIMEOUT": "timeout",
        "GRADSYNC_MAX_RETRIES": "max_retries",
        "GRADSYNC_BACKOFF": "backoff_base",
        "GRADSYNC_FETCH_AHEAD": "fetch_ahead",
        "GRADSYNC_OPTIMISTIC_COUNT": "optimistic_count",
        "GRADSYNC_SECRET": "secret",
        "GRADSYNC_NOTIFY_SECONDS": "notification_timeout",
        "GRADSYNC_HOST": "host",
        "GRADSYNC_VERBOSE": "verbose",
        "PORT": "port",
    }

    def __init__(
        self,
        env_file: Optional[Path] = None,
        cli_overrides: Optional[dict[str, Any]] = None,
    ):
        """
        Initialize the config provider.

        Args:
            env_file: Path to .env file (auto-detected if not specified)
            cli_overrides: Command line argument overrides
        """
        self._values: dict[str, Any] = {}
        self._env_file = env_file
        self._cli_overrides = cli_overrides or {}

        self._load_env_file()
        self._load_environment()
        self._apply_cli_overrides()

    # -------------------------------------------------------------------------
    # ConfigProviderPort Implementation
    # -------------------------------------------------------------------------

    @property
    def name(self) -> str:
        return "Environment"

    def load(self) -> AppConfig:
        """Load complete configuration."""
        store = StoreConfig(
            api_url=str(self.get("api_url", DEFAULT_API_URL)),
            timeout=float(self.get("timeout", 8.0)),
        )

        sync = SyncConfig(
            max_retries=int(self.get("max_retries", 3)),
            backoff_base=float(self.get("backoff_base", 1.0)),
            fetch_ahead=_to_bool(self.get("fetch_ahead", True)),
            optimistic_count=_to_bool(self.get("optimistic_count", True)),
            secret=str(self.get("secret", DEFAULT_SECRET)),
            notification_timeout=float(self.get("notification_timeout", 3.0)),
        )

        server = ServerConfig(
            host=str(self.get("host", "127.0.0.1")),
            port=int(self.get("port", 5000)),
        )

        return AppConfig(
            store=store,
            sync=sync,
            server=server,
            verbose=_to_bool(self.get("verbose", False)),
        )

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        key = key.lower().replace("-", "_")
        return self._values.get(key, default)

    def validate(self) -> list[str]:
        """Validate configuration."""
        errors = []

        if not self.get("api_url", DEFAULT_API_URL):
            errors.append("Missing GRADSYNC_API_URL - set in environment or .env file")

        numeric = {
            "timeout": (float, "GRADSYNC_TIMEOUT must be a positive number"),
            "max_retries": (int, "GRADSYNC_MAX_RETRIES must be a non-negative integer"),
            "backoff_base": (float, "GRADSYNC_BACKOFF must be a non-negative number"),
            "notification_timeout": (
                float, "GRADSYNC_NOTIFY_SECONDS must be a non-negative number"
            ),
            "port": (int, "PORT must be an integer"),
        }
        for key, (convert, message) in numeric.items():
            raw = self.get(key)
            if raw is None:
                continue
            try:
                value = convert(raw)
            except (TypeError, ValueError):
                errors.append(message)
                continue
            if key == "timeout" and value <= 0:
                errors.append(message)
            elif key in ("max_retries", "backoff_base", "notification_timeout") and value < 0:
                errors.append(message)

        return errors

    # -------------------------------------------------------------------------
    # Private Methods
    # -------------------------------------------------------------------------

    def _load_env_file(self) -> None:
        """Load values from .env file."""
        env_file = self._find_env_file()
        if not env_file:
            return

        for line in env_file.read_text().splitlines():
            line = line.strip()

            # Skip empty lines and comments
            if not line or line.startswith("#"):
                continue

            if "=" not in line:
                continue

            key, value = line.split("=", 1)
            key = key.strip().upper()
            value = value.strip().strip('"').strip("'")

            config_key = self.ENV_MAPPING.get(key)
            if config_key:
                self._values[config_key] = value

    def _find_env_file(self) -> Optional[Path]:
        """Find .env file."""
        if self._env_file:
            return self._env_file if self._env_file.exists() else None

        cwd_env = Path.cwd() / ".env"
        if cwd_env.exists():
            return cwd_env

        return None

    def _load_environment(self) -> None:
        """Load values from environment variables."""
        for env_key, config_key in self.ENV_MAPPING.items():
            raw_value = os.environ.get(env_key)
            if raw_value is not None:
                self._values[config_key] = raw_value

    def _apply_cli_overrides(self) -> None:
        """Apply CLI argument overrides."""
        cli_mapping = {
            "api_url": "api_url",
            "timeout": "timeout",
            "retries": "max_retries",
            "no_fetch_ahead": "fetch_ahead",
            "host": "host",
            "port": "port",
            "verbose": "verbose",
        }

        for cli_key, config_key in cli_mapping.items():
            value = self._cli_overrides.get(cli_key)
            if value is None:
                continue
            if cli_key == "no_fetch_ahead":
                if value:
                    self._values[config_key] = False
                continue
            if cli_key == "verbose" and not value:
                continue
            self._values[config_key] = value
