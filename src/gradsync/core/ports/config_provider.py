"""
Config Provider Port - Abstract interface for configuration sources.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


DEFAULT_API_URL = "http://localhost:5000/api"
DEFAULT_SECRET = "74511"


@dataclass
class StoreConfig:
    """How to reach the Record Store."""

    api_url: str = DEFAULT_API_URL
    timeout: float = 8.0


@dataclass
class SyncConfig:
    """Behaviour of the sync controller."""

    max_retries: int = 3
    backoff_base: float = 1.0
    fetch_ahead: bool = True
    optimistic_count: bool = True
    secret: str = DEFAULT_SECRET
    notification_timeout: float = 3.0


@dataclass
class ServerConfig:
    """Where the bundled Record Store listens."""

    host: str = "127.0.0.1"
    port: int = 5000


@dataclass
class AppConfig:
    """Complete application configuration."""

    store: StoreConfig = field(default_factory=StoreConfig)
    sync: SyncConfig = field(default_factory=SyncConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    verbose: bool = False


class ConfigProviderPort(ABC):
    """Abstract interface for configuration providers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the provider name."""
        ...

    @abstractmethod
    def load(self) -> AppConfig:
        """Load complete configuration."""
        ...

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Get a single configuration value."""
        ...

    @abstractmethod
    def validate(self) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation errors (empty if valid)
        """
        ...
