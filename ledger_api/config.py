"""Configuration management for ledger-api."""

import os
from dataclasses import dataclass, field

from ledger_api.exceptions import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("standard", "json")


@dataclass
class ServerConfig:
    """HTTP server configuration."""

    host: str = "127.0.0.1"
    port: int = 3333

    @property
    def base_url(self) -> str:
        """Get base URL."""
        return f"http://{self.host}:{self.port}"


@dataclass
class LedgerConfig:
    """Main configuration for ledger-api."""

    server: ServerConfig = field(default_factory=ServerConfig)
    log_level: str = "INFO"
    log_format: str = "standard"
    enforce_unique_on_update: bool = False
    seed: int | None = None
    demo_accounts: int = 0

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Normalize and check field values."""
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level: {self.log_level}")
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(f"Unknown log format: {self.log_format}")
        if not 0 < self.server.port < 65536:
            raise ConfigurationError(f"Port out of range: {self.server.port}")
        if self.demo_accounts < 0:
            raise ConfigurationError("demo_accounts must not be negative")

    @classmethod
    def from_env(cls) -> "LedgerConfig":
        """Create config from environment variables."""
        server = ServerConfig(
            host=os.getenv("LEDGER_HOST", "127.0.0.1"),
            port=_int_env("LEDGER_PORT", 3333),
        )

        seed = os.getenv("SEED")

        return cls(
            server=server,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            enforce_unique_on_update=os.getenv("ENFORCE_UNIQUE_ON_UPDATE", "false").lower() == "true",
            seed=_int_env("SEED", 0) if seed else None,
            demo_accounts=_int_env("DEMO_ACCOUNTS", 0),
        )


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e
