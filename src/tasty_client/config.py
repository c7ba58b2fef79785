"""Configuration management for the tastytrade client."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path

_TRUTHY = {"1", "true", "yes", "on"}


def _get_config_dir() -> Path:
    """Get XDG-compliant config directory."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / "tasty-client"
    return Path.home() / ".config" / "tasty-client"


@dataclass(frozen=True, slots=True)
class TastyConfig:
    """tastytrade API configuration.

    Production and certification (sandbox) differ only in the API base URL,
    the API host and the streamer websocket URL.
    """

    sandbox: bool = False
    timeout: float = 30.0

    # API endpoints
    _production_base_url: str = field(default="https://api.tastyworks.com", repr=False)
    _production_base_host: str = field(default="api.tastyworks.com", repr=False)
    _production_websocket_url: str = field(
        default="wss://streamer.tastyworks.com", repr=False
    )
    _cert_base_url: str = field(default="https://api.cert.tastyworks.com", repr=False)
    _cert_base_host: str = field(default="api.cert.tastyworks.com", repr=False)
    _cert_websocket_url: str = field(default="wss://streamer.cert.tastyworks.com", repr=False)

    @property
    def environment(self) -> str:
        """Get the environment name."""
        return "cert" if self.sandbox else "production"

    @property
    def base_url(self) -> str:
        """Get the API base URL for the selected environment."""
        return self._cert_base_url if self.sandbox else self._production_base_url

    @property
    def base_host(self) -> str:
        """Get the API host, used when composing URLs by hand."""
        return self._cert_base_host if self.sandbox else self._production_base_host

    @property
    def websocket_url(self) -> str:
        """Get the account streamer websocket URL."""
        return self._cert_websocket_url if self.sandbox else self._production_websocket_url

    @classmethod
    def production(cls) -> TastyConfig:
        return cls(sandbox=False)

    @classmethod
    def certification(cls) -> TastyConfig:
        return cls(sandbox=True)

    @classmethod
    def from_env(cls) -> TastyConfig:
        """Create config from environment variables.

        Recognised env vars:
        - TASTY_SANDBOX: "1", "true", "yes" or "on" selects certification
        - TASTY_TIMEOUT: request timeout in seconds
        """
        sandbox = os.environ.get("TASTY_SANDBOX", "").strip().lower() in _TRUTHY

        timeout = 30.0
        if raw_timeout := os.environ.get("TASTY_TIMEOUT"):
            try:
                timeout = float(raw_timeout)
            except ValueError:
                msg = f"Invalid TASTY_TIMEOUT value: {raw_timeout!r}"
                raise ValueError(msg) from None

        return cls(sandbox=sandbox, timeout=timeout)

    @classmethod
    def from_file(cls, path: Path | None = None) -> TastyConfig:
        """Load config from JSON file.

        Default path: ~/.config/tasty-client/config.json

        Expected format:
        {
            "sandbox": true,
            "timeout": 30
        }
        """
        if path is None:
            path = _get_config_dir() / "config.json"

        if not path.exists():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)

        with path.open() as f:
            data = json.load(f)

        return cls(
            sandbox=bool(data.get("sandbox", False)),
            timeout=float(data.get("timeout", 30.0)),
        )

    @classmethod
    def load(cls) -> TastyConfig:
        """Load config from file if present, otherwise from environment."""
        try:
            return cls.from_file()
        except FileNotFoundError:
            return cls.from_env()
