"""Per-environment CLI settings: where logins and sessions live on disk."""

import json
import os
import sys
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path


class OutputFormat(StrEnum):
    """How command results are printed."""

    TABLE = "table"
    JSON = "json"
    CSV = "csv"


def _default_config_dir() -> Path:
    """Login files go under $XDG_CONFIG_HOME/tasty-cli."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / "tasty-cli"
    return Path.home() / ".config" / "tasty-cli"


def _default_data_dir() -> Path:
    """Session files go under $XDG_DATA_HOME/tasty-cli."""
    xdg_data = os.environ.get("XDG_DATA_HOME")
    if xdg_data:
        return Path(xdg_data) / "tasty-cli"
    return Path.home() / ".local" / "share" / "tasty-cli"


@dataclass
class CLIConfig:
    """Settings shared by every command through ctx.obj.

    Attributes:
        sandbox: Use the certification environment instead of production.
        verbose: Enable debug logging.
        config_dir: Holds the saved login per environment.
        data_dir: Holds the saved session per environment.

    Layout:
        config_dir/
        ├── cert.json               # Certification login
        └── production.json         # Production login

        data_dir/
        ├── cert-session.json       # Certification session tokens
        └── production-session.json # Production session tokens
    """

    sandbox: bool = False
    verbose: bool = False
    config_dir: Path = field(default_factory=_default_config_dir)
    data_dir: Path = field(default_factory=_default_data_dir)

    @property
    def environment(self) -> str:
        """Get the environment name."""
        return "cert" if self.sandbox else "production"

    @property
    def token_path(self) -> Path:
        """Session token file for the current environment."""
        return self.data_dir / f"{self.environment}-session.json"

    @property
    def credentials_path(self) -> Path:
        """Credentials file for the current environment."""
        return self.config_dir / f"{self.environment}.json"

    def load_credentials(self) -> tuple[str, str | None]:
        """Load login credentials from config file with environment variable overrides.

        Environment variables:
        - TASTY_LOGIN: Overrides login from file
        - TASTY_PASSWORD: Overrides password from file

        Returns:
            Tuple of (login, password); password is None when not stored

        Raises:
            ValueError: If no login name can be determined
        """
        login: str | None = None
        password: str | None = None

        if self.credentials_path.exists():
            try:
                with self.credentials_path.open() as f:
                    data = json.load(f)
                login = data.get("login")
                password = data.get("password")
            except (json.JSONDecodeError, OSError, AttributeError) as e:
                if self.verbose:
                    print(f"Warning: Failed to read {self.credentials_path}: {e}", file=sys.stderr)

        if env_login := os.environ.get("TASTY_LOGIN"):
            login = env_login
        if env_password := os.environ.get("TASTY_PASSWORD"):
            password = env_password

        if not login:
            msg = (
                "Missing login. Set TASTY_LOGIN or create a config file at "
                f"{self.credentials_path}"
            )
            raise ValueError(msg)

        return login, password

    def save_credentials(self, login: str, password: str | None = None) -> None:
        """Save credentials to the environment-specific config file."""
        self.config_dir.mkdir(parents=True, exist_ok=True)

        data: dict[str, str] = {"login": login}
        if password:
            data["password"] = password

        with self.credentials_path.open("w") as f:
            json.dump(data, f, indent=2)

        # Owner read/write only
        self.credentials_path.chmod(0o600)
