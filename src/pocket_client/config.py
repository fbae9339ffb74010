"""Configuration loading and saving.

Config file location: ~/.config/pocket-client/config.toml

Schema:
    [app]
    consumer_key = "..."
    redirect_uri = "https://example.com/callback"

    [http]
    timeout = 5.0

POCKET_CONSUMER_KEY overrides app.consumer_key. Access tokens are never
written here; store them wherever your application keeps user credentials.
"""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

import tomli_w

from .client import DEFAULT_TIMEOUT

CONFIG_DIR = Path.home() / ".config" / "pocket-client"
CONFIG_FILE = CONFIG_DIR / "config.toml"

DEFAULT_REDIRECT_URI = "https://getpocket.com"


@dataclass
class AppConfig:
    consumer_key: str
    redirect_uri: str = DEFAULT_REDIRECT_URI
    timeout: float = DEFAULT_TIMEOUT


def load_config(config_path: Path = CONFIG_FILE) -> AppConfig:
    """Load and validate config from TOML file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    app_data = data.get("app", {})
    http_data = data.get("http", {})

    consumer_key = os.environ.get("POCKET_CONSUMER_KEY") or app_data.get(
        "consumer_key", ""
    )
    if not consumer_key:
        raise ValueError("Config missing required app.consumer_key")

    return AppConfig(
        consumer_key=consumer_key,
        redirect_uri=app_data.get("redirect_uri", DEFAULT_REDIRECT_URI),
        timeout=float(http_data.get("timeout", DEFAULT_TIMEOUT)),
    )


def save_config(config: AppConfig, config_path: Path = CONFIG_FILE) -> None:
    """Write config to TOML file with restricted permissions."""
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "app": {
            "consumer_key": config.consumer_key,
            "redirect_uri": config.redirect_uri,
        },
        "http": {
            "timeout": config.timeout,
        },
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)

    # Consumer key is an app credential
    os.chmod(config_path, 0o600)


def config_exists(config_path: Path = CONFIG_FILE) -> bool:
    return config_path.exists()
