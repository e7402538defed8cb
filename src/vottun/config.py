"""
Credentials and settings for the Vottun API.

Settings are read from the process environment after loading
~/.vottun/.env (if present); entries in the file win over the environment.

    VOTTUN_API_KEY          API key (required)
    VOTTUN_APPLICATION_VKN  Application VKN (required)
    VOTTUN_NETWORK          Chain ID (default: 80002, Polygon Amoy)
    VOTTUN_BASE_URL         API base URL
    VOTTUN_TIMEOUT          Request timeout in seconds
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


VOTTUN_DIR = Path.home() / ".vottun"
VOTTUN_ENV = VOTTUN_DIR / ".env"

DEFAULT_BASE_URL = "https://api.vottun.tech/"
DEFAULT_TIMEOUT = 2.0
DEFAULT_NETWORK = 80002  # Polygon Amoy testnet


@dataclass(frozen=True)
class VottunSettings:
    api_key: str
    application_vkn: str
    network: int = DEFAULT_NETWORK
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    def __repr__(self) -> str:
        return (
            f"VottunSettings(api_key='***', application_vkn={self.application_vkn!r}, "
            f"network={self.network}, base_url={self.base_url!r}, timeout={self.timeout})"
        )


def _require(name: str, env_path: Path) -> str:
    value = os.environ.get(name)
    if not value:
        raise ValueError(f"{name} not found. Set it in the environment or in {env_path}")
    return value


def load_settings(env_path: Optional[Path] = None) -> VottunSettings:
    """
    Load settings from a .env file and the environment.

    Args:
        env_path: Path to .env file (default: ~/.vottun/.env)

    Returns:
        VottunSettings

    Raises:
        ValueError: If a required variable is missing or a number is malformed
    """
    env_path = env_path or VOTTUN_ENV

    if env_path.exists():
        load_dotenv(env_path, override=True)

    return VottunSettings(
        api_key=_require("VOTTUN_API_KEY", env_path),
        application_vkn=_require("VOTTUN_APPLICATION_VKN", env_path),
        network=int(os.environ.get("VOTTUN_NETWORK", str(DEFAULT_NETWORK))),
        base_url=os.environ.get("VOTTUN_BASE_URL", DEFAULT_BASE_URL),
        timeout=float(os.environ.get("VOTTUN_TIMEOUT", str(DEFAULT_TIMEOUT))),
    )


def save_settings(
    api_key: str,
    application_vkn: str,
    network: Optional[int] = None,
    env_path: Optional[Path] = None,
) -> Path:
    """
    Save credentials to a .env file, keeping unrelated entries.

    Returns:
        Path to the saved .env file
    """
    env_path = env_path or VOTTUN_ENV
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing = {}
    if env_path.exists():
        for line in env_path.read_text(encoding="utf-8").splitlines():
            line = line.strip()
            if line and not line.startswith("#") and "=" in line:
                k, v = line.split("=", 1)
                existing[k.strip()] = v.strip()

    existing["VOTTUN_API_KEY"] = api_key
    existing["VOTTUN_APPLICATION_VKN"] = application_vkn
    if network is not None:
        existing["VOTTUN_NETWORK"] = str(network)

    lines = [f"{k}={v}" for k, v in existing.items()]
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")

    # Owner-only on Unix
    if os.name != "nt":
        env_path.chmod(0o600)

    return env_path
