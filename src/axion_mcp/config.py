import os
from typing import Dict, Mapping, NamedTuple, Optional

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://api.axionquant.com/"


class ConfigError(ValueError):
    """Raised when the environment holds an unusable setting."""


class ClientConfig(NamedTuple):
    """Connection settings for the Axion API, fixed for the process lifetime."""
    base_url: str = DEFAULT_BASE_URL
    api_key: Optional[str] = None
    timeout: Optional[float] = None

    def headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or raw.strip() == "":
        return None
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigError(f"AXION_TIMEOUT must be a number of seconds, got {raw!r}")
    if timeout <= 0:
        raise ConfigError(f"AXION_TIMEOUT must be positive, got {raw!r}")
    return timeout


def load_config(env: Optional[Mapping[str, str]] = None) -> ClientConfig:
    """
    Build the client configuration from environment variables.

    A ``.env`` file is loaded first when reading the real process environment.
    Pass ``env`` to read from an explicit mapping instead (no .env loading).

    Raises:
        ConfigError: If AXION_TIMEOUT is set but not a positive number
    """
    if env is None:
        load_dotenv()
        env = os.environ

    base_url = env.get("AXION_BASE_URL") or DEFAULT_BASE_URL
    if not base_url.endswith("/"):
        base_url += "/"

    return ClientConfig(
        base_url=base_url,
        api_key=env.get("API_KEY") or None,
        timeout=_parse_timeout(env.get("AXION_TIMEOUT")),
    )
