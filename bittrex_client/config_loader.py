"""Client config loader (environment first, then yaml)."""

from __future__ import annotations

from dataclasses import dataclass, fields
import logging
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
import yaml


LOGGER = logging.getLogger(__name__)
PROJECT_ROOT = Path(__file__).resolve().parents[1]

ENV_KEYS = {
    "api_key": "BITTREX_API_KEY",
    "api_secret": "BITTREX_API_SECRET",
    "protocol": "BITTREX_API_PROTOCOL",
    "host": "BITTREX_API_HOST",
    "version": "BITTREX_API_VERSION",
}


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Connection settings and credentials for one client."""

    protocol: str = "https"
    host: str = "bittrex.com"
    version: str = "v1.1"
    api_key: str = ""
    api_secret: str = ""
    timeout_sec: float = 10.0

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)

    @property
    def has_api_secret(self) -> bool:
        return bool(self.api_secret)

    @property
    def has_credentials(self) -> bool:
        return self.has_api_key and self.has_api_secret

    @property
    def base_url(self) -> str:
        return f"{self.protocol}://{self.host}/api/{self.version}"


def load_client_config(config_path: str = "config.yaml") -> ClientConfig:
    """Build a ClientConfig from the environment with optional yaml overrides.

    Environment variables win over the ``bittrex:`` section of the yaml file.
    A missing file or missing credentials is not an error; authenticated
    calls fail later with MissingCredentialError.
    """
    _load_env()
    values = _only_known_keys(_read_yaml(config_path).get("bittrex") or {})

    for field_name, env_name in ENV_KEYS.items():
        env_value = os.getenv(env_name, "").strip()
        if env_value:
            values[field_name] = env_value

    for key in ("api_key", "api_secret", "protocol", "host", "version"):
        if key in values:
            values[key] = str(values[key] or "").strip()
    if "timeout_sec" in values:
        values["timeout_sec"] = float(values["timeout_sec"])

    return ClientConfig(**values)


def load_log_level(config_path: str = "config.yaml") -> str:
    app = _read_yaml(config_path).get("app") or {}
    return str(app.get("log_level") or "INFO").upper()


def _load_env() -> None:
    env_path = PROJECT_ROOT / ".env"
    if env_path.exists():
        load_dotenv(dotenv_path=env_path)
    else:
        load_dotenv()


def _read_yaml(config_path: str) -> dict[str, Any]:
    path = Path(config_path)
    if not path.exists():
        return {}
    raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        LOGGER.warning("Ignoring %s: top level is not a mapping", config_path)
        return {}
    return raw


def _only_known_keys(data: dict[str, Any]) -> dict[str, Any]:
    allowed = {f.name for f in fields(ClientConfig)}
    return {key: value for key, value in data.items() if key in allowed}
