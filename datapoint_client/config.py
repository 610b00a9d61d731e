from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Mapping, Optional

import yaml
from dotenv import load_dotenv

_DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "defaults.yaml"
load_dotenv()

DEFAULT_BASE_URL = "http://datapoint.metoffice.gov.uk/public/data/"


def _bool_from_env(value: str | None) -> Optional[bool]:
    if value is None:
        return None
    value = value.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return None


def _merge_dicts(base: Dict, overrides: Mapping) -> Dict:
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, Mapping) and isinstance(base.get(key), Mapping):
            merged[key] = _merge_dicts(base[key], value)
        else:
            merged[key] = value
    return merged


def _load_yaml(path: Path) -> Dict:
    if not path.exists():
        return {}
    return yaml.safe_load(path.read_text()) or {}


@dataclass
class LoggingConfig:
    level: str = "INFO"
    json: bool = True


@dataclass
class ClientConfig:
    base_url: str = DEFAULT_BASE_URL
    api_key: Optional[str] = None
    timeout: float = 10.0


@dataclass
class AppConfig:
    client: ClientConfig = field(default_factory=ClientConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(*, config_path: str | None = None, env: Mapping[str, str] | None = None) -> AppConfig:
    env = dict(os.environ if env is None else env)
    data = _load_yaml(_DEFAULT_CONFIG_PATH)

    explicit_path = config_path or env.get("DATAPOINT_CONFIG_PATH")
    if explicit_path:
        data = _merge_dicts(data, _load_yaml(Path(explicit_path)))

    client_data = dict(data.get("client") or {})
    api_key = env.get("DATAPOINT_API_KEY")
    if api_key:
        client_data["api_key"] = api_key
    base_url = env.get("DATAPOINT_BASE_URL")
    if base_url:
        client_data["base_url"] = base_url
    timeout = env.get("DATAPOINT_TIMEOUT")
    if timeout:
        try:
            client_data["timeout"] = float(timeout)
        except ValueError:
            pass

    logging_data = dict(data.get("logging") or {})
    level_override = env.get("DATAPOINT_LOG_LEVEL")
    if level_override:
        logging_data["level"] = level_override
    json_override = _bool_from_env(env.get("DATAPOINT_LOG_JSON"))
    if json_override is not None:
        logging_data["json"] = json_override

    return AppConfig(
        client=ClientConfig(**client_data) if client_data else ClientConfig(),
        logging=LoggingConfig(**logging_data) if logging_data else LoggingConfig(),
    )


app_config = load_config()
