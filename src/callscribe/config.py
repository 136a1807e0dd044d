"""Configuration handling."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import os
from typing import Mapping, Optional
import yaml

from .completion import DEFAULT_MODEL
from .models import GenerationSettings
from .schemas import DEFAULT_VARIANT

logger = logging.getLogger(__name__)

FALLBACK_API_KEY_ENV = "GEMINI_API_KEY"


@dataclass
class ServiceConfig:
    api_key: Optional[str] = None
    api_key_env: str = "API_KEY"
    model: str = DEFAULT_MODEL
    temperature: Optional[float] = None


@dataclass
class EmailConfig:
    schema_variant: str = DEFAULT_VARIANT
    settings: GenerationSettings = field(default_factory=GenerationSettings)


@dataclass
class Config:
    service: ServiceConfig = field(default_factory=ServiceConfig)
    email: EmailConfig = field(default_factory=EmailConfig)
    log_dir: str = "logs"
    log_level: str = "INFO"


def load_config(path: str) -> Config:
    with open(path, "r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}

    service = ServiceConfig(**(data.get("service") or {}))
    email_data = dict(data.get("email") or {})
    settings = GenerationSettings.from_dict(email_data.pop("settings", None))
    email = EmailConfig(settings=settings, **email_data)

    return Config(
        service=service,
        email=email,
        log_dir=data.get("log_dir", "logs"),
        log_level=data.get("log_level", "INFO"),
    )


def save_config(path: str, config: Config) -> None:
    data = {
        "service": {
            "api_key": config.service.api_key,
            "api_key_env": config.service.api_key_env,
            "model": config.service.model,
            "temperature": config.service.temperature,
        },
        "email": {
            "schema_variant": config.email.schema_variant,
            "settings": config.email.settings.to_dict(),
        },
        "log_dir": config.log_dir,
        "log_level": config.log_level,
    }
    with open(path, "w", encoding="utf-8") as handle:
        yaml.safe_dump(data, handle, sort_keys=False)


def load_config_or_default(path: Optional[str]) -> Config:
    if path and os.path.exists(path):
        return load_config(path)
    return Config()


def resolve_api_key(
    config: Config, environ: Optional[Mapping[str, str]] = None
) -> Optional[str]:
    """Return the API key from the config file or the environment.

    Read once at startup and handed to the clients. A missing key is logged
    here; the clients then refuse every call without touching the network.
    """
    env = os.environ if environ is None else environ
    candidates = (
        config.service.api_key,
        env.get(config.service.api_key_env),
        env.get(FALLBACK_API_KEY_ENV),
    )
    for value in candidates:
        if value and value.strip():
            return value.strip()
    logger.error(
        "API key is not defined (set %s or %s).",
        config.service.api_key_env,
        FALLBACK_API_KEY_ENV,
    )
    return None
