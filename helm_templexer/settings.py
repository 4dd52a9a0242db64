from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.models import DEFAULT_HELM_BIN


class Settings(BaseSettings):
    """Defaults read from HELM_TEMPLEXER_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="HELM_TEMPLEXER_", case_sensitive=False)

    helm_bin: str = DEFAULT_HELM_BIN
    log_format: str = "[%(levelname)s] %(message)s"
