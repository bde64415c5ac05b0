from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Process-level settings read once by ``create_app``'s lifespan.

    ``security_config_path`` picks the YAML file holding the principal header
    name, the gateway trust flag and the per-route ``auth_required`` rules;
    ``log_level`` is handed to ``configure_app_logging``. Neither changes how a
    principal is decoded or how user data is generated.

    Env vars: ``SWA_SECURITY_CONFIG_PATH``, ``SWA_LOG_LEVEL``.
    """

    model_config = SettingsConfigDict(env_prefix="SWA_", extra="ignore")

    security_config_path: str | None = None
    log_level: str = "INFO"

    def resolved_security_config_path(self) -> Path:
        if self.security_config_path:
            return Path(self.security_config_path)

        repo_root = Path(__file__).resolve().parents[1]
        return repo_root / "config" / "security_config.yaml"


@lru_cache
def get_settings() -> Settings:
    return Settings()
