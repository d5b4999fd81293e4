"""
Environment override loading helpers.
"""

from __future__ import annotations

import os
from pathlib import Path
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, Field, ValidationError
from dotenv import load_dotenv

from .models import ConfigError, ScaffoldConfig


def _load_dotenv() -> None:
    cwd_env = Path.cwd() / ".env"
    if cwd_env.exists():
        load_dotenv(dotenv_path=cwd_env, override=True)


_load_dotenv()


class EnvOverrides(BaseModel):
    """
    Config values supplied through FULLSTACK_CLI_* environment variables.

    Unset variables leave the corresponding ScaffoldConfig field untouched.
    """
    package_manager: Optional[str] = Field(default=None, alias="FULLSTACK_CLI_PACKAGE_MANAGER")
    launch_mode: Optional[str] = Field(default=None, alias="FULLSTACK_CLI_LAUNCH_MODE")
    terminal: Optional[str] = Field(default=None, alias="FULLSTACK_CLI_TERMINAL")
    compose_url: Optional[str] = Field(default=None, alias="FULLSTACK_CLI_COMPOSE_URL")
    auth_provider: Optional[str] = Field(default=None, alias="FULLSTACK_CLI_AUTH_PROVIDER")
    backend_dir: Optional[str] = Field(default=None, alias="FULLSTACK_CLI_BACKEND_DIR")
    server_port: Optional[int] = Field(default=None, alias="FULLSTACK_CLI_SERVER_PORT")

    model_config = {
        "populate_by_name": True,
    }


@lru_cache(maxsize=1)
def get_env_overrides() -> EnvOverrides:
    """
    Load overrides from environment/.env exactly once.

    Returns:
        An EnvOverrides object populated from environment variables.
    """
    values = {field.alias: os.getenv(field.alias) for field in EnvOverrides.model_fields.values()}
    try:
        return EnvOverrides(**values)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def apply_env_overrides(config: ScaffoldConfig, overrides: Optional[EnvOverrides] = None) -> ScaffoldConfig:
    """
    Return a copy of config with any environment overrides applied and re-validated.
    """
    overrides = overrides or get_env_overrides()
    updates = overrides.model_dump(exclude_none=True)
    if not updates:
        return config
    merged = {**config.model_dump(), **updates}
    try:
        return ScaffoldConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
