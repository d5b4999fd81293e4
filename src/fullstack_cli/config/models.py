"""
Pydantic models for the package manager/workflow choices and the optional TOML config file.
"""

from __future__ import annotations

import tomllib
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from ..errors import InvalidSelectionError, ScaffoldError
from ..util import is_plain_component, normalize_choice

DEFAULT_COMPOSE_URL = "https://raw.githubusercontent.com/docker-library/docs/master/postgres/stack.yml"


class ConfigError(ScaffoldError):
    """Raised when configuration files cannot be loaded or validated."""


class PackageManager(str, Enum):
    NPM = "npm"
    BUN = "bun"


class Workflow(str, Enum):
    FRONTEND = "frontend"
    BACKEND = "backend"
    FULLSTACK = "fullstack"


def resolve_package_manager(raw: Optional[str]) -> PackageManager:
    """
    Map free text onto a PackageManager after trimming and case folding.

    Raises:
        InvalidSelectionError: For anything other than npm or bun.
    """
    value = normalize_choice(raw)
    try:
        return PackageManager(value)
    except ValueError as exc:
        raise InvalidSelectionError(
            f"Invalid package manager {value!r}. Please choose 'npm' or 'bun'."
        ) from exc


def resolve_workflow(raw: Optional[str]) -> Workflow:
    """Map free text onto a Workflow; unknown values are fatal."""
    value = normalize_choice(raw)
    try:
        return Workflow(value)
    except ValueError as exc:
        raise InvalidSelectionError(
            f"Invalid workflow {value!r}. Please choose 'frontend', 'backend' or 'fullstack'."
        ) from exc


class ScaffoldConfig(BaseModel):
    """
    Settings that shape the generated commands but are never asked interactively.

    Attributes:
        package_manager: Preselected package manager; prompts when unset.
        launch_mode: How the dev server is started ("auto", "foreground", "terminal").
        terminal: Terminal emulator used on Linux when launching in a new window.
        compose_url: Location of the docker compose file fetched for the database.
        auth_provider: Auth SDK installed for the backend ("clerk" or "firebase").
        backend_dir: Folder created for the backend.
        server_port: PORT written to the backend .env file.
    """
    package_manager: Optional[str] = None
    launch_mode: Literal["auto", "foreground", "terminal"] = "auto"
    terminal: str = "x-terminal-emulator"
    compose_url: str = DEFAULT_COMPOSE_URL
    auth_provider: Literal["clerk", "firebase"] = "clerk"
    backend_dir: str = Field(default="backend", min_length=1)
    server_port: int = Field(default=5000, ge=1, le=65535)

    model_config = {
        "extra": "forbid",
    }

    @field_validator("backend_dir")
    @classmethod
    def _single_folder(cls, value: str) -> str:
        if not is_plain_component(value):
            raise ValueError("backend_dir must be a single folder name (no separators, '.' or '..')")
        return value


def load_config(path: Path | str) -> ScaffoldConfig:
    """
    Load and validate a TOML config file into a ScaffoldConfig instance.

    Args:
        path: Path to the TOML configuration file.

    Returns:
        A validated ScaffoldConfig object.

    Raises:
        ConfigError: If the file is missing, unreadable, or invalid.
    """
    config_path = Path(path).expanduser().resolve()
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with config_path.open("rb") as handle:
            raw_data: Dict[str, Any] = tomllib.load(handle)
    except OSError as exc:
        raise ConfigError(f"Unable to read configuration file: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in configuration file: {exc}") from exc

    try:
        return ScaffoldConfig.model_validate(raw_data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
