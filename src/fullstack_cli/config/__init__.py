"""
Configuration helpers for the scaffolding orchestrator.
"""

from .models import (
    ConfigError,
    PackageManager,
    ScaffoldConfig,
    Workflow,
    load_config,
    resolve_package_manager,
    resolve_workflow,
)
from .settings import EnvOverrides, apply_env_overrides, get_env_overrides

__all__ = [
    "ConfigError",
    "PackageManager",
    "ScaffoldConfig",
    "Workflow",
    "load_config",
    "resolve_package_manager",
    "resolve_workflow",
    "EnvOverrides",
    "apply_env_overrides",
    "get_env_overrides",
]
