"""
sprout.project - Project configuration

Provides the CompilerConfig loaded from a project's sprout.json.
"""

from sprout.project.config import (
    PROJECT_FILENAME,
    CompilerConfig,
    ConfigError,
    find_project_root,
    load_config,
)

__all__ = [
    "PROJECT_FILENAME",
    "CompilerConfig",
    "ConfigError",
    "find_project_root",
    "load_config",
]
