"""
sprout.project.config - Compiler configuration loader

This module handles loading the sprout.json configuration file. It provides
the CompilerConfig class holding the tokens and helper names the binding
compiler uses, and the defaults used when no configuration file exists.

The sprout.json file is a JSON object; keys may be written in kebab-case
or snake_case:
    {"wildcard": "_",
     "rest-marker": "&",
     "gensym-prefix": "g_",
     "first-fn": "first",
     "rest-fn": "rest",
     "keyed-fn": "get",
     "indexed-fn": "nth",
     "source-root": ""}
"""

import json
import os
from dataclasses import dataclass, field, fields
from typing import Any, Optional

PROJECT_FILENAME = "sprout.json"


class ConfigError(ValueError):
    """Raised when sprout.json is malformed or holds invalid values."""


def find_project_root(start_path: Optional[str] = None) -> Optional[str]:
    """
    Find the project root by walking up directory trees looking for sprout.json.

    Args:
        start_path: Path to start searching from. If None, uses current working directory.
                   Can be a file or directory path.

    Returns:
        Absolute path to the directory containing sprout.json, or None if not found.
    """
    if start_path is None:
        current = os.getcwd()
    elif os.path.isfile(start_path):
        current = os.path.dirname(os.path.abspath(start_path))
    else:
        current = os.path.abspath(start_path)

    while True:
        if os.path.isfile(os.path.join(current, PROJECT_FILENAME)):
            return current

        parent = os.path.dirname(current)
        if parent == current:
            # Reached filesystem root
            return None
        current = parent


@dataclass
class CompilerConfig:
    """
    Settings for binding-form compilation and source map output.

    Fields:
        wildcard: Symbol name whose binding is discarded
        rest_marker: Symbol name introducing the rest capture of a sequence pattern
        gensym_prefix: Prefix of generated binding names; None keeps the
            prefix of the gensym allocator in use
        first_fn: Runtime function returning the first element of a sequence
        rest_fn: Runtime function returning the remaining elements of a sequence
        keyed_fn: Runtime function looking a key up in a map
        indexed_fn: Runtime function looking an index up in an array
        source_root: Value of the sourceRoot field of generated source maps

    Computed fields:
        project_root: Directory the configuration was loaded from, if any
    """

    wildcard: str = "_"
    rest_marker: str = "&"
    gensym_prefix: Optional[str] = None
    first_fn: str = "first"
    rest_fn: str = "rest"
    keyed_fn: str = "get"
    indexed_fn: str = "nth"
    source_root: str = ""
    project_root: Optional[str] = field(default=None, compare=False)

    @classmethod
    def from_dict(
        cls, data: dict[str, Any], project_root: Optional[str] = None
    ) -> "CompilerConfig":
        """
        Build a config from a mapping, validating keys and value types.

        Raises:
            ConfigError: On unknown keys or non-string values.
        """
        if not isinstance(data, dict):
            raise ConfigError(
                f"Configuration must be an object, got {type(data).__name__}"
            )

        known = {f.name for f in fields(cls) if f.name != "project_root"}
        values: dict[str, str] = {}
        for key, value in data.items():
            name = key.replace("-", "_")
            if name not in known:
                raise ConfigError(f"Unknown configuration key: {key!r}")
            if not isinstance(value, str):
                raise ConfigError(
                    f"{key!r} must be a string, got {type(value).__name__}"
                )
            if not value and name != "source_root":
                raise ConfigError(f"{key!r} must not be empty")
            values[name] = value

        if values.get("wildcard", "_") == values.get("rest_marker", "&"):
            raise ConfigError("wildcard and rest-marker must differ")

        return cls(project_root=project_root, **values)

    @classmethod
    def load(cls, path: Optional[str] = None) -> "CompilerConfig":
        """
        Load a CompilerConfig from a sprout.json file.

        Args:
            path: Path to sprout.json, a directory containing it, or None to
                  search from the current directory upward.

        Returns:
            Loaded CompilerConfig instance.

        Raises:
            FileNotFoundError: If no sprout.json file can be found.
            ConfigError: If the file is not valid JSON or holds invalid values.
        """
        if path is None:
            project_root = find_project_root()
            if project_root is None:
                raise FileNotFoundError(
                    f"Could not find {PROJECT_FILENAME} in current directory or any parent directory"
                )
            config_file = os.path.join(project_root, PROJECT_FILENAME)
        elif os.path.isfile(path):
            config_file = os.path.abspath(path)
            project_root = os.path.dirname(config_file)
        elif os.path.isdir(path):
            project_root = find_project_root(path)
            if project_root is None:
                raise FileNotFoundError(
                    f"Could not find {PROJECT_FILENAME} in {path} or any parent directory"
                )
            config_file = os.path.join(project_root, PROJECT_FILENAME)
        else:
            raise FileNotFoundError(f"Path does not exist: {path}")

        with open(config_file, encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigError(f"Failed to parse {config_file}: {e}") from e

        try:
            return cls.from_dict(data, project_root=project_root)
        except ConfigError as e:
            raise ConfigError(f"{config_file}: {e}") from e


def load_config(path: Optional[str] = None) -> CompilerConfig:
    """
    Convenience function to load a CompilerConfig.

    Without an explicit path, a missing sprout.json yields the defaults.
    """
    try:
        return CompilerConfig.load(path)
    except FileNotFoundError:
        if path is not None:
            raise
        return CompilerConfig()
