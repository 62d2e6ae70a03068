"""
Configuration parameters for duckdb_setup.
"""

import os
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional

try:
    import tomllib
except ModuleNotFoundError:
    # Python < 3.11
    import tomli as tomllib

from duckdb_setup.setup_exceptions import SetupConfigError
from duckdb_setup.setup_utils import PlatformUtils

DEFAULT_CONFIG_FILE = "duckdb_setup.toml"


@dataclass
class SetupConfig:
    """
    Configuration for a single setup run
    """

    os_name: str = field(default_factory=PlatformUtils.get_host_os)
    arch: str = field(default_factory=PlatformUtils.get_host_arch)
    # None means the version from runtime_dependencies.json
    version: Optional[str] = None
    work_dir: str = "."
    deps_dir: str = "deps"

    @classmethod
    def from_dict(cls, env: Dict[str, Any]) -> "SetupConfig":
        """
        Create a SetupConfig instance from a dictionary, ignoring unknown and None values.
        """
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in env.items() if k in known and v is not None})

    @classmethod
    def from_toml(cls, path: str, overrides: Optional[Dict[str, Any]] = None) -> "SetupConfig":
        """
        Load the [setup] table of a TOML file. Non-None overrides win over file values.
        """
        try:
            with open(path, "rb") as f:
                toml_dict = tomllib.load(f)
        except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
            raise SetupConfigError(f"Failed to load config from {path}: {e}") from e

        section = toml_dict.get("setup", {})
        if not isinstance(section, dict):
            raise SetupConfigError(f"[setup] in {path} must be a table")
        for key, value in section.items():
            if not isinstance(value, str):
                raise SetupConfigError(f"setup.{key} in {path} must be a string")

        merged = dict(section)
        for key, value in (overrides or {}).items():
            if value is not None:
                merged[key] = value
        return cls.from_dict(merged)

    @classmethod
    def load(
        cls, config_path: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None
    ) -> "SetupConfig":
        """
        Resolve the config for a run: an explicit file must exist, the default
        duckdb_setup.toml in the working directory is optional.
        """
        overrides = overrides or {}
        if config_path is not None:
            return cls.from_toml(config_path, overrides)

        work_dir = overrides.get("work_dir") or "."
        default_path = os.path.join(work_dir, DEFAULT_CONFIG_FILE)
        if os.path.exists(default_path):
            return cls.from_toml(default_path, overrides)
        return cls.from_dict(overrides)

    @property
    def platform_key(self) -> str:
        """
        The "<os>_<arch>" pair, used as deps folder name and marker namespace.
        """
        return f"{self.os_name}_{self.arch}"
