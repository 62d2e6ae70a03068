"""
duckdb_setup fetches the prebuilt DuckDB static library for a target
platform and stages it under deps/<os>_<arch>.
"""

from duckdb_setup.cli import main, setup
from duckdb_setup.setup_config import SetupConfig
from duckdb_setup.setup_exceptions import (
    DependencyIOError,
    DuckDBSetupException,
    NetworkError,
    SetupConfigError,
    UnsupportedArchitecture,
    UnsupportedPlatform,
)

__all__ = [
    "main",
    "setup",
    "SetupConfig",
    "DuckDBSetupException",
    "UnsupportedPlatform",
    "UnsupportedArchitecture",
    "NetworkError",
    "DependencyIOError",
    "SetupConfigError",
]
