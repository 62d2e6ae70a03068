"""
Runtime dependency models for the DuckDB static library.

This package provides the Pydantic model of runtime_dependencies.json:
the release URL template, staged file names and the platform table.
"""

from .runtime_dependencies import (
    RuntimeDependenciesConfig,
    LibraryFile,
    load_runtime_dependencies,
)

__all__ = [
    "RuntimeDependenciesConfig",
    "LibraryFile",
    "load_runtime_dependencies",
]
