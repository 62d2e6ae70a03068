"""
Pydantic data models for runtime_dependencies.json.

The manifest describes the DuckDB static library release: its version, the
URL template of the release assets, the names of the files staged out of the
archive, and the two-level platform table mapping OS -> architecture ->
vendor platform tag.
"""

import json
import os
from pathlib import PurePath
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from duckdb_setup.setup_exceptions import (
    UnsupportedArchitecture,
    UnsupportedPlatform,
)

RUNTIME_DEPENDENCIES_FILE = str(
    PurePath(os.path.dirname(os.path.dirname(__file__)), "runtime_dependencies.json")
)


class LibraryFile(BaseModel):
    """
    The static library as named inside the archive and once staged.
    """

    model_config = ConfigDict(frozen=True)

    source: str = Field(..., description="File name produced by extraction")
    destination: str = Field(..., description="File name inside the deps folder")


class RuntimeDependenciesConfig(BaseModel):
    """
    Complete runtime dependencies configuration.

    Structure:
    {
      "_description": "...",
      "version": "1.2.0",
      "releaseUrl": ".../v{version}/static-lib-{platform_tag}.zip",
      "archiveType": "zip",
      "library": {"source": "...", "destination": "..."},
      "header": "duckdb.h",
      "markerFile": "vendor.go",
      "platforms": {"<os>": {"<arch>": "<platform tag>", ...}, ...}
    }
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    description: Optional[str] = Field(None, alias="_description")
    version: str = Field(..., description="Default release version")
    release_url: str = Field(
        ...,
        alias="releaseUrl",
        description="Template with {version} and {platform_tag} placeholders",
    )
    archive_type: str = Field("zip", alias="archiveType")
    library: LibraryFile
    header: str
    marker_file: str = Field(..., alias="markerFile")
    platforms: Dict[str, Dict[str, str]]

    def get_platform_tag(self, os_name: str, arch: str) -> str:
        """
        Look up the vendor platform tag for an OS/architecture pair.

        Raises:
            UnsupportedPlatform: if the OS has no entry
            UnsupportedArchitecture: if the OS is known but the architecture is not
        """
        arch_map = self.platforms.get(os_name)
        if arch_map is None:
            raise UnsupportedPlatform(os_name)

        tag = arch_map.get(arch)
        if tag is None:
            raise UnsupportedArchitecture(os_name, arch)
        return tag

    def get_supported_platforms(self) -> List[Tuple[str, str]]:
        """All (os, arch) pairs in the table, in manifest order."""
        return [
            (os_name, arch)
            for os_name, arch_map in self.platforms.items()
            for arch in arch_map
        ]

    def build_url(self, version: str, platform_tag: str) -> str:
        return self.release_url.format(version=version, platform_tag=platform_tag)

    def marker_content(self, platform_key: str) -> str:
        """Contents of the marker file for a "<os>_<arch>" folder."""
        return f"package {platform_key}"


def load_runtime_dependencies(path: Optional[str] = None) -> RuntimeDependenciesConfig:
    """
    Load and parse runtime_dependencies.json (the packaged copy unless path is given).
    """
    with open(path or RUNTIME_DEPENDENCIES_FILE, "r") as f:
        runtime_deps_data = json.load(f)
    return RuntimeDependenciesConfig(**runtime_deps_data)
