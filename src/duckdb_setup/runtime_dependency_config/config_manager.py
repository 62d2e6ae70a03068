"""
Dependency configuration manager.

Resolves the target platform against the runtime dependencies manifest and
turns a SetupConfig into a download plan.
"""

import logging
import pathlib
from typing import Optional

from duckdb_setup.runtime_dependency_models import RuntimeDependenciesConfig
from duckdb_setup.setup_config import SetupConfig
from duckdb_setup.setup_logger import SetupLogger


class DownloadStatus:
    """Enumeration of download statuses."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    FAILED = "failed"


class DownloadPlan:
    """
    A plan to download and stage the static library for one platform.
    """

    def __init__(
            self,
            platform_key: str,
            platform_tag: str,
            url: str,
            archive_type: str,
            work_dir: str,
            destination_path: str,
            status: str = DownloadStatus.PENDING,
    ):
        """
        Initialize a download plan.

        Args:
            platform_key: "<os>_<arch>" pair of the target
            platform_tag: Vendor platform tag, e.g. "linux-amd64"
            url: URL to download from
            archive_type: Type of archive (zip)
            work_dir: Directory the archive is extracted into
            destination_path: The deps/<os>_<arch> folder
            status: Current download status
        """
        self.platform_key = platform_key
        self.platform_tag = platform_tag
        self.url = url
        self.archive_type = archive_type
        self.work_dir = work_dir
        self.destination_path = destination_path
        self.status = status
        self.error_message: Optional[str] = None

    def __repr__(self) -> str:
        return (
            f"DownloadPlan(key={self.platform_key}, "
            f"status={self.status}, url={self.url})"
        )


class DependencyConfigManager:
    """
    Manages runtime dependency configuration and download decisions.

    Applies the SetupConfig (target platform, version override, directories)
    to the runtime dependencies manifest.
    """

    def __init__(
        self,
        runtime_deps_config: RuntimeDependenciesConfig,
        setup_config: SetupConfig,
        logger: Optional[SetupLogger] = None,
    ):
        """
        Initialize the dependency config manager.

        Args:
            runtime_deps_config: Loaded runtime dependencies manifest
            setup_config: Target platform and directory configuration
            logger: Logger for planning messages
        """
        self.runtime_deps = runtime_deps_config
        self.setup_config = setup_config
        self.logger = logger or SetupLogger()

    @property
    def version(self) -> str:
        return self.setup_config.version or self.runtime_deps.version

    def resolve_platform(self) -> str:
        """
        Resolve the configured OS/architecture to a vendor platform tag.

        Raises:
            UnsupportedPlatform, UnsupportedArchitecture
        """
        return self.runtime_deps.get_platform_tag(
            self.setup_config.os_name, self.setup_config.arch
        )

    def build_download_url(self, platform_tag: str) -> str:
        return self.runtime_deps.build_url(self.version, platform_tag)

    def get_destination_path(self) -> str:
        """
        Returns the deps/<os>_<arch> folder for the configured target.
        """
        return str(
            pathlib.Path(self.setup_config.work_dir)
            / self.setup_config.deps_dir
            / self.setup_config.platform_key
        )

    def create_download_plan(self) -> DownloadPlan:
        """
        Resolve the platform and build the plan for it.
        """
        platform_tag = self.resolve_platform()
        url = self.build_download_url(platform_tag)

        self.logger.log(
            f"Resolved {self.setup_config.os_name}/{self.setup_config.arch} "
            f"to platform tag {platform_tag}",
            logging.DEBUG,
        )

        return DownloadPlan(
            platform_key=self.setup_config.platform_key,
            platform_tag=platform_tag,
            url=url,
            archive_type=self.runtime_deps.archive_type,
            work_dir=self.setup_config.work_dir,
            destination_path=self.get_destination_path(),
        )

    def mark_download_completed(
        self, plan: DownloadPlan, success: bool = True, error_message: Optional[str] = None
    ) -> None:
        """
        Mark a download plan as completed or failed.

        Args:
            plan: The download plan to mark
            success: Whether the download was successful
            error_message: Reason of the failure
        """
        plan.status = DownloadStatus.COMPLETED if success else DownloadStatus.FAILED
        plan.error_message = None if success else (error_message or "Download failed")
