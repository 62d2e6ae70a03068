"""
Dependency downloader implementation.

Handles downloading, extracting and staging the DuckDB static library.
"""

import logging
import os
import pathlib
import shutil
from typing import List

from duckdb_setup.runtime_dependency_config.config_manager import (
    DependencyConfigManager,
    DownloadPlan,
    DownloadStatus,
)
from duckdb_setup.setup_exceptions import DependencyIOError, DuckDBSetupException
from duckdb_setup.setup_logger import SetupLogger
from duckdb_setup.setup_utils import FileUtils

TEMP_ARCHIVE_PREFIX = "duckdb-static-lib-"


class DependencyDownloader:
    """
    Downloads and extracts the release archive, then stages the library.

    Every step raises a DuckDBSetupException on failure; nothing is retried.
    """

    def __init__(
        self,
        config_manager: DependencyConfigManager,
        logger: SetupLogger,
    ):
        """
        Initialize the dependency downloader.

        Args:
            config_manager: The DependencyConfigManager holding the manifest and target
            logger: Logger for progress and error messages
        """
        self.config_manager = config_manager
        self.logger = logger

    @property
    def runtime_deps(self):
        return self.config_manager.runtime_deps

    def download_dependency(self, plan: DownloadPlan) -> None:
        """
        Run fetch -> extract -> cleanup -> finalize for a plan.

        The plan status is updated; the error is re-raised for the caller.
        """
        plan.status = DownloadStatus.IN_PROGRESS
        try:
            self.logger.log(
                f"Downloading {plan.platform_tag} archive from {plan.url}...", logging.INFO
            )
            archive_path = self.download_archive(plan.url, plan.archive_type)

            self.logger.log("Download complete, extracting zip file.", logging.INFO)
            self.extract_archive(archive_path, plan.work_dir)
            self.remove_archive(archive_path)

            self.logger.log("Extraction done, finalizing dependencies.", logging.INFO)
            self.finalize(plan)
        except DuckDBSetupException as e:
            self.config_manager.mark_download_completed(plan, success=False, error_message=e.message)
            raise

        self.config_manager.mark_download_completed(plan, success=True)

    def download_archive(self, url: str, archive_type: str = "zip") -> str:
        """
        Fetch the archive into a fresh temporary file and return its path.

        Raises:
            NetworkError: on transport failure or an HTTP error status
            DependencyIOError: if the temporary file cannot be created or written
        """
        suffix = "." + archive_type
        return FileUtils.download_to_temp_file(self.logger, url, TEMP_ARCHIVE_PREFIX, suffix)

    def extract_archive(self, archive_path: str, work_dir: str) -> List[str]:
        """
        Extract every file of the archive under work_dir.

        Raises:
            DependencyIOError: if the archive cannot be opened or an entry cannot be written.
                Files extracted before the failure, and the archive itself, stay on disk.
        """
        extracted = FileUtils.extract_zip(self.logger, archive_path, work_dir)
        self.logger.log(f"Extracted {len(extracted)} files into {work_dir}", logging.DEBUG)
        return extracted

    def remove_archive(self, archive_path: str) -> None:
        FileUtils.remove_quietly(self.logger, archive_path)

    def finalize(self, plan: DownloadPlan) -> None:
        """
        Stage the extracted library into deps/<os>_<arch>.

        Creates the folder, writes the marker file, moves the static library
        under its final name and checks that the header sits where extraction
        left it.

        Raises:
            DependencyIOError: on any filesystem failure or a missing extracted file
        """
        dest_dir = pathlib.Path(plan.destination_path)
        work_dir = pathlib.Path(plan.work_dir)
        library = self.runtime_deps.library

        try:
            dest_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DependencyIOError(f"Error creating {dest_dir}: {e}") from e

        marker_path = dest_dir / self.runtime_deps.marker_file
        try:
            marker_path.write_text(self.runtime_deps.marker_content(plan.platform_key))
        except OSError as e:
            raise DependencyIOError(f"Error writing {marker_path}: {e}") from e

        library_src = work_dir / library.source
        library_dst = dest_dir / library.destination
        try:
            os.replace(library_src, library_dst)
        except OSError:
            # cross-device deps folder
            try:
                shutil.move(str(library_src), str(library_dst))
            except OSError as e:
                raise DependencyIOError(
                    f"Error moving {library_src} to {library_dst}: {e}"
                ) from e

        header = work_dir / self.runtime_deps.header
        if not header.is_file():
            raise DependencyIOError(f"Header {header} was not found in the archive")

        self.logger.log(f"Staged {library_dst}", logging.DEBUG)
