"""
This file contains various utility functions like I/O operations, handling paths, etc.
"""

import logging
import os
import platform
import shutil
import tempfile
import zipfile
from typing import List

import requests

from duckdb_setup.setup_exceptions import DependencyIOError, NetworkError
from duckdb_setup.setup_logger import SetupLogger

# platform.machine() values folded to the Go-style names used in the platform table
_ARCH_ALIASES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "x64": "amd64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv8": "arm64",
    "i386": "386",
    "i686": "386",
    "x86": "386",
}

COPY_CHUNK_SIZE = 64 * 1024


class PlatformUtils:
    """
    This class provides utilities for detecting the host platform.
    """

    @staticmethod
    def get_host_os() -> str:
        """
        Returns the host OS as "darwin", "linux", "windows", ...
        """
        return platform.system().lower()

    @staticmethod
    def get_host_arch() -> str:
        """
        Returns the host architecture as "amd64", "arm64", "386", ...
        """
        machine = platform.machine().lower()
        return _ARCH_ALIASES.get(machine, machine)


class FileUtils:
    """
    Utility functions for file operations.
    """

    @staticmethod
    def download_to_temp_file(logger: SetupLogger, url: str, prefix: str, suffix: str) -> str:
        """
        Streams the body of a GET on url into a new temporary file and returns its path.
        """
        try:
            response = requests.get(url, stream=True)
        except requests.RequestException as e:
            raise NetworkError(f"Error downloading {url}: {e}") from e

        with response:
            if not 200 <= response.status_code < 300:
                raise NetworkError(
                    f"Download failed for {url}: HTTP {response.status_code} {response.reason}"
                )

            try:
                fd, tmp_path = tempfile.mkstemp(prefix=prefix, suffix=suffix)
            except OSError as e:
                raise DependencyIOError(f"Error creating temporary file: {e}") from e

            with os.fdopen(fd, "wb") as out:
                try:
                    for chunk in response.iter_content(chunk_size=COPY_CHUNK_SIZE):
                        out.write(chunk)
                except requests.RequestException as e:
                    raise NetworkError(f"Error reading response from {url}: {e}") from e
                except OSError as e:
                    raise DependencyIOError(f"Error writing {tmp_path}: {e}") from e

        logger.log(f"Downloaded {url} to {tmp_path}", logging.DEBUG)
        return tmp_path

    @staticmethod
    def extract_zip(logger: SetupLogger, archive_path: str, target_dir: str) -> List[str]:
        """
        Extracts every file entry of a zip archive to its stored path under target_dir,
        in archive order. Directory entries are skipped; parents are created on demand.
        Returns the extracted entry names.
        """
        try:
            archive = zipfile.ZipFile(archive_path)
        except (OSError, zipfile.BadZipFile) as e:
            raise DependencyIOError(f"Error opening archive {archive_path}: {e}") from e

        root = os.path.realpath(target_dir)
        extracted = []
        with archive:
            for info in archive.infolist():
                if info.is_dir():
                    continue

                parent = os.path.dirname(info.filename)
                try:
                    dest = os.path.realpath(os.path.join(root, info.filename))
                    # ValueError on Windows for an entry on another drive
                    if os.path.commonpath([root, dest]) != root:
                        raise DependencyIOError(
                            f"Archive entry {info.filename} resolves outside {target_dir}"
                        )
                    if parent:
                        os.makedirs(os.path.join(root, parent), exist_ok=True)
                    # NotImplementedError: unsupported compression, RuntimeError: encrypted entry
                    with archive.open(info) as src, open(dest, "wb") as dst:
                        shutil.copyfileobj(src, dst, COPY_CHUNK_SIZE)
                except (
                    OSError,
                    ValueError,
                    NotImplementedError,
                    RuntimeError,
                    zipfile.BadZipFile,
                ) as e:
                    raise DependencyIOError(f"Error extracting {info.filename}: {e}") from e

                logger.log(f"Extracted {info.filename}", logging.DEBUG)
                extracted.append(info.filename)

        return extracted

    @staticmethod
    def remove_quietly(logger: SetupLogger, path: str) -> None:
        """
        Best-effort delete; a failure is only logged.
        """
        try:
            os.remove(path)
        except OSError as e:
            logger.log(f"Could not remove {path}: {e}", logging.DEBUG)
