"""
Runtime dependency downloader.

This package handles:
1. Downloading the release archive
2. Extracting it into the working directory
3. Staging the static library under deps/<os>_<arch>
"""

from .downloader import DependencyDownloader

__all__ = ["DependencyDownloader"]
