"""
Runtime dependency configuration management.

This package handles:
1. Resolving the target platform through the platform table
2. Building the release download URL
3. Deciding where the library is staged
"""

from .config_manager import DependencyConfigManager, DownloadPlan, DownloadStatus

__all__ = ["DependencyConfigManager", "DownloadPlan", "DownloadStatus"]
