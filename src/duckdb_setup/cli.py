"""
Command-line entry point: stages the DuckDB static library for one platform.

Usage:
    duckdb-setup [-os OS] [-arch ARCH] [-version VERSION] [-config FILE]
"""

import argparse
import logging
import sys
from typing import List, Optional

from duckdb_setup.runtime_dependency_config import DependencyConfigManager
from duckdb_setup.runtime_dependency_downloader import DependencyDownloader
from duckdb_setup.runtime_dependency_models import load_runtime_dependencies
from duckdb_setup.setup_config import SetupConfig
from duckdb_setup.setup_exceptions import DuckDBSetupException
from duckdb_setup.setup_logger import SetupLogger
from duckdb_setup.setup_utils import PlatformUtils


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="duckdb-setup",
        description="Download the prebuilt DuckDB static library and stage it under deps/<os>_<arch>",
    )
    parser.add_argument(
        "-os",
        dest="os_name",
        default=None,
        help=f"Target OS name for setup (default: {PlatformUtils.get_host_os()})",
    )
    parser.add_argument(
        "-arch",
        dest="arch",
        default=None,
        help=f"Target arch name for setup (default: {PlatformUtils.get_host_arch()})",
    )
    parser.add_argument(
        "-version",
        dest="version",
        default=None,
        help="DuckDB release version (default: the packaged manifest version)",
    )
    parser.add_argument(
        "-config",
        dest="config",
        default=None,
        help="TOML config file with a [setup] table (default: ./duckdb_setup.toml if present)",
    )
    return parser


def setup(config: SetupConfig, logger: SetupLogger) -> None:
    """
    Run the whole pipeline for config. Raises DuckDBSetupException on the first failure.
    """
    logger.log(f"Detected OS: {config.os_name}, arch: {config.arch}", logging.INFO)

    config_manager = DependencyConfigManager(
        runtime_deps_config=load_runtime_dependencies(),
        setup_config=config,
        logger=logger,
    )
    plan = config_manager.create_download_plan()

    downloader = DependencyDownloader(config_manager, logger)
    downloader.download_dependency(plan)

    logger.log("Setup process completed.", logging.INFO)


def main(argv: Optional[List[str]] = None, logger: Optional[SetupLogger] = None) -> int:
    """
    Parse arguments and run the setup. Returns the process exit status.
    """
    args = build_parser().parse_args(argv)
    if logger is None:
        logger = SetupLogger()
        logger.attach_stderr_handler()

    try:
        config = SetupConfig.load(
            args.config,
            {"os_name": args.os_name, "arch": args.arch, "version": args.version},
        )
        setup(config, logger)
    except DuckDBSetupException as e:
        logger.log(e.message, logging.ERROR)
        return 1

    return 0


def run() -> None:
    sys.exit(main())
