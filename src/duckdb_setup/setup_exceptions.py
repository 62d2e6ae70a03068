"""
This file contains the exceptions raised by duckdb_setup.
"""


class DuckDBSetupException(Exception):
    """
    Base exception for all setup failures. Every subclass is fatal for the CLI.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnsupportedPlatform(DuckDBSetupException):
    """
    Raised when the target OS has no entry in the platform table.
    """

    def __init__(self, os_name: str):
        super().__init__(f"unsupported OS: {os_name}")
        self.os_name = os_name


class UnsupportedArchitecture(DuckDBSetupException):
    """
    Raised when the target OS is known but the architecture is not.
    """

    def __init__(self, os_name: str, arch: str):
        super().__init__(f"unsupported architecture: {arch} for OS: {os_name}")
        self.os_name = os_name
        self.arch = arch


class NetworkError(DuckDBSetupException):
    """
    Raised when the archive GET fails at the transport level or returns an error status.
    """


class DependencyIOError(DuckDBSetupException):
    """
    Raised on local filesystem failures: temp file, zip, extraction, staging.
    """


class SetupConfigError(DuckDBSetupException):
    """
    Raised when a setup config file cannot be read or is malformed.
    """
