"""
Entry point for running the setup as a module.

Usage:
    python -m duckdb_setup -os linux -arch amd64
"""

from .cli import run

if __name__ == "__main__":
    run()
