"""
Shared fixtures for duckdb_setup tests.
"""

import io
import tempfile
import zipfile

import pytest
import requests

from duckdb_setup.runtime_dependency_models import load_runtime_dependencies
from duckdb_setup.setup_logger import SetupLogger


LIBRARY_BYTES = b"!<arch>\nfake static library\n"
HEADER_BYTES = b"#pragma once\nint duckdb_open(void);\n"


def make_zip(entries) -> bytes:
    """
    Build a zip in memory. entries is a list of (name, bytes or None); None makes a directory entry.
    """
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        for name, data in entries:
            if data is None:
                archive.writestr(zipfile.ZipInfo(name.rstrip("/") + "/"), b"")
            else:
                archive.writestr(name, data)
    return buffer.getvalue()


class FakeResponse:
    """Stands in for a streamed requests.Response."""

    def __init__(self, body: bytes, status_code: int = 200, reason: str = "OK"):
        self.body = body
        self.status_code = status_code
        self.reason = reason
        self.closed = False

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def iter_content(self, chunk_size=1):
        for i in range(0, len(self.body), chunk_size):
            yield self.body[i:i + chunk_size]

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


@pytest.fixture
def runtime_deps():
    return load_runtime_dependencies()


@pytest.fixture
def logger():
    return SetupLogger()


@pytest.fixture
def release_archive() -> bytes:
    return make_zip(
        [
            ("libduckdb_bundle.a", LIBRARY_BYTES),
            ("duckdb.h", HEADER_BYTES),
        ]
    )


@pytest.fixture
def temp_dir(tmp_path, monkeypatch):
    """Redirects temporary files into tmp_path/tmp so tests can inspect them."""
    path = tmp_path / "tmp"
    path.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(path))
    return path


@pytest.fixture
def serve(monkeypatch):
    """
    Patch requests.get to answer with the given response and record requested URLs.
    """
    calls = []

    def _serve(response):
        def fake_get(url, **kwargs):
            calls.append((url, kwargs))
            if isinstance(response, Exception):
                raise response
            return response

        monkeypatch.setattr(requests, "get", fake_get)
        return calls

    return _serve


@pytest.fixture
def refuse_connections(serve):
    return serve(requests.ConnectionError("Connection refused"))


@pytest.fixture
def make_archive():
    return make_zip


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def library_bytes():
    return LIBRARY_BYTES


@pytest.fixture
def header_bytes():
    return HEADER_BYTES


def patch_central_directory(data: bytes, flag_bits: int = None, compress_type: int = None) -> bytes:
    """
    Rewrite the general purpose flags and/or compression method of the first
    central directory record of a zip built by make_zip.
    """
    patched = bytearray(data)
    offset = patched.index(b"PK\x01\x02")
    if flag_bits is not None:
        patched[offset + 8:offset + 10] = flag_bits.to_bytes(2, "little")
    if compress_type is not None:
        patched[offset + 10:offset + 12] = compress_type.to_bytes(2, "little")
    return bytes(patched)


@pytest.fixture
def patch_zip():
    return patch_central_directory
