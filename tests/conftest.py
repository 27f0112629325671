"""Pytest configuration and shared fixtures."""

import hashlib
from pathlib import Path
from typing import Callable

import pytest

HELLO_WORLD = b"Hello, World!"


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from inside a temporary directory.

    Manifest paths resolve against the current directory, so most
    verification tests use relative paths from here.
    """
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def sample_file(workdir: Path) -> Path:
    """Create a file containing the known test vector."""
    path = workdir / "hello.txt"
    path.write_bytes(HELLO_WORLD)
    return path


@pytest.fixture
def write_manifest(workdir: Path) -> Callable[..., Path]:
    """Factory writing manifest lines to a file in the work directory."""

    def _write(*lines: str, name: str = "checksums.md5") -> Path:
        path = workdir / name
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def md5_of() -> Callable[[bytes], str]:
    """Reference digest using hashlib directly."""
    return lambda data: hashlib.md5(data).hexdigest()
