"""Tests for streaming digest computation."""

import io
import re
from pathlib import Path

import pytest

from md5check.models.checksum import DIGEST_LENGTH
from md5check.utils.hashing import CHUNK_SIZE, compute_digest, compute_file_digest, format_line

HELLO_WORLD = b"Hello, World!"
HELLO_WORLD_MD5 = "65a8e27d8879283831b664bd8b7f0ad4"
EMPTY_MD5 = "d41d8cd98f00b204e9800998ecf8427e"


class FailingStream(io.RawIOBase):
    """Stream that returns some data, then raises on read."""

    def __init__(self, data: bytes) -> None:
        super().__init__()
        self._data = data
        self._served = False

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        if self._served:
            raise OSError(5, "Input/output error")
        self._served = True
        n = len(self._data)
        buffer[:n] = self._data
        return n


class TestComputeDigest:
    """Tests for compute_digest."""

    def test_known_vector(self):
        """Test the Hello, World! vector."""
        assert compute_digest(io.BytesIO(HELLO_WORLD)) == HELLO_WORLD_MD5

    def test_empty_stream(self):
        """Test digest of zero-length input."""
        assert compute_digest(io.BytesIO(b"")) == EMPTY_MD5

    def test_deterministic(self):
        """Test repeated calls on identical input agree."""
        data = b"some repeated content" * 100
        assert compute_digest(io.BytesIO(data)) == compute_digest(io.BytesIO(data))

    @pytest.mark.parametrize("size", [1, CHUNK_SIZE - 1, CHUNK_SIZE, CHUNK_SIZE + 1, CHUNK_SIZE * 5 + 7])
    def test_chunk_boundaries(self, size: int, md5_of):
        """Test inputs around the buffer size hash like a single update."""
        data = bytes(i % 251 for i in range(size))
        assert compute_digest(io.BytesIO(data)) == md5_of(data)

    def test_small_chunk_size(self, md5_of):
        """Test a custom buffer size gives the same digest."""
        data = b"abcdefghijklmnopqrstuvwxyz" * 10
        assert compute_digest(io.BytesIO(data), chunk_size=3) == md5_of(data)

    def test_lowercase_hex(self):
        """Test output is always 32 lowercase hex characters."""
        digest = compute_digest(io.BytesIO(b"\xff" * 4096))
        assert len(digest) == DIGEST_LENGTH
        assert re.fullmatch(r"[0-9a-f]+", digest)

    def test_consumes_stream(self):
        """Test the stream is read to the end."""
        stream = io.BytesIO(b"x" * 3000)
        compute_digest(stream)
        assert stream.read() == b""

    def test_read_error_propagates(self):
        """Test a failing read aborts with OSError."""
        with pytest.raises(OSError):
            compute_digest(FailingStream(b"partial"))


class TestComputeFileDigest:
    """Tests for compute_file_digest."""

    def test_file_digest(self, sample_file: Path):
        """Test hashing a file on disk."""
        assert compute_file_digest(sample_file) == HELLO_WORLD_MD5

    def test_accepts_string_path(self, sample_file: Path):
        """Test a str path works too."""
        assert compute_file_digest(str(sample_file)) == HELLO_WORLD_MD5

    def test_missing_file(self, tmp_path: Path):
        """Test missing file raises."""
        with pytest.raises(FileNotFoundError):
            compute_file_digest(tmp_path / "missing.bin")


class TestFormatLine:
    """Tests for checksum line formatting."""

    def test_text_mode(self):
        """Test text mode uses a space."""
        assert format_line(HELLO_WORLD_MD5, "hello.txt") == f"{HELLO_WORLD_MD5} hello.txt"

    def test_binary_mode(self):
        """Test binary mode uses an asterisk."""
        line = format_line(HELLO_WORLD_MD5, Path("dir/hello.txt"), binary=True)
        assert line == f"{HELLO_WORLD_MD5}*dir/hello.txt"
