"""Streaming MD5 digests and checksum line formatting."""

import hashlib
from pathlib import Path
from typing import BinaryIO

CHUNK_SIZE = 1024


def compute_digest(source: BinaryIO, chunk_size: int = CHUNK_SIZE) -> str:
    """Compute MD5 digest of a byte stream in fixed-size chunks.

    The stream is consumed once, front to back, through a single reusable
    buffer, so memory use does not depend on input size.

    Args:
        source: Readable binary stream (open file, stdin buffer, BytesIO).
        chunk_size: Size of the read buffer.

    Returns:
        Lowercase hexadecimal digest (32 characters).

    Raises:
        OSError: If the stream can't be read.
    """
    hash_obj = hashlib.md5()
    buffer = bytearray(chunk_size)
    view = memoryview(buffer)

    while True:
        count = source.readinto(buffer)
        if not count:
            break
        hash_obj.update(view[:count])

    return hash_obj.hexdigest()


def compute_file_digest(path: Path | str, chunk_size: int = CHUNK_SIZE) -> str:
    """Compute MD5 digest of a file.

    Args:
        path: Path to file.
        chunk_size: Size of the read buffer.

    Returns:
        Lowercase hexadecimal digest.

    Raises:
        FileNotFoundError: If file doesn't exist.
        OSError: If file can't be opened or read.
    """
    with open(path, "rb") as f:
        return compute_digest(f, chunk_size)


def format_line(digest: str, path: Path | str, binary: bool = False) -> str:
    """Render a checksum line: digest, mode character, path.

    Args:
        digest: Hex digest.
        path: Path as given by the user.
        binary: Use "*" as the mode character instead of a space.

    Returns:
        Checksum line without trailing newline.
    """
    mode = "*" if binary else " "
    return f"{digest}{mode}{path}"
