"""File digest helpers for package checksums.

Digests are streamed in fixed-size chunks so large packages never need
to be held in memory.
"""

from __future__ import annotations

import hashlib
from pathlib import Path

from pkgmeta.config import config

SUPPORTED_ALGORITHMS: tuple[str, ...] = ("md5", "sha1", "sha256", "sha512")


def file_digests(path: Path | str, *, chunk_size: int | None = None) -> dict[str, str]:
    """Compute every supported digest in a single pass over the file."""
    size = chunk_size or config.hash_chunk_size
    digests = {name: hashlib.new(name) for name in SUPPORTED_ALGORITHMS}
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(size), b""):
            for digest in digests.values():
                digest.update(chunk)
    return {name: digest.hexdigest() for name, digest in digests.items()}
