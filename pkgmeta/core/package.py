"""A built package on disk and its checksums."""

from __future__ import annotations

import logging
from pathlib import Path

from pkgmeta.core.hasher import file_digests

logger = logging.getLogger(__name__)


class NoPackageFile(RuntimeError):
    """Raised when a package path does not reference an existing file."""

    def __init__(self, path: Path | str) -> None:
        self.path = str(path)
        super().__init__(f"Could not locate or access the package at {self.path!r}")


class Package:
    """A package (or compressed object) at a filesystem path.

    Checksums are computed over the file content on first access and
    cached for the lifetime of the object.

    Parameters
    ----------
    path:
        Path to the package file.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)
        self._digests: dict[str, str] | None = None

    def __repr__(self) -> str:
        return f"Package({str(self._path)!r})"

    @property
    def path(self) -> str:
        return str(self._path)

    @property
    def name(self) -> str:
        """The basename of the package file."""
        return self._path.name

    def exists(self) -> bool:
        return self._path.is_file()

    def validate(self) -> None:
        """Raise NoPackageFile unless the package file exists."""
        if not self.exists():
            raise NoPackageFile(self._path)

    # ------------------------------------------------------------------
    # Checksums
    # ------------------------------------------------------------------

    def _digest(self, algorithm: str) -> str:
        if self._digests is None:
            self.validate()
            logger.debug("Computing checksums for %s", self._path)
            self._digests = file_digests(self._path)
        return self._digests[algorithm]

    @property
    def md5(self) -> str:
        return self._digest("md5")

    @property
    def sha1(self) -> str:
        return self._digest("sha1")

    @property
    def sha256(self) -> str:
        return self._digest("sha256")

    @property
    def sha512(self) -> str:
        return self._digest("sha512")
