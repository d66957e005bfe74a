"""Package metadata: the JSON sidecar written next to every built package.

The sidecar for a package always lives at ``<package_path>.metadata.json``.
Metadata is generated once from the package, the project that built it,
and the host's platform facts; it is never updated in place. Changing a
record means generating and saving a new one.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pkgmeta.config import config
from pkgmeta.core.host_facts import HostFacts, detect_host_facts
from pkgmeta.core.package import NoPackageFile, Package
from pkgmeta.core.platform_version import truncate_platform_version
from pkgmeta.models.metadata import MetadataRecord
from pkgmeta.models.project import ProjectDescriptor

logger = logging.getLogger(__name__)

METADATA_SUFFIX = ".metadata.json"


class NoPackageMetadataFile(RuntimeError):
    """Raised when the metadata sidecar for a package is missing or unreadable."""

    def __init__(self, path: Path | str) -> None:
        self.path = str(path)
        super().__init__(f"Could not find or read the metadata file for package {self.path!r}")


class CorruptMetadataFile(RuntimeError):
    """Raised when a metadata sidecar exists but does not decode to a JSON object."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Corrupt metadata file {self.path!r}: {reason}")


# ----------------------------------------------------------------------
# Host-derived fields
# ----------------------------------------------------------------------


def arch(host: HostFacts) -> str:
    """The architecture recorded for packages built on *host*."""
    if host.is_windows and host.is_32bit_windows:
        return "i386"
    if host.is_solaris:
        if host.is_intel_cpu:
            return "i386"
        if host.is_sparc_cpu:
            return "sparc"
    return host.kernel_machine


def platform_shortname(host: HostFacts) -> str:
    """The platform name recorded for packages built on *host*."""
    if host.is_rhel_family:
        return "el"
    if host.is_suse_family:
        return "sles"
    return host.platform


def platform_version(host: HostFacts) -> str:
    """The truncated platform version recorded for packages built on *host*."""
    return truncate_platform_version(host.platform_version, platform_shortname(host))


# ----------------------------------------------------------------------
# Metadata
# ----------------------------------------------------------------------


class PackageMetadata:
    """Read-only metadata for one package.

    Parameters
    ----------
    package:
        The package this metadata describes.
    record:
        The record itself, or a mapping of its fields.
    """

    def __init__(
        self, package: Package, record: MetadataRecord | dict[str, Any] | None = None
    ) -> None:
        self._package = package
        if isinstance(record, MetadataRecord):
            self._record = record
        else:
            self._record = MetadataRecord.model_validate(record or {})

    def __repr__(self) -> str:
        return f"PackageMetadata({self._package!r})"

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @classmethod
    def generate(
        cls,
        path: Path | str,
        project: ProjectDescriptor,
        host_facts: HostFacts | None = None,
    ) -> Path:
        """Render and save the metadata for the package at *path*.

        Returns the path of the metadata file on disk.

        Raises NoPackageFile if *path* is not an existing file; nothing is
        written in that case.
        """
        package = Package(path)
        if not package.exists():
            raise NoPackageFile(path)

        host = host_facts or detect_host_facts()

        record = MetadataRecord(
            # Package
            basename=package.name,
            md5=package.md5,
            sha1=package.sha1,
            sha256=package.sha256,
            sha512=package.sha512,
            platform=platform_shortname(host),
            platform_version=platform_version(host),
            arch=arch(host),
            # Project
            name=project.name,
            friendly_name=project.friendly_name,
            homepage=project.homepage,
            version=project.build_version,
            iteration=project.build_iteration,
            license=project.license,
            version_manifest=project.built_manifest.to_mapping(),
            license_content=_read_license(project.license_file_path),
        )

        instance = cls(package, record)
        instance.save()
        return instance.path

    @classmethod
    def for_package(cls, package: Package) -> PackageMetadata:
        """Load the metadata saved for *package*.

        The platform version is truncated again in case the record was
        written before the current truncation rules, and a missing
        iteration defaults to 1. Every other value is kept as stored.
        """
        path = cls.path_for(package)
        try:
            with open(path, encoding="utf-8") as f:
                text = f.read()
        except OSError as exc:
            raise NoPackageMetadataFile(package.path) from exc
        except UnicodeDecodeError as exc:
            raise CorruptMetadataFile(path, f"not UTF-8: {exc}") from exc

        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise CorruptMetadataFile(path, f"invalid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise CorruptMetadataFile(path, "top level is not a JSON object")

        platform = data.get("platform")
        version = data.get("platform_version")
        if isinstance(platform, str) and isinstance(version, str):
            data["platform_version"] = truncate_platform_version(version, platform)

        if data.get("iteration") is None:
            data["iteration"] = 1

        record = MetadataRecord.model_validate(data)

        logger.debug("Loaded metadata for %s from %s", package.path, path)
        return cls(package, record)

    @staticmethod
    def path_for(package: Package) -> Path:
        """The metadata path that corresponds to *package*."""
        return Path(f"{package.path}{METADATA_SUFFIX}")

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def package(self) -> Package:
        return self._package

    @property
    def record(self) -> MetadataRecord:
        return self._record

    @property
    def path(self) -> Path:
        return self.path_for(self._package)

    @property
    def name(self) -> str:
        """The file name of the metadata sidecar."""
        return self.path.name

    def get(self, key: str) -> Any:
        """Return the value stored under *key*, or None if it is absent."""
        return self._record.value(key)

    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    def to_mapping(self) -> dict[str, Any]:
        """A copy of every field in the record."""
        return self._record.to_mapping()

    def to_json(self) -> str:
        """Pretty-printed JSON, fields in record order."""
        return json.dumps(
            self._record.to_mapping(), indent=2, ensure_ascii=False
        )

    def save(self) -> bool:
        """Write the metadata to disk. Saving twice writes identical bytes."""
        with open(self.path, "w", encoding="utf-8", newline="") as f:
            f.write(self.to_json())
        logger.info("Wrote metadata for %s to %s", self._package.path, self.path)
        return True


def _read_license(path: Path) -> str:
    """License text at *path*, or an empty string when there is no file."""
    if not path.is_file():
        logger.debug("No license file at %s; recording empty license content.", path)
        return ""
    with open(path, encoding=config.license_encoding, newline="") as f:
        return f.read()
