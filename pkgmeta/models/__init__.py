"""pkgmeta data models: all Pydantic v2, all frozen (immutable)."""

from pkgmeta.models.metadata import MetadataRecord
from pkgmeta.models.project import (
    LATEST_MANIFEST_FORMAT,
    ManifestEntry,
    ProjectDescriptor,
    ProjectDescriptorError,
    VersionManifest,
)

__all__ = [
    # metadata
    "MetadataRecord",
    # project
    "ProjectDescriptor",
    "ProjectDescriptorError",
    "VersionManifest",
    "ManifestEntry",
    "LATEST_MANIFEST_FORMAT",
]
