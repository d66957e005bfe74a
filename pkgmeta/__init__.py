"""pkgmeta: JSON metadata sidecars for built packages.

Each built package gets a ``<package>.metadata.json`` file recording its
checksums, the platform it was built on and the project that built it.
"""

__version__ = "0.1.0"
__description__ = "Checksum, platform and provenance metadata for built packages"

from pkgmeta.core.metadata import (
    CorruptMetadataFile,
    NoPackageMetadataFile,
    PackageMetadata,
)
from pkgmeta.core.package import NoPackageFile, Package
from pkgmeta.core.platform_version import (
    UnknownPlatform,
    UnknownPlatformVersion,
    truncate_platform_version,
)

__all__ = [
    "PackageMetadata",
    "Package",
    "truncate_platform_version",
    "NoPackageFile",
    "NoPackageMetadataFile",
    "CorruptMetadataFile",
    "UnknownPlatform",
    "UnknownPlatformVersion",
    "__version__",
]
