"""Host facts: platform identity of the machine building a package.

HostFacts is a plain, frozen value passed into metadata generation, so
architecture and platform resolution can be exercised with fixture values.
``detect_host_facts()`` fills one in from the running interpreter.
"""

from __future__ import annotations

import logging
import platform as _platform

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

_INTEL_MACHINES = frozenset({"i86pc", "i386", "i486", "i586", "i686", "x86", "x86_64", "amd64"})
_SPARC_MACHINES = frozenset({"sun4u", "sun4v", "sparc", "sparc64"})
_WINDOWS_32BIT_MACHINES = frozenset({"i386", "i486", "i586", "i686", "x86"})

_RHEL_PLATFORMS = frozenset(
    {"rhel", "redhat", "centos", "oracle", "scientific", "almalinux", "rocky", "cloudlinux"}
)
_SUSE_PLATFORMS = frozenset({"suse", "sles", "sles_sap", "opensuse", "opensuseleap"})

# os-release IDs that differ from the platform names used in metadata
_OS_RELEASE_ALIASES: dict[str, str] = {
    "amzn": "amazon",
    "opensuse-leap": "opensuseleap",
    "opensuse-tumbleweed": "opensuse",
    "sles_sap": "sles",
    "ol": "oracle",
}


class HostFacts(BaseModel):
    """Platform identity as reported by the host."""

    model_config = ConfigDict(frozen=True)

    platform: str  # e.g. "ubuntu", "centos", "windows", "solaris2"
    platform_version: str  # raw, e.g. "22.04", "7.9.2009", "10.0.19045"
    platform_family: str = ""  # e.g. "debian", "rhel", "suse", "windows"
    kernel_machine: str = ""  # e.g. "x86_64", "aarch64", "sun4v"

    @property
    def is_windows(self) -> bool:
        return self.platform == "windows" or self.platform_family == "windows"

    @property
    def is_32bit_windows(self) -> bool:
        return self.is_windows and self.kernel_machine in _WINDOWS_32BIT_MACHINES

    @property
    def is_solaris(self) -> bool:
        return self.platform == "solaris2" or self.platform_family == "solaris2"

    @property
    def is_intel_cpu(self) -> bool:
        return self.kernel_machine in _INTEL_MACHINES

    @property
    def is_sparc_cpu(self) -> bool:
        return self.kernel_machine in _SPARC_MACHINES

    @property
    def is_rhel_family(self) -> bool:
        return self.platform_family == "rhel"

    @property
    def is_suse_family(self) -> bool:
        return self.platform_family == "suse"


def _linux_facts() -> tuple[str, str, str]:
    """Return (platform, version, family) from /etc/os-release."""
    try:
        release = _platform.freedesktop_os_release()
    except OSError:
        logger.debug("No os-release file found; reporting generic linux.")
        return "linux", _platform.release(), "linux"

    os_id = release.get("ID", "linux").lower()
    platform = _OS_RELEASE_ALIASES.get(os_id, os_id)
    version = release.get("VERSION_ID", "")
    id_like = release.get("ID_LIKE", "").lower().split()

    if platform in _RHEL_PLATFORMS or ("rhel" in id_like and platform not in ("fedora", "amazon")):
        family = "rhel"
    elif platform in _SUSE_PLATFORMS or "suse" in id_like:
        family = "suse"
    elif platform == "debian" or "debian" in id_like:
        family = "debian"
    else:
        family = platform
    return platform, version, family


def detect_host_facts() -> HostFacts:
    """Build HostFacts for the machine running this interpreter."""
    system = _platform.system()
    machine = _platform.machine().lower()

    if system == "Linux":
        platform, version, family = _linux_facts()
    elif system == "Darwin":
        platform, version, family = "mac_os_x", _platform.mac_ver()[0], "mac_os_x"
    elif system == "Windows":
        platform, version, family = "windows", _platform.version(), "windows"
    elif system == "SunOS":
        platform, version, family = "solaris2", _platform.release(), "solaris2"
    elif system == "AIX":
        version = f"{_platform.version()}.{_platform.release()}"
        platform, family = "aix", "aix"
    else:
        platform = family = system.lower()
        version = _platform.release()

    facts = HostFacts(
        platform=platform,
        platform_version=version,
        platform_family=family,
        kernel_machine=machine,
    )
    logger.debug(
        "Detected host facts: platform=%s version=%s family=%s machine=%s",
        facts.platform,
        facts.platform_version,
        facts.platform_family,
        facts.kernel_machine,
    )
    return facts
