"""Platform version truncation: raw host versions to marketing versions.

Most platforms only care about a prefix of the full MAJOR.MINOR.PATCH
version reported by the host (Debian 7, Ubuntu 12.04). Rolling releases
have no meaningful version at all, and Windows reports internal build
numbers that have to be mapped to their marketing names.

Families are evaluated as an ordered table; the first family listing the
platform wins. Platforms matched by no family raise UnknownPlatform.
Every rule is idempotent: truncating an already-truncated version returns
it unchanged, so stored records can be re-normalized safely.
"""

from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict


class UnknownPlatform(RuntimeError):
    """Raised when a platform belongs to no known version family."""

    def __init__(self, platform: str) -> None:
        self.platform = platform
        super().__init__(f"Unknown platform {platform!r}")


class UnknownPlatformVersion(RuntimeError):
    """Raised when a known platform reports an unrecognised version."""

    def __init__(self, platform: str, version: str) -> None:
        self.platform = platform
        self.version = version
        super().__init__(f"Unknown platform version {version!r} for {platform!r}")


class VersionStrategy(str, Enum):
    """How a family reduces a raw platform version."""

    MAJOR = "major"
    MAJOR_MINOR = "major_minor"
    ROLLING = "rolling"
    WINDOWS = "windows"


class PlatformFamily(BaseModel):
    """A group of platform identifiers sharing one truncation rule."""

    model_config = ConfigDict(frozen=True)

    name: str
    platforms: tuple[str, ...]
    strategy: VersionStrategy


class WindowsRelease(BaseModel):
    """One Windows marketing release and the version strings that map to it.

    Both the internal build string and the marketing name itself are
    accepted, which keeps the mapping idempotent.
    """

    model_config = ConfigDict(frozen=True)

    marketing: str
    versions: tuple[str, ...] = ()
    pattern: str | None = None  # matched from the start of the version
    unreachable: bool = False  # build string shadowed by an earlier release

    def matches(self, version: str) -> bool:
        if version in self.versions:
            return True
        return self.pattern is not None and re.match(self.pattern, version) is not None


# Ordered: first family listing the platform wins.
PLATFORM_FAMILIES: list[PlatformFamily] = [
    # Only MAJOR (e.g. Debian 7, OmniOS r151006, SmartOS 20120809T221258Z)
    PlatformFamily(
        name="major",
        platforms=(
            "centos", "debian", "el", "fedora", "freebsd", "omnios",
            "pidora", "raspbian", "rhel", "sles", "suse", "smartos",
        ),
        strategy=VersionStrategy.MAJOR,
    ),
    # Only MAJOR.MINOR (e.g. Mac OS X 10.9, Ubuntu 12.04)
    PlatformFamily(
        name="major_minor",
        platforms=(
            "aix", "alpine", "mac_os_x", "openbsd", "slackware",
            "solaris2", "opensuse", "opensuseleap", "ubuntu", "amazon",
        ),
        strategy=VersionStrategy.MAJOR_MINOR,
    ),
    # No platform_version at all (lsb_release -r reports "rolling")
    PlatformFamily(
        name="rolling",
        platforms=("arch", "gentoo", "kali"),
        strategy=VersionStrategy.ROLLING,
    ),
    PlatformFamily(
        name="windows",
        platforms=("windows",),
        strategy=VersionStrategy.WINDOWS,
    ),
]

# Windows internal versions do not match their marketing names. Telling
# every release apart takes more than the platform version (a workstation
# and a server share the same build); this mapping resolves shared builds
# to the server release.
#
#   http://www.jrsoftware.org/ishelp/index.php?topic=winvernotes
#   https://msdn.microsoft.com/en-us/library/windows/desktop/ms724832(v=vs.85).aspx
WINDOWS_RELEASES: list[WindowsRelease] = [
    WindowsRelease(marketing="2000", versions=("5.0.2195", "2000")),
    WindowsRelease(marketing="xp", versions=("5.1.2600", "xp")),
    WindowsRelease(marketing="2003r2", versions=("5.2.3790", "2003r2")),
    WindowsRelease(marketing="2008", versions=("6.0.6001", "2008")),
    WindowsRelease(marketing="7", versions=("6.1.7600", "7")),
    WindowsRelease(marketing="2008r2", versions=("6.1.7601", "2008r2")),
    WindowsRelease(marketing="2012", versions=("6.2.9200", "2012")),
    # Windows 8 shares build 6.2.9200 with 2012, so only the literal "8"
    # reaches it. Kept to document the collision.
    WindowsRelease(marketing="8", versions=("6.2.9200", "8"), unreachable=True),
    WindowsRelease(marketing="2012r2", versions=("2012r2",), pattern=r"6\.3\.\d+"),
    # Windows 8.1 shares 6.3.x with 2012r2; only the literal "8.1" reaches it.
    WindowsRelease(
        marketing="8.1", versions=("8.1",), pattern=r"6\.3\.\d+", unreachable=True
    ),
    WindowsRelease(marketing="10", versions=("10",), pattern=r"10\.0"),
]


def _validate_tables() -> None:
    """Reject overlapping entries in the classification tables.

    A platform listed by two families would silently resolve to the first;
    a Windows version string claimed by two releases likewise. Overlaps are
    only tolerated on Windows releases flagged ``unreachable``.
    """
    seen: dict[str, str] = {}
    for family in PLATFORM_FAMILIES:
        for platform in family.platforms:
            if platform in seen:
                raise ValueError(
                    f"Platform {platform!r} listed by both {seen[platform]!r} "
                    f"and {family.name!r}"
                )
            seen[platform] = family.name

    claimed: dict[str, str] = {}
    for release in WINDOWS_RELEASES:
        if release.unreachable:
            continue
        for version in release.versions:
            if version in claimed:
                raise ValueError(
                    f"Windows version {version!r} claimed by both "
                    f"{claimed[version]!r} and {release.marketing!r}"
                )
            claimed[version] = release.marketing


_validate_tables()

_FAMILY_BY_PLATFORM: dict[str, PlatformFamily] = {
    platform: family for family in PLATFORM_FAMILIES for platform in family.platforms
}


def platform_family(platform: str) -> PlatformFamily:
    """Return the version family for *platform* or raise UnknownPlatform."""
    try:
        return _FAMILY_BY_PLATFORM[platform]
    except KeyError:
        raise UnknownPlatform(platform) from None


def windows_marketing_version(platform_version: str) -> str:
    """Map a Windows internal or marketing version to its marketing name."""
    for release in WINDOWS_RELEASES:
        if release.matches(platform_version):
            return release.marketing
    raise UnknownPlatformVersion("windows", platform_version)


def truncate_platform_version(platform_version: str, platform: str) -> str:
    """Truncate *platform_version* down to the marketing version for *platform*.

    *platform* is a platform shortname: a host-reported platform such as
    ``ubuntu`` or a family shortname such as ``el``.

    Raises UnknownPlatform when no family lists *platform*, and
    UnknownPlatformVersion when a Windows version matches no release.
    """
    family = platform_family(platform)

    if family.strategy is VersionStrategy.MAJOR:
        return platform_version.split(".")[0]
    if family.strategy is VersionStrategy.MAJOR_MINOR:
        return ".".join(platform_version.split(".")[:2])
    if family.strategy is VersionStrategy.ROLLING:
        return "rolling"
    return windows_marketing_version(platform_version)
