"""Shared test fixtures for pkgmeta."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from pkgmeta.core.host_facts import HostFacts
from pkgmeta.core.package import Package
from pkgmeta.models.project import ManifestEntry, ProjectDescriptor, VersionManifest

PACKAGE_BYTES = b"not really a deb, but checksums do not care\n"
LICENSE_TEXT = "Apache License\nVersion 2.0, January 2004\n"


@pytest.fixture
def package_bytes() -> bytes:
    return PACKAGE_BYTES


@pytest.fixture
def license_text() -> str:
    return LICENSE_TEXT


@pytest.fixture
def tmp_dir(tmp_path: Path) -> Path:
    """Provide a temporary directory for test artifacts."""
    return tmp_path


@pytest.fixture
def package_path(tmp_dir: Path) -> Path:
    """Provide a package file on disk with known content."""
    path = tmp_dir / "pkg" / "chef_12.0.0-1_amd64.deb"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(PACKAGE_BYTES)
    return path


@pytest.fixture
def package(package_path: Path) -> Package:
    return Package(package_path)


@pytest.fixture
def version_manifest() -> VersionManifest:
    return VersionManifest(
        build_version="12.0.0",
        build_git_revision="2e5f8b7a",
        license="Apache-2.0",
        software={
            "zlib": ManifestEntry(
                locked_version="1.2.11",
                locked_source={"url": "https://zlib.net/zlib-1.2.11.tar.gz"},
                source_type="url",
                described_version="1.2.11",
                license="Zlib",
            ),
            "openssl": ManifestEntry(
                locked_version="1.0.2k",
                source_type="url",
                described_version="1.0.2k",
                license="OpenSSL",
            ),
        },
    )


@pytest.fixture
def make_project(
    tmp_dir: Path, version_manifest: VersionManifest
) -> Callable[..., ProjectDescriptor]:
    """Factory fixture: build a ProjectDescriptor with a license file on disk."""

    def _factory(license_text: str | None = LICENSE_TEXT, **overrides: Any) -> ProjectDescriptor:
        project_dir = tmp_dir / "project"
        project_dir.mkdir(parents=True, exist_ok=True)
        if license_text is not None:
            with open(project_dir / "LICENSE", "w", encoding="utf-8", newline="") as f:
                f.write(license_text)
        defaults: dict[str, Any] = {
            "name": "chef",
            "friendly_name": "Chef Client",
            "homepage": "https://www.chef.io",
            "build_version": "12.0.0",
            "build_iteration": 1,
            "license": "Apache-2.0",
            "project_dir": project_dir,
            "built_manifest": version_manifest,
        }
        defaults.update(overrides)
        return ProjectDescriptor(**defaults)

    return _factory


@pytest.fixture
def project(make_project: Callable[..., ProjectDescriptor]) -> ProjectDescriptor:
    """Convenience: a ready-made ProjectDescriptor with a license file."""
    return make_project()


@pytest.fixture
def make_host_facts() -> Callable[..., HostFacts]:
    """Factory fixture: build HostFacts, defaulting to a 64-bit Ubuntu host."""

    def _factory(**overrides: Any) -> HostFacts:
        defaults: dict[str, Any] = {
            "platform": "ubuntu",
            "platform_version": "12.04.5",
            "platform_family": "debian",
            "kernel_machine": "x86_64",
        }
        defaults.update(overrides)
        return HostFacts(**defaults)

    return _factory


@pytest.fixture
def ubuntu_host(make_host_facts: Callable[..., HostFacts]) -> HostFacts:
    return make_host_facts()
