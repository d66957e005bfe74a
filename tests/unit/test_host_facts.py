"""Tests for HostFacts: predicates and detection from the interpreter."""

from __future__ import annotations

import platform
from collections.abc import Callable

import pytest
from pydantic import ValidationError

from pkgmeta.core.host_facts import HostFacts, detect_host_facts


class TestPredicates:
    def test_linux_host(self, ubuntu_host: HostFacts):
        assert ubuntu_host.is_windows is False
        assert ubuntu_host.is_solaris is False
        assert ubuntu_host.is_intel_cpu is True
        assert ubuntu_host.is_sparc_cpu is False
        assert ubuntu_host.is_rhel_family is False
        assert ubuntu_host.is_suse_family is False

    def test_32bit_windows(self, make_host_facts: Callable[..., HostFacts]):
        host = make_host_facts(platform="windows", platform_family="windows", kernel_machine="x86")
        assert host.is_windows is True
        assert host.is_32bit_windows is True

    def test_64bit_windows(self, make_host_facts: Callable[..., HostFacts]):
        host = make_host_facts(platform="windows", platform_family="windows", kernel_machine="amd64")
        assert host.is_32bit_windows is False

    def test_32bit_linux_is_not_32bit_windows(self, make_host_facts: Callable[..., HostFacts]):
        assert make_host_facts(kernel_machine="i686").is_32bit_windows is False

    @pytest.mark.parametrize("machine", ["sun4u", "sun4v", "sparc"])
    def test_sparc(self, make_host_facts: Callable[..., HostFacts], machine: str):
        host = make_host_facts(platform="solaris2", platform_family="solaris2", kernel_machine=machine)
        assert host.is_solaris is True
        assert host.is_sparc_cpu is True
        assert host.is_intel_cpu is False

    def test_families(self, make_host_facts: Callable[..., HostFacts]):
        assert make_host_facts(platform="centos", platform_family="rhel").is_rhel_family
        assert make_host_facts(platform="sles", platform_family="suse").is_suse_family

    def test_frozen(self, ubuntu_host: HostFacts):
        with pytest.raises(ValidationError):
            ubuntu_host.platform = "debian"  # type: ignore[misc]


class TestDetect:
    @pytest.fixture
    def fake_system(self, monkeypatch: pytest.MonkeyPatch) -> Callable[..., None]:
        def _set(system: str, machine: str = "x86_64", **funcs: object) -> None:
            monkeypatch.setattr(platform, "system", lambda: system)
            monkeypatch.setattr(platform, "machine", lambda: machine)
            for name, value in funcs.items():
                monkeypatch.setattr(platform, name, lambda value=value: value)

        return _set

    def test_linux_ubuntu(self, fake_system: Callable[..., None]):
        fake_system(
            "Linux",
            freedesktop_os_release={"ID": "ubuntu", "ID_LIKE": "debian", "VERSION_ID": "22.04"},
        )
        facts = detect_host_facts()
        assert facts == HostFacts(
            platform="ubuntu",
            platform_version="22.04",
            platform_family="debian",
            kernel_machine="x86_64",
        )

    def test_linux_rhel_clone(self, fake_system: Callable[..., None]):
        fake_system(
            "Linux",
            freedesktop_os_release={
                "ID": "rocky", "ID_LIKE": "rhel centos fedora", "VERSION_ID": "9.3",
            },
        )
        facts = detect_host_facts()
        assert facts.platform == "rocky"
        assert facts.is_rhel_family is True

    def test_linux_fedora_is_not_rhel(self, fake_system: Callable[..., None]):
        fake_system("Linux", freedesktop_os_release={"ID": "fedora", "VERSION_ID": "39"})
        assert detect_host_facts().is_rhel_family is False

    def test_linux_amazon_alias(self, fake_system: Callable[..., None]):
        fake_system(
            "Linux",
            freedesktop_os_release={
                "ID": "amzn", "ID_LIKE": "centos rhel fedora", "VERSION_ID": "2023",
            },
        )
        facts = detect_host_facts()
        assert facts.platform == "amazon"
        assert facts.is_rhel_family is False

    def test_linux_opensuse_leap(self, fake_system: Callable[..., None]):
        fake_system(
            "Linux",
            machine="aarch64",
            freedesktop_os_release={
                "ID": "opensuse-leap", "ID_LIKE": "suse opensuse", "VERSION_ID": "15.5",
            },
        )
        facts = detect_host_facts()
        assert facts.platform == "opensuseleap"
        assert facts.is_suse_family is True
        assert facts.kernel_machine == "aarch64"

    def test_linux_without_os_release(
        self, fake_system: Callable[..., None], monkeypatch: pytest.MonkeyPatch
    ):
        fake_system("Linux", release="6.1.0")

        def _missing() -> dict[str, str]:
            raise OSError("no os-release")

        monkeypatch.setattr(platform, "freedesktop_os_release", _missing)
        facts = detect_host_facts()
        assert facts.platform == "linux"
        assert facts.platform_version == "6.1.0"

    def test_windows(self, fake_system: Callable[..., None]):
        fake_system("Windows", machine="AMD64", version="10.0.19045")
        facts = detect_host_facts()
        assert facts.platform == "windows"
        assert facts.platform_version == "10.0.19045"
        assert facts.kernel_machine == "amd64"
        assert facts.is_32bit_windows is False

    def test_mac(self, fake_system: Callable[..., None]):
        fake_system("Darwin", machine="arm64", mac_ver=("14.2.1", ("", "", ""), "arm64"))
        facts = detect_host_facts()
        assert facts.platform == "mac_os_x"
        assert facts.platform_version == "14.2.1"

    def test_solaris(self, fake_system: Callable[..., None]):
        fake_system("SunOS", machine="i86pc", release="5.11")
        facts = detect_host_facts()
        assert facts.platform == "solaris2"
        assert facts.is_solaris and facts.is_intel_cpu

    def test_other_unix(self, fake_system: Callable[..., None]):
        fake_system("FreeBSD", machine="amd64", release="13.2-RELEASE")
        facts = detect_host_facts()
        assert facts.platform == "freebsd"
        assert facts.platform_version == "13.2-RELEASE"
