"""
Tests for platform detection — host probing, platform mapping, the
Apple silicon choice and the Windows administrator probe.
"""

from pathlib import Path

import pytest

from mpm_wizard.core.errors import AdminCheckError
from mpm_wizard.core.models.platform import Platform
from mpm_wizard.core.services import platform_detect
from mpm_wizard.core.services.platform_detect import (
    HostInfo,
    detect_host,
    has_admin_rights,
    parse_mac_arch_choice,
    resolve_platform,
)


class TestDetectHost:
    def test_linux_aarch64_is_normalized(self, monkeypatch):
        monkeypatch.setattr(platform_detect.sys, "platform", "linux")
        monkeypatch.setattr(platform_detect._platform, "machine", lambda: "aarch64")
        assert detect_host() == HostInfo(system="linux", arch="arm64")

    def test_darwin_arm64(self, monkeypatch):
        monkeypatch.setattr(platform_detect.sys, "platform", "darwin")
        monkeypatch.setattr(platform_detect._platform, "machine", lambda: "arm64")
        assert detect_host() == HostInfo(system="darwin", arch="arm64")

    def test_windows_amd64(self, monkeypatch):
        monkeypatch.setattr(platform_detect.sys, "platform", "win32")
        monkeypatch.setattr(platform_detect._platform, "machine", lambda: "AMD64")
        assert detect_host() == HostInfo(system="windows", arch="amd64")

    def test_other_system_passes_through(self, monkeypatch):
        monkeypatch.setattr(platform_detect.sys, "platform", "freebsd14")
        monkeypatch.setattr(platform_detect._platform, "machine", lambda: "riscv64")
        assert detect_host() == HostInfo(system="freebsd14", arch="riscv64")


class TestResolvePlatform:
    def test_apple_silicon_needs_choice(self):
        r = resolve_platform(HostInfo("darwin", "arm64"))
        assert r.platform is Platform.MACOS_ARM
        assert r.needs_choice
        assert r.default_download_dir == "/tmp"
        assert not r.needs_admin

    def test_intel_mac(self):
        r = resolve_platform(HostInfo("darwin", "amd64"))
        assert r.platform is Platform.MACOS_X64
        assert not r.needs_choice

    def test_linux(self):
        r = resolve_platform(HostInfo("linux", "amd64"))
        assert r.platform is Platform.LINUX
        assert r.default_download_dir == "/tmp"
        assert not r.needs_admin

    def test_windows_uses_tmp_and_needs_admin(self, monkeypatch):
        monkeypatch.setenv("TMP", r"C:\Users\me\AppData\Local\Temp")
        r = resolve_platform(HostInfo("windows", "amd64"))
        assert r.platform is Platform.WINDOWS
        assert r.default_download_dir == r"C:\Users\me\AppData\Local\Temp"
        assert r.needs_admin

    def test_unrecognized_system(self):
        r = resolve_platform(HostInfo("freebsd14", "amd64"))
        assert r.unrecognized
        assert r.platform is None

    def test_unrecognized_mac_arch(self):
        assert resolve_platform(HostInfo("darwin", "ppc")).unrecognized


class TestParseMacArchChoice:
    @pytest.mark.parametrize("answer", ["intel", "Intel", '"intel"', "idk", '"IDK"', " intel "])
    def test_intel(self, answer):
        assert parse_mac_arch_choice(answer) is Platform.MACOS_X64

    @pytest.mark.parametrize("answer", ["arm", "ARM", '"arm"'])
    def test_arm(self, answer):
        assert parse_mac_arch_choice(answer) is Platform.MACOS_ARM

    @pytest.mark.parametrize("answer", ["", "x86", "apple", "y"])
    def test_invalid(self, answer):
        assert parse_mac_arch_choice(answer) is None


class TestHasAdminRights:
    def test_writable_probe_dir(self, tmp_path: Path):
        assert has_admin_rights(probe_dir=tmp_path) is True
        assert not (tmp_path / "admin_test").exists()

    def test_unwritable_probe_dir(self, tmp_path: Path):
        assert has_admin_rights(probe_dir=tmp_path / "missing") is False

    def test_windir_unset(self, monkeypatch):
        monkeypatch.delenv("WINDIR", raising=False)
        with pytest.raises(AdminCheckError, match="WINDIR"):
            has_admin_rights()

    def test_probe_not_removable(self, tmp_path: Path, monkeypatch):
        def _fail(self, missing_ok=False):
            raise PermissionError("locked")

        monkeypatch.setattr(Path, "unlink", _fail)
        with pytest.raises(AdminCheckError, match="failed to delete"):
            has_admin_rights(probe_dir=tmp_path)
