"""
Tests for mpm binary helpers — architecture check via lipo, mismatch
detection and the execute bits.
"""

import os
import stat
import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from mpm_wizard.core.errors import ArchitectureCheckError
from mpm_wizard.core.models.platform import Platform
from mpm_wizard.core.services.mpm_binary import (
    inspect_architecture,
    is_mismatched,
    make_executable,
)


def _lipo(stdout: str) -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(["lipo", "-info", "mpm"], 0, stdout=stdout, stderr="")


class TestInspectArchitecture:
    @patch("mpm_wizard.core.services.mpm_binary.subprocess.run")
    def test_arm64(self, mock_run):
        mock_run.return_value = _lipo("Non-fat file: mpm is architecture: arm64\n")
        assert inspect_architecture(Path("mpm")) == "arm64"
        mock_run.assert_called_once_with(
            ["lipo", "-info", "mpm"], capture_output=True, text=True, check=True,
        )

    @patch("mpm_wizard.core.services.mpm_binary.subprocess.run")
    def test_x86_64(self, mock_run):
        mock_run.return_value = _lipo("Non-fat file: mpm is architecture: x86_64\n")
        assert inspect_architecture(Path("mpm")) == "x86_64"

    @patch("mpm_wizard.core.services.mpm_binary.subprocess.run")
    def test_universal_reports_arm64(self, mock_run):
        mock_run.return_value = _lipo(
            "Architectures in the fat file: mpm are: x86_64 arm64\n"
        )
        assert inspect_architecture(Path("mpm")) == "arm64"

    @patch("mpm_wizard.core.services.mpm_binary.subprocess.run")
    def test_unknown_arch(self, mock_run):
        mock_run.return_value = _lipo("Non-fat file: mpm is architecture: ppc\n")
        with pytest.raises(ArchitectureCheckError, match="unrecognized"):
            inspect_architecture(Path("mpm"))

    @patch("mpm_wizard.core.services.mpm_binary.subprocess.run")
    def test_lipo_missing(self, mock_run):
        mock_run.side_effect = FileNotFoundError("lipo")
        with pytest.raises(ArchitectureCheckError):
            inspect_architecture(Path("mpm"))

    @patch("mpm_wizard.core.services.mpm_binary.subprocess.run")
    def test_lipo_fails(self, mock_run):
        mock_run.side_effect = subprocess.CalledProcessError(1, ["lipo"])
        with pytest.raises(ArchitectureCheckError):
            inspect_architecture(Path("mpm"))


class TestIsMismatched:
    def test_matching(self):
        assert not is_mismatched("arm64", Platform.MACOS_ARM)
        assert not is_mismatched("x86_64", Platform.MACOS_X64)

    def test_mismatching(self):
        assert is_mismatched("arm64", Platform.MACOS_X64)
        assert is_mismatched("x86_64", Platform.MACOS_ARM)


@pytest.fixture
def umask():
    """Run the test under a given process umask, restored afterwards."""
    previous = os.umask(0o022)
    yield os.umask
    os.umask(previous)


class TestMakeExecutable:
    def test_adds_execute_bits(self, tmp_path: Path, umask):
        mpm = tmp_path / "mpm"
        mpm.write_bytes(b"")
        mpm.chmod(0o644)
        make_executable(mpm)
        mode = mpm.stat().st_mode
        assert mode & stat.S_IXUSR
        assert mode & stat.S_IXGRP
        assert mode & stat.S_IXOTH
        assert mode & stat.S_IRUSR

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(OSError):
            make_executable(tmp_path / "mpm")

    def test_respects_umask(self, tmp_path: Path, umask):
        umask(0o027)
        mpm = tmp_path / "mpm"
        mpm.write_bytes(b"")
        mpm.chmod(0o644)
        make_executable(mpm)
        mode = mpm.stat().st_mode
        assert mode & stat.S_IXUSR
        assert mode & stat.S_IXGRP
        assert not mode & stat.S_IXOTH
