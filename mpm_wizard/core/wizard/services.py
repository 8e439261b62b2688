"""
WizardServices — every side effect the wizard steps may perform.

Steps never touch the OS directly; they call through this bundle. The
default bundle wires the real service modules; tests pass fakes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import Callable, Sequence, TextIO

from mpm_wizard.core.cancel import CancelToken
from mpm_wizard.core.services import download, installer, mpm_binary, platform_detect
from mpm_wizard.core.services import license as license_files


def _make_dirs(path: str) -> None:
    os.makedirs(path, mode=0o755, exist_ok=True)


@dataclass
class WizardServices:
    detect_host: Callable[[], platform_detect.HostInfo]
    has_admin_rights: Callable[[], bool]
    stat: Callable[[str], os.stat_result]
    make_dirs: Callable[[str], None]
    download: Callable[[str, Path], object]
    inspect_architecture: Callable[[Path], str]
    make_executable: Callable[[Path], None]
    run_mpm: Callable[[Sequence[str]], None]
    install_license: Callable[[str, str], object]

    @classmethod
    def default(
        cls,
        cancel: CancelToken | None = None,
        output: TextIO | None = None,
    ) -> WizardServices:
        """Services backed by the real OS, network and mpm binary."""
        return cls(
            detect_host=platform_detect.detect_host,
            has_admin_rights=platform_detect.has_admin_rights,
            stat=os.stat,
            make_dirs=_make_dirs,
            download=partial(download.download_file, cancel=cancel),
            inspect_architecture=mpm_binary.inspect_architecture,
            make_executable=mpm_binary.make_executable,
            run_mpm=partial(installer.run_mpm, cancel=cancel, output=output),
            install_license=license_files.install_license_file,
        )
