"""
Shared test fixtures and configuration.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable

import pytest

from mpm_wizard.core.models.platform import Platform
from mpm_wizard.core.models.session import Session
from mpm_wizard.core.services.license import install_license_file
from mpm_wizard.core.services.platform_detect import HostInfo
from mpm_wizard.core.wizard.services import WizardServices
from mpm_wizard.core.wizard.states import Message


class ScriptedPrompter:
    """Prompter that replays canned answers and records everything shown."""

    def __init__(self, answers: list[str]) -> None:
        self.answers = list(answers)
        self.questions: list[str] = []
        self.messages: list[Message] = []

    def ask(self, question: str) -> str:
        self.questions.append(question)
        if not self.answers:
            raise AssertionError(f"Unexpected question: {question}")
        return self.answers.pop(0)

    def show(self, message: Message) -> None:
        self.messages.append(message)

    @property
    def texts(self) -> list[str]:
        return [m.text for m in self.messages]


def make_services(**overrides) -> WizardServices:
    """A Linux/x64 services bundle with harmless fakes for every side effect.

    The filesystem helpers are real (tests point them at ``tmp_path``);
    download writes a stub file, mpm and license copies are recorded.
    """
    calls: dict[str, list] = {"run_mpm": [], "download": []}

    def _download(url: str, dest: Path) -> int:
        calls["download"].append((url, dest))
        Path(dest).write_bytes(b"#!/bin/sh\n")
        return 10

    def _run_mpm(cmd) -> None:
        calls["run_mpm"].append(list(cmd))

    defaults = dict(
        detect_host=lambda: HostInfo(system="linux", arch="amd64"),
        has_admin_rights=lambda: True,
        stat=os.stat,
        make_dirs=lambda path: os.makedirs(path, exist_ok=True),
        download=_download,
        inspect_architecture=lambda path: "x86_64",
        make_executable=lambda path: None,
        run_mpm=_run_mpm,
        install_license=install_license_file,
    )
    defaults.update(overrides)
    services = WizardServices(**defaults)
    services.calls = calls  # type: ignore[attr-defined]
    return services


@pytest.fixture
def services_factory() -> Callable[..., WizardServices]:
    """Build a fake services bundle; keyword arguments replace single services."""
    return make_services


@pytest.fixture
def linux_session() -> Session:
    """A session that has already passed platform detection on Linux."""
    session = Session()
    session.set_platform(Platform.LINUX)
    session.default_download_dir = "/tmp"
    return session


@pytest.fixture
def prompter_factory() -> Callable[[list[str]], ScriptedPrompter]:
    return ScriptedPrompter
