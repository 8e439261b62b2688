"""
Wizard states and the transition contract.

The wizard is a forward-only state machine. Top-level steps run in
order; the refinement states hang off the step that asks them and only
ever return to that step's own question.

    PLATFORM_DETECT ─┬─────────────────────────┐
                     └─ ARCH_SELECT ───────────┤
    DOWNLOAD_PATH ◄──────────────────────────┘
      ├─ CONFIRM_CREATE_DOWNLOAD_DIR
      └─ CHECK_EXISTING_MPM ─ CONFIRM_OVERWRITE_MPM
           └─ DOWNLOAD_MPM ─ MAKE_EXECUTABLE
    RELEASE_SELECT → PRODUCT_SELECT → INSTALL_PATH → LICENSE_SELECT
    INSTALL → LICENSE_INSTALL → DONE
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal


class State(str, Enum):
    PLATFORM_DETECT = "platform_detect"
    ARCH_SELECT = "arch_select"
    DOWNLOAD_PATH = "download_path"
    CONFIRM_CREATE_DOWNLOAD_DIR = "confirm_create_download_dir"
    CHECK_EXISTING_MPM = "check_existing_mpm"
    CONFIRM_OVERWRITE_MPM = "confirm_overwrite_mpm"
    DOWNLOAD_MPM = "download_mpm"
    MAKE_EXECUTABLE = "make_executable"
    RELEASE_SELECT = "release_select"
    PRODUCT_SELECT = "product_select"
    INSTALL_PATH = "install_path"
    LICENSE_SELECT = "license_select"
    INSTALL = "install"
    LICENSE_INSTALL = "license_install"
    DONE = "done"


# States that run without asking the user anything.
AUTOMATIC_STATES = frozenset({
    State.PLATFORM_DETECT,
    State.CHECK_EXISTING_MPM,
    State.DOWNLOAD_MPM,
    State.MAKE_EXECUTABLE,
    State.INSTALL,
    State.LICENSE_INSTALL,
})


Style = Literal["info", "error", "success"]


@dataclass(frozen=True)
class Message:
    """One line of wizard output."""

    text: str
    style: Style = "info"


def info(text: str) -> Message:
    return Message(text, "info")


def error(text: str) -> Message:
    return Message(text, "error")


def success(text: str) -> Message:
    return Message(text, "success")


@dataclass
class Transition:
    """Outcome of one step: where to go next and what to say.

    ``exit_code`` set means the wizard stops here.
    """

    state: State
    messages: list[Message] = field(default_factory=list)
    exit_code: int | None = None

    @property
    def finished(self) -> bool:
        return self.exit_code is not None

    @classmethod
    def to(cls, state: State, *messages: Message) -> Transition:
        """Advance (or loop back) to ``state``."""
        return cls(state=state, messages=list(messages))

    @classmethod
    def exit(cls, state: State, code: int, *messages: Message) -> Transition:
        """Stop the wizard in ``state`` with ``code``."""
        return cls(state=state, messages=list(messages), exit_code=code)
