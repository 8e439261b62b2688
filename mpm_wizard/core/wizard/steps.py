"""
Wizard steps — the transition function.

    advance(state, session, answer, services) -> Transition

Interactive states receive the user's raw answer; automatic states
receive ``None``. A step writes its own fields into the session and
returns the next state plus the messages to print. Recoverable
problems loop back to a question; fatal ones carry an exit code.

``question_for`` and ``announcement_for`` give the text printed before
a state runs, so a driver (terminal or test) needs nothing else.
"""

from __future__ import annotations

import logging
import os
from typing import Callable

from mpm_wizard.core.errors import (
    AdminCheckError,
    ArchitectureCheckError,
    DownloadError,
    InstallError,
    LicenseInstallError,
    MpmNotFoundError,
)
from mpm_wizard.core.models.session import Session
from mpm_wizard.core.services import catalog
from mpm_wizard.core.services.installer import build_install_command
from mpm_wizard.core.services.license import check_license_file
from mpm_wizard.core.services.mpm_binary import is_mismatched
from mpm_wizard.core.services.platform_detect import (
    MAC_ARCH_QUESTION,
    parse_mac_arch_choice,
    resolve_platform,
)
from mpm_wizard.core.wizard.services import WizardServices
from mpm_wizard.core.wizard.states import (
    AUTOMATIC_STATES,
    Message,
    State,
    Transition,
    error,
    info,
    success,
)

logger = logging.getLogger(__name__)

EXIT_KEYWORDS = frozenset({"exit", "quit"})
EXIT_MESSAGE = "Exiting from user input."

_YES = frozenset({"y", "yes", "t", "true"})
_NO = frozenset({"n", "no", "f", "false"})


def normalize_answer(raw: str) -> str:
    """Trim the answer and expand ``$VAR`` / ``${VAR}`` references."""
    return os.path.expandvars(raw.strip())


def default_release(session: Session) -> str:
    """Release offered at the prompt: the preferred one if this platform has it."""
    assert session.platform is not None
    valid = catalog.valid_releases(session.platform)
    if session.preferred_release in valid:
        return session.preferred_release
    return valid[-1]


# ═══════════════════════════════════════════════════════════════════
#  Prompt text
# ═══════════════════════════════════════════════════════════════════


def question_for(state: State, session: Session) -> str | None:
    """Question asked in ``state``, or None for automatic states."""
    if state in AUTOMATIC_STATES or state is State.DONE:
        return None

    if state is State.ARCH_SELECT:
        return MAC_ARCH_QUESTION
    if state is State.DOWNLOAD_PATH:
        return (
            "Enter the path to where you would like MPM to download to. "
            f'Press Enter to use "{session.default_download_dir}"'
        )
    if state is State.CONFIRM_CREATE_DOWNLOAD_DIR:
        return (
            f'The directory "{session.pending_dir}" does not exist. '
            "Do you want to create it? (y/n)"
        )
    if state is State.CONFIRM_OVERWRITE_MPM:
        if session.mpm_mismatched:
            return (
                "MPM already exists in this directory and is for a different CPU "
                "architecture than you selected. Would you like to overwrite it?"
            )
        return "MPM already exists in this directory. Would you like to overwrite it?"
    if state is State.RELEASE_SELECT:
        return (
            "Enter which release you would like to install. "
            f"Press Enter to select {default_release(session)}:"
        )
    if state is State.PRODUCT_SELECT:
        return (
            "Enter the products you would like to install. Use the same syntax as "
            "MPM to specify products. Press Enter to install all products."
        )
    if state is State.INSTALL_PATH:
        return (
            "Enter the full path where you would like to install these products. "
            f'Press Enter to install to default path: "{session.default_install_dir()}"'
        )
    if state is State.LICENSE_SELECT:
        return (
            "If you have a license file you'd like to include in your installation, "
            "please provide the full path to the existing license file."
        )
    raise ValueError(f"No question for state {state}")


def announcement_for(state: State, session: Session) -> Message | None:
    """Line printed before a slow automatic step starts."""
    if state is State.DOWNLOAD_MPM:
        return info("Downloading MPM. Please wait.")
    if state is State.INSTALL:
        return info("Loading, please wait.")
    return None


# ═══════════════════════════════════════════════════════════════════
#  Transition function
# ═══════════════════════════════════════════════════════════════════


def advance(
    state: State,
    session: Session,
    answer: str | None,
    services: WizardServices,
) -> Transition:
    """Run one step of the wizard.

    Args:
        state: Current state.
        session: Session to read from and write to.
        answer: Raw user answer for interactive states, None otherwise.
        services: Side-effect bundle.

    Returns:
        The transition to apply.
    """
    if state is State.DONE:
        return Transition.exit(State.DONE, 0)

    if state in AUTOMATIC_STATES:
        handler = _AUTOMATIC[state]
        return handler(session, services)

    text = normalize_answer(answer or "")
    if text.lower() in EXIT_KEYWORDS:
        logger.info("User exit requested in %s", state.value)
        return Transition.exit(state, 0, error(EXIT_MESSAGE))

    return _INTERACTIVE[state](session, text, services)


# ── Platform ────────────────────────────────────────────────────


def _platform_detect(session: Session, services: WizardServices) -> Transition:
    host = services.detect_host()
    resolution = resolve_platform(host)

    if resolution.unrecognized:
        logger.warning("Unsupported host: %s", host)
        return Transition.exit(
            State.PLATFORM_DETECT, 1, error("Your operating system is unrecognized.")
        )

    assert resolution.platform is not None
    session.set_platform(resolution.platform)
    session.default_download_dir = (
        session.preferred_download_dir or resolution.default_download_dir
    )

    if resolution.needs_admin:
        try:
            admin = services.has_admin_rights()
        except AdminCheckError as e:
            return Transition.exit(
                State.PLATFORM_DETECT, 1,
                error(
                    "Error checking for administrator rights. "
                    f"This program must be run as an administrator. {e}"
                ),
            )
        if not admin:
            return Transition.exit(
                State.PLATFORM_DETECT, 1,
                error("Error: This program must be run as an administrator."),
            )

    if resolution.needs_choice:
        return Transition.to(State.ARCH_SELECT)
    return Transition.to(State.DOWNLOAD_PATH)


def _arch_select(session: Session, text: str, services: WizardServices) -> Transition:
    choice = parse_mac_arch_choice(text)
    if choice is None:
        return Transition.to(
            State.ARCH_SELECT, error("Invalid selection. Enter either intel, arm, or idk.")
        )
    session.set_platform(choice)
    return Transition.to(State.DOWNLOAD_PATH)


# ── mpm download ────────────────────────────────────────────────


def _download_path(session: Session, text: str, services: WizardServices) -> Transition:
    session.mpm_mismatched = False

    if not text:
        session.download_dir = session.default_download_dir
        return Transition.to(State.CHECK_EXISTING_MPM)

    try:
        services.stat(text)
    except FileNotFoundError:
        session.pending_dir = text
        return Transition.to(State.CONFIRM_CREATE_DOWNLOAD_DIR)
    except OSError as e:
        return Transition.to(
            State.DOWNLOAD_PATH,
            error(f"Error checking the directory: {e} Please select a different directory."),
        )

    session.download_dir = text
    return Transition.to(State.CHECK_EXISTING_MPM)


def _confirm_create_download_dir(
    session: Session, text: str, services: WizardServices,
) -> Transition:
    if text.lower() not in _YES:
        return Transition.to(
            State.DOWNLOAD_PATH,
            error("Directory creation skipped. Please select a different directory."),
        )

    try:
        services.make_dirs(session.pending_dir)
    except OSError as e:
        return Transition.to(
            State.DOWNLOAD_PATH,
            error(f"Failed to create the directory: {e} Please select a different directory."),
        )

    session.download_dir = session.pending_dir
    session.pending_dir = ""
    return Transition.to(State.CHECK_EXISTING_MPM, info("Directory created successfully."))


def _check_existing_mpm(session: Session, services: WizardServices) -> Transition:
    try:
        services.stat(str(session.mpm_path))
    except OSError:
        return Transition.to(State.DOWNLOAD_MPM)

    assert session.platform is not None
    if not session.platform.is_macos:
        return Transition.to(State.CONFIRM_OVERWRITE_MPM)

    checking = info(
        "An existing copy of MPM has been detected. "
        "Checking which version you downloaded, please wait."
    )
    try:
        arch = services.inspect_architecture(session.mpm_path)
    except ArchitectureCheckError as e:
        return Transition.exit(
            State.CHECK_EXISTING_MPM, 1, checking,
            error(
                f"Error checking MPM's file architecture: {e}. Please move or delete "
                "your existing copy of MPM from the selected directory before proceeding. "
                "You likely either have a corrupted copy of MPM or it is for Windows or Linux."
            ),
        )

    session.mpm_mismatched = is_mismatched(arch, session.platform)
    return Transition.to(State.CONFIRM_OVERWRITE_MPM, checking)


def _confirm_overwrite_mpm(session: Session, text: str, services: WizardServices) -> Transition:
    choice = text.lower()

    if choice in _NO:
        if session.mpm_mismatched:
            return Transition.exit(
                State.CONFIRM_OVERWRITE_MPM, 1,
                error(
                    "You can't use a version of MPM that doesn't match the CPU architecture "
                    "you selected. Please either select a different directory to download "
                    "MPM or move your existing copy elsewhere."
                ),
            )
        return Transition.to(State.MAKE_EXECUTABLE, info("Skipping download."))

    if choice in _YES:
        return Transition.to(State.DOWNLOAD_MPM)

    return Transition.to(
        State.CONFIRM_OVERWRITE_MPM, error("Invalid choice. Please enter either 'y' or 'n'.")
    )


def _download_mpm(session: Session, services: WizardServices) -> Transition:
    try:
        services.download(session.mpm_url, session.mpm_path)
    except DownloadError as e:
        return Transition.exit(State.DOWNLOAD_MPM, 1, error(f"Failed to download MPM. {e}"))
    return Transition.to(State.MAKE_EXECUTABLE, info("MPM downloaded successfully."))


def _make_executable(session: Session, services: WizardServices) -> Transition:
    assert session.platform is not None
    if session.platform.is_windows:
        return Transition.to(State.RELEASE_SELECT)

    try:
        services.make_executable(session.mpm_path)
    except OSError as e:
        return Transition.to(
            State.DOWNLOAD_PATH,
            error(
                f"Failed to make MPM executable: {e}. Either select a different directory, "
                "run this program with needed privileges, or make modifications to MPM "
                "outside of this program."
            ),
        )
    return Transition.to(State.RELEASE_SELECT)


# ── Release and products ────────────────────────────────────────


def _release_select(session: Session, text: str, services: WizardServices) -> Transition:
    assert session.platform is not None
    valid = catalog.valid_releases(session.platform)
    release = catalog.normalize_release(text, valid, default=default_release(session))
    if release is None:
        return Transition.to(
            State.RELEASE_SELECT,
            error(f"Invalid release. Enter a release between {catalog.release_range_label(valid)}."),
        )
    session.release = release
    return Transition.to(State.PRODUCT_SELECT)


def _product_select(session: Session, text: str, services: WizardServices) -> Transition:
    assert session.platform is not None
    selection = catalog.select_products(text, session.platform, session.release)
    if not selection.ok:
        return Transition.to(
            State.PRODUCT_SELECT,
            error("The following products do not exist:"),
            *(error(f"- {name}") for name in selection.missing),
            error(
                "Please try again and check for any typos. Different products should be "
                "separated by spaces. Spaces in a product name should be replaced with "
                "underscores."
            ),
        )
    session.products = selection.products
    return Transition.to(State.INSTALL_PATH)


# ── Installation target ─────────────────────────────────────────


def _install_path(session: Session, text: str, services: WizardServices) -> Transition:
    if not text:
        session.install_path = session.default_install_dir()
        return Transition.to(State.LICENSE_SELECT)

    messages: list[Message] = []
    try:
        services.stat(text)
    except FileNotFoundError:
        try:
            services.make_dirs(text)
        except OSError as e:
            return Transition.to(
                State.INSTALL_PATH,
                error(f"Error creating directory: {e} Please pick a different installation path."),
            )
        messages.append(info(f"Directory successfully created: {os.path.abspath(text)}"))
    except OSError:
        return Transition.to(
            State.INSTALL_PATH,
            error(
                f"Error selecting directory: {os.path.abspath(text)} "
                "Please pick a different installation path."
            ),
        )

    session.install_path = text
    return Transition.to(State.LICENSE_SELECT, *messages)


def _license_select(session: Session, text: str, services: WizardServices) -> Transition:
    if not text:
        session.license_path = None
        return Transition.to(State.INSTALL)

    problem = check_license_file(text)
    if problem:
        return Transition.to(State.LICENSE_SELECT, error(problem))

    session.license_path = text
    return Transition.to(State.INSTALL)


# ── Run mpm ─────────────────────────────────────────────────────


def _install(session: Session, services: WizardServices) -> Transition:
    cmd = build_install_command(
        session.mpm_path, session.release, session.install_path, session.products,
    )
    try:
        services.run_mpm(cmd)
    except MpmNotFoundError as e:
        logger.debug("mpm not found: %s", e)
        return Transition.exit(
            State.INSTALL, 1,
            error(
                "MPM was either moved, renamed, deleted, or you've lost permissions "
                "to access it."
            ),
        )
    except InstallError as e:
        return Transition.exit(
            State.INSTALL, 1,
            error(
                "An error occurred during installation. See the error above for more "
                f"information. {e}."
            ),
        )
    return Transition.to(State.LICENSE_INSTALL)


def _license_install(session: Session, services: WizardServices) -> Transition:
    finished = success("Installation finished!")
    if not session.license_used:
        return Transition.to(State.DONE, finished)

    assert session.license_path is not None
    try:
        services.install_license(session.license_path, session.install_path)
    except LicenseInstallError as e:
        return Transition.to(
            State.DONE,
            error(f"{e}. You will need to manually place your license file in your installation."),
            finished,
        )
    return Transition.to(State.DONE, finished)


_AUTOMATIC: dict[State, Callable[[Session, WizardServices], Transition]] = {
    State.PLATFORM_DETECT: _platform_detect,
    State.CHECK_EXISTING_MPM: _check_existing_mpm,
    State.DOWNLOAD_MPM: _download_mpm,
    State.MAKE_EXECUTABLE: _make_executable,
    State.INSTALL: _install,
    State.LICENSE_INSTALL: _license_install,
}

_INTERACTIVE: dict[State, Callable[[Session, str, WizardServices], Transition]] = {
    State.ARCH_SELECT: _arch_select,
    State.DOWNLOAD_PATH: _download_path,
    State.CONFIRM_CREATE_DOWNLOAD_DIR: _confirm_create_download_dir,
    State.CONFIRM_OVERWRITE_MPM: _confirm_overwrite_mpm,
    State.RELEASE_SELECT: _release_select,
    State.PRODUCT_SELECT: _product_select,
    State.INSTALL_PATH: _install_path,
    State.LICENSE_SELECT: _license_select,
}
