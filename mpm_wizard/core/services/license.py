"""
License file handling — validate the user's choice, copy it into place.

mpm does not take a license file; the product picks one up from
``<install>/licenses/`` at first start, so the wizard copies it there
after a successful installation.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from mpm_wizard.core.errors import LicenseInstallError

logger = logging.getLogger(__name__)

LICENSE_EXTENSIONS: tuple[str, ...] = (".dat", ".lic", ".xml")
LICENSES_DIR = "licenses"


def check_license_file(path: str) -> str | None:
    """Validate a license file path.

    Returns:
        None if the file is usable, otherwise a user-facing error message.
    """
    try:
        Path(path).stat()
    except OSError as e:
        return f"Error: {e}"
    if not path.endswith(LICENSE_EXTENSIONS):
        return (
            "Invalid file extension. Please provide a file with a "
            ".dat, .lic, or .xml file extension."
        )
    return None


def install_license_file(license_path: str, install_path: str) -> Path:
    """Copy the license file into ``<install_path>/licenses/``.

    The directory is created if needed; an existing file of the same
    name is overwritten.

    Returns:
        Path of the copied file.

    Raises:
        LicenseInstallError: If the directory or the copy cannot be made.
    """
    licenses_dir = Path(install_path) / LICENSES_DIR
    try:
        licenses_dir.mkdir(mode=0o755, exist_ok=True)
    except OSError as e:
        raise LicenseInstallError(f'Error creating "{LICENSES_DIR}" directory: {e}') from e

    dest = licenses_dir / Path(license_path).name
    try:
        shutil.copyfile(license_path, dest)
    except OSError as e:
        raise LicenseInstallError(f"Error copying license file: {e}") from e

    logger.info("Copied license file %s → %s", license_path, dest)
    return dest
