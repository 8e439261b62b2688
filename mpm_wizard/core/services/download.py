"""
mpm download — single streamed HTTP GET to a local file.

No retry, no resume, no checksum: mpm is published at a fixed URL per
platform and the wizard fetches it once. Any transport error or non-200
status is a hard failure.
"""

from __future__ import annotations

import logging
import urllib.error
import urllib.request
from pathlib import Path

from mpm_wizard.core.cancel import CancelToken
from mpm_wizard.core.errors import DownloadError

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 8192
_USER_AGENT = "mpm-wizard/2.0"


def _fmt_size(n: int) -> str:
    for unit in ("B", "KB", "MB", "GB"):
        if n < 1024:
            return f"{n:.0f} {unit}" if unit == "B" else f"{n:.1f} {unit}"
        n /= 1024
    return f"{n:.1f} TB"


def download_file(url: str, dest: Path, cancel: CancelToken | None = None) -> int:
    """Stream ``url`` into ``dest``, overwriting any existing file.

    The request has no timeout; a stalled server stalls the wizard
    until the user interrupts it. When ``cancel`` fires mid-transfer
    the partial file is deleted.

    Args:
        url: Source URL.
        dest: Destination file path (its directory must exist).
        cancel: Optional token polled between chunks.

    Returns:
        Number of bytes written.

    Raises:
        DownloadError: On transport errors, non-200 responses, or
            failure to write ``dest``.
        WizardCancelled: If ``cancel`` fired during the transfer.
    """
    req = urllib.request.Request(url, headers={"User-Agent": _USER_AGENT})
    logger.info("Downloading %s → %s", url, dest)

    try:
        resp = urllib.request.urlopen(req)
    except urllib.error.HTTPError as e:
        raise DownloadError(f"download failed: HTTP {e.code} {e.reason}") from e
    except (urllib.error.URLError, OSError) as e:
        raise DownloadError(f"download failed: {e}") from e

    downloaded = 0
    opened = False
    completed = False
    try:
        with resp:
            status = resp.getcode()
            if status != 200:
                raise DownloadError(f"download failed: HTTP {status} {resp.reason}")

            total = int(resp.headers.get("Content-Length", 0) or 0)
            with open(dest, "wb") as f:
                opened = True
                while True:
                    if cancel is not None:
                        cancel.raise_if_cancelled()
                    chunk = resp.read(_CHUNK_SIZE)
                    if not chunk:
                        break
                    f.write(chunk)
                    downloaded += len(chunk)
        completed = True
    except OSError as e:
        raise DownloadError(f"download failed: {e}") from e
    finally:
        if opened and not completed:
            logger.debug("Removing partial download %s", dest)
            dest.unlink(missing_ok=True)

    if total and downloaded != total:
        logger.warning("Downloaded %s but server announced %s", _fmt_size(downloaded), _fmt_size(total))
    logger.info("Downloaded %s to %s", _fmt_size(downloaded), dest)
    return downloaded
