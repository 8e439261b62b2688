"""
Cancellation — cooperative interrupt handling for the wizard.

One ``CancelToken`` is created at startup and handed to every blocking
operation (download, mpm run). While ``handle_signals`` is active,
SIGINT/SIGTERM mark the token cancelled and raise ``WizardCancelled``
in the main thread, so a blocking read or wait unwinds; loops that
poll the token stop at their next check and clean up (partial download
removed, mpm child terminated).
"""

from __future__ import annotations

import logging
import signal
import threading
from contextlib import contextmanager
from types import FrameType
from typing import Iterator

from mpm_wizard.core.errors import WizardCancelled

logger = logging.getLogger(__name__)

_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class CancelToken:
    """Thread-safe, one-way cancellation flag."""

    def __init__(self) -> None:
        self._event = threading.Event()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise WizardCancelled("cancelled by user")


@contextmanager
def handle_signals(token: CancelToken) -> Iterator[CancelToken]:
    """Route SIGINT and SIGTERM to ``token`` for the duration of the block.

    Previous handlers are restored on exit. Must be entered from the
    main thread.
    """

    def _handler(signum: int, _frame: FrameType | None) -> None:
        logger.debug("Received signal %d, cancelling", signum)
        token.cancel()
        raise WizardCancelled(f"signal {signum}")

    previous = {sig: signal.getsignal(sig) for sig in _SIGNALS}
    for sig in _SIGNALS:
        signal.signal(sig, _handler)
    try:
        yield token
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)
