"""
Summary: Check the cooperative cancellation token.
Why: Every I/O boundary relies on ``check`` raising once cancellation is requested.
"""

from __future__ import annotations

import threading

import pytest

from lyricstore.shared import NEVER_CANCELLED, CancellationToken, OperationCancelledError


def test_check_passes_until_cancelled() -> None:
    token = CancellationToken()
    token.check()

    token.cancel()

    assert token.is_cancelled is True
    with pytest.raises(OperationCancelledError):
        token.check()


def test_cancel_from_another_thread_is_visible() -> None:
    token = CancellationToken()
    worker = threading.Thread(target=token.cancel)
    worker.start()
    worker.join()

    assert token.is_cancelled


def test_never_cancelled_token_refuses_cancel() -> None:
    with pytest.raises(RuntimeError):
        NEVER_CANCELLED.cancel()
    NEVER_CANCELLED.check()
