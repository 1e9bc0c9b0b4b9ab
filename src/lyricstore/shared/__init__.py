"""Shared value types used across lyricstore features."""

from __future__ import annotations

from .cancellation import NEVER_CANCELLED, CancellationToken, OperationCancelledError
from .track_metadata import TrackMetadata

__all__ = [
    "CancellationToken",
    "NEVER_CANCELLED",
    "OperationCancelledError",
    "TrackMetadata",
]
