"""Handle-style functions mirroring the Synchronizer lifecycle.

Each function takes the handle returned by :func:`create`. Failures raise a
:class:`~trackfinder.exceptions.TrackFinderError` whose ``code`` attribute
holds the matching :class:`~trackfinder.exceptions.ErrorCode`.
"""

from typing import Any, Optional

from .config import PROCESSING_SAMPLE_RATE, THREAD_COUNT
from .core.models import AudioRange
from .core.synchronizer import Synchronizer
from .exceptions import error_message
from .utils.guard import allocation_guard


@allocation_guard
def create(
    processing_sample_rate: float = PROCESSING_SAMPLE_RATE,
    thread_count: int = THREAD_COUNT,
) -> Synchronizer:
    """Create an engine with no base signal."""
    return Synchronizer(processing_sample_rate, thread_count)


def append_filter(handle: Synchronizer, callback, context: Any = None) -> None:
    """Append a frequency filter to the engine."""
    handle.append_filter(callback, context)


def set_base_audio(
    handle: Synchronizer,
    fmt,
    samples,
    sample_count: Optional[int],
    sample_rate: float,
) -> None:
    """Attach the base signal to the engine."""
    handle.set_base_audio(fmt, samples, sample_count, sample_rate)


def get_audio_range(
    handle: Synchronizer,
    fmt,
    samples,
    sample_count: Optional[int],
    sample_rate: float,
) -> AudioRange:
    """Locate a track inside the engine's base signal."""
    return handle.get_audio_range(fmt, samples, sample_count, sample_rate)


align_query = get_audio_range


def destroy(handle: Synchronizer) -> None:
    """Release the engine's base signal and filters."""
    handle.destroy()


__all__ = [
    "create",
    "append_filter",
    "set_base_audio",
    "get_audio_range",
    "align_query",
    "destroy",
    "error_message",
]
