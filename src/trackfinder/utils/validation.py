"""Validation utilities."""

import logging
import math
from pathlib import Path
from typing import Optional

from ..exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


def validate_sample_rate(sample_rate: float) -> float:
    """Validate a sample rate in Hz."""
    try:
        sample_rate = float(sample_rate)
    except (TypeError, ValueError):
        raise InvalidArgumentError(f"Sample rate must be a number, got {sample_rate!r}")
    if not math.isfinite(sample_rate) or sample_rate <= 0:
        raise InvalidArgumentError(f"Sample rate must be positive and finite, got {sample_rate}")
    return sample_rate


def validate_sample_count(sample_count: Optional[int]) -> Optional[int]:
    """Validate an explicit sample count. ``None`` means the whole buffer."""
    if sample_count is None:
        return None
    try:
        whole = int(sample_count)
    except (TypeError, ValueError, OverflowError):
        raise InvalidArgumentError(f"Sample count must be an integer, got {sample_count!r}")
    if whole != sample_count or sample_count < 0:
        raise InvalidArgumentError(
            f"Sample count must be a non-negative integer, got {sample_count!r}"
        )
    if sample_count == 0:
        raise InvalidArgumentError("Sample count must be greater than zero")
    return whole


def normalize_thread_count(thread_count: Optional[int]) -> int:
    """Clamp a thread count hint; anything below 2 means sequential."""
    if thread_count is None or thread_count <= 1:
        return 1
    return int(thread_count)


def validate_audio_path(path) -> Path:
    """Validate that an audio file exists."""
    audio_path = Path(path)
    if not audio_path.is_file():
        raise InvalidArgumentError(f"Audio file not found: {audio_path}")
    return audio_path
