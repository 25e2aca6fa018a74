"""Sample conversion, normalization and padding."""

from typing import Optional

import numpy as np

from ..config import SAMPLE_DTYPE
from ..exceptions import InvalidArgumentError
from ..utils.logging import get_logger
from ..utils.validation import validate_sample_count
from .models import SampleFormat

logger = get_logger(__name__)

_BUFFER_TYPES = (bytes, bytearray, memoryview)


def convert_to_samples(samples, fmt, sample_count: Optional[int] = None) -> np.ndarray:
    """
    Convert a raw sample buffer to a new buffer of native float32 samples.

    Args:
        samples: Bytes-like object, numpy array or sequence of numbers.
            Bytes are read with the format's dtype in native byte order;
            anything else is value-converted element by element.
        fmt: SampleFormat member, integer tag or format name
        sample_count: Number of samples to take from the start of the
            buffer, or None for all of them

    Returns:
        Newly allocated float32 array, never a view of ``samples``

    Raises:
        InvalidArgumentError: Unknown format or count larger than the buffer
    """
    fmt = SampleFormat.resolve(fmt)
    sample_count = validate_sample_count(sample_count)

    if isinstance(samples, _BUFFER_TYPES):
        available = memoryview(samples).nbytes // fmt.dtype.itemsize
        count = available if sample_count is None else sample_count
        if count > available:
            raise InvalidArgumentError(
                f"Sample count {count} exceeds buffer size {available}"
            )
        raw = np.frombuffer(samples, dtype=fmt.dtype, count=count)
    else:
        try:
            if isinstance(samples, np.ndarray) and samples.dtype != fmt.dtype:
                # arrays tagged with a narrower format must not wrap or truncate
                raw = samples.astype(fmt.dtype, casting="safe").reshape(-1)
            else:
                raw = np.asarray(samples, dtype=fmt.dtype).reshape(-1)
        except (TypeError, ValueError, OverflowError) as e:
            raise InvalidArgumentError(f"Cannot read samples as {fmt.name}: {e}")
        count = raw.size if sample_count is None else sample_count
        if count > raw.size:
            raise InvalidArgumentError(
                f"Sample count {count} exceeds buffer size {raw.size}"
            )
        raw = raw[:count]

    return raw.astype(SAMPLE_DTYPE, copy=True)


def normalize(samples: np.ndarray) -> np.ndarray:
    """Zero-mean and unit-variance ``samples`` in place and return it.

    Constant input has a standard deviation of exactly zero and is only
    centered, which leaves it all zeros.
    """
    if samples.size == 0:
        return samples

    mean = samples.mean(dtype=np.float64)
    centered = samples.astype(np.float64) - mean
    std = float(np.sqrt(np.mean(centered * centered)))

    if std == 0:
        samples[:] = centered
    else:
        samples[:] = centered / std
    return samples


def pad_samples(samples: np.ndarray, target_length: int) -> np.ndarray:
    """Return a new buffer of ``target_length`` samples.

    The leading ``min(len(samples), target_length)`` values are copied and the
    rest is zero, so a shorter target truncates.
    """
    if target_length < 0:
        raise InvalidArgumentError(f"Target length must be non-negative, got {target_length}")

    padded = np.zeros(target_length, dtype=SAMPLE_DTYPE)
    kept = min(len(samples), target_length)
    padded[:kept] = samples[:kept]
    return padded
