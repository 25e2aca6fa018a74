"""Sample rate conversion on top of librosa's resampler."""

import math
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Tuple

import librosa
import numpy as np

from ..config import RESAMPLE_TYPE, SAMPLE_DTYPE
from ..utils.logging import get_logger
from ..utils.validation import normalize_thread_count

logger = get_logger(__name__)


def expected_resampled_length(num_samples: int, source_rate: float, target_rate: float) -> int:
    """Upper estimate of the resampler's output length."""
    return int(math.ceil(num_samples * target_rate / source_rate))


def resample(
    samples: np.ndarray,
    source_rate: float,
    target_rate: float,
    expected_length: Optional[int] = None,
    res_type: str = RESAMPLE_TYPE,
) -> Tuple[np.ndarray, int]:
    """
    Resample a buffer in a single pass.

    Args:
        samples: Input samples
        source_rate: Rate of ``samples`` in Hz
        target_rate: Rate to convert to in Hz
        expected_length: Advisory output length; the resampler decides the
            number of samples it actually generates
        res_type: librosa resampling mode

    Returns:
        Tuple of (new float32 buffer, generated length)
    """
    if expected_length is None:
        expected_length = expected_resampled_length(len(samples), source_rate, target_rate)

    resampled = librosa.resample(
        np.ascontiguousarray(samples, dtype=SAMPLE_DTYPE),
        orig_sr=source_rate,
        target_sr=target_rate,
        res_type=res_type,
    )
    resampled = np.array(resampled, dtype=SAMPLE_DTYPE)

    if len(resampled) != expected_length:
        logger.debug(
            f"Resampler generated {len(resampled)} samples, expected {expected_length}"
        )
    return resampled, len(resampled)


def resample_parallel(
    samples: np.ndarray,
    source_rate: float,
    target_rate: float,
    thread_count: int,
    expected_length: Optional[int] = None,
    res_type: str = RESAMPLE_TYPE,
) -> Tuple[np.ndarray, int]:
    """
    Resample a buffer in ``thread_count`` independent slices.

    The input is cut into contiguous slices of equal size, the last one
    taking the remainder. Each slice is resampled on its own worker and the
    outputs are concatenated in order.

    Slices do not share resampler state, so samples near slice boundaries
    differ from what a single pass over the whole buffer would produce. The
    output is an approximation of ``resample`` traded for speed, not an
    equivalent of it.

    Returns:
        Tuple of (new float32 buffer, sum of the generated slice lengths)
    """
    thread_count = normalize_thread_count(thread_count)
    num_samples = len(samples)
    if thread_count == 1 or num_samples < thread_count:
        return resample(samples, source_rate, target_rate, expected_length, res_type)

    slice_size = num_samples // thread_count
    bounds = [
        (i * slice_size, num_samples if i == thread_count - 1 else (i + 1) * slice_size)
        for i in range(thread_count)
    ]
    logger.debug(f"Resampling {num_samples} samples in {thread_count} slices of ~{slice_size}")

    with ThreadPoolExecutor(max_workers=thread_count, thread_name_prefix="trackfinder-resample") as pool:
        futures = [
            pool.submit(resample, samples[start:end], source_rate, target_rate, None, res_type)
            for start, end in bounds
        ]
        pieces = [future.result() for future in futures]

    total_length = sum(length for _, length in pieces)
    resampled = np.concatenate([buffer for buffer, _ in pieces]).astype(SAMPLE_DTYPE, copy=False)

    if expected_length is not None and total_length != expected_length:
        logger.debug(f"Chunked resampling generated {total_length} samples, expected {expected_length}")
    return resampled, total_length
