"""Cross power spectrum and correlation peak detection."""

import math

import numpy as np

from ..exceptions import InvalidArgumentError
from ..utils.validation import validate_sample_rate
from .models import AudioRange


def cross_power_spectrum(track_spectrum: np.ndarray, base_spectrum: np.ndarray) -> np.ndarray:
    """Return ``conj(track) * base`` as a new spectrum.

    The unscaled inverse transform of the result holds, at index ``k``, the
    correlation of the base with the track shifted by ``k`` samples.
    """
    if track_spectrum.shape != base_spectrum.shape:
        raise InvalidArgumentError(
            f"Spectrum sizes differ: {track_spectrum.shape} vs {base_spectrum.shape}"
        )
    return np.conj(track_spectrum) * base_spectrum


def find_peak(correlation: np.ndarray, track_length: int) -> int:
    """
    Find the signed lag of the correlation maximum.

    Ties resolve to the first index. The correlation is circular, so indices
    past ``n - track_length // 2`` stand for a track that starts before the
    base and are mapped to ``index - n``.

    Args:
        correlation: Inverse-transformed cross power spectrum, length ``n``
        track_length: Un-padded length of the track at the processing rate

    Returns:
        Signed offset of the track start in processing-rate samples
    """
    n = len(correlation)
    if n == 0:
        raise InvalidArgumentError("Correlation buffer is empty")
    if track_length <= 0:
        raise InvalidArgumentError(f"Track length must be positive, got {track_length}")

    index = int(np.argmax(correlation))
    if index > n - track_length // 2:
        index -= n
    return index


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def to_base_domain(
    in_point: int,
    length: int,
    real_sample_rate: float,
    processing_sample_rate: float,
) -> AudioRange:
    """Scale a processing-rate range to the base signal's real rate."""
    real_sample_rate = validate_sample_rate(real_sample_rate)
    processing_sample_rate = validate_sample_rate(processing_sample_rate)

    scale = real_sample_rate / processing_sample_rate
    return AudioRange(
        in_point=_round_half_away(in_point * scale),
        length=_round_half_away(length * scale),
        sample_rate=real_sample_rate,
    )
