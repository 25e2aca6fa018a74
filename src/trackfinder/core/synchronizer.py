"""Stateful engine locating tracks inside a base signal."""

from typing import Any, Optional, Tuple

import numpy as np

from ..config import PROCESSING_SAMPLE_RATE, THREAD_COUNT
from ..exceptions import (
    AlreadySetBaseSignalError,
    BaseSignalNotSetError,
    InvalidArgumentError,
)
from ..utils.guard import allocation_guard
from ..utils.logging import get_logger
from ..utils.performance import timing_decorator
from ..utils.validation import normalize_thread_count, validate_sample_rate
from .correlation import cross_power_spectrum, find_peak, to_base_domain
from .filters import FilterChain, FrequencyFilter
from .models import AudioRange, EngineState, SampleFormat
from .resample import expected_resampled_length, resample_parallel
from .samples import convert_to_samples, normalize, pad_samples
from .transform import common_size, forward, inverse

logger = get_logger(__name__)


class Synchronizer:
    """
    Finds where short tracks occur inside one base signal.

    The base signal is set once, converted to float32, normalized and stored
    at ``processing_sample_rate``. Each query runs the track through the same
    preparation, correlates it with the base in the frequency domain and
    reports the best match in samples at the base's original rate.

    Queries only read the base signal and the filter chain, so several
    threads may query one engine at a time. Setting the base signal or
    appending filters while queries run must be serialized by the caller.
    """

    def __init__(
        self,
        processing_sample_rate: float = PROCESSING_SAMPLE_RATE,
        thread_count: int = THREAD_COUNT,
    ):
        self.processing_sample_rate = validate_sample_rate(processing_sample_rate)
        self.thread_count = normalize_thread_count(thread_count)
        self.real_base_sample_rate: Optional[float] = None
        self.filters = FilterChain()
        self.state = EngineState.CREATED
        self._base: Optional[np.ndarray] = None

    @property
    def base_samples(self) -> Optional[np.ndarray]:
        """Read-only view of the stored base signal."""
        return self._base

    @property
    def has_base_signal(self) -> bool:
        return self._base is not None

    @allocation_guard
    def append_filter(self, filter_or_callback, context: Any = None) -> FrequencyFilter:
        """Append a frequency filter applied to both spectra of every query."""
        return self.filters.append(filter_or_callback, context)

    @allocation_guard
    @timing_decorator
    def set_base_audio(
        self,
        fmt,
        samples,
        sample_count: Optional[int],
        sample_rate: float,
    ) -> None:
        """
        Attach the base signal. Allowed once per engine.

        Args:
            fmt: SampleFormat of ``samples``
            samples: Raw sample buffer
            sample_count: Number of samples to read, None for all
            sample_rate: Native rate of ``samples`` in Hz

        Raises:
            AlreadySetBaseSignalError: If the base signal is already set
            InvalidArgumentError: Bad format, sample rate or empty buffer
            AllocationError: If memory runs out; the engine is unchanged
        """
        if self._base is not None:
            raise AlreadySetBaseSignalError()
        sample_rate = validate_sample_rate(sample_rate)
        fmt = SampleFormat.resolve(fmt)

        base = convert_to_samples(samples, fmt, sample_count)
        if base.size == 0:
            raise InvalidArgumentError("Base signal is empty")
        normalize(base)

        original_count = num_samples = len(base)
        if sample_rate != self.processing_sample_rate:
            estimate = int(round(num_samples * self.processing_sample_rate / sample_rate))
            base, num_samples = resample_parallel(
                base,
                sample_rate,
                self.processing_sample_rate,
                self.thread_count,
                expected_length=estimate,
            )
        base.setflags(write=False)

        self._base = base
        self.real_base_sample_rate = sample_rate
        self.state = EngineState.BASE_SET
        logger.info(
            f"Base signal set: {original_count} samples "
            f"at {sample_rate:g} Hz -> {num_samples} samples at {self.processing_sample_rate:g} Hz"
        )

    def _prepare_track(self, fmt, samples, sample_count, sample_rate) -> np.ndarray:
        if self._base is None:
            raise BaseSignalNotSetError()
        sample_rate = validate_sample_rate(sample_rate)
        fmt = SampleFormat.resolve(fmt)

        track = convert_to_samples(samples, fmt, sample_count)
        if track.size == 0:
            raise InvalidArgumentError("Track is empty")
        normalize(track)

        if sample_rate != self.processing_sample_rate:
            track, _ = resample_parallel(
                track,
                sample_rate,
                self.processing_sample_rate,
                self.thread_count,
                expected_length=expected_resampled_length(
                    len(track), sample_rate, self.processing_sample_rate
                ),
            )
        return track

    def _correlate(self, track: np.ndarray) -> np.ndarray:
        base = self._base
        size = common_size(len(track) + len(base))
        logger.debug(
            f"Correlating {len(track)} track samples against {len(base)} base samples "
            f"(common size {size})"
        )

        track_spectrum = forward(pad_samples(track, size), size, self.thread_count)
        base_spectrum = forward(pad_samples(base, size), size, self.thread_count)

        self.filters.apply(track_spectrum)
        self.filters.apply(base_spectrum)

        spectrum = cross_power_spectrum(track_spectrum, base_spectrum)
        return inverse(spectrum, size, self.thread_count)

    @allocation_guard
    def cross_correlation(
        self,
        fmt,
        samples,
        sample_count: Optional[int],
        sample_rate: float,
    ) -> Tuple[np.ndarray, int]:
        """
        Correlate a track with the base signal.

        Returns:
            Tuple of (correlation buffer of common size, track length at the
            processing rate)
        """
        track = self._prepare_track(fmt, samples, sample_count, sample_rate)
        return self._correlate(track), len(track)

    @allocation_guard
    @timing_decorator
    def get_audio_range(
        self,
        fmt,
        samples,
        sample_count: Optional[int],
        sample_rate: float,
    ) -> AudioRange:
        """
        Locate a track inside the base signal.

        Args:
            fmt: SampleFormat of ``samples``
            samples: Raw sample buffer of the track
            sample_count: Number of samples to read, None for all
            sample_rate: Native rate of ``samples`` in Hz

        Returns:
            AudioRange with the signed start and the length of the match, in
            samples at the base signal's original rate

        Raises:
            BaseSignalNotSetError: If no base signal was set
            InvalidArgumentError: Bad format, sample rate or empty buffer
            AllocationError: If memory runs out
        """
        track = self._prepare_track(fmt, samples, sample_count, sample_rate)
        correlation = self._correlate(track)
        in_point = find_peak(correlation, len(track))

        match = to_base_domain(
            in_point,
            len(track),
            self.real_base_sample_rate,
            self.processing_sample_rate,
        )
        logger.info(
            f"Track found at sample {match.in_point} ({match.start_time:.3f}s), "
            f"length {match.length} ({match.duration:.3f}s)"
        )
        return match

    align_query = get_audio_range

    @allocation_guard
    def destroy(self) -> None:
        """Release the base signal and filters. Safe to call in any state."""
        if self.state is EngineState.DESTROYED:
            return
        self._base = None
        self.real_base_sample_rate = None
        self.filters.clear()
        self.state = EngineState.DESTROYED
        logger.debug("Synchronizer destroyed")

    def __enter__(self) -> "Synchronizer":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.destroy()
        return False

    def __repr__(self) -> str:
        return (
            f"Synchronizer(processing_sample_rate={self.processing_sample_rate:g}, "
            f"thread_count={self.thread_count}, state={self.state.value}, "
            f"filters={len(self.filters)})"
        )
