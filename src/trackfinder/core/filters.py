"""Frequency-domain filters applied to spectra before correlation."""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterator, List, Optional

import numpy as np

from ..exceptions import InvalidArgumentError
from ..utils.logging import get_logger

logger = get_logger(__name__)


class FrequencyFilter(ABC):
    """Rewrites a spectrum in place. Implementations carry their own state."""

    @abstractmethod
    def apply(self, spectrum: np.ndarray, length: int) -> None:
        """Filter ``length`` bins of ``spectrum`` in place."""

    def __call__(self, spectrum: np.ndarray, length: int) -> None:
        self.apply(spectrum, length)


class CallbackFilter(FrequencyFilter):
    """Adapter for a plain ``callback(spectrum, length, context)`` function."""

    def __init__(self, callback: Callable[[np.ndarray, int, Any], None], context: Any = None):
        if not callable(callback):
            raise InvalidArgumentError("Filter callback must be callable")
        self.callback = callback
        self.context = context

    def apply(self, spectrum: np.ndarray, length: int) -> None:
        self.callback(spectrum, length, self.context)

    def __repr__(self) -> str:
        name = getattr(self.callback, "__name__", repr(self.callback))
        return f"CallbackFilter({name})"


class GainFilter(FrequencyFilter):
    """Multiplies every bin by a constant factor."""

    def __init__(self, factor: complex):
        self.factor = factor

    def apply(self, spectrum: np.ndarray, length: int) -> None:
        spectrum[:length] *= self.factor


class BandPassFilter(FrequencyFilter):
    """Zeroes the bins outside ``[low_hz, high_hz]``.

    ``sample_rate`` must be the rate of the signal the spectrum was computed
    from, which for the engine is its processing sample rate.
    """

    def __init__(self, low_hz: float, high_hz: float, sample_rate: float):
        if low_hz < 0 or high_hz <= low_hz:
            raise InvalidArgumentError(f"Invalid band: {low_hz}-{high_hz} Hz")
        if sample_rate <= 0:
            raise InvalidArgumentError(f"Sample rate must be positive, got {sample_rate}")
        self.low_hz = low_hz
        self.high_hz = high_hz
        self.sample_rate = sample_rate

    def apply(self, spectrum: np.ndarray, length: int) -> None:
        if length < 2:
            return
        n = 2 * (length - 1)
        freqs = np.arange(length) * (self.sample_rate / n)
        outside = (freqs < self.low_hz) | (freqs > self.high_hz)
        spectrum[:length][outside] = 0


class PhaseTransformFilter(FrequencyFilter):
    """Whitens a spectrum by dividing each bin by its magnitude (PHAT)."""

    def __init__(self, epsilon: float = 1e-9):
        self.epsilon = epsilon

    def apply(self, spectrum: np.ndarray, length: int) -> None:
        spectrum[:length] /= np.abs(spectrum[:length]) + self.epsilon


class FilterChain:
    """Ordered, append-only list of frequency filters."""

    def __init__(self):
        self._filters: List[FrequencyFilter] = []

    def append(self, filter_or_callback, context: Optional[Any] = None) -> FrequencyFilter:
        """
        Add a filter to the end of the chain.

        Args:
            filter_or_callback: A FrequencyFilter, or a callable taking
                ``(spectrum, length, context)``
            context: Passed to a plain callback on every call; ignored for
                FrequencyFilter instances

        Returns:
            The filter as stored in the chain

        Raises:
            InvalidArgumentError: If the filter is None or not callable
        """
        if filter_or_callback is None:
            raise InvalidArgumentError("Filter callback must not be None")
        if isinstance(filter_or_callback, FrequencyFilter):
            frequency_filter = filter_or_callback
        elif callable(filter_or_callback):
            frequency_filter = CallbackFilter(filter_or_callback, context)
        else:
            raise InvalidArgumentError(
                f"Filter must be a FrequencyFilter or callable, got {type(filter_or_callback).__name__}"
            )
        self._filters.append(frequency_filter)
        logger.debug(f"Appended filter #{len(self._filters)}: {frequency_filter!r}")
        return frequency_filter

    def apply(self, spectrum: np.ndarray) -> np.ndarray:
        """Run every filter on ``spectrum`` in registration order."""
        length = len(spectrum)
        for frequency_filter in self._filters:
            frequency_filter.apply(spectrum, length)
        return spectrum

    def clear(self) -> None:
        self._filters = []

    def __len__(self) -> int:
        return len(self._filters)

    def __iter__(self) -> Iterator[FrequencyFilter]:
        return iter(list(self._filters))
