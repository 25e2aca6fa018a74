"""Real-input discrete Fourier transforms backed by scipy.fft."""

import numpy as np
from scipy import fft as sp_fft

from ..config import SAMPLE_DTYPE
from ..exceptions import InvalidArgumentError


def common_size(minimal_size: int) -> int:
    """Smallest power of two that is at least ``minimal_size``."""
    size = 1
    while size < minimal_size:
        size <<= 1
    return size


def forward(samples: np.ndarray, n: int, workers: int = 1) -> np.ndarray:
    """Real-to-complex transform of length ``n``; returns ``n // 2 + 1`` bins."""
    if n <= 0:
        raise InvalidArgumentError(f"Transform length must be positive, got {n}")
    return sp_fft.rfft(
        np.asarray(samples, dtype=SAMPLE_DTYPE), n=n, workers=workers
    )


def inverse(spectrum: np.ndarray, n: int, workers: int = 1) -> np.ndarray:
    """Complex-to-real transform of length ``n``.

    The output is not divided by ``n``, so ``inverse(forward(x, n), n)`` is
    ``n * x``.
    """
    if n <= 0:
        raise InvalidArgumentError(f"Transform length must be positive, got {n}")
    # norm="forward" puts the 1/n on the forward direction only
    return sp_fft.irfft(spectrum, n=n, norm="forward", workers=workers).astype(
        SAMPLE_DTYPE, copy=False
    )
