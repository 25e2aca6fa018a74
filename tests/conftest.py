"""Test configuration and fixtures.

Provides reusable fixtures for:
- Temporary files and directories
- Seeded random noise signals
- Synthetic sine sweeps
"""

import tempfile
from pathlib import Path

import numpy as np
import pytest
from scipy.signal import chirp


# =============================================================================
# Basic Fixtures
# =============================================================================


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def rng():
    """Deterministic random generator."""
    return np.random.default_rng(1234)


# =============================================================================
# Signal Fixtures
# =============================================================================


@pytest.fixture
def noise_signal(rng):
    """Two seconds of white noise at 8 kHz."""
    return rng.standard_normal(16000).astype(np.float32)


@pytest.fixture
def sine_sweep():
    """Ten second linear sweep from 100 Hz to 8 kHz at 44.1 kHz."""
    sample_rate = 44100
    t = np.arange(10 * sample_rate) / sample_rate
    return chirp(t, f0=100.0, t1=10.0, f1=8000.0, method="linear").astype(np.float32), sample_rate
