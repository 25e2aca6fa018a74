"""Configuration settings for trackfinder."""

import math
import os

import numpy as np

from .exceptions import ConfigError

# Internal rate of the base signal and of all correlation math
PROCESSING_SAMPLE_RATE = float(os.getenv("TRACKFINDER_PROCESSING_SAMPLE_RATE", "8000"))

# Worker count for chunked resampling and transform execution
THREAD_COUNT = int(os.getenv("TRACKFINDER_THREADS", "1"))

# Resampling mode handed to librosa.resample
RESAMPLE_TYPE = os.getenv("TRACKFINDER_RESAMPLE_TYPE", "soxr_mq")
SUPPORTED_RESAMPLE_TYPES = (
    "soxr_vhq",
    "soxr_hq",
    "soxr_mq",
    "soxr_lq",
    "soxr_qq",
    "kaiser_best",
    "kaiser_fast",
    "polyphase",
    "linear",
)

# Native sample type of the engine
SAMPLE_DTYPE = np.float32


def validate_config() -> None:
    """Validate configuration values."""
    if not math.isfinite(PROCESSING_SAMPLE_RATE) or PROCESSING_SAMPLE_RATE <= 0:
        raise ConfigError("Processing sample rate must be positive and finite")

    if RESAMPLE_TYPE not in SUPPORTED_RESAMPLE_TYPES:
        raise ConfigError(
            f"Unsupported resample type: {RESAMPLE_TYPE}. "
            f"Use one of: {', '.join(SUPPORTED_RESAMPLE_TYPES)}"
        )


# Validate config on import
validate_config()
