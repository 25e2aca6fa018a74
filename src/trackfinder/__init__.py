"""trackfinder - locate short audio tracks inside a longer base recording."""

__version__ = "1.0.0"

from .exceptions import (
    AllocationError,
    AlreadySetBaseSignalError,
    AudioReadError,
    BaseSignalNotSetError,
    ConfigError,
    ErrorCode,
    InvalidArgumentError,
    TrackFinderError,
    error_message,
)
from .core import (
    AudioRange,
    BandPassFilter,
    CallbackFilter,
    FilterChain,
    FrequencyFilter,
    GainFilter,
    PhaseTransformFilter,
    SampleFormat,
    Synchronizer,
    load_audio,
    locate_in_files,
)

__all__ = [
    "__version__",
    "AllocationError",
    "AlreadySetBaseSignalError",
    "AudioReadError",
    "BaseSignalNotSetError",
    "ConfigError",
    "ErrorCode",
    "InvalidArgumentError",
    "TrackFinderError",
    "error_message",
    "AudioRange",
    "BandPassFilter",
    "CallbackFilter",
    "FilterChain",
    "FrequencyFilter",
    "GainFilter",
    "PhaseTransformFilter",
    "SampleFormat",
    "Synchronizer",
    "load_audio",
    "locate_in_files",
]
