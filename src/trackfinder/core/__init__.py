"""Core alignment pipeline."""

from .models import AudioRange, EngineState, SampleFormat
from .samples import convert_to_samples, normalize, pad_samples
from .resample import resample, resample_parallel
from .transform import common_size, forward, inverse
from .filters import (
    BandPassFilter,
    CallbackFilter,
    FilterChain,
    FrequencyFilter,
    GainFilter,
    PhaseTransformFilter,
)
from .correlation import cross_power_spectrum, find_peak, to_base_domain
from .synchronizer import Synchronizer
from .audio_io import load_audio, locate_in_files

__all__ = [
    "AudioRange",
    "EngineState",
    "SampleFormat",
    "convert_to_samples",
    "normalize",
    "pad_samples",
    "resample",
    "resample_parallel",
    "common_size",
    "forward",
    "inverse",
    "BandPassFilter",
    "CallbackFilter",
    "FilterChain",
    "FrequencyFilter",
    "GainFilter",
    "PhaseTransformFilter",
    "cross_power_spectrum",
    "find_peak",
    "to_base_domain",
    "Synchronizer",
    "load_audio",
    "locate_in_files",
]
