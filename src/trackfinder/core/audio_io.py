"""Audio file loading and file-to-file track location."""

from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

import numpy as np
import soundfile as sf

from ..config import PROCESSING_SAMPLE_RATE, SAMPLE_DTYPE, THREAD_COUNT
from ..exceptions import AudioReadError
from ..utils.logging import get_logger
from ..utils.performance import PerformanceMonitor
from ..utils.validation import validate_audio_path
from .models import AudioRange, SampleFormat
from .synchronizer import Synchronizer

logger = get_logger(__name__)


def load_audio(path: Union[str, Path]) -> Tuple[np.ndarray, float]:
    """
    Read an audio file as mono float32 samples.

    Multi-channel files are downmixed by averaging their channels.

    Returns:
        Tuple of (samples, sample rate in Hz)

    Raises:
        InvalidArgumentError: If the file does not exist
        AudioReadError: If soundfile cannot decode it
    """
    audio_path = validate_audio_path(path)
    try:
        data, sample_rate = sf.read(str(audio_path), dtype="float32", always_2d=True)
    except RuntimeError as e:
        raise AudioReadError(f"Could not read audio file {audio_path}: {e}")

    if data.shape[1] > 1:
        logger.debug(f"Downmixing {data.shape[1]} channels of {audio_path.name}")
    samples = data.mean(axis=1).astype(SAMPLE_DTYPE, copy=False)
    return samples, float(sample_rate)


def locate_in_files(
    base_path: Union[str, Path],
    track_path: Union[str, Path],
    processing_sample_rate: Optional[float] = None,
    thread_count: Optional[int] = None,
    filters: Iterable = (),
) -> AudioRange:
    """Locate the audio of ``track_path`` inside ``base_path``."""
    base, base_rate = load_audio(base_path)
    track, track_rate = load_audio(track_path)

    with PerformanceMonitor(f"locating {Path(track_path).name} in {Path(base_path).name}"):
        with Synchronizer(
            PROCESSING_SAMPLE_RATE if processing_sample_rate is None else processing_sample_rate,
            THREAD_COUNT if thread_count is None else thread_count,
        ) as synchronizer:
            for frequency_filter in filters:
                synchronizer.append_filter(frequency_filter)
            synchronizer.set_base_audio(SampleFormat.FLOAT32, base, None, base_rate)
            return synchronizer.get_audio_range(SampleFormat.FLOAT32, track, None, track_rate)
