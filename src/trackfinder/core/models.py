"""Data models for sample formats and alignment results."""

from dataclasses import dataclass
from enum import Enum, IntEnum

import numpy as np

from ..exceptions import InvalidArgumentError


class SampleFormat(IntEnum):
    """Element format of an input sample buffer."""

    INT8 = 1
    INT16 = 2
    INT32 = 3
    INT64 = 4
    FLOAT64 = 5
    FLOAT32 = 6

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(_FORMAT_DTYPES[self])

    @classmethod
    def resolve(cls, fmt) -> "SampleFormat":
        """Look up a format by member, integer tag or name."""
        if isinstance(fmt, cls):
            return fmt
        if isinstance(fmt, str):
            try:
                return cls[fmt.strip().upper()]
            except KeyError:
                raise InvalidArgumentError(f"Unknown sample format: {fmt!r}")
        if isinstance(fmt, (int, np.integer)) and not isinstance(fmt, bool):
            try:
                return cls(int(fmt))
            except ValueError:
                raise InvalidArgumentError(f"Unknown sample format: {fmt!r}")
        raise InvalidArgumentError(f"Unknown sample format: {fmt!r}")


_FORMAT_DTYPES = {
    SampleFormat.INT8: np.int8,
    SampleFormat.INT16: np.int16,
    SampleFormat.INT32: np.int32,
    SampleFormat.INT64: np.int64,
    SampleFormat.FLOAT64: np.float64,
    SampleFormat.FLOAT32: np.float32,
}


class EngineState(str, Enum):
    """Lifecycle state of a Synchronizer."""

    CREATED = "created"
    BASE_SET = "base_set"
    DESTROYED = "destroyed"


@dataclass(frozen=True)
class AudioRange:
    """Location of a track inside the base signal, in base samples."""

    in_point: int
    length: int
    sample_rate: float

    @property
    def end_point(self) -> int:
        return self.in_point + self.length

    @property
    def start_time(self) -> float:
        return self.in_point / self.sample_rate

    @property
    def duration(self) -> float:
        return self.length / self.sample_rate
