"""Tests for the handle-style API."""

import numpy as np
import pytest

from trackfinder import api
from trackfinder.core.models import EngineState, SampleFormat
from trackfinder.core.synchronizer import Synchronizer
from trackfinder.exceptions import (
    AllocationError,
    AlreadySetBaseSignalError,
    BaseSignalNotSetError,
    ErrorCode,
    InvalidArgumentError,
)


class TestLifecycle:
    def test_full_session(self, noise_signal):
        handle = api.create(8000, 1)
        assert isinstance(handle, Synchronizer)

        api.append_filter(handle, lambda spectrum, length, context: None)
        api.set_base_audio(handle, SampleFormat.FLOAT32, noise_signal, None, 8000)
        match = api.get_audio_range(handle, SampleFormat.FLOAT32, noise_signal[500:2500], None, 8000)
        assert (match.in_point, match.length) == (500, 2000)

        api.destroy(handle)
        assert handle.state is EngineState.DESTROYED

    def test_align_query_alias(self, noise_signal):
        handle = api.create(8000, 1)
        api.set_base_audio(handle, "float32", noise_signal, None, 8000)
        match = api.align_query(handle, "float32", noise_signal[42:1042], None, 8000)
        assert match.in_point == 42

    def test_create_defaults(self):
        handle = api.create()
        assert handle.thread_count >= 1
        assert handle.processing_sample_rate > 0

    def test_create_clamps_threads(self):
        assert api.create(8000, 0).thread_count == 1

    def test_create_allocation_failure(self, monkeypatch):
        def exhausted(*args, **kwargs):
            raise MemoryError()

        monkeypatch.setattr(api, "Synchronizer", exhausted)
        with pytest.raises(AllocationError):
            api.create(8000, 1)


class TestErrorCodes:
    def test_query_before_base(self, noise_signal):
        handle = api.create(8000, 1)
        with pytest.raises(BaseSignalNotSetError) as exc_info:
            api.get_audio_range(handle, SampleFormat.FLOAT32, noise_signal, None, 8000)
        assert api.error_message(exc_info.value.code) == "Base signal not set"

    def test_base_set_twice(self, noise_signal):
        handle = api.create(8000, 1)
        api.set_base_audio(handle, SampleFormat.FLOAT32, noise_signal, None, 8000)
        with pytest.raises(AlreadySetBaseSignalError) as exc_info:
            api.set_base_audio(handle, SampleFormat.FLOAT32, noise_signal, None, 8000)
        assert exc_info.value.code == ErrorCode.ALREADY_SET_BASE_SIGNAL

    def test_null_filter(self):
        handle = api.create(8000, 1)
        with pytest.raises(InvalidArgumentError) as exc_info:
            api.append_filter(handle, None)
        assert exc_info.value.code == ErrorCode.INVALID_ARGUMENT

    def test_error_message_unknown(self):
        assert api.error_message(1234) == "Unknown error"

    def test_int16_buffers(self, rng):
        pcm = (rng.standard_normal(8000) * 5000).astype(np.int16)
        handle = api.create(8000, 1)
        api.set_base_audio(handle, SampleFormat.INT16, pcm.tobytes(), None, 8000)
        match = api.get_audio_range(handle, SampleFormat.INT16, pcm[3000:4000].tobytes(), None, 8000)
        assert match.in_point == 3000
