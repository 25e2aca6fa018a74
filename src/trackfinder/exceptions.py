"""Custom exceptions for trackfinder."""

from enum import IntEnum


class ErrorCode(IntEnum):
    """Status codes carried by every trackfinder error."""

    SUCCESS = 0
    INVALID_ARGUMENT = 1
    ALREADY_SET_BASE_SIGNAL = 2
    BASE_SIGNAL_NOT_SET = 3
    ALLOCATION_ERROR = 4


_ERROR_MESSAGES = {
    ErrorCode.INVALID_ARGUMENT: "Invalid argument",
    ErrorCode.ALREADY_SET_BASE_SIGNAL: "Base signal already set",
    ErrorCode.BASE_SIGNAL_NOT_SET: "Base signal not set",
    ErrorCode.ALLOCATION_ERROR: "Could not allocate memory",
}


def error_message(code) -> str:
    """Return a human-readable message for an error code."""
    try:
        return _ERROR_MESSAGES[ErrorCode(code)]
    except (KeyError, ValueError, TypeError):
        return "Unknown error"


class TrackFinderError(Exception):
    """Base exception for trackfinder."""

    code = ErrorCode.INVALID_ARGUMENT

    def __init__(self, message: str = ""):
        super().__init__(message or error_message(self.code))


class InvalidArgumentError(TrackFinderError):
    """Bad format tag, filter, sample rate or sample count."""

    code = ErrorCode.INVALID_ARGUMENT


class AlreadySetBaseSignalError(TrackFinderError):
    """The base signal was set twice."""

    code = ErrorCode.ALREADY_SET_BASE_SIGNAL


class BaseSignalNotSetError(TrackFinderError):
    """A query was issued before the base signal was set."""

    code = ErrorCode.BASE_SIGNAL_NOT_SET


class AllocationError(TrackFinderError):
    """Memory could not be allocated during a call."""

    code = ErrorCode.ALLOCATION_ERROR


class AudioReadError(InvalidArgumentError):
    """Error reading an audio file."""
    pass


class ConfigError(TrackFinderError):
    """Invalid configuration value."""
    pass
