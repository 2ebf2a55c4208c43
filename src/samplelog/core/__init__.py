"""Recorder implementations and the channel table they share."""

from __future__ import annotations

from typing import Type, Union

from .channel_table import SAMPLE_CHANNEL, ChannelTable
from .disabled import NullSampleLogger
from .recorder import SampleLogger

LoggerClass = Union[Type[SampleLogger], Type[NullSampleLogger]]


def select_logger_class(disabled: bool) -> LoggerClass:
    """Return the recorder class to expose for the given switch state."""
    return NullSampleLogger if disabled else SampleLogger


__all__ = [
    "SAMPLE_CHANNEL",
    "ChannelTable",
    "LoggerClass",
    "NullSampleLogger",
    "SampleLogger",
    "select_logger_class",
]
