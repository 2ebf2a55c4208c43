"""Errors raised by the recorder and the CSV codec."""

from __future__ import annotations

from os import PathLike
from typing import Mapping, Optional


class SampleLogError(Exception):
    """Base class for samplelog errors."""

    pass


class ImbalanceError(SampleLogError):
    """The channel table is no longer aligned sample-by-sample.

    Once raised, the recording session cannot be repaired: the offending value
    has already been appended.
    """

    def __init__(
        self,
        message: str,
        *,
        channel: Optional[str] = None,
        lengths: Optional[Mapping[str, int]] = None,
    ):
        """Initialize the exception.

        Args:
            message: Which table rule was broken.
            channel: The channel whose write broke the table, or None when the
                imbalance was detected at flush time.
            lengths: Per-channel sequence lengths at detection time.
        """
        self.channel = channel
        self.lengths = dict(lengths or {})
        self.message = message
        super().__init__(message)


class TableParseError(SampleLogError, ValueError):
    """A recorded CSV table could not be parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str | PathLike] = None,
        line: Optional[int] = None,
    ):
        """Initialize the exception.

        Args:
            message: Description of the problem.
            path: The file being read.
            line: 1-based line number of the offending row, if known.
        """
        self.path = path
        self.line = line
        location = ""
        if path is not None:
            location = f"{path}"
            if line is not None:
                location += f":{line}"
            location += ": "
        self.message = f"{location}{message}"
        super().__init__(self.message)
