"""Per-sample recorder for values observed inside a processing loop."""

from __future__ import annotations

import logging
import operator
import os
from pathlib import Path
from typing import Dict, List, Optional

import numpy as np

from ..config.runtime import SampleLogConfig
from ..dataio import csv_writer
from .channel_table import SAMPLE_CHANNEL, ChannelTable

logger = logging.getLogger(__name__)


class SampleLogger:
    """
    Record named values every sample and write them to a CSV table.

    Each processing step records one value per channel, and at least one
    channel must be named ``sample``: every write to it counts as one sample
    and drives the optional stop threshold. Call :meth:`flush` on shutdown
    (or use the logger as a context manager) to write the table.

    Every :meth:`record` call re-checks that all channels hold ``n`` or
    ``n + 1`` values, so a misaligned call site fails where it happens
    rather than at flush time.

    Not thread-safe: record from the thread that runs the processing.

    Importing :mod:`samplelog` with the ``SAMPLELOG_DISABLED`` environment
    variable set binds ``samplelog.SampleLogger`` to
    :class:`~samplelog.core.disabled.NullSampleLogger` instead, so the call
    sites stay in place and cost nothing. The variable is read once, at
    import time.
    """

    def __init__(self, output_path: str | os.PathLike) -> None:
        self.output_path = Path(output_path)
        self._table = ChannelTable()
        self._samples_seen = 0
        self._stop_after: Optional[int] = None

    @classmethod
    def from_config(cls, config: SampleLogConfig) -> SampleLogger:
        """Build a logger from a loaded :class:`SampleLogConfig`."""
        sample_logger = cls(config.output_path)
        if config.stop_after is not None:
            sample_logger.set_stop_after(config.stop_after)
        return sample_logger

    # ----------------------------------------------------------------- control
    def set_stop_after(self, samples: int) -> None:
        """
        Stop recording once ``samples`` writes to ``sample`` have been seen.

        Useful to keep the table small when processing long inputs. Takes
        effect on the next :meth:`record` call.

        Raises:
            TypeError: ``samples`` is not an integer.
            ValueError: ``samples`` is negative.
        """
        if isinstance(samples, bool):
            raise TypeError(f"stop threshold must be an integer, got {samples!r}")
        samples = operator.index(samples)
        if samples < 0:
            raise ValueError(f"stop threshold must be non-negative, got {samples}")
        self._stop_after = samples

    def is_active(self) -> bool:
        """Return True while values are still being recorded."""
        if self._stop_after is None:
            return True
        return self._samples_seen < self._stop_after

    @property
    def samples_seen(self) -> int:
        return self._samples_seen

    @property
    def stop_after(self) -> Optional[int]:
        return self._stop_after

    # ----------------------------------------------------------------- record
    def record(self, channel: str, value: float) -> None:
        """
        Append ``value`` to ``channel``, creating the channel on first use.

        Does nothing once the stop threshold has been reached.

        Raises:
            ImbalanceError: the write left the channels misaligned. The value
                stays recorded, so the session should not record further.
            ValueError: ``channel`` is not a non-empty string.
            TypeError: ``value`` is not a real number.
            OverflowError: ``value`` does not fit in a float32.
        """
        if not self.is_active():
            return
        if not isinstance(channel, str) or not channel:
            raise ValueError(f"channel name must be a non-empty string, got {channel!r}")

        if self._table.append(channel, value):
            logger.debug("New channel %r (column %d)", channel, len(self._table))

        if channel == SAMPLE_CHANNEL:
            self._samples_seen += 1
            if not self.is_active():
                logger.info(
                    "Stop threshold reached after %d samples; recording is now inactive",
                    self._samples_seen,
                )

        self._table.check_balance(channel)

    # ------------------------------------------------------------------ query
    def channel_names(self) -> List[str]:
        """Return channel names in column order."""
        return self._table.names()

    def snapshot(self) -> Dict[str, np.ndarray]:
        """Return float32 copies of the recorded channels, in column order."""
        return self._table.snapshot()

    # ------------------------------------------------------------------ flush
    def flush(self) -> None:
        """
        Write the whole table to :attr:`output_path`, replacing the file.

        Recorded state is kept, so later flushes write the grown table.

        Raises:
            ImbalanceError: the table is misaligned; nothing is written.
            OSError: the destination cannot be created or written.
        """
        self._table.check_balance()
        csv_writer.write_channels(self.output_path, dict(self._table.columns()))
        logger.info(
            "Flushed %d channel(s), %d sample(s) to %s",
            len(self._table),
            self._table.max_length(),
            self.output_path,
        )

    def __enter__(self) -> SampleLogger:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.flush()
