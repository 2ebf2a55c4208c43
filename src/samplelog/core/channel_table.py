"""Ordered table of named channels kept aligned sample-by-sample."""

from __future__ import annotations

import math
import numbers
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

from ..errors import ImbalanceError

SAMPLE_CHANNEL = "sample"

ChannelName = str


def to_float32(value: float) -> float:
    """
    Round ``value`` to single precision.

    Raises:
        TypeError: ``value`` is not a real number (``None``, strings and
            booleans included).
        OverflowError: a finite ``value`` is outside the float32 range.
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise TypeError(f"value must be a real number, got {value!r}")
    with np.errstate(over="ignore"):
        stored = float(np.float32(value))
    if math.isinf(stored) and math.isfinite(value):
        raise OverflowError(f"value {value!r} is outside the float32 range")
    return stored


class ChannelTable:
    """
    Mapping of channel name -> recorded float32 values.

    Columns keep the order in which their names were first seen; that order
    is the column order on disk. Channels are never removed.
    """

    def __init__(self) -> None:
        self._columns: Dict[ChannelName, List[float]] = {}

    def append(self, channel: ChannelName, value: float) -> bool:
        """Append ``value`` to ``channel``; return True if the channel is new."""
        stored = to_float32(value)
        column = self._columns.get(channel)
        created = column is None
        if column is None:
            column = []
            self._columns[channel] = column
        column.append(stored)
        return created

    # ------------------------------------------------------------------- query
    def names(self) -> List[ChannelName]:
        return list(self._columns.keys())

    def lengths(self) -> Dict[ChannelName, int]:
        return {name: len(values) for name, values in self._columns.items()}

    def max_length(self) -> int:
        return max((len(values) for values in self._columns.values()), default=0)

    def columns(self) -> Iterator[Tuple[ChannelName, List[float]]]:
        """Iterate (name, values) pairs in column order without copying."""
        return iter(self._columns.items())

    def snapshot(self) -> Dict[ChannelName, np.ndarray]:
        """Return float32 copies of every column, in column order."""
        return {
            name: np.asarray(values, dtype=np.float32)
            for name, values in self._columns.items()
        }

    def __contains__(self, channel: object) -> bool:
        return channel in self._columns

    def __len__(self) -> int:
        return len(self._columns)

    # -------------------------------------------------------------- invariants
    def check_balance(self, channel: Optional[ChannelName] = None) -> None:
        """
        Raise :class:`ImbalanceError` unless the table is almost square.

        Every column must hold ``n`` or ``n + 1`` values for a common ``n``,
        and once any column holds two values a ``sample`` column must exist.
        ``channel`` names the write being validated, for the error report.
        """
        if not self._columns:
            return

        lengths = self.lengths()
        shortest = min(lengths.values())
        longest = max(lengths.values())

        if longest - shortest > 1:
            raise ImbalanceError(
                f"Channel lengths diverge by more than one sample "
                f"(shortest {shortest}, longest {longest}).",
                channel=channel,
                lengths=lengths,
            )

        if longest >= 2 and SAMPLE_CHANNEL not in self._columns:
            raise ImbalanceError(
                f"A second sample round was recorded but no '{SAMPLE_CHANNEL}' "
                f"channel is present (channels: {', '.join(lengths)}).",
                channel=channel,
                lengths=lengths,
            )
