"""CSV writing helpers for recorded channel tables."""

import csv
import logging
import os
from itertools import zip_longest
from pathlib import Path
from typing import Any, Iterable, Mapping, Sequence

import numpy as np

logger = logging.getLogger(__name__)

LINE_TERMINATOR = "\n"


def format_value(value: float) -> str:
    """Return the shortest decimal text that round-trips ``value`` as float32."""
    return str(np.float32(value))


def write_rows(
    path: Path, headers: Sequence[str], rows: Iterable[Sequence[Any]]
) -> None:
    """
    Write a header row and all data rows to a CSV file.

    Directories are created as needed. The file is truncated first.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as csvfile:
        writer = csv.writer(csvfile, lineterminator=LINE_TERMINATOR)
        writer.writerow(headers)
        writer.writerows(rows)


def write_channels(
    path: str | os.PathLike, channels: Mapping[str, Sequence[float]]
) -> None:
    """
    Write ``channels`` as a table with one column per channel.

    Columns follow the mapping order. Row ``i`` holds the ``i``-th value of
    every channel; a channel shorter than the longest one gets empty fields
    for the rows it lacks. An empty mapping produces an empty file.
    """
    path = Path(path)
    if not channels:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("", encoding="utf-8")
        logger.debug("Wrote empty channel table to %s", path)
        return

    headers = list(channels.keys())
    formatted = [
        [format_value(value) for value in values] for values in channels.values()
    ]
    rows = zip_longest(*formatted, fillvalue="")
    write_rows(path, headers, rows)
    logger.debug(
        "Wrote %d channel(s) x %d row(s) to %s",
        len(headers),
        max(len(column) for column in formatted),
        path,
    )
