"""Utilities for loading recorded CSV channel tables."""

import csv
import logging
import os
import re
from pathlib import Path
from typing import Dict, List, Sequence

import numpy as np

from ..errors import TableParseError

logger = logging.getLogger(__name__)

# Decimal or exponent notation, plus the inf/nan spellings the writer emits.
# No padding, underscores or alternative spellings such as "Infinity".
_FLOAT_RE = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?|-?inf|nan")


def _parse_header(fields: Sequence[str], path: Path) -> List[str]:
    names = list(fields)
    if not names:
        raise TableParseError("malformed header: empty header row", path=path, line=1)
    if any(not name for name in names):
        raise TableParseError("malformed header: empty channel name", path=path, line=1)
    seen = set()
    for name in names:
        if name in seen:
            raise TableParseError(
                f"malformed header: duplicate channel {name!r}", path=path, line=1
            )
        seen.add(name)
    return names


def _parse_field(text: str, channel: str, path: Path, line: int) -> float:
    if _FLOAT_RE.fullmatch(text) is None:
        raise TableParseError(
            f"channel {channel!r}: cannot parse {text!r} as a float",
            path=path,
            line=line,
        )
    return float(text)


def read_channels(
    path: str | os.PathLike, *, allow_trailing_blanks: bool = True
) -> Dict[str, np.ndarray]:
    """
    Load a recorded table into ``{channel: float32 array}``, in header order.

    This is the inverse of :func:`samplelog.dataio.csv_writer.write_channels`.
    Blank fields mean "no value yet" and are accepted only on the final row,
    where they shorten that channel by one. With ``allow_trailing_blanks``
    off every field must hold a number.

    Raises:
        TableParseError: missing or malformed header, ragged rows, blank or
            non-numeric fields. No partial result is returned.
        OSError: the file cannot be opened or read.
    """
    path = Path(path)
    try:
        with path.open("r", newline="", encoding="utf-8") as f:
            rows = list(csv.reader(f))
    except UnicodeDecodeError as exc:
        raise TableParseError(f"not valid UTF-8 ({exc.reason})", path=path) from exc
    except csv.Error as exc:
        raise TableParseError(f"malformed CSV: {exc}", path=path) from exc

    if not rows:
        raise TableParseError("file has no header", path=path)

    names = _parse_header(rows[0], path)
    columns: Dict[str, List[float]] = {name: [] for name in names}
    last_line = len(rows)

    for line, fields in enumerate(rows[1:], start=2):
        if len(fields) != len(names):
            raise TableParseError(
                f"expected {len(names)} field(s), found {len(fields)}",
                path=path,
                line=line,
            )
        for name, text in zip(names, fields):
            if text == "":
                if allow_trailing_blanks and line == last_line:
                    continue
                raise TableParseError(
                    f"channel {name!r}: blank field", path=path, line=line
                )
            columns[name].append(_parse_field(text, name, path, line))

    logger.debug(
        "Read %d row(s) of %d channel(s) from %s", last_line - 1, len(names), path
    )
    return {
        name: np.asarray(values, dtype=np.float32) for name, values in columns.items()
    }
