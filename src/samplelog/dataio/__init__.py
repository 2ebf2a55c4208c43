"""CSV input/output for recorded channel tables.

- :mod:`csv_writer` writes an ordered channel mapping to disk.
- :mod:`log_loader` reads such a file back into named float32 columns.
"""

from .csv_writer import format_value, write_channels, write_rows
from .log_loader import read_channels

__all__ = ["format_value", "read_channels", "write_channels", "write_rows"]
