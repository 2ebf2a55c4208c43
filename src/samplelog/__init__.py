"""Record internal values of a real-time processing loop, sample by sample.

Typical use inside an audio plugin::

    log = samplelog.SampleLogger("debug.csv")
    log.set_stop_after(48000)
    for x in block:
        y = process(x)
        log.record("sample", x)
        log.record("output", y)
    log.flush()

The resulting CSV has one column per channel and one row per sample;
:func:`read_channels` loads it back for plotting elsewhere.

The structure of this package is as follows:
 - :mod:`samplelog.core` holds the recorder, its no-op twin and the channel
   table.
 - :mod:`samplelog.dataio` writes and reads the CSV tables.
 - :mod:`samplelog.config` loads session settings and the disable switch.

Importing with ``SAMPLELOG_DISABLED=1`` binds :data:`SampleLogger` to
:class:`NullSampleLogger`, leaving call sites in place at no cost.
"""

from .config import SampleLogConfig, load_config, recording_disabled
from .core import NullSampleLogger, select_logger_class
from .dataio import read_channels, write_channels
from .errors import ImbalanceError, SampleLogError, TableParseError

SampleLogger = select_logger_class(recording_disabled())

__all__ = [
    "ImbalanceError",
    "NullSampleLogger",
    "SampleLogConfig",
    "SampleLogError",
    "SampleLogger",
    "TableParseError",
    "load_config",
    "read_channels",
    "write_channels",
]
