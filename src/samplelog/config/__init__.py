"""Configuration objects and switches for samplelog.

- :mod:`runtime` loads a YAML description of a recording session
  (output path, stop threshold) into :class:`SampleLogConfig`.
- :mod:`switches` holds the import-time flag that turns every recorder into
  a no-op.
"""

from .runtime import SampleLogConfig, config_from_mapping, load_config
from .switches import DISABLE_ENV_VAR, recording_disabled

__all__ = [
    "DISABLE_ENV_VAR",
    "SampleLogConfig",
    "config_from_mapping",
    "load_config",
    "recording_disabled",
]
