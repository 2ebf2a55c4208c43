"""No-op stand-in for :class:`SampleLogger` when recording is switched off."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, List, Optional

import numpy as np

from ..config.runtime import SampleLogConfig


class NullSampleLogger:
    """
    Same interface as :class:`~samplelog.core.recorder.SampleLogger`, no work.

    Keeps no table and never touches the file system, so instrumented call
    sites cost one method call each. :meth:`is_active` reports False so call
    sites can skip computing values that would be discarded.
    """

    def __init__(self, output_path: str | os.PathLike) -> None:
        self.output_path = Path(output_path)

    @classmethod
    def from_config(cls, config: SampleLogConfig) -> NullSampleLogger:
        return cls(config.output_path)

    def set_stop_after(self, samples: int) -> None:
        pass

    def is_active(self) -> bool:
        return False

    @property
    def samples_seen(self) -> int:
        return 0

    @property
    def stop_after(self) -> Optional[int]:
        return None

    def record(self, channel: str, value: float) -> None:
        pass

    def channel_names(self) -> List[str]:
        return []

    def snapshot(self) -> Dict[str, np.ndarray]:
        return {}

    def flush(self) -> None:
        pass

    def __enter__(self) -> NullSampleLogger:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        pass
