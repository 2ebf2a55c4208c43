import os
import pathlib
import subprocess
import sys

import pytest

import samplelog
from samplelog.config.switches import recording_disabled
from samplelog.core import NullSampleLogger, SampleLogger, select_logger_class


def test_select_logger_class() -> None:
    assert select_logger_class(True) is NullSampleLogger
    assert select_logger_class(False) is SampleLogger


def test_disabled_logger_keeps_no_state(tmp_path) -> None:
    out = tmp_path / "out.csv"
    sample_logger = NullSampleLogger(out)
    sample_logger.set_stop_after(1)

    # Would be an imbalance for the real logger.
    for _ in range(3):
        sample_logger.record("a", 1.0)

    assert sample_logger.channel_names() == []
    assert sample_logger.snapshot() == {}
    assert sample_logger.samples_seen == 0
    assert not sample_logger.is_active()


def test_disabled_logger_flush_never_touches_disk(tmp_path) -> None:
    out = tmp_path / "missing_dir" / "out.csv"
    with NullSampleLogger(out) as sample_logger:
        sample_logger.record("sample", 1.0)
    sample_logger.flush()

    assert not out.parent.exists()


@pytest.mark.skipif(recording_disabled(), reason="imported with SAMPLELOG_DISABLED set")
def test_package_exports_real_logger_by_default() -> None:
    assert samplelog.SampleLogger is SampleLogger


def test_environment_switch_binds_null_logger() -> None:
    src = str(pathlib.Path(__file__).resolve().parents[1] / "src")
    pythonpath = os.pathsep.join(filter(None, [src, os.environ.get("PYTHONPATH")]))
    env = dict(os.environ, SAMPLELOG_DISABLED="1", PYTHONPATH=pythonpath)
    code = "import samplelog; print(samplelog.SampleLogger.__name__)"
    result = subprocess.run(
        [sys.executable, "-c", code],
        env=env,
        capture_output=True,
        text=True,
        check=True,
    )

    assert result.stdout.strip() == "NullSampleLogger"
