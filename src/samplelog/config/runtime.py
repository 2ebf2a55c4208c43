"""Runtime configuration for a recording session."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_PATH = Path("samplelog.csv")
SECTION_KEY = "samplelog"


@dataclass(frozen=True, slots=True)
class SampleLogConfig:
    """
    Where a recorder writes its table and when it stops recording.

    ``stop_after`` of ``None`` records until the process flushes.
    """

    output_path: Path = DEFAULT_OUTPUT_PATH
    stop_after: int | None = None


def _parse_output_path(raw: Any, base_dir: Path | None) -> Path:
    if not isinstance(raw, (str, os.PathLike)) or not str(raw):
        raise ValueError(f"output_path must be a non-empty path, got {raw!r}")
    path = Path(raw).expanduser()
    # Relative paths in a file are taken relative to that file.
    if base_dir is not None and not path.is_absolute():
        path = base_dir / path
    return path


def _parse_stop_after(raw: Any) -> int | None:
    if raw is None:
        return None
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise ValueError(f"stop_after must be an integer or null, got {raw!r}")
    if raw < 0:
        raise ValueError(f"stop_after must be non-negative, got {raw}")
    return raw


def config_from_mapping(
    data: Mapping[str, Any] | None, *, base_dir: Path | None = None
) -> SampleLogConfig:
    """
    Build :class:`SampleLogConfig` from ``data``.

    Settings are read from a ``samplelog:`` block when present, else from the
    top level, so the recorder settings can live inside a larger plugin
    config. Other keys are ignored; missing keys keep their defaults.

    Raises:
        ValueError: a recognized setting has the wrong type or range.
    """
    if not data:
        return SampleLogConfig()
    section = data.get(SECTION_KEY, data)
    if not isinstance(section, Mapping):
        raise ValueError(
            f"'{SECTION_KEY}' must be a mapping, got {type(section).__name__}"
        )

    output_path = DEFAULT_OUTPUT_PATH
    if "output_path" in section:
        output_path = _parse_output_path(section["output_path"], base_dir)
    return SampleLogConfig(
        output_path=output_path,
        stop_after=_parse_stop_after(section.get("stop_after")),
    )


def load_config(path: str | Path | None) -> SampleLogConfig:
    """
    Load configuration from a YAML file at ``path``.

    ``None`` gives the default :class:`SampleLogConfig`. A relative
    ``output_path`` in the file is resolved against the file's directory.

    Raises:
        FileNotFoundError: ``path`` was given but does not exist.
        ValueError: the document is not a mapping or holds invalid settings.
    """
    if path is None:
        return SampleLogConfig()
    cfg_path = Path(path).expanduser()
    with cfg_path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh) or {}
    if not isinstance(raw, Mapping):
        raise ValueError(f"Expected mapping in {cfg_path}, got {type(raw).__name__}")
    try:
        config = config_from_mapping(raw, base_dir=cfg_path.parent)
    except ValueError as exc:
        raise ValueError(f"{cfg_path}: {exc}") from exc
    logger.debug("Loaded %s from %s", config, cfg_path)
    return config


__all__ = ["DEFAULT_OUTPUT_PATH", "SampleLogConfig", "config_from_mapping", "load_config"]
