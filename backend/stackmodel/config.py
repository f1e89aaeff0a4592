"""stackmodel configuration.

Loads settings from a single YAML file, ``stackmodel.settings.yaml`` in the
working directory unless ``STACKMODEL_SETTINGS`` points elsewhere:

    capture:
      stack_trace_limit: null     # null = never truncate the host stack
      skip_internal_frames: true
    parser:
      max_eval_depth: 256
    logging:
      level: info

Settings are process-wide. Call :func:`configure` once at start-up; code that
only reads settings uses :func:`get_config`, which loads the file lazily.
"""
from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, Field, field_validator

from .parser.eval_descriptor import DEFAULT_MAX_EVAL_DEPTH, MAX_EVAL_DEPTH_LIMIT

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

SETTINGS_FILE = Path("stackmodel.settings.yaml")
SETTINGS_ENV_VAR = "STACKMODEL_SETTINGS"

_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        logger.warning("Config file not found: %s", path)
        return {}
    with path.open(encoding="utf-8") as fh:
        return yaml.safe_load(fh) or {}


# ---------------------------------------------------------------------------
# Settings models
# ---------------------------------------------------------------------------


class CaptureSettings(BaseModel):
    """How the interpreter's own stack is rendered for new errors."""
    stack_trace_limit:    Optional[int] = None
    skip_internal_frames: bool          = True

    @field_validator("stack_trace_limit")
    @classmethod
    def _non_negative(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 0:
            raise ValueError("stack_trace_limit must be >= 0 or null")
        return value


class ParserSettings(BaseModel):
    max_eval_depth: int = Field(default=DEFAULT_MAX_EVAL_DEPTH, ge=1, le=MAX_EVAL_DEPTH_LIMIT)


class LoggingSettings(BaseModel):
    level: str = "info"

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        if value.lower() not in _LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return value.lower()


class StackModelConfig(BaseModel):
    capture: CaptureSettings = Field(default_factory=CaptureSettings)
    parser:  ParserSettings  = Field(default_factory=ParserSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# ---------------------------------------------------------------------------
# Public loader
# ---------------------------------------------------------------------------


def load_config(settings_path: Optional[Union[str, Path]] = None) -> StackModelConfig:
    """Load a :class:`StackModelConfig` from YAML.

    Args:
        settings_path: Explicit settings file. Defaults to the
            ``STACKMODEL_SETTINGS`` env var, then ``stackmodel.settings.yaml``.
            A missing file yields the defaults.
    """
    if settings_path is None:
        settings_path = os.environ.get(SETTINGS_ENV_VAR) or SETTINGS_FILE
    config = StackModelConfig(**_load_yaml(Path(settings_path)))
    logger.debug(
        "Settings loaded (stack_trace_limit=%s, max_eval_depth=%s)",
        config.capture.stack_trace_limit,
        config.parser.max_eval_depth,
    )
    return config


_config: Optional[StackModelConfig] = None
_configured = False
_lock = threading.Lock()


def configure(
    config: Optional[StackModelConfig] = None,
    *,
    settings_path: Optional[Union[str, Path]] = None,
) -> StackModelConfig:
    """Install the process-wide settings. Call once, at process start.

    Raises:
        RuntimeError: :func:`configure` was already called.
    """
    global _config, _configured
    with _lock:
        if _configured:
            raise RuntimeError("stackmodel is already configured")
        if config is None:
            config = load_config(settings_path)
        _config = config
        _configured = True

    level = getattr(logging, config.logging.level.upper())
    logging.getLogger("stackmodel").setLevel(level)
    logger.info(
        "stackmodel configured (stack_trace_limit=%s, log level %s)",
        config.capture.stack_trace_limit,
        config.logging.level.upper(),
    )
    return config


def get_config() -> StackModelConfig:
    """Return the active settings, loading them on first use."""
    global _config
    with _lock:
        if _config is None:
            _config = load_config()
        return _config


def reset_config() -> None:
    """Forget the active settings. Intended for tests."""
    global _config, _configured
    with _lock:
        _config = None
        _configured = False
