"""
Runtime configuration for sentex.

Values come from (lowest to highest precedence) the built-in defaults, a JSON
config file (``$SENTEX_CONFIG`` or ``~/.sentex/config.json``) and the
``SENTEX_*`` environment variables.
"""

import json
import logging
import os
from pathlib import Path

from rich.logging import RichHandler

from .error_reporter import ConfigError

DEFAULT_SENTENCE = "Hello, world-wide communication technologies."

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

_DEFAULTS = {
    "enable_debug_logs": False,
    "log_level": "warning",
    "max_input_length": 1_000_000,
    "default_sentence": DEFAULT_SENTENCE,
}

_TRUTHY = {"1", "true", "yes", "on"}


def default_config_path():
    override = os.environ.get("SENTEX_CONFIG")
    if override:
        return Path(override)
    return Path.home() / ".sentex" / "config.json"


class SentexConfig:
    def __init__(self):
        self.reset()

    def reset(self):
        """Restore the built-in defaults, ignoring files and environment."""
        for key, value in _DEFAULTS.items():
            setattr(self, key, value)

    def load(self, path=None):
        """Apply a JSON config file, then environment overrides."""
        path = Path(path) if path else default_config_path()
        if path.exists():
            try:
                data = json.loads(path.read_text())
            except (OSError, ValueError) as e:
                raise ConfigError(f"Cannot read config file {path}: {e}")
            if not isinstance(data, dict):
                raise ConfigError(f"Config file {path} must hold a JSON object")
            self.update(data)
        self._apply_env()
        return self

    def update(self, values):
        for key, value in values.items():
            if key not in _DEFAULTS:
                raise ConfigError(f"Unknown config key: {key}")
            setattr(self, key, value)
        self._check()

    def _apply_env(self):
        env = os.environ
        if "SENTEX_DEBUG" in env:
            self.enable_debug_logs = env["SENTEX_DEBUG"].strip().lower() in _TRUTHY
        if "SENTEX_LOG_LEVEL" in env:
            self.log_level = env["SENTEX_LOG_LEVEL"].strip().lower()
        if "SENTEX_MAX_INPUT_LENGTH" in env:
            try:
                self.max_input_length = int(env["SENTEX_MAX_INPUT_LENGTH"])
            except ValueError:
                raise ConfigError("SENTEX_MAX_INPUT_LENGTH must be an integer")
        self._check()

    def _check(self):
        if self.log_level not in _LEVELS:
            raise ConfigError(
                f"Invalid log_level {self.log_level!r}; expected one of {', '.join(_LEVELS)}"
            )
        if not isinstance(self.max_input_length, int) or self.max_input_length < 0:
            raise ConfigError("max_input_length must be a non-negative integer")

    @property
    def effective_level(self):
        if self.enable_debug_logs:
            return logging.DEBUG
        return _LEVELS[self.log_level]

    def should_log(self, level):
        return _LEVELS.get(level, logging.DEBUG) >= self.effective_level

    def to_dict(self):
        return {key: getattr(self, key) for key in _DEFAULTS}


config = SentexConfig()


def debug_log(logger, message, *args):
    """Emit a debug record only when the config asks for debug output."""
    if config.should_log("debug"):
        logger.debug(message, *args)


def configure_logging(console=None):
    """Attach a RichHandler to the ``sentex`` logger at the configured level."""
    logger = logging.getLogger("sentex")
    logger.setLevel(config.effective_level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=console, show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
    return logger
