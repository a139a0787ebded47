"""Logging setup for the car simulator.

Loggers are configured from a YAML file (or built-in defaults), write to the
console and to a combined log file, and can carry per-component levels.

Log file locations:
    - macOS: ~/Library/Logs/Motorcar/motorcar.log
    - Linux: ~/.motorcar/logs/motorcar.log
    - Windows: %AppData%/Motorcar/Logs/motorcar.log

The combined log is rotated once per launch, keeping the last few runs.

Typical usage example:
    from motorcar.core.logging_system import get_logger

    logger = get_logger(__name__)
    logger.info("Fuel level: %.3f", level)
"""

import logging
import os
import platform
import time
from pathlib import Path
from typing import Any

import yaml

_logging_config: dict[str, Any] = {}
_loggers_cache: dict[str, logging.Logger] = {}
_initialized = False


class LoggingError(Exception):
    """Raised when the logging configuration cannot be applied."""


def get_platform_log_dir() -> Path:
    """Return the directory where log files are written on this platform."""
    system = platform.system()

    if system == "Darwin":
        return Path.home() / "Library" / "Logs" / "Motorcar"
    if system == "Windows":
        appdata = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return appdata / "Motorcar" / "Logs"
    return Path.home() / ".motorcar" / "logs"


def rotate_logs(log_dir: Path, log_filename: str = "motorcar.log", keep_count: int = 5) -> None:
    """Shift existing logs one slot up, dropping anything past keep_count.

    motorcar.log becomes motorcar.log.1, motorcar.log.1 becomes
    motorcar.log.2, and so on.

    Args:
        log_dir: Directory containing log files.
        log_filename: Base name of the log file.
        keep_count: Number of previous logs to keep.
    """
    log_file = log_dir / log_filename
    if not log_file.exists():
        return

    oldest_log = log_dir / f"{log_filename}.{keep_count}"
    if oldest_log.exists():
        oldest_log.unlink()

    for i in range(keep_count - 1, 0, -1):
        old_log = log_dir / f"{log_filename}.{i}"
        if old_log.exists():
            old_log.rename(log_dir / f"{log_filename}.{i + 1}")

    log_file.rename(log_dir / f"{log_filename}.1")


def initialize_logging(config_path: str | Path | None = None, use_platform_dir: bool = True) -> None:
    """Configure the root logger.

    Call once at startup. Loggers requested before this call trigger an
    initialization with the default configuration.

    Args:
        config_path: YAML logging configuration. Defaults are used when None.
        use_platform_dir: Write logs to the platform log directory instead of
            the ``log_dir`` given in the configuration.

    Raises:
        LoggingError: If the configuration file is missing or invalid.
    """
    global _logging_config, _initialized

    previous_components = list(_logging_config.get("components") or {})

    if config_path:
        config_path = Path(config_path)
        if not config_path.exists():
            raise LoggingError(f"Logging config file not found: {config_path}")

        try:
            with config_path.open("r", encoding="utf-8") as f:
                _logging_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise LoggingError(f"Failed to load logging config: {e}") from e
    else:
        _logging_config = _get_default_config()

    if use_platform_dir:
        _logging_config["log_dir"] = str(get_platform_log_dir())

    log_dir = Path(_logging_config.get("log_dir", "logs"))
    combined = _logging_config.get("combined_log", {})
    if combined.get("enabled", True):
        log_dir.mkdir(parents=True, exist_ok=True)
        rotate_logs(
            log_dir,
            combined.get("filename", "motorcar.log"),
            combined.get("backup_count", 5),
        )

    _configure_root_logger()

    # Module loggers exist before this call, so component settings are
    # reset and re-applied on the logger objects themselves.
    for name in previous_components:
        logger = logging.getLogger(name)
        logger.setLevel(logging.NOTSET)
        logger.disabled = False
    _loggers_cache.clear()
    for name in _logging_config.get("components") or {}:
        _apply_component_config(logging.getLogger(name))

    _initialized = True


def _get_default_config() -> dict[str, Any]:
    return {
        "level": "INFO",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "date_format": "%Y-%m-%d %H:%M:%S",
        "log_dir": "logs",
        "combined_log": {
            "enabled": True,
            "filename": "motorcar.log",
            "backup_count": 5,
        },
        "console": {
            "enabled": True,
            "level": "WARNING",
        },
        "components": {},
    }


def _configure_root_logger() -> None:
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()

    console = _logging_config.get("console", {})
    if console.get("enabled", True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console.get("level", "INFO")))
        console_handler.setFormatter(_get_formatter())
        root_logger.addHandler(console_handler)

    combined = _logging_config.get("combined_log", {})
    if combined.get("enabled", True):
        log_dir = Path(_logging_config.get("log_dir", "logs"))
        # Rotation already happened in initialize_logging
        file_handler = logging.FileHandler(
            log_dir / combined.get("filename", "motorcar.log"),
            mode="w",
            encoding="utf-8",
        )
        file_handler.setLevel(getattr(logging, _logging_config.get("level", "DEBUG")))
        file_handler.setFormatter(_get_formatter())
        root_logger.addHandler(file_handler)


class MillisecondFormatter(logging.Formatter):
    """Formatter that appends milliseconds with a dot separator."""

    def formatTime(self, record, datefmt=None):
        ct = self.converter(record.created)
        s = time.strftime(datefmt or "%Y-%m-%d %H:%M:%S", ct)
        return f"{s}.{int(record.msecs):03d}"


def _get_formatter() -> logging.Formatter:
    fmt = _logging_config.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    datefmt = _logging_config.get("date_format", "%Y-%m-%d %H:%M:%S")
    return MillisecondFormatter(fmt, datefmt)


def get_logger(name: str) -> logging.Logger:
    """Get a cached logger for a component.

    A component can be given its own level, or be silenced, under the
    ``components`` section of the logging configuration:

        components:
          motorcar.systems.engine.simple:
            level: DEBUG
          motorcar.core.clock:
            enabled: false

    Args:
        name: Logger name, usually the module's ``__name__``.

    Returns:
        Configured logger instance.
    """
    if not _initialized:
        initialize_logging(use_platform_dir=True)

    if name in _loggers_cache:
        return _loggers_cache[name]

    logger = logging.getLogger(name)
    _apply_component_config(logger)

    _loggers_cache[name] = logger
    return logger


def _apply_component_config(logger: logging.Logger) -> None:
    component_config = (_logging_config.get("components") or {}).get(logger.name) or {}

    if component_config.get("enabled", True):
        if "level" in component_config:
            logger.setLevel(getattr(logging, component_config["level"]))
    else:
        logger.disabled = True


def shutdown_logging() -> None:
    """Flush and close all handlers."""
    global _initialized

    logging.shutdown()
    _loggers_cache.clear()
    _initialized = False
