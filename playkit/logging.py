"""
Playkit logging.

Two channels:

- Console loggers: ``get_logger('breakout.simulation')`` returns a cached
  logger that prints ``[module] LEVEL: message`` when the module's level
  allows it.
- Session records: ``emit_record('session', {...})`` hands a JSON-ready
  dict to the sink registered for that channel. The launcher registers a
  JSONL FileSink when the channel is switched on, a NullSink otherwise.

Environment:
    BREAKOUT_LOG_LEVEL=DEBUG                 default console level
    BREAKOUT_LOG_BREAKOUT_SIMULATION=TRACE   level for one module
    BREAKOUT_LOG_DIR=/tmp/breakout-logs      where FileSink writes
    BREAKOUT_LOGGING_SESSION_ENABLED=true    record the 'session' channel
"""

import json
import os
import time
from abc import ABC, abstractmethod
from enum import IntEnum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO

LEVEL_PREFIX = 'BREAKOUT_LOG_'
CHANNEL_PREFIX = 'BREAKOUT_LOGGING_'


class LogLevel(IntEnum):
    """Console levels; OFF silences a module entirely."""
    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    OFF = 100


# =============================================================================
# Settings
# =============================================================================

_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},  # module key -> LogLevel
    'log_dir': None,
    'channels': {},       # channel -> nested settings from BREAKOUT_LOGGING_*
}


def _module_key(module: str) -> str:
    return module.lower().replace('.', '_')


def _level_from_string(name: str) -> LogLevel:
    """Level by name; unknown names mean INFO."""
    try:
        return LogLevel[name.upper()]
    except KeyError:
        return LogLevel.INFO


def _parse_env_value(raw: str) -> Any:
    """Turn an env string into a bool, int, float or leave it as text."""
    lowered = raw.lower()
    if lowered in ('true', 'yes', 'on', '1'):
        return True
    if lowered in ('false', 'no', 'off', '0'):
        return False
    for cast in (int, float):
        try:
            return cast(raw)
        except ValueError:
            continue
    return raw


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
    log_dir: Optional[str] = None,
) -> None:
    """Set the default console level, per-module levels and the record directory."""
    _config['default_level'] = _level_from_string(level)
    for module, module_level in (modules or {}).items():
        _config['module_levels'][_module_key(module)] = _level_from_string(module_level)
    if log_dir is not None:
        _config['log_dir'] = log_dir


def disable_logging() -> None:
    """Silence every console logger without a module override."""
    _config['default_level'] = LogLevel.OFF


def _load_env_config() -> None:
    """Apply BREAKOUT_LOG_* levels and BREAKOUT_LOGGING_* channel settings."""
    for key, value in os.environ.items():
        if key.startswith(CHANNEL_PREFIX):
            path = key[len(CHANNEL_PREFIX):].lower().split('_')
            if len(path) < 2:
                continue
            node = _config['channels'].setdefault(path[0], {})
            for part in path[1:-1]:
                node = node.setdefault(part, {})
            node[path[-1]] = _parse_env_value(value)
        elif key == 'BREAKOUT_LOG_LEVEL':
            _config['default_level'] = _level_from_string(value)
        elif key == 'BREAKOUT_LOG_DIR':
            _config['log_dir'] = value
        elif key.startswith(LEVEL_PREFIX):
            _config['module_levels'][key[len(LEVEL_PREFIX):].lower()] = _level_from_string(value)


_load_env_config()


def get_module_config(channel: str) -> Dict[str, Any]:
    """Settings for a record channel, e.g. ``{'enabled': True}``."""
    return _config['channels'].get(channel.lower(), {})


def get_log_dir() -> str:
    """Record directory: the configured one, else $XDG_DATA_HOME/breakout/logs."""
    if _config['log_dir']:
        return str(Path(_config['log_dir']).expanduser())
    data_home = os.environ.get('XDG_DATA_HOME') or str(Path.home() / '.local' / 'share')
    return str(Path(data_home) / 'breakout' / 'logs')


# =============================================================================
# Session records
# =============================================================================

class LogSink(ABC):
    """Destination for structured records."""

    @abstractmethod
    def emit(self, channel: str, record: Dict[str, Any]) -> None:
        """Write one record."""

    @abstractmethod
    def close(self) -> None:
        """Release whatever the sink holds open."""


class FileSink(LogSink):
    """One JSONL file per channel, bracketed by 'header' and 'footer' records.

    Files are named ``<session_name>_<channel>.jsonl`` and are opened on the
    first record, so an unused sink never touches the disk.
    """

    def __init__(self, log_dir: Optional[str] = None, session_name: Optional[str] = None):
        self._log_dir = log_dir
        self.session_name = session_name or time.strftime('%Y%m%d_%H%M%S')
        self._files: Dict[str, TextIO] = {}

    def path_for(self, channel: str) -> Path:
        directory = Path(self._log_dir or get_log_dir())
        return directory / f"{self.session_name}_{_module_key(channel)}.jsonl"

    def _write(self, channel: str, record: Dict[str, Any]) -> None:
        handle = self._files.get(channel)
        if handle is None:
            path = self.path_for(channel)
            path.parent.mkdir(parents=True, exist_ok=True)
            handle = self._files[channel] = open(path, 'a')
            handle.write(json.dumps({
                'type': 'header',
                'channel': channel,
                'session_name': self.session_name,
                'wall_time': time.time(),
            }) + '\n')
        handle.write(json.dumps(record) + '\n')

    def emit(self, channel: str, record: Dict[str, Any]) -> None:
        self._write(channel, {'wall_time': time.time(), **record})

    def close(self) -> None:
        for channel, handle in self._files.items():
            handle.write(json.dumps({'type': 'footer', 'wall_time': time.time()}) + '\n')
            handle.close()
        self._files.clear()


class NullSink(LogSink):
    """Drops every record."""

    def emit(self, channel: str, record: Dict[str, Any]) -> None:
        pass

    def close(self) -> None:
        pass


_sinks: Dict[str, LogSink] = {}


def register_sink(channel: str, sink: LogSink) -> None:
    _sinks[channel] = sink


def emit_record(channel: str, record: Dict[str, Any]) -> bool:
    """Send a record to the channel's sink.

    Returns:
        False when no sink is registered for the channel
    """
    sink = _sinks.get(channel)
    if sink is None:
        return False
    sink.emit(channel, record)
    return True


def close_all_sinks() -> None:
    """Close and unregister every sink."""
    sinks: List[LogSink] = list(_sinks.values())
    _sinks.clear()
    for sink in sinks:
        sink.close()


def create_sink_for_environment(channel: str, session_name: Optional[str] = None) -> LogSink:
    """FileSink if BREAKOUT_LOGGING_<CHANNEL>_ENABLED is set, NullSink otherwise."""
    if get_module_config(channel).get('enabled', False):
        return FileSink(session_name=session_name)
    return NullSink()


# =============================================================================
# Console loggers
# =============================================================================

class PlaykitLogger:
    """Prints messages for one module; the level is looked up on every call."""

    def __init__(self, module: str):
        self.module = module
        self._key = _module_key(module)

    @property
    def level(self) -> LogLevel:
        return _config['module_levels'].get(self._key, _config['default_level'])

    def _log(self, level: LogLevel, msg: str, args: tuple) -> None:
        if level < self.level:
            return
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"
        print(f"[{self.module}] {level.name}: {msg}")

    def debug(self, msg: str, *args) -> None:
        self._log(LogLevel.DEBUG, msg, args)

    def info(self, msg: str, *args) -> None:
        self._log(LogLevel.INFO, msg, args)

    def warning(self, msg: str, *args) -> None:
        self._log(LogLevel.WARNING, msg, args)


@lru_cache(maxsize=64)
def get_logger(module: str) -> PlaykitLogger:
    """Cached logger for `module` (e.g. 'breakout.session')."""
    return PlaykitLogger(module)
