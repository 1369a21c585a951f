"""
NetWarden Structured Logger
============================

Provides :class:`WardenLogger`, a structured logging facade that emits
human-friendly Rich console output and, optionally, machine-parseable
JSON lines to a rotating log file.

Validators report every rejection through this facade. The failing
sub-check travels as structured context (``field``, ``bound``,
``value`` / ``length``) so that the diagnostic is both readable on the
console and queryable in the JSON log.

References:
    - Python logging HOWTO. https://docs.python.org/3/howto/logging.html
    - Rich library. https://github.com/Textualize/rich
"""

from __future__ import annotations

import contextvars
import json
import logging
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

_LOG_THEME = Theme(
    {
        "log.level.debug": "dim cyan",
        "log.level.info": "bold bright_blue",
        "log.level.warning": "bold yellow",
        "log.level.error": "bold red",
        "log.level.critical": "bold white on red",
    }
)

_ROOT_NAME = "netwarden"

# Every WardenLogger ever created, keyed by component name.
_REGISTRY: dict[str, WardenLogger] = {}

# Operation bound by the innermost active ``WardenLogger.operation()`` scope.
# Shared by all components; isolated per thread and per asyncio task.
_CURRENT_OPERATION: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "netwarden_operation", default=None
)


# ========================== JSON Formatter =================================


class _JSONFormatter(logging.Formatter):
    """Emit each log record as a single-line JSON object.

    Output fields::

        {
          "timestamp": "...",
          "level": "ERROR",
          "logger": "netwarden.warden.validators.fields",
          "message": "...",
          "component": "warden.validators.fields",
          "operation": "validate_configuration",
          "extra": {"field": "ssid", "bound": 34, "length": 40}
        }
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for attr in ("component", "operation"):
            val = getattr(record, attr, None)
            if val is not None:
                entry[attr] = val

        extra = getattr(record, "warden_extra", None)
        if extra is not None:
            entry["extra"] = extra

        if record.exc_info and record.exc_info[1] is not None:
            entry["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(entry, ensure_ascii=False, default=str)


class _PlainFormatter(logging.Formatter):
    """Plain-text file format that appends the structured context."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extra = getattr(record, "warden_extra", None)
        if extra:
            pairs = " ".join(f"{k}={v!r}" for k, v in extra.items())
            line = f"{line} | {pairs}"
        return line


# ========================== Rich Console Handler ===========================


class _ColorConsoleHandler(RichHandler):
    """Thin wrapper over :class:`rich.logging.RichHandler` applying the
    NetWarden theme on stderr.
    """

    def __init__(self, **kwargs: Any) -> None:
        console = Console(theme=_LOG_THEME, stderr=True)
        super().__init__(
            console=console,
            show_path=False,
            show_time=True,
            rich_tracebacks=True,
            tracebacks_show_locals=False,
            markup=False,
            **kwargs,
        )


_FILE_HANDLERS: dict[tuple[str, bool], RotatingFileHandler] = {}


def _shared_file_handler(
    path: Path, json_logs: bool, max_bytes: int, backup_count: int
) -> RotatingFileHandler:
    """Return the single rotating handler for *path*, creating it once."""
    key = (str(path.resolve()), json_logs)
    handler = _FILE_HANDLERS.get(key)
    if handler is None:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            filename=str(path),
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        handler.setFormatter(_JSONFormatter() if json_logs else _PlainFormatter())
        _FILE_HANDLERS[key] = handler
    return handler


# ========================== WardenLogger ===================================


class WardenLogger:
    """Structured, context-aware logger for NetWarden components.

    Each instance is bound to a *component* name (e.g.
    ``"warden.validators.fields"``) and can carry a temporary
    *operation* context via a context manager.

    Usage::

        log = WardenLogger("warden.validators.fields")
        log.error("SSID too long", field="ssid", bound=34, length=40)
        with log.operation("validate_configuration"):
            log.debug("Checking bitsets")

    Args:
        component:       Identifying name for the NetWarden component.
        log_level:       Minimum severity (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file:        Path to the rotating log file. ``None`` disables file logging.
        json_logs:       If ``True`` the file handler emits JSON lines.
        max_bytes:       Maximum log-file size before rotation (default 10 MiB).
        backup_count:    Number of rotated backup files to keep.
        console_output:  If ``True`` attach a colour Rich console handler.
    """

    def __init__(
        self,
        component: str,
        *,
        log_level: str = "INFO",
        log_file: str | Path | None = None,
        json_logs: bool = False,
        max_bytes: int = 10_485_760,
        backup_count: int = 5,
        console_output: bool = True,
    ) -> None:
        self._component = component
        self._max_bytes = max_bytes
        self._backup_count = backup_count

        self._logger = logging.getLogger(f"{_ROOT_NAME}.{component}")
        self._logger.propagate = False
        self.configure(
            log_level=log_level,
            log_file=log_file,
            json_logs=json_logs,
            console_output=console_output,
        )
        _REGISTRY[component] = self

    def configure(
        self,
        *,
        log_level: str = "INFO",
        log_file: str | Path | None = None,
        json_logs: bool = False,
        console_output: bool = True,
    ) -> None:
        """(Re)build the handler set of the underlying logger."""
        level = getattr(logging, log_level.upper(), logging.INFO)
        self._logger.setLevel(level)

        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            # File handlers are shared between loggers; only the console
            # handler is owned by this instance.
            if isinstance(handler, _ColorConsoleHandler):
                handler.close()

        if console_output:
            self._logger.addHandler(_ColorConsoleHandler(level=level))

        if log_file is not None:
            fh = _shared_file_handler(
                Path(log_file), json_logs, self._max_bytes, self._backup_count
            )
            fh.setLevel(level)
            self._logger.addHandler(fh)

    # ------------------------------------------------------------------ #
    #  Context management -- operation scope
    # ------------------------------------------------------------------ #

    class _OperationContext:
        """Context manager that binds an operation name for the current
        thread or task.
        """

        def __init__(self, parent: WardenLogger, operation: str) -> None:
            self._parent = parent
            self._operation = operation
            self._token: contextvars.Token[str | None] | None = None

        def __enter__(self) -> WardenLogger:
            self._token = _CURRENT_OPERATION.set(self._operation)
            return self._parent

        def __exit__(self, *exc: Any) -> None:
            if self._token is not None:
                _CURRENT_OPERATION.reset(self._token)
                self._token = None

    def operation(self, name: str) -> _OperationContext:
        """Return a context manager that sets the *operation* field.

        While active, every record emitted in the same thread or task, by
        any WardenLogger, carries ``operation=<name>``.
        """
        return self._OperationContext(self, name)

    # ------------------------------------------------------------------ #
    #  Log methods
    # ------------------------------------------------------------------ #

    def _enrich(self, kwargs: dict[str, Any]) -> dict[str, Any]:
        """Move non-standard keyword args into the record's *extra*."""
        extra = kwargs.pop("extra", {}) or {}

        context: dict[str, Any] = {}
        standard_keys = {"exc_info", "stack_info", "stacklevel"}
        for key in list(kwargs):
            if key not in standard_keys:
                context[key] = kwargs.pop(key)

        extra["component"] = self._component
        extra["operation"] = current_operation()
        if context:
            extra["warden_extra"] = context

        kwargs["extra"] = extra
        return kwargs

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log a DEBUG-level message."""
        kwargs = self._enrich(kwargs)
        self._logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log an INFO-level message."""
        kwargs = self._enrich(kwargs)
        self._logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log a WARNING-level message."""
        kwargs = self._enrich(kwargs)
        self._logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log an ERROR-level message."""
        kwargs = self._enrich(kwargs)
        self._logger.error(msg, *args, **kwargs)

    # ------------------------------------------------------------------ #
    #  Properties
    # ------------------------------------------------------------------ #

    @property
    def component(self) -> str:
        """Name of the NetWarden component this logger is bound to."""
        return self._component

    @property
    def underlying(self) -> logging.Logger:
        """Direct access to the stdlib :class:`logging.Logger`."""
        return self._logger


# ========================= Module-level convenience ========================


def configure_logging(
    *,
    log_level: str = "INFO",
    log_file: str | Path | None = None,
    json_logs: bool = False,
    console_output: bool = True,
) -> None:
    """Apply one handler configuration to every registered WardenLogger."""
    for warden_logger in _REGISTRY.values():
        warden_logger.configure(
            log_level=log_level,
            log_file=log_file,
            json_logs=json_logs,
            console_output=console_output,
        )


def current_operation() -> str | None:
    """Operation name bound in the calling thread or task, if any."""
    return _CURRENT_OPERATION.get()
