"""Prop logger — leveled diagnostic sink used by the validators.

Level 0 is silent, 1 shows errors, 2 adds warnings, 3 and above adds
log/info messages. ``error`` always raises after writing, even when the
level suppressed the write.
"""

from typing import Any, Optional

import structlog

from nitpick.validators.coercion import is_numeric, to_number
from nitpick.validators.errors import FatalPropError
from nitpick.validators.models import DEFAULT_LOG_LEVEL, LogLevel

DEFAULT_PREFIX = "@reduct/component"


def configure_logging(debug: bool = False) -> None:
    """Configure structlog once for the process."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if debug else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
    )


class PropLogger:
    """Leveled logger writing to a structlog sink.

    Sink failures are swallowed; a broken console must never take down the
    component that is being validated.
    """

    def __init__(
        self,
        level: Any = DEFAULT_LOG_LEVEL,
        sink: Optional[Any] = None,
        prefix: str = DEFAULT_PREFIX,
    ):
        self._sink = sink if sink is not None else structlog.get_logger()
        self.prefix = prefix
        self._level = int(DEFAULT_LOG_LEVEL)
        self.set_level(level)

    @property
    def level(self) -> int:
        return self._level

    def set_level(self, level: Any) -> None:
        """Adjust the noise of the logger.

        Non-numeric input resets to the default (verbose) level.
        """
        if not is_numeric(level):
            self._level = int(DEFAULT_LOG_LEVEL)
            return
        self._level = to_number(level)

    def log(self, message: str, element: Optional[Any] = None, **fields: Any) -> None:
        if self._level <= LogLevel.WARNINGS:
            return
        self._write("debug", message, element, fields)

    def info(self, message: str, element: Optional[Any] = None, **fields: Any) -> None:
        if self._level <= LogLevel.WARNINGS:
            return
        self._write("info", message, element, fields)

    def warn(self, message: str, element: Optional[Any] = None, **fields: Any) -> None:
        if self._level <= LogLevel.ERRORS:
            return
        self._write("warning", message, element, fields)

    def error(
        self,
        message: str,
        element: Optional[Any] = None,
        error: Optional[FatalPropError] = None,
        **fields: Any,
    ) -> None:
        """Write an error, then raise ``error`` (or a generic FatalPropError).

        The raise happens at every level, including SILENT.
        """
        if self._level > LogLevel.SILENT:
            self._write("error", message, element, fields)

        raise error if error is not None else FatalPropError()

    def _write(self, method: str, message: str, element: Optional[Any], fields: dict) -> None:
        if element is not None:
            fields["element"] = element
        try:
            getattr(self._sink, method)(message, logger=self.prefix, **fields)
        except Exception:
            pass
