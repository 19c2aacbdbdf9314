"""Scoped, level-filtered logging front end.

``SafeURL`` reports warnings and info through a ``Logger``. The logger
renders a ``[scope]`` prefix, drops calls below its minimum level and
forwards the rest to a pluggable ``LoggerSink``.

Any object exposing some of the four channels is a valid sink::

    class PrintSink:
        def warn(self, *args: object) -> None:
            print(*args)

    logger = Logger(PrintSink(), scope="Safe URL", level="warn")
    logger.warn("careful")  # prints "[Safe URL] careful"
    logger.info("ignored")  # below the minimum level

By default messages go to the standard library ``logging`` module under
the ``saferoute`` logger namespace.
"""

import logging
from typing import Literal, Protocol, TypeAlias, runtime_checkable

LogLevel: TypeAlias = Literal["all", "debug", "info", "warn", "error"]
Channel: TypeAlias = Literal["log", "info", "warn", "error"]

# Minimum-level ranks; a channel passes when its rank >= the configured one
LEVELS: dict[str, int] = {
    "all": 0,
    "debug": 10,
    "info": 20,
    "warn": 30,
    "error": 40,
}

CHANNEL_LEVELS: dict[str, int] = {
    "log": LEVELS["debug"],
    "info": LEVELS["info"],
    "warn": LEVELS["warn"],
    "error": LEVELS["error"],
}


@runtime_checkable
class LoggerSink(Protocol):
    """Destination for log calls. Each channel takes any loggable values."""

    def log(self, *args: object) -> None: ...
    def info(self, *args: object) -> None: ...
    def warn(self, *args: object) -> None: ...
    def error(self, *args: object) -> None: ...


class LoggingSink:
    """Adapt the four channels onto a standard library logger."""

    __slots__ = ("_logger",)

    def __init__(self, logger: logging.Logger | str = "saferoute") -> None:
        self._logger = logging.getLogger(logger) if isinstance(logger, str) else logger

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def log(self, *args: object) -> None:
        self._logger.debug(_render(args))

    def info(self, *args: object) -> None:
        self._logger.info(_render(args))

    def warn(self, *args: object) -> None:
        self._logger.warning(_render(args))

    def error(self, *args: object) -> None:
        self._logger.error(_render(args))


class NullSink:
    """Discard everything."""

    __slots__ = ()

    def log(self, *args: object) -> None:
        pass

    def info(self, *args: object) -> None:
        pass

    def warn(self, *args: object) -> None:
        pass

    def error(self, *args: object) -> None:
        pass


def _render(args: tuple[object, ...]) -> str:
    return " ".join(str(arg) for arg in args)


class Logger:
    """Scope prefix and level gate in front of a ``LoggerSink``.

    Channel methods never swallow sink exceptions: a failing sink is a
    bug in the sink and surfaces to the caller.
    """

    __slots__ = ("_enabled", "_level", "_scope", "_sink")

    def __init__(
        self,
        sink: LoggerSink | None = None,
        *,
        scope: str = "",
        level: LogLevel = "all",
        enabled: bool = True,
    ) -> None:
        if level not in LEVELS:
            msg = f"Unknown log level {level!r}. Expected one of: {', '.join(LEVELS)}"
            raise ValueError(msg)
        self._sink = sink if sink is not None else LoggingSink()
        self._scope = scope
        self._level = level
        self._enabled = enabled

    @property
    def scope(self) -> str:
        return self._scope

    @property
    def level(self) -> LogLevel:
        return self._level

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def sink(self) -> LoggerSink:
        return self._sink

    def is_enabled_for(self, channel: Channel) -> bool:
        """True if a call on *channel* would reach the sink."""
        return self._enabled and CHANNEL_LEVELS[channel] >= LEVELS[self._level]

    def log(self, *args: object) -> None:
        self._call("log", args)

    def info(self, *args: object) -> None:
        self._call("info", args)

    def warn(self, *args: object) -> None:
        self._call("warn", args)

    def error(self, *args: object) -> None:
        self._call("error", args)

    def _call(self, channel: Channel, args: tuple[object, ...]) -> None:
        if not self.is_enabled_for(channel):
            return
        action = getattr(self._sink, channel, None)
        if not callable(action):
            return
        if self._scope:
            action(f"[{self._scope}] {_render(args)}")
        else:
            action(*args)
