"""Routes named inbound events to their handlers."""

from __future__ import annotations

import functools
import logging
import math
import time
from typing import Any, Callable

from wsdemo.constants import (
    CONNECTED_MESSAGE,
    EVENT_BOOM,
    EVENT_DELAY,
    EVENT_DEMO_CONNECTED,
    EVENT_GET_SQUARE,
    EVENT_GET_SUM,
    EVENT_HI,
    EVENT_LOAD,
    EVENT_RESULT,
)
from wsdemo.lib.connection import Connection
from wsdemo.lib.validation import check_delay, check_square, check_sum, format_number


class UnknownEventError(KeyError):
    """Raised when no handler is registered for an event name."""


class EventDispatcher:
    """Registration table from event name to handler, plus lifecycle callbacks.

    Handlers receive the triggering Connection and the event payload. Their
    return value is the acknowledgement sent back to the caller. A rejected
    input returns the rejection message and emits nothing; an accepted one
    emits its events and returns an empty or neutral reply.

    Args:
        sleep: Cooperative sleep taking seconds. Production passes
            ``SocketIO.sleep`` so a pending delay never blocks other clients.
        logger: Where lifecycle and trace messages go.
    """

    def __init__(
        self,
        sleep: Callable[[float], Any] = time.sleep,
        logger: logging.Logger | None = None,
    ):
        self._sleep = sleep
        self._logger = logger or logging.getLogger(__name__)
        self._handlers: dict[str, Callable[[Connection, Any], Any]] = {
            EVENT_HI: self.hi,
            EVENT_DELAY: self.delay,
            EVENT_LOAD: self.load,
            EVENT_GET_SQUARE: self.get_square,
            EVENT_GET_SUM: self.get_sum,
        }
        self._logger.info("ws gateway run")

    @property
    def sleep(self) -> Callable[[float], Any]:
        return self._sleep

    @property
    def event_names(self) -> list[str]:
        return list(self._handlers)

    def dispatch(self, event_name: str, connection: Connection, payload: Any = None) -> Any:
        """Run the handler registered for ``event_name`` and return its reply.

        Raises:
            UnknownEventError: If nothing is registered under ``event_name``.
        """
        try:
            handler = self._handlers[event_name]
        except KeyError:
            raise UnknownEventError(event_name) from None
        return handler(connection, payload)

    def on_connect(self, connection: Connection) -> None:
        self._logger.info("Client connected")
        connection.emit(EVENT_DEMO_CONNECTED, {"message": CONNECTED_MESSAGE})

    def on_disconnect(self, connection: Connection | None = None) -> None:
        self._logger.info("Client disconnected")

    def hi(self, connection: Connection, data: Any = None) -> str:
        # The message body is not used, only the caller's identity
        return "Hi," + str(connection.identity)

    def delay(self, connection: Connection, duration: float) -> str:
        error = check_delay(duration)
        if error:
            return error
        if duration > 0:
            self._sleep(duration / 1000)
        return f"Delay {format_number(duration)} done"

    def load(self, connection: Connection, num: int) -> None:
        for i in range(math.ceil(num)):
            connection.emit(EVENT_BOOM, i, EVENT_BOOM, num - i)

    def get_square(self, connection: Connection, num: int) -> str:
        error = check_square(num)
        if error:
            return error
        connection.emit(EVENT_RESULT, format_number(num) + "^2", num * num)
        return ""

    def get_sum(self, connection: Connection, nums: list[int]) -> str:
        self._logger.info("get sum of %s", nums)
        error = check_sum(nums)
        if error:
            return error
        total = functools.reduce(lambda acc, num: acc + num, nums, 0)
        connection.emit(EVENT_RESULT, "+".join(format_number(num) for num in nums), total)
        return ""
