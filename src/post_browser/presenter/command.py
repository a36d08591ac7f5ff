"""
Command Module

Wraps an async action so a UI can trigger it and reflect whether it
is currently running.
"""

import logging
from typing import Awaitable, Callable


logger = logging.getLogger(__name__)


class Command:
    """
    A UI-triggerable async action.

    Overlapping executions are not blocked; can_execute only reports
    whether one is in flight.
    """

    def __init__(self, action: Callable[[], Awaitable[None]], name: str = "command"):
        self._action = action
        self.name = name
        self._running = 0

    @property
    def can_execute(self) -> bool:
        return self._running == 0

    async def execute(self) -> None:
        logger.debug(f"Executing {self.name}")
        self._running += 1
        try:
            await self._action()
        finally:
            self._running -= 1
