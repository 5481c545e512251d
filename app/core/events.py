"""
In-process domain events. Listeners are async callables awaited in the order
they were subscribed; a failing listener propagates to the dispatcher's caller.
"""

import logging
from collections import defaultdict
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

type Listener = Callable[[Any], Awaitable[None]]


@dataclass(frozen=True)
class UserRegistered:
    user_id: int
    hashid: str
    email: str


class EventDispatcher:
    def __init__(self):
        self._listeners: dict[type, list[Listener]] = defaultdict(list)

    def subscribe(self, event_type: type, listener: Listener) -> None:
        self._listeners[event_type].append(listener)

    async def dispatch(self, event: object) -> None:
        listeners = self._listeners.get(type(event), [])
        logger.debug("Dispatching %s to %d listener(s)", type(event).__name__, len(listeners))
        for listener in listeners:
            await listener(event)


async def log_user_registered(event: UserRegistered) -> None:
    logger.info("Registered user %s <%s>", event.hashid, event.email)
