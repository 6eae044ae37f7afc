"""Publish/subscribe event delivery between agents."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field

from .agent_data import AgentData


@dataclass
class AgentEvent:
    type: str
    source: str
    data: AgentData = field(default_factory=AgentData)
    timestamp: float = field(default_factory=time.time)


class EventHandler:
    """Receives events it has been subscribed to."""

    def handle_event(self, event: AgentEvent) -> None:
        raise NotImplementedError


class EventSystem:
    """Delivers emitted events to the handlers subscribed to their type, while running."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self._handlers: dict[str, list[EventHandler]] = {}
        self._lock = threading.Lock()
        self._running = threading.Event()

    def start(self) -> None:
        self._running.set()
        self._logger.info("Event system started")

    def stop(self) -> None:
        self._running.clear()
        self._logger.info("Event system stopped")

    def is_running(self) -> bool:
        return self._running.is_set()

    def emit(self, event_type: str, source: str, data: AgentData | None = None) -> None:
        if not self.is_running():
            return
        with self._lock:
            handlers = list(self._handlers.get(event_type, ()))
        if not handlers:
            self._logger.debug("Event emitted with no handlers: %s from %s", event_type, source)
            return
        event = AgentEvent(event_type, source, data if data is not None else AgentData())
        for handler in handlers:
            try:
                handler.handle_event(event)
            except Exception as exc:
                self._logger.error("Event handler error: %s", exc)
        self._logger.debug(
            "Event emitted: %s from %s (%d handlers)", event_type, source, len(handlers)
        )

    def subscribe(self, event_type: str, handler: EventHandler) -> None:
        with self._lock:
            self._handlers.setdefault(event_type, []).append(handler)
        self._logger.debug("Handler subscribed to event type: %s", event_type)

    def unsubscribe(self, event_type: str, handler: EventHandler) -> None:
        with self._lock:
            handlers = self._handlers.get(event_type)
            if handlers is None:
                return
            handlers[:] = [h for h in handlers if h is not handler]
            if not handlers:
                del self._handlers[event_type]
        self._logger.debug("Handler unsubscribed from event type: %s", event_type)