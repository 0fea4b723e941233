"""Typed publish/subscribe event dispatch."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable

from parus.asserts import AssertionFailed
from parus.services import Service

__all__ = ["EventType", "EventTypeMismatch", "EventSystem", "event_type_name"]


class EventType(IntEnum):
    """Kinds of events the engine dispatches."""

    APPLICATION_QUIT = 0x01
    KEY_PRESSED = 0x02
    KEY_RELEASED = 0x03
    CHAR_INPUT = 0x04
    MOUSE_BUTTON_PRESSED = 0x05
    MOUSE_BUTTON_RELEASED = 0x06
    MOUSE_MOVED = 0x07
    MOUSE_WHEEL = 0x08
    WINDOW_RESIZED = 0x09
    WINDOW_MINIMIZED = 0x0A


def event_type_name(event_type: object) -> str:
    """Return ``EVENT_<NAME>`` for a known event type, else ``unknown``."""
    try:
        return f"EVENT_{EventType(event_type).name}"
    except ValueError:
        return "unknown"


class EventTypeMismatch(AssertionFailed):
    """Raised when callbacks or fired arguments disagree with an event's parameter types."""


class _Handler:
    def __init__(self, param_types: tuple[type, ...]) -> None:
        self.param_types = param_types
        self.callbacks: list[Callable[..., Any]] = []


class EventSystem(Service):
    """Dispatches fired events to the callbacks registered for them."""

    def __init__(self) -> None:
        self._handlers: dict[EventType, _Handler] = {}

    def register_event(
        self, event_type: EventType, callback: Callable[..., Any], *args: type
    ) -> None:
        """Subscribe ``callback`` to ``event_type``.

        ``args`` are the event's parameter types; none means the event carries
        no arguments. Every callback of one event must share the same types.
        """
        param_types = tuple(args)
        handler = self._handlers.get(event_type)
        if handler is None:
            handler = self._handlers[event_type] = _Handler(param_types)
        elif handler.param_types != param_types:
            raise EventTypeMismatch(f"Type mismatch for event {event_type_name(event_type)}")
        handler.callbacks.append(callback)

    def fire_event(self, event_type: EventType, *args: Any) -> None:
        """Call every callback of ``event_type`` with ``args``, in registration order."""
        handler = self._handlers.get(event_type)
        if handler is None:
            return
        if tuple(type(arg) for arg in args) != handler.param_types:
            raise EventTypeMismatch(
                f"Type mismatch for firing event {event_type_name(event_type)}"
            )
        for callback in list(handler.callbacks):
            callback(*args)