"""
LiveLocale Events

Synchronous observer lists, subscription handles and replay-latest values.

All notification is synchronous: when ``emit`` returns, every handler has run.
A failing handler does not stop the fan-out: the remaining handlers still
run, then the first exception is re-raised to the caller of ``emit``.
"""

from typing import Any, Callable, Generic, List, Optional, TypeVar

from livelocale.errors import DisposedError


T = TypeVar("T")

Handler = Callable[..., None]


class Subscription:
    """
    Handle returned by ``subscribe``.

    Usage:
        sub = event.subscribe(handler)
        ...
        sub.dispose()

        with event.subscribe(handler):
            ...
    """

    def __init__(self, on_dispose: Callable[[], None]):
        self._on_dispose: Optional[Callable[[], None]] = on_dispose

    @property
    def active(self) -> bool:
        """False once disposed."""
        return self._on_dispose is not None

    def dispose(self) -> None:
        """Stop notifications. Safe to call more than once."""
        if self._on_dispose is not None:
            callback, self._on_dispose = self._on_dispose, None
            callback()

    unsubscribe = dispose

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()


class Event:
    """
    Ordered observer list with synchronous fan-out.

    Handlers are called in subscription order. Emission works on a snapshot,
    so handlers may subscribe or unsubscribe while an emit is running.
    """

    def __init__(self):
        self._handlers: List["_Entry"] = []

    def subscribe(self, handler: Handler) -> Subscription:
        """Register handler and return its subscription."""
        # One entry per subscription
        entry = _Entry(handler)
        self._handlers.append(entry)
        return Subscription(lambda: self._remove(entry))

    def _remove(self, entry: "_Entry") -> None:
        if entry in self._handlers:
            self._handlers.remove(entry)

    def emit(self, *args: Any) -> None:
        """
        Call every handler with args.

        Raises:
            The first exception raised by a handler, after all handlers ran
        """
        error: Optional[BaseException] = None
        for entry in list(self._handlers):
            if entry not in self._handlers:
                continue
            try:
                entry(*args)
            except Exception as e:
                if error is None:
                    error = e
        if error is not None:
            raise error

    def clear(self) -> None:
        """Drop all handlers."""
        self._handlers.clear()

    def __len__(self) -> int:
        return len(self._handlers)


class _Entry:
    __slots__ = ("handler",)

    def __init__(self, handler: Handler):
        self.handler = handler

    def __call__(self, *args: Any) -> None:
        self.handler(*args)


class LiveValue(Generic[T]):
    """
    Replay-latest value cell.

    A new subscriber is called immediately with the current value and then
    with every subsequent emission, in emission order. If a subscriber emits
    while an emission is running, the older value is not delivered to the
    subscribers that have not seen it yet.
    """

    def __init__(self, initial: T):
        self._value: T = initial
        self._generation = 0
        self._changed = Event()
        self._closed = False

    @property
    def value(self) -> T:
        """The last emitted value."""
        return self._value

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, handler: Callable[[T], None]) -> Subscription:
        """Deliver the current value now and every later value."""
        if self._closed:
            raise DisposedError("Cannot subscribe to a closed LiveValue")

        def deliver(generation: int, value: T) -> None:
            if generation == self._generation:
                handler(value)

        subscription = self._changed.subscribe(deliver)
        try:
            handler(self._value)
        except Exception:
            subscription.dispose()
            raise
        return subscription

    def emit(self, value: T) -> None:
        """Store value and notify subscribers."""
        if self._closed:
            raise DisposedError("Cannot emit on a closed LiveValue")
        self._value = value
        self._generation += 1
        self._changed.emit(self._generation, value)

    def close(self) -> None:
        """Drop all subscribers. The last value stays readable."""
        self._closed = True
        self._changed.clear()

    @property
    def subscriber_count(self) -> int:
        return len(self._changed)
