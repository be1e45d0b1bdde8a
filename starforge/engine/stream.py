"""Single-use output stream for a generated system.

A stream can be consumed either push-style through ``subscribe`` (next,
complete and error callbacks) or pull-style by iterating over it.
"""

import logging
from typing import Callable, Iterable, Iterator, Optional

from ..models.celestial import CelestialObject
from .diagnostics import GenerationDiagnostics

logger = logging.getLogger(__name__)


class Subscription:
    """Handle for an active subscription."""

    def __init__(self):
        self.closed = False

    def unsubscribe(self):
        """Stop delivering items. Safe to call more than once."""
        self.closed = True


class SystemStream:
    """Delivers the objects of one generated system to a single consumer.

    The producer runs only once a consumer attaches. A second consumer is an
    error, since replaying would require a fresh random source.
    """

    def __init__(
        self,
        producer: Callable[[], Iterable[CelestialObject]],
        diagnostics: Optional[GenerationDiagnostics] = None,
    ):
        self._producer = producer
        self._consumed = False
        self.subscription: Optional[Subscription] = None
        self.diagnostics = diagnostics if diagnostics is not None else GenerationDiagnostics()

    def _claim(self):
        if self._consumed:
            raise RuntimeError("System stream has already been consumed")
        self._consumed = True

    def subscribe(
        self,
        on_next: Callable[[CelestialObject], None],
        on_complete: Optional[Callable[[], None]] = None,
        on_error: Optional[Callable[[Exception], None]] = None,
    ) -> Subscription:
        """Push every object to ``on_next``, then signal completion or error.

        Delivery is synchronous. A consumer may call ``stream.unsubscribe()``
        from inside ``on_next`` to stop; no further items and no completion
        signal are delivered after that.

        Args:
            on_next: Called once per emitted object
            on_complete: Called after the last object
            on_error: Called with the exception if generation fails; when
                omitted, the exception propagates to the caller

        Returns:
            The (already finished) subscription
        """
        self._claim()
        subscription = Subscription()
        self.subscription = subscription
        try:
            for obj in self._producer():
                if subscription.closed:
                    break
                on_next(obj)
                if subscription.closed:
                    break
        except Exception as exc:
            subscription.closed = True
            if on_error is None:
                raise
            logger.error(f"System generation failed: {exc}")
            on_error(exc)
            return subscription

        if not subscription.closed:
            subscription.closed = True
            if on_complete is not None:
                on_complete()
        return subscription

    def unsubscribe(self):
        """Close the active subscription, if any."""
        if self.subscription is not None:
            self.subscription.unsubscribe()

    def __iter__(self) -> Iterator[CelestialObject]:
        self._claim()
        yield from self._producer()

    def to_list(self) -> list[CelestialObject]:
        return list(self)
