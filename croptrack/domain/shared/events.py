"""Domain event handlers and dispatching."""

from croptrack.core.observability import get_logger

from .base import AggregateRoot, DomainEvent

logger = get_logger(__name__)


class DomainEventHandler:
    """Base interface for domain event handlers."""

    def can_handle(self, event: DomainEvent) -> bool:
        """Check if this handler can handle the given event."""
        raise NotImplementedError

    def handle(self, event: DomainEvent) -> None:
        """Handle the domain event."""
        raise NotImplementedError


class DomainEventDispatcher:
    """Dispatches domain events to registered handlers."""

    def __init__(self):
        self._handlers: list[DomainEventHandler] = []

    def register_handler(self, handler: DomainEventHandler) -> None:
        """Register an event handler."""
        if handler not in self._handlers:
            self._handlers.append(handler)

    def unregister_handler(self, handler: DomainEventHandler) -> None:
        """Unregister an event handler."""
        if handler in self._handlers:
            self._handlers.remove(handler)

    def dispatch(self, event: DomainEvent) -> None:
        """Dispatch an event to all capable handlers."""
        for handler in self._handlers:
            if handler.can_handle(event):
                try:
                    handler.handle(event)
                except Exception:
                    # Log error but continue with other handlers
                    logger.exception(
                        "domain_event_handler_failed",
                        event_type=type(event).__name__,
                        event_id=str(event.event_id),
                        handler=type(handler).__name__,
                    )

    def dispatch_all(self, events: list[DomainEvent]) -> None:
        """Dispatch multiple events."""
        for event in events:
            self.dispatch(event)


class DomainEventPublisher:
    """
    Publishes the pending events of an aggregate to a dispatcher.

    Events are cleared from the aggregate once dispatched, so publishing the
    same aggregate twice never delivers an event twice.
    """

    def __init__(self, dispatcher: DomainEventDispatcher | None = None):
        self._dispatcher = dispatcher or _global_dispatcher

    def publish_events(self, aggregate: AggregateRoot) -> None:
        """Publish and clear all pending domain events from an aggregate."""
        events = aggregate.get_domain_events()
        if not events:
            return

        logger.debug(
            "domain_events_publishing",
            aggregate_type=type(aggregate).__name__,
            aggregate_id=str(aggregate.uid),
            event_count=len(events),
        )
        self._dispatcher.dispatch_all(events)
        aggregate.clear_domain_events()


# Global event dispatcher instance
_global_dispatcher = DomainEventDispatcher()


def get_event_dispatcher() -> DomainEventDispatcher:
    """Get the global event dispatcher."""
    return _global_dispatcher


def publish_events(aggregate: AggregateRoot) -> None:
    """Publish an aggregate's pending events using the global dispatcher."""
    DomainEventPublisher().publish_events(aggregate)
