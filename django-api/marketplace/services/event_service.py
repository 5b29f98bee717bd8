"""Event read model: events with their phase derived at read time."""

from collections import Counter
from collections.abc import Callable
from datetime import datetime

from django.utils import timezone

from marketplace.domain import Event, EventId, EventListing, EventPhase
from marketplace.domain.errors import EventNotFoundError, InvalidIdError
from marketplace.domain.status import event_phase
from marketplace.stores.interfaces import EventStore


class EventService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore, clock: Callable[[], datetime] = timezone.now) -> None:
        self._store = store
        self._clock = clock

    def list_events(self) -> list[EventListing]:
        """Return all events, newest first, each with its current phase."""
        now = self._clock()
        return [_listing(event, now) for event in self._store.list_events()]

    def get_event(self, event_id: str) -> EventListing:
        """Return an event by ID with its current phase.

        Raises:
            InvalidIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        try:
            parsed = EventId.from_string(event_id)
        except ValueError as exc:
            raise InvalidIdError() from exc
        event = self._store.get_event(parsed)
        if event is None:
            raise EventNotFoundError(event_id)
        return _listing(event, self._clock())

    def summarize(self) -> dict[EventPhase, int]:
        """Count events per phase. Every phase is present, possibly as zero."""
        counts = Counter(listing.phase for listing in self.list_events())
        return {phase: counts[phase] for phase in EventPhase}


def _listing(event: Event, now: datetime) -> EventListing:
    return EventListing(event=event, phase=event_phase(now, event.start_date, event.end_date))
