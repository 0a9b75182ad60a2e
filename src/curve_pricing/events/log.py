import logging
from typing import Any, Callable, Iterator, List, Optional, Tuple

from curve_pricing.common.enums import EventType
from curve_pricing.common.model import PricingEvent


logger = logging.getLogger(__name__)

Subscriber = Callable[[PricingEvent], None]


class EventLog:
    """
    Append-only, ordered log of configuration change notifications.

    Subscribers are called synchronously, in subscription order, from within emit(),
    so an observer always sees events in exactly the order the changes happened.
    An exception raised by a subscriber is logged and does not reach the emitter.
    """

    def __init__(self):
        self._events: List[PricingEvent] = []
        self._subscribers: List[Subscriber] = []

    def emit(
        self,
        event_type: EventType,
        value: Any,
        caller: Optional[str],
        previous_owner: Optional[str] = None,
    ) -> PricingEvent:
        """
        Appends a new event and notifies subscribers.

        :param event_type: EventType - kind of change
        :param value: the new value
        :param caller: the account that made the change
        :param previous_owner: the owner before the change, for ownership transfers only
        :return: PricingEvent - the recorded event
        """
        event = PricingEvent(
            event_type=event_type,
            value=value,
            caller=caller,
            index=len(self._events),
            previous_owner=previous_owner,
        )
        self._events.append(event)
        logger.info("%s(%s, %s) #%d", event.name, value, caller, event.index)

        for callback in list(self._subscribers):
            try:
                callback(event)
            except Exception:
                # the change is committed before observers run
                logger.exception("Subscriber %r failed on %s #%d", callback, event.name, event.index)
        return event

    def subscribe(self, callback: Subscriber) -> None:
        if callback not in self._subscribers:
            self._subscribers.append(callback)

    def unsubscribe(self, callback: Subscriber) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    @property
    def events(self) -> Tuple[PricingEvent, ...]:
        return tuple(self._events)

    def filter(self, event_type: EventType) -> Tuple[PricingEvent, ...]:
        return tuple(e for e in self._events if e.event_type == event_type)

    def last(self, event_type: Optional[EventType] = None) -> Optional[PricingEvent]:
        """Returns the most recent event, optionally restricted to one type, or None."""
        for event in reversed(self._events):
            if event_type is None or event.event_type == event_type:
                return event
        return None

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[PricingEvent]:
        return iter(tuple(self._events))
