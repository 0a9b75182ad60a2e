from enum import Enum


class EventType(Enum):
    INITIAL_PRICE_SET = "InitialPriceSet"
    SLOPE_NUMERATOR_SET = "SlopeNumeratorSet"
    SLOPE_DENOMINATOR_SET = "SlopeDenominatorSet"
    OWNERSHIP_TRANSFERRED = "OwnershipTransferred"

    @classmethod
    def from_str(cls, event_str: str) -> "EventType":
        """
        Convert a string to an EventType enum. Accepts either the member name
        (e.g. "INITIAL_PRICE_SET") or the event name (e.g. "InitialPriceSet").
        :param event_str: str
        :return: EventType or NotImplementedError
        """
        for member in cls:
            if event_str.upper() == member.name or event_str == member.value:
                return member
        raise NotImplementedError(f"No event type enum for {event_str}")

    def __str__(self):
        return self.value

    def __repr__(self):
        return self.__str__()
