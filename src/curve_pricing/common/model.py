from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from curve_pricing.common.enums import EventType


@dataclass(frozen=True)
class CurveConfig:
    """Snapshot of the three values that define a linear curve."""
    initial_price: int
    slope_numerator: int
    slope_denominator: int

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class PricingEvent:
    """
    An immutable record of a successful configuration change.

    'caller' is always the account that made the change. For OWNERSHIP_TRANSFERRED,
    'value' holds the new owner (None when renounced) and 'previous_owner' the old one;
    'previous_owner' is None for every other event type.
    """
    event_type: EventType
    value: Any
    caller: Optional[str]
    index: int
    previous_owner: Optional[str] = None

    @property
    def name(self) -> str:
        return self.event_type.value

    @property
    def args(self) -> tuple:
        return self.value, self.caller

    def to_dict(self) -> Dict[str, Any]:
        payload = {
            "event": self.name,
            "value": self.value,
            "caller": self.caller,
            "index": self.index,
        }
        if self.event_type == EventType.OWNERSHIP_TRANSFERRED:
            payload["previous_owner"] = self.previous_owner
        return payload
