import logging
from typing import Optional

from curve_pricing.common.enums import EventType
from curve_pricing.common.errors import NotOwner
from curve_pricing.events.log import EventLog


logger = logging.getLogger(__name__)


class ContractOwnership:
    """Single-owner access control. Exactly one account may call the guarded operations."""

    def __init__(self, owner: str, event_log: EventLog):
        """
        :param owner: str - initial owner, usually the deployer
        :param event_log: EventLog - where ownership changes are recorded
        """
        self._owner: Optional[str] = owner
        self._event_log = event_log

    @property
    def owner(self) -> Optional[str]:
        """Returns the current owner, or None once ownership has been renounced."""
        return self._owner

    def _enforce_is_owner(self, caller: Optional[str]) -> None:
        if self._owner is None or caller != self._owner:
            logger.warning("Rejected call from non-owner %r (owner is %r)", caller, self._owner)
            raise NotOwner(caller)

    def transfer_ownership(self, new_owner: Optional[str], caller: str) -> None:
        """
        Hands ownership to 'new_owner'. Passing None renounces ownership for good.
        Transferring to the current owner is a no-op and records nothing.

        :raises NotOwner: if 'caller' is not the current owner
        """
        self._enforce_is_owner(caller)
        if new_owner == self._owner:
            return

        previous = self._owner
        self._owner = new_owner
        self._event_log.emit(EventType.OWNERSHIP_TRANSFERRED, new_owner, caller, previous_owner=previous)
