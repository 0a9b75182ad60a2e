import logging
from typing import Optional, Tuple

from curve_pricing.access.ownership import ContractOwnership
from curve_pricing.common.enums import EventType
from curve_pricing.common.errors import ArithmeticOverflow, ZeroDenominator, ZeroNumerator
from curve_pricing.common.math import UINT256_MAX, checked_add, checked_mul, floor_div, require_uint256
from curve_pricing.common.model import CurveConfig, PricingEvent
from curve_pricing.curves.base import PricingCurve
from curve_pricing.events.log import EventLog


logger = logging.getLogger(__name__)


class PricingEngine(PricingCurve, ContractOwnership):
    """
        A linear bonding curve priced entirely in unsigned integers.

        The unit price at a given supply is:
          price(0) = initial_price
          price(s) = initial_price + floor(s * slope_numerator / slope_denominator)

        All arithmetic is checked against the uint256 range; exceeding it raises
        ArithmeticOverflow instead of wrapping. Only the owner may change the curve,
        and every successful change is recorded in the event log.
    """

    def __init__(
        self,
        initial_price: int,
        slope_numerator: int,
        slope_denominator: int,
        deployer: str,
        event_log: Optional[EventLog] = None,
    ):
        require_uint256("initial_price", initial_price)
        require_uint256("slope_numerator", slope_numerator)
        require_uint256("slope_denominator", slope_denominator)
        if slope_denominator == 0:
            raise ZeroDenominator()

        self._event_log = event_log if event_log is not None else EventLog()
        ContractOwnership.__init__(self, deployer, self._event_log)

        self._initial_price = initial_price
        self._slope_numerator = slope_numerator
        self._slope_denominator = slope_denominator

    @classmethod
    def from_config(cls, config: CurveConfig, deployer: str, event_log: Optional[EventLog] = None) -> "PricingEngine":
        return cls(
            config.initial_price,
            config.slope_numerator,
            config.slope_denominator,
            deployer,
            event_log=event_log,
        )

    @property
    def initial_price(self) -> int:
        return self._initial_price

    @property
    def slope_numerator(self) -> int:
        return self._slope_numerator

    @property
    def slope_denominator(self) -> int:
        return self._slope_denominator

    @property
    def config(self) -> CurveConfig:
        return CurveConfig(self._initial_price, self._slope_numerator, self._slope_denominator)

    @property
    def event_log(self) -> EventLog:
        return self._event_log

    @property
    def events(self) -> Tuple[PricingEvent, ...]:
        return self._event_log.events

    def set_initial_price(self, price: int, caller: str) -> None:
        """
        Replaces the initial price. Zero is allowed.

        :raises NotOwner: if 'caller' is not the owner
        """
        self._enforce_is_owner(caller)
        require_uint256("price", price)
        self._initial_price = price
        self._event_log.emit(EventType.INITIAL_PRICE_SET, price, caller)

    def set_slope_numerator(self, numerator: int, caller: str) -> None:
        """
        Replaces the slope numerator.

        :raises NotOwner: if 'caller' is not the owner
        :raises ZeroNumerator: if 'numerator' is zero
        """
        self._enforce_is_owner(caller)
        require_uint256("numerator", numerator)
        if numerator == 0:
            raise ZeroNumerator()
        self._slope_numerator = numerator
        self._event_log.emit(EventType.SLOPE_NUMERATOR_SET, numerator, caller)

    def set_slope_denominator(self, denominator: int, caller: str) -> None:
        """
        Replaces the slope denominator.

        :raises NotOwner: if 'caller' is not the owner
        :raises ZeroDenominator: if 'denominator' is zero
        """
        self._enforce_is_owner(caller)
        require_uint256("denominator", denominator)
        if denominator == 0:
            raise ZeroDenominator()
        self._slope_denominator = denominator
        self._event_log.emit(EventType.SLOPE_DENOMINATOR_SET, denominator, caller)

    def calculate_price(self, total_supply: int, amount: int) -> int:
        """
        Returns the unit price at 'total_supply'. 'amount' is accepted for interface
        compatibility with size-dependent curves but does not affect a linear price.

        :raises ArithmeticOverflow: if the product or the sum leaves the uint256 range
        """
        require_uint256("total_supply", total_supply)
        require_uint256("amount", amount)
        if total_supply == 0:
            return self._initial_price

        try:
            increase = floor_div(checked_mul(total_supply, self._slope_numerator), self._slope_denominator)
            return checked_add(self._initial_price, increase)
        except ArithmeticOverflow as e:
            logger.warning("Price computation overflowed at total_supply=%d: %s", total_supply, e)
            raise

    def max_priceable_supply(self) -> int:
        """
        Returns the largest total supply for which calculate_price does not overflow.
        """
        if self._slope_numerator == 0:
            return UINT256_MAX
        # s * n must fit, and initial_price + floor(s * n / d) must fit
        by_product = UINT256_MAX // self._slope_numerator
        headroom = UINT256_MAX - self._initial_price
        by_sum = ((headroom + 1) * self._slope_denominator - 1) // self._slope_numerator
        return min(by_product, by_sum)

    def __repr__(self):
        return (
            f"PricingEngine(initial_price={self._initial_price}, slope_numerator={self._slope_numerator}, "
            f"slope_denominator={self._slope_denominator}, owner={self.owner!r})"
        )
