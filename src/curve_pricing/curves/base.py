from abc import ABC, abstractmethod

from curve_pricing.common.model import CurveConfig


class PricingCurve(ABC):
    """Abstract base class defining the interface for any pricing curve implementation."""

    @property
    @abstractmethod
    def config(self) -> 'CurveConfig':
        """Returns a snapshot of the curve parameters."""
        pass

    @abstractmethod
    def calculate_price(self, total_supply: int, amount: int) -> int:
        """
        Returns the unit price a buyer pays for 'amount' tokens when 'total_supply' tokens
        are already in circulation.

        :param total_supply: int - current circulating supply
        :param amount: int - requested purchase quantity
        :return: int - unit price in the smallest price denomination
        """
        pass
