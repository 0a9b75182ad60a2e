from typing import Any, Dict, List

from curve_pricing.common.errors import PricingError
from curve_pricing.common.math import is_uint256
from curve_pricing.common.model import CurveConfig
from curve_pricing.curves.linear import PricingEngine


class LinearCurveValidator:
    """
    Specialized validator for the linear PricingEngine.
    Performs:
      1) Param checks (initial_price, slope numerator/denominator)
      2) Boundary tests (price at supply 0, large supply, overflow headroom, monotonicity)

    Nothing here raises; each step returns a dict with:
      {
        "errors": [str...],
        "warnings": [str...],
        "info": {...}
      }
    and 'run_all_validations' aggregates them into a single result.
    """

    MONOTONICITY_SAMPLES = (0, 1, 2, 10, 100, 1_000, 10 ** 6, 10 ** 12, 10 ** 18)

    @staticmethod
    def validate_params(config: 'CurveConfig') -> Dict[str, Any]:
        """
        Checks that the linear curve's parameters are valid:
          - all values are uint256
          - slope_denominator > 0
          - slope_numerator > 0 (a zero numerator is only a warning: the curve is flat)
        """
        errors: List[str] = []
        warnings: List[str] = []
        info: Dict[str, Any] = {}

        for name in ("initial_price", "slope_numerator", "slope_denominator"):
            if not is_uint256(getattr(config, name, None)):
                errors.append(f"LinearCurve: '{name}' must be an unsigned 256-bit integer.")

        if config.slope_denominator == 0:
            errors.append("LinearCurve: 'slope_denominator' must be > 0.")

        if config.slope_numerator == 0:
            warnings.append("LinearCurve: 'slope_numerator' is 0, price is flat at 'initial_price'.")

        if config.initial_price == 0:
            warnings.append("LinearCurve: 'initial_price' is 0, the first unit is free.")

        info["param_summary"] = {
            "initial_price": str(config.initial_price),
            "slope_numerator": str(config.slope_numerator),
            "slope_denominator": str(config.slope_denominator),
        }

        return {
            "errors": errors,
            "warnings": warnings,
            "info": info
        }

    @staticmethod
    def boundary_tests(engine: 'PricingEngine') -> Dict[str, Any]:
        """
        Calls a few boundary conditions on the curve:
          - calculate_price(0, 1) equals the initial price
          - calculate_price at a large supply
          - largest supply that can be priced without overflow
          - non-decreasing price over a sample of supplies
        """
        errors: List[str] = []
        warnings: List[str] = []
        info: Dict[str, Any] = {}

        # 1) Price at supply=0
        try:
            price_at_zero = engine.calculate_price(0, 1)
            if price_at_zero != engine.initial_price:
                errors.append(f"Price at supply=0 is {price_at_zero}, expected {engine.initial_price}.")
            info["price_at_zero"] = price_at_zero
        except PricingError as e:
            errors.append(f"Exception calling calculate_price(0, 1): {e}")

        # 2) Price for a large supply (1e18)
        try:
            info["price_at_1e18"] = engine.calculate_price(10 ** 18, 1)
        except PricingError as e:
            warnings.append(f"Exception calling calculate_price(1e18, 1): {e}")

        # 3) Overflow headroom
        max_supply = engine.max_priceable_supply()
        info["max_priceable_supply"] = max_supply
        try:
            engine.calculate_price(max_supply, 1)
        except PricingError as e:
            errors.append(f"Price at max_priceable_supply={max_supply} failed: {e}")

        # 4) Monotonicity sample
        previous = None
        for supply in LinearCurveValidator.MONOTONICITY_SAMPLES:
            if supply > max_supply:
                break
            price = engine.calculate_price(supply, 1)
            if previous is not None and price < previous:
                errors.append(f"Price decreased at supply={supply}: {price} < {previous}.")
            previous = price

        info["boundary_tests_run"] = True
        return {
            "errors": errors,
            "warnings": warnings,
            "info": info
        }

    @staticmethod
    def run_all_validations(engine: 'PricingEngine') -> Dict[str, Any]:
        """
        Aggregates:
          - param check
          - boundary tests
        Returns a dict with keys: errors, warnings, info
        """
        results = {
            "errors": [],
            "warnings": [],
            "info": {}
        }

        for check in (
            LinearCurveValidator.validate_params(engine.config),
            LinearCurveValidator.boundary_tests(engine),
        ):
            results["errors"].extend(check["errors"])
            results["warnings"].extend(check["warnings"])
            results["info"].update(check["info"])

        return results
