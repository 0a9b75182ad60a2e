from typing import Any, Dict, Optional


class PricingError(Exception):
    """Base class for every failure raised by the pricing engine."""
    code = "PRICING_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotOwner(PricingError):
    """Raised when a mutating operation is invoked by anyone but the owner."""
    code = "NOT_CONTRACT_OWNER"

    def __init__(self, caller: Any):
        super().__init__(f"Caller {caller!r} is not the contract owner.", {"caller": caller})
        self.caller = caller


class ZeroNumerator(PricingError, ValueError):
    code = "LINEAR_CURVE_ZERO_NUMERATOR"

    def __init__(self):
        super().__init__("Slope numerator must be non-zero.")


class ZeroDenominator(PricingError, ValueError):
    code = "LINEAR_CURVE_ZERO_DENOMINATOR"

    def __init__(self):
        super().__init__("Slope denominator must be non-zero.")


class ArithmeticOverflow(PricingError, ArithmeticError):
    """Raised when a checked operation leaves the uint256 range."""
    code = "ARITHMETIC_OVERFLOW"

    def __init__(self, operation: str, a: int, b: int):
        super().__init__(
            f"uint256 overflow in {operation}({a}, {b}).",
            {"operation": operation, "operands": [a, b]},
        )
        self.operation = operation


class InvalidValue(PricingError, ValueError):
    code = "INVALID_UINT256"

    def __init__(self, name: str, value: Any):
        super().__init__(f"'{name}' must be an unsigned 256-bit integer, got {value!r}.", {"name": name})
        self.name = name
        self.value = value
