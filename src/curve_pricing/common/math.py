from curve_pricing.common.errors import ArithmeticOverflow, InvalidValue, ZeroDenominator


UINT256_MAX = 2 ** 256 - 1


def is_uint256(value) -> bool:
    # bool is an int subclass but never a valid amount
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= UINT256_MAX


def require_uint256(name: str, value) -> int:
    """
    Returns 'value' unchanged if it is an unsigned 256-bit integer.
    :raises InvalidValue: otherwise
    """
    if not is_uint256(value):
        raise InvalidValue(name, value)
    return value


def checked_add(a: int, b: int) -> int:
    result = a + b
    if result > UINT256_MAX:
        raise ArithmeticOverflow("add", a, b)
    return result


def checked_mul(a: int, b: int) -> int:
    result = a * b
    if result > UINT256_MAX:
        raise ArithmeticOverflow("mul", a, b)
    return result


def floor_div(a: int, b: int) -> int:
    """Integer division rounding toward zero; operands are unsigned so this is floor."""
    if b == 0:
        raise ZeroDenominator()
    return a // b
