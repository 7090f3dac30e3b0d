"""
Parameter Validation Module

Shared precondition checks for account constructors and operations, plus
the integer percentage arithmetic used for yearly interest. Balances,
bounds, rates and amounts are plain ints; floats are never accepted.
"""

from typing import Any

from .errors import InvalidParameter


PERCENT_BASE = 100


def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a valid amount
    return isinstance(value, int) and not isinstance(value, bool)


def require_int(field: str, value: Any) -> int:
    """Require an integer value"""
    if not _is_int(value):
        raise InvalidParameter(field, value, "must be an integer")
    return value


def require_positive(field: str, value: Any) -> int:
    """Require an integer strictly greater than zero"""
    require_int(field, value)
    if value <= 0:
        raise InvalidParameter(field, value, "must be greater than 0")
    return value


def require_non_negative(field: str, value: Any) -> int:
    """Require an integer greater than or equal to zero"""
    require_int(field, value)
    if value < 0:
        raise InvalidParameter(field, value, "must not be negative")
    return value


def require_at_least(field: str, value: Any, floor: int, floor_name: str) -> int:
    """
    Require an integer no smaller than another parameter

    Args:
        field: Name of the parameter being checked
        value: Value of the parameter
        floor: Smallest allowed value
        floor_name: Name of the parameter that defines the floor

    Returns:
        The validated value

    Raises:
        InvalidParameter: If value is not an int or is below floor
    """
    require_int(field, value)
    if value < floor:
        raise InvalidParameter(field, value, f"must be at least {floor_name} ({floor})")
    return value


def require_at_most(field: str, value: Any, ceiling: int, ceiling_name: str) -> int:
    """Require an integer no larger than another parameter"""
    require_int(field, value)
    if value > ceiling:
        raise InvalidParameter(field, value, f"must be at most {ceiling_name} ({ceiling})")
    return value


def is_positive_amount(amount: Any) -> bool:
    """
    Check an operation amount.

    Non-positive amounts are an ordinary refusal and return False.
    Anything that is not an int is a caller bug and raises TypeError.
    """
    if not _is_int(amount):
        raise TypeError(f"Amount must be an integer, got {type(amount).__name__}")
    return amount > 0


def percent_of(balance: int, rate: int) -> int:
    """
    Calculate rate percent of balance, dropping the fractional part.

    Truncates toward zero for either sign, so -4999 at 1% is -49
    (floor division would give -50).

    Args:
        balance: Signed balance
        rate: Rate in whole percentage points

    Returns:
        balance * rate / 100 truncated toward zero
    """
    product = balance * rate
    magnitude = abs(product) // PERCENT_BASE
    return -magnitude if product < 0 else magnitude
