"""
Account Errors

Exceptions raised while constructing accounts. Refused withdrawals and
deposits are not errors: those operations report failure by returning False.
"""

from typing import Any


class AccountError(Exception):
    """Base class for all account errors"""


class InvalidParameter(AccountError, ValueError):
    """
    Raised when an account constructor receives a value that breaks
    one of its preconditions. No account object is created.
    """

    def __init__(self, field: str, value: Any, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field}: {reason}, got {value!r}")
