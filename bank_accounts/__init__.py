"""
Bounded Accounts

Saving and credit accounts whose balance is held inside a fixed range,
with integer-only yearly interest calculation.
"""

from .errors import AccountError, InvalidParameter
from .accounts import Account, ProductType, SavingAccount, CreditAccount
from .products import OpenResult, open_account, try_open_account

__version__ = "1.0.0"

__all__ = [
    "AccountError",
    "InvalidParameter",
    "Account",
    "ProductType",
    "SavingAccount",
    "CreditAccount",
    "OpenResult",
    "open_account",
    "try_open_account",
]
