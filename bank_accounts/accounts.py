"""
Account Module

Bounded-balance accounts. Each product keeps its balance inside its own
range: a saving account between a minimum and a maximum balance, a credit
account above a negative credit limit. Withdrawals and deposits either
commit in full or leave the account untouched and return False.
Yearly interest is computed with integer arithmetic only.
"""

import logging
from abc import ABC, abstractmethod
from contextlib import nullcontext
from enum import Enum
from threading import RLock
from typing import Any, Dict

from .config import get_config
from .logging_config import log_action
from .validation import (
    is_positive_amount, percent_of, require_at_least, require_at_most,
    require_non_negative, require_positive
)


logger = logging.getLogger(__name__)


class ProductType(Enum):
    """Account product types"""
    SAVINGS = "savings"          # Balance within [min_balance, max_balance]
    CREDIT_LINE = "credit_line"  # Balance down to -credit_limit


class Account(ABC):
    """
    Base class for bounded accounts.

    Subclasses validate their own bound parameters, then call
    validate_rate(), and only then call Account.__init__ to assign state.
    A constructor that raises therefore never leaves a half-built account.
    """

    product_type: ProductType

    def __init__(self, initial_balance: int, rate: int):
        self._balance = initial_balance
        self._rate = rate
        self._lock = RLock() if get_config().thread_safe else nullcontext()

    @staticmethod
    def validate_rate(rate: Any) -> int:
        """Rate is a whole number of percentage points, greater than zero"""
        return require_positive("rate", rate)

    @property
    def balance(self) -> int:
        with self._lock:
            return self._balance

    @property
    def rate(self) -> int:
        return self._rate

    @abstractmethod
    def allows_balance(self, balance: int) -> bool:
        """Check whether balance lies within this account's bounds"""

    @abstractmethod
    def yearly_change(self) -> int:
        """Interest for one year on the current balance, truncated toward zero"""

    def withdraw(self, amount: int) -> bool:
        """
        Withdraw amount from the account.

        Args:
            amount: Positive amount to take off the balance

        Returns:
            True if the balance was decreased, False if the amount is not
            positive or the new balance would fall outside the bounds.
            On False the account is unchanged.
        """
        return self._apply("withdraw", amount, -1)

    def deposit(self, amount: int) -> bool:
        """
        Deposit amount into the account.

        Returns True if the balance was increased, False otherwise.
        On False the account is unchanged.
        """
        return self._apply("deposit", amount, 1)

    def can_withdraw(self, amount: int) -> bool:
        """Check whether withdraw(amount) would succeed, without changing anything"""
        if not is_positive_amount(amount):
            return False
        with self._lock:
            return self.allows_balance(self._balance - amount)

    def can_deposit(self, amount: int) -> bool:
        """Check whether deposit(amount) would succeed, without changing anything"""
        if not is_positive_amount(amount):
            return False
        with self._lock:
            return self.allows_balance(self._balance + amount)

    def _apply(self, action: str, amount: int, sign: int) -> bool:
        if not is_positive_amount(amount):
            self._log_refused(action, amount, "amount must be positive")
            return False

        with self._lock:
            old_balance = self._balance
            new_balance = old_balance + sign * amount
            if not self.allows_balance(new_balance):
                self._log_refused(action, amount, "balance would leave account bounds")
                return False
            self._balance = new_balance

        log_action(
            logger, "debug", f"{action} of {amount} committed",
            action=action,
            resource=self.product_type.value,
            extra={"amount": amount, "old_balance": old_balance, "new_balance": new_balance}
        )
        return True

    def _log_refused(self, action: str, amount: int, reason: str) -> None:
        level = "info" if get_config().log_rejected_operations else "debug"
        log_action(
            logger, level, f"{action} of {amount} refused: {reason}",
            action=action,
            resource=self.product_type.value,
            extra={"amount": amount, "balance": self._balance, "reason": reason}
        )

    def to_dict(self) -> Dict[str, Any]:
        """Snapshot of the account fields"""
        with self._lock:
            return {
                "product_type": self.product_type.value,
                "balance": self._balance,
                "rate": self._rate,
            }

    def __repr__(self) -> str:
        fields = self.to_dict()
        fields.pop("product_type")
        args = ", ".join(f"{key}={value}" for key, value in fields.items())
        return f"{type(self).__name__}({args})"


class SavingAccount(Account):
    """
    Saving account.

    The balance always stays within [min_balance, max_balance]. Interest is
    rate percent of the balance per year.
    """

    product_type = ProductType.SAVINGS

    def __init__(self, initial_balance: int, min_balance: int, max_balance: int, rate: int):
        """
        Create a saving account.

        Args:
            initial_balance: Starting balance, within [min_balance, max_balance]
            min_balance: Lowest allowed balance, not negative
            max_balance: Highest allowed balance, at least min_balance
            rate: Yearly interest in whole percentage points, greater than zero

        Raises:
            InvalidParameter: If any argument breaks its constraint
        """
        require_non_negative("min_balance", min_balance)
        require_at_least("max_balance", max_balance, min_balance, "min_balance")
        require_at_least("initial_balance", initial_balance, min_balance, "min_balance")
        require_at_most("initial_balance", initial_balance, max_balance, "max_balance")
        self.validate_rate(rate)

        super().__init__(initial_balance, rate)
        self._min_balance = min_balance
        self._max_balance = max_balance

        logger.debug("Opened %r", self)

    @property
    def min_balance(self) -> int:
        return self._min_balance

    @property
    def max_balance(self) -> int:
        return self._max_balance

    def allows_balance(self, balance: int) -> bool:
        return self._min_balance <= balance <= self._max_balance

    def yearly_change(self) -> int:
        # A negative balance cannot be reached while min_balance >= 0; the
        # formula stays symmetric anyway.
        with self._lock:
            return percent_of(self._balance, self._rate)

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["min_balance"] = self._min_balance
        result["max_balance"] = self._max_balance
        return result


class CreditAccount(Account):
    """
    Credit account.

    The balance may go negative down to -credit_limit and has no upper
    bound. Interest is charged only on a negative balance; a positive
    balance earns nothing.
    """

    product_type = ProductType.CREDIT_LINE

    def __init__(self, initial_balance: int, credit_limit: int, rate: int):
        """
        Create a credit account.

        Args:
            initial_balance: Starting balance, not negative
            credit_limit: Largest debt allowed, greater than zero
            rate: Yearly interest on debt in whole percentage points, greater than zero

        Raises:
            InvalidParameter: If any argument breaks its constraint
        """
        require_non_negative("initial_balance", initial_balance)
        require_positive("credit_limit", credit_limit)
        self.validate_rate(rate)

        super().__init__(initial_balance, rate)
        self._credit_limit = credit_limit

        logger.debug("Opened %r", self)

    @property
    def credit_limit(self) -> int:
        return self._credit_limit

    @property
    def available_credit(self) -> int:
        """How much can still be withdrawn below zero"""
        with self._lock:
            return self._credit_limit + min(self._balance, 0)

    def allows_balance(self, balance: int) -> bool:
        return balance >= -self._credit_limit

    def yearly_change(self) -> int:
        with self._lock:
            if self._balance < 0:
                return percent_of(self._balance, self._rate)
            return 0

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["credit_limit"] = self._credit_limit
        return result
