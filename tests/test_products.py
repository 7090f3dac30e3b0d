"""
Test suite for products module

Tests opening accounts by product type and the result-style variant.
"""

import pytest

from bank_accounts.accounts import CreditAccount, ProductType, SavingAccount
from bank_accounts.errors import InvalidParameter
from bank_accounts.products import OpenResult, open_account, try_open_account


class TestOpenAccount:
    """Test open_account"""

    def test_open_savings(self):
        """Test SAVINGS builds a SavingAccount"""
        account = open_account(
            ProductType.SAVINGS,
            initial_balance=0, min_balance=0, max_balance=10_000, rate=5
        )

        assert isinstance(account, SavingAccount)
        assert account.deposit(10_000)
        assert account.balance == 10_000

    def test_open_credit_line(self):
        """Test CREDIT_LINE builds a CreditAccount"""
        account = open_account(
            ProductType.CREDIT_LINE, initial_balance=0, credit_limit=5_000, rate=15
        )

        assert isinstance(account, CreditAccount)
        assert account.withdraw(5_000)
        assert account.yearly_change() == -750

    def test_invalid_parameters_raise(self):
        """Test constructor errors propagate"""
        with pytest.raises(InvalidParameter):
            open_account(ProductType.CREDIT_LINE, initial_balance=0, credit_limit=0, rate=15)

    def test_unknown_product(self):
        """Test an unknown product type is a ValueError"""
        with pytest.raises(ValueError, match="Unknown product type"):
            open_account("loan", initial_balance=0)


class TestTryOpenAccount:
    """Test result-style account opening"""

    def test_success(self):
        """Test a valid request yields an account"""
        result = try_open_account(
            ProductType.CREDIT_LINE, initial_balance=3_000, credit_limit=5_000, rate=15
        )

        assert result.ok
        assert result.error is None
        assert result.unwrap().yearly_change() == 0

    def test_failure(self):
        """Test a rejected request yields the error instead of raising"""
        result = try_open_account(
            ProductType.SAVINGS,
            initial_balance=5_000, min_balance=2_000, max_balance=1_000, rate=5
        )

        assert not result.ok
        assert result.account is None
        assert result.error.field == "max_balance"

        with pytest.raises(InvalidParameter):
            result.unwrap()

    def test_result_is_immutable(self):
        """Test OpenResult cannot be modified"""
        result = OpenResult(error=InvalidParameter("rate", 0, "must be greater than 0"))

        with pytest.raises(AttributeError):
            result.account = None
