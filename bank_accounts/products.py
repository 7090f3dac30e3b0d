"""
Product Selection Module

Opens an account of the variant named by a ProductType. try_open_account
returns the outcome as a value instead of raising, for callers that
collect failures rather than handle exceptions.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Type

from .accounts import Account, CreditAccount, ProductType, SavingAccount
from .errors import InvalidParameter


PRODUCT_CLASSES: Dict[ProductType, Type[Account]] = {
    ProductType.SAVINGS: SavingAccount,
    ProductType.CREDIT_LINE: CreditAccount,
}


@dataclass(frozen=True)
class OpenResult:
    """Outcome of try_open_account: exactly one of account or error is set"""
    account: Optional[Account] = None
    error: Optional[InvalidParameter] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Account:
        """Return the opened account, or raise the stored error"""
        if self.error is not None:
            raise self.error
        return self.account


def open_account(product_type: ProductType, **params: Any) -> Account:
    """
    Open an account of the given product type

    Args:
        product_type: Which account variant to build
        **params: Constructor arguments of that variant

    Returns:
        The new account

    Raises:
        ValueError: If product_type is not a known product
        InvalidParameter: If the parameters are rejected
    """
    try:
        account_class = PRODUCT_CLASSES[product_type]
    except KeyError:
        raise ValueError(f"Unknown product type: {product_type!r}") from None
    return account_class(**params)


def try_open_account(product_type: ProductType, **params: Any) -> OpenResult:
    """Open an account, reporting rejected parameters in the result instead of raising"""
    try:
        return OpenResult(account=open_account(product_type, **params))
    except InvalidParameter as e:
        return OpenResult(error=e)
