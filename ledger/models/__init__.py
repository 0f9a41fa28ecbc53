"""Data models for the ledger."""

from .account import Account
from .exceptions import (
    BankError,
    InsufficientFundsError,
    InvalidAmountError,
)

__all__ = [
    "Account",
    "BankError",
    "InsufficientFundsError",
    "InvalidAmountError",
]
