"""Custom exceptions for the ledger."""


class BankError(Exception):
    """Base exception for all ledger errors."""
    pass


class InvalidAmountError(BankError):
    """Raised when an invalid amount is provided (e.g., negative deposit)."""
    pass


class InsufficientFundsError(BankError):
    """Raised when a withdrawal is negative or exceeds the balance."""

    def __init__(self):
        super().__init__("Insufficient funds")
