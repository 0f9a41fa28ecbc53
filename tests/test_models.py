"""Tests for the Account model and exceptions."""

import pytest

from ledger.models.account import Account
from ledger.models.exceptions import (
    BankError,
    InsufficientFundsError,
    InvalidAmountError,
)


@pytest.fixture
def account():
    """Create a fresh account with a zero balance."""
    return Account(1, "Account holder 1")


def test_account_creation(account):
    """New accounts start with a zero balance."""
    assert account.id == 1
    assert account.holder == "Account holder 1"
    assert account.balance == 0


def test_account_constructor_takes_no_balance():
    """Balance is not a constructor argument."""
    with pytest.raises(TypeError):
        Account(1, "Alice", 500)


def test_deposit_returns_new_balance(account):
    """Deposit adds the amount and returns the updated balance."""
    assert account.deposit(1000) == 1000
    assert account.deposit(250) == 1250
    assert account.balance == 1250


def test_deposit_zero(account):
    """Zero is a valid deposit."""
    assert account.deposit(0) == 0


def test_deposit_negative_amount(account):
    """Should raise InvalidAmountError and leave balance unchanged."""
    with pytest.raises(InvalidAmountError) as exc_info:
        account.deposit(-5)

    assert str(exc_info.value) == "Cannot deposit a negative amount"
    assert account.balance == 0


def test_withdraw_returns_new_balance(account):
    """Withdraw subtracts the amount and returns the updated balance."""
    account.deposit(1000)

    assert account.withdraw(10) == 990
    assert account.balance == 990


def test_withdraw_entire_balance(account):
    """Withdrawing exactly the balance empties the account."""
    account.deposit(300)

    assert account.withdraw(300) == 0


def test_withdraw_from_empty_account(account):
    """Should raise InsufficientFundsError on a fresh account."""
    with pytest.raises(InsufficientFundsError):
        account.withdraw(50)

    assert account.balance == 0


def test_withdraw_more_than_balance(account):
    """Overdrafts are rejected and leave the balance unchanged."""
    account.deposit(100)

    with pytest.raises(InsufficientFundsError):
        account.withdraw(101)

    assert account.balance == 100


def test_withdraw_negative_amount(account):
    """Negative withdrawals are reported as insufficient funds."""
    account.deposit(100)

    with pytest.raises(InsufficientFundsError) as exc_info:
        account.withdraw(-1)

    assert str(exc_info.value) == "Insufficient funds"
    assert account.balance == 100


@pytest.mark.parametrize("amount", [0, 1, 17, 1000])
def test_deposit_then_withdraw_same_amount(account, amount):
    """A deposit followed by an equal withdrawal restores the balance."""
    account.deposit(50)

    assert account.deposit(amount) == 50 + amount
    assert account.withdraw(amount) == 50


def test_summary(account):
    """Summary reports the holder and balance."""
    account.deposit(1000)
    account.withdraw(10)

    assert account.summary() == "Account holder 1 has a balance $990"


def test_exceptions_hierarchy():
    """Both error kinds can be caught as BankError."""
    assert issubclass(InvalidAmountError, BankError)
    assert issubclass(InsufficientFundsError, BankError)

    errors = [
        InvalidAmountError("Cannot deposit a negative amount"),
        InsufficientFundsError(),
    ]

    for error in errors:
        assert isinstance(error, BankError)
