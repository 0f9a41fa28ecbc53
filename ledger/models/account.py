"""Account data model."""

import logging
from dataclasses import dataclass, field

from ledger.models.exceptions import InsufficientFundsError, InvalidAmountError

logger = logging.getLogger(__name__)


@dataclass
class Account:
    """Represents a bank account holding a balance in the smallest currency unit."""

    id: int
    holder: str
    balance: int = field(default=0, init=False)

    def deposit(self, amount: int) -> int:
        """
        Deposit funds into the account.

        Args:
            amount: The amount to deposit (must not be negative)

        Returns:
            The balance after the deposit

        Raises:
            InvalidAmountError: If the amount is negative
        """
        if amount < 0:
            logger.warning("Rejected deposit of %s into account %s", amount, self.id)
            raise InvalidAmountError("Cannot deposit a negative amount")

        self.balance += amount
        logger.debug("Account %s deposit %s, balance %s", self.id, amount, self.balance)
        return self.balance

    def withdraw(self, amount: int) -> int:
        """
        Withdraw funds from the account.

        A negative amount is rejected the same way as an overdraft.

        Args:
            amount: The amount to withdraw (0 <= amount <= balance)

        Returns:
            The balance after the withdrawal

        Raises:
            InsufficientFundsError: If the amount is negative or exceeds the balance
        """
        if amount < 0 or amount > self.balance:
            logger.warning(
                "Rejected withdrawal of %s from account %s (balance %s)",
                amount,
                self.id,
                self.balance,
            )
            raise InsufficientFundsError()

        self.balance -= amount
        logger.debug("Account %s withdraw %s, balance %s", self.id, amount, self.balance)
        return self.balance

    def summary(self) -> str:
        """Describe the holder and current balance."""
        return f"{self.holder} has a balance ${self.balance}"
