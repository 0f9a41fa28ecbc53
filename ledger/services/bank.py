"""Bank aggregate over a collection of accounts."""

import logging

from tabulate import tabulate

from ledger.models.account import Account

logger = logging.getLogger(__name__)


class Bank:
    """Owns an ordered collection of accounts and answers queries across them."""

    def __init__(self):
        self._accounts: list[Account] = []

    @property
    def accounts(self) -> tuple[Account, ...]:
        """Registered accounts in insertion order."""
        return tuple(self._accounts)

    def add_account(self, account: Account) -> None:
        """
        Register an account with the bank.

        The bank takes ownership of the account; callers should not keep
        using their own reference afterwards. Duplicate ids are not checked.

        Args:
            account: The Account to append
        """
        self._accounts.append(account)
        logger.debug("Registered account %s for %s", account.id, account.holder)

    def total_balance(self) -> int:
        """Sum of the balances of every registered account, 0 when empty."""
        return sum(account.balance for account in self._accounts)

    def summary(self) -> list[str]:
        """One summary line per account, in the order they were added."""
        return [account.summary() for account in self._accounts]

    def statement(self) -> str:
        """
        Render the registered accounts as a text table.

        Returns:
            A table with id, holder and balance columns, one row per account
        """
        header = ["ID", "Holder", "Balance"]
        rows = [[account.id, account.holder, account.balance] for account in self._accounts]
        return tabulate([header] + rows, headers="firstrow", stralign="right", numalign="right")
