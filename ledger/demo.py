"""Demonstration run of the ledger: two accounts, one bank."""
import logging
import sys

from dotenv import load_dotenv

from config.settings import Settings
from ledger.models import Account, BankError
from ledger.services.bank import Bank

logger = logging.getLogger('ledger')


def setup_logging(settings: Settings) -> None:
    """Send ledger logs to the configured file, replacing earlier handlers."""
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    logger.setLevel(settings.log_level)
    handler = logging.FileHandler(filename=settings.log_file, encoding='utf-8', mode='w')
    handler.setFormatter(logging.Formatter('%(asctime)s:%(levelname)s:%(name)s: %(message)s'))
    logger.addHandler(handler)


def main() -> None:
    load_dotenv()
    settings = Settings.load()
    setup_logging(settings)

    bank = Bank()

    account1 = Account(1, "Account holder 1")
    account2 = Account(2, "Account holder 2")

    try:
        balance_after_deposit = account1.deposit(settings.demo_deposit_amount)
    except BankError as err:
        logger.error("Deposit failed: %s", err)
        print(f"Error: {err}", file=sys.stderr)
        return

    try:
        balance_after_withdraw = account1.withdraw(settings.demo_withdraw_amount)
    except BankError as err:
        logger.error("Withdrawal failed: %s", err)
        print(f"Error: {err}", file=sys.stderr)
        return

    print(f"Your current balance : {balance_after_deposit}")
    print(f"Your current balance : {balance_after_withdraw}")

    summary = account1.summary()

    bank.add_account(account1)
    bank.add_account(account2)
    # the bank owns them now
    del account1, account2

    print(summary)
    for line in bank.summary():
        print(line)
    print(bank.statement())

    total_balance = bank.total_balance()
    logger.info("Demo finished with total balance %s", total_balance)
    print(f"Total balance for all accounts in our bank is ${total_balance}")


if __name__ == '__main__':
    main()
