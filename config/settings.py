"""Configuration management for the ledger demo."""
import os
from dataclasses import dataclass


def _int_from_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value == '':
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} environment variable must be an integer, got {value!r}")


@dataclass
class Settings:
    """Configuration settings for the ledger demo.

    Every value has a default, so the demo runs without any environment.
    """

    # Logging Configuration
    log_file: str = 'ledger.log'
    log_level: str = 'INFO'

    # Demo Amounts
    demo_deposit_amount: int = 1000
    demo_withdraw_amount: int = 10

    @classmethod
    def load(cls) -> 'Settings':
        """Load settings from environment variables.

        Returns:
            Settings: A Settings instance, with defaults for unset variables.

        Raises:
            ValueError: If an amount variable is not an integer.
        """
        defaults = cls()
        return cls(
            log_file=os.getenv('LEDGER_LOG_FILE') or defaults.log_file,
            log_level=(os.getenv('LEDGER_LOG_LEVEL') or defaults.log_level).upper(),
            demo_deposit_amount=_int_from_env('LEDGER_DEPOSIT_AMOUNT', defaults.demo_deposit_amount),
            demo_withdraw_amount=_int_from_env('LEDGER_WITHDRAW_AMOUNT', defaults.demo_withdraw_amount),
        )
