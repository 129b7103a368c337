"""
Bank Ledger Module

Single-account ledger: deposits always succeed, withdrawals only succeed
when the balance covers them. Amounts are held as Decimal, never float.
"""

from decimal import Decimal
from dataclasses import dataclass
from typing import Union

from .logging_config import get_logger, log_action


logger = get_logger(__name__)

Amount = Union[Decimal, int, str]


def to_decimal(amount: Amount) -> Decimal:
    """Coerce to Decimal without passing through float"""
    if not isinstance(amount, Decimal):
        amount = Decimal(str(amount))
    return amount


@dataclass
class BankAccount:
    """
    A single account holder and their running balance
    """
    holder_name: str
    balance: Decimal = Decimal('0')

    def __post_init__(self):
        self.balance = to_decimal(self.balance)

    def deposit(self, amount: Amount) -> Decimal:
        """Add funds unconditionally and return the new balance"""
        amount = to_decimal(amount)
        self.balance += amount
        log_action(logger, "info", "Deposit", action="deposit", resource=self.holder_name,
                   extra={"amount": str(amount), "balance": str(self.balance)})
        return self.balance

    def withdraw(self, amount: Amount) -> bool:
        """
        Take funds out if the balance covers them.

        Returns:
            True if withdrawn, False on insufficient funds (balance unchanged)
        """
        amount = to_decimal(amount)
        if amount > self.balance:
            log_action(logger, "info", "Insufficient funds", action="withdraw_declined",
                       resource=self.holder_name,
                       extra={"amount": str(amount), "balance": str(self.balance)})
            return False

        self.balance -= amount
        log_action(logger, "info", "Withdrawal", action="withdraw", resource=self.holder_name,
                   extra={"amount": str(amount), "balance": str(self.balance)})
        return True

    def describe_balance(self, decimals: int = 2) -> str:
        return f"{self.holder_name}'s Balance: {self.balance:.{decimals}f}"
