"""SQLAlchemy-backed repository implementations."""

from .transaction_repository import SqlTransactionRepository
from .wallet_repository import SqlWalletRepository

__all__ = [
    "SqlTransactionRepository",
    "SqlWalletRepository",
]
