"""Pydantic schemas used across the project."""
from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from ledger.domain.transactions.models import TransactionRecord
from ledger.domain.wallets.models import WalletSnapshot


class TransferRequest(BaseModel):
    """Body of ``POST /send``.

    Only the shape is checked here. Address format, sign of the amount and
    everything else is judged by the transfer engine.
    """

    model_config = ConfigDict(populate_by_name=True)

    from_address: str = Field(..., alias="from")
    to_address: str = Field(..., alias="to")
    amount: Decimal = Field(..., max_digits=18, decimal_places=2)


class TransactionResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    from_address: str = Field(..., alias="from")
    to_address: str = Field(..., alias="to")
    amount: Decimal
    timestamp: datetime

    @classmethod
    def from_record(cls, record: TransactionRecord) -> "TransactionResponse":
        return cls(
            id=record.id,
            from_address=record.from_address,
            to_address=record.to_address,
            amount=record.amount,
            timestamp=record.timestamp,
        )


class WalletBalanceResponse(BaseModel):
    address: str
    balance: Decimal

    @classmethod
    def from_snapshot(cls, snapshot: WalletSnapshot) -> "WalletBalanceResponse":
        return cls(address=snapshot.address, balance=snapshot.balance)


class ErrorResponse(BaseModel):
    error: str
    code: str


class HealthResponse(BaseModel):
    status: str = "ok"
