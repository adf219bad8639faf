"""SQLAlchemy ORM models."""
from datetime import datetime, timezone

from sqlalchemy import BigInteger, CheckConstraint, Column, DateTime, Integer, String

from ledger.infrastructure.database.base import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Wallet(Base):
    __tablename__ = "wallets"
    __table_args__ = (CheckConstraint("balance_cents >= 0", name="ck_wallets_balance_non_negative"),)

    address = Column(String(64), primary_key=True)
    balance_cents = Column(BigInteger, nullable=False, default=0)
    # Python-side defaults keep the values loaded after flush, no refresh round trip.
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)


class Transaction(Base):
    __tablename__ = "transactions"
    __table_args__ = (
        CheckConstraint("amount_cents > 0", name="ck_transactions_amount_positive"),
        CheckConstraint("from_address <> to_address", name="ck_transactions_distinct_wallets"),
    )

    # Integer (not BigInteger) so SQLite treats it as the autoincrementing rowid.
    id = Column(Integer, primary_key=True, autoincrement=True)
    from_address = Column(String(64), nullable=False, index=True)
    to_address = Column(String(64), nullable=False, index=True)
    amount_cents = Column(BigInteger, nullable=False)
    timestamp = Column(DateTime(timezone=True), nullable=False, index=True)
