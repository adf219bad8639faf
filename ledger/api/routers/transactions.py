"""Transfer submission and transaction history endpoints."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from ledger.api.deps import (
    check_rate_limit,
    get_transaction_service,
    get_transfer_service,
)
from ledger.domain.transactions.service import TransactionService
from ledger.domain.transfers.models import TransferRequest as TransferCommand
from ledger.domain.transfers.service import TransferService
from ledger.schemas import ErrorResponse, TransactionResponse, TransferRequest

router = APIRouter()

_ERRORS = {400: {"model": ErrorResponse}, 429: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


@router.post(
    "/send",
    response_model=TransactionResponse,
    responses=_ERRORS,
    dependencies=[Depends(check_rate_limit)],
    summary="Transfer funds between two wallets",
)
async def send(
    payload: TransferRequest,
    service: TransferService = Depends(get_transfer_service),
) -> TransactionResponse:
    record = await service.transfer(
        TransferCommand(
            from_address=payload.from_address,
            to_address=payload.to_address,
            amount=payload.amount,
        )
    )
    return TransactionResponse.from_record(record)


@router.get(
    "/transactions",
    response_model=list[TransactionResponse],
    responses={400: {"model": ErrorResponse}},
    summary="List the most recent transactions",
)
async def list_transactions(
    # Parsed by the service so malformed values get the ledger's own error body.
    count: Optional[str] = Query(None, description="Number of transactions, default 10, max 1000"),
    service: TransactionService = Depends(get_transaction_service),
) -> list[TransactionResponse]:
    records = await service.list_recent(count)
    return [TransactionResponse.from_record(record) for record in records]
