"""Wallet balance lookup."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Path

from ledger.api.deps import get_wallet_service
from ledger.domain.wallets.service import WalletService
from ledger.schemas import ErrorResponse, WalletBalanceResponse

router = APIRouter()


@router.get(
    "/wallet/{address}/balance",
    response_model=WalletBalanceResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Get the balance of a wallet",
)
async def wallet_balance(
    address: str = Path(..., description="64 lowercase hex characters"),
    service: WalletService = Depends(get_wallet_service),
) -> WalletBalanceResponse:
    wallet = await service.get_wallet(address)
    return WalletBalanceResponse.from_snapshot(wallet)
