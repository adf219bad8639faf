"""Reusable FastAPI dependencies.

Everything is resolved from ``request.app.state`` so each application instance
carries its own storage context and settings.
"""

import logging
from collections.abc import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from ledger.core.config import Settings
from ledger.core.container import ApplicationContainer
from ledger.domain.common.exceptions import RateLimitExceededError
from ledger.domain.transactions.service import TransactionService
from ledger.domain.transfers.service import TransferService
from ledger.domain.wallets.service import WalletService

logger = logging.getLogger(__name__)


def get_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


def get_settings(container: ApplicationContainer = Depends(get_container)) -> Settings:
    return container.settings


async def get_db_session(
    container: ApplicationContainer = Depends(get_container),
) -> AsyncGenerator[AsyncSession, None]:
    async with container.database.session() as session:
        yield session


def get_wallet_service(db: AsyncSession = Depends(get_db_session)) -> WalletService:
    return WalletService.with_session(db)


def get_transaction_service(
    db: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
) -> TransactionService:
    return TransactionService.with_session(
        db,
        default_count=settings.ledger.default_transactions_count,
        max_count=settings.ledger.max_transactions_count,
    )


def get_transfer_service(container: ApplicationContainer = Depends(get_container)) -> TransferService:
    return container.transfer_service


def check_rate_limit(request: Request, container: ApplicationContainer = Depends(get_container)) -> None:
    """Admission control, evaluated before the handler body runs."""
    limiter = container.rate_limiter
    if limiter is None:
        return
    client_ip = request.client.host if request.client else "unknown"
    if not limiter.is_allowed(client_ip):
        logger.warning("Rate limit exceeded", extra={"client": client_ip, "path": request.url.path})
        raise RateLimitExceededError()


__all__ = [
    "check_rate_limit",
    "get_container",
    "get_db_session",
    "get_settings",
    "get_transaction_service",
    "get_transfer_service",
    "get_wallet_service",
]
