from fastapi import APIRouter

from ledger.api.routers import transactions, wallets


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(transactions.router, tags=["transactions"])
    router.include_router(wallets.router, tags=["wallets"])
    return router


__all__ = [
    "create_api_router",
]
