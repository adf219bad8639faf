"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ledger.core.rate_limit import SimpleRateLimiter
from ledger.core.config import Settings, get_settings
from ledger.domain.transfers.service import TransferService
from ledger.infrastructure.database.session import Database


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    database: Database
    transfer_service: TransferService = field(init=False)
    rate_limiter: Optional[SimpleRateLimiter] = field(init=False, default=None)

    def __post_init__(self) -> None:
        self.transfer_service = TransferService.from_database(self.database)
        if self.settings.rate_limit.enabled:
            self.rate_limiter = SimpleRateLimiter(
                max_requests=self.settings.rate_limit.max_requests,
                window_seconds=self.settings.rate_limit.window_seconds,
            )

    async def shutdown(self) -> None:
        await self.database.dispose()


def build_container(settings: Optional[Settings] = None) -> ApplicationContainer:
    settings = settings or get_settings()
    return ApplicationContainer(settings=settings, database=Database.from_settings(settings))


__all__ = ["ApplicationContainer", "build_container"]
