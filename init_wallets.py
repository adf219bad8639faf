"""
Seed the wallet store outside the server process.

Creates the configured number of funded wallets if the store is empty and
prints their addresses.
"""
import asyncio

from ledger.core.config import get_settings
from ledger.core.logging import configure_logging
from ledger.domain.wallets.service import provision_wallets
from ledger.infrastructure.database import Database


async def seed_wallets() -> None:
    settings = get_settings()
    configure_logging(level=settings.logging.level, json_logs=settings.logging.json_logs)

    database = Database.from_settings(settings)
    try:
        await database.init_db()
        wallets = await provision_wallets(
            database,
            settings.ledger.seed_wallet_count,
            settings.ledger.seed_balance,
        )
    finally:
        await database.dispose()

    if not wallets:
        print("Wallet store is not empty, nothing to do")
        return
    for wallet in wallets:
        print(f"{wallet.address} {wallet.balance}")


if __name__ == "__main__":
    asyncio.run(seed_wallets())
