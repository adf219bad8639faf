"""Run the service with ``python -m ledger``."""

import uvicorn

from ledger.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("ledger.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
