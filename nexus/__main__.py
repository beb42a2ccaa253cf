"""Run the relay with uvicorn using the configured host and port."""

import uvicorn

from nexus.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "nexus.api.app:app",
        host=settings.api.host,
        port=settings.api.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
