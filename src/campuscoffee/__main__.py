"""Run the CampusCoffee server with uvicorn."""

import uvicorn

from .config import get_config


def main() -> None:
    config = get_config()
    uvicorn.run(
        "campuscoffee.main:app",
        host=config.server.host,
        port=config.server.port,
        log_level="debug" if config.server.debug else "info",
    )


if __name__ == "__main__":
    main()
