import logging

import uvicorn

from bootpane.config.settings import settings


def main() -> None:
    logging.basicConfig(level=settings.log_level.upper(), format=settings.log_format)
    uvicorn.run(
        "bootpane.app:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        timeout_keep_alive=30,
    )


if __name__ == "__main__":
    main()
