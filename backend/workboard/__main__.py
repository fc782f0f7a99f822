"""
Server entry point: `python -m workboard` or the `workboard` console script.

Serves the module-level app from workboard.main on BACKEND_HOST:BACKEND_PORT.
"""

import uvicorn

from workboard.config import settings


def main() -> None:
    uvicorn.run(
        "workboard.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
