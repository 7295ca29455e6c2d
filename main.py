"""
Group Run Finder Backend
========================
Entry point. Run with ``python main.py`` or ``uvicorn main:app``.

Host, port and auto-reload come from ``API_HOST`` / ``API_PORT`` /
``API_RELOAD`` (see ``src/config.py``).
"""

import uvicorn

from src.api.app import create_app
from src.config import settings

app = create_app()


def run() -> None:
    uvicorn.run(
        "main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
