"""Entry point for running the Codeython API with Uvicorn.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables (defaults ``0.0.0.0`` and ``8000``).  Other settings such as
``DATABASE_URL`` and ``SECRET_KEY`` are read by ``core.config``.

Usage:
    python run.py
"""
import os

from uvicorn import Config, Server

from codeython_api.app.core.config import settings
from codeython_api.app.main import app


def main() -> None:
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    config = Config(app=app, host=host, port=port, reload=False, log_level=settings.log_level.lower())
    Server(config).run()


if __name__ == "__main__":
    main()
