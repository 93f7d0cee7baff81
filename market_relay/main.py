"""Server entry point.

Usage:
    market-relay
    python -m market_relay.main
"""

import uvicorn
from dotenv import load_dotenv

from market_relay.api.routes import create_app
from market_relay.config import Settings
from market_relay.observability import configure_logging


def run() -> None:
    """Load ``.env``, build the app and serve it."""
    load_dotenv()
    settings = Settings.from_env()
    configure_logging(settings.LOG_LEVEL)

    app = create_app(settings=settings)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
