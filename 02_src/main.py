"""Main entry point for the memories-client debug API."""

import os
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from memories_client.api import create_fastapi_app
from memories_client.app import Application
from memories_client.logging_config import setup_logging
from memories_client.sim import Sim


def main():
    """Run the debug API."""
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env")
    setup_logging()

    # Get configuration from environment
    host = os.getenv("DEBUG_HOST", "localhost")
    port = int(os.getenv("DEBUG_PORT", "8001"))

    application = Application()
    sim = Sim(application)
    app = create_fastapi_app(application, sim)

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level="info",
    )


if __name__ == "__main__":
    main()
