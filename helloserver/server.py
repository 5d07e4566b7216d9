import logging

import uvicorn

from .config import HOST, PORT
from .main import app

logger = logging.getLogger(__name__)


def run() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    logger.info("Listening on port %d...", PORT)
    # uvicorn stays quiet below warning so the line above is the only startup
    # announcement. Blocks until the process is killed; a failed bind exits.
    uvicorn.run(app, host=HOST, port=PORT, log_level="warning")
