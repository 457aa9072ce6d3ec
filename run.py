"""PatrolLink — Launch script."""

import logging
import os
import sys

import uvicorn

# Ensure the project root is in path
sys.path.insert(0, os.path.dirname(__file__))

from backend.config import HOST, PORT, RELOAD, LOG_LEVEL


def main():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "backend.server:app",
        host=HOST,
        port=PORT,
        reload=RELOAD,
        reload_dirs=[os.path.dirname(os.path.abspath(__file__))] if RELOAD else None,
        log_level=LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
