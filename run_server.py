# run_server.py
import argparse
import sys
from typing import List, Optional

import uvicorn

from config import settings
from src.core.logger import get_logger, setup_logging

logger = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the User Directory API server.")
    parser.add_argument("--host", default=settings.HOST, help=f"Listen address (default: {settings.HOST})")
    parser.add_argument("--port", type=int, default=settings.PORT, help=f"Listen port (default: {settings.PORT})")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging()
    logger.info(f"Starting server on {args.host}:{args.port}")

    try:
        # Blocks until SIGINT/SIGTERM
        uvicorn.run("api.main:app", host=args.host, port=args.port, log_config=None)
    except SystemExit as e:
        # uvicorn exits non-zero when it cannot bind the listen socket
        if e.code:
            print(f"Failed to start server on {args.host}:{args.port} (exit code {e.code})", file=sys.stderr)
        raise

    logger.info("Server stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
