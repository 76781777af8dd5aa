# -*- coding: utf-8 -*-
"""
Entry point to run the sanitizer service via python -m codefree.

Command line options override the HOST, PORT and LOG_LEVEL settings.
"""
import argparse

import uvicorn

from codefree import __version__
from codefree.config import settings

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="codefree",
        description="Serve the code-free markdown sanitizer over HTTP",
    )
    parser.add_argument("--host", default=settings.HOST, help="Bind address")
    parser.add_argument("--port", type=int, default=settings.PORT, help="Bind port")
    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Log level",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(argv=None):
    """Apply command line overrides and start the Uvicorn server."""
    args = parse_args(argv)
    settings.HOST = args.host
    settings.PORT = args.port
    settings.LOG_LEVEL = args.log_level

    # log_config=None keeps the JSON logging installed by codefree.api
    uvicorn.run(
        "codefree.api:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=False,
        log_level=settings.LOG_LEVEL.lower(),
        log_config=None,
    )


if __name__ == "__main__":
    main()
