"""
Runtime settings.
Positional CLI arguments win; environment variables fill in the rest.

    PORT          listening port            (default 8000)
    CONTENT_ROOT  directory being served    (default: current directory)
    HOST          bind address              (default 0.0.0.0)
    LOG_LEVEL     diagnostic log level      (default INFO)
"""

import argparse
import logging
import os
from typing import List, NamedTuple, Optional

DEFAULT_PORT = 8000
DEFAULT_HOST = "0.0.0.0"


class Config(NamedTuple):
    host: str
    port: int
    root: str
    log_level: str


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fileserver",
        description="Serve a directory over HTTP: GET reads, POST/PUT writes, DELETE removes.",
    )
    parser.add_argument("port", nargs="?", type=int,
                        default=os.getenv("PORT", str(DEFAULT_PORT)),
                        help=f"port to listen on (default {DEFAULT_PORT})")
    parser.add_argument("directory", nargs="?",
                        default=os.getenv("CONTENT_ROOT") or os.getcwd(),
                        help="directory to serve, created if missing (default: current directory)")
    return parser


def load_config(argv: Optional[List[str]] = None) -> Config:
    parser = build_parser()
    args = parser.parse_args(argv)

    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    # getLevelName maps known names to ints and anything else to "Level <name>"
    if not isinstance(logging.getLevelName(log_level), int):
        parser.error(f"invalid LOG_LEVEL: {log_level!r}")

    return Config(
        host=os.getenv("HOST", DEFAULT_HOST),
        port=args.port,
        root=os.path.abspath(args.directory),
        log_level=log_level,
    )
