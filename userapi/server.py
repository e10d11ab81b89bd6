"""
Process bootstrap.

Checks the MongoDB connection, then serves the application with
uvicorn on either a TCP address or a Unix-domain socket, as
configured. Startup failures are fatal: they are logged and the
process exits with status 1.

Usage:
    python -m userapi.server
    python -m userapi.server --listen-type sock --socket-path /run/userapi.sock
    python -m userapi.server --host 0.0.0.0 --port 9000
"""

import argparse
import logging
import os
import sys

import uvicorn

from userapi.core.config import Settings, get_settings
from userapi.infrastructure.mongodb import check_connection, get_client
from userapi.shared.logging import configure_logging

logger = logging.getLogger(__name__)

KEEP_ALIVE_TIMEOUT_SECONDS = 15


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="User API server")
    parser.add_argument(
        "--listen-type",
        choices=["port", "sock"],
        default=None,
        help="Listen on a TCP port or a Unix-domain socket",
    )
    parser.add_argument("--host", default=None, help="TCP bind address")
    parser.add_argument("--port", type=int, default=None, help="TCP port")
    parser.add_argument("--socket-path", default=None, help="Unix-domain socket path")
    return parser


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Return settings with every CLI override that was given applied."""
    overrides = {
        "listen_type": args.listen_type,
        "listen_bind_ip": args.host,
        "listen_port": args.port,
        "socket_path": args.socket_path,
    }
    return settings.model_copy(
        update={k: v for k, v in overrides.items() if v is not None}
    )


def listener_options(settings: Settings) -> dict:
    """Return the uvicorn keyword arguments selecting the listener."""
    if settings.listen_type == "sock":
        socket_path = os.path.abspath(settings.socket_path)
        logger.info("Listen unix socket %s", socket_path)
        return {"uds": socket_path}
    logger.info("Listen tcp %s:%d", settings.listen_bind_ip, settings.listen_port)
    return {"host": settings.listen_bind_ip, "port": settings.listen_port}


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    settings = apply_overrides(get_settings(), args)
    configure_logging(level=settings.log_level)

    logger.info("Start application")
    try:
        check_connection(get_client())
    except ConnectionError:
        logger.critical("MongoDB is unreachable; aborting startup.", exc_info=True)
        sys.exit(1)

    # uvicorn logs a failed bind and exits with status 1 on its own.
    uvicorn.run(
        "userapi.main:app",
        log_level=settings.log_level.lower(),
        access_log=False,
        timeout_keep_alive=KEEP_ALIVE_TIMEOUT_SECONDS,
        **listener_options(settings),
    )


if __name__ == "__main__":
    main()
