"""Command-line entry point for the account server."""

from __future__ import annotations

import argparse
import logging

from .service import HttpService
from .users import DatabaseError, UserDatabase, default_db_path

log = logging.getLogger(__name__)

DEFAULT_PORT = 3221


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Gobang account server.")
    parser.add_argument("--host", default="0.0.0.0", help="address to listen on")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    parser.add_argument("--db", default=None, help="path of the SQLite user database")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    try:
        database = UserDatabase(args.db or default_db_path()).open()
    except DatabaseError as exc:
        log.critical("%s", exc)
        return 1

    with database:
        service = HttpService(database)
        try:
            service.listen(args.host, args.port)
        except OSError as exc:
            log.critical("cannot listen on port %d: %s", args.port, exc)
            return 1
        log.info("HTTP service running at http://localhost:%d/", service.server_address[1])
        try:
            service.serve_forever()
        except KeyboardInterrupt:
            pass
        finally:
            service.stop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())