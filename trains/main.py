"""Console entry point: bootstrap the database, optionally add a route, list routes."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, List, Optional

from .config import settings
from .database import Database, DataAccessError
from .logging_utils import configure_logging
from .services import Console, RouteRegistry, SchemaBootstrapper

logger = logging.getLogger("trains")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trains",
        description="Manage train routes and print the current schedule.",
    )
    parser.add_argument(
        "--database-url",
        default=settings.database_url,
        help="SQLAlchemy URL of the database server or SQLite file (default: %(default)s)",
    )
    parser.add_argument(
        "--database-name",
        default=settings.database_name,
        help="Database to create and use on the server (default: %(default)s)",
    )
    create = parser.add_mutually_exclusive_group()
    create.add_argument(
        "--create",
        dest="create",
        action="store_true",
        default=None,
        help="Create a new route without asking first",
    )
    create.add_argument(
        "--no-create",
        dest="create",
        action="store_false",
        help="Skip the route creation question",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Logging level (default: %(default)s)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {settings.app_version}",
    )
    return parser


def run(
    argv: Optional[List[str]] = None,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
    pause_seconds: Optional[float] = None,
) -> int:
    """
    Run one console session.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, settings.log_format, service_name=settings.app_name)
    logger.info("Start")

    console = Console(
        read_line=read_line,
        write=write,
        pause_seconds=settings.prompt_pause_seconds if pause_seconds is None else pause_seconds,
    )

    try:
        db = Database(args.database_url, echo=settings.debug, log=logging.getLogger("trains.database"))
    except DataAccessError as exc:
        error_message = f"Something went wrong: {exc}"
        logger.error(error_message)
        console.show(error_message)
        return 1

    try:
        SchemaBootstrapper(db, args.database_name, log=logging.getLogger("trains.bootstrap")).run()
        registry = RouteRegistry(db, log=logging.getLogger("trains.routes"))

        create = args.create
        if create is None:
            create = console.confirm("Do you want to create a new route?")
        if create:
            route = registry.create_route_interactive(console)
            console.show(f"Created route {route.id}.")

        for route in registry.reload():
            console.show(str(route))
    except DataAccessError as exc:
        error_message = f"Something went wrong: {exc}"
        logger.error(error_message)
        console.show(error_message)
        return 1
    except (EOFError, KeyboardInterrupt):
        logger.warning("Aborted")
        console.show("Aborted.")
        return 1
    finally:
        db.close()

    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
