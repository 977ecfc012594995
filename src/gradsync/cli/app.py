"""
CLI Application - Command line entry point for gradsync.

Usage:
    # Interactive terminal UI (registration form + gated list)
    gradsync tui

    # Run the bundled Record Store
    gradsync serve --port 5000

    # One-shot commands against a running store
    gradsync list
    gradsync count
    gradsync register --name "Ada" --faculty "Engineering" --year 2024 --telephone 123
    gradsync delete 64f1c0ffee --yes

Environment Variables:
    GRADSYNC_API_URL: Record Store API root (default http://localhost:5000/api)
    GRADSYNC_TIMEOUT: Request deadline in seconds (default 8)
    GRADSYNC_SECRET: Gate secret for the list view
    PORT: Port the bundled store listens on (default 5000)
"""

import argparse
import asyncio
import logging
from dataclasses import replace
from typing import Optional

from ..adapters.config import EnvironmentConfigProvider
from ..adapters.store import HttpRecordStore
from ..application.sync import SyncController
from ..core.domain.entities import GraduateFields
from ..core.ports.config_provider import AppConfig
from .exit_codes import ExitCode
from .output import Console, ConsolePresenter


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
TUI_LOG_FILE = "gradsync.log"


def setup_logging(verbose: bool = False, filename: Optional[str] = None) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        filename=filename,
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="gradsync",
        description="Register graduates and browse the gated graduate list",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--api-url",
        type=str,
        help="Record Store API root (or set GRADSYNC_API_URL)"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Request deadline in seconds (or set GRADSYNC_TIMEOUT)"
    )
    parser.add_argument(
        "--retries",
        type=int,
        help="Automatic retries for transient fetch failures"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    commands = parser.add_subparsers(dest="command", required=True)

    tui = commands.add_parser("tui", help="Interactive terminal UI")
    tui.add_argument(
        "--no-fetch-ahead",
        action="store_true",
        help="Do not fetch the list before the gate is unlocked"
    )

    serve = commands.add_parser("serve", help="Run the bundled Record Store")
    serve.add_argument("--host", type=str, help="Interface to bind (or set GRADSYNC_HOST)")
    serve.add_argument("--port", type=int, help="Port to listen on (or set PORT)")

    commands.add_parser("list", help="Print all registered graduates")
    commands.add_parser("count", help="Print the number of registered graduates")

    register = commands.add_parser("register", help="Register a graduate")
    register.add_argument("--name", required=True)
    register.add_argument("--faculty", required=True)
    register.add_argument("--year", required=True, help="Graduation year")
    register.add_argument("--telephone", required=True)

    delete = commands.add_parser("delete", help="Delete a graduate by id")
    delete.add_argument("id", help="Graduate id (see 'gradsync list')")
    delete.add_argument("--yes", "-y", action="store_true", help="Skip the confirmation prompt")

    return parser


def load_config(args: argparse.Namespace) -> tuple[Optional[AppConfig], list[str]]:
    """
    Load configuration with CLI overrides applied.

    Values are validated before they are converted, so the config is None
    whenever errors are returned.
    """
    provider = EnvironmentConfigProvider(cli_overrides=vars(args))
    errors = provider.validate()
    if errors:
        return None, errors
    return provider.load(), []


# -----------------------------------------------------------------------------
# One-shot Commands
# -----------------------------------------------------------------------------


def _build_controller(config: AppConfig, presenter: ConsolePresenter) -> SyncController:
    store = HttpRecordStore(config.store)
    sync_config = replace(config.sync, fetch_ahead=False)
    return SyncController(store, presenter=presenter, config=sync_config)


async def _show_graduates(config: AppConfig, console: Console, show_records: bool) -> int:
    controller = _build_controller(config, ConsolePresenter(console, show_records=show_records))
    try:
        controller.open_gate()
        if not await controller.submit_secret(config.sync.secret):
            return ExitCode.CONFIG_ERROR
        return ExitCode.SUCCESS if controller.state.last_error is None else ExitCode.ERROR
    finally:
        controller.store.close()


async def _register(config: AppConfig, console: Console, args: argparse.Namespace) -> int:
    controller = _build_controller(config, ConsolePresenter(console))
    fields = GraduateFields(
        name=args.name,
        faculty=args.faculty,
        graduation_year=args.year,
        telephone=args.telephone,
    )
    try:
        result = await controller.create(fields)
    finally:
        controller.store.close()
    if result.success:
        console.detail(f"id: {result.data.id}")
        return ExitCode.SUCCESS
    return ExitCode.ERROR


async def _delete(config: AppConfig, console: Console, record_id: str) -> int:
    controller = _build_controller(config, ConsolePresenter(console))
    try:
        result = await controller.remove(record_id)
    finally:
        controller.store.close()
    return ExitCode.SUCCESS if result.success else ExitCode.ERROR


def run(args: argparse.Namespace) -> int:
    """Run a parsed command."""
    config, errors = load_config(args)
    verbose = config.verbose if config else bool(args.verbose)

    if args.command == "tui":
        if verbose:
            setup_logging(True, filename=TUI_LOG_FILE)
    else:
        setup_logging(verbose)
    logger = logging.getLogger("main")

    if errors or config is None:
        for error in errors:
            logger.error(error)
        return ExitCode.CONFIG_ERROR

    console = Console(verbose=config.verbose)

    if args.command == "tui":
        from .tui import run_tui
        return run_tui(config)

    if args.command == "serve":
        from ..server import run_server
        run_server(host=config.server.host, port=config.server.port)
        return ExitCode.SUCCESS

    if args.command in ("list", "count"):
        console.header("Graduates" if args.command == "list" else "Graduate Count")
        return asyncio.run(_show_graduates(config, console, args.command == "list"))

    if args.command == "register":
        return asyncio.run(_register(config, console, args))

    if args.command == "delete":
        if not args.yes and not console.confirm(f"Delete graduate {args.id}? This cannot be undone"):
            console.info("Aborted.")
            return ExitCode.CANCELLED
        return asyncio.run(_delete(config, console, args.id))

    return ExitCode.ERROR


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return int(run(args))
    except KeyboardInterrupt:
        return ExitCode.CANCELLED
