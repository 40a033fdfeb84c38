"""
Main CLI module with argument parsing and command execution.

Commands:
- view: view keys as a principal
- preload: warm the intrinsic store
- demo: replay the reference gallery scenario
"""
import argparse
import os
import sys
from typing import List, Optional

from mediacache import __version__
from mediacache.bootstrap import Application
from mediacache.cli.formatters import format_output
from mediacache.config import ConfigurationManager, LogLevel
from mediacache.domain.core.exceptions import DomainException
from mediacache.infrastructure.logging.logger import get_logger

DEMO_GALLERY = [
    "img_sunset.jpg",
    "img_sunset.jpg",
    "img_portrait.jpg",
    "img_portrait.jpg",
    "img_portrait.jpg",
    "private_secret_event.png",
    "img_landscape.jpg",
    "img_sunset.jpg",
    "img_landscape.jpg",
]
DEMO_PRIVATE_KEY = "private_secret_event.png"
DEMO_PRELOAD = ["img_new.png", "img_portrait.jpg", "img_landscape.jpg"]
DEMO_REVIEW = ["img_sunset.jpg", "img_portrait.jpg"]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "mediacache",
        description="Media Cache - lazy, access-controlled two-tier resource cache",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s view img_a.png img_b.png --principal alice   # View two images
  %(prog)s view private_x.png --principal admin --stats  # View and print stats
  %(prog)s preload img_a.png img_b.png --stats           # Warm intrinsic data
  %(prog)s demo                                          # Run the gallery demo
        """,
    )

    parser.add_argument("--config", help="Configuration file path (JSON or YAML)")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured logging level",
    )
    parser.add_argument("--format", choices=["json", "yaml"], default="json", help="Stats output format")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    view_parser = subparsers.add_parser("view", help="View resources as a principal")
    view_parser.add_argument("keys", nargs="+", help="Resource keys, viewed in order")
    view_parser.add_argument("--principal", "-p", required=True, help="Identity requesting access")
    view_parser.add_argument("--stats", action="store_true", help="Print cache statistics afterwards")

    preload_parser = subparsers.add_parser("preload", help="Warm the intrinsic data store")
    preload_parser.add_argument("keys", nargs="+", help="Resource keys to preload")
    preload_parser.add_argument("--stats", action="store_true", help="Print cache statistics afterwards")

    subparsers.add_parser("demo", help="Replay the gallery scenario")

    return parser


def run_demo(app: Application) -> None:
    """Gallery scenario: lazy loading, access control, preload and invalidation."""
    facade = app.facade
    output = app.output

    output.write("=== Lazy loading through the proxy ===")
    facade.view_batch(DEMO_GALLERY, "alice")
    facade.show_stats()

    output.write("=== Private image requested by a regular user ===")
    facade.view_one(DEMO_PRIVATE_KEY, "bob")

    output.write("=== Private image requested by admin ===")
    facade.view_one(DEMO_PRIVATE_KEY, "admin")
    facade.show_stats()

    output.write("=== Preloading intrinsic data ===")
    facade.preload(DEMO_PRELOAD)
    facade.show_stats()

    output.write("=== Invalidating the resource cache and viewing again ===")
    facade.invalidate()
    facade.view_batch(DEMO_REVIEW, "charlie")
    stats = facade.show_stats()

    output.write(f"Created intrinsic payloads: {stats.intrinsic_count}")
    output.write(f"Resource cache entries: {stats.resource_count}")


def execute_command(args: argparse.Namespace, app: Application) -> int:
    """Route a parsed command to the facade."""
    facade = app.facade

    if args.command == "view":
        facade.view_batch(args.keys, args.principal)
    elif args.command == "preload":
        facade.preload(args.keys)
    elif args.command == "demo":
        run_demo(app)
        return 0

    if getattr(args, "stats", False):
        app.output.write(format_output(facade.stats().to_dict(), args.format))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logger = get_logger(__name__)
    try:
        config = ConfigurationManager(args.config).app_config
        if args.log_level:
            config = config.model_copy(
                update={"logging": config.logging.model_copy(update={"level": LogLevel(args.log_level)})}
            )
        app = Application(config=config, configure_logging=True)
        return execute_command(args, app)
    except DomainException as e:
        logger.error("Command failed", command=args.command, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
