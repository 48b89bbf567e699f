"""
Main CLI entry point for the admin page adapter.

Renders a configured settings page, single fields, or stored options
through the in-memory reference host.
"""

import argparse
import sys
from pathlib import Path

import yaml

from adminpage.errors import AdminPageError
from adminpage.logging import (
    configure_logging_from_args,
    exception_exc_info,
    format_exception_summary,
    get_logger,
)

DEFAULT_CONFIG_PATH = Path("adminpage.yaml")


def build_parser() -> argparse.ArgumentParser:
    """
    Build the main argument parser with subcommands.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="adminpage",
        description="Admin page - declarative settings pages for a host CMS",
        epilog="Use 'adminpage <command> --help' for more information on a specific command.",
    )

    parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        help=f"Path to page configuration file (default: {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output (DEBUG level)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level (overrides --verbose)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Write logs to file",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description="Available commands",
        required=True,
    )

    render_parser = subparsers.add_parser(
        "render",
        help="Render the full settings page",
    )
    render_parser.add_argument(
        "--assets-url",
        type=str,
        help="Public URL of the bundled js/css folder",
    )

    field_parser = subparsers.add_parser(
        "field",
        help="Render a single field",
    )
    field_parser.add_argument("name", help="Field name")
    field_parser.add_argument(
        "--assets-url",
        type=str,
        help="Public URL of the bundled js/css folder",
    )

    options_parser = subparsers.add_parser(
        "options",
        help="Print stored values for one language as JSON",
    )
    options_parser.add_argument(
        "--language",
        type=str,
        help="Language code (default: site locale)",
    )

    submit_parser = subparsers.add_parser(
        "submit",
        help="Save field values as a settings form post would",
    )
    submit_parser.add_argument(
        "assignments",
        nargs="+",
        help="name=value pairs; name is 'field', 'field.de_DE' or a full form name",
    )
    submit_parser.add_argument(
        "--merge",
        action="store_true",
        help="Keep stored values of fields that are not posted",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the adminpage CLI.

    Args:
        argv: Command-line arguments (for testing)

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging_from_args(
        verbose=args.verbose,
        log_level=args.log_level,
        log_file=str(args.log_file) if args.log_file else None,
    )

    logger = get_logger(__name__)
    logger.debug("Parsed arguments: %s", args)

    cfg_path = Path(args.config).expanduser().resolve()
    if not cfg_path.exists():
        logger.error("Config file not found: %s", cfg_path)
        print(f"Error: Configuration file not found: {cfg_path}")
        print("Create an adminpage.yaml file or use --config to specify a different path.")
        return 1

    try:
        logger.info("Loading configuration from: %s", cfg_path)
        from adminpage.config import load_config_from_file
        config = load_config_from_file(cfg_path)

        from adminpage import cli
        if args.command == "render":
            return cli.run_render(args, config)
        if args.command == "field":
            return cli.run_field(args, config)
        if args.command == "options":
            return cli.run_options(args, config)
        if args.command == "submit":
            return cli.run_submit(args, config)

        parser.print_help()
        return 1

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        print("\nInterrupted by user.")
        return 130

    except (AdminPageError, ValueError, OSError, yaml.YAMLError) as e:
        summary = format_exception_summary(e)
        if args.verbose:
            logger.error(summary, exc_info=exception_exc_info(e))
        else:
            logger.error(summary)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except Exception as e:
        logger.exception("Unhandled exception in main")
        print(f"\nError: {e}", file=sys.stderr)
        if args.verbose:
            raise
        return 1


if __name__ == "__main__":
    sys.exit(main())
