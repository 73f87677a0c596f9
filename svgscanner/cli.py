"""
Command-line interface for the SVG scanner.

Scans SVG files given on the command line, prints the report and exits
with 0 when every file is clean or 1 otherwise.
"""

import argparse
import logging
import os
import sys
from typing import Optional, List

from svgscanner import __version__
from svgscanner.config import (
    OUTPUT_FORMATS,
    create_default_config,
    load_scan_config,
)
from svgscanner.core.aggregator import create_aggregator
from svgscanner.formatters import Reporter, get_formatter
from svgscanner.policy import AllowlistPolicy


DEFAULT_CONFIG_FILE = ".svgscanner.yaml"

# Unexpected failures of the tool itself, as opposed to problems found in files.
EXIT_TOOL_ERROR = 2


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="svgscanner",
        description="Allow-list based security scanner for SVG files.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  svgscanner scan logo.svg icons/*.svg         # Scan files, JSON report on stdout
  svgscanner scan a.svg --format text          # Human-readable output
  svgscanner scan a.svg -f sarif -o out.sarif  # SARIF output to file
  svgscanner list-allowed --kind tags          # Show the composed allow-list
  svgscanner init                              # Create config file
        """
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Scan command
    scan_parser = subparsers.add_parser("scan", help="Scan SVG files for unsafe content")
    scan_parser.add_argument(
        "paths",
        nargs="*",
        help="Files to scan",
    )
    scan_parser.add_argument(
        "-c", "--config",
        help="Path to configuration file",
    )
    scan_parser.add_argument(
        "-f", "--format",
        choices=OUTPUT_FORMATS,
        help="Output format (default: json)",
    )
    scan_parser.add_argument(
        "-o", "--output",
        help="Output file (default: stdout)",
    )
    scan_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log scan progress to stderr",
    )
    scan_parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    # List-allowed command
    list_parser = subparsers.add_parser("list-allowed", help="List allowed tags and attributes")
    list_parser.add_argument(
        "--kind",
        choices=["tags", "attributes", "all"],
        default="all",
        help="Which allow-list to show",
    )
    list_parser.add_argument(
        "-c", "--config",
        help="Path to configuration file",
    )

    # Init command
    init_parser = subparsers.add_parser("init", help="Create a configuration file")
    init_parser.add_argument(
        "-f", "--force",
        action="store_true",
        help="Overwrite existing config file",
    )

    return parser


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr when verbose, otherwise stay silent."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def cmd_scan(args: argparse.Namespace) -> int:
    """Execute the scan command."""
    configure_logging(args.verbose)

    config = load_scan_config(args.config, start_dir=os.getcwd())

    # Apply command-line overrides
    if args.format:
        config.output.format = args.format
    if args.output:
        config.output.output_file = args.output
    if args.no_color:
        config.output.color = False

    aggregator = create_aggregator(config)
    report = aggregator.run_all(args.paths)

    formatter = get_formatter(config.output.format)

    if hasattr(formatter, "indent"):
        formatter.indent = config.output.indent
    if hasattr(formatter, "use_color"):
        formatter.use_color = formatter.use_color and config.output.color

    output, exit_code = Reporter(formatter).emit(report)

    # Write output
    if config.output.output_file:
        with open(config.output.output_file, "w", encoding="utf-8") as f:
            f.write(output + "\n")
        if config.output.format == "text":
            print(f"Results written to {config.output.output_file}")
    else:
        print(output)

    return exit_code


def cmd_list_allowed(args: argparse.Namespace) -> int:
    """Execute the list-allowed command."""
    config = load_scan_config(args.config, start_dir=os.getcwd())
    policy = AllowlistPolicy.build(
        extra_tags=config.extra_tags,
        extra_attributes=config.extra_attributes,
    )

    if args.kind in ("tags", "all"):
        print(f"\nAllowed tags ({len(policy.allowed_tags)})")
        print("-" * 40)
        for tag in sorted(policy.allowed_tags, key=str.lower):
            print(f"  {tag}")

    if args.kind in ("attributes", "all"):
        print(f"\nAllowed attributes ({len(policy.allowed_attributes)})")
        print("-" * 40)
        for attr in sorted(policy.allowed_attributes, key=str.lower):
            print(f"  {attr}")

    return 0


def cmd_init(args: argparse.Namespace) -> int:
    """Execute the init command."""
    if os.path.exists(DEFAULT_CONFIG_FILE) and not args.force:
        print(f"Configuration file {DEFAULT_CONFIG_FILE} already exists.")
        print("Use --force to overwrite.")
        return 1

    with open(DEFAULT_CONFIG_FILE, "w", encoding="utf-8") as f:
        f.write(create_default_config())

    print(f"Created configuration file: {DEFAULT_CONFIG_FILE}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        if args.command == "scan":
            return cmd_scan(args)
        elif args.command == "list-allowed":
            return cmd_list_allowed(args)
        elif args.command == "init":
            return cmd_init(args)
        else:
            parser.print_help()
            return 0

    except KeyboardInterrupt:
        print("\nScan interrupted.", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if os.environ.get("DEBUG"):
            raise
        return EXIT_TOOL_ERROR


if __name__ == "__main__":
    sys.exit(main())
