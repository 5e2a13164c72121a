"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Integration with the demo application service
"""
import argparse
import os
import sys
import traceback
from typing import Any, Dict, List, Optional

from solid_showcase._package import DESCRIPTION, __version__
from solid_showcase.cli.formatters import OUTPUT_FORMATS, format_output
from solid_showcase.domain.base.exceptions import DomainException
from solid_showcase.domain.base.value_objects import Principle, Variant
from solid_showcase.infrastructure.logging.logger import get_logger

RUN_ALL = "all"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) if argv is None else "solid-showcase",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                          # List the available demos
  %(prog)s show dip                      # Describe the DIP demo
  %(prog)s run srp                       # Run the refactored SRP demo
  %(prog)s run ocp --variant bad         # Run the OCP violation
  %(prog)s run all --variant both        # Run every demo, both sides
  %(prog)s --format json run lsp         # Output as JSON
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path (JSON or YAML)')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set logging level (overrides configuration)')
    parser.add_argument('--format', choices=OUTPUT_FORMATS, default='text', help='Output format')
    parser.add_argument('--output', help='Output file (default: stdout)')
    parser.add_argument('--quiet', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', action='store_true', help='Print tracebacks on errors')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    list_parser = subparsers.add_parser('list', help='List the available demos')
    list_parser.add_argument('--format', dest='command_format', choices=OUTPUT_FORMATS,
                             help='Output format')

    show_parser = subparsers.add_parser('show', help='Describe one principle demo')
    show_parser.add_argument('principle', help='Principle key: srp, ocp, lsp, isp or dip')
    show_parser.add_argument('--format', dest='command_format', choices=OUTPUT_FORMATS,
                             help='Output format')

    run_parser = subparsers.add_parser('run', help='Run one demo or all of them')
    run_parser.add_argument('principle', help=f"Principle key or '{RUN_ALL}'")
    run_parser.add_argument('--variant', choices=[v.value for v in Variant],
                            help='bad, good or both (default from configuration)')
    run_parser.add_argument('--format', dest='command_format', choices=OUTPUT_FORMATS,
                            help='Output format')

    return parser.parse_args(argv)


def execute_command(args: argparse.Namespace, app) -> Dict[str, Any]:
    """Route a parsed command to the demo application service."""
    service = app.demo_service

    if args.command == 'list':
        return {"demos": [demo.to_dict() for demo in service.list_demos()]}

    if args.command == 'show':
        principle = Principle.from_string(args.principle)
        return {"demo": service.describe(principle).to_dict()}

    if args.command == 'run':
        variant = Variant.from_string(args.variant) if args.variant else None
        if args.principle.strip().lower() == RUN_ALL:
            runs = service.run_all(variant)
        else:
            runs = service.run_demo(Principle.from_string(args.principle), variant)
        return {"runs": [run.to_dict() for run in runs]}

    raise DomainException(f"Unknown command: {args.command}")


def _report_error(args: argparse.Namespace, message: str,
                  logger=None, log_message: Optional[str] = None) -> None:
    """Log and print an error; --quiet keeps both off stderr."""
    if args.verbose:
        traceback.print_exc()
    if args.quiet:
        return
    if logger is not None:
        logger.error(log_message or message)
    print(message, file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    args = parse_args(argv)
    logger = get_logger(__name__)

    try:
        if not args.command:
            print("Error: No command specified. Use --help for usage information.", file=sys.stderr)
            sys.exit(1)

        # Initialize application
        try:
            from solid_showcase.bootstrap import create_application
            app = create_application(args.config, args.log_level)
        except DomainException as e:
            # Logging is not set up at this point
            _report_error(args, f"Error: {e}")
            sys.exit(1)

        # Execute command
        try:
            result = execute_command(args, app)

            output_format = getattr(args, 'command_format', None) or args.format
            formatted_output = format_output(result, output_format)

            if args.output:
                with open(args.output, 'w', encoding='utf-8') as f:
                    f.write(formatted_output + "\n")
                if not args.quiet:
                    print(f"Output written to {args.output}")
            elif formatted_output:
                app.output.write_line(formatted_output)

        except DomainException as e:
            _report_error(args, f"Error: {e}", logger, f"Domain error: {e}")
            sys.exit(1)

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        _report_error(args, f"Unexpected error: {e}", logger)
        sys.exit(1)


if __name__ == "__main__":
    main()
