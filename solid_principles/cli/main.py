"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Configuration and logging setup
"""
import argparse
import os
import sys
from typing import Any, Callable, Dict, List, Optional

from solid_principles import __version__
from solid_principles.application.runner import ExampleRunner
from solid_principles.cli.formatters import format_output
from solid_principles.config import ConfigurationManager, LogLevel, OutputFormat
from solid_principles.domain.core.exceptions import DomainException
from solid_principles.helpers.logger import get_logger, setup_logging
from solid_principles.principles import PRINCIPLES, VARIANTS

FORMAT_CHOICES = [f.value for f in OutputFormat]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or "solid-principles",
        description="SOLID principles - paired original/refactored examples",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                        # List all examples
  %(prog)s list --format table         # Display as table
  %(prog)s run ocp original            # Run the original OCP example
  %(prog)s run-all --variant refactored
  %(prog)s compare lsp
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path')
    parser.add_argument('--log-level', choices=[level.value for level in LogLevel],
                        help='Set logging level')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')
    subparsers.required = True

    list_parser = subparsers.add_parser('list', help='List registered examples')
    list_parser.add_argument('--format', choices=FORMAT_CHOICES, help='Output format')

    run_parser = subparsers.add_parser('run', help='Run one example')
    run_parser.add_argument('principle', type=str.lower, choices=PRINCIPLES, help='Principle to run')
    run_parser.add_argument('variant', nargs='?', type=str.lower, choices=VARIANTS,
                            default='refactored', help='Variant to run (default: refactored)')

    run_all_parser = subparsers.add_parser('run-all', help='Run every example')
    run_all_parser.add_argument('--variant', type=str.lower, choices=VARIANTS,
                                help='Only run this variant')

    compare_parser = subparsers.add_parser('compare', help='Compare original and refactored output')
    compare_parser.add_argument('principle', type=str.lower, choices=PRINCIPLES,
                                help='Principle to compare')
    compare_parser.add_argument('--format', choices=FORMAT_CHOICES, help='Output format')

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def _handle_list(args: argparse.Namespace, runner: ExampleRunner, output_format: str) -> None:
    examples = [example.to_dict() for example in runner.registry.list()]
    print(format_output({"examples": examples}, output_format))


def _handle_run(args: argparse.Namespace, runner: ExampleRunner, output_format: str) -> None:
    runner.run(args.principle, args.variant)


def _handle_run_all(args: argparse.Namespace, runner: ExampleRunner, output_format: str) -> None:
    runner.run_all(args.variant)


def _handle_compare(args: argparse.Namespace, runner: ExampleRunner, output_format: str) -> None:
    result = runner.compare(args.principle)
    print(format_output({"comparison": result.to_dict()}, output_format))


COMMAND_HANDLERS: Dict[str, Callable[[argparse.Namespace, ExampleRunner, str], None]] = {
    'list': _handle_list,
    'run': _handle_run,
    'run-all': _handle_run_all,
    'compare': _handle_compare,
}


def execute_command(args: argparse.Namespace, runner: ExampleRunner, default_format: str) -> None:
    """Execute the appropriate command handler."""
    handler = COMMAND_HANDLERS.get(args.command)
    if handler is None:
        raise ValueError(f"Unknown command: {args.command}")
    output_format = getattr(args, 'format', None) or default_format
    handler(args, runner, output_format)


def main(argv: Optional[List[str]] = None, runner: Optional[ExampleRunner] = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    args = parse_args(argv)

    try:
        config_manager = ConfigurationManager(args.config)
        app_config = config_manager.get_app_config()
        logging_config = app_config.logging
        if args.log_level:
            logging_config = logging_config.model_copy(update={"level": LogLevel(args.log_level)})
        setup_logging(logging_config)
        logger = get_logger(__name__)
        logger.debug("Executing command", command=args.command)

        execute_command(args, runner or ExampleRunner(), app_config.output.format.value)
        return 0
    except DomainException as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
