"""
Command line interface for hwio.

    hwio describe
    hwio pulse --address 17 --interval 500
    hwio blink --address 17 --delay 250 --duration 10
"""

import argparse
import logging
import sys
from typing import List, Optional

from hwio.common.timeunit import TimeUnit
from hwio.core.config import Config, load_config
from hwio.core.context import Context
from hwio.exceptions import HwioError
from hwio.io.digital.config import DigitalOutputConfig
from hwio.io.digital.output import DigitalOutput
from hwio.io.digital.state import DigitalState
from hwio.plugins import DEFAULT_PLUGINS

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hwio", description="Hardware I/O registry")
    parser.add_argument(
        "-c", "--config",
        help="Path to configuration file",
        default=None
    )
    parser.add_argument(
        "--plugin",
        help="Plugin to load as package.module:ClassName (repeatable)",
        action="append",
        default=[]
    )
    parser.add_argument(
        "-v", "--verbose",
        help="Enable verbose logging",
        action="store_true"
    )
    parser.add_argument(
        "--debug",
        help="Enable debug logging",
        action="store_true"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("describe", help="Print providers, platforms and registered I/O")

    output_args = argparse.ArgumentParser(add_help=False)
    output_args.add_argument("--address", type=int, required=True, help="BCM pin number")
    output_args.add_argument("--provider", default=None, help="Provider id to use")
    output_args.add_argument(
        "--state",
        choices=["high", "low"],
        default="high",
        help="Active level (default: high)"
    )

    pulse = subparsers.add_parser("pulse", parents=[output_args], help="Pulse a digital output")
    pulse.add_argument("--interval", type=int, required=True, help="Pulse length in milliseconds")

    blink = subparsers.add_parser("blink", parents=[output_args], help="Blink a digital output")
    blink.add_argument("--delay", type=int, required=True, help="Time per level in milliseconds")
    blink.add_argument("--duration", type=int, required=True, help="Number of toggles")

    return parser


def _create_output(context: Context, args: argparse.Namespace) -> DigitalOutput:
    config = DigitalOutputConfig(
        id=f"cli-pin-{args.address}",
        name=f"CLI output on pin {args.address}",
        address=args.address,
        provider=args.provider,
        shutdown_state=DigitalState.from_value(args.state).inverse(),
    )
    return context.create(config, DigitalOutput)


def run(args: argparse.Namespace, config: Optional[Config] = None) -> int:
    """Execute a parsed command. Returns the process exit code."""
    if config is None:
        config = load_config(args.config)
    if args.plugin:
        config.plugins = config.plugins + args.plugin
    elif not config.plugins:
        config.plugins = list(DEFAULT_PLUGINS)

    context = Context(config)
    try:
        context.initialize()

        if args.command == "describe":
            context.describe().print(sys.stdout)
        elif args.command == "pulse":
            output = _create_output(context, args)
            output.pulse(args.interval, TimeUnit.MILLISECONDS, DigitalState.from_value(args.state))
        elif args.command == "blink":
            output = _create_output(context, args)
            output.blink(args.delay, args.duration, TimeUnit.MILLISECONDS, DigitalState.from_value(args.state))
    except (HwioError, ValueError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1
    finally:
        context.shutdown()

    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the hwio command."""
    args = build_parser().parse_args(argv)
    config = load_config(args.config)

    # Setup logging
    if args.debug:
        log_level = logging.DEBUG
    elif args.verbose:
        log_level = logging.INFO
    else:
        log_level = config.logging.level.upper()
    logging.basicConfig(
        level=log_level,
        format=config.logging.format
    )

    try:
        code = run(args, config)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        code = 130
    sys.exit(code)


if __name__ == "__main__":
    main()
