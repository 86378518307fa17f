"""
Command-line entry point.

Usage:
    terminal-donut                       # continuous spin, bordered 100x40 grid
    terminal-donut --mode choreographed  # scripted turns and moves
    terminal-donut --fused --fit         # closed-form path, sized to the terminal
"""

import argparse
import dataclasses
import logging
import shutil
import sys
from typing import Optional, Sequence

from terminal_donut.animation import choreographed_schedule, continuous_schedule
from terminal_donut.config import RenderConfig
from terminal_donut.driver import FrameDriver
from terminal_donut.errors import ConfigurationError
from terminal_donut.logging_config import setup_logging
from terminal_donut.terminal import TerminalController, TerminalDisplay

logger = logging.getLogger(__name__)

SCHEDULES = {
    "continuous": continuous_schedule,
    "choreographed": choreographed_schedule,
}


def build_parser() -> argparse.ArgumentParser:
    """
    Build the `terminal-donut` argument parser.

    Returns:
        argparse.ArgumentParser: Parser for mode, rendering and logging options.
    """
    parser = argparse.ArgumentParser(
        prog="terminal-donut",
        description="Render a rotating shaded torus as text in the terminal.",
    )
    parser.add_argument(
        "--mode", choices=sorted(SCHEDULES), default="continuous",
        help="Animation schedule to play (default: continuous)",
    )
    parser.add_argument(
        "--fused", action="store_true",
        help="Pose samples in closed form instead of building a point cloud",
    )
    parser.add_argument("--no-border", action="store_true", help="Do not frame the output")
    parser.add_argument("--fit", action="store_true", help="Size the grid to the terminal")
    parser.add_argument(
        "--delay", type=float, default=0.0, metavar="SECONDS",
        help="Pause after each frame (default: 0)",
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level for messages on stderr (default: WARNING)",
    )
    parser.add_argument("--log-file", metavar="PATH", help="Also write log records to PATH")
    return parser


def config_from_args(args: argparse.Namespace) -> RenderConfig:
    """
    Turn parsed arguments into a validated configuration.

    Args:
        args (argparse.Namespace): Result of `build_parser().parse_args()`.

    Returns:
        RenderConfig: Default geometry with the requested output options, sized to the
        terminal when `--fit` is given.

    Raises:
        ConfigurationError: If the options describe an impossible setup.
    """
    config = RenderConfig(border=not args.no_border, fused=args.fused, frame_delay=args.delay)
    if args.fit:
        size = shutil.get_terminal_size()
        config = config.fit_to_terminal(size.columns, size.lines)
    return config


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the animation from the command line.

    Args:
        argv: Arguments to parse instead of `sys.argv[1:]`.

    Returns:
        int: 0 when the animation finishes or is interrupted, 1 when the configuration
        is rejected.
    """
    args = build_parser().parse_args(argv)
    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)

    try:
        config = config_from_args(args)
        driver = FrameDriver(
            config,
            SCHEDULES[args.mode](),
            TerminalDisplay(sys.stdout, frame_delay=config.frame_delay),
        )
    except ConfigurationError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 1

    logger.info("Rendering %s animation: %s", args.mode, dataclasses.asdict(config))
    with TerminalController(sys.stdout):
        try:
            driver.run()
        except KeyboardInterrupt:
            # Graceful exit on Ctrl-C
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
