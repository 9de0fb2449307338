"""Plot subcommand - PNG preview"""

from __future__ import annotations
from pathlib import Path
import logging
from argparse import ArgumentParser, Namespace, _SubParsersAction

# Runtime imports
from ..config import LayoutConfig, PlotConfig
from ..layout import Viewport
from ..visualizer import SnakePlotter
from .layout import add_common_arguments, build_context, configure_logging, load_inputs

logger = logging.getLogger(__name__)

PRESETS = {
    'default': PlotConfig,
    'presentation': PlotConfig.presentation,
    'debug': PlotConfig.debug,
}


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add plot subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for plot subcommand
    """
    parser = subparsers.add_parser(
        'plot',
        help='Render a PNG preview of the timeline'
    )
    add_common_arguments(parser)

    parser.add_argument('--style', choices=sorted(PRESETS), default='default',
                        help='Plot style preset (default: default)')
    parser.add_argument('--title',
                        help="Caption above the timeline (e.g. \"Alice's timeline\")")

    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> None:
    """
    Execute plot subcommand

    Args:
        args: Parsed command-line arguments from argparse
    """
    configure_logging(args)

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    plot_file = output_dir / f"{args.prefix}.snakeline.png"

    logger.info(f"Prefix: {args.prefix}")
    logger.info(f"Output: {plot_file}")
    logger.info(f"Style: {args.style}")

    entries = load_inputs(args)
    context = build_context(args)

    config = PRESETS[args.style]()
    if args.compact:
        config.layout = LayoutConfig.compact()

    logger.info("Generating plot...")
    plotter = SnakePlotter(config)
    result = plotter.plot_entries(entries, Viewport(args.width, args.height), str(plot_file),
                                  context=context, margin=args.margin, title=args.title)

    logger.info(f"✓ Plot saved: {plot_file} ({result.n_years} years, {result.n_slots} slots)")
