"""Layout subcommand - geometry tables and track SVG"""

from __future__ import annotations
from typing import Optional, List, get_args
from pathlib import Path
import logging
from argparse import ArgumentParser, Namespace, _SubParsersAction

from ..config import LayoutConfig
from ..io import read_entries, write_layout
from ..layout import ChallengeContext, Entry, InteractionContext, LayoutEngine, Viewport
from ..types import Phase

logger = logging.getLogger(__name__)

PHASES: List[str] = list(get_args(Phase))


def configure_logging(args: Namespace) -> None:
    """Configure logging as early as possible for a subcommand"""
    debug = getattr(args, "debug", False)
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )

    # Silence very noisy third-party loggers (matplotlib font discovery etc.)
    for noisy in ("matplotlib", "matplotlib.font_manager", "PIL", "PIL.Image", "fontTools"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def add_common_arguments(parser: ArgumentParser) -> None:
    """
    Input, viewport and interaction-context options shared by subcommands

    Args:
        parser: Subcommand parser to extend
    """
    # Input
    parser.add_argument('-e', '--entries', required=True,
                        help='Entry table (TSV with id, year and optional pending, role columns)')
    parser.add_argument('--prefix', required=True,
                        help='Prefix for output files')
    parser.add_argument('--output-dir', default='.',
                        help='Output directory (default: current directory)')

    # Viewport
    parser.add_argument('--width', type=float, default=800.0,
                        help='Viewport width in px (default: 800)')
    parser.add_argument('--height', type=float, default=600.0,
                        help='Viewport height in px (default: 600)')
    parser.add_argument('--margin', type=float, default=None,
                        help='Viewport margin in px (default: 50)')
    parser.add_argument('--compact', action='store_true',
                        help='Use the compact layout preset')

    # Interaction context
    parser.add_argument('--phase', choices=PHASES, default='waiting',
                        help='Current round phase (default: waiting)')
    parser.add_argument('--my-turn', action='store_true',
                        help='Viewing player is the active player')
    parser.add_argument('--pending-id',
                        help='Id of the entry awaiting confirmation')
    outcome = parser.add_mutually_exclusive_group()
    outcome.add_argument('--pending-correct', dest='pending_correct', action='store_true', default=None,
                         help='Pending placement was correct')
    outcome.add_argument('--pending-incorrect', dest='pending_correct', action='store_false',
                         help='Pending placement was incorrect')
    parser.set_defaults(pending_correct=None)
    parser.add_argument('--challenge-target',
                        help='Id of the entry under challenge')
    parser.add_argument('--challenge-resolved', action='store_true',
                        help='Challenge has been decided')
    parser.add_argument('--original-correct', choices=['yes', 'no'],
                        help='Outcome of the original placement after a challenge')
    parser.add_argument('--challenger-correct', choices=['yes', 'no'],
                        help="Outcome of the challenger's placement")
    parser.add_argument('--hovered', type=int,
                        help='Slot index under the pointer')
    parser.add_argument('--selected', type=int,
                        help='Slot index chosen as drop target')

    # Debug flag
    parser.add_argument('--debug', action='store_true', help='Enable debug logging for troubleshooting')


def _yes_no(value: Optional[str]) -> Optional[bool]:
    if value is None:
        return None
    return value == 'yes'


def build_context(args: Namespace) -> InteractionContext:
    """
    Interaction context from parsed arguments

    Args:
        args: Parsed command-line arguments

    Returns:
        InteractionContext for the layout pass
    """
    challenge: Optional[ChallengeContext] = None
    if args.challenge_target or args.challenge_resolved:
        challenge = ChallengeContext(
            target_entry_id=args.challenge_target or None,
            resolved=args.challenge_resolved,
            original_correct=_yes_no(args.original_correct),
            challenger_correct=_yes_no(args.challenger_correct),
        )

    return InteractionContext(
        is_my_turn=args.my_turn,
        phase=args.phase,
        pending_id=args.pending_id or None,
        pending_correct=args.pending_correct,
        challenge=challenge,
        hovered_index=args.hovered,
        selected_index=args.selected,
    )


def load_inputs(args: Namespace) -> List[Entry]:
    """Read the entry table named on the command line"""
    entries_file = Path(args.entries)
    if not entries_file.exists():
        raise FileNotFoundError(f"Entry file not found: {entries_file}")
    entries = read_entries(str(entries_file))
    logger.info(f"Loaded {len(entries)} entries")
    return entries


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add layout subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for layout subcommand
    """
    parser = subparsers.add_parser(
        'layout',
        help='Compute slot, year and track geometry'
    )
    add_common_arguments(parser)
    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> None:
    """
    Execute layout subcommand

    Args:
        args: Parsed command-line arguments from argparse
    """
    configure_logging(args)

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    logger.info(f"Prefix: {args.prefix}")
    logger.info(f"Viewport: {args.width:g}x{args.height:g}, phase: {args.phase}")

    entries = load_inputs(args)
    context = build_context(args)

    config = LayoutConfig.compact() if args.compact else LayoutConfig()
    result = LayoutEngine(config).calculate_layout(entries, Viewport(args.width, args.height),
                                                   context, args.margin)

    logger.info(f"Layout: {result.n_years} years, {result.n_slots} slots, "
                f"{result.n_arcs} arcs, scale {result.scale:.3f}")

    files = write_layout(result, str(output_dir), args.prefix)
    for kind, path in files.items():
        logger.info(f"✓ {kind}: {path}")
