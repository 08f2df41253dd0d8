#!/usr/bin/env python3
"""
textrepel CLI

Command-line interface for repelling overlapping text labels.

Usage:
    textrepel repel <points.csv> <boxes.csv> --xlim MIN MAX --ylim MIN MAX [options]
    textrepel check <boxes.csv> --xlim MIN MAX --ylim MIN MAX
"""

import argparse
import logging
import sys

from . import __version__


def setup_logging(verbose: bool):
    """Configure root logging for command-line use."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )


def build_config(args):
    """Merge --config file values with explicit command-line options."""
    from .config import config_from_dict, load_config
    from .placement.repeller import RepelConfig

    config = load_config(args.config) if args.config else RepelConfig()

    overrides = {}
    if args.padding is not None:
        overrides["point_padding_x"], overrides["point_padding_y"] = args.padding
    if args.force is not None:
        overrides["force"] = args.force
    if args.maxiter is not None:
        overrides["maxiter"] = args.maxiter
    if args.check_overlap is not None:
        overrides["check_overlap"] = args.check_overlap
    if args.seed is not None:
        overrides["seed"] = args.seed

    if overrides:
        config = config_from_dict(overrides, base=config)
    return config


def cmd_repel(args):
    """Run label repulsion."""
    from .data import read_boxes_csv, read_points_csv, write_result_csv
    from .placement.repeller import BoxRepeller

    try:
        config = build_config(args)
        points = read_points_csv(args.points)
        boxes = read_boxes_csv(args.boxes)
        repeller = BoxRepeller(points, boxes, args.xlim, args.ylim, config)
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    print(f"Loaded {repeller.n_points} data points and {repeller.n_texts} labels")

    def progress_callback(state):
        if state.iteration % 100 == 0:
            print(f"  Iteration {state.iteration}: overlaps={sum(state.overlap_counts)}")

    result = repeller.repel(callback=progress_callback if args.verbose else None)

    if result.converged:
        print(f"  Converged after {result.iterations} iterations")
    else:
        print(f"  Stopped after {result.iterations} iterations (max reached)")
    unresolved = sum(1 for c in result.overlaps if c > 0)
    if unresolved:
        print(f"  Labels that overlapped during the run: {unresolved}")

    frame = result.to_frame()
    if args.output:
        write_result_csv(frame, args.output)
        print(f"Saved to: {args.output}")
    else:
        print(frame.to_string(index=False))

    return 0


def cmd_check(args):
    """Check a box layout for overlaps."""
    from .data import read_boxes_csv
    from .validation import check_layout

    try:
        boxes = read_boxes_csv(args.boxes)
        report = check_layout(boxes, args.xlim, args.ylim)
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    print(report.summary())
    return 0 if report.passed else 1


def _add_limits(parser):
    parser.add_argument('--xlim', type=float, nargs=2, required=True,
                        metavar=('MIN', 'MAX'), help='Limits of the x axis')
    parser.add_argument('--ylim', type=float, nargs=2, required=True,
                        metavar=('MIN', 'MAX'), help='Limits of the y axis')


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="textrepel - Repel overlapping text labels",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  textrepel repel points.csv boxes.csv --xlim 0 1 --ylim 0 1
  textrepel repel points.csv boxes.csv --xlim 0 1 --ylim 0 1 --padding 0.01 0.01 --seed 42
  textrepel repel points.csv boxes.csv --xlim 0 1 --ylim 0 1 --config repel.yaml -o out.csv
  textrepel check out_boxes.csv --xlim 0 1 --ylim 0 1
        """,
    )

    parser.add_argument('--version', action='version', version=f'textrepel {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Repel command
    repel_parser = subparsers.add_parser('repel', help='Resolve label overlaps')
    repel_parser.add_argument('points', help='CSV file with x, y columns')
    repel_parser.add_argument('boxes', help='CSV file with x1, y1, x2, y2 columns')
    _add_limits(repel_parser)
    repel_parser.add_argument('--padding', type=float, nargs=2, metavar=('PX', 'PY'),
                              help='Padding around data points (default: 0 0)')
    repel_parser.add_argument('--force', type=float, help='Force magnitude (default: 1e-6)')
    repel_parser.add_argument('--maxiter', type=int, help='Max iterations (default: 2000)')
    repel_parser.add_argument('--check-overlap', type=int,
                              help='Freeze threshold per iteration (default: 10)')
    repel_parser.add_argument('--seed', type=int, help='Seed for the initial jitter')
    repel_parser.add_argument('--config', help='YAML configuration file')
    repel_parser.add_argument('-o', '--output', help='Output CSV path')
    repel_parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')

    # Check command
    check_parser = subparsers.add_parser('check', help='Check boxes for overlaps')
    check_parser.add_argument('boxes', help='CSV file with x1, y1, x2, y2 columns')
    _add_limits(check_parser)
    check_parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(args.verbose)

    commands = {
        'repel': cmd_repel,
        'check': cmd_check,
    }

    return commands[args.command](args)


if __name__ == '__main__':
    sys.exit(main())
