import argparse
import logging
import sys

from logging_config import setup_logging
from parsing import read_input, parse_rovers
from simulation import Simulation
from state_diagram import save_state_diagram

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(description="Simulate rovers moving on a rectangular grid.")
    parser.add_argument('input', nargs='?', help="Input file (defaults to standard input)")
    parser.add_argument('--log-level', default='WARNING', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help="Logging level for messages written to stderr")
    parser.add_argument('--log-file', help="Also write log messages to this file")
    parser.add_argument('--show-grid', action='store_true', help="Print a map of the grid after the results")
    parser.add_argument('--state-diagram', metavar='PATH', help="Write the rover state machine as a DOT file")
    return parser


def run(stream, out=None, show_grid=False):
    """Read the input, simulate every rover and write the results. Returns the exit status."""
    out = out or sys.stdout

    grid_result, rover_lines = read_input(stream)
    if not grid_result.ok:
        logger.error(str(grid_result.error))
        return 1

    grid = grid_result.value
    logger.info(f"Grid size set to {grid.width}x{grid.height}")

    sim = Simulation(grid, parse_rovers(rover_lines))
    for line in sim.run():
        print(line, file=out)

    if show_grid:
        print(sim.render_grid(color=out.isatty()), file=out)
    return 0


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)

    if args.state_diagram:
        save_state_diagram(args.state_diagram)
        logger.info(f"State diagram saved to {args.state_diagram}")

    if args.input:
        with open(args.input, 'r', encoding='utf-8') as f:
            return run(f, show_grid=args.show_grid)
    return run(sys.stdin, show_grid=args.show_grid)


if __name__ == "__main__":
    sys.exit(main())
