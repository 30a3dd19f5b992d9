"""
Entry point: parse options, configure logging and run the grid pathfinder.
"""

import argparse
import logging
import sys

from gridpath.app import App
from gridpath.config import GRID_SIZE_X, GRID_SIZE_Y
from gridpath.errors import LayoutError
from gridpath.grid import Grid


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Interactive A* grid pathfinder")
    parser.add_argument("--width", type=int, default=GRID_SIZE_X, help="grid width in cells")
    parser.add_argument("--height", type=int, default=GRID_SIZE_Y, help="grid height in cells")
    parser.add_argument("--layout", help="JSON layout file to start from")
    parser.add_argument("--log-level", default="INFO", help="logging level (DEBUG, INFO, ...)")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    grid = None
    if args.layout:
        try:
            grid = Grid.load(args.layout)
        except LayoutError as e:
            logging.getLogger(__name__).error("%s", e)
            return 1
    App(width=args.width, height=args.height, grid=grid).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
