#!/usr/bin/env python3
"""
Game of Life

Serves Conway's Game of Life as a browser canvas visualization on a fixed
size board, with play, pause and restart buttons.

Usage:
    python gameoflife.py [--port PORT] [--fps FPS] [--cells-per-row N] [--seed SEED]

The listen port can also be set with the PORT environment variable, either
exported or placed in a .env file next to this script.
"""

import argparse
import os
import signal

from dotenv import load_dotenv

from life.models import build_config, logger
from life.server import start_web_server
from life.utils import handle_exit

# Construct the absolute path to the .env file
env_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), '.env')


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Serve Conway's Game of Life in the browser.")
    parser.add_argument('--host', type=str, default=None,
                        help='Interface to listen on (default 0.0.0.0)')
    parser.add_argument('--port', type=int, default=None,
                        help='Port to listen on (default PORT or 5000)')
    parser.add_argument('--fps', type=float, default=None,
                        help='Generations per second while playing')
    parser.add_argument('--cells-per-row', type=int, default=None,
                        help='Number of cells in each row of the board')
    parser.add_argument('--width', type=int, default=None,
                        help='Canvas width in pixels')
    parser.add_argument('--height', type=int, default=None,
                        help='Canvas height in pixels')
    parser.add_argument('--density', type=float, default=None,
                        help='Chance of each cell starting alive')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducible boards')
    parser.add_argument('--debug', action='store_true',
                        help='Run Flask in debug mode')
    return parser.parse_args(argv)


def main(argv=None):
    """Load configuration and run the web server until interrupted."""
    args = parse_args(argv)

    # Load the environment variables from the .env file
    load_dotenv(env_path)

    config = build_config({
        'host': args.host,
        'port': args.port,
        'fps': args.fps,
        'cells_per_row': args.cells_per_row,
        'width': args.width,
        'height': args.height,
        'density': args.density,
        'seed': args.seed
    })
    logger.info(f"Starting Game of Life with {config}")

    # Register SIGINT/SIGTERM handler
    signal.signal(signal.SIGINT, handle_exit)
    signal.signal(signal.SIGTERM, handle_exit)

    start_web_server(config, debug=args.debug)


if __name__ == "__main__":
    main()
