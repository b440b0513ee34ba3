# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

import argparse
import logging
import sys

from gridwalk.config import load_config
from gridwalk.errors import GridwalkError, Unreachable
from gridwalk.io import read_input
from gridwalk.puzzles import PUZZLES, solve_puzzle


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Grid puzzle solver")
    parser.add_argument("puzzle", choices=sorted(PUZZLES), help="Puzzle to solve")
    parser.add_argument("input", help="Path to the puzzle input text")
    parser.add_argument("--part", type=int, choices=[1, 2], help="Only solve this part (default: both)")
    parser.add_argument("--config", help="Path to a YAML config (default: config/puzzles.yaml)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log engine progress")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        config = load_config(args.config)
        text = read_input(args.input)
    except (GridwalkError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parts = [args.part] if args.part else [1, 2]
    exit_code = 0
    for part in parts:
        try:
            answer = solve_puzzle(args.puzzle, text, part, config)
        except Unreachable as e:
            print(f"Part {part}: unreachable ({e})")
            exit_code = 2
            continue
        except GridwalkError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print(f"Part {part}: {answer}")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
