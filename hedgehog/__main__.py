# -*- coding: utf-8 -*-
"""
コマンドラインから hedgehog パズルを解くためのエントリポイントです。

    python -m hedgehog orchard
    python -m hedgehog --file puzzle.json --variant extended --verbose
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

import numpy as np

from . import solve
from .config import DEFAULT_VARIANT, SUPPORTED_VARIANTS
from .errors import InvalidPuzzleError
from .postprocess.render_result import format_grid
from .samples import SAMPLES
from .types import STATUS_CANCELLED, STATUS_SOLVED


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Solve a hedgehog chaining puzzle")
    parser.add_argument("sample", nargs="?", default="orchard", choices=sorted(SAMPLES),
                        help="Bundled sample puzzle to solve")
    parser.add_argument("--file", type=str, default=None,
                        help="JSON file with a chunk x row x col puzzle (blank = -1)")
    parser.add_argument("--variant", type=str, default=DEFAULT_VARIANT, choices=SUPPORTED_VARIANTS,
                        help="Topology variant")
    parser.add_argument("--verbose", action="store_true", help="Log every search step")
    parser.add_argument("--max-steps", type=int, default=None, help="Give up after this many steps")
    args = parser.parse_args(argv)

    if args.file:
        try:
            with open(args.file, encoding="utf-8") as f:
                puzzle = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            print(f"Invalid puzzle: cannot read {args.file}: {e}", file=sys.stderr)
            return 2
    else:
        puzzle = SAMPLES[args.sample]

    try:
        result = solve(puzzle, variant=args.variant, verbose=args.verbose, max_steps=args.max_steps)
    except InvalidPuzzleError as e:
        print(f"Invalid puzzle: {e}", file=sys.stderr)
        return 2

    if result["status"] != STATUS_SOLVED:
        if result["status"] == STATUS_CANCELLED:
            print("Search cancelled.", file=sys.stderr)
        else:
            print("Puzzle not solvable!", file=sys.stderr)
        return 1

    print(format_grid(np.array(result["solved_board"])))
    return 0


if __name__ == "__main__":
    sys.exit(main())
