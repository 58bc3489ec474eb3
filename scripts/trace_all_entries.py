#!/usr/bin/env python3
"""Trace every boundary entry of a maze with both hand rules and write a JSON summary."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from trimaze import (
    HandRule,
    MazeError,
    MazeRenderer,
    boundary_cells,
    is_valid,
    load_maze,
    start_border,
    trace,
)


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("maze", type=Path, help="Maze file to trace")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Where to write the summary JSON (defaults to <maze>.entries.json)",
    )
    parser.add_argument(
        "--images",
        type=Path,
        default=None,
        help="Optional directory for one PNG per traced entry",
    )
    parser.add_argument(
        "--cell-size",
        type=int,
        default=32,
        help="Pixel width of a triangle when --images is given",
    )
    return parser.parse_args()


def main() -> None:
    args = _parse_args()
    grid = load_maze(args.maze)
    if not is_valid(grid):
        raise ValueError(f"Maze in {args.maze} is inconsistent; fix it before tracing")

    renderer = MazeRenderer(cell_size=args.cell_size) if args.images is not None else None

    entries = [
        (row, col, rule)
        for row, col in boundary_cells(grid)
        for rule in HandRule
        if start_border(grid, row, col, rule) is not None
    ]
    if not entries:
        raise ValueError(f"No open boundary entries in {args.maze}")

    records: List[dict] = []
    for index, (row, col, rule) in enumerate(entries, start=1):
        try:
            result = trace(grid, row, col, rule)
        except MazeError as exc:
            print(f"[{index}/{len(entries)}] {row},{col} {rule.value}: {exc}")
            continue
        record = result.to_dict()
        record["length"] = len(result.path)
        record["exit"] = list(result.exit_cell)
        if renderer is not None:
            image_path = args.images / f"{row}_{col}_{rule.value}.png"
            renderer.save(grid, image_path, path=result.path)
            record["image_path"] = image_path.as_posix()
        records.append(record)
        print(f"[{index}/{len(entries)}] traced {row},{col} {rule.value} (length={len(result.path)})")

    records.sort(key=lambda item: (item["length"], item["row"], item["col"], item["rule"]))

    output = args.output or args.maze.with_suffix(".entries.json")
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(records, indent=2), encoding="utf-8")
    print(f"Wrote {len(records)} traces to {output}")


if __name__ == "__main__":
    main()
