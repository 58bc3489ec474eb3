"""Command line front end: ``trimaze test|rpath|lpath|render``."""

from __future__ import annotations

import argparse
import enum
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .base import MalformedMazeError, MazeError, PathLike, UnenterablePositionError
from .borders import HandRule
from .grid import MazeGrid
from .loader import load_maze
from .renderer import MazeRenderer
from .validator import find_inconsistency
from .walker import TraceResult, trace

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


class Command(enum.Enum):
    TEST = "test"
    RPATH = "rpath"
    LPATH = "lpath"
    RENDER = "render"


def validate(path: PathLike) -> bool:
    """Load a maze file and report whether it is a consistent maze."""

    try:
        grid = load_maze(path)
    except MazeError as exc:
        logger.info("%s", exc)
        return False
    problem = find_inconsistency(grid)
    if problem is not None:
        logger.info(
            "Cell (%d, %d) disagrees with (%d, %d) on their %s edge",
            problem.row,
            problem.col,
            problem.neighbor_row,
            problem.neighbor_col,
            problem.edge,
        )
        return False
    return True


def _load_for_walk(path: Path) -> MazeGrid:
    grid = load_maze(path)
    problem = find_inconsistency(grid)
    if problem is not None:
        logger.warning(
            "Maze in %s is inconsistent at (%d, %d); run `trimaze test` for details",
            path,
            problem.row,
            problem.col,
        )
    return grid


def trace_file(
    path: PathLike,
    row: int,
    col: int,
    rule: HandRule,
    *,
    max_steps: Optional[int] = None,
) -> TraceResult:
    """Load a maze file and walk it from (row, col); inconsistent mazes are walked with a warning."""

    return trace(_load_for_walk(Path(path)), row, col, rule, max_steps=max_steps)


def _run_test(args: argparse.Namespace) -> int:
    print("Valid" if validate(args.file) else "Invalid")
    return 0


def _run_path(args: argparse.Namespace, rule: HandRule) -> int:
    try:
        result = trace_file(args.file, args.row, args.col, rule, max_steps=args.max_steps)
    except UnenterablePositionError as exc:
        print(exc)
        return 0
    except MalformedMazeError as exc:
        print(f"Invalid map, please try to run `trimaze test`: {exc}", file=sys.stderr)
        return 1
    except MazeError as exc:
        print(f"Cannot trace path: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        for row, col in result.path:
            print(f"{row},{col}")
    return 0


def _run_render(args: argparse.Namespace) -> int:
    renderer = MazeRenderer(cell_size=args.cell_size, line_width=args.line_width)
    try:
        grid = _load_for_walk(args.file)
        path = None
        if args.path is not None:
            rule = HandRule(args.rule)
            path = trace(grid, args.path[0], args.path[1], rule).path
        renderer.save(grid, args.output, path=path)
    except MazeError as exc:
        print(f"Cannot render maze: {exc}", file=sys.stderr)
        return 1
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="trimaze", description="Validate and solve triangular mazes")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    test = commands.add_parser(Command.TEST.value, help="Check that FILE contains a valid maze")
    test.add_argument("file", type=Path)

    for command, hand in ((Command.RPATH, "right"), (Command.LPATH, "left")):
        walk = commands.add_parser(
            command.value,
            help=f"Find the way out from row R and column C using the {hand} hand rule",
        )
        walk.add_argument("row", type=int, metavar="R")
        walk.add_argument("col", type=int, metavar="C")
        walk.add_argument("file", type=Path)
        walk.add_argument("--json", action="store_true", help="Print the trace as JSON")
        walk.add_argument("--max-steps", type=int, default=None, help="Abort walks longer than this")

    render = commands.add_parser(Command.RENDER.value, help="Draw the maze (and optionally a path) to a PNG")
    render.add_argument("file", type=Path)
    render.add_argument("-o", "--output", type=Path, required=True)
    render.add_argument("--path", type=int, nargs=2, metavar=("R", "C"), default=None)
    render.add_argument("--rule", choices=[rule.value for rule in HandRule], default=HandRule.RIGHT_HAND.value)
    render.add_argument("--cell-size", type=int, default=48)
    render.add_argument("--line-width", type=int, default=3)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format=LOG_FORMAT)

    command = Command(args.command)
    if command is Command.TEST:
        return _run_test(args)
    if command is Command.RPATH:
        return _run_path(args, HandRule.RIGHT_HAND)
    if command is Command.LPATH:
        return _run_path(args, HandRule.LEFT_HAND)
    if command is Command.RENDER:
        return _run_render(args)
    raise AssertionError(f"Unhandled command {command}")


__all__ = ["Command", "validate", "trace_file", "main"]


if __name__ == "__main__":
    sys.exit(main())
