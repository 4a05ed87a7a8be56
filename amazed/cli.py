"""Command line entry: read a maze on standard input, print it and the moves."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence, TextIO

from amazed.display import display
from amazed.graph import build_graph
from amazed.parsing import ParseError, read_maze
from amazed.walking import write_moves

FAILURE = 84


def run(stdin: TextIO, stdout: TextIO) -> int:
    """Solve the maze read from ``stdin``; return the exit status."""
    try:
        maze = read_maze(stdin)
    except ParseError:
        return FAILURE
    graph = None
    if not maze.error and maze.robot_count > 0:
        try:
            graph = build_graph(maze)
        except ValueError:
            graph = None
    if maze.robot_count > 0:
        display(maze, stdout)
    if graph is None:
        return FAILURE
    try:
        write_moves(maze.robot_count, graph, stdout)
    except (ValueError, RuntimeError):
        return FAILURE
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="amazed",
        description="Read a maze on standard input and move the robots to its end.",
    )
    parser.parse_args(argv)
    return run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())