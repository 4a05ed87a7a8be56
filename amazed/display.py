"""Echoing a parsed maze back in its description format."""

from __future__ import annotations

from typing import TextIO

from amazed.parsing import Maze


def format_maze(maze: Maze) -> str:
    """Write the robot count, rooms and tunnels of ``maze`` as text."""
    parts = ["#number_of_robots", str(maze.robot_count), "#rooms"]
    for room in maze.rooms:
        if maze.start is not None and room.name == maze.start:
            parts.append("##start")
        if maze.end is not None and room.name == maze.end:
            parts.append("##end")
        parts.append(f"{room.name} {room.x} {room.y}")
    if not maze.missing_links:
        parts.append("#tunnels")
    parts.extend(f"{source}-{target}" for source, target in maze.links)
    return "".join(f"{part}\n" for part in parts)


def display(maze: Maze, stream: TextIO) -> None:
    """Write ``maze`` to ``stream``."""
    stream.write(format_maze(maze))