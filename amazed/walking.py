"""Moving the robots through the graph, one turn at a time."""

from __future__ import annotations

from typing import Iterable, Iterator, TextIO

from amazed.graph import Node

Move = tuple[int, str]


def find_path(node: Node) -> Node | None:
    """Return the first linked room that is free or is the end room."""
    return next(
        (link for link in node.links if not link.present or link.dist_to_end == 0),
        None,
    )


def all_arrived(positions: Iterable[Node]) -> bool:
    """Tell whether every robot stands in the end room."""
    return all(node.dist_to_end == 0 for node in positions)


def _turns(robot_count: int, start: Node) -> Iterator[list[Move]]:
    positions = [start] * robot_count
    while not all_arrived(positions):
        turn: list[Move] = []
        for index, room in enumerate(positions):
            target = find_path(room)
            if target is None:
                continue
            room.present = False
            target.present = True
            positions[index] = target
            turn.append((index + 1, target.room))
        if not turn:
            raise RuntimeError("no robot can move")
        yield turn


def simulate_moves(robot_count: int, start: Node) -> Iterator[list[Move]]:
    """Yield each turn as a list of (robot number, room reached).

    The rooms' ``present`` flags are updated as robots move.
    """
    if robot_count <= 0:
        raise ValueError("there must be at least one robot")
    return _turns(robot_count, start)


def write_moves(robot_count: int, start: Node, stream: TextIO) -> None:
    """Write the ``#moves`` section, one line per turn."""
    turns = simulate_moves(robot_count, start)
    stream.write("#moves\n")
    for turn in turns:
        stream.write(" ".join(f"P{robot}-{room}" for robot, room in turn) + "\n")