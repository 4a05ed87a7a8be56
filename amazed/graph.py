"""The maze as a graph of rooms, each pointing towards the exit."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from amazed.parsing import Maze


@dataclass(eq=False)
class Node:
    """A room in the graph.

    ``links`` holds the rooms a robot may move to from here, newest first.
    ``dist_to_end`` is -1 until the room is reached from the end room.
    """

    room: str
    dist_to_end: int = -1
    present: bool = False
    links: list[Node] = field(default_factory=list, repr=False)

    def connect(self, other: Node) -> None:
        """Add a link from this room to ``other``, ahead of the existing ones."""
        self.links.insert(0, other)

    def is_linked_to(self, other: Node) -> bool:
        """Tell whether this room already links to a room named like ``other``."""
        return any(link.room == other.room for link in self.links)

    def remove_link(self, room: str) -> None:
        """Drop the first link to the room named ``room``, if there is one."""
        for index, link in enumerate(self.links):
            if link.room == room:
                del self.links[index]
                return


def find_node(nodes: Iterable[Node], room: str) -> Node | None:
    """Return the node named ``room``, or None."""
    return next((node for node in nodes if node.room == room), None)


def _neighbours(
    links: list[tuple[str, str]], nodes: list[Node], last: Node
) -> Iterator[Node]:
    for source, target in links:
        if last.room == source:
            yield _require(nodes, target)
        if last.room == target:
            yield _require(nodes, source)


def _require(nodes: list[Node], room: str) -> Node:
    node = find_node(nodes, room)
    if node is None:
        raise ValueError(f"tunnel leads to unknown room {room!r}")
    return node


def _spread(links: list[tuple[str, str]], nodes: list[Node], origin: Node) -> None:
    """Walk the tunnels depth first from ``origin``, pointing rooms towards it."""
    stack = [(origin, _neighbours(links, nodes, origin))]
    while stack:
        last, pending = stack[-1]
        new = next(pending, None)
        if new is None:
            stack.pop()
            continue
        if new.dist_to_end == -1:
            new.connect(last)
            new.dist_to_end = last.dist_to_end + 1
            stack.append((new, _neighbours(links, nodes, new)))
            continue
        if last.dist_to_end < new.dist_to_end and not new.is_linked_to(last):
            last.remove_link(new.room)
            new.connect(last)
            new.dist_to_end = last.dist_to_end + 1
        if last.dist_to_end > new.dist_to_end and not last.is_linked_to(new):
            new.remove_link(last.room)
            last.connect(new)
            last.dist_to_end = new.dist_to_end + 1


def build_graph(maze: Maze) -> Node | None:
    """Build the graph of ``maze`` and return its start room.

    Returns None when the start room leads nowhere.
    """
    if maze.start is None or maze.end is None:
        raise ValueError("the maze needs a start and an end room")
    nodes = [
        Node(room.name, 0 if room.name == maze.end else -1)
        for room in reversed(maze.rooms)
    ]
    for node in nodes:
        if node.dist_to_end == 0:
            _spread(maze.links, nodes, node)
    start = None
    for node in nodes:
        if node.room == maze.start:
            start = node
    if start is None:
        raise ValueError(f"start room {maze.start!r} is not a room of the maze")
    return start if start.links else None