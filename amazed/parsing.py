"""Reading a maze description: robot count, rooms, start and end markers, tunnels."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, TextIO

from amazed.textutil import get_number, has_alpha, split_words

START_MARKER = "##start\n"
END_MARKER = "##end\n"
NO_LINKS = "links"


class ParseError(ValueError):
    """Raised when a maze description cannot be read."""

    def __init__(self, message: str, context: str | None = None) -> None:
        super().__init__(message)
        self.context = context


@dataclass(frozen=True)
class Room:
    """A room with its name and its two coordinates, kept as written."""

    name: str
    x: str
    y: str


@dataclass
class Maze:
    """Everything read from a maze description."""

    robot_count: int = -1
    rooms: list[Room] = field(default_factory=list)
    links: list[tuple[str, str]] = field(default_factory=list)
    start: str | None = None
    end: str | None = None
    start_count: int = 0
    end_count: int = 0
    error: bool = False
    error_context: str | None = "initialisation"

    @property
    def missing_links(self) -> bool:
        """True when the description held no tunnels at all."""
        return self.error_context == NO_LINKS

    def has_room(self, name: str) -> bool:
        return any(room.name == name for room in self.rooms)


def _is_comment(line: str) -> bool:
    return line.startswith("#") and not line.startswith("##")


def strip_comments(lines: Iterable[str]) -> list[str]:
    """Drop comment lines (a single ``#``) and blank lines; keep ``##`` commands."""
    return [
        line
        for line in lines
        if line and not line.startswith("\n") and not _is_comment(line)
    ]


def find_robot_count(lines: list[str], maze: Maze) -> int:
    """Read the number of robots from the first line."""
    if not lines:
        maze.error = True
        raise ParseError("missing number of robots")
    first = lines[0]
    count = get_number(first)
    if has_alpha(first) or count <= 0:
        maze.robot_count = -1
        maze.error = True
        maze.error_context = first
        raise ParseError(f"invalid number of robots: {first!r}", first)
    maze.robot_count = count
    return count


def _marked_room(lines: list[str], marker: str) -> tuple[str | None, int]:
    name = None
    count = 0
    remaining = iter(lines)
    for line in remaining:
        if line != marker:
            continue
        following = next(remaining, None)
        if following is None:
            raise ParseError(f"{marker.strip()} is not followed by a room", line)
        words = split_words(following, " \n")
        if not words:
            raise ParseError(f"{marker.strip()} is not followed by a room", following)
        name = words[0]
        count += 1
    return name, count


def find_start_end(lines: list[str], maze: Maze) -> None:
    """Find the rooms that follow the ``##start`` and ``##end`` commands."""
    maze.start, maze.start_count = _marked_room(lines, START_MARKER)
    maze.end, maze.end_count = _marked_room(lines, END_MARKER)


def _add_room(line: str, maze: Maze) -> None:
    words = split_words(line, " \n")
    if len(words) < 3:
        raise ParseError(f"a room needs a name and two coordinates: {line!r}", line)
    room = Room(*words[:3])
    for existing in maze.rooms:
        if existing.name == room.name or (existing.x == room.x and existing.y == room.y):
            raise ParseError(f"room clashes with {existing.name!r}: {line!r}", line)
    maze.rooms.append(room)


def _add_link(parts: list[str], lines: list[str], maze: Maze, line: str) -> None:
    if maze.start_count == 0:
        find_start_end(lines, maze)
        if maze.start_count != 1 or maze.end_count != 1:
            raise ParseError("exactly one start and one end room are required", line)
    source, target = parts[0], parts[1]
    if not (maze.has_room(source) and maze.has_room(target)):
        raise ParseError(f"tunnel between unknown rooms: {line!r}", line)
    maze.links.append((source, target))


def _add_entry(line: str, lines: list[str], maze: Maze) -> None:
    parts = split_words(line, "-\n")
    if not parts:
        raise ParseError(f"empty entry: {line!r}", line)
    if len(parts) == 1:
        _add_room(line, maze)
    else:
        _add_link(parts, lines, maze, line)


def find_rooms(lines: list[str], maze: Maze) -> None:
    """Read the rooms and tunnels that follow the robot count."""
    body = lines[1:]
    if not body:
        maze.error = True
        raise ParseError("no rooms or tunnels")
    for line in body:
        if line.startswith("#"):
            continue
        try:
            _add_entry(line, lines, maze)
        except ParseError as exc:
            maze.error = True
            maze.error_context = line
            exc.context = line
            raise


def check_links(maze: Maze) -> None:
    """Mark the maze as faulty when it has no tunnels."""
    if not maze.links:
        maze.error_context = NO_LINKS
        maze.error = True


def parse(lines: Iterable[str]) -> Maze:
    """Build a maze from the lines of a description, newlines included."""
    lines = list(lines)
    if not lines:
        raise ParseError("empty input")
    text = strip_comments(lines)
    maze = Maze()
    find_robot_count(text, maze)
    find_rooms(text, maze)
    check_links(maze)
    return maze


def read_maze(stream: TextIO) -> Maze:
    """Read a maze description from an open text stream."""
    return parse(stream)