# amazed

`amazed` reads a maze of rooms and tunnels from standard input and checks it.
It then prints the maze back in a normalised form. Finally it prints, turn by
turn, the moves that take every robot from the start room to the end room.

## Installing

```
pip install .
```

To install with the test dependencies (pytest):

```
pip install ".[test]"
```

## Usage

```
amazed < maze.txt
```

The command takes no options apart from `--help`. You can also start it with
`python -m amazed.cli`.

The exit status is 0 when the maze was valid and all robots reached the end
room. It is 84 when the input could not be used.

- If the description cannot be read, nothing is printed. This covers an empty
  input, a bad robot count, a malformed or duplicate room, or a tunnel to an
  unknown room.
- The maze may be read but still be unusable. For example, it may have no
  tunnels, or the start room may lead nowhere. In that case the maze is
  printed back and no `#moves` section follows.

### Input format

```
3
##start
0 1 0
##end
1 13 0
2 5 0
0-2
2-1
```

- **Robot count.** The first line is the number of robots. It must be a
  positive number and must contain no letters.
- **Rooms.** Each room is a line `name x y`. No two rooms may share a name,
  and no two rooms may share both coordinates.
- **Start and end rooms.** The line after `##start` is the start room. The
  line after `##end` is the end room. There must be exactly one of each.
- **Tunnels.** Each tunnel is a line `name-name` joining two rooms that have
  already been declared.
- **Ignored lines.** Blank lines are ignored. So are lines that begin with
  `#`, other than the `##start` and `##end` commands.

### Output

The maze is printed back under the headers `#number_of_robots`, `#rooms` and
`#tunnels`, followed by a `#moves` section. Each moves line lists the robots
that moved on that turn, as `P<robot>-<room>`. For the maze above the output
is:

```
#number_of_robots
3
#rooms
##start
0 1 0
##end
1 13 0
2 5 0
#tunnels
0-2
2-1
#moves
P1-2
P1-1 P2-2
P2-1 P3-2
P3-1
```

### How robots move

Each room points towards the end room, following the tunnels that were found
first from it. On each turn, every robot moves to the first room it points to
that is either free or is the end room. This is a simple greedy walk. It does
not search for the shortest schedule of moves.

## Using it as a library

```python
import io
from amazed.cli import run

out = io.StringIO()
status = run(io.StringIO("1\n##start\na 0 0\n##end\nb 1 1\na-b\n"), out)
print(status)          # 0
print(out.getvalue())
```

### Modules

- **`amazed.parsing`**
  - `parse(lines)` turns lines of text, newlines included, into a `Maze`.
  - `read_maze(stream)` does the same for an open text stream.
  - Unreadable input raises `ParseError`, a subclass of `ValueError`. Its
    `context` attribute holds the offending line.
  - A `Maze` holds `robot_count`, `rooms` (a list of `Room`), `links`, `start`,
    `end` and an `error` flag.
- **`amazed.graph`**
  - `build_graph(maze)` links the rooms by distance to the end room and
    returns the start `Node`.
  - It returns `None` when the start room leads nowhere.
- **`amazed.display`**
  - `format_maze(maze)` renders the maze as text.
  - `display(maze, stream)` writes that text to a stream.
- **`amazed.walking`**
  - `simulate_moves(robot_count, start)` yields each turn as a list of
    `(robot number, room)` pairs.
  - `write_moves(robot_count, start, stream)` writes the `#moves` section.
- **`amazed.textutil`**
  - Small helpers used by the parser: `get_number`, `has_alpha`,
    `has_non_alphanumeric`, `split_words` and `number_length`.