import pytest

from amazed.graph import Node, build_graph, find_node
from amazed.parsing import Maze, Room, parse

CHAIN = [
    "3\n",
    "##start\n",
    "a 0 0\n",
    "b 1 1\n",
    "##end\n",
    "c 2 2\n",
    "a-b\n",
    "b-c\n",
]

SHORTCUT = [
    "1\n",
    "##start\n",
    "s 0 0\n",
    "x 1 1\n",
    "##end\n",
    "e 2 2\n",
    "s-x\n",
    "x-e\n",
    "s-e\n",
]


def _follow(start):
    rooms = [start]
    while rooms[-1].links:
        rooms.append(rooms[-1].links[0])
    return rooms


def test_connect_puts_newest_link_first():
    a, b, c = Node("a"), Node("b"), Node("c")
    a.connect(b)
    a.connect(c)
    assert [node.room for node in a.links] == ["c", "b"]


def test_is_linked_to_compares_room_names():
    a, b = Node("a"), Node("b")
    a.connect(b)
    assert a.is_linked_to(Node("b"))
    assert not a.is_linked_to(Node("a"))
    assert not b.is_linked_to(a)


def test_remove_link_drops_only_first_match():
    a, b, c = Node("a"), Node("b"), Node("c")
    a.connect(b)
    a.connect(c)
    a.connect(b)
    a.remove_link("b")
    assert [node.room for node in a.links] == ["c", "b"]


def test_remove_link_of_unknown_room_changes_nothing():
    a, b = Node("a"), Node("b")
    a.connect(b)
    a.remove_link("z")
    assert a.links == [b]


def test_find_node():
    nodes = [Node("a"), Node("b")]
    assert find_node(nodes, "b") is nodes[1]
    assert find_node(nodes, "z") is None


def test_chain_leads_from_start_to_end():
    start = build_graph(parse(CHAIN))
    rooms = _follow(start)
    assert [node.room for node in rooms] == ["a", "b", "c"]
    distances = [node.dist_to_end for node in rooms]
    assert distances == sorted(distances, reverse=True)
    assert rooms[-1].dist_to_end == 0
    assert all(not node.present for node in rooms)


def test_shortcut_is_preferred():
    start = build_graph(parse(SHORTCUT))
    assert start.room == "s"
    assert start.links[0].room == "e"
    assert start.dist_to_end == 1


def test_isolated_start_gives_none():
    maze = parse(["1\n", "##start\n", "a 0 0\n", "b 1 1\n", "##end\n", "c 2 2\n", "b-c\n"])
    assert build_graph(maze) is None


def test_missing_end_is_an_error():
    maze = Maze(robot_count=1, rooms=[Room("a", "0", "0")], start="a", end=None)
    with pytest.raises(ValueError):
        build_graph(maze)


def test_unknown_start_is_an_error():
    maze = Maze(
        robot_count=1,
        rooms=[Room("a", "0", "0"), Room("b", "1", "1")],
        links=[("a", "b")],
        start="z",
        end="b",
    )
    with pytest.raises(ValueError):
        build_graph(maze)