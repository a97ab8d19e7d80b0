"""
Move tree ➤ position tree

Every token in the document is played from the position its parent left
behind. One illegal token anywhere rejects the whole document: the
IllegalMoveError propagates all the way out, and since nodes are only
built after all of their children compiled, no partial tree ever exists.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from linetree import rules
from linetree.notation import MoveNode, RootedMoveTree

ApplyMove = Callable[[str, str], str]


@dataclass(frozen=True)
class PositionNode:
    token: str  # as authored, including any "?" marker
    is_blunder: bool
    position: str  # fen after the move
    children: tuple[PositionNode, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class RootedPositionTree:
    start: str = rules.START_POSITION
    children: tuple[PositionNode, ...] = field(default_factory=tuple)

    def node_at(self, path) -> PositionNode | None:
        """Follow child indices from the root; empty path ➤ None (start)."""
        node = None
        children = self.children
        for index in path:
            if not 0 <= index < len(children):
                raise IndexError(f"No move {index} at this point in {tuple(path)}")
            node = children[index]
            children = node.children
        return node


def compile_node(
    node: MoveNode, position: str, apply: ApplyMove = rules.apply_move
) -> PositionNode:
    # walk with an explicit stack: authored lines can be hundreds of plies deep
    visited = []  # (move node, position after it, index of its parent in visited)
    stack = [(node, position, None)]
    while stack:
        move_node, before, parent = stack.pop()
        after = apply(before, rules.strip_marker(move_node.token))
        visited.append((move_node, after, parent))
        index = len(visited) - 1
        # reversed so siblings are played in authored order
        for child in reversed(move_node.children):
            stack.append((child, after, index))

    # every node comes after its parent in visited, so building back to front
    # finishes all children before the parent needs them
    built_children = [[] for _ in visited]
    built = None
    for index in range(len(visited) - 1, -1, -1):
        move_node, after, parent = visited[index]
        built = PositionNode(
            token=move_node.token,
            is_blunder=rules.is_blunder(move_node.token),
            position=after,
            children=tuple(reversed(built_children[index])),
        )
        if parent is not None:
            built_children[parent].append(built)

    return built


def compile_tree(
    tree: RootedMoveTree,
    start: str = rules.START_POSITION,
    apply: ApplyMove = rules.apply_move,
) -> RootedPositionTree:
    """
    Raises IllegalMoveError for the first illegal token found (depth first,
    in authored order), so the same document always fails the same way.
    """
    children = tuple(compile_node(child, start, apply) for child in tree.children)
    return RootedPositionTree(start=start, children=children)
