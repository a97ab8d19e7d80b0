"""
Branching lines notation ➤ move tree

A document is YAML. Each value is either a plain line of moves, or a
mapping whose first key is a line of moves and whose value is the list of
continuations from the end of that line:

    e4 e5 Nf3 Nc6 c3:
      - Bc5 d4 exd4
      - d6 d4 Nf6

Only the first key of a mapping is used. Any other keys are ignored, so
the author can't accidentally merge two sibling lines into one mapping and
have them silently reordered.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import yaml

from linetree.exceptions import DocumentParseError


@dataclass(frozen=True)
class MoveNode:
    token: str
    children: tuple[MoveNode, ...] = field(default_factory=tuple)

    @property
    def is_leaf(self):
        return not self.children


@dataclass(frozen=True)
class RootedMoveTree:
    # moves available from the starting position; the root has no token
    children: tuple[MoveNode, ...] = field(default_factory=tuple)


def parse_chain(token_string: str, continuations=()) -> MoveNode:
    """
    "e4 e5 Nf3" ➤ e4 -> e5 -> Nf3 -> continuations

    Built right to left: the deepest token gets the continuations, and
    every token before it has exactly one child.
    """
    tokens = token_string.split()
    if not tokens:
        raise DocumentParseError(f"Line has no moves: {token_string!r}")

    node = MoveNode(tokens[-1], tuple(continuations))
    for token in reversed(tokens[:-1]):
        node = MoveNode(token, (node,))
    return node


def parse_node(value) -> MoveNode:
    if isinstance(value, str):
        return parse_chain(value)

    if isinstance(value, dict):
        if not value:
            raise DocumentParseError("Empty mapping where a line was expected")

        # first key only, by contract (see module docstring)
        key, lines = next(iter(value.items()))
        if not isinstance(key, str):
            raise DocumentParseError(f"Line prefix must be text, got {key!r}")
        if not isinstance(lines, list):
            raise DocumentParseError(
                f"Continuations of {key!r} must be a list, got {type(lines).__name__}"
            )

        continuations = [parse_node(line) for line in lines]
        return parse_chain(key, continuations)

    raise DocumentParseError(f"Expected a line or a mapping, got {value!r}")


def parse_document(value) -> RootedMoveTree:
    if value is None:
        raise DocumentParseError("No document")
    return RootedMoveTree((parse_node(value),))


def load_document(text: str) -> RootedMoveTree:
    """Parse raw YAML text all the way to a move tree."""
    try:
        value = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DocumentParseError(f"Invalid YAML: {e}") from e
    except RecursionError:
        raise DocumentParseError("Document nests too deeply") from None

    try:
        return parse_document(value)
    except RecursionError:
        raise DocumentParseError("Document nests too deeply") from None


def tree_depth(node: MoveNode) -> int:
    depth = 0
    stack = [(node, 1)]
    while stack:
        current, level = stack.pop()
        depth = max(depth, level)
        stack.extend((child, level + 1) for child in current.children)
    return depth


def count_leaves(node: MoveNode) -> int:
    leaves = 0
    stack = [node]
    while stack:
        current = stack.pop()
        if current.is_leaf:
            leaves += 1
        stack.extend(current.children)
    return leaves
