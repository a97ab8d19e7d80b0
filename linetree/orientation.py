"""
Which side is this repertoire for?

A branch point (a node with more than one continuation) locks in the side
about to move there. Every branch point along every path has to lock in
the same side.

    e4 e5 Nf3:            branches after white's Nf3, black to move
      - Nc6 ...           ➤ black
      - d6 ...

Mixing branch points for both sides gives AMBIGUOUS. A document that never
branches gives UNSET, and the caller picks a default.
"""

from __future__ import annotations

import enum
from typing import Iterable, Iterator, Optional

from linetree.notation import RootedMoveTree


class Orientation(str, enum.Enum):
    WHITE = "white"
    BLACK = "black"
    UNSET = "unset"
    AMBIGUOUS = "ambiguous"


def flip(side: Orientation) -> Orientation:
    return Orientation.BLACK if side is Orientation.WHITE else Orientation.WHITE


def _agree(results: Iterable[Orientation]) -> Orientation:
    agreed: Optional[Orientation] = None
    for result in results:
        if result is Orientation.AMBIGUOUS:
            return Orientation.AMBIGUOUS
        if agreed is None:
            agreed = result
        elif result is not agreed:
            return Orientation.AMBIGUOUS
    return agreed if agreed is not None else Orientation.UNSET


def _leaf_results(tree: RootedMoveTree) -> Iterator[Orientation]:
    # (children, side about to choose between them, side committed so far)
    stack = [(tree.children, Orientation.WHITE, Orientation.UNSET)]
    while stack:
        children, mover, committed = stack.pop()
        if len(children) > 1:
            if committed is not Orientation.UNSET and committed is not mover:
                yield Orientation.AMBIGUOUS
                return
            committed = mover

        if not children:
            yield committed
            continue

        for child in children:
            stack.append((child.children, flip(mover), committed))


def infer_orientation(tree: RootedMoveTree) -> Orientation:
    """
    WHITE or BLACK when every branch point agrees, UNSET when there are no
    branch points at all, AMBIGUOUS otherwise. The top-level lines are
    white's first moves.

    Every path ends in a leaf carrying what was committed along it, so the
    whole tree agrees exactly when all of its leaves do.
    """
    return _agree(_leaf_results(tree))


def display_orientation(
    orientation: Orientation, default: Orientation = Orientation.WHITE
) -> Orientation:
    if orientation in (Orientation.UNSET, Orientation.AMBIGUOUS):
        return default
    return orientation
