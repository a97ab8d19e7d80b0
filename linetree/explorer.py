"""
Everything a board needs to draw one step of a lines document.

load_lines() turns text into a LoadResult that either holds the compiled
position tree or the error, always alongside the original text so the
author can fix it. board_view() answers "what's on the board and what can
I play next" for a cursor: a tuple of child indices from the root.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from functools import lru_cache
from typing import Optional

from django.conf import settings

from linetree import huffman, rules
from linetree.compiler import PositionNode, RootedPositionTree, compile_tree
from linetree.exceptions import CodecError, LinetreeError
from linetree.notation import load_document
from linetree.orientation import Orientation, display_orientation, infer_orientation

logger = logging.getLogger(__name__)

Cursor = tuple[int, ...]


@dataclass(frozen=True)
class LoadResult:
    text: str
    tree: Optional[RootedPositionTree] = None
    orientation: Orientation = Orientation.UNSET
    error: str = ""

    @property
    def ok(self):
        return self.tree is not None


@dataclass(frozen=True)
class Candidate:
    token: str
    position: str  # fen after the move
    from_square: str
    to_square: str
    is_blunder: bool


@dataclass(frozen=True)
class BoardView:
    position: str
    cursor: Cursor
    candidates: list[Candidate] = field(default_factory=list)
    orientation: str = Orientation.WHITE.value
    inferred_orientation: str = Orientation.UNSET.value
    history: list[str] = field(default_factory=list)

    @property
    def can_go_back(self):
        return bool(self.cursor)

    def to_dict(self):
        data = asdict(self)
        data["cursor"] = list(self.cursor)
        data["can_go_back"] = self.can_go_back
        return data


@lru_cache(maxsize=64)
def _compile_text(text: str) -> LoadResult:
    try:
        move_tree = load_document(text)
        position_tree = compile_tree(move_tree)
    except LinetreeError as e:
        logger.info("Rejected lines document: %s", e)
        return LoadResult(text=text, error=str(e))

    return LoadResult(
        text=text,
        tree=position_tree,
        orientation=infer_orientation(move_tree),
    )


def load_lines(text: str) -> LoadResult:
    """Compile a document; same text ➤ same (cached) result."""
    return _compile_text(text)


def load_shared(token: Optional[str]) -> LoadResult:
    """Share token ➤ LoadResult; a broken token is just an empty document."""
    try:
        text = huffman.decompress(token)
    except CodecError as e:
        logger.warning("Ignoring bad share token %r: %s", token, e)
        text = ""
    return load_lines(text)


def share_token(text: str) -> str:
    return huffman.compress(text)


def parse_cursor(value: Optional[str]) -> Cursor:
    """ "0.2.1" ➤ (0, 2, 1); empty ➤ () """
    if not value:
        return ()
    try:
        return tuple(int(part) for part in value.split("."))
    except ValueError:
        raise ValueError(f"Invalid cursor: {value!r}") from None


def format_cursor(cursor: Cursor) -> str:
    return ".".join(str(index) for index in cursor)


def advance(cursor: Cursor, index: int) -> Cursor:
    return cursor + (index,)


def back(cursor: Cursor) -> Cursor:
    return cursor[:-1]


def _candidate(position: str, node: PositionNode) -> Candidate:
    from_square, to_square = rules.move_squares(position, node.token)
    return Candidate(
        token=node.token,
        position=node.position,
        from_square=from_square,
        to_square=to_square,
        is_blunder=node.is_blunder,
    )


def board_view(result: LoadResult, cursor: Cursor = ()) -> BoardView:
    """
    Raises IndexError for a cursor that walks off the tree. A failed load has
    no moves, so only the empty cursor is valid and the board stays at the
    start.
    """
    default = getattr(settings, "LINETREE_DEFAULT_ORIENTATION", "white")
    orientation = display_orientation(result.orientation, Orientation(default))

    if not result.ok:
        if cursor:
            raise IndexError("Document failed to load; nothing to navigate")
        return BoardView(
            position=rules.START_POSITION,
            cursor=(),
            orientation=orientation.value,
            inferred_orientation=result.orientation.value,
        )

    tree = result.tree
    node = tree.node_at(cursor)
    position = node.position if node else tree.start
    children = node.children if node else tree.children

    history = []
    walked = tree.children
    for index in cursor:
        history.append(walked[index].token)
        walked = walked[index].children

    return BoardView(
        position=position,
        cursor=tuple(cursor),
        candidates=[_candidate(position, child) for child in children],
        orientation=orientation.value,
        inferred_orientation=result.orientation.value,
        history=history,
    )
