"""
Move legality, delegated to python-chess.

Positions are FEN strings everywhere in linetree, so each call builds a
fresh board and nothing is shared between branches.
"""

import chess

from linetree.exceptions import IllegalMoveError

START_POSITION = chess.STARTING_FEN
BLUNDER_MARKER = "?"


def strip_marker(token: str) -> str:
    """Bb4+? ➤ Bb4+ (only a single trailing marker is an annotation)"""
    if token.endswith(BLUNDER_MARKER):
        return token[: -len(BLUNDER_MARKER)]
    return token


def is_blunder(token: str) -> bool:
    return token.endswith(BLUNDER_MARKER)


def _parse(position: str, san: str) -> tuple[chess.Board, chess.Move]:
    try:
        board = chess.Board(position)
    except ValueError as e:
        raise IllegalMoveError(san, position, f"bad position: {e}") from e

    try:
        move = board.parse_san(san)
    except ValueError as e:
        # IllegalMoveError, InvalidMoveError and AmbiguousMoveError
        # from python-chess are all ValueErrors
        raise IllegalMoveError(san, position, str(e)) from e

    if not move:
        # python-chess reads "--" and "0000" as null moves
        raise IllegalMoveError(san, position, "null move")

    return board, move


def apply_move(position: str, san: str) -> str:
    """Play san on position and return the new FEN, or raise IllegalMoveError."""
    board, move = _parse(position, san)
    board.push(move)
    return board.fen()


def move_squares(position: str, token: str) -> tuple[str, str]:
    """(from, to) square names, e.g. ("g1", "f3"), for drawing an arrow."""
    _, move = _parse(position, strip_marker(token))
    return chess.square_name(move.from_square), chess.square_name(move.to_square)

