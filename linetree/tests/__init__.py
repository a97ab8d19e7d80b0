import chess

from linetree.notation import MoveNode


def fen_after(moves: str) -> str:
    """Reference FEN from python-chess directly, e.g. fen_after("e4 e5 Nf3")"""
    board = chess.Board()
    for san in moves.split():
        board.push_san(san.rstrip("?"))
    return board.fen()


def chain_tokens(node: MoveNode) -> list[str]:
    """
    Tokens down the first child at every step, e.g. for a plain line
    "e4 e5 Nf3" ➤ ["e4", "e5", "Nf3"]
    """
    tokens = []
    while node is not None:
        tokens.append(node.token)
        node = node.children[0] if node.children else None
    return tokens


def walk_positions(node, played=()):
    """Yields (moves played so far, PositionNode) for a whole subtree."""
    played = played + (node.token,)
    yield played, node
    for child in node.children:
        yield from walk_positions(child, played)


def knight_shuffle(plies: int) -> str:
    """A legal line of any length: Nf3 Nf6 Ng1 Ng8 Nf3 ..."""
    cycle = ["Nf3", "Nf6", "Ng1", "Ng8"]
    return " ".join(cycle[i % 4] for i in range(plies))
