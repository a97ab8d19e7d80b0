import chess
import pytest

from linetree import rules
from linetree.compiler import RootedPositionTree, compile_tree
from linetree.exceptions import IllegalMoveError
from linetree.notation import load_document, parse_document
from linetree.tests import fen_after, knight_shuffle, walk_positions


def test_linear_line_positions_follow_the_moves():
    tree = compile_tree(parse_document("e4 e5 Nf3"))
    assert isinstance(tree, RootedPositionTree)
    assert tree.start == chess.STARTING_FEN

    e4 = tree.children[0]
    e5 = e4.children[0]
    nf3 = e5.children[0]
    assert e4.position == fen_after("e4")
    assert e5.position == fen_after("e4 e5")
    assert nf3.position == fen_after("e4 e5 Nf3")
    assert nf3.children == ()


def test_every_position_matches_its_full_prefix(ponziani_tree):
    tree = compile_tree(ponziani_tree)
    count = 0
    for played, node in walk_positions(tree.children[0]):
        assert node.position == fen_after(" ".join(played))
        count += 1
    assert count > 100


def test_blunder_marker_is_stripped_for_play_but_kept_for_display():
    tree = compile_tree(parse_document({"e4 e5 Nf3 Nc6 c3 d6 d4 Nf6 h3": ["Be6? d5"]}))
    h3 = tree.node_at((0, 0, 0, 0, 0, 0, 0, 0, 0))
    be6 = h3.children[0]
    assert be6.token == "Be6?"
    assert be6.is_blunder is True
    assert be6.position == fen_after("e4 e5 Nf3 Nc6 c3 d6 d4 Nf6 h3 Be6")
    assert be6.children[0].is_blunder is False


def test_only_one_trailing_marker_is_stripped():
    with pytest.raises(IllegalMoveError):
        compile_tree(parse_document("e4??"))


def test_castling_with_zeros():
    tree = compile_tree(parse_document("e4 e5 Nf3 Nc6 Bc4 Bc5 0-0"))
    castle = tree.node_at((0, 0, 0, 0, 0, 0, 0))
    board = chess.Board(castle.position)
    assert board.piece_at(chess.G1) == chess.Piece(chess.KING, chess.WHITE)


@pytest.mark.parametrize(
    "document",
    [
        "e4 e5 Ke3",  # not a legal king move
        "e5",  # black's move on white's turn
        "e4 e5 Nf3 Nc6 Zz9",  # not even san
        {"e4 e5": ["Nf3 Nc6", "Nf3 Nc6 Bb5 a6 Bxa6 bxa6 Qxf7 Kxf7 Kh1"]},
    ],
)
def test_one_illegal_move_fails_the_whole_document(document):
    with pytest.raises(IllegalMoveError):
        compile_tree(parse_document(document))


def test_illegal_move_in_a_late_sibling_still_fails_everything():
    text = """\
e4 e5 Nf3:
  - Nc6 Bb5
  - d6 d4
  - Nf6 Nxe5
  - Qh4 Qxh4
"""
    with pytest.raises(IllegalMoveError) as excinfo:
        compile_tree(load_document(text))

    assert excinfo.value.token == "Qxh4"
    assert excinfo.value.position == fen_after("e4 e5 Nf3 Qh4")


def test_compile_is_deterministic(ponziani_tree):
    assert compile_tree(ponziani_tree) == compile_tree(ponziani_tree)


def test_custom_start_and_apply():
    calls = []

    def apply(position, san):
        calls.append((position, san))
        return f"{position}/{san}"

    tree = compile_tree(parse_document({"a b": ["c?", "d"]}), start="S", apply=apply)
    a = tree.children[0]
    b = a.children[0]
    assert a.position == "S/a"
    assert [child.position for child in b.children] == ["S/a/b/c", "S/a/b/d"]
    assert b.children[0].is_blunder
    assert calls == [("S", "a"), ("S/a", "b"), ("S/a/b", "c"), ("S/a/b", "d")]


def test_apply_move_failure_from_custom_apply_propagates():
    def apply(position, san):
        if san == "bad":
            raise IllegalMoveError(san, position)
        return position

    with pytest.raises(IllegalMoveError):
        compile_tree(parse_document({"a": ["b", {"c": ["d", "bad"]}]}), apply=apply)


def test_node_at():
    tree = compile_tree(parse_document({"e4 e5": ["Nf3", "Bc4"]}))
    assert tree.node_at(()) is None
    assert tree.node_at((0, 0, 1)).token == "Bc4"
    with pytest.raises(IndexError):
        tree.node_at((0, 0, 2))
    with pytest.raises(IndexError):
        tree.node_at((1,))


@pytest.mark.parametrize(
    "token, stripped, blunder",
    [
        ("e4", "e4", False),
        ("e4?", "e4", True),
        ("Bb4+?", "Bb4+", True),
        ("e4??", "e4?", True),
    ],
)
def test_strip_marker(token, stripped, blunder):
    assert rules.strip_marker(token) == stripped
    assert rules.is_blunder(token) is blunder


def test_move_squares():
    assert rules.move_squares(chess.STARTING_FEN, "Nf3") == ("g1", "f3")
    assert rules.move_squares(fen_after("e4 e5 Nf3 Nc6 Bc4 Bc5"), "O-O?") == ("e1", "g1")


def test_very_long_line_compiles():
    line = knight_shuffle(600)
    tree = compile_tree(parse_document(line))

    node = tree.children[0]
    plies = 1
    while node.children:
        assert len(node.children) == 1
        node = node.children[0]
        plies += 1

    assert plies == 600
    assert node.token == "Ng8"
    assert node.position == fen_after(line)
