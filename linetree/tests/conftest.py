import pytest

from linetree import demo, explorer
from linetree.notation import load_document


@pytest.fixture()
def ponziani_tree():
    return load_document(demo.PONZIANI)


@pytest.fixture()
def ponziani_result():
    return explorer.load_lines(demo.PONZIANI)
