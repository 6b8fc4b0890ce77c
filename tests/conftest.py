import pytest

from treezipper import sequence, zipper


@pytest.fixture
def tree():
    return [1, 2, [3, [4, 5], 6], [], 7]


@pytest.fixture
def loc(tree):
    return sequence(tree)


@pytest.fixture
def list_loc():
    return zipper(
        [1, [2], [], [3, [4, 5], 6], 7],
        lambda node: isinstance(node, list),
        lambda node: node,
        lambda node, children: list(children),
    )
