import random

from algokit.rbtree import Color, RedBlackTree


def _black_height(node, parent=None):
    """Return the black height, asserting red-black invariants on the way."""
    if node is None:
        return 1
    assert node.parent is parent
    if node.color is Color.RED:
        for child in (node.left, node.right):
            assert child is None or child.color is Color.BLACK
    left = _black_height(node.left, node)
    right = _black_height(node.right, node)
    assert left == right
    return left + (1 if node.color is Color.BLACK else 0)


def _check(tree):
    assert tree._root is None or tree._root.color is Color.BLACK
    _black_height(tree._root)


def test_source_example():
    tree = RedBlackTree()
    for value in [10, 20, 30, 15]:
        tree.insert(value)
    assert tree.inorder() == [10, 15, 20, 30]
    assert tree._root.data == 20
    _check(tree)


def test_empty_tree():
    tree = RedBlackTree()
    assert tree.inorder() == []
    assert len(tree) == 0


def test_single_insert_makes_black_root():
    tree = RedBlackTree([42])
    assert tree._root.color is Color.BLACK
    assert tree.inorder() == [42]


def test_duplicates_are_ignored():
    tree = RedBlackTree([5, 3, 5, 7, 3])
    assert tree.inorder() == [3, 5, 7]
    assert len(tree) == 3
    _check(tree)


def test_ascending_inserts_keep_invariants():
    values = list(range(300))
    tree = RedBlackTree(values)
    assert tree.inorder() == values
    _check(tree)


def test_random_inserts_keep_invariants():
    rng = random.Random(3)
    values = [rng.randint(0, 5000) for _ in range(1000)]
    tree = RedBlackTree()
    for v in values:
        tree.insert(v)
    assert tree.inorder() == sorted(set(values))
    assert len(tree) == len(set(values))
    _check(tree)


def test_membership():
    tree = RedBlackTree([1, 4, 9])
    assert 4 in tree
    assert 5 not in tree