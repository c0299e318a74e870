from gostudy.binary_tree import TreeNode, zigzag_level_order


def _build(values):
    """Build a tree from a level-order list where None marks a missing node."""
    if not values:
        return None
    nodes = [None if v is None else TreeNode(v) for v in values]
    children = iter(nodes[1:])
    for node in nodes:
        if node is None:
            continue
        node.left = next(children, None)
        node.right = next(children, None)
    return nodes[0]


def _all_values(node):
    if node is None:
        return []
    return [node.val, *_all_values(node.left), *_all_values(node.right)]


def test_empty_tree_gives_empty_result():
    assert zigzag_level_order(None) == []


def test_single_node():
    assert zigzag_level_order(TreeNode(42)) == [[42]]


def test_sparse_tree():
    root = _build([3, 9, 20, None, None, 15, 7])
    assert zigzag_level_order(root) == [[3], [20, 9], [15, 7]]


def test_complete_tree_alternates_direction():
    root = _build([1, 2, 3, 4, 5, 6, 7])
    assert zigzag_level_order(root) == [[1], [3, 2], [4, 5, 6, 7]]


def test_every_value_appears_once():
    values = list(range(1, 16))
    root = _build(values)
    levels = zigzag_level_order(root)
    flat = [v for level in levels for v in level]
    assert sorted(flat) == sorted(_all_values(root))
    assert len(levels) == 4
    assert [len(level) for level in levels] == [2**i for i in range(4)]


def test_left_leaning_chain():
    root = TreeNode(1, TreeNode(2, TreeNode(3)))
    assert zigzag_level_order(root) == [[1], [2], [3]]