"""Binary tree nodes and a zigzag level-order traversal."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TreeNode:
    """A node of a binary tree holding an integer value."""

    val: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def _children(*nodes: TreeNode | None) -> list[TreeNode]:
    return [node for node in nodes if node is not None]


def zigzag_level_order(root: TreeNode | None) -> list[list[int]]:
    """Return node values level by level, alternating left-to-right and right-to-left.

    Two stacks are used: popping one stack yields a level in one direction
    while the children are pushed onto the other stack in the order that
    makes the next level come out reversed.
    """
    if root is None:
        return []

    result = [[root.val]]
    forward = _children(root.left, root.right)
    backward: list[TreeNode] = []

    while forward or backward:
        level = []
        while forward:
            node = forward.pop()
            level.append(node.val)
            backward.extend(_children(node.right, node.left))
        if level:
            result.append(level)

        level = []
        while backward:
            node = backward.pop()
            level.append(node.val)
            forward.extend(_children(node.left, node.right))
        if level:
            result.append(level)

    return result