# src/sentex/sentex_ast.py
from collections import deque

SENTENCE = "Sentence"


class ASTNode:
    """A labelled tree node that owns its children outright."""

    def __init__(self, label):
        self.label = label
        self.children = []

    def add_child(self, child):
        self.children.append(child)
        return child

    def __repr__(self):
        return f"ASTNode({self.label!r}, children={len(self.children)})"

    def __str__(self):
        return self.label


def level_order(root):
    """Return the tree's labels grouped by depth, root level first."""
    if root is None:
        return []

    levels = []
    queue = deque([root])
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.label)
            queue.extend(node.children)
        levels.append(level)
    return levels
