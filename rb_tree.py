"""
Red-black tree with externally driven fixups.

Nodes live in an arena and refer to each other by index, so parent links are
plain integers rather than back-references. Insertion never rebalances on its
own: a fresh RED node may sit under a RED parent until the caller applies the
corrective operations in ``rb_fixups``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional
import logging

from errors import DuplicateKeyError, UnknownTreeNodeError
from game_config import LayoutConfig
import game_config
from schemas import TreeEdgeView, TreeNodeView, TreeSnapshot

logger = logging.getLogger(__name__)


class Color(Enum):
    RED = "RED"
    BLACK = "BLACK"


@dataclass
class TreeNode:
    """
    Arena entry. Links are arena indices; None marks an empty (BLACK) leaf.
    """

    key: int
    color: Color
    parent: Optional[int] = None
    left: Optional[int] = None
    right: Optional[int] = None


class RedBlackTree:
    """
    Binary search tree carrying red-black colours.

    The node id returned by insert() is the arena index and stays attached to
    the same key across rotations.
    """

    def __init__(self) -> None:
        self._nodes: List[TreeNode] = []
        self.root: Optional[int] = None

    def clear(self) -> None:
        """Drop every node; ids start again from 0."""
        self._nodes = []
        self.root = None

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, key: int) -> bool:
        return self.find(key) is not None

    # --- Node access ---------------------------------------------------------

    def node(self, node_id: int) -> TreeNode:
        if not 0 <= node_id < len(self._nodes):
            raise UnknownTreeNodeError(node_id)
        return self._nodes[node_id]

    def color_of(self, node_id: Optional[int]) -> Color:
        """Colour of a node; absent leaves count as BLACK."""
        if node_id is None:
            return Color.BLACK
        return self.node(node_id).color

    def set_color(self, node_id: int, color: Color) -> None:
        self.node(node_id).color = color

    def parent_of(self, node_id: int) -> Optional[int]:
        return self.node(node_id).parent

    def grandparent_of(self, node_id: int) -> Optional[int]:
        parent = self.parent_of(node_id)
        return None if parent is None else self.parent_of(parent)

    def uncle_of(self, node_id: int) -> Optional[int]:
        """The parent's sibling, or None when absent."""
        parent = self.parent_of(node_id)
        grandparent = self.grandparent_of(node_id)
        if grandparent is None:
            return None
        g = self.node(grandparent)
        return g.right if g.left == parent else g.left

    def is_left_child(self, node_id: int) -> bool:
        parent = self.parent_of(node_id)
        return parent is not None and self.node(parent).left == node_id

    def find(self, key: int) -> Optional[int]:
        current = self.root
        while current is not None:
            n = self._nodes[current]
            if key == n.key:
                return current
            current = n.left if key < n.key else n.right
        return None

    def keys_in_order(self) -> List[int]:
        return [self._nodes[i].key for i in self._in_order(self.root)]

    def _in_order(self, node_id: Optional[int]) -> Iterator[int]:
        if node_id is None:
            return
        n = self._nodes[node_id]
        yield from self._in_order(n.left)
        yield node_id
        yield from self._in_order(n.right)

    # --- Mutation ------------------------------------------------------------

    def insert(self, key: int) -> int:
        """
        Plain BST insert; returns the new node id.

        The first node becomes a BLACK root. Every later node is a RED leaf,
        possibly under a RED parent. Duplicate keys are rejected before any
        change is made.
        """
        if self.root is None:
            self._nodes.append(TreeNode(key, Color.BLACK))
            self.root = len(self._nodes) - 1
            logger.debug("Inserted %d as root", key)
            return self.root

        parent = self.root
        while True:
            p = self._nodes[parent]
            if key == p.key:
                raise DuplicateKeyError(key)
            child = p.left if key < p.key else p.right
            if child is None:
                break
            parent = child

        self._nodes.append(TreeNode(key, Color.RED, parent=parent))
        new_id = len(self._nodes) - 1
        if key < p.key:
            p.left = new_id
        else:
            p.right = new_id
        logger.debug("Inserted %d under %d (%s)", key, p.key, p.color.value)
        return new_id

    def rotate_left(self, pivot: int) -> None:
        """Lift pivot's right child into pivot's place. No-op without a right child."""
        x = self.node(pivot)
        y_id = x.right
        if y_id is None:
            return
        y = self._nodes[y_id]

        x.right = y.left
        if y.left is not None:
            self._nodes[y.left].parent = pivot

        self._replace_child(x.parent, pivot, y_id)
        y.left = pivot
        x.parent = y_id

    def rotate_right(self, pivot: int) -> None:
        """Lift pivot's left child into pivot's place. No-op without a left child."""
        x = self.node(pivot)
        y_id = x.left
        if y_id is None:
            return
        y = self._nodes[y_id]

        x.left = y.right
        if y.right is not None:
            self._nodes[y.right].parent = pivot

        self._replace_child(x.parent, pivot, y_id)
        y.right = pivot
        x.parent = y_id

    def _replace_child(self, parent: Optional[int], old: int, new: int) -> None:
        self._nodes[new].parent = parent
        if parent is None:
            self.root = new
        elif self._nodes[parent].left == old:
            self._nodes[parent].left = new
        else:
            self._nodes[parent].right = new

    # --- Rendering -----------------------------------------------------------

    def snapshot(self, layout: Optional[LayoutConfig] = None) -> TreeSnapshot:
        """
        Fully materialised drawing of the tree.

        Root at (0, 0); each child sits one level lower, offset sideways by
        the parent's width budget, and passes half that budget down.
        """
        layout = layout or game_config.LAYOUT_CONFIG
        nodes: List[TreeNodeView] = []
        edges: List[TreeEdgeView] = []
        if self.root is None:
            return TreeSnapshot(nodes=nodes, edges=edges)

        stack = [(self.root, 0, 0.0, layout.initial_width)]
        while stack:
            node_id, depth, x, width = stack.pop()
            n = self._nodes[node_id]
            nodes.append(
                TreeNodeView(
                    id=node_id, key=n.key, color=n.color.value, x=x, y=depth * layout.level_height
                )
            )
            # Push right first so the left subtree is emitted first (pre-order).
            for child, dx in ((n.right, width), (n.left, -width)):
                if child is not None:
                    stack.append((child, depth + 1, x + dx, width / 2))
            for child in (n.left, n.right):
                if child is not None:
                    edges.append(TreeEdgeView(parent_id=node_id, child_id=child))

        return TreeSnapshot(nodes=nodes, edges=edges)
