"""
Corrective operations that restore red-black invariants after an insert.

The tree never fixes itself. A caller (the Castle Defender puzzle, a test, or
``fix_insert`` for reference answers) inspects the violation, decides between
RECOLOR and REALIGN, and applies one step at a time.

A step applied in the wrong situation does not raise: it returns a result
with ``success=False`` and a reason, and the tree is left untouched.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional
import logging

from rb_tree import Color, RedBlackTree

logger = logging.getLogger(__name__)


class FixupAction(Enum):
    """
    Which correction a double-red calls for.

    NONE: no violation at this node.
    RECOLOR: uncle is RED; push blackness down from the grandparent.
    REALIGN: uncle is BLACK or absent; rotate and swap colours.
    """

    NONE = "none"
    RECOLOR = "recolor"
    REALIGN = "realign"


class CycleState(Enum):
    """Where an insertion cycle stands."""

    STABLE = "stable"
    AWAITING_CORRECTION = "awaiting_correction"


class Shape(Enum):
    """Position of parent under grandparent, then of node under parent."""

    LEFT_LEFT = "LL"
    LEFT_RIGHT = "LR"
    RIGHT_LEFT = "RL"
    RIGHT_RIGHT = "RR"


@dataclass(frozen=True)
class InsertReport:
    """
    What the caller needs to judge a fresh insert.

    Colours are None when that relative does not exist.
    """

    new_node_id: int
    parent_color: Optional[Color]
    grandparent_color: Optional[Color]
    uncle_color: Optional[Color]

    @property
    def state(self) -> CycleState:
        if self.parent_color is Color.RED:
            return CycleState.AWAITING_CORRECTION
        return CycleState.STABLE


@dataclass(frozen=True)
class RecolorResult:
    success: bool
    next_violating_node_id: Optional[int] = None
    reason: str = ""


@dataclass(frozen=True)
class RealignResult:
    success: bool
    shape: Optional[Shape] = None
    reason: str = ""


def _color_or_none(tree: RedBlackTree, node_id: Optional[int]) -> Optional[Color]:
    return None if node_id is None else tree.color_of(node_id)


def insert_report(tree: RedBlackTree, key: int) -> InsertReport:
    """Insert key and describe the new node's neighbourhood."""
    node_id = tree.insert(key)
    return InsertReport(
        new_node_id=node_id,
        parent_color=_color_or_none(tree, tree.parent_of(node_id)),
        grandparent_color=_color_or_none(tree, tree.grandparent_of(node_id)),
        uncle_color=_color_or_none(tree, tree.uncle_of(node_id)),
    )


def has_double_red(tree: RedBlackTree, node_id: int) -> bool:
    parent = tree.parent_of(node_id)
    return (
        parent is not None
        and tree.color_of(node_id) is Color.RED
        and tree.color_of(parent) is Color.RED
    )


def decide_fixup(tree: RedBlackTree, node_id: int) -> FixupAction:
    """The correct next step for a node, judged from its uncle's colour."""
    if not has_double_red(tree, node_id) or tree.grandparent_of(node_id) is None:
        return FixupAction.NONE
    if tree.color_of(tree.uncle_of(node_id)) is Color.RED:
        return FixupAction.RECOLOR
    return FixupAction.REALIGN


def classify_shape(tree: RedBlackTree, node_id: int) -> Shape:
    parent = tree.parent_of(node_id)
    if parent is None or tree.parent_of(parent) is None:
        raise ValueError(f"Node {node_id} has no grandparent to rotate around.")
    parent_left = tree.is_left_child(parent)
    node_left = tree.is_left_child(node_id)
    if parent_left:
        return Shape.LEFT_LEFT if node_left else Shape.LEFT_RIGHT
    return Shape.RIGHT_LEFT if node_left else Shape.RIGHT_RIGHT


def apply_recolor(tree: RedBlackTree, node_id: int) -> RecolorResult:
    """
    Parent and uncle to BLACK, grandparent to RED.

    A RED root is forced back to BLACK. When the grandparent now sits under
    a RED parent, the violation has moved up and the grandparent's id is
    returned as the next node to fix.
    """
    action = decide_fixup(tree, node_id)
    if action is not FixupAction.RECOLOR:
        reason = (
            "No double-red at this node."
            if action is FixupAction.NONE
            else "Uncle is BLACK: the walls must be realigned, not recoloured."
        )
        return RecolorResult(success=False, reason=reason)

    parent = tree.parent_of(node_id)
    uncle = tree.uncle_of(node_id)
    grandparent = tree.grandparent_of(node_id)
    tree.set_color(parent, Color.BLACK)
    tree.set_color(uncle, Color.BLACK)
    tree.set_color(grandparent, Color.RED)

    if grandparent == tree.root:
        tree.set_color(grandparent, Color.BLACK)
        return RecolorResult(success=True)
    if has_double_red(tree, grandparent):
        logger.debug("Double-red moved up to %d", tree.node(grandparent).key)
        return RecolorResult(success=True, next_violating_node_id=grandparent)
    return RecolorResult(success=True)


def apply_realign(tree: RedBlackTree, node_id: int) -> RealignResult:
    """
    Rotate the node's triangle into a line and recolour.

    Line cases rotate the grandparent once; triangle cases rotate the parent
    the other way first. The node left on top becomes BLACK and the old
    grandparent RED.
    """
    action = decide_fixup(tree, node_id)
    if action is not FixupAction.REALIGN:
        reason = (
            "No double-red at this node."
            if action is FixupAction.NONE
            else "Uncle is RED: the towers must be recoloured, not realigned."
        )
        return RealignResult(success=False, reason=reason)

    parent = tree.parent_of(node_id)
    grandparent = tree.grandparent_of(node_id)
    shape = classify_shape(tree, node_id)

    if shape is Shape.LEFT_LEFT:
        tree.rotate_right(grandparent)
        top = parent
    elif shape is Shape.LEFT_RIGHT:
        tree.rotate_left(parent)
        tree.rotate_right(grandparent)
        top = node_id
    elif shape is Shape.RIGHT_LEFT:
        tree.rotate_right(parent)
        tree.rotate_left(grandparent)
        top = node_id
    else:
        tree.rotate_left(grandparent)
        top = parent

    tree.set_color(top, Color.BLACK)
    tree.set_color(grandparent, Color.RED)
    logger.debug("Realigned %s around %d", shape.value, tree.node(grandparent).key)
    return RealignResult(success=True, shape=shape)


def fix_insert(tree: RedBlackTree, node_id: int) -> List[FixupAction]:
    """
    Apply the correct corrections until the tree is stable.

    Returns the actions taken, in order. Used for reference answers; insert()
    never calls this.
    """
    actions: List[FixupAction] = []
    current: Optional[int] = node_id
    while current is not None:
        action = decide_fixup(tree, current)
        if action is FixupAction.RECOLOR:
            current = apply_recolor(tree, current).next_violating_node_id
        elif action is FixupAction.REALIGN:
            apply_realign(tree, current)
            current = None
        else:
            break
        actions.append(action)

    if tree.root is not None:
        tree.set_color(tree.root, Color.BLACK)
    return actions


def validate_invariants(tree: RedBlackTree) -> List[str]:
    """
    Describe every broken red-black or search-tree rule; empty when valid.
    """
    problems: List[str] = []
    if tree.root is None:
        return problems
    if tree.color_of(tree.root) is not Color.BLACK:
        problems.append("root is not BLACK")
    if tree.parent_of(tree.root) is not None:
        problems.append("root has a parent")

    keys = tree.keys_in_order()
    if any(a >= b for a, b in zip(keys, keys[1:])):
        problems.append("keys are not in search order")

    def black_height(node_id: Optional[int]) -> int:
        if node_id is None:
            return 1
        n = tree.node(node_id)
        for child in (n.left, n.right):
            if child is not None and tree.parent_of(child) != node_id:
                problems.append(f"node {tree.node(child).key} has a stale parent link")
            if n.color is Color.RED and tree.color_of(child) is Color.RED:
                problems.append(f"RED node {n.key} has RED child {tree.node(child).key}")
        left = black_height(n.left)
        right = black_height(n.right)
        if left != right:
            problems.append(f"black height differs under {n.key}")
        return max(left, right) + (1 if n.color is Color.BLACK else 0)

    black_height(tree.root)
    return problems
