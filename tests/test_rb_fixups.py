"""
Tests for the recolor / realign corrections and the invariant checker.
"""

import random

import pytest

from rb_fixups import (
    CycleState,
    FixupAction,
    Shape,
    apply_realign,
    apply_recolor,
    classify_shape,
    decide_fixup,
    fix_insert,
    insert_report,
    validate_invariants,
)
from rb_tree import Color, RedBlackTree


def _key(tree, node_id):
    return tree.node(node_id).key


def test_ten_twenty_thirty_needs_single_left_rotation():
    tree = RedBlackTree()

    first = insert_report(tree, 10)
    assert first.state is CycleState.STABLE
    assert tree.color_of(first.new_node_id) is Color.BLACK

    second = insert_report(tree, 20)
    assert second.parent_color is Color.BLACK
    assert second.uncle_color is None
    assert second.state is CycleState.STABLE

    third = insert_report(tree, 30)
    assert third.parent_color is Color.RED
    assert third.grandparent_color is Color.BLACK
    assert third.uncle_color is None
    assert third.state is CycleState.AWAITING_CORRECTION
    assert decide_fixup(tree, third.new_node_id) is FixupAction.REALIGN

    result = apply_realign(tree, third.new_node_id)

    assert result.success
    assert result.shape is Shape.RIGHT_RIGHT
    root = tree.node(tree.root)
    assert root.key == 20 and root.color is Color.BLACK
    assert _key(tree, root.left) == 10 and tree.color_of(root.left) is Color.RED
    assert _key(tree, root.right) == 30 and tree.color_of(root.right) is Color.RED
    assert validate_invariants(tree) == []


@pytest.mark.parametrize(
    "keys, shape, top",
    [
        ((30, 20, 10), Shape.LEFT_LEFT, 20),
        ((30, 10, 20), Shape.LEFT_RIGHT, 20),
        ((10, 30, 20), Shape.RIGHT_LEFT, 20),
        ((10, 20, 30), Shape.RIGHT_RIGHT, 20),
    ],
)
def test_realign_handles_all_four_shapes(keys, shape, top):
    tree = RedBlackTree()
    for key in keys[:-1]:
        tree.insert(key)
    node = tree.insert(keys[-1])

    assert classify_shape(tree, node) is shape
    assert apply_realign(tree, node).success
    assert _key(tree, tree.root) == top
    assert tree.keys_in_order() == [10, 20, 30]
    assert validate_invariants(tree) == []


def test_recolor_with_red_uncle_and_root_grandparent():
    tree = RedBlackTree()
    tree.insert(20)
    n10 = tree.insert(10)
    n30 = tree.insert(30)
    n5 = tree.insert(5)

    assert decide_fixup(tree, n5) is FixupAction.RECOLOR
    result = apply_recolor(tree, n5)

    assert result.success
    assert result.next_violating_node_id is None
    assert tree.color_of(n10) is Color.BLACK
    assert tree.color_of(n30) is Color.BLACK
    # Grandparent is the root, forced back to BLACK
    assert tree.color_of(tree.root) is Color.BLACK
    assert validate_invariants(tree) == []


def test_recolor_moves_violation_up():
    tree = RedBlackTree()
    # Build 40(B) -> 20(R) with children 10(B), 30(B); 60(B) on the right.
    n40 = tree.insert(40)
    n20 = tree.insert(20)
    n60 = tree.insert(60)
    n10 = tree.insert(10)
    n30 = tree.insert(30)
    for node, color in ((n20, Color.RED), (n60, Color.BLACK), (n10, Color.BLACK), (n30, Color.BLACK)):
        tree.set_color(node, color)
    # Hang a red pair under 10 so a red 10 would clash with red 20.
    n5 = tree.insert(5)
    n15 = tree.insert(15)
    n1 = tree.insert(1)
    assert validate_invariants(tree)[0].startswith("RED node 5")

    result = apply_recolor(tree, n1)

    assert result.success
    assert result.next_violating_node_id == n10
    assert tree.color_of(n5) is Color.BLACK
    assert tree.color_of(n15) is Color.BLACK
    assert tree.color_of(n10) is Color.RED
    assert decide_fixup(tree, n10) is FixupAction.REALIGN  # uncle 60 is BLACK

    assert apply_realign(tree, n10).success
    assert tree.root == n20
    assert tree.color_of(n20) is Color.BLACK
    assert tree.color_of(n40) is Color.RED
    assert validate_invariants(tree) == []


def test_wrong_action_is_reported_and_tree_untouched():
    tree = RedBlackTree()
    tree.insert(10)
    tree.insert(20)
    n30 = tree.insert(30)
    before = tree.snapshot()

    result = apply_recolor(tree, n30)

    assert not result.success
    assert "BLACK" in result.reason
    assert tree.snapshot() == before


def test_realign_rejected_when_uncle_red():
    tree = RedBlackTree()
    tree.insert(20)
    tree.insert(10)
    tree.insert(30)
    n5 = tree.insert(5)
    before = tree.snapshot()

    result = apply_realign(tree, n5)

    assert not result.success
    assert "RED" in result.reason
    assert tree.snapshot() == before


def test_corrections_on_stable_node_are_rejected():
    tree = RedBlackTree()
    tree.insert(10)
    n20 = tree.insert(20)

    assert decide_fixup(tree, n20) is FixupAction.NONE
    assert not apply_recolor(tree, n20).success
    assert not apply_realign(tree, n20).success


def test_fix_insert_returns_actions_taken():
    tree = RedBlackTree()
    for key in (10, 20):
        fix_insert(tree, tree.insert(key))

    assert fix_insert(tree, tree.insert(30)) == [FixupAction.REALIGN]
    assert fix_insert(tree, tree.insert(40)) == [FixupAction.RECOLOR]


def test_random_insertion_sequences_stay_valid():
    rng = random.Random(7)
    for _ in range(25):
        tree = RedBlackTree()
        keys = rng.sample(range(1000), 60)
        for key in keys:
            fix_insert(tree, tree.insert(key))
            assert validate_invariants(tree) == []
            assert tree.color_of(tree.root) is Color.BLACK
        assert tree.keys_in_order() == sorted(keys)


def test_validate_invariants_flags_red_root():
    tree = RedBlackTree()
    root = tree.insert(1)
    tree.set_color(root, Color.RED)

    assert "root is not BLACK" in validate_invariants(tree)
