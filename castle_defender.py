"""
Castle Defender: a red-black tree campaign where the player performs the fixups.

Each mission builds one tower (inserts one key). A double-red puts the game
into PUZZLE, where the commander must pick RECOLOR_TOWERS or REALIGN_WALLS.
Wrong orders cost integrity; integrity also drains while the puzzle is open.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Set
import logging
import random

from game_config import CastleConfig
import game_config
from rb_fixups import (
    FixupAction,
    InsertReport,
    apply_realign,
    apply_recolor,
    decide_fixup,
    insert_report,
)
from rb_tree import Color, RedBlackTree
from schemas import TreeSnapshot

logger = logging.getLogger(__name__)


class GameState(Enum):
    MENU = "menu"
    PLAYING = "playing"
    PUZZLE = "puzzle"
    VICTORY = "victory"
    SIEGE_LOST = "siege_lost"


class CommanderOrder(Enum):
    RECOLOR_TOWERS = "recolor_towers"
    REALIGN_WALLS = "realign_walls"


_ORDER_ACTIONS = {
    CommanderOrder.RECOLOR_TOWERS: FixupAction.RECOLOR,
    CommanderOrder.REALIGN_WALLS: FixupAction.REALIGN,
}


@dataclass(frozen=True)
class Mission:
    level: int
    name: str
    key: int

    @property
    def task(self) -> str:
        return f"Construct Tower {self.key}"


@dataclass(frozen=True)
class OrderOutcome:
    """Result of one commander order. ``correct`` False is a rule violation, not an error."""

    correct: bool
    reason: str = ""
    penalty: float = 0.0
    cascaded: bool = False


class CastleDefender:
    """
    One player's campaign. Owns its tree exclusively.
    """

    def __init__(self, config: Optional[CastleConfig] = None, seed: Optional[int] = None) -> None:
        self.config = config or game_config.CASTLE_CONFIG
        self.config.validate()
        self._rng = random.Random(seed)
        self.tree = RedBlackTree()
        self.state = GameState.MENU
        self.level = 0
        self.score = 0
        self.integrity = self.config.start_integrity
        self.mission: Optional[Mission] = None
        self.active_node: Optional[int] = None
        self._used_keys: Set[int] = set()

    # --- Campaign flow -------------------------------------------------------

    def start_campaign(self) -> Mission:
        """Reset everything and build the first tower."""
        self.tree.clear()
        self._used_keys = set()
        self.level = 1
        self.score = 0
        self.integrity = self.config.start_integrity
        self.active_node = None
        self.state = GameState.PLAYING
        logger.info("Campaign started")
        return self._launch_mission()

    def next_mission(self) -> Optional[Mission]:
        """
        Move on after a VICTORY. Returns None (and goes back to MENU) once the
        last level has been won.
        """
        if self.state is not GameState.VICTORY:
            raise ValueError(f"Cannot advance from state {self.state.value}")
        if self.level >= self.config.max_levels:
            self.state = GameState.MENU
            logger.info("Campaign complete with score %d", self.score)
            return None
        self.level += 1
        self.integrity = self.config.start_integrity
        self.state = GameState.PLAYING
        return self._launch_mission()

    def _launch_mission(self) -> Mission:
        low, high = self.config.key_range
        key = self._rng.randint(low, high)
        while key in self._used_keys:
            key = self._rng.randint(low, high)
        name = f"{self._rng.choice(list(self.config.mission_names))} #{self.level}"
        self.mission = Mission(level=self.level, name=name, key=key)
        self.build_tower(key)
        return self.mission

    def build_tower(self, key: int) -> InsertReport:
        """Insert a tower and either open the puzzle or complete the level."""
        if self.state is not GameState.PLAYING:
            raise ValueError(f"Cannot build while {self.state.value}")
        report = insert_report(self.tree, key)
        self._used_keys.add(key)

        if report.parent_color is Color.RED:
            self.state = GameState.PUZZLE
            self.active_node = report.new_node_id
            logger.info("Tower %d caused a double-red", key)
        else:
            self.tree.set_color(self.tree.root, Color.BLACK)
            self._complete_level()
        return report

    def _complete_level(self) -> None:
        self.active_node = None
        self.score += int(self.integrity)
        self.state = GameState.VICTORY
        logger.info("Level %d stabilised, score %d", self.level, self.score)

    # --- Puzzle --------------------------------------------------------------

    def command(self, order: CommanderOrder) -> OrderOutcome:
        """
        Apply the commander's correction to the active double-red.

        The order is checked against the uncle's colour before anything is
        mutated; a wrong order only costs integrity.
        """
        if self.state is not GameState.PUZZLE or self.active_node is None:
            return OrderOutcome(correct=False, reason="No violation to correct.")

        expected = decide_fixup(self.tree, self.active_node)
        if _ORDER_ACTIONS[order] is not expected:
            penalty = min(self.config.wrong_order_penalty, self.integrity)
            self.integrity -= penalty
            logger.info("Wrong order %s (expected %s)", order.value, expected.value)
            if self.integrity <= 0:
                self._lose()
            return OrderOutcome(
                correct=False, reason="WRONG TACTIC! The walls are crumbling!", penalty=penalty
            )

        if order is CommanderOrder.RECOLOR_TOWERS:
            result = apply_recolor(self.tree, self.active_node)
            if result.next_violating_node_id is not None:
                self.active_node = result.next_violating_node_id
                return OrderOutcome(
                    correct=True,
                    reason="Violation moved up! Stabilize the Grandparent!",
                    cascaded=True,
                )
        else:
            apply_realign(self.tree, self.active_node)

        self.tree.set_color(self.tree.root, Color.BLACK)
        self._complete_level()
        return OrderOutcome(correct=True, reason="Sector Stabilized! Honor increased.")

    def drain(self, ticks: int = 1) -> float:
        """Integrity lost to time while the puzzle stays open."""
        if self.state is not GameState.PUZZLE:
            return self.integrity
        self.integrity = max(0.0, self.integrity - ticks * self.config.drain_per_tick)
        if self.integrity <= 0:
            self._lose()
        return self.integrity

    def _lose(self) -> None:
        self.integrity = 0.0
        self.state = GameState.SIEGE_LOST
        logger.info("Siege lost at level %d", self.level)

    def snapshot(self) -> TreeSnapshot:
        return self.tree.snapshot()
