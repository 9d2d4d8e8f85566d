"""
Tunable constants for the tree drawing and the Castle Defender campaign.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple


@dataclass(frozen=True)
class LayoutConfig:
    """
    Tree drawing parameters.

    Attributes
    ----------
    initial_width:
        Horizontal offset from the root to each of its children. Each deeper
        level uses half of its parent's offset.
    level_height:
        Vertical distance between depths.
    """

    initial_width: float = 300.0
    level_height: float = 80.0

    def validate(self) -> None:
        if self.initial_width <= 0:
            raise ValueError("initial_width must be positive")
        if self.level_height <= 0:
            raise ValueError("level_height must be positive")


@dataclass(frozen=True)
class CastleConfig:
    """Campaign rules for Castle Defender."""

    max_levels: int = 6
    start_integrity: float = 100.0
    wrong_order_penalty: float = 20.0
    drain_per_tick: float = 0.5
    key_range: Tuple[int, int] = (10, 99)
    mission_names: Sequence[str] = (
        "Iron Outpost",
        "Shadow Keep",
        "Dragon's Peak",
        "Frost Spire",
        "Ember Fort",
    )

    def validate(self) -> None:
        low, high = self.key_range
        if low > high:
            raise ValueError("key_range lower bound must not exceed upper bound")
        if high - low + 1 < self.max_levels:
            raise ValueError("key_range is too small for max_levels unique towers")
        if self.max_levels < 1:
            raise ValueError("max_levels must be at least 1")
        if self.start_integrity <= 0:
            raise ValueError("start_integrity must be positive")
        if self.wrong_order_penalty < 0 or self.drain_per_tick < 0:
            raise ValueError("penalties must be non-negative")
        if not self.mission_names:
            raise ValueError("mission_names must not be empty")


# Defaults used when no explicit config is passed; adjustable for tests/tuning.
LAYOUT_CONFIG: LayoutConfig = LayoutConfig()
CASTLE_CONFIG: CastleConfig = CastleConfig()


def set_layout_config(config: LayoutConfig) -> None:
    """Replace the default layout used by tree snapshots."""
    global LAYOUT_CONFIG
    config.validate()
    LAYOUT_CONFIG = config


def set_castle_config(config: CastleConfig) -> None:
    """Replace the default campaign rules for new games."""
    global CASTLE_CONFIG
    config.validate()
    CASTLE_CONFIG = config
