"""List layout configuration — row heights and collapsed-section visibility.

Two visibility policies share one code path:
  - HIDE_ALL: every item row of a collapsed section has zero height.
  - PIN_TOP: the first N item rows of a collapsed section keep their
    height; a section with N items or fewer never collapses.

``pinned_top_count == 0`` is the HIDE_ALL policy.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from app.constants import HEADER_ROW_HEIGHT, ITEM_ROW_HEIGHT, PINNED_TOP_COUNT


class VisibilityPolicy(Enum):
    """How item rows of a collapsed section are shown."""
    HIDE_ALL = "hide-all"
    PIN_TOP = "pin-top"


@dataclass(frozen=True)
class ListConfig:
    """Row geometry and pinning for the sectioned list.

    Attributes:
        pinned_top_count: Items kept visible in a collapsed section (0 = hide all).
        header_height: Height of a header row [px].
        item_height: Height of a visible item row [px].
    """
    pinned_top_count: int = PINNED_TOP_COUNT
    header_height: float = HEADER_ROW_HEIGHT
    item_height: float = ITEM_ROW_HEIGHT

    def __post_init__(self) -> None:
        if isinstance(self.pinned_top_count, bool) or not isinstance(self.pinned_top_count, int):
            raise TypeError("pinned_top_count must be int")
        if self.pinned_top_count < 0:
            raise ValueError(f"pinned_top_count must be >= 0, got {self.pinned_top_count}")
        if self.header_height < 0:
            raise ValueError(f"header_height must be >= 0, got {self.header_height}")
        if self.item_height < 0:
            raise ValueError(f"item_height must be >= 0, got {self.item_height}")

    @property
    def policy(self) -> VisibilityPolicy:
        if self.pinned_top_count == 0:
            return VisibilityPolicy.HIDE_ALL
        return VisibilityPolicy.PIN_TOP

    @classmethod
    def hide_all(
        cls,
        header_height: float = HEADER_ROW_HEIGHT,
        item_height: float = ITEM_ROW_HEIGHT,
    ) -> ListConfig:
        return cls(0, header_height, item_height)

    @classmethod
    def pin_top(
        cls,
        count: int,
        header_height: float = HEADER_ROW_HEIGHT,
        item_height: float = ITEM_ROW_HEIGHT,
    ) -> ListConfig:
        return cls(count, header_height, item_height)

    @classmethod
    def from_dict(cls, data: dict) -> ListConfig:
        """Parse the ``config`` block of a catalog file.

        Missing keys fall back to the defaults. ``"policy": "hide-all"``
        forces the pinned count to 0.

        Raises:
            ValueError: On an unknown policy name, an ill-typed value or
                a negative value.
        """
        policy_name = data.get("policy", VisibilityPolicy.PIN_TOP.value)
        try:
            policy = VisibilityPolicy(policy_name)
        except ValueError:
            raise ValueError(f"Unknown visibility policy: {policy_name!r}")

        count = data.get("pinned_top_count", PINNED_TOP_COUNT)
        if policy is VisibilityPolicy.HIDE_ALL:
            count = 0
        try:
            return cls(
                pinned_top_count=count,
                header_height=float(data.get("header_height", HEADER_ROW_HEIGHT)),
                item_height=float(data.get("item_height", ITEM_ROW_HEIGHT)),
            )
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid list config: {exc}") from exc

