"""Section list — the row interface the list view talks to.

Wraps a SectionModel and a ListConfig behind the four queries a flat
list widget needs: row count, row height, row content, and toggle.
Pure Python class (no Qt dependency); the Qt adapter lives in
``app.ui.section_list_model``.

Usage::

    rows = SectionList(model, ListConfig.pin_top(3))
    for r in range(rows.total_flat_rows()):
        rows.height_for_row(r)
        rows.content_for_row(r)
    start, end = rows.on_toggle_requested(1)   # refresh [start, end]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from app.core import index_mapper
from app.models.list_config import ListConfig, VisibilityPolicy
from app.models.section import Section, SectionModel

logger = logging.getLogger(__name__)


class RowKind(Enum):
    HEADER = "header"
    ITEM = "item"


@dataclass(frozen=True)
class RowContent:
    """What a flat row displays.

    Attributes:
        kind: Header or item row.
        text: Section name for headers, item label for items.
        section_index: Index of the owning section.
    """
    kind: RowKind
    text: str
    section_index: int


def badge_text(section: Section, config: ListConfig) -> str:
    """Hidden-item badge for a collapsed header, e.g. ``"5+"``.

    Empty when nothing is hidden: the section is expanded, pinning is
    off, or the section fits inside the pinned rows.
    """
    if not section.collapsed or config.policy is VisibilityPolicy.HIDE_ALL:
        return ""
    hidden = len(section.items) - config.pinned_top_count
    if hidden <= 0:
        return ""
    return f"{hidden}+"


class SectionList:
    """Row queries and the toggle protocol over one SectionModel."""

    def __init__(self, model: SectionModel, config: ListConfig | None = None) -> None:
        self._model = model
        self._config = config or ListConfig()

    @property
    def model(self) -> SectionModel:
        return self._model

    @property
    def config(self) -> ListConfig:
        return self._config

    def total_flat_rows(self) -> int:
        return index_mapper.total_flat_rows(self._model)

    def height_for_row(self, flat_index: int) -> float:
        return index_mapper.visible_height(self._model, flat_index, self._config)

    def content_for_row(self, flat_index: int) -> RowContent:
        """Header name or item label for *flat_index*.

        Raises:
            IndexError: If *flat_index* is outside the flat row space.
        """
        section_index = index_mapper.section_index_of(self._model, flat_index)
        offset = index_mapper.row_in_section_of(self._model, flat_index)
        section = self._model.section(section_index)
        if offset == 0:
            return RowContent(RowKind.HEADER, section.name, section_index)
        return RowContent(RowKind.ITEM, section.items[offset - 1], section_index)

    def on_toggle_requested(self, section_index: int) -> tuple[int, int]:
        """Flip one section and return the closed row range to refresh.

        Raises:
            IndexError: If *section_index* is not a valid section.
        """
        collapsed = self._model.toggle(section_index)
        start, end = index_mapper.refresh_range(self._model, section_index)
        logger.debug(
            "Section %d %s, refresh rows [%d, %d]",
            section_index, "collapsed" if collapsed else "expanded", start, end,
        )
        return start, end
