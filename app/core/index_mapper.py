"""Index mapper — flat row index ↔ (section, row-in-section) translation.

The list widget sees one flat run of rows: for each section a header row
followed by its item rows, sections concatenated in order. All mapping
arithmetic lives here; callers never compute offsets inline.

Row-in-section 0 is the header; row-in-section k > 0 is item k - 1.

Flat indices cover the items region only. Any fixed rows the host list
shows before it (e.g. a title row) are offset away by the caller.

Pure functions, no Qt dependency. Out-of-range indices raise IndexError;
nothing is clamped.
"""

from __future__ import annotations

from bisect import bisect_right

from app.models.list_config import ListConfig
from app.models.section import SectionModel


def total_flat_rows(model: SectionModel) -> int:
    """Number of flat rows, hidden rows included."""
    return sum(section.row_count for section in model.sections)


def _check_row(model: SectionModel, row: int) -> None:
    if isinstance(row, bool) or not isinstance(row, int):
        raise TypeError(f"Flat row must be int, got {type(row).__name__}")
    total = total_flat_rows(model)
    if not 0 <= row < total:
        raise IndexError(f"Flat row {row} out of range (0..{total - 1})")


def section_index_of(model: SectionModel, row: int) -> int:
    """Index of the section owning flat *row*.

    Raises:
        IndexError: If *row* is negative or >= ``total_flat_rows(model)``.
        TypeError: If *row* is not an int.
    """
    _check_row(model, row)
    return bisect_right(model.header_indices(), row) - 1


def row_in_section_of(model: SectionModel, row: int) -> int:
    """Offset of flat *row* from its section's header row."""
    section_index = section_index_of(model, row)
    return row - model.header_indices()[section_index]


def is_header_row(model: SectionModel, row: int) -> bool:
    return row_in_section_of(model, row) == 0


def flat_row_of(model: SectionModel, section_index: int, row_in_section: int) -> int:
    """Inverse mapping: flat row of ``(section_index, row_in_section)``.

    Raises:
        IndexError: If either index is outside its section's bounds.
        TypeError: If either index is not an int.
    """
    if isinstance(row_in_section, bool) or not isinstance(row_in_section, int):
        raise TypeError(f"Row in section must be int, got {type(row_in_section).__name__}")
    section = model.section(section_index)
    if not 0 <= row_in_section < section.row_count:
        raise IndexError(
            f"Row {row_in_section} out of range for section "
            f"{section.name!r} (0..{section.row_count - 1})"
        )
    return model.header_indices()[section_index] + row_in_section


def visible_height(model: SectionModel, row: int, config: ListConfig) -> float:
    """Pixel height flat *row* should occupy right now.

    Header rows always show. Item rows of an expanded section show.
    In a collapsed section only the first ``config.pinned_top_count``
    items show, and a section with no more items than that never
    collapses at all.
    """
    section_index = section_index_of(model, row)
    offset = row - model.header_indices()[section_index]
    if offset == 0:
        return config.header_height

    section = model.section(section_index)
    if not section.collapsed:
        return config.item_height
    if offset <= config.pinned_top_count:
        return config.item_height
    return 0.0


def refresh_range(model: SectionModel, section_index: int) -> tuple[int, int]:
    """Closed flat-row range ``(start, end)`` owned by one section.

    Covers the header and every item row, hidden or not.
    """
    section = model.section(section_index)
    start = model.header_indices()[section_index]
    return start, start + len(section.items)
