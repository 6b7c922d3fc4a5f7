"""Section data model — named sections of item labels with a collapsed flag.

The model owns its sections. Section records are frozen; only
``SectionModel.toggle`` swaps in a record with the flipped ``collapsed``
flag. Names and items are fixed at construction.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Sequence


@dataclass(frozen=True)
class Section:
    """One collapsible group of rows.

    Attributes:
        name: Display label shown in the header row.
        items: Item labels in display order (stored as a tuple).
        collapsed: Whether item rows are hidden. New sections start collapsed.
    """
    name: str
    items: tuple[str, ...] = field(default_factory=tuple)
    collapsed: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise TypeError(f"Section name must be str, got {type(self.name).__name__}")
        if isinstance(self.items, str):
            raise TypeError("Section items must be a sequence of str, not a str")
        items = tuple(self.items)
        for pos, label in enumerate(items):
            if not isinstance(label, str):
                raise TypeError(
                    f"Item {pos} of section {self.name!r} must be str, "
                    f"got {type(label).__name__}"
                )
        object.__setattr__(self, "items", items)
        if not isinstance(self.collapsed, bool):
            raise TypeError(f"Section {self.name!r}: collapsed must be bool")

    @property
    def row_count(self) -> int:
        """Flat rows owned by this section (header + items)."""
        return 1 + len(self.items)


class SectionModel:
    """Ordered, fixed-size collection of sections.

    Insertion order is display order. The flat index space is, per
    section, one header row followed by its item rows; collapsed rows
    stay in that space and are only rendered at zero height.
    """

    def __init__(self, sections: Iterable[Section] = ()) -> None:
        self._sections: list[Section] = []
        for pos, section in enumerate(sections):
            if not isinstance(section, Section):
                raise TypeError(f"Entry {pos} is not a Section")
            self._sections.append(section)

    @classmethod
    def from_pairs(
        cls, pairs: Iterable[tuple[str, Sequence[str]]], collapsed: bool = True,
    ) -> SectionModel:
        """Build a model from ``(name, items)`` pairs."""
        return cls(Section(name, tuple(items), collapsed) for name, items in pairs)

    def __len__(self) -> int:
        return len(self._sections)

    @property
    def sections(self) -> tuple[Section, ...]:
        """Snapshot of the sections in display order."""
        return tuple(self._sections)

    def section(self, section_index: int) -> Section:
        """Return the section at *section_index*.

        Raises:
            IndexError: If *section_index* is outside ``[0, len(self))``.
            TypeError: If *section_index* is not an int.
        """
        self._check_index(section_index)
        return self._sections[section_index]

    def header_indices(self) -> list[int]:
        """Flat-row index of each section's header, in section order."""
        indices: list[int] = []
        index = 0
        for section in self._sections:
            indices.append(index)
            index += section.row_count
        return indices

    def toggle(self, section_index: int) -> bool:
        """Flip the collapsed flag of one section.

        Returns:
            The new collapsed state.

        Raises:
            IndexError: If *section_index* is outside ``[0, len(self))``.
            TypeError: If *section_index* is not an int.
        """
        self._check_index(section_index)
        section = self._sections[section_index]
        self._sections[section_index] = replace(section, collapsed=not section.collapsed)
        return not section.collapsed

    def _check_index(self, section_index: int) -> None:
        if isinstance(section_index, bool) or not isinstance(section_index, int):
            raise TypeError(
                f"Section index must be int, got {type(section_index).__name__}"
            )
        if not 0 <= section_index < len(self._sections):
            raise IndexError(
                f"Section index {section_index} out of range "
                f"(0..{len(self._sections) - 1})"
            )
