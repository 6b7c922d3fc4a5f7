"""Catalog service — loads the static section data shown by the list.

Reads ``data/catalog/products.json``: a title for the info row, the list
layout config, and the sections with their item labels. The whole file
is validated up front; a malformed entry fails the load.
"""

from __future__ import annotations

import json
import logging
import pathlib
from dataclasses import dataclass

from app.constants import CATALOG_FILENAME, DEFAULT_CATALOG_TITLE
from app.models.list_config import ListConfig
from app.models.section import Section, SectionModel

logger = logging.getLogger(__name__)

_DEFAULT_SECTIONS: list[tuple[str, list[str]]] = [
    ("Mac", [
        "MacBook", "MacBook Air", "MacBook Pro", "iMac",
        "Mac Pro", "Mac mini", "Accessories", "OS X El Capitan",
    ]),
    ("iPad", ["iPad Pro", "iPad Air 2", "iPad mini 4", "Accessories"]),
    ("iPhone", ["iPhone 6s", "iPhone 6", "iPhone SE", "Accessories"]),
]


@dataclass
class Catalog:
    """Everything the list screen is built from."""
    title: str
    sections: SectionModel
    config: ListConfig


class CatalogService:
    """Loads a Catalog from JSON.

    Args:
        path: Catalog JSON file. If *None*, ``data/catalog/products.json``
              relative to the project root.
    """

    def __init__(self, path: str | pathlib.Path | None = None) -> None:
        if path is None:
            path = pathlib.Path(__file__).resolve().parents[2] / "data" / "catalog" / CATALOG_FILENAME
        self._path = pathlib.Path(path)

    @property
    def path(self) -> pathlib.Path:
        return self._path

    @staticmethod
    def default() -> Catalog:
        """Built-in catalog, no file access."""
        return Catalog(
            title=DEFAULT_CATALOG_TITLE,
            sections=SectionModel.from_pairs(_DEFAULT_SECTIONS),
            config=ListConfig(),
        )

    def load(self) -> Catalog:
        """Read and validate the catalog file.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file is not a valid catalog.
        """
        if not self._path.exists():
            logger.warning("Catalog file not found: %s", self._path)
            raise FileNotFoundError(f"Catalog file not found: {self._path}")

        with open(self._path, encoding="utf-8") as f:
            raw = json.load(f)
        catalog = catalog_from_dict(raw)
        logger.debug("Loaded %d sections from %s", len(catalog.sections), self._path)
        return catalog

    def load_or_default(self) -> Catalog:
        """Load the catalog file, falling back to the built-in catalog if absent."""
        try:
            return self.load()
        except FileNotFoundError:
            logger.info("Using built-in catalog")
            return self.default()


def catalog_from_dict(data: dict) -> Catalog:
    """Build a Catalog from its JSON dict.

    Raises:
        ValueError: On a missing/ill-typed field, naming the section.
    """
    if not isinstance(data, dict):
        raise ValueError("Catalog must be a JSON object")

    raw_sections = data.get("sections")
    if not isinstance(raw_sections, list):
        raise ValueError("Catalog 'sections' must be a list")

    sections: list[Section] = []
    for pos, entry in enumerate(raw_sections):
        sections.append(_dict_to_section(pos, entry))

    config_block = data.get("config", {})
    if not isinstance(config_block, dict):
        raise ValueError("Catalog 'config' must be an object")

    return Catalog(
        title=str(data.get("title", DEFAULT_CATALOG_TITLE)),
        sections=SectionModel(sections),
        config=ListConfig.from_dict(config_block),
    )


def _dict_to_section(pos: int, entry: object) -> Section:
    if not isinstance(entry, dict):
        raise ValueError(f"Section {pos}: expected an object")
    if "name" not in entry:
        raise ValueError(f"Section {pos}: missing 'name'")
    items = entry.get("items", [])
    if not isinstance(items, list):
        raise ValueError(f"Section {pos}: 'items' must be a list")
    try:
        return Section(
            name=entry["name"],
            items=items,
            collapsed=entry.get("collapsed", True),
        )
    except TypeError as exc:
        raise ValueError(f"Section {pos}: {exc}") from exc
