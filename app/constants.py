"""Application-wide constants.

Reference: catalog screen layout (header/item rows, pinned items).
"""

APP_NAME = "Collapsible Catalog"
APP_VERSION = "0.1.0"
APP_ORGANIZATION = "MSS"

# Window constraints
MIN_WINDOW_WIDTH = 360
MIN_WINDOW_HEIGHT = 640

# Row geometry [px]
HEADER_ROW_HEIGHT = 50.0
ITEM_ROW_HEIGHT = 44.0
INFO_ROW_HEIGHT = 44.0

# Items kept visible at the top of a collapsed section.
# A section with this many items or fewer never collapses.
PINNED_TOP_COUNT = 3

# Catalog
CATALOG_FILENAME = "products.json"
DEFAULT_CATALOG_TITLE = "Apple"

# Caption above the list
LIST_CAPTION = "Products"

# Header toggle glyphs
GLYPH_COLLAPSED = "+"
GLYPH_EXPANDED = "-"
