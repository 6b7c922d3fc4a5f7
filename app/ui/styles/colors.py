"""Color palette constants for dark theme."""

# Base theme colors
BACKGROUND = "#0F172A"
PANEL_BG = "#1E293B"
SURFACE = "#334155"
BORDER = "#475569"

# Accent colors
ACCENT = "#3B82F6"

# Pinned-count badge
BADGE_BG = "#F59E0B"
BADGE_TEXT = "#0F172A"

# Text colors
TEXT_PRIMARY = "#F8FAFC"
TEXT_SECONDARY = "#B0BEC5"
