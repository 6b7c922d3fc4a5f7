"""Shared test setup: headless Qt platform."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
