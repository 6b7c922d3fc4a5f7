"""Application factory — QApplication creation, logging, font setup."""

import logging
import sys

from PyQt6.QtCore import qInstallMessageHandler, QtMsgType
from PyQt6.QtWidgets import QApplication
from PyQt6.QtGui import QFont

from app.constants import APP_NAME, APP_ORGANIZATION
from app.ui.styles.colors import BACKGROUND, TEXT_PRIMARY, TEXT_SECONDARY

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_STYLESHEET = f"""
QMainWindow, QTreeView {{ background: {BACKGROUND}; color: {TEXT_PRIMARY}; border: none; }}
QLabel#listCaption {{ color: {TEXT_SECONDARY}; font-size: 8pt; padding: 8px 12px 4px 12px; }}
"""

logger = logging.getLogger(__name__)


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> None:
    """Configure the ``app`` logger.

    Args:
        level: Logging level (e.g. logging.DEBUG).
        log_file: Optional path to also write logs to.
    """
    app_logger = logging.getLogger("app")
    app_logger.setLevel(level)

    # Avoid duplicate handlers on repeated setup
    if app_logger.hasHandlers():
        app_logger.handlers.clear()

    formatter = logging.Formatter(_LOG_FORMAT, datefmt="%H:%M:%S")

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        app_logger.addHandler(file_handler)


def _qt_message_handler(msg_type, context, message):
    """Route Qt warnings and errors into the ``app`` log.

    Suppresses harmless QPainter warnings emitted while zero-height rows
    are laid out.
    """
    if "QPainter" in message:
        return

    if msg_type == QtMsgType.QtWarningMsg:
        logger.warning("Qt: %s", message)
    elif msg_type in (QtMsgType.QtCriticalMsg, QtMsgType.QtFatalMsg):
        logger.error("Qt: %s", message)


def create_application(argv: list[str]) -> QApplication:
    """Create and configure the QApplication instance."""
    qInstallMessageHandler(_qt_message_handler)

    app = QApplication(argv)
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(APP_ORGANIZATION)

    font = QFont("Segoe UI", 10)
    font.setStyleHint(QFont.StyleHint.SansSerif)
    app.setFont(font)

    app.setStyleSheet(_STYLESHEET)
    return app
