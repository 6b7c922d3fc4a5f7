"""Section row delegate — paints info, header and item rows.

Header rows: section name on the left, toggle glyph ("+" collapsed,
"-" expanded) on the right, and the hidden-item badge beside the glyph
while the section is collapsed. Zero-height rows are not painted.
"""

from PyQt6.QtWidgets import QStyledItemDelegate, QStyleOptionViewItem
from PyQt6.QtCore import QModelIndex, QRect, QRectF, Qt
from PyQt6.QtGui import QColor, QFont, QPainter

from app.constants import GLYPH_COLLAPSED, GLYPH_EXPANDED
from app.ui.section_list_model import SectionListModel
from app.ui.styles.colors import (
    ACCENT, BADGE_BG, BADGE_TEXT, BORDER, PANEL_BG, SURFACE,
    TEXT_PRIMARY, TEXT_SECONDARY,
)

_PADDING = 12
_ITEM_INDENT = 28
_GLYPH_WIDTH = 24
_BADGE_WIDTH = 36


class SectionRowDelegate(QStyledItemDelegate):
    """Row painter for SectionListModel."""

    def paint(
        self,
        painter: QPainter,
        option: QStyleOptionViewItem,
        index: QModelIndex,
    ) -> None:
        rect = option.rect
        if rect.height() <= 0:
            return

        kind = index.data(SectionListModel.ROW_KIND_ROLE)
        text = index.data(Qt.ItemDataRole.DisplayRole) or ""

        painter.save()
        if kind == "header":
            self._paint_header(painter, rect, index, text)
        elif kind == "info":
            painter.fillRect(rect, QColor(PANEL_BG))
            painter.setPen(QColor(TEXT_PRIMARY))
            painter.drawText(
                rect.adjusted(_PADDING, 0, -_PADDING, 0),
                Qt.AlignmentFlag.AlignVCenter | Qt.AlignmentFlag.AlignLeft,
                text,
            )
        else:
            painter.setPen(QColor(TEXT_SECONDARY))
            painter.drawText(
                rect.adjusted(_ITEM_INDENT, 0, -_PADDING, 0),
                Qt.AlignmentFlag.AlignVCenter | Qt.AlignmentFlag.AlignLeft,
                text,
            )
        # Row separator
        painter.setPen(QColor(BORDER))
        painter.drawLine(rect.bottomLeft(), rect.bottomRight())
        painter.restore()

    def _paint_header(
        self, painter: QPainter, rect: QRect, index: QModelIndex, text: str,
    ) -> None:
        collapsed = bool(index.data(SectionListModel.COLLAPSED_ROLE))
        badge = index.data(SectionListModel.BADGE_ROLE) or ""

        painter.fillRect(rect, QColor(SURFACE))

        font = QFont(painter.font())
        font.setBold(True)
        painter.setFont(font)
        painter.setPen(QColor(TEXT_PRIMARY))
        painter.drawText(
            rect.adjusted(_PADDING, 0, -(_PADDING + _GLYPH_WIDTH + _BADGE_WIDTH), 0),
            Qt.AlignmentFlag.AlignVCenter | Qt.AlignmentFlag.AlignLeft,
            text,
        )

        glyph_rect = QRect(
            rect.right() - _PADDING - _GLYPH_WIDTH, rect.top(),
            _GLYPH_WIDTH, rect.height(),
        )
        painter.setPen(QColor(ACCENT))
        painter.drawText(
            glyph_rect, Qt.AlignmentFlag.AlignCenter,
            GLYPH_COLLAPSED if collapsed else GLYPH_EXPANDED,
        )

        if collapsed and badge:
            badge_rect = QRectF(
                glyph_rect.left() - _BADGE_WIDTH, rect.center().y() - 9,
                _BADGE_WIDTH - 6, 18,
            )
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(QColor(BADGE_BG))
            painter.drawRoundedRect(badge_rect, 9, 9)
            font.setBold(False)
            font.setPointSizeF(max(font.pointSizeF() - 1, 6))
            painter.setFont(font)
            painter.setPen(QColor(BADGE_TEXT))
            painter.drawText(badge_rect, Qt.AlignmentFlag.AlignCenter, badge)
