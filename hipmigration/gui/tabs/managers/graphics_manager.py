"""
GraphicsManager - image display and overlay drawing
Draws the radiograph, the landmark crosses and the construction lines
"""

import logging

from PySide6.QtWidgets import QGraphicsPixmapItem, QGraphicsLineItem
from PySide6.QtCore import QObject, QPointF, QRectF
from PySide6.QtGui import QPen, QColor

from hipmigration.settings import MeasurementSettings

logger = logging.getLogger(__name__)

LINE_Z = 1
MARKER_Z = 2


class GraphicsManager(QObject):
    """Graphics manager for image display and overlay drawing"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.parent = parent

        self.graphics_view = None
        self.graphics_scene = None
        self.pixmap_item = None

        # Items drawn for the current points, removed on every redraw
        self.overlay_items = []

        self.settings = MeasurementSettings()
        self.active_index = None

    def set_ui_components(self, graphics_view, graphics_scene):
        """Set UI component references"""
        self.graphics_view = graphics_view
        self.graphics_scene = graphics_scene

    def set_settings(self, settings):
        self.settings = settings

    def set_active_index(self, index):
        """Highlight the landmark being dragged"""
        self.active_index = index

    def show_pixmap(self, pixmap):
        """Replace the displayed image and fit it to the view"""
        if not self.graphics_scene or not self.graphics_view:
            return False

        self.graphics_scene.clear()
        self.overlay_items = []
        self.pixmap_item = QGraphicsPixmapItem(pixmap)
        self.pixmap_item.setZValue(0)
        self.graphics_scene.addItem(self.pixmap_item)

        width, height = pixmap.width(), pixmap.height()
        margin = max(width, height) * 0.1
        self.graphics_scene.setSceneRect(QRectF(-margin, -margin, width + 2 * margin, height + 2 * margin))
        self.graphics_view.fit_item(self.pixmap_item)
        logger.debug("Showing image %dx%d at scale %.3f", width, height, self.get_view_scale())
        return True

    def get_view_scale(self):
        if not self.graphics_view:
            return 1.0
        scale = self.graphics_view.get_view_scale()
        return scale if scale > 0 else 1.0

    def get_image_dimensions(self):
        if self.pixmap_item is None:
            return None, None
        pixmap = self.pixmap_item.pixmap()
        return pixmap.width(), pixmap.height()

    def is_point_in_image(self, x, y):
        if self.pixmap_item is None:
            return False
        return self.pixmap_item.contains(QPointF(x, y))

    def update_overlay(self, points, lines):
        """Redraw construction lines and landmark markers"""
        if not self.graphics_scene:
            return

        for item in self.overlay_items:
            if item.scene() is not None:
                self.graphics_scene.removeItem(item)
        self.overlay_items = []

        if self.pixmap_item is None:
            return

        colors = self.settings.colors
        for line in lines:
            pen = QPen(QColor(colors.get(line.kind.value, '#ffffff')))
            pen.setCosmetic(True)
            pen.setWidthF(1.0)
            self._add_line(line.start.x, line.start.y, line.end.x, line.end.y, pen, LINE_Z)

        # Cross size stays constant on screen regardless of zoom
        size = self.settings.marker_size / self.get_view_scale()
        for index, (x, y) in enumerate(points):
            color = colors['active_marker'] if index == self.active_index else colors['marker']
            pen = QPen(QColor(color))
            pen.setCosmetic(True)
            pen.setWidthF(1.5)
            self._add_line(x - size, y, x + size, y, pen, MARKER_Z)
            self._add_line(x, y - size, x, y + size, pen, MARKER_Z)

    def _add_line(self, x1, y1, x2, y2, pen, z_value):
        item = QGraphicsLineItem(x1, y1, x2, y2)
        item.setPen(pen)
        item.setZValue(z_value)
        self.graphics_scene.addItem(item)
        self.overlay_items.append(item)
