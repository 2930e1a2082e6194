from PySide6.QtWidgets import QGraphicsView
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QPainter


class GraphicsView(QGraphicsView):
    """GraphicsView with mouse wheel zoom, right-button panning and left-button point signals"""

    mouse_moved = Signal(float, float)     # Mouse position in scene coordinates
    left_pressed = Signal(float, float)    # Left button down (scene coordinates)
    left_dragged = Signal(float, float)    # Mouse moved with left button held
    left_released = Signal(float, float)   # Left button up

    def __init__(self, parent=None):
        super().__init__(parent)
        # Rendering settings
        self.setRenderHint(QPainter.Antialiasing)
        self.setRenderHint(QPainter.SmoothPixmapTransform)

        # Zoom settings
        self.setTransformationAnchor(QGraphicsView.AnchorUnderMouse)
        self.setResizeAnchor(QGraphicsView.AnchorViewCenter)

        # Zoom parameters, relative to the fitted view
        self._zoom_factor = 1.1
        self._min_zoom = 0.5
        self._max_zoom = 20.0
        self._current_zoom = 1.0

        self._panning = False
        self._last_pan_point = None

        self.setAlignment(Qt.AlignCenter)
        self.setViewportUpdateMode(QGraphicsView.FullViewportUpdate)
        self.setDragMode(QGraphicsView.NoDrag)
        self.setMouseTracking(True)

    def wheelEvent(self, event):
        """Handle mouse wheel zoom"""
        old_zoom = self._current_zoom

        if event.angleDelta().y() > 0:
            new_zoom = old_zoom * self._zoom_factor
        else:
            new_zoom = old_zoom / self._zoom_factor

        new_zoom = max(self._min_zoom, min(new_zoom, self._max_zoom))
        scale_factor = new_zoom / old_zoom

        if abs(scale_factor - 1.0) > 0.001:
            self.scale(scale_factor, scale_factor)
            self._current_zoom = new_zoom

        event.accept()

    def fit_item(self, item):
        """Fit the view to an item and reset the zoom level"""
        self.resetTransform()
        self.fitInView(item, Qt.KeepAspectRatio)
        self._current_zoom = 1.0

    def get_view_scale(self):
        """Screen pixels per image pixel"""
        return self.transform().m11()

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            scene_pos = self.mapToScene(event.position().toPoint())
            self.left_pressed.emit(scene_pos.x(), scene_pos.y())
            event.accept()
        elif event.button() == Qt.RightButton:
            self._panning = True
            self._last_pan_point = event.position().toPoint()
            self.viewport().setCursor(Qt.ClosedHandCursor)
            event.accept()
        else:
            super().mousePressEvent(event)

    def mouseMoveEvent(self, event):
        scene_pos = self.mapToScene(event.position().toPoint())
        self.mouse_moved.emit(scene_pos.x(), scene_pos.y())

        if self._panning and self._last_pan_point is not None:
            delta = event.position().toPoint() - self._last_pan_point
            self._last_pan_point = event.position().toPoint()
            self.horizontalScrollBar().setValue(self.horizontalScrollBar().value() - delta.x())
            self.verticalScrollBar().setValue(self.verticalScrollBar().value() - delta.y())
        elif event.buttons() & Qt.LeftButton:
            self.left_dragged.emit(scene_pos.x(), scene_pos.y())
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.LeftButton:
            scene_pos = self.mapToScene(event.position().toPoint())
            self.left_released.emit(scene_pos.x(), scene_pos.y())
            event.accept()
        elif event.button() == Qt.RightButton:
            self._panning = False
            self._last_pan_point = None
            self.viewport().setCursor(Qt.CrossCursor)
            event.accept()
        else:
            super().mouseReleaseEvent(event)
