"""
EventHandler - Handles user input events
Turns mouse and keyboard input into add, drag, undo and reset requests
"""

import logging

from PySide6.QtWidgets import QMessageBox
from PySide6.QtCore import Qt, QObject, Signal

from hipmigration.geometry import hit_tolerance
from hipmigration.gui.style_manager import create_styled_message_box

logger = logging.getLogger(__name__)


class EventHandler(QObject):
    """Event handler for keyboard and mouse events"""

    # Signals
    point_add_requested = Signal(float, float)      # Add point at (x, y)
    drag_started = Signal(int)                      # Landmark index picked up
    point_move_requested = Signal(int, float, float)  # Move landmark to (x, y)
    drag_finished = Signal(int)                     # Landmark index released
    undo_requested = Signal()
    reset_requested = Signal()
    open_requested = Signal()
    help_requested = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.parent = parent

        self.data_model = None
        self.graphics_manager = None

        # Index of the landmark being dragged
        self.drag_index = None

    def set_components(self, data_model, graphics_manager):
        self.data_model = data_model
        self.graphics_manager = graphics_manager

    def connect_view(self, graphics_view):
        graphics_view.left_pressed.connect(self.handle_press)
        graphics_view.left_dragged.connect(self.handle_drag)
        graphics_view.left_released.connect(self.handle_release)

    def handle_press(self, x, y):
        """Pick an existing landmark for dragging, or request a new point"""
        if self.data_model is None or self.graphics_manager is None:
            return
        if self.graphics_manager.pixmap_item is None:
            return

        radius = self.data_model.settings.hit_radius
        tolerance = hit_tolerance(radius, self.graphics_manager.get_view_scale())
        index = self.data_model.hit_test(x, y, tolerance)

        if index is not None:
            self.drag_index = index
            self.drag_started.emit(index)
        elif not self.data_model.is_complete():
            self.point_add_requested.emit(x, y)

    def handle_drag(self, x, y):
        if self.drag_index is not None:
            self.point_move_requested.emit(self.drag_index, x, y)

    def handle_release(self, x, y):
        if self.drag_index is None:
            return
        index = self.drag_index
        self.drag_index = None
        self.point_move_requested.emit(index, x, y)
        self.drag_finished.emit(index)

    def handle_key_press(self, event):
        """Handle key press events"""
        key = event.key()
        ctrl = bool(event.modifiers() & Qt.ControlModifier)

        if (key == Qt.Key_Z and ctrl) or key == Qt.Key_Backspace:
            self.undo_requested.emit()
        elif key == Qt.Key_R and ctrl:
            self.reset_requested.emit()
        elif key == Qt.Key_O and ctrl:
            self.open_requested.emit()
        elif key == Qt.Key_F1:
            self.help_requested.emit()
        else:
            return False
        return True

    def show_help(self):
        """Show help information"""
        if not self.parent:
            return
        help_text = """
        <h3>Marking order:</h3>
        <ol>
        <li>Right and left triradiate cartilage (Hilgenreiner line)</li>
        <li>Right and left lateral acetabular edge (Perkins lines)</li>
        <li>Right femoral head lateral and medial edge</li>
        <li>Left femoral head lateral and medial edge</li>
        </ol>

        <h3>Mouse Operations:</h3>
        <ul>
        <li><b>Left Click</b> - Mark the next landmark</li>
        <li><b>Left Drag on a marker</b> - Adjust that landmark</li>
        <li><b>Mouse Wheel</b> - Zoom in/out</li>
        <li><b>Right Click+Drag</b> - Pan view</li>
        </ul>

        <h3>Keyboard Shortcuts:</h3>
        <ul>
        <li><b>Ctrl+O</b> - Open image</li>
        <li><b>Ctrl+Z / Backspace</b> - Undo last point</li>
        <li><b>Ctrl+R</b> - Reset measurement</li>
        <li><b>F1</b> - Show this help</li>
        </ul>
        """
        create_styled_message_box(
            self.parent,
            "Help - Migration Percentage",
            help_text,
            QMessageBox.Information,
            use_primary_buttons=True
        ).exec()
