"""Main measurement tab controller."""

import logging

from PySide6.QtWidgets import QWidget, QMessageBox
from PySide6.QtCore import Qt

from .managers import (
    FileManager, GraphicsManager, UIManager, ConfigManager, EventHandler
)
from hipmigration.gui.data_model import MeasurementDataModel
from hipmigration.gui.style_manager import create_styled_message_box

logger = logging.getLogger(__name__)


class MeasurementTab(QWidget):
    """Measurement tab controller."""

    def __init__(self, config_path=None):
        super().__init__()

        self._init_managers(config_path)
        self._load_initial_config()
        self._init_ui()
        self._connect_signals()
        self.setFocusPolicy(Qt.StrongFocus)
        self._refresh()

    def _init_managers(self, config_path):
        """Initialize managers."""
        self.config_manager = ConfigManager(self, config_path)
        self.data_model = MeasurementDataModel(parent=self)
        self.file_manager = FileManager(self)
        self.graphics_manager = GraphicsManager(self)
        self.ui_manager = UIManager(self)
        self.event_handler = EventHandler(self)

    def _load_initial_config(self):
        """Load initial configuration."""
        self.config_manager.load_config()
        settings = self.config_manager.get_settings()
        self.data_model.set_settings(settings)
        self.graphics_manager.set_settings(settings)

    def _init_ui(self):
        """Initialize UI."""
        self.ui_manager.init_ui(self, self.data_model.settings.labels)

        graphics_view, graphics_scene = self.ui_manager.get_graphics_components()
        self.graphics_manager.set_ui_components(graphics_view, graphics_scene)
        self.event_handler.set_components(self.data_model, self.graphics_manager)
        self.event_handler.connect_view(graphics_view)
        graphics_view.mouse_moved.connect(self.ui_manager.update_mouse_coordinates)

    def _connect_signals(self):
        """Connect signals between managers."""
        # UI Manager signals
        self.ui_manager.open_clicked.connect(self.file_manager.open_image_dialog)
        self.ui_manager.undo_clicked.connect(self._handle_undo_request)
        self.ui_manager.reset_clicked.connect(self._handle_reset_request)
        self.ui_manager.help_clicked.connect(self.event_handler.show_help)

        # File Manager signals
        self.file_manager.image_loaded.connect(self._on_image_loaded)

        # Config Manager signals
        self.config_manager.config_updated.connect(self._on_config_updated)

        # Event Handler signals
        self.event_handler.point_add_requested.connect(self._handle_add_point_request)
        self.event_handler.drag_started.connect(self._on_drag_started)
        self.event_handler.point_move_requested.connect(self.data_model.move_point)
        self.event_handler.drag_finished.connect(self._on_drag_finished)
        self.event_handler.undo_requested.connect(self._handle_undo_request)
        self.event_handler.reset_requested.connect(self._handle_reset_request)
        self.event_handler.open_requested.connect(self.file_manager.open_image_dialog)
        self.event_handler.help_requested.connect(self.event_handler.show_help)

        # Data model signals
        self.data_model.points_changed.connect(self._on_points_changed)
        self.data_model.result_changed.connect(self._on_result_changed)
        self.data_model.instruction_changed.connect(self._on_instruction_changed)

    # Signal handlers

    def _on_image_loaded(self, image_path, pixmap):
        self.graphics_manager.show_pixmap(pixmap)
        width, height = self.graphics_manager.get_image_dimensions()
        self.ui_manager.update_image_info(image_path, width, height)
        # A new image always starts a new measurement
        self.data_model.reset()
        self.setFocus()

    def _on_config_updated(self, settings):
        self.data_model.set_settings(settings)
        self.graphics_manager.set_settings(settings)
        self.ui_manager.set_landmark_labels(settings.labels)

    def _handle_add_point_request(self, x, y):
        if not self.graphics_manager.is_point_in_image(x, y):
            return
        self.data_model.add_point(x, y)

    def _on_drag_started(self, index):
        self.graphics_manager.set_active_index(index)
        self._redraw()

    def _on_drag_finished(self, _index):
        self.graphics_manager.set_active_index(None)
        self._redraw()

    def _handle_undo_request(self):
        self.data_model.undo()

    def _handle_reset_request(self):
        if not self.data_model.get_points():
            return
        reply = create_styled_message_box(
            self,
            "Reset",
            "Reset the whole measurement?",
            QMessageBox.Question,
            buttons=QMessageBox.Yes | QMessageBox.No,
            default_button=QMessageBox.No
        ).exec()
        if reply == QMessageBox.Yes:
            self.data_model.reset()

    def _on_points_changed(self, points):
        self.ui_manager.update_landmark_list(len(points))
        self._redraw()

    def _on_result_changed(self, result):
        self.ui_manager.set_result_text(self.data_model.result_text())

    def _on_instruction_changed(self, text):
        if self.graphics_manager.pixmap_item is not None:
            self.ui_manager.set_instruction(text)

    def _redraw(self):
        self.graphics_manager.update_overlay(
            self.data_model.get_points(), self.data_model.overlay_lines()
        )

    def _refresh(self):
        self.ui_manager.update_landmark_list(len(self.data_model.get_points()))
        self.ui_manager.set_result_text(self.data_model.result_text())

    # Keyboard events

    def keyPressEvent(self, event):
        """Handle key press."""
        if self.event_handler.handle_key_press(event):
            event.accept()
        else:
            super().keyPressEvent(event)

    # Public interface

    def load_image(self, image_path):
        """Load image."""
        return self.file_manager.load_image(image_path)
