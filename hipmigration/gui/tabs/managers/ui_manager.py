"""
UIManager - Handles UI layout and display updates
Builds the image view, the control buttons, the landmark list and the result panel
"""

import os

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QLabel,
    QSplitter, QSizePolicy, QGraphicsScene
)
from PySide6.QtCore import Qt, QObject, Signal

from hipmigration.gui.components import GraphicsView
from hipmigration.gui.style_manager import (
    apply_button_style, HELP_BUTTON_STYLE, INSTRUCTION_LABEL_STYLE, RESULT_LABEL_STYLE
)

DONE_STYLE = "color: #8FD694; padding: 2px 6px;"
CURRENT_STYLE = """
    font-weight: bold;
    color: white;
    background-color: rgba(120, 180, 240, 120);
    border-radius: 5px;
    padding: 2px 6px;
"""
PENDING_STYLE = "color: #AAAAAA; padding: 2px 6px;"


class UIManager(QObject):
    """UI manager for interface layout and display updates"""

    open_clicked = Signal()
    undo_clicked = Signal()
    reset_clicked = Signal()
    help_clicked = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.parent = parent

        self.splitter = None
        self.open_button = None
        self.undo_button = None
        self.reset_button = None
        self.help_button = None
        self.graphics_view = None
        self.graphics_scene = None
        self.instruction_label = None
        self.result_label = None
        self.landmark_labels = []
        self.image_info_label = None
        self.mouse_coord_label = None

    def init_ui(self, main_widget, labels):
        """Build the main layout"""
        self.splitter = QSplitter(Qt.Horizontal)
        self.splitter.setHandleWidth(1)
        self.splitter.setStyleSheet("""
            QSplitter::handle {
                background: #444444;
                border: 1px solid #555555;
            }
        """)

        self.splitter.addWidget(self.create_center_panel())
        self.splitter.addWidget(self.create_right_panel(labels))
        self.splitter.setSizes([800, 250])

        main_layout = QVBoxLayout(main_widget)
        main_layout.setContentsMargins(2, 2, 2, 2)
        main_layout.addWidget(self.splitter)

        apply_button_style(self.open_button, 'primary')
        apply_button_style(self.undo_button)
        apply_button_style(self.reset_button)
        self.help_button.setStyleSheet(HELP_BUTTON_STYLE)

    def create_center_panel(self):
        """Create the toolbar, image view and info bar"""
        center_widget = QWidget()
        center_layout = QVBoxLayout(center_widget)
        center_layout.setContentsMargins(8, 8, 8, 2)
        center_layout.setSpacing(4)

        controls_layout = QHBoxLayout()

        self.open_button = QPushButton("Open Image")
        self.open_button.setToolTip("Open a pelvic radiograph (Ctrl+O)")
        self.open_button.clicked.connect(lambda: self.open_clicked.emit())
        controls_layout.addWidget(self.open_button)

        self.undo_button = QPushButton("Undo")
        self.undo_button.setToolTip("Remove the last point (Ctrl+Z)")
        self.undo_button.clicked.connect(lambda: self.undo_clicked.emit())
        controls_layout.addWidget(self.undo_button)

        self.reset_button = QPushButton("Reset")
        self.reset_button.setToolTip("Clear all points (Ctrl+R)")
        self.reset_button.clicked.connect(lambda: self.reset_clicked.emit())
        controls_layout.addWidget(self.reset_button)

        controls_layout.addStretch()

        self.help_button = QPushButton("?")
        self.help_button.setFixedSize(20, 20)
        self.help_button.setToolTip("Help")
        self.help_button.clicked.connect(lambda: self.help_clicked.emit())
        controls_layout.addWidget(self.help_button)

        center_layout.addLayout(controls_layout)

        self.instruction_label = QLabel("Open an image to start")
        self.instruction_label.setStyleSheet(INSTRUCTION_LABEL_STYLE)
        center_layout.addWidget(self.instruction_label)

        self.graphics_view = GraphicsView()
        self.graphics_scene = QGraphicsScene()
        self.graphics_view.setScene(self.graphics_scene)
        self.graphics_view.setFocusPolicy(Qt.StrongFocus)
        self.graphics_view.viewport().setCursor(Qt.CrossCursor)
        self.graphics_view.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        center_layout.addWidget(self.graphics_view, stretch=1)

        center_layout.addWidget(self._create_info_container())
        return center_widget

    def _create_info_container(self):
        info_container = QWidget()
        info_layout = QHBoxLayout(info_container)
        info_layout.setContentsMargins(10, 0, 10, 0)
        info_layout.setSpacing(30)
        info_container.setFixedHeight(16)

        label_style = "color: white; font-size: 12px;"

        self.image_info_label = QLabel("Image: --")
        self.image_info_label.setStyleSheet(label_style)
        info_layout.addWidget(self.image_info_label)

        self.mouse_coord_label = QLabel("Position: (--, --)")
        self.mouse_coord_label.setStyleSheet(label_style)
        self.mouse_coord_label.setFixedWidth(150)
        info_layout.addWidget(self.mouse_coord_label)

        info_layout.addStretch()
        return info_container

    def create_right_panel(self, labels):
        """Create the landmark list and result panel"""
        right_widget = QWidget()
        right_layout = QVBoxLayout(right_widget)
        right_layout.setContentsMargins(6, 6, 6, 6)
        right_layout.setSpacing(4)

        right_layout.addWidget(QLabel("Landmarks:"))
        for i, text in enumerate(labels):
            label = QLabel(f"{i + 1}. {text}")
            label.setWordWrap(True)
            label.setStyleSheet(PENDING_STYLE)
            self.landmark_labels.append(label)
            right_layout.addWidget(label)

        right_layout.addSpacing(12)
        right_layout.addWidget(QLabel("Migration percentage:"))
        self.result_label = QLabel("--")
        self.result_label.setWordWrap(True)
        self.result_label.setStyleSheet(RESULT_LABEL_STYLE)
        self.result_label.setTextInteractionFlags(Qt.TextSelectableByMouse)
        right_layout.addWidget(self.result_label)

        right_layout.addStretch()
        return right_widget

    def set_landmark_labels(self, labels):
        for i, label in enumerate(self.landmark_labels):
            if i < len(labels):
                label.setText(f"{i + 1}. {labels[i]}")

    def update_landmark_list(self, count):
        """Style each landmark as marked, next or pending"""
        for i, label in enumerate(self.landmark_labels):
            if i < count:
                label.setStyleSheet(DONE_STYLE)
            elif i == count:
                label.setStyleSheet(CURRENT_STYLE)
            else:
                label.setStyleSheet(PENDING_STYLE)
        self.undo_button.setEnabled(count > 0)

    def set_instruction(self, text):
        if self.instruction_label:
            self.instruction_label.setText(text)

    def set_result_text(self, text):
        if self.result_label:
            self.result_label.setText(text.replace(" | ", "\n") if text else "--")

    def update_image_info(self, image_path, width=None, height=None):
        if not self.image_info_label:
            return
        if image_path:
            size = f" ({width}x{height})" if width and height else ""
            self.image_info_label.setText(f"Image: {os.path.basename(image_path)}{size}")
        else:
            self.image_info_label.setText("Image: --")

    def update_mouse_coordinates(self, x, y):
        if self.mouse_coord_label:
            self.mouse_coord_label.setText(f"Position: ({int(x)}, {int(y)})")

    def get_graphics_components(self):
        return self.graphics_view, self.graphics_scene
