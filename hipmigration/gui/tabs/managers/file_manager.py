"""
FileManager - image file selection and loading
"""

import logging
import os

from PySide6.QtWidgets import QFileDialog, QMessageBox
from PySide6.QtCore import QObject, Signal
from PySide6.QtGui import QPixmap

from hipmigration.gui.style_manager import create_styled_message_box

logger = logging.getLogger(__name__)

IMAGE_FILTER = "Images (*.png *.jpg *.jpeg *.bmp *.gif *.tif *.tiff)"


class FileManager(QObject):
    """File manager for opening radiograph images"""

    image_loaded = Signal(str, object)  # (image_path, QPixmap)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.parent = parent
        self.start_directory = os.getcwd()

    def open_image_dialog(self):
        """Ask the user for an image and load it"""
        file_path, _ = QFileDialog.getOpenFileName(
            self.parent, "Open Radiograph", self.start_directory, IMAGE_FILTER
        )
        if file_path:
            self.load_image(file_path)

    def load_image(self, file_path):
        """Load an image file and emit image_loaded"""
        if not file_path or not os.path.exists(file_path):
            logger.error("Image not found: %s", file_path)
            self._show_error(f"Image not found: {file_path}")
            return False

        pixmap = QPixmap(file_path)
        if pixmap.isNull():
            logger.error("Failed to load image: %s", file_path)
            self._show_error(f"Failed to load image: {file_path}")
            return False

        self.start_directory = os.path.dirname(file_path)
        logger.info("Loaded %s (%dx%d)", file_path, pixmap.width(), pixmap.height())
        self.image_loaded.emit(file_path, pixmap)
        return True

    def _show_error(self, message):
        if self.parent:
            create_styled_message_box(
                self.parent, "Error", message,
                QMessageBox.Warning, use_primary_buttons=False
            ).exec()
