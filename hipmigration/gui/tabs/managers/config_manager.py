"""
ConfigManager - Handles configuration management
Loads and validates the measurement configuration file
"""

import logging

from PySide6.QtWidgets import QMessageBox
from PySide6.QtCore import QObject, Signal

from hipmigration.errors import ConfigError
from hipmigration.gui.style_manager import create_styled_message_box
from hipmigration.settings import MeasurementSettings, load_settings
from hipmigration.utils import resolve_config_path

logger = logging.getLogger(__name__)


class ConfigManager(QObject):
    """Configuration manager for measurement settings"""

    config_updated = Signal(object)  # MeasurementSettings

    def __init__(self, parent=None, config_path=None):
        super().__init__(parent)
        self.parent = parent
        self.config_path = config_path
        self.settings = MeasurementSettings()

    def load_config(self):
        """Load settings, keeping the defaults if the file is missing or invalid"""
        path = resolve_config_path(self.config_path)
        try:
            self.settings = load_settings(path)
        except (OSError, ConfigError) as e:
            logger.error("Error loading config %s: %s", path, e)
            self._show_error(str(e))
            self.settings = MeasurementSettings()
            self.config_updated.emit(self.settings)
            return False

        self.config_path = path
        self.config_updated.emit(self.settings)
        return True

    def get_settings(self):
        return self.settings

    def _show_error(self, message):
        if self.parent:
            create_styled_message_box(
                self.parent, "Configuration Error",
                f"{message}\n\nUsing default settings.",
                QMessageBox.Warning, use_primary_buttons=False
            ).exec()
