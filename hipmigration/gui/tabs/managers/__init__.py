"""
Managers package for MeasurementTab
Contains separate manager classes for different functionalities.
"""

from .file_manager import FileManager
from .graphics_manager import GraphicsManager
from .ui_manager import UIManager
from .config_manager import ConfigManager
from .event_handler import EventHandler

__all__ = [
    'FileManager',
    'GraphicsManager',
    'UIManager',
    'ConfigManager',
    'EventHandler'
]
