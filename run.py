#!/usr/bin/env python3
"""Main entry point for the Hip Migration Percentage tool."""

import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication, QMainWindow, QTabWidget
from PySide6.QtCore import Qt

from hipmigration import __version__
from hipmigration.errors import ConfigError
from hipmigration.gui.tabs.measurement_tab import MeasurementTab
from hipmigration.logging_setup import install_qt_message_handler, setup_logging
from hipmigration.settings import load_settings
from hipmigration.utils import write_default_config

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, config_path=None):
        super().__init__()
        self.setWindowTitle("Hip Migration Percentage")
        self.setGeometry(100, 100, 1400, 900)

        self.setMinimumSize(800, 600)

        self.tab_widget = QTabWidget()
        self.setCentralWidget(self.tab_widget)

        self.measurement_tab = MeasurementTab(config_path)
        self.tab_widget.addTab(self.measurement_tab, "Reimers Migration")

        self.setWindowFlags(Qt.Window)

        self.apply_dark_theme()

    def apply_dark_theme(self):
        """Apply dark theme."""
        dark_stylesheet = """
        QMainWindow {
            background-color: #2b2b2b;
            color: #ffffff;
        }
        QTabWidget::pane {
            border: 1px solid #555555;
            background-color: #2b2b2b;
        }
        QTabBar::tab {
            background-color: #404040;
            color: #ffffff;
            padding: 8px 16px;
            margin-right: 2px;
            border-top-left-radius: 4px;
            border-top-right-radius: 4px;
        }
        QTabBar::tab:selected {
            background-color: #0078d4;
        }
        """
        self.setStyleSheet(dark_stylesheet)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Measure the Reimers migration percentage on a pelvic radiograph")
    parser.add_argument("image", nargs="?", help="Radiograph to open on start")
    parser.add_argument("--config", help="Path to measurement_cfg.yaml")
    parser.add_argument("--log-level", help="Override the configured log level")
    parser.add_argument("--write-config", metavar="PATH",
                        help="Write the default configuration to PATH and exit")
    return parser.parse_args(argv)


def configure_logging(args):
    """Set up logging from the config file, falling back to INFO on the console"""
    level, log_file = "INFO", None
    try:
        settings = load_settings(args.config)
        level, log_file = settings.log_level, settings.log_file
    except (OSError, ConfigError) as e:
        # The window reports config problems once it is up
        print(f"Config not usable for logging setup: {e}", file=sys.stderr)
    setup_logging(args.log_level or level, log_file)


def main():
    """Main entry point."""
    args = parse_args()
    if args.write_config:
        print(f"Wrote default configuration to {write_default_config(args.write_config)}")
        return
    configure_logging(args)

    app = QApplication(sys.argv)
    install_qt_message_handler()

    app.setApplicationName("Hip Migration Percentage")
    app.setApplicationVersion(__version__)

    app.setStyle('Fusion')

    try:
        window = MainWindow(args.config)
        window.show()
        if args.image:
            window.measurement_tab.load_image(args.image)

        sys.exit(app.exec())

    except Exception:
        logger.exception("Error starting application")
        sys.exit(1)


if __name__ == "__main__":
    main()
