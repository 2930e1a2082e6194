"""Tests for the GUI configuration manager"""

import pytest

pytest.importorskip("PySide6.QtWidgets")

from hipmigration.gui.tabs.managers.config_manager import ConfigManager  # noqa: E402
from hipmigration.settings import MeasurementSettings  # noqa: E402
from hipmigration.utils import save_config  # noqa: E402


def _load(config_path):
    manager = ConfigManager(config_path=str(config_path))
    emitted = []
    manager.config_updated.connect(emitted.append)
    return manager, manager.load_config(), emitted


@pytest.mark.parametrize("text", [
    "measurement: [unclosed\n",
    "measurement: 5\n",
    "labels: {language: [x]}\n",
])
def test_bad_config_falls_back_to_defaults(tmp_path, text):
    """A broken config file leaves the application on default settings"""
    config_path = tmp_path / 'bad.yaml'
    config_path.write_text(text, encoding='utf-8')

    manager, loaded, emitted = _load(config_path)
    assert loaded is False
    assert manager.get_settings() == MeasurementSettings()
    assert emitted == [MeasurementSettings()]


def test_missing_config_falls_back_to_defaults(tmp_path):
    manager, loaded, _ = _load(tmp_path / 'missing.yaml')
    assert loaded is False
    assert manager.get_settings().labels == MeasurementSettings().labels


def test_good_config_is_applied(tmp_path):
    config_path = tmp_path / 'good.yaml'
    save_config(config_path, {'measurement': {'decimals': 3}, 'labels': {'language': 'es'}})

    manager, loaded, emitted = _load(config_path)
    assert loaded is True
    assert emitted[0].decimals == 3
    assert manager.get_settings().prompts['complete'] == "Medición completa"
