"""Tests for YAML configuration loading and validation"""

import pytest

from hipmigration.errors import ConfigError
from hipmigration.settings import (
    DEFAULT_COLORS, load_settings, settings_from_dict, validate_config
)
from hipmigration.utils import (
    CONFIG_FILENAME, PACKAGED_CONFIG, load_config, resolve_config_path, save_config, write_default_config
)


def test_packaged_defaults():
    """The packaged config loads into the default settings"""
    settings = load_settings(PACKAGED_CONFIG)

    assert settings.clamp is True
    assert settings.epsilon == pytest.approx(1e-6)
    assert settings.decimals == 1
    assert settings.language == 'en'
    assert settings.labels[0] == "Right triradiate cartilage"
    assert settings.prompts['complete'] == "Measurement complete"
    assert settings.colors == DEFAULT_COLORS
    assert settings.log_level == 'INFO'
    assert settings.log_file is None


def test_empty_config_uses_defaults():
    settings = settings_from_dict({})
    assert settings.hit_radius == pytest.approx(12.0)
    assert len(settings.labels) == 8


def test_spanish_config(tmp_path):
    """Selecting Spanish picks the Spanish labels and prompts"""
    config_path = tmp_path / CONFIG_FILENAME
    save_config(config_path, {
        'measurement': {'clamp': False, 'decimals': 2},
        'display': {'colors': {'perkins': '#ff0000'}},
        'labels': {'language': 'es'},
        'logging': {'level': 'debug', 'file': str(tmp_path / 'mp.log')},
    })

    settings = load_settings(str(config_path))
    assert settings.clamp is False
    assert settings.decimals == 2
    assert settings.labels[0] == "Cartílago trirradiado derecho"
    assert settings.prompts['mark'] == "Marcar: {label}"
    assert settings.colors['perkins'] == '#ff0000'
    assert settings.colors['hilgenreiner'] == DEFAULT_COLORS['hilgenreiner']
    assert settings.log_level == 'DEBUG'
    assert settings.log_file.endswith('mp.log')


def test_invalid_config_reports_every_error(tmp_path):
    """Validation collects all problems and names the file"""
    config_path = tmp_path / 'bad.yaml'
    save_config(config_path, {
        'measurement': {'epsilon': 0, 'decimals': -1},
        'labels': {'language': 'en', 'en': ['only', 'three', 'labels']},
    })

    with pytest.raises(ConfigError) as exc_info:
        load_settings(str(config_path))
    assert len(exc_info.value.errors) == 3
    assert exc_info.value.path == str(config_path)
    assert 'bad.yaml' in str(exc_info.value)


def test_validate_config():
    assert validate_config({}) == []
    assert validate_config(['not', 'a', 'dict']) == ["Config must be a dictionary"]
    assert validate_config({'labels': {'language': 'fr'}}) == ["No label table for language 'fr'"]
    assert validate_config({'display': {'hit_radius': -3}}) == \
        ["display.hit_radius must be a positive number"]
    assert validate_config({'prompts': {'en': {'mark': 'Mark', 'complete': 'Done'}}}) == \
        ["prompts.en.mark must contain '{label}'"]


def test_resolve_config_path(tmp_path):
    """Explicit path wins, then the working directory, then the packaged file"""
    assert resolve_config_path('custom.yaml', working_dir=str(tmp_path)) == 'custom.yaml'
    assert resolve_config_path(working_dir=str(tmp_path)) == PACKAGED_CONFIG

    local = tmp_path / CONFIG_FILENAME
    local.write_text("measurement:\n  decimals: 3\n", encoding='utf-8')
    assert resolve_config_path(working_dir=str(tmp_path)) == str(local)


def test_save_and_load_config(tmp_path):
    """Saved configs keep key order and unicode text"""
    config_path = tmp_path / 'saved.yaml'
    data = {'labels': {'language': 'es'}, 'measurement': {'decimals': 1}}
    save_config(config_path, data)

    assert load_config(config_path) == data
    text = config_path.read_text(encoding='utf-8')
    assert text.index('labels') < text.index('measurement')


def test_load_empty_config(tmp_path):
    config_path = tmp_path / 'empty.yaml'
    config_path.write_text("", encoding='utf-8')
    assert load_config(config_path) == {}


@pytest.mark.parametrize("text", [
    "measurement: [unclosed\n",
    "prompts:\n  en:\n    mark: 'Mark: {label}\n",
])
def test_malformed_yaml_is_config_error(tmp_path, text):
    """YAML syntax errors are reported as ConfigError naming the file"""
    config_path = tmp_path / 'broken.yaml'
    config_path.write_text(text, encoding='utf-8')

    with pytest.raises(ConfigError) as exc_info:
        load_settings(str(config_path))
    assert exc_info.value.path == str(config_path)
    assert exc_info.value.errors[0].startswith("Not valid YAML")


@pytest.mark.parametrize("text, message", [
    ("measurement: 5\n", "measurement must be a mapping"),
    ("logging: [a]\n", "logging must be a mapping"),
    ("display: on\n", "display must be a mapping"),
    ("prompts: hello\n", "prompts must be a mapping"),
    ("labels: {language: [x]}\n", "labels.language must be a language code"),
    ("logging: {level: 10}\n", "logging.level must be a level name"),
])
def test_wrongly_shaped_sections(tmp_path, text, message):
    """Sections of the wrong type are validation errors, not crashes"""
    config_path = tmp_path / 'shape.yaml'
    config_path.write_text(text, encoding='utf-8')

    with pytest.raises(ConfigError) as exc_info:
        load_settings(str(config_path))
    assert message in exc_info.value.errors


def test_booleans_are_not_numbers():
    """true is rejected where a number is expected"""
    errors = validate_config({'measurement': {'decimals': True, 'epsilon': True},
                              'display': {'marker_size': False}})
    assert errors == [
        "measurement.epsilon must be a positive number",
        "measurement.decimals must be a non-negative integer",
        "display.marker_size must be a positive number",
    ]


def test_write_default_config(tmp_path):
    """The written defaults load back into the default settings"""
    config_path = write_default_config(str(tmp_path / CONFIG_FILENAME))

    assert load_config(config_path) == load_config(PACKAGED_CONFIG)
    settings = load_settings(config_path)
    assert settings.labels == load_settings(PACKAGED_CONFIG).labels
    assert "Cartílago" in (tmp_path / CONFIG_FILENAME).read_text(encoding='utf-8')
