"""
Measurement settings loaded from the YAML configuration
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import yaml

from hipmigration.errors import ConfigError
from hipmigration.geometry import DEFAULT_EPSILON, DEFAULT_LINE_EXTENT
from hipmigration.landmarks import DEFAULT_LABELS, DEFAULT_PROMPTS, LANDMARK_COUNT
from hipmigration.utils import load_config, resolve_config_path

logger = logging.getLogger(__name__)

DEFAULT_COLORS = {
    'hilgenreiner': '#0000ff',
    'perkins': '#00c000',
    'femoral_head': '#ffff00',
    'marker': '#00ff00',
    'active_marker': '#ffff00',
}


@dataclass
class MeasurementSettings:
    clamp: bool = True
    epsilon: float = DEFAULT_EPSILON
    decimals: int = 1
    hit_radius: float = 12.0
    marker_size: float = 6.0
    line_extent: float = DEFAULT_LINE_EXTENT
    colors: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_COLORS))
    language: str = 'en'
    labels: List[str] = field(default_factory=lambda: list(DEFAULT_LABELS['en']))
    prompts: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_PROMPTS['en']))
    log_level: str = 'INFO'
    log_file: Optional[str] = None


SECTIONS = ('measurement', 'display', 'labels', 'prompts', 'logging')


def _is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_config(config):
    """Validate a configuration dict, returning a list of error messages"""
    errors = []

    if not isinstance(config, dict):
        errors.append("Config must be a dictionary")
        return errors

    bad_sections = [name for name in SECTIONS
                    if config.get(name) is not None and not isinstance(config[name], dict)]
    for name in bad_sections:
        errors.append(f"{name} must be a mapping")
    if bad_sections:
        return errors

    measurement = config.get('measurement') or {}
    if 'epsilon' in measurement:
        epsilon = measurement['epsilon']
        if not _is_number(epsilon) or epsilon <= 0:
            errors.append("measurement.epsilon must be a positive number")
    if 'decimals' in measurement:
        decimals = measurement['decimals']
        if not isinstance(decimals, int) or isinstance(decimals, bool) or decimals < 0:
            errors.append("measurement.decimals must be a non-negative integer")
    if 'clamp' in measurement and not isinstance(measurement['clamp'], bool):
        errors.append("measurement.clamp must be true or false")

    display = config.get('display') or {}
    for key in ('hit_radius', 'marker_size', 'line_extent'):
        if key in display:
            value = display[key]
            if not _is_number(value) or value <= 0:
                errors.append(f"display.{key} must be a positive number")
    if 'colors' in display and not isinstance(display['colors'], dict):
        errors.append("display.colors must be a mapping")

    logging_cfg = config.get('logging') or {}
    if not isinstance(logging_cfg.get('level', 'INFO'), str):
        errors.append("logging.level must be a level name")
    if logging_cfg.get('file') is not None and not isinstance(logging_cfg['file'], str):
        errors.append("logging.file must be a path or null")

    labels = config.get('labels') or {}
    language = labels.get('language', 'en')
    if not isinstance(language, str):
        errors.append("labels.language must be a language code")
        return errors

    table = labels.get(language, DEFAULT_LABELS.get(language))
    if table is None:
        errors.append(f"No label table for language '{language}'")
    elif (not isinstance(table, list) or len(table) != LANDMARK_COUNT or
          not all(isinstance(label, str) for label in table)):
        errors.append(f"labels.{language} must be a list of {LANDMARK_COUNT} strings")

    prompts = (config.get('prompts') or {}).get(language)
    if prompts is not None:
        if not isinstance(prompts, dict) or 'mark' not in prompts or 'complete' not in prompts:
            errors.append(f"prompts.{language} must define 'mark' and 'complete'")
        elif '{label}' not in str(prompts['mark']):
            errors.append(f"prompts.{language}.mark must contain '{{label}}'")

    return errors


def settings_from_dict(config) -> MeasurementSettings:
    """Build settings from a config dict, falling back to defaults for missing keys"""
    errors = validate_config(config)
    if errors:
        raise ConfigError(errors)

    measurement = config.get('measurement', {}) or {}
    display = config.get('display', {}) or {}
    labels = config.get('labels', {}) or {}
    logging_cfg = config.get('logging', {}) or {}

    language = labels.get('language', 'en')
    prompts = (config.get('prompts', {}) or {}).get(language) or \
        DEFAULT_PROMPTS.get(language, DEFAULT_PROMPTS['en'])
    colors = dict(DEFAULT_COLORS)
    colors.update(display.get('colors', {}) or {})

    defaults = MeasurementSettings()
    return MeasurementSettings(
        clamp=measurement.get('clamp', defaults.clamp),
        epsilon=float(measurement.get('epsilon', defaults.epsilon)),
        decimals=measurement.get('decimals', defaults.decimals),
        hit_radius=float(display.get('hit_radius', defaults.hit_radius)),
        marker_size=float(display.get('marker_size', defaults.marker_size)),
        line_extent=float(display.get('line_extent', defaults.line_extent)),
        colors=colors,
        language=language,
        labels=list(labels.get(language) or DEFAULT_LABELS[language]),
        prompts=dict(prompts),
        log_level=str(logging_cfg.get('level', defaults.log_level)).upper(),
        log_file=logging_cfg.get('file'),
    )


def load_settings(config_path=None) -> MeasurementSettings:
    """Load settings from ``config_path`` or the default lookup order"""
    path = resolve_config_path(config_path)
    try:
        config = load_config(path)
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise ConfigError([f"Not valid YAML: {e}"], path) from None
    try:
        settings = settings_from_dict(config)
    except ConfigError as e:
        raise ConfigError(e.errors, path) from None
    logger.debug("Loaded settings from %s", path)
    return settings
