import os

import yaml

CONFIG_FILENAME = 'measurement_cfg.yaml'
PACKAGED_CONFIG = os.path.join(os.path.dirname(os.path.abspath(__file__)), CONFIG_FILENAME)


def load_config(config_path):
    """Load configuration file"""
    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def save_config(config_path, config_data):
    """Save configuration file keeping key order and non-ASCII labels readable"""
    with open(config_path, 'w', encoding='utf-8') as f:
        yaml.safe_dump(config_data, f, default_flow_style=False, sort_keys=False,
                       allow_unicode=True, indent=2, width=120)


def write_default_config(config_path):
    """Copy the packaged defaults to ``config_path`` as a starting point for editing"""
    save_config(config_path, load_config(PACKAGED_CONFIG))
    return config_path

def resolve_config_path(explicit_path=None, working_dir=None):
    """Pick the configuration file: explicit path, then ./measurement_cfg.yaml, then the packaged default"""
    if explicit_path:
        return explicit_path
    local_path = os.path.join(working_dir or os.getcwd(), CONFIG_FILENAME)
    if os.path.exists(local_path):
        return local_path
    return PACKAGED_CONFIG
