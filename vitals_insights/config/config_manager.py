# vitals_insights/config/config_manager.py
import copy
import logging
import os

import yaml

logger = logging.getLogger(__name__)

ENV_PREFIX = 'VITALS_INSIGHTS_'

DEFAULT_CONFIG = {
    'api': {
        'title': 'Vitals Insights API',
        'description': 'API for turning sleep and recovery scores into insights',
        'version': '0.1.0',
        'host': '0.0.0.0',
        'port': 8000,
        'cors_origins': ['*'],
    },
    'logging': {
        'level': 'INFO',
        'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    },
    'batch': {
        'output_dir': 'data/insights',
    },
}


class ConfigManager:
    """Central configuration manager"""

    def __init__(self, config_path=None):
        self.config_path = config_path or os.environ.get(ENV_PREFIX + 'CONFIG', 'config/config.yaml')
        self.config = self._load_config()

    def _load_config(self):
        """Load configuration from file, layered over the defaults"""
        config = copy.deepcopy(DEFAULT_CONFIG)
        if not os.path.exists(self.config_path):
            logger.warning(f"Config file {self.config_path} not found, using defaults")
            return config
        with open(self.config_path, 'r') as file:
            loaded = yaml.safe_load(file) or {}
        return _merge(config, loaded)

    def get(self, key, default=None):
        """
        Look up a dotted key such as 'api.port'.

        An environment variable named after the key (VITALS_INSIGHTS_API_PORT
        for 'api.port') takes precedence over the file and the defaults. Its
        text is parsed as YAML so numbers and lists keep their types.
        """
        override = os.environ.get(ENV_PREFIX + key.replace('.', '_').upper())
        if override is not None:
            return yaml.safe_load(override)

        node = self.config
        for part in key.split('.'):
            try:
                node = node[part]
            except (KeyError, TypeError):
                return default
        return node


def _merge(base, override):
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            base[key] = _merge(base[key], value)
        else:
            base[key] = value
    return base


def configure_logging(config: ConfigManager):
    """Configure root logging from the `logging` section"""
    logging.basicConfig(
        level=getattr(logging, str(config.get('logging.level', 'INFO')).upper(), logging.INFO),
        format=config.get('logging.format'),
    )
