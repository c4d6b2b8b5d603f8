from __future__ import annotations

import logging

from pathlib import Path
from typing import Union

import tomli

logger = logging.getLogger(__name__)


def get_config(section='tool.berns', path: Union[str, Path] = 'pyproject.toml'):
    path = Path(path)
    if path.is_file():
        with open(path, 'rb') as fp:
            config = tomli.load(fp)
        logger.debug('Loaded config from %s', path)
    else:
        logger.debug('No config file at %s, using defaults', path)
        config = {}

    if 'tool' not in config:
        config['tool'] = {}
    if 'berns' not in config['tool']:
        config['tool']['berns'] = {}
    if 'defaults' not in config['tool']['berns']:
        config['tool']['berns']['defaults'] = {}

    defaults = config['tool']['berns']['defaults']
    if not isinstance(defaults, dict):
        raise RuntimeError('`tool.berns.defaults` must be a table')
    for tag, attributes in defaults.items():
        if not isinstance(attributes, dict):
            raise RuntimeError(f'`tool.berns.defaults.{tag}` must be a table')

    keys = list(section.split('.'))
    while keys:
        config = config[keys.pop(0)]
    return config


def default_attributes(tag: str, config: dict) -> dict:
    return dict(config['defaults'].get(tag, {}))
