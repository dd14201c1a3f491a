import os
import copy
import json


class ConfigError(Exception):
    pass


class Config:
    """
    Project configuration, loaded from a JSON file and merged over DEFAULTS.
    """
    DEFAULTS = {
        'store': {
            'type': 'directory',
            'root': 'source'
        },
        'aliases': {
            '~': '/'
        },
        'current_directory': '/',
        'encoding': 'utf-8-sig',
        'compile': {
            'minify': False,
            'xminify': False,
            'tabs': False,
            'spaces': True,
            'max_import_depth': 16
        },
        'log': {
            'level': 'INFO',
            'file': None
        }
    }

    def __init__(self, values=None, path=None):
        """
        :param values: Configuration values to merge over the defaults.
        :type values: dict[str, object] | None
        :param path: File the values were loaded from, if any.
        :type path: str | None
        """
        self.path = path
        self.values = Config.merge(Config.DEFAULTS, values or {})

    @classmethod
    def load(cls, path):
        """
        Load configuration from a JSON file. A missing file gives the defaults.

        :param path: Config file path.
        :type path: str
        :rtype: Config
        :raises ConfigError: If the file is not valid JSON, or does not contain an object.
        """
        values = {}
        if os.path.isfile(path):
            try:
                with open(path, encoding='utf-8') as fh:
                    values = json.load(fh)
            except ValueError as e:
                raise ConfigError('Could not load config \'{0}\': \'{1}\''.format(path, e))
            if not isinstance(values, dict):
                raise ConfigError('Could not load config \'{0}\': top level value must be an object'.format(path))
        return cls(values, path)

    def get(self, key, default=None):
        """
        Get a value by its dotted key, e.g. 'compile.minify'.

        :type key: str
        :type default: object
        :rtype: object
        """
        value = self.values
        for part in key.split('.'):
            if not isinstance(value, dict) or part not in value:
                return default
            value = value[part]
        return value

    def __getitem__(self, key):
        return self.values[key]

    @staticmethod
    def merge(target, source):
        """
        Return a merged copy of two dictionaries. Values from source overwrite those in target, except for dictionaries,
        which are merged. A source key ending with '!' replaces the target value outright.

        :type target: dict
        :type source: dict
        :rtype: dict
        """
        merged = copy.deepcopy(target)
        for key, value in source.items():
            override = key.endswith('!')
            key = key.rstrip('!')
            if not override and isinstance(value, dict) and isinstance(merged.get(key), dict):
                merged[key] = Config.merge(merged[key], value)
                continue
            merged[key] = copy.deepcopy(value)
        return merged
