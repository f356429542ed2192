"""Configuration settings for the temperature exporter."""

import json
import os
from importlib.metadata import PackageNotFoundError, version


def _installed_version() -> str:
    try:
        return version('temperature-exporter')
    except PackageNotFoundError:
        return 'undefined'


class ConfigError(Exception):
    """Raised when the configuration file cannot be used."""

    def __init__(self, message: str, exit_code: int):
        super().__init__(message)
        self.exit_code = exit_code


class Config:
    """Application configuration."""

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'info')
    LOG_DESTINATION = os.environ.get('LOG_DESTINATION', 'syslog')
    LOG_FILENAME = os.environ.get('LOG_FILENAME', '/var/log/temperature-exporter.log')

    # Web server settings
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', 9101))

    # Seconds to wait for a vendor command before substituting zero
    COMMAND_TIMEOUT = int(os.environ.get('COMMAND_TIMEOUT', 5))

    CUSTOM_COMMANDS = [
        {
            'thermal_type': 'gpu',
            'command': 'vcgencmd',
            'args': ['measure_temp'],
            'regex': r"temp=([0-9.]+)'C",
        },
    ]

    CONFIG_FILE = os.environ.get('TEMPERATURE_EXPORTER_CONFIG', '/etc/temperature-exporter/config.json')

    VERSION = _installed_version()
    BUILD_TIME = os.environ.get('BUILD_TIME', 'manual')

    # JSON key -> (attribute, expected type)
    _FILE_KEYS = {
        'log_level': ('LOG_LEVEL', str),
        'log_destination': ('LOG_DESTINATION', str),
        'log_filename': ('LOG_FILENAME', str),
        'http_bind_address': ('HOST', str),
        'http_port': ('PORT', int),
        'command_timeout': ('COMMAND_TIMEOUT', int),
    }

    @classmethod
    def load_file(cls, path: str = None) -> bool:
        """Override settings from a JSON file.

        Returns False when the file does not exist. Raises ConfigError with
        exit code 1 if it cannot be read and 2 if it cannot be parsed or a
        value has the wrong type. A null value keeps the current setting.
        Nothing is changed unless the whole file is valid.
        """
        path = path or cls.CONFIG_FILE
        if not os.path.exists(path):
            return False

        try:
            with open(path, 'r') as f:
                raw = f.read()
        except OSError as e:
            raise ConfigError(f"Failed to read config file: {e}", exit_code=1)

        try:
            data = json.loads(raw)
            if not isinstance(data, dict):
                raise ValueError('top level must be an object')

            updates = {}
            for key, (attr, expected) in cls._FILE_KEYS.items():
                if data.get(key) is not None:
                    updates[attr] = _check_type(key, data[key], expected)

            if updates.get('COMMAND_TIMEOUT', 1) <= 0:
                raise ValueError('command_timeout must be positive')
            if not 0 < updates.get('PORT', 1) < 65536:
                raise ValueError('http_port out of range')

            if data.get('custom_commands') is not None:
                commands = data['custom_commands']
                if not isinstance(commands, list):
                    raise TypeError('custom_commands must be a list')
                updates['CUSTOM_COMMANDS'] = [_parse_command(c) for c in commands]
        except (ValueError, TypeError, KeyError) as e:
            raise ConfigError(f"Failed to unmarshal config file: {e}", exit_code=2)

        for attr, value in updates.items():
            setattr(cls, attr, value)
        return True


def _check_type(key: str, value, expected: type):
    # bool is an int subclass but never a valid number here
    if isinstance(value, bool) or not isinstance(value, expected):
        raise TypeError(f"{key} must be {expected.__name__}, got {type(value).__name__}")
    return value


def _parse_command(entry) -> dict:
    if not isinstance(entry, dict):
        raise TypeError('custom_commands entries must be objects')
    args = entry.get('args')
    if args is None:
        args = []
    if not isinstance(args, list):
        raise TypeError(f"args for {entry.get('command')} must be a list")
    return {
        'thermal_type': _check_type('thermal_type', entry['thermal_type'], str),
        'command': _check_type('command', entry['command'], str),
        'args': [_check_type('args', a, str) for a in args],
        'regex': _check_type('regex', entry['regex'], str),
    }
