"""Board detection and temperature collectors."""

from .board import detect_board, command_exists
from .commands import collect_command_temperatures, extract_temperature
from .readings import Temperature
from .thermal_zones import collect_thermal_zones

__all__ = [
    'detect_board',
    'command_exists',
    'collect_command_temperatures',
    'extract_temperature',
    'collect_thermal_zones',
    'Temperature',
]
