"""Thermal zone temperature collector."""

import os
import logging

from .board import SYS_BASE
from .readings import Temperature

logger = logging.getLogger(__name__)

ZONE_PREFIX = 'thermal_zone'
DEVICE_SUFFIXES = ('-thermal', '-therm')


def collect_thermal_zones(sys_base: str = None) -> list:
    """Read every thermal zone under ``<sys>/class/thermal``.

    Zones that cannot be read are logged and skipped.
    """
    thermal_base = os.path.join(sys_base or SYS_BASE, 'class', 'thermal')

    try:
        entries = sorted(os.listdir(thermal_base))
    except OSError as e:
        logger.error(f"Failed to list thermal zones: {e}")
        return []

    temps = []
    for entry in entries:
        logger.debug(f"Maybe found thermal zone: {entry}")
        if not entry.startswith(ZONE_PREFIX):
            continue

        zone_path = os.path.join(thermal_base, entry)
        try:
            device = _read_zone_type(os.path.join(zone_path, 'type'))
            temp = _read_zone_temp(os.path.join(zone_path, 'temp'))
        except (OSError, ValueError) as e:
            logger.error(f"Failed to read thermal zone {entry}: {e}")
            continue

        temps.append(Temperature(device, temp))

    return temps


def normalize_device(zone_type: str) -> str:
    """Lowercase a zone type and drop a trailing -thermal or -therm."""
    device = zone_type.strip().lower()
    for suffix in DEVICE_SUFFIXES:
        if device.endswith(suffix):
            device = device[:-len(suffix)]
    return device


def _read_zone_type(path: str) -> str:
    with open(path, 'r') as f:
        return normalize_device(f.read())


def _read_zone_temp(path: str) -> float:
    # millidegrees Celsius
    with open(path, 'r') as f:
        raw = f.read().strip()
    return float(raw) / 1000.0
