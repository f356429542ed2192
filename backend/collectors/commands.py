"""Vendor command temperature collector (vcgencmd and friends)."""

import re
import subprocess
import logging

from config import Config
from .board import command_exists
from .readings import Temperature

logger = logging.getLogger(__name__)


class TemperatureNotFound(ValueError):
    """Raised when command output holds no temperature."""


def collect_command_temperatures(commands: list = None, timeout: int = None) -> list:
    """Run each configured command that exists and parse its temperature.

    A command that fails or prints nothing parseable reports 0 so the
    series does not disappear from the scrape.
    """
    if commands is None:
        commands = Config.CUSTOM_COMMANDS
    if timeout is None:
        timeout = Config.COMMAND_TIMEOUT

    temps = []
    for command in commands:
        if not command_exists(command['command']):
            continue

        device = command['thermal_type'].lower()
        try:
            output = _run(command, timeout)
            temp = extract_temperature(output, command['regex'])
        except (OSError, subprocess.SubprocessError, ValueError, re.error) as e:
            logger.error(f"Failed to get temperature from {command['command']}: {e}")
            temps.append(Temperature(device, 0.0))
            continue

        temps.append(Temperature(device, temp))

    return temps


def extract_temperature(text: str, regex: str) -> float:
    """Return the first capture group of ``regex`` in ``text`` as a float."""
    match = re.search(regex, text)
    if match is None or not match.groups() or match.group(1) is None:
        raise TemperatureNotFound("Temperature not found in the input string")
    return float(match.group(1).strip())


def _run(command: dict, timeout: int) -> str:
    result = subprocess.run(
        [command['command']] + list(command.get('args', [])),
        capture_output=True,
        text=True,
        timeout=timeout,
        check=True
    )
    return result.stdout
