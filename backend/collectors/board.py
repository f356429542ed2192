"""Board type detection for Raspberry Pi and Tegra hosts."""

import os
import shutil
import logging

logger = logging.getLogger(__name__)


def default_sys_base(host_sys: str = '/host/sys') -> str:
    """Prefer the host's sysfs when it is mounted into a container."""
    return host_sys if os.path.exists(host_sys) else '/sys'


SYS_BASE = default_sys_base()

RASPBERRY_PI = 'raspberrypi'
TEGRA = 'tegra'
UNKNOWN = 'unknown'

JETSON_RELEASE = 'jetson_release'
NV_TEGRA_RELEASE = '/etc/nv_tegra_release'


def command_exists(path: str) -> bool:
    """Return True if ``path`` names an existing file or a command on PATH.

    Only the first whitespace-separated token is considered, so a full
    command line may be passed. The file does not need to be executable.
    """
    parts = path.strip().split()
    if not parts:
        return False
    path = parts[0]

    if os.path.exists(path):
        logger.debug(f"Found {path}")
        return True

    resolved = shutil.which(path)
    if resolved and os.path.exists(resolved):
        logger.debug(f"Found {resolved}")
        return True

    return False


def detect_board() -> str:
    """Classify the host as raspberrypi, tegra or unknown."""
    logger.debug("Determining board type...")

    if command_exists(JETSON_RELEASE):
        logger.debug(f"Found {JETSON_RELEASE}")
        return TEGRA

    if command_exists(NV_TEGRA_RELEASE):
        logger.debug(f"Found {NV_TEGRA_RELEASE}")
        return TEGRA

    model_file = f'{SYS_BASE}/firmware/devicetree/base/model'
    if os.path.exists(model_file):
        logger.debug(f"Found {model_file}")
        try:
            # devicetree strings are NUL terminated
            with open(model_file, 'r', errors='replace') as f:
                model = f.read().rstrip('\x00').strip()
        except OSError as e:
            logger.debug(f"Could not read {model_file}: {e}")
        else:
            if 'Raspberry Pi' in model:
                logger.debug(f"Found Raspberry Pi in model: {model}")
                return RASPBERRY_PI
            logger.debug(f"Did not find Raspberry Pi in model: {model}")

    logger.debug("Failed to determine board type")
    return UNKNOWN
