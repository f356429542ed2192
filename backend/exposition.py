"""Prometheus text exposition for temperature readings."""

import re

_INVALID_NAME_CHARS = re.compile(r'[^a-zA-Z0-9_:]')


def metric_name(device: str) -> str:
    """Build ``<device>_temperature`` with characters a metric name allows."""
    name = device.lower().replace(' ', '_').replace('-', '_')
    name = _INVALID_NAME_CHARS.sub('_', name)
    if name[:1].isdigit():
        name = '_' + name
    return f'{name}_temperature'


def escape_label(value: str) -> str:
    return value.replace('\\', '\\\\').replace('"', '\\"').replace('\n', '\\n')


def render_temperature(device: str, temp: float) -> str:
    return f'{metric_name(device)}{{device="{escape_label(device)}"}} {temp:f}\n'


def render_version(version: str, build_time: str) -> str:
    return f'version{{app="{escape_label(version)}",build_time="{escape_label(build_time)}"}} 1\n'


def render(temperatures, version: str, build_time: str) -> str:
    """Render readings followed by the version line."""
    lines = [render_temperature(t.device, t.temp) for t in temperatures]
    lines.append(render_version(version, build_time))
    return ''.join(lines)
