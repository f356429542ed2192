import os

import pytest

# Must be set before config is imported
os.environ['LOG_DESTINATION'] = 'stdout'
os.environ['TEMPERATURE_EXPORTER_CONFIG'] = '/nonexistent/temperature-exporter/config.json'


@pytest.fixture
def sys_tree(tmp_path):
    """A fake sysfs root with a thermal class directory."""
    (tmp_path / 'class' / 'thermal').mkdir(parents=True)
    return tmp_path


@pytest.fixture
def make_zone(sys_tree):
    def _make(name, zone_type=None, temp=None):
        zone = sys_tree / 'class' / 'thermal' / name
        zone.mkdir()
        if zone_type is not None:
            (zone / 'type').write_text(zone_type)
        if temp is not None:
            (zone / 'temp').write_text(temp)
        return zone
    return _make
