import subprocess

import pytest

from collectors import commands
from collectors.commands import (
    TemperatureNotFound,
    collect_command_temperatures,
    extract_temperature,
)
from collectors.readings import Temperature

VCGENCMD = {
    'thermal_type': 'GPU',
    'command': 'vcgencmd',
    'args': ['measure_temp'],
    'regex': r"temp=([0-9.]+)'C",
}


@pytest.fixture
def installed(monkeypatch):
    monkeypatch.setattr(commands, 'command_exists', lambda path: True)


def fake_run(stdout='', returncode=0, exc=None):
    calls = []

    def _run(args, **kwargs):
        calls.append((args, kwargs))
        if exc is not None:
            raise exc
        if kwargs.get('check') and returncode != 0:
            raise subprocess.CalledProcessError(returncode, args, stdout, '')
        return subprocess.CompletedProcess(args, returncode, stdout, '')

    _run.calls = calls
    return _run


def test_extract_temperature():
    assert extract_temperature("temp=48.3'C\n", VCGENCMD['regex']) == 48.3


def test_extract_temperature_without_match():
    with pytest.raises(TemperatureNotFound, match='Temperature not found'):
        extract_temperature('error', VCGENCMD['regex'])


def test_extract_temperature_needs_capture_group():
    with pytest.raises(TemperatureNotFound):
        extract_temperature("temp=48.3'C", r"temp=[0-9.]+")


def test_reads_vcgencmd(installed, monkeypatch):
    run = fake_run("temp=51.0'C\n")
    monkeypatch.setattr(subprocess, 'run', run)

    temps = collect_command_temperatures([VCGENCMD], timeout=3)

    assert temps == [Temperature('gpu', 51.0)]
    args, kwargs = run.calls[0]
    assert args == ['vcgencmd', 'measure_temp']
    assert kwargs['timeout'] == 3


def test_missing_command_is_skipped(monkeypatch):
    monkeypatch.setattr(commands, 'command_exists', lambda path: False)
    run = fake_run("temp=51.0'C")
    monkeypatch.setattr(subprocess, 'run', run)

    assert collect_command_temperatures([VCGENCMD]) == []
    assert run.calls == []


@pytest.mark.parametrize('run', [
    fake_run('VCHI initialization failed', returncode=255),
    fake_run('VCHI initialization failed'),
    fake_run(exc=subprocess.TimeoutExpired('vcgencmd', 5)),
    fake_run(exc=PermissionError('denied')),
])
def test_failures_report_zero(installed, monkeypatch, caplog, run):
    monkeypatch.setattr(subprocess, 'run', run)

    temps = collect_command_temperatures([VCGENCMD])

    assert temps == [Temperature('gpu', 0.0)]
    assert 'vcgencmd' in caplog.text


def test_bad_regex_reports_zero(installed, monkeypatch):
    monkeypatch.setattr(subprocess, 'run', fake_run('temp=1'))
    broken = dict(VCGENCMD, regex='temp=([0-9')

    assert collect_command_temperatures([broken]) == [Temperature('gpu', 0.0)]


def test_defaults_come_from_config(installed, monkeypatch):
    from config import Config

    monkeypatch.setattr(Config, 'CUSTOM_COMMANDS', [dict(VCGENCMD, thermal_type='soc')])
    monkeypatch.setattr(Config, 'COMMAND_TIMEOUT', 9)
    run = fake_run("temp=40.5'C")
    monkeypatch.setattr(subprocess, 'run', run)

    assert collect_command_temperatures() == [Temperature('soc', 40.5)]
    assert run.calls[0][1]['timeout'] == 9
