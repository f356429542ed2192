"""Reading type shared by the sensor collectors."""

from typing import NamedTuple


class Temperature(NamedTuple):
    """One sensor reading in degrees Celsius."""

    device: str
    temp: float
