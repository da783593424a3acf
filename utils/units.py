from __future__ import annotations

from constants import UNITS


def to_fahrenheit(celsius: float) -> float:
    return celsius * 9.0 / 5.0 + 32.0


def to_celsius(fahrenheit: float) -> float:
    return (fahrenheit - 32.0) * 5.0 / 9.0


def convert_temperature(value_c, unit: str):
    """
    Convert a Celsius value (scalar or pandas Series) into the display unit.
    Stored temperatures stay in Celsius; this runs only when drawing.
    """
    if unit not in UNITS:
        raise ValueError(f"Unsupported temperature unit: {unit!r}")
    if unit == "F":
        return to_fahrenheit(value_c)
    return value_c


def unit_label(unit: str) -> str:
    if unit not in UNITS:
        raise ValueError(f"Unsupported temperature unit: {unit!r}")
    return f"°{unit}"
