"""Temperature unit conversion for display."""

from weatherlookup.models.common import TemperatureUnit

UNIT_SYMBOLS = {
    TemperatureUnit.CELSIUS: "°C",
    TemperatureUnit.FAHRENHEIT: "°F",
}


def to_display(celsius: float, unit: TemperatureUnit) -> tuple[float, str]:
    """Convert a Celsius value for display. Returns (value, symbol)."""
    if unit == TemperatureUnit.FAHRENHEIT:
        return celsius * 9 / 5 + 32, UNIT_SYMBOLS[unit]
    return celsius, UNIT_SYMBOLS[TemperatureUnit.CELSIUS]
