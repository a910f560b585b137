"""
Turns weather observations fetched elsewhere into the optional
weather record the yield model consumes. No network access here.
"""

import math

from yield_model import WeatherObservation, round_half_up


def _float_or_none(value):
    if value is None or value == '':
        return None
    try:
        value = float(value)
    except (TypeError, ValueError):
        return None
    return value if math.isfinite(value) else None


def parse_observation(payload):
    """
    Normalize an OpenWeather current-weather document.
    Rain is the 1h total, else the 3h total, else absent.
    """
    if not payload or 'main' not in payload:
        return None
    main = payload['main']

    temp = _float_or_none(main.get('temp'))
    if temp is not None:
        temp = round_half_up(temp, 1)

    rain = None
    rain_block = payload.get('rain')
    if rain_block:
        rain = _float_or_none(rain_block.get('1h') or rain_block.get('3h'))

    return WeatherObservation(
        temp=temp,
        humidity=_float_or_none(main.get('humidity')),
        rain=rain,
    )


def observation_from_dict(data):
    """Build an observation from a flat {temp, humidity, rain} mapping."""
    if not data:
        return None
    return WeatherObservation(
        temp=_float_or_none(data.get('temp')),
        humidity=_float_or_none(data.get('humidity')),
        rain=_float_or_none(data.get('rain')),
    )
