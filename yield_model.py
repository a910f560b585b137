"""
Rule-based crop yield estimator
Multiplies a per-crop baseline by one factor per input dimension
"""

import math
from dataclasses import dataclass, field, replace
from decimal import Decimal, ROUND_HALF_UP
from types import MappingProxyType
from typing import Mapping, Optional


# Baseline yields (tons/ha)
BASELINE_YIELDS = MappingProxyType({
    'Wheat': 3.0,
    'Rice': 4.0,
    'Maize': 5.0,
    'Soybean': 2.2,
    'Cotton': 1.5,
})
DEFAULT_BASELINE = 2.5

RAINFALL_IDEAL = 200.0
TEMP_IDEAL = 25.0
TEMP_DEADBAND = 3.0
FERT_CAP = 200.0
WEATHER_RAIN_CAP = 200.0
MIN_YIELD = 0.1


@dataclass(frozen=True)
class WeatherObservation:
    temp: Optional[float] = None
    humidity: Optional[float] = None
    rain: Optional[float] = None


@dataclass(frozen=True)
class PredictionInput:
    crop: str
    rainfall: float
    temp: float
    soil: float
    fert: float
    weather: Optional[WeatherObservation] = field(default=None)

    def with_value(self, dimension, value):
        """Copy of this input with a single numeric field replaced."""
        return replace(self, **{dimension: value})


def _number(value, default):
    # Blank, non-numeric, non-finite and zero values all fall back to the default
    try:
        value = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(value):
        return default
    return value or default


def build_input(crop=None, rainfall=None, temp=None, soil=None, fert=None, weather=None):
    """
    Apply caller-side defaults to raw form values.
    The core itself never defaults numeric fields; this is for the request layer.
    """
    return PredictionInput(
        crop=crop or 'Wheat',
        rainfall=_number(rainfall, 0.0),
        temp=_number(temp, 25.0),
        soil=_number(soil, 50.0),
        fert=_number(fert, 100.0),
        weather=weather,
    )


# ---------------- Baseline Table ----------------
def lookup(crop, baselines: Mapping[str, float] = BASELINE_YIELDS) -> float:
    return baselines.get(crop, DEFAULT_BASELINE)


# ---------------- Factor Calculators ----------------
def rainfall_factor(rainfall: float) -> float:
    # Not clamped here; only the composed result is floored
    return 1 - abs(rainfall - RAINFALL_IDEAL) / max(RAINFALL_IDEAL, 1) * 0.5


def temperature_factor(temp: float) -> float:
    return 1 - max(0, abs(temp - TEMP_IDEAL) - TEMP_DEADBAND) / 40


def soil_factor(soil: float) -> float:
    """Rescale a 0-100 soil score to a 0.5-1.3 multiplier."""
    return 0.5 + (soil / 100) * 0.8


def fertilizer_factor(fert: float) -> float:
    """Diminishing returns: nothing above FERT_CAP counts."""
    return 1 + min(FERT_CAP, fert) / 300


def rain_adjustment(weather: Optional[WeatherObservation]) -> float:
    if weather is None or weather.rain is None:
        return 1.0
    return 1 + min(WEATHER_RAIN_CAP, weather.rain) / 500


# ---------------- Yield Composer ----------------
def round_half_up(value: float, places: int = 2) -> float:
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def compose(baseline, rainfall_f, temp_f, soil_f, fert_f, rain_adj) -> float:
    predicted = baseline * rainfall_f * temp_f * soil_f * fert_f * rain_adj
    return round_half_up(max(MIN_YIELD, predicted))


def factors(data: PredictionInput) -> dict:
    """Every multiplicative term for an input, keyed by name."""
    return {
        'rainfall': rainfall_factor(data.rainfall),
        'temp': temperature_factor(data.temp),
        'soil': soil_factor(data.soil),
        'fert': fertilizer_factor(data.fert),
        'rain_adj': rain_adjustment(data.weather),
    }


def predict(data: PredictionInput, baselines: Mapping[str, float] = BASELINE_YIELDS) -> float:
    terms = factors(data)
    return compose(
        lookup(data.crop, baselines),
        terms['rainfall'],
        terms['temp'],
        terms['soil'],
        terms['fert'],
        terms['rain_adj'],
    )
