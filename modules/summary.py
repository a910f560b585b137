"""
Offline heuristic summary for a yield estimate.
Rules are checked in table order; each category contributes at most one
sentence and only the first MAX_SENTENCES sentences are kept.
"""

from collections import namedtuple

MAX_SENTENCES = 3

Rule = namedtuple('Rule', ['category', 'predicate', 'message'])


def _humidity(data):
    if data.weather is None:
        return None
    return data.weather.humidity


def _has_humidity(data):
    return _humidity(data) is not None


RULES = (
    # Rainfall
    Rule('rainfall', lambda d: d.rainfall < 50,
         "Low rainfall may reduce yield potential."),
    Rule('rainfall', lambda d: d.rainfall > 350,
         "Excessive rainfall could cause waterlogging issues."),
    Rule('rainfall', lambda d: True,
         "Rainfall levels look suitable for crop growth."),

    # Temperature
    Rule('temp', lambda d: d.temp > 35,
         "High temperature could stress the crop and lower yield."),
    Rule('temp', lambda d: d.temp < 10,
         "Low temperatures may slow crop development."),
    Rule('temp', lambda d: True,
         "Temperature falls within an optimal range."),

    # Soil
    Rule('soil', lambda d: d.soil < 40,
         "Soil quality is low — consider organic amendments or compost."),
    Rule('soil', lambda d: True,
         "Soil quality appears sufficient for good yield."),

    # Fertilizer (silent between 50 and 300)
    Rule('fert', lambda d: d.fert < 50,
         "Fertilizer usage seems low; balanced nutrients may improve yield."),
    Rule('fert', lambda d: d.fert > 300,
         "Fertilizer usage is high — check for diminishing returns or runoff."),

    # Humidity, only when an observation carries one
    Rule('humidity', lambda d: _has_humidity(d) and _humidity(d) < 30,
         "Low humidity may increase water loss through evapotranspiration."),
    Rule('humidity', lambda d: _has_humidity(d) and _humidity(d) > 85,
         "High humidity may encourage diseases — monitor crop health."),
)


def applicable_rules(data, rules=RULES):
    """First matching rule of every category, in table order, before the cap."""
    matched = []
    seen = set()
    for rule in rules:
        if rule.category in seen:
            continue
        if rule.predicate(data):
            matched.append(rule)
            seen.add(rule.category)
    return matched


def summarize(data, rules=RULES):
    parts = [rule.message for rule in applicable_rules(data, rules)]
    return " ".join(parts[:MAX_SENTENCES])
